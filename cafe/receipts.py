"""Receipt number generation."""

from __future__ import annotations

import time
from typing import Callable

from cafe.config import RECEIPT_NUMBER_MODULUS


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class ReceiptNumberGenerator:
    """Issue receipt numbers that are unique for the lifetime of the generator.

    Each number is derived from the millisecond clock, but is always at
    least one greater than the previous number, so several receipts cut
    in the same millisecond (or after a clock step backwards) still
    differ.
    """

    def __init__(self, clock: Callable[[], int] = _epoch_millis) -> None:
        self._clock = clock
        self._last: int | None = None
        self.issued = 0

    def next(self) -> int:
        candidate = self._clock() % RECEIPT_NUMBER_MODULUS
        if self._last is not None and candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        self.issued += 1
        return candidate
