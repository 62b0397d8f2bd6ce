"""Validated line-oriented prompts.

Every prompt re-asks until it gets acceptable input; bad input is
reported with a specific message and never escapes as an exception.
The only exception a prompt raises is ``InputClosed`` once the input
stream is exhausted.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TextIO

from rich.console import Console
from rich.text import Text

from cafe.rendering import style_for

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_YES = {"y", "yes"}
_NO = {"n", "no"}


class InputClosed(EOFError):
    """The input stream reached end-of-file while a prompt was waiting."""


class Prompter:
    """Reads answers from ``stream`` and writes prompts to ``console``."""

    def __init__(self, console: Console, stream: TextIO | None = None) -> None:
        self.console = console
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self, prompt: str) -> str:
        """Read one line with surrounding whitespace (including stray CRs) removed."""
        try:
            raw = self.console.input(prompt, markup=False, stream=self.stream)
        except EOFError as exc:
            raise InputClosed(prompt) from exc
        if raw == "":
            # readline() returns "" only at end of stream; a blank line is "\n".
            self.console.print()
            raise InputClosed(prompt)
        return raw.strip()

    def ask_int(self, prompt: str, low: int, high: int) -> int:
        """Ask until an integer in the closed range ``[low, high]`` is entered."""
        while True:
            answer = self.read_line(prompt)
            if not _INTEGER_RE.fullmatch(answer):
                logger.debug("input_rejected reason=not_a_number value=%r", answer)
                self._error("Invalid number. Try again.")
                continue
            digits = answer.lstrip("+-").lstrip("0") or "0"
            if len(digits) > len(str(max(abs(low), abs(high)))):
                logger.debug("input_rejected reason=out_of_range digits=%d low=%d high=%d", len(digits), low, high)
                self._error(f"Please enter a number between {low} and {high}.")
                continue
            value = int(answer)
            if not (low <= value <= high):
                logger.debug("input_rejected reason=out_of_range value=%d low=%d high=%d", value, low, high)
                self._error(f"Please enter a number between {low} and {high}.")
                continue
            return value

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            answer = self.read_line(prompt).lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            logger.debug("input_rejected reason=not_yes_no value=%r", answer)
            self._error("Please answer Y or N.")

    def ask_name(self, prompt: str = "Enter customer name: ") -> str:
        while True:
            name = self.read_line(prompt)
            if name:
                return name
            logger.debug("input_rejected reason=empty_name")
            self._error("Name cannot be empty.")

    def _error(self, message: str) -> None:
        self.console.print(Text(message, style=style_for("error")))
