"""Shared fixtures for till tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from cafe.data import build_catalog
from cafe.prompts import Prompter


def script(*lines: str) -> io.StringIO:
    """Build an input stream that answers prompts with ``lines`` in order."""
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), color_system=None, width=100, highlight=False)


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def make_prompter(console):
    def _make(*lines: str) -> Prompter:
        return Prompter(console, script(*lines))

    return _make


def output_of(console: Console) -> str:
    return console.file.getvalue()
