"""Entry point for the café till."""

from __future__ import annotations

import argparse
import logging
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from cafe.config import CAFE_NAME
from cafe.data import build_catalog
from cafe.models import DaySummary
from cafe.prompts import Prompter
from cafe.session import DaySession

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cafe-order",
        description=f"{CAFE_NAME} point-of-sale: take orders, print receipts, summarize the day.",
    )
    parser.add_argument("--no-color", action="store_true", help="print plain text without colors")
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="diagnostic log level (logs go to stderr)",
    )
    parser.add_argument(
        "--opening-stock",
        type=int,
        default=None,
        metavar="N",
        help="start every item with N units instead of the menu default",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr so stdout carries only the till transcript."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def run_day(console: Console, stream: TextIO | None = None, opening_stock: int | None = None) -> DaySummary:
    """Run one full trading day against a fresh catalog."""
    session = DaySession(build_catalog(opening_stock), Prompter(console, stream), console)
    return session.run()


def main(argv: list[str] | None = None) -> None:
    """Run the till until the operator closes the day."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.opening_stock is not None and args.opening_stock < 0:
        parser.error("--opening-stock must be zero or more")

    configure_logging(args.log_level)
    console = Console(color_system=None if args.no_color else "auto", highlight=False)
    try:
        run_day(console, opening_stock=args.opening_stock)
    except KeyboardInterrupt:
        console.print("\nInterrupted by user. Exiting.")


if __name__ == "__main__":
    main()
