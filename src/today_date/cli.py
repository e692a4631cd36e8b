"""Command-line entry point for the date printer."""

from __future__ import annotations

import sys
from typing import List

from today_date.clock import ClockError
from today_date.printer import DatePrinter


def main(argv: List[str] | None = None) -> None:
    # No flags are parsed; argv is accepted only so callers can pass one.
    try:
        DatePrinter().print_today()
    except ClockError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
