"""Date printer: reads the clock and writes one line to stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from today_date.clock import Clock, LocalClock
from today_date.config import Settings
from today_date.formatter import render_message

logger = logging.getLogger(__name__)


class DatePrinter:
    """Writes ``Today's date: YYYY-MM-DD`` for the clock's current date."""

    def __init__(
        self,
        clock: Clock | None = None,
        stream: TextIO | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.clock = clock or LocalClock()
        self.stream = stream or sys.stdout
        self.settings = settings or Settings()

    def message(self) -> str:
        return render_message(
            self.clock.today(),
            prefix=self.settings.prefix,
            fmt=self.settings.date_format,
        )

    def print_today(self) -> None:
        line = self.message()
        logger.debug("Printing %r", line)
        print(line, file=self.stream)


def print_today() -> None:
    """Print today's local date to stdout."""
    DatePrinter().print_today()
