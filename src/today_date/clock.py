"""Clock sources for reading the current local date."""

from __future__ import annotations

import logging
from datetime import date
from typing import Protocol

logger = logging.getLogger(__name__)


class ClockError(RuntimeError):
    """Raised when the host clock cannot be read."""


class Clock(Protocol):
    """Clock interface."""

    def today(self) -> date: ...


class LocalClock:
    """Clock backed by the host's system time and local time zone."""

    def today(self) -> date:
        try:
            value = date.today()
        except (OSError, OverflowError) as exc:
            raise ClockError(f"Failed to read the system clock: {exc}") from exc
        logger.debug("Read local date %s", value.isoformat())
        return value


class FixedClock:
    """Clock that always reports the same date."""

    def __init__(self, value: date) -> None:
        self.value = value

    def today(self) -> date:
        return self.value
