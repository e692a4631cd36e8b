"""Rendering of dates into the printed line."""

from __future__ import annotations

import re
from datetime import date

DATE_FORMAT = "%Y-%m-%d"
MESSAGE_PREFIX = "Today's date: "
MESSAGE_PATTERN = re.compile(r"^Today's date: \d{4}-\d{2}-\d{2}$")


def format_date(value: date, fmt: str = DATE_FORMAT) -> str:
    """Format a date, defaulting to ``YYYY-MM-DD``."""
    if fmt == DATE_FORMAT:
        # strftime does not pad years below 1000 on every platform
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    return value.strftime(fmt)


def render_message(value: date, prefix: str = MESSAGE_PREFIX, fmt: str = DATE_FORMAT) -> str:
    """Build the output line for the given date."""
    return f"{prefix}{format_date(value, fmt)}"


def is_valid_message(line: str) -> bool:
    return MESSAGE_PATTERN.fullmatch(line) is not None
