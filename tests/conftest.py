"""
Pytest configuration for the today-date project.

Puts the src/ layout on sys.path so `today_date` imports without an
install, and provides shared clock fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from today_date.clock import FixedClock  # noqa: E402


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(date(2024, 3, 9))
