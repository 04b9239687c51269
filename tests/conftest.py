"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shiftcheck.engine.reporting import FindingCollector
from shiftcheck.models.shift import ShiftKind
from shiftcheck.models.schedule import ShiftAssignment


def build_schedule(*entries):
    """Build a schedule from (date, employee, shift) triples."""
    schedule = {}
    for date_str, employee, shift in entries:
        schedule.setdefault(date_str, []).append(ShiftAssignment(employee, ShiftKind.from_string(shift)))
    return schedule


@pytest.fixture
def make_schedule():
    """Factory fixture: make_schedule(("2024-03-01", "Alice", "day"), ...)."""
    return build_schedule


@pytest.fixture
def collector():
    """Fresh in-memory reporting sink."""
    return FindingCollector()


@pytest.fixture
def roster():
    return ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank"]


@pytest.fixture
def weekend_holidays_feb_2024():
    """Saturdays and Sundays of February 2024 marked as holidays."""
    return {
        f"2024-02-{day:02d}": True
        for day in (3, 4, 10, 11, 17, 18, 24, 25)
    }
