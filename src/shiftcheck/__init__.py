"""shiftcheck: shift schedule constraint validation and fairness-based selection.

Packages:
- models: shift kinds, rules, schedule snapshot, statistics, configuration
- engine: rule dispatch, constraint checks, selector, auto-fill
- utils: dates and logging
"""
from shiftcheck.engine import (
    FindingCollector,
    ValidationSummary,
    auto_fill_month,
    select,
    select_with_fairness,
    validate,
)
from shiftcheck.models import SchedulingConditions, ShiftAssignment, ShiftKind

__version__ = "0.1.0"

__all__ = [
    "validate",
    "ValidationSummary",
    "FindingCollector",
    "select",
    "select_with_fairness",
    "auto_fill_month",
    "SchedulingConditions",
    "ShiftAssignment",
    "ShiftKind",
]
