"""Utilities package for shiftcheck."""
from .dates import days_in_month, format_date, is_holiday, month_dates, parse_date, shift_date
from .logging_setup import (
    TRACE,
    RunLogger,
    get_logger,
    level_from_name,
    log_function_call,
    log_rule_result,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "level_from_name",
    "log_function_call",
    "log_rule_result",
    "RunLogger",
    "TRACE",
    "format_date",
    "parse_date",
    "is_holiday",
    "days_in_month",
    "month_dates",
    "shift_date",
]
