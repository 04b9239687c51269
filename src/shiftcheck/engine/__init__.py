# shiftcheck/engine - Constraint validation and fairness-based selection
from .adjacency import gap_is_sufficient
from .autofill import AutoFillResult, auto_fill_month
from .context import ValidationContext, build_context
from .reporting import ConflictFinding, FindingCollector, ReportingSink, summary_message
from .selection import rank_employees, select, select_with_fairness, under_scheduled
from .stats import compute_employee_stats, stats_to_dict_list
from .validator import (
    EMPLOYEE_RULE_HANDLERS,
    SHIFT_RULE_HANDLERS,
    SYSTEM_RULE_HANDLERS,
    ValidationSummary,
    validate,
)

__all__ = [
    "validate",
    "ValidationSummary",
    "EMPLOYEE_RULE_HANDLERS",
    "SHIFT_RULE_HANDLERS",
    "SYSTEM_RULE_HANDLERS",
    "ValidationContext",
    "build_context",
    "ReportingSink",
    "FindingCollector",
    "ConflictFinding",
    "summary_message",
    "gap_is_sufficient",
    "select",
    "select_with_fairness",
    "rank_employees",
    "under_scheduled",
    "compute_employee_stats",
    "stats_to_dict_list",
    "auto_fill_month",
    "AutoFillResult",
]
