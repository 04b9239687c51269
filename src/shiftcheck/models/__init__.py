# shiftcheck/models - Data models for schedule validation and selection
from .config import EngineConfig, SelectionStrategy, StaffingRequirements
from .rules import (
    EmployeeRule,
    EmployeeRuleKind,
    SchedulingConditions,
    ShiftRule,
    ShiftRuleKind,
    SystemRuleKind,
    parse_rule_value,
)
from .schedule import ScheduleData, ShiftAssignment, normalize_schedule, schedule_to_dataframe
from .shift import HOLIDAY_ORDER, WEEKDAY_ORDER, ShiftKind
from .stats import EmployeeStats

__all__ = [
    "ShiftKind", "WEEKDAY_ORDER", "HOLIDAY_ORDER",
    "ShiftAssignment", "ScheduleData", "normalize_schedule", "schedule_to_dataframe",
    "EmployeeRule", "ShiftRule", "SchedulingConditions",
    "EmployeeRuleKind", "ShiftRuleKind", "SystemRuleKind", "parse_rule_value",
    "EmployeeStats",
    "EngineConfig", "SelectionStrategy", "StaffingRequirements",
]
