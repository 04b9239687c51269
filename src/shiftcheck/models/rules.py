"""
Scheduling Rules
================
Tagged rule definitions consumed by the validator.

Employee rules and shift rules are configured by the caller; system rules
take no parameters and run on every validation.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .shift import ShiftKind


class EmployeeRuleKind(str, Enum):
    """Per-employee rule tags."""
    MAX_CONSECUTIVE_WORK_DAYS = "maxConsecutiveWorkDays"
    NO_24_HOUR_SHIFT = "no24HourShift"
    MIN_SHIFT_GAP = "minShiftGap"
    BALANCE_SHIFTS = "balanceShifts"

    @classmethod
    def parse(cls, tag: Any) -> Optional["EmployeeRuleKind"]:
        """Resolve a raw tag; unknown tags resolve to None."""
        return _parse_kind(cls, tag)


class ShiftRuleKind(str, Enum):
    """Per-shift-kind rule tags."""
    MIN_STAFF = "minStaff"

    @classmethod
    def parse(cls, tag: Any) -> Optional["ShiftRuleKind"]:
        return _parse_kind(cls, tag)


class SystemRuleKind(str, Enum):
    """Always-on rules, evaluated for every employee and date."""
    EMPLOYEE_AVAILABILITY = "employeeAvailability"
    DUPLICATE_ASSIGNMENT = "duplicateAssignment"


def _parse_kind(enum_cls, tag):
    if isinstance(tag, enum_cls):
        return tag
    try:
        return enum_cls(str(tag).strip())
    except ValueError:
        return None


def parse_rule_value(value: Any) -> Optional[int]:
    """
    Parse a numeric rule threshold.

    Accepts ints, integral floats and integer strings. Returns None for
    anything else (booleans, negatives, NaN, free text), which callers
    treat as "rule disabled".
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            return None
        parsed = int(value)
    else:
        text = str(value).strip()
        try:
            parsed = int(text)
        except ValueError:
            try:
                as_float = float(text)
            except ValueError:
                return None
            if math.isnan(as_float) or math.isinf(as_float) or not as_float.is_integer():
                return None
            parsed = int(as_float)
    if parsed < 0:
        return None
    return parsed


@dataclass
class EmployeeRule:
    """A constraint applied to one employee."""
    type: Union[EmployeeRuleKind, str]
    employee: str
    value: Any = None

    def __post_init__(self):
        self.type = EmployeeRuleKind.parse(self.type) or str(self.type)

    @property
    def kind(self) -> Optional[EmployeeRuleKind]:
        return self.type if isinstance(self.type, EmployeeRuleKind) else None

    @classmethod
    def from_dict(cls, d: dict) -> "EmployeeRule":
        return cls(type=d.get("type", ""), employee=str(d.get("employee", "")), value=d.get("value"))


@dataclass
class ShiftRule:
    """A constraint applied to every date for one shift kind."""
    type: Union[ShiftRuleKind, str]
    shift: Union[ShiftKind, str]
    value: Any = None

    def __post_init__(self):
        self.type = ShiftRuleKind.parse(self.type) or str(self.type)
        self.shift = ShiftKind.parse(self.shift) or str(self.shift)

    @property
    def kind(self) -> Optional[ShiftRuleKind]:
        return self.type if isinstance(self.type, ShiftRuleKind) else None

    @property
    def shift_kind(self) -> Optional[ShiftKind]:
        """The targeted kind, or None when the configured shift is not recognized."""
        return self.shift if isinstance(self.shift, ShiftKind) else None

    @classmethod
    def from_dict(cls, d: dict) -> "ShiftRule":
        return cls(type=d.get("type", ""), shift=d.get("shift", ""), value=d.get("value"))


@dataclass
class SchedulingConditions:
    """Configured employee and shift rules. System rules are implicit."""
    employee_rules: List[EmployeeRule] = field(default_factory=list)
    shift_rules: List[ShiftRule] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Serialize to the camelCase payload shape."""
        return {
            "employeeRules": [
                {"type": str(getattr(r.type, "value", r.type)), "employee": r.employee, "value": r.value}
                for r in self.employee_rules
            ],
            "shiftRules": [
                {
                    "type": str(getattr(r.type, "value", r.type)),
                    "shift": str(getattr(r.shift, "value", r.shift)),
                    "value": r.value,
                }
                for r in self.shift_rules
            ],
        }

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> "SchedulingConditions":
        """Create from a payload with employeeRules/shiftRules (or snake_case) lists."""
        d = d or {}
        employee_rules = d.get("employeeRules", d.get("employee_rules")) or []
        shift_rules = d.get("shiftRules", d.get("shift_rules")) or []
        return cls(
            employee_rules=[
                r if isinstance(r, EmployeeRule) else EmployeeRule.from_dict(r)
                for r in employee_rules
            ],
            shift_rules=[
                r if isinstance(r, ShiftRule) else ShiftRule.from_dict(r)
                for r in shift_rules
            ],
        )
