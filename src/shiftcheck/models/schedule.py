"""Schedule snapshot and assignment models."""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from .shift import ShiftKind

# date string (YYYY-MM-DD) -> assignments on that date
ScheduleData = Mapping[str, Sequence["ShiftAssignment"]]
HolidayCalendar = Mapping[str, bool]
EmployeeAvailability = Mapping[str, Mapping[str, bool]]


@dataclass(frozen=True)
class ShiftAssignment:
    """One employee working one shift kind on the date it is filed under."""
    employee: str
    shift: ShiftKind

    def __post_init__(self):
        if not isinstance(self.shift, ShiftKind):
            object.__setattr__(self, "shift", ShiftKind.from_string(self.shift))

    @property
    def is_work(self) -> bool:
        return self.shift.is_work

    def to_dict(self) -> dict:
        return {"employee": self.employee, "shift": self.shift.value}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ShiftAssignment":
        return cls(employee=str(d.get("employee", "")), shift=d.get("shift", ShiftKind.OFF))


def normalize_schedule(raw: Optional[Mapping[str, Iterable[Any]]]) -> Dict[str, List[ShiftAssignment]]:
    """
    Build a schedule snapshot from raw payloads.

    Entries may already be ShiftAssignment objects or {"employee", "shift"}
    mappings. The input is never modified; a new dict is returned.
    """
    if not raw:
        return {}
    snapshot: Dict[str, List[ShiftAssignment]] = {}
    for date_str, entries in raw.items():
        snapshot[str(date_str)] = [
            e if isinstance(e, ShiftAssignment) else ShiftAssignment.from_dict(e)
            for e in (entries or [])
        ]
    return snapshot


def schedule_employees(schedule: ScheduleData) -> List[str]:
    """Every employee appearing anywhere in the schedule, sorted."""
    return sorted({a.employee for entries in schedule.values() for a in entries if a.employee})


def schedule_to_dataframe(schedule: ScheduleData) -> pd.DataFrame:
    """Flatten a schedule into a (date, employee, shift) DataFrame."""
    rows = [
        {"date": date_str, "employee": a.employee, "shift": a.shift.value}
        for date_str in sorted(schedule)
        for a in schedule[date_str]
    ]
    if not rows:
        return pd.DataFrame(columns=["date", "employee", "shift"])
    return pd.DataFrame(rows)
