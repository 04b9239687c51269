"""Shared, read-only evaluation context for one validation run."""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence

from shiftcheck.models.config import EngineConfig
from shiftcheck.models.schedule import EmployeeAvailability, HolidayCalendar, ScheduleData, ShiftAssignment
from shiftcheck.models.shift import ShiftKind
from shiftcheck.utils.dates import format_date, is_holiday, month_dates

from .reporting import ReportingSink


@dataclass(frozen=True)
class ValidationContext:
    """Schedule snapshot plus everything a rule handler needs to evaluate it."""
    schedule: ScheduleData
    year: int
    month: int  # 1-based
    sink: ReportingSink
    shift_labels: Mapping[ShiftKind, str] = field(default_factory=dict)
    holidays: Optional[HolidayCalendar] = None
    availability: Optional[EmployeeAvailability] = None
    config: EngineConfig = field(default_factory=EngineConfig)

    def month_dates(self) -> List[date]:
        return month_dates(self.year, self.month)

    def in_month(self, d: date) -> bool:
        return d.year == self.year and d.month == self.month

    def is_holiday(self, d: date) -> bool:
        return is_holiday(format_date(d), self.holidays)

    def assignments_on(self, d: date) -> Sequence[ShiftAssignment]:
        return self.schedule.get(format_date(d)) or []

    def employee_shifts_on(self, employee: str, d: date) -> List[ShiftKind]:
        """Every shift kind the employee is filed under on a date, in order."""
        return [a.shift for a in self.assignments_on(d) if a.employee == employee]

    def works_on(self, employee: str, d: date) -> bool:
        return any(s.is_work for s in self.employee_shifts_on(employee, d))

    def first_work_shift(self, employee: str, d: date) -> Optional[ShiftKind]:
        for shift in self.employee_shifts_on(employee, d):
            if shift.is_work:
                return shift
        return None

    def label_for(self, kind: ShiftKind) -> str:
        if kind in self.shift_labels:
            return self.shift_labels[kind]
        return self.config.label_for(kind)

    def report(self, d: date, reason: str):
        self.sink.report(format_date(d), reason)


def build_context(
    schedule: ScheduleData,
    year: int,
    month: int,
    sink: ReportingSink,
    shift_labels: Optional[Mapping] = None,
    holidays: Optional[HolidayCalendar] = None,
    availability: Optional[EmployeeAvailability] = None,
    config: Optional[EngineConfig] = None,
) -> ValidationContext:
    """Build the single context shared by every rule handler of a run."""
    labels: Dict[ShiftKind, str] = {}
    for key, label in (shift_labels or {}).items():
        labels[ShiftKind.from_string(key)] = str(label)
    return ValidationContext(
        schedule=schedule,
        year=int(year),
        month=int(month),
        sink=sink,
        shift_labels=labels,
        holidays=holidays,
        availability=availability,
        config=config or EngineConfig(),
    )
