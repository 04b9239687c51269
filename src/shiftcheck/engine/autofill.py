"""
Greedy Month Auto-Fill
======================
Fills every required slot of a month one day at a time, asking the fairness
selector for each slot. Employees are excluded from a slot when they are
marked unavailable, already work that day, or would break the rest rules
against their previous-day shift.

The result is a new schedule; no input mapping is modified.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from shiftcheck.models.config import EngineConfig, SelectionStrategy, StaffingRequirements
from shiftcheck.models.schedule import (
    EmployeeAvailability,
    HolidayCalendar,
    ScheduleData,
    ShiftAssignment,
    normalize_schedule,
)
from shiftcheck.models.shift import ShiftKind, day_class_kind, night_class_kind
from shiftcheck.utils.dates import format_date, is_holiday, month_dates, shift_date
from shiftcheck.utils.logging_setup import RunLogger, get_logger

from .adjacency import gap_is_sufficient
from .selection import select_with_fairness
from .stats import compute_employee_stats

logger = get_logger("shiftcheck.engine.autofill")


@dataclass
class AutoFillResult:
    """Schedule produced by auto-fill plus the slots it could not fill."""
    schedule: Dict[str, List[ShiftAssignment]] = field(default_factory=dict)
    unfilled: List[Tuple[str, ShiftKind, int]] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.unfilled

    @property
    def missing_slots(self) -> int:
        return sum(n for _, _, n in self.unfilled)


def _work_shift(schedule: ScheduleData, employee: str, d: date) -> Optional[ShiftKind]:
    for a in schedule.get(format_date(d), []):
        if a.employee == employee and a.is_work:
            return a.shift
    return None


def _rest_ok(
    schedule: ScheduleData,
    employee: str,
    d: date,
    kind: ShiftKind,
    holidays: Optional[HolidayCalendar],
) -> bool:
    """Whether working `kind` on `d` respects the gap and 24-hour rules."""
    prev = shift_date(d, -1)
    prev_shift = _work_shift(schedule, employee, prev)
    if prev_shift is None:
        return True
    prev_holiday = is_holiday(format_date(prev), holidays)
    today_holiday = is_holiday(format_date(d), holidays)
    if prev_shift is night_class_kind(prev_holiday) and kind is day_class_kind(today_holiday):
        return False
    return gap_is_sufficient(prev_shift, kind, prev_holiday, today_holiday)


def auto_fill_month(
    employees: Sequence[str],
    year: int,
    month: int,
    requirements: Optional[StaffingRequirements] = None,
    availability: Optional[EmployeeAvailability] = None,
    holidays: Optional[HolidayCalendar] = None,
    strategy: Union[SelectionStrategy, str, None] = None,
    seed_schedule: Optional[Mapping] = None,
    config: Optional[EngineConfig] = None,
) -> AutoFillResult:
    """
    Build a month of assignments with the fairness selector.

    Args:
        employees: Full roster
        year: Target year
        month: Target month (1-based)
        requirements: Headcount per kind for weekdays and holidays
        availability: Employee -> date string -> False when unavailable
        holidays: Date string -> True on holidays
        strategy: Selection strategy; defaults to config.default_strategy
        seed_schedule: Existing assignments to keep (copied, not modified)
        config: Engine configuration (defaults to EngineConfig())

    Returns:
        AutoFillResult with the filled schedule and any shortfalls
    """
    requirements = requirements or StaffingRequirements()
    config = config or EngineConfig()
    if strategy is None:
        strategy = config.default_strategy
    roster = list(dict.fromkeys(employees))
    schedule = normalize_schedule(seed_schedule)
    run = RunLogger("shiftcheck.engine.autofill")
    run.phase(f"AUTO-FILL {year:04d}-{int(month):02d}")
    run.detail("employees", len(roster))
    run.detail("strategy", getattr(strategy, "value", strategy))

    stats = compute_employee_stats(schedule, roster)
    result = AutoFillResult(schedule=schedule)

    for d in month_dates(year, month):
        date_str = format_date(d)
        holiday = is_holiday(date_str, holidays)
        day_entries = schedule.setdefault(date_str, [])

        for kind, required in requirements.for_day(holiday).items():
            already = sum(1 for a in day_entries if a.shift is kind)
            needed = required - already
            if needed <= 0:
                continue

            working_today = {a.employee for a in day_entries if a.is_work}
            pool = [
                emp for emp in roster
                if emp not in working_today
                and ((availability or {}).get(emp) or {}).get(date_str) is not False
                and _rest_ok(schedule, emp, d, kind, holidays)
            ]

            chosen = select_with_fairness(pool, kind, needed, stats, roster, strategy, d)
            for emp in chosen:
                day_entries.append(ShiftAssignment(employee=emp, shift=kind))
                stats[emp].record(kind.is_day_class, kind.is_night_class)

            if len(chosen) < needed:
                missing = needed - len(chosen)
                result.unfilled.append((date_str, kind, missing))
                logger.warning(f"{date_str}: {missing} {kind.value} slot(s) left unfilled")

    run.step(f"Filled month with {result.missing_slots} missing slots")
    return result
