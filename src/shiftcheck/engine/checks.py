"""
Constraint Checks
=================
One handler per rule kind. Every handler scans the target month of the
context, reports each finding through the context's sink, and returns the
number of conflicts it found.

Handlers never raise on malformed configuration: a rule whose threshold
cannot be parsed, or a staffing rule naming no working shift kind, is
disabled and contributes zero conflicts.
"""
from collections import OrderedDict
from datetime import date
from typing import Dict, List, Optional

from shiftcheck.models.rules import EmployeeRule, ShiftRule, parse_rule_value
from shiftcheck.models.shift import day_class_kind, night_class_kind
from shiftcheck.utils.dates import format_date, shift_date
from shiftcheck.utils.logging_setup import get_logger

from .adjacency import gap_is_sufficient
from .context import ValidationContext

logger = get_logger("shiftcheck.engine.checks")


def _threshold(rule, default: Optional[int] = None) -> Optional[int]:
    """Parse a rule's numeric value, logging when the rule is disabled."""
    raw = rule.value
    if default is not None and (raw is None or (isinstance(raw, str) and not raw.strip())):
        return default
    value = parse_rule_value(raw)
    if value is None:
        logger.warning(f"Rule {getattr(rule.type, 'value', rule.type)} has invalid value {raw!r}; rule disabled")
    return value


# --- Employee rules ---

def check_max_consecutive_work_days(ctx: ValidationContext, rule: EmployeeRule) -> int:
    """
    Flag every in-month day on which the employee's working streak exceeds N.

    The scan starts N days before the month so a streak that began in the
    previous month is caught on its first in-month day over the limit.
    """
    max_days = _threshold(rule)
    if max_days is None:
        return 0

    employee = rule.employee
    dates = ctx.month_dates()
    current = shift_date(dates[0], -max_days)
    end = dates[-1]

    streak = 0
    conflicts = 0
    while current <= end:
        if ctx.works_on(employee, current):
            streak += 1
            if streak > max_days and ctx.in_month(current):
                conflicts += 1
                ctx.report(current, f"{employee} working consecutive day {streak} (limit {max_days} days)")
        else:
            streak = 0
        current = shift_date(current, 1)

    logger.debug(f"maxConsecutiveWorkDays {employee}: {conflicts} conflicts")
    return conflicts


def check_no_24_hour_shift(ctx: ValidationContext, rule: EmployeeRule) -> int:
    """
    Flag a night-class shift followed by a day-class shift the next day.

    Night/day class labels are chosen from each day's own holiday flag, so a
    holiday night followed by a weekday day shift is still caught.
    """
    employee = rule.employee
    conflicts = 0

    for current in ctx.month_dates():
        prev = shift_date(current, -1)
        night_kind = night_class_kind(ctx.is_holiday(prev))
        day_kind = day_class_kind(ctx.is_holiday(current))

        worked_night = night_kind in ctx.employee_shifts_on(employee, prev)
        works_day = day_kind in ctx.employee_shifts_on(employee, current)
        if worked_night and works_day:
            conflicts += 1
            prev_str, current_str = format_date(prev), format_date(current)
            ctx.report(
                current,
                f"{employee} works 24 hours straight ({prev_str} {night_kind.value} → {current_str} {day_kind.value})",
            )
            ctx.report(prev, f"{employee} night shift followed by a day shift")

    logger.debug(f"no24HourShift {employee}: {conflicts} conflicts")
    return conflicts


def check_min_shift_gap(ctx: ValidationContext, rule: EmployeeRule) -> int:
    """
    Flag consecutive-day shifts that are too close in the shift cycle.

    Only the first working assignment of each day is compared; extra
    assignments on the same day are the duplicate rule's concern.
    """
    employee = rule.employee
    conflicts = 0

    for current in ctx.month_dates():
        nxt = shift_date(current, 1)
        shift_a = ctx.first_work_shift(employee, current)
        shift_b = ctx.first_work_shift(employee, nxt)
        if shift_a is None or shift_b is None:
            continue

        if not gap_is_sufficient(shift_a, shift_b, ctx.is_holiday(current), ctx.is_holiday(nxt)):
            conflicts += 1
            reason = (
                f"{employee} insufficient rest between shifts "
                f"({format_date(current)} {shift_a.value} → {format_date(nxt)} {shift_b.value})"
            )
            ctx.report(current, reason)
            ctx.report(nxt, reason)

    logger.debug(f"minShiftGap {employee}: {conflicts} conflicts")
    return conflicts


def _class_dates(ctx: ValidationContext, employee: str, day_class: bool) -> List[date]:
    matching = []
    for current in ctx.month_dates():
        for shift in ctx.employee_shifts_on(employee, current):
            if (shift.is_day_class if day_class else shift.is_night_class):
                matching.append(current)
                break
    return matching


def check_shift_balance(ctx: ValidationContext, rule: EmployeeRule) -> int:
    """Flag an employee whose month-wide day/night class counts drift too far apart."""
    max_difference = _threshold(rule, default=ctx.config.default_balance_difference)
    if max_difference is None:
        return 0

    employee = rule.employee
    day_count = 0
    night_count = 0
    for current in ctx.month_dates():
        for shift in ctx.employee_shifts_on(employee, current):
            if shift.is_day_class:
                day_count += 1
            elif shift.is_night_class:
                night_count += 1

    difference = abs(day_count - night_count)
    if difference <= max_difference or (day_count == 0 and night_count == 0):
        return 0

    dominant_is_day = day_count > night_count
    dates = _class_dates(ctx, employee, dominant_is_day)
    reason = (
        f"{employee} shift imbalance: {day_count} day shifts, {night_count} night shifts "
        f"(difference {difference}, limit {max_difference})"
    )
    if dates:
        ctx.report(dates[-1], reason)

    logger.debug(f"balanceShifts {employee}: day={day_count} night={night_count}")
    return 1


# --- Shift rules ---

def check_min_staff(ctx: ValidationContext, rule: ShiftRule) -> int:
    """Flag every day on which fewer than N employees work the configured kind."""
    kind = rule.shift_kind
    if kind is None or not kind.is_work:
        shift = getattr(rule.shift, "value", rule.shift)
        logger.warning(f"Rule minStaff targets unknown or rest shift {shift!r}; rule disabled")
        return 0

    required = _threshold(rule)
    if required is None:
        return 0

    label = ctx.label_for(kind)
    conflicts = 0
    for current in ctx.month_dates():
        count = sum(1 for a in ctx.assignments_on(current) if a.shift is kind)
        if count < required:
            conflicts += 1
            ctx.report(current, f"{label} understaffed (current {count}, required {required})")

    logger.debug(f"minStaff {kind.value}: {conflicts} conflicts")
    return conflicts


# --- System rules ---

def check_employee_availability(ctx: ValidationContext) -> int:
    """Flag working assignments on dates the employee marked unavailable."""
    if not ctx.availability:
        return 0

    conflicts = 0
    for current in ctx.month_dates():
        date_str = format_date(current)
        for a in ctx.assignments_on(current):
            if not a.is_work:
                continue
            employee_avail = ctx.availability.get(a.employee)
            if employee_avail and employee_avail.get(date_str) is False:
                conflicts += 1
                ctx.report(current, f"{a.employee} is marked unavailable on this date")
    return conflicts


def check_duplicate_assignment(ctx: ValidationContext) -> int:
    """Flag employees holding more than one working shift on the same day."""
    conflicts = 0
    for current in ctx.month_dates():
        by_employee: Dict[str, List[str]] = OrderedDict()
        for a in ctx.assignments_on(current):
            if a.is_work:
                by_employee.setdefault(a.employee, []).append(a.shift.value)

        for employee, kinds in by_employee.items():
            if len(kinds) > 1:
                conflicts += 1
                ctx.report(current, f"{employee} has multiple shifts on the same day: {', '.join(kinds)}")
    return conflicts
