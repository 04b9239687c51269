"""
Fairness-Based Employee Selection
=================================
Ranks the employees available for one shift slot and picks the requested
headcount.

Strategies:
    balanced        Fewest total shifts first, then whoever has worked less of
                    the slot's class (day/night), then alphabetical
    minimize_night  Fewest shifts of the slot's class, then fewest total
    rotate          Alphabetical, rotated one position per day of month
    (other)         Fewest total shifts

select_with_fairness() adds a first pass restricted to under-scheduled
employees (strictly below the roster mean of total shifts).
"""
from datetime import date
from typing import Any, List, Mapping, Optional, Sequence, Union

from shiftcheck.models.config import SelectionStrategy
from shiftcheck.models.shift import ShiftKind
from shiftcheck.models.stats import EmployeeStats
from shiftcheck.utils.dates import parse_date
from shiftcheck.utils.logging_setup import get_logger, log_function_call

logger = get_logger("shiftcheck.engine.selection")

StatsMap = Mapping[str, Union[EmployeeStats, Mapping[str, Any]]]
DateLike = Union[date, str, None]


def _stats_for(stats: Optional[StatsMap], employee: str) -> EmployeeStats:
    raw = (stats or {}).get(employee)
    if raw is None:
        return EmployeeStats()
    if isinstance(raw, EmployeeStats):
        return raw
    return EmployeeStats.from_dict(raw)


def _day_of_month(d: DateLike) -> Optional[int]:
    if d is None or d == "":
        return None
    if isinstance(d, date):
        return d.day
    try:
        return parse_date(str(d)).day
    except ValueError:
        logger.debug(f"Unparseable slot date {d!r}; not rotating")
        return None


def _inverse_balance(st: EmployeeStats, kind: ShiftKind) -> int:
    """How far the employee leans away from the slot's class (higher = preferred)."""
    if kind.is_day_class:
        return st.night_shifts - st.day_shifts
    if kind.is_night_class:
        return st.day_shifts - st.night_shifts
    return 0


def rank_employees(
    available: Sequence[str],
    shift_kind: Union[ShiftKind, str],
    stats: Optional[StatsMap],
    strategy: Union[SelectionStrategy, str, None] = SelectionStrategy.BALANCED,
    date: DateLike = None,
) -> List[str]:
    """Order the whole pool by the given strategy."""
    kind = ShiftKind.from_string(shift_kind)
    pool = list(available)
    resolved = SelectionStrategy.parse(strategy) if strategy is not None else SelectionStrategy.BALANCED

    if resolved is SelectionStrategy.BALANCED:
        def balanced_key(emp):
            st = _stats_for(stats, emp)
            return (st.total_shifts, -_inverse_balance(st, kind), emp)
        return sorted(pool, key=balanced_key)

    if resolved is SelectionStrategy.MINIMIZE_NIGHT:
        if kind.is_night_class:
            return sorted(pool, key=lambda e: (_stats_for(stats, e).night_shifts, _stats_for(stats, e).total_shifts))
        return sorted(pool, key=lambda e: (_stats_for(stats, e).day_shifts, _stats_for(stats, e).total_shifts))

    if resolved is SelectionStrategy.ROTATE:
        ordered = sorted(pool)
        day = _day_of_month(date)
        if day is None or not ordered:
            return ordered
        offset = day % len(ordered)
        return ordered[offset:] + ordered[:offset]

    logger.debug(f"Unknown strategy {strategy!r}, ranking by total shifts")
    return sorted(pool, key=lambda e: _stats_for(stats, e).total_shifts)


@log_function_call
def select(
    available: Sequence[str],
    shift_kind: Union[ShiftKind, str],
    required_count: int,
    stats: Optional[StatsMap],
    strategy: Union[SelectionStrategy, str, None] = SelectionStrategy.BALANCED,
    date: DateLike = None,
) -> List[str]:
    """
    Pick employees for one slot.

    Args:
        available: Employees that may work the slot
        shift_kind: Kind of the slot being filled
        required_count: Headcount to fill
        stats: Employee -> EmployeeStats (or camelCase dict); missing = zero
        strategy: Selection strategy name
        date: Slot date, used by the rotate strategy

    Returns:
        Exactly min(len(available), required_count) employees, best first
    """
    if required_count <= 0:
        return []
    ranked = rank_employees(available, shift_kind, stats, strategy, date)
    return ranked[:required_count]


def under_scheduled(stats: Optional[StatsMap], roster: Sequence[str]) -> List[str]:
    """
    Employees whose total shifts fall strictly below the roster mean.

    Employees sitting exactly on the mean are not under-scheduled. Result is
    ordered by total shifts, then name. An empty roster yields an empty list.
    """
    employees = list(dict.fromkeys(roster))
    if not employees:
        return []
    totals = {emp: _stats_for(stats, emp).total_shifts for emp in employees}
    mean = sum(totals.values()) / len(employees)
    below = [emp for emp in employees if totals[emp] < mean]
    return sorted(below, key=lambda e: (totals[e], e))


@log_function_call
def select_with_fairness(
    available: Sequence[str],
    shift_kind: Union[ShiftKind, str],
    required_count: int,
    stats: Optional[StatsMap],
    all_employees: Sequence[str],
    strategy: Union[SelectionStrategy, str, None] = SelectionStrategy.BALANCED,
    date: DateLike = None,
) -> List[str]:
    """
    Two-phase selection: under-scheduled available employees first, then the
    rest of the available pool, each phase ranked by the same strategy.
    """
    if required_count <= 0:
        return []

    behind = set(under_scheduled(stats, all_employees))
    priority_pool = [emp for emp in available if emp in behind]

    selected: List[str] = []
    if priority_pool:
        selected.extend(select(priority_pool, shift_kind, required_count, stats, strategy, date))

    if len(selected) < required_count:
        taken = set(selected)
        remaining = [emp for emp in available if emp not in taken]
        if remaining:
            selected.extend(select(remaining, shift_kind, required_count - len(selected), stats, strategy, date))

    logger.debug(
        f"Selected {selected} for {ShiftKind.from_string(shift_kind).value} "
        f"({len(priority_pool)} under-scheduled in pool)"
    )
    return selected
