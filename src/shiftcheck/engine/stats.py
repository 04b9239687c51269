"""
Employee Statistics
===================
Single source of truth for the per-employee shift counts fed to the selector.
"""
from typing import Dict, Iterable, List, Optional

import pandas as pd

from shiftcheck.models.schedule import ScheduleData, schedule_to_dataframe
from shiftcheck.models.shift import ShiftKind
from shiftcheck.models.stats import EmployeeStats
from shiftcheck.utils.logging_setup import get_logger

logger = get_logger("shiftcheck.engine.stats")

DAY_CLASS = [ShiftKind.DAY.value, ShiftKind.WEEKEND_DAY.value]
NIGHT_CLASS = [ShiftKind.NIGHT.value, ShiftKind.WEEKEND_NIGHT.value]


def compute_employee_stats(
    schedule: ScheduleData,
    employees: Optional[Iterable[str]] = None,
    dates: Optional[Iterable[str]] = None,
) -> Dict[str, EmployeeStats]:
    """
    Count worked, day-class and night-class shifts per employee.

    Args:
        schedule: Date string -> assignments
        employees: Employees to include even without assignments
        dates: Restrict counting to these date strings

    Returns:
        Employee -> EmployeeStats
    """
    df = schedule_to_dataframe(schedule)
    if dates is not None:
        df = df[df["date"].isin(list(dates))]
    df = df[df["shift"] != ShiftKind.OFF.value]

    result: Dict[str, EmployeeStats] = {}
    if not df.empty:
        counts = df.groupby("employee")["shift"].value_counts().unstack(fill_value=0)
        for col in DAY_CLASS + NIGHT_CLASS + [ShiftKind.EVENING.value]:
            if col not in counts.columns:
                counts[col] = 0

        counts["total"] = counts.sum(axis=1)
        counts["day_class"] = counts[DAY_CLASS].sum(axis=1)
        counts["night_class"] = counts[NIGHT_CLASS].sum(axis=1)

        for employee, row in counts.iterrows():
            result[str(employee)] = EmployeeStats(
                total_shifts=int(row["total"]),
                day_shifts=int(row["day_class"]),
                night_shifts=int(row["night_class"]),
            )

    for employee in employees or []:
        result.setdefault(employee, EmployeeStats())

    logger.debug(f"Calculated stats for {len(result)} employees")
    return result


def stats_to_dict_list(stats: Dict[str, EmployeeStats]) -> List[Dict]:
    """Convert stats to rows for a DataFrame or export, sorted by employee."""
    return [
        {
            "Employee": employee,
            "Total": s.total_shifts,
            "Day": s.day_shifts,
            "Night": s.night_shifts,
        }
        for employee, s in sorted(stats.items())
    ]


def stats_to_dataframe(stats: Dict[str, EmployeeStats]) -> pd.DataFrame:
    rows = stats_to_dict_list(stats)
    if not rows:
        return pd.DataFrame(columns=["Employee", "Total", "Day", "Night"])
    return pd.DataFrame(rows)
