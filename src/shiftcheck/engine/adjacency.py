"""
Shift Adjacency
===============
Minimum-gap rule between the shifts an employee works on consecutive days.

Weekday shifts cycle day -> evening -> night. Moving one position forward
(day->evening, evening->night, night->day) leaves too little rest; a
two-step jump such as day->night is allowed.
"""
from typing import Union

from shiftcheck.models.shift import WEEKDAY_ORDER, ShiftKind


def _as_kind(shift: Union[ShiftKind, str]) -> ShiftKind:
    return shift if isinstance(shift, ShiftKind) else ShiftKind.from_string(shift)


def gap_is_sufficient(
    shift_a: Union[ShiftKind, str],
    shift_b: Union[ShiftKind, str],
    is_holiday_a: bool,
    is_holiday_b: bool,
) -> bool:
    """
    Check the rest gap between shift_a on one day and shift_b on the next.

    Args:
        shift_a: Shift worked on the earlier day
        shift_b: Shift worked on the following day
        is_holiday_a: Holiday-ness of the earlier day
        is_holiday_b: Holiday-ness of the following day

    Returns:
        True if the transition is allowed
    """
    # Weekday <-> holiday transitions are exempt
    if bool(is_holiday_a) != bool(is_holiday_b):
        return True

    kind_a, kind_b = _as_kind(shift_a), _as_kind(shift_b)
    if kind_a is ShiftKind.OFF or kind_b is ShiftKind.OFF:
        return True

    # The two-shift holiday cycle has no too-close pairing
    if is_holiday_a and is_holiday_b:
        return True

    if kind_a not in WEEKDAY_ORDER or kind_b not in WEEKDAY_ORDER:
        return True

    size = len(WEEKDAY_ORDER)
    steps = (WEEKDAY_ORDER.index(kind_b) - WEEKDAY_ORDER.index(kind_a) + size) % size
    return steps > 1
