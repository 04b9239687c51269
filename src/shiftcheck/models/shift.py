"""Shift kind definitions and the per-day-kind shift orders."""
from enum import Enum
from typing import Dict, List, Optional


class ShiftKind(str, Enum):
    """Kinds of shifts an employee can be assigned on a date."""
    DAY = "day"
    EVENING = "evening"
    NIGHT = "night"
    WEEKEND_DAY = "weekend-day"
    WEEKEND_NIGHT = "weekend-night"
    OFF = "off"

    @property
    def is_work(self) -> bool:
        """True if this is a working shift (not rest)."""
        return self is not ShiftKind.OFF

    @property
    def is_day_class(self) -> bool:
        return self in (ShiftKind.DAY, ShiftKind.WEEKEND_DAY)

    @property
    def is_night_class(self) -> bool:
        return self in (ShiftKind.NIGHT, ShiftKind.WEEKEND_NIGHT)

    @classmethod
    def parse(cls, s) -> Optional["ShiftKind"]:
        """Resolve a value or alias; unrecognized or blank strings resolve to None."""
        if isinstance(s, cls):
            return s
        key = str(s).strip().lower().replace("_", "-").replace(" ", "-")
        mapping = {
            "d": cls.DAY, "day": cls.DAY,
            "e": cls.EVENING, "evening": cls.EVENING,
            "n": cls.NIGHT, "night": cls.NIGHT,
            "weekend-day": cls.WEEKEND_DAY, "holiday-day": cls.WEEKEND_DAY,
            "weekend-night": cls.WEEKEND_NIGHT, "holiday-night": cls.WEEKEND_NIGHT,
            "off": cls.OFF, "rest": cls.OFF,
        }
        return mapping.get(key)

    @classmethod
    def from_string(cls, s: str) -> "ShiftKind":
        """Parse a schedule entry's shift; anything unrecognized is rest."""
        return cls.parse(s) or cls.OFF


# Ordered shift cycles; weekday and holiday kinds are never compared directly
WEEKDAY_ORDER: List[ShiftKind] = [ShiftKind.DAY, ShiftKind.EVENING, ShiftKind.NIGHT]
HOLIDAY_ORDER: List[ShiftKind] = [ShiftKind.WEEKEND_DAY, ShiftKind.WEEKEND_NIGHT]

DEFAULT_SHIFT_LABELS: Dict[ShiftKind, str] = {
    ShiftKind.DAY: "Day shift",
    ShiftKind.EVENING: "Evening shift",
    ShiftKind.NIGHT: "Night shift",
    ShiftKind.WEEKEND_DAY: "Holiday day shift",
    ShiftKind.WEEKEND_NIGHT: "Holiday night shift",
    ShiftKind.OFF: "Off",
}


def day_class_kind(holiday: bool) -> ShiftKind:
    return ShiftKind.WEEKEND_DAY if holiday else ShiftKind.DAY


def night_class_kind(holiday: bool) -> ShiftKind:
    return ShiftKind.WEEKEND_NIGHT if holiday else ShiftKind.NIGHT
