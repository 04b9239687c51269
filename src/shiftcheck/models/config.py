"""Engine configuration and staffing requirement definitions."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from shiftcheck.utils.logging_setup import setup_logging

from .shift import DEFAULT_SHIFT_LABELS, ShiftKind


class SelectionStrategy(str, Enum):
    """Employee selection strategies for filling a shift slot."""
    BALANCED = "balanced"              # Fewest total shifts, then day/night balance
    MINIMIZE_NIGHT = "minimize_night"  # Fewest shifts of the slot's class
    ROTATE = "rotate"                  # Alphabetical, rotated by day of month

    @classmethod
    def parse(cls, value) -> Optional["SelectionStrategy"]:
        """Resolve a strategy name; unrecognized names resolve to None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass
class StaffingRequirements:
    """Headcount per shift kind, split by the holiday-ness of the day."""
    weekday: Dict[ShiftKind, int] = field(default_factory=lambda: {
        ShiftKind.DAY: 2,
        ShiftKind.EVENING: 1,
        ShiftKind.NIGHT: 1,
    })
    holiday: Dict[ShiftKind, int] = field(default_factory=lambda: {
        ShiftKind.WEEKEND_DAY: 1,
        ShiftKind.WEEKEND_NIGHT: 1,
    })

    def __post_init__(self):
        self.weekday = {ShiftKind.from_string(k): int(v) for k, v in self.weekday.items()}
        self.holiday = {ShiftKind.from_string(k): int(v) for k, v in self.holiday.items()}

    def for_day(self, holiday: bool) -> Dict[ShiftKind, int]:
        """Requirements that apply on a day of the given holiday-ness."""
        return self.holiday if holiday else self.weekday

    def to_dict(self) -> Dict:
        return {
            "weekday": {k.value: v for k, v in self.weekday.items()},
            "holiday": {k.value: v for k, v in self.holiday.items()},
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "StaffingRequirements":
        req = cls()
        if "weekday" in d:
            req.weekday = {ShiftKind.from_string(k): int(v) for k, v in d["weekday"].items()}
        if "holiday" in d:
            req.holiday = {ShiftKind.from_string(k): int(v) for k, v in d["holiday"].items()}
        return req


@dataclass
class EngineConfig:
    """Configuration shared by the validator and the selector."""

    # Balance rule threshold when a balanceShifts rule carries no value
    default_balance_difference: int = 2

    # Selection
    default_strategy: SelectionStrategy = SelectionStrategy.BALANCED

    # Labels used in staffing conflict reasons
    shift_labels: Dict[ShiftKind, str] = field(default_factory=lambda: dict(DEFAULT_SHIFT_LABELS))

    # Logging
    log_level: str = "INFO"

    def label_for(self, kind: ShiftKind) -> str:
        return self.shift_labels.get(kind, kind.value)

    def apply_logging(self, log_file: Optional[str] = None, console_level: Optional[str] = None):
        """Configure the package logger at this config's log_level."""
        return setup_logging(level=self.log_level, log_file=log_file, console_level=console_level)

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "default_balance_difference": self.default_balance_difference,
            "default_strategy": self.default_strategy.value,
            "shift_labels": {k.value: v for k, v in self.shift_labels.items()},
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "EngineConfig":
        """Create from dictionary. Unknown keys are ignored."""
        cfg = cls()
        for key, value in d.items():
            if hasattr(cfg, key):
                if key == "default_strategy":
                    value = SelectionStrategy(value) if value else SelectionStrategy.BALANCED
                elif key == "shift_labels":
                    labels = dict(DEFAULT_SHIFT_LABELS)
                    labels.update({ShiftKind.from_string(k): str(v) for k, v in (value or {}).items()})
                    value = labels
                setattr(cfg, key, value)
        return cfg
