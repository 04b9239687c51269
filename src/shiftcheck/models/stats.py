"""Per-employee shift statistics used by the selector."""
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class EmployeeStats:
    """Aggregated shift counts for one employee."""
    total_shifts: int = 0
    day_shifts: int = 0    # day + weekend-day
    night_shifts: int = 0  # night + weekend-night

    def record(self, is_day_class: bool, is_night_class: bool):
        """Count one more worked shift."""
        self.total_shifts += 1
        if is_day_class:
            self.day_shifts += 1
        if is_night_class:
            self.night_shifts += 1

    def to_dict(self) -> dict:
        return {
            "totalShifts": self.total_shifts,
            "dayShifts": self.day_shifts,
            "nightShifts": self.night_shifts,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "EmployeeStats":
        """Create from camelCase or snake_case keys; missing counts are zero."""
        return cls(
            total_shifts=int(d.get("totalShifts", d.get("total_shifts", 0)) or 0),
            day_shifts=int(d.get("dayShifts", d.get("day_shifts", 0)) or 0),
            night_shifts=int(d.get("nightShifts", d.get("night_shifts", 0)) or 0),
        )
