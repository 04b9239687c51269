"""
Pydantic Validated Models
=========================
Strict validation layer for engine configuration at API boundaries.

Usage:
    from shiftcheck.models.validated import ValidatedEngineConfig

    config = ValidatedEngineConfig(default_balance_difference=3).to_dataclass()

Note: the dataclass EngineConfig stays the type the engine consumes.
"""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import EngineConfig, SelectionStrategy
from .shift import DEFAULT_SHIFT_LABELS, ShiftKind


class ValidatedEngineConfig(BaseModel):
    """
    Pydantic-validated engine configuration.

    Use this for strict validation at API boundaries.
    Can be converted to/from the dataclass EngineConfig.
    """
    model_config = ConfigDict(validate_assignment=True)

    default_balance_difference: int = Field(default=2, ge=0, le=31, description="Allowed day/night imbalance")
    default_strategy: SelectionStrategy = Field(default=SelectionStrategy.BALANCED)
    shift_labels: Dict[str, str] = Field(default_factory=lambda: {k.value: v for k, v in DEFAULT_SHIFT_LABELS.items()})
    log_level: str = Field(default="INFO")

    @field_validator("shift_labels")
    @classmethod
    def validate_shift_labels(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Only known shift kinds may be labelled."""
        known = {k.value for k in ShiftKind}
        unknown = sorted(set(v) - known)
        if unknown:
            raise ValueError(f"unknown shift kinds in shift_labels: {', '.join(unknown)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"invalid log level: {v}")
        return level

    def to_dataclass(self) -> EngineConfig:
        """Convert to the dataclass EngineConfig consumed by the engine."""
        labels = dict(DEFAULT_SHIFT_LABELS)
        labels.update({ShiftKind(k): v for k, v in self.shift_labels.items()})
        return EngineConfig(
            default_balance_difference=self.default_balance_difference,
            default_strategy=SelectionStrategy(self.default_strategy),
            shift_labels=labels,
            log_level=self.log_level,
        )

    @classmethod
    def from_dataclass(cls, config: EngineConfig) -> "ValidatedEngineConfig":
        """Create from dataclass EngineConfig."""
        return cls(
            default_balance_difference=config.default_balance_difference,
            default_strategy=config.default_strategy,
            shift_labels={k.value: v for k, v in config.shift_labels.items()},
            log_level=config.log_level,
        )
