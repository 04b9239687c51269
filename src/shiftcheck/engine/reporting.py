"""
Conflict Reporting
==================
Sink interface through which constraint checks publish findings, plus the
in-memory collector used when the caller does not supply its own sink.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

import pandas as pd

from shiftcheck.utils.logging_setup import get_logger

logger = get_logger("shiftcheck.engine.reporting")


@dataclass(frozen=True)
class ConflictFinding:
    """One conflict attached to a calendar date."""
    date: str
    reason: str


class ReportingSink(Protocol):
    """Consumer of validation findings (calendar highlighting, alerts, logs)."""

    def clear(self) -> None:
        """Remove all findings from a previous run."""
        ...

    def report(self, date: str, reason: str) -> None:
        """Attach a reason to a date. Reporting the same pair twice is a no-op."""
        ...

    def finish(self, total_conflicts: int) -> None:
        """End-of-run signal carrying the conflict total."""
        ...


def summary_message(total_conflicts: int) -> str:
    """User-facing end-of-run summary."""
    if total_conflicts == 0:
        return "No scheduling conflicts found."
    noun = "conflict" if total_conflicts == 1 else "conflicts"
    return f"{total_conflicts} scheduling {noun} found; check the highlighted dates."


class FindingCollector:
    """In-memory sink: reasons accumulate per date, de-duplicated by exact text."""

    def __init__(self):
        self._reasons: Dict[str, List[str]] = {}
        self.total_conflicts: Optional[int] = None
        self.message: str = ""

    def clear(self) -> None:
        self._reasons.clear()
        self.total_conflicts = None
        self.message = ""

    def report(self, date: str, reason: str) -> None:
        reasons = self._reasons.setdefault(date, [])
        if reason not in reasons:
            reasons.append(reason)

    def finish(self, total_conflicts: int) -> None:
        self.total_conflicts = total_conflicts
        self.message = summary_message(total_conflicts)
        if total_conflicts:
            logger.warning(self.message)
        else:
            logger.info(self.message)

    @property
    def dates(self) -> List[str]:
        """Dates carrying at least one finding, in calendar order."""
        return sorted(self._reasons)

    def reasons_for(self, date: str) -> List[str]:
        return list(self._reasons.get(date, []))

    @property
    def findings(self) -> List[ConflictFinding]:
        return [
            ConflictFinding(date=d, reason=r)
            for d in self.dates
            for r in self._reasons[d]
        ]

    def __len__(self) -> int:
        return sum(len(r) for r in self._reasons.values())

    def to_dataframe(self) -> pd.DataFrame:
        """Findings as a (date, reason) DataFrame."""
        rows = [{"date": f.date, "reason": f.reason} for f in self.findings]
        if not rows:
            return pd.DataFrame(columns=["date", "reason"])
        return pd.DataFrame(rows)
