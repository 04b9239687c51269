"""
Schedule Validation
===================
Dispatches configured rules to their handlers over one shared context and
totals the conflicts they report.

Example:
    collector = FindingCollector()
    summary = validate(2024, 3, schedule, conditions, holidays=holidays, sink=collector)
    if not summary.is_valid:
        for finding in collector.findings:
            print(finding.date, finding.reason)
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from shiftcheck.models.config import EngineConfig
from shiftcheck.models.rules import (
    EmployeeRule,
    EmployeeRuleKind,
    SchedulingConditions,
    ShiftRule,
    ShiftRuleKind,
    SystemRuleKind,
)
from shiftcheck.models.schedule import (
    EmployeeAvailability,
    HolidayCalendar,
    normalize_schedule,
    schedule_employees,
)
from shiftcheck.utils.logging_setup import RunLogger, get_logger

from . import checks
from .context import ValidationContext, build_context
from .reporting import ConflictFinding, FindingCollector, ReportingSink

logger = get_logger("shiftcheck.engine.validator")

EmployeeRuleHandler = Callable[[ValidationContext, EmployeeRule], int]
ShiftRuleHandler = Callable[[ValidationContext, ShiftRule], int]
SystemRuleHandler = Callable[[ValidationContext], int]

EMPLOYEE_RULE_HANDLERS: Dict[EmployeeRuleKind, EmployeeRuleHandler] = {
    EmployeeRuleKind.MAX_CONSECUTIVE_WORK_DAYS: checks.check_max_consecutive_work_days,
    EmployeeRuleKind.NO_24_HOUR_SHIFT: checks.check_no_24_hour_shift,
    EmployeeRuleKind.MIN_SHIFT_GAP: checks.check_min_shift_gap,
    EmployeeRuleKind.BALANCE_SHIFTS: checks.check_shift_balance,
}

SHIFT_RULE_HANDLERS: Dict[ShiftRuleKind, ShiftRuleHandler] = {
    ShiftRuleKind.MIN_STAFF: checks.check_min_staff,
}

SYSTEM_RULE_HANDLERS: Dict[SystemRuleKind, SystemRuleHandler] = {
    SystemRuleKind.EMPLOYEE_AVAILABILITY: checks.check_employee_availability,
    SystemRuleKind.DUPLICATE_ASSIGNMENT: checks.check_duplicate_assignment,
}


@dataclass
class ValidationSummary:
    """Outcome of one validation run."""
    total_conflicts: int = 0
    conflicts_by_rule: Dict[str, int] = field(default_factory=dict)
    findings: List[ConflictFinding] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.total_conflicts == 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "totalConflicts": self.total_conflicts,
            "isValid": self.is_valid,
        }


def _tag(rule) -> str:
    return str(getattr(rule.type, "value", rule.type))


def _shift_name(rule: ShiftRule) -> str:
    return str(getattr(rule.shift, "value", rule.shift))


def validate(
    year: int,
    month: int,
    schedule: Mapping,
    conditions: Union[SchedulingConditions, Mapping, None] = None,
    shift_labels: Optional[Mapping] = None,
    availability: Optional[EmployeeAvailability] = None,
    holidays: Optional[HolidayCalendar] = None,
    sink: Optional[ReportingSink] = None,
    config: Optional[EngineConfig] = None,
) -> ValidationSummary:
    """
    Validate one month of a schedule against the configured rules.

    Args:
        year: Target year
        month: Target month (1-based)
        schedule: Date string -> assignments (objects or raw dicts)
        conditions: Employee and shift rules (object or camelCase payload)
        shift_labels: Shift kind -> display label for conflict reasons
        availability: Employee -> date string -> False when unavailable
        holidays: Date string -> True on holidays
        sink: Receives clear/report/finish calls (defaults to a FindingCollector)
        config: Engine configuration

    Returns:
        ValidationSummary with the conflict total and, when the sink is a
        FindingCollector, its findings
    """
    if not isinstance(conditions, SchedulingConditions):
        conditions = SchedulingConditions.from_dict(conditions)
    sink = sink if sink is not None else FindingCollector()
    run = RunLogger("shiftcheck.engine.validator")

    snapshot = normalize_schedule(schedule)

    run.phase(f"VALIDATE {year:04d}-{int(month):02d}")
    run.detail("dates in snapshot", len(snapshot))
    run.detail("employees", len(schedule_employees(snapshot)))
    run.detail("employee rules", len(conditions.employee_rules))
    run.detail("shift rules", len(conditions.shift_rules))

    sink.clear()
    ctx = build_context(
        snapshot,
        year,
        month,
        sink,
        shift_labels=shift_labels,
        holidays=holidays,
        availability=availability,
        config=config,
    )

    summary = ValidationSummary()

    def _tally(name: str, conflicts: int, subject: str = ""):
        summary.total_conflicts += conflicts
        summary.conflicts_by_rule[name] = summary.conflicts_by_rule.get(name, 0) + conflicts
        run.rule(name, subject, conflicts)

    run.step("Employee rules")
    for rule in conditions.employee_rules:
        handler = EMPLOYEE_RULE_HANDLERS.get(rule.kind) if rule.kind else None
        if handler is None:
            logger.debug(f"Skipping unknown employee rule type {_tag(rule)!r}")
            continue
        _tally(rule.kind.value, handler(ctx, rule), rule.employee)

    run.step("Shift rules")
    for rule in conditions.shift_rules:
        handler = SHIFT_RULE_HANDLERS.get(rule.kind) if rule.kind else None
        if handler is None:
            logger.debug(f"Skipping unknown shift rule type {_tag(rule)!r}")
            continue
        _tally(rule.kind.value, handler(ctx, rule), _shift_name(rule))

    run.step("System rules")
    for kind, handler in SYSTEM_RULE_HANDLERS.items():
        _tally(kind.value, handler(ctx))

    logger.info(f"Validation finished: {summary.total_conflicts} conflicts")
    sink.finish(summary.total_conflicts)

    if isinstance(sink, FindingCollector):
        summary.findings = sink.findings
    return summary
