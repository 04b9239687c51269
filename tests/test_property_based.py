"""
Property-Based Tests with Hypothesis
====================================
Invariants that hold for arbitrary valid inputs.
"""
from datetime import date, timedelta

from hypothesis import given, settings, strategies as st

from shiftcheck.engine.adjacency import gap_is_sufficient
from shiftcheck.engine.reporting import FindingCollector
from shiftcheck.engine.selection import select, select_with_fairness, under_scheduled
from shiftcheck.engine.validator import validate
from shiftcheck.models.shift import ShiftKind
from shiftcheck.models.stats import EmployeeStats
from shiftcheck.utils.dates import format_date, parse_date

NAMES = ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank"]

dates = st.dates(min_value=date(1900, 1, 1), max_value=date(2999, 12, 31))
pools = st.lists(st.sampled_from(NAMES), unique=True)
stats_maps = st.dictionaries(
    st.sampled_from(NAMES),
    st.builds(
        EmployeeStats,
        total_shifts=st.integers(min_value=0, max_value=31),
        day_shifts=st.integers(min_value=0, max_value=31),
        night_shifts=st.integers(min_value=0, max_value=31),
    ),
)
kinds = st.sampled_from(list(ShiftKind))
strategies = st.sampled_from(["balanced", "minimize_night", "rotate", "unknown"])


class TestDateProperties:
    """Date key formatting."""

    @given(d=dates)
    def test_format_parse_roundtrip(self, d):
        assert parse_date(format_date(d)) == d

    @given(d=dates)
    def test_format_is_zero_padded(self, d):
        text = format_date(d)
        assert len(text) == 10
        assert text[4] == "-" and text[7] == "-"


class TestSelectionProperties:
    """Selector output invariants."""

    @given(pool=pools, kind=kinds, required=st.integers(min_value=-2, max_value=8),
           stats=stats_maps, strategy=strategies, d=dates)
    def test_select_size_and_subset(self, pool, kind, required, stats, strategy, d):
        result = select(pool, kind, required, stats, strategy, d)

        assert len(result) == max(0, min(len(pool), required))
        assert set(result) <= set(pool)
        assert len(set(result)) == len(result)

    @given(pool=pools, kind=kinds, required=st.integers(min_value=0, max_value=8),
           stats=stats_maps, roster=pools, strategy=strategies, d=dates)
    def test_fairness_size_and_subset(self, pool, kind, required, stats, roster, strategy, d):
        result = select_with_fairness(pool, kind, required, stats, roster, strategy, d)

        assert len(result) == min(len(pool), required)
        assert set(result) <= set(pool)
        assert len(set(result)) == len(result)

    @given(pool=pools, kind=kinds, stats=stats_maps, d=dates)
    def test_deterministic(self, pool, kind, stats, d):
        first = select(pool, kind, len(pool), stats, "balanced", d)
        second = select(list(reversed(pool)), kind, len(pool), stats, "balanced", d)

        assert first == second

    @given(stats=stats_maps, roster=pools)
    def test_under_scheduled_below_mean(self, stats, roster):
        result = under_scheduled(stats, roster)

        if roster:
            totals = [stats[n].total_shifts if n in stats else 0 for n in roster]
            mean = sum(totals) / len(roster)
            for name in result:
                total = stats[name].total_shifts if name in stats else 0
                assert total < mean
        else:
            assert result == []


class TestAdjacencyProperties:
    """Gap rule invariants."""

    @given(a=kinds, b=kinds, ha=st.booleans(), hb=st.booleans())
    def test_mixed_holiday_always_sufficient(self, a, b, ha, hb):
        if ha != hb:
            assert gap_is_sufficient(a, b, ha, hb)

    @given(a=kinds, b=kinds)
    def test_holiday_pairs_always_sufficient(self, a, b):
        assert gap_is_sufficient(a, b, True, True)


class TestValidationProperties:
    """Validation run invariants."""

    @settings(max_examples=30, deadline=None)
    @given(
        entries=st.lists(
            st.tuples(st.integers(min_value=1, max_value=31), st.sampled_from(NAMES[:3]), kinds),
            max_size=40,
        )
    )
    def test_total_is_sum_of_rules_and_repeatable(self, entries):
        schedule = {}
        for day, name, kind in entries:
            key = format_date(date(2024, 3, 1) + timedelta(days=day - 1))
            schedule.setdefault(key, []).append({"employee": name, "shift": kind.value})
        conditions = {
            "employeeRules": [
                {"type": t, "employee": n, "value": 3}
                for n in NAMES[:3]
                for t in ("maxConsecutiveWorkDays", "no24HourShift", "minShiftGap", "balanceShifts")
            ],
            "shiftRules": [{"type": "minStaff", "shift": "day", "value": 1}],
        }
        collector = FindingCollector()

        first = validate(2024, 3, schedule, conditions, sink=collector)
        second = validate(2024, 3, schedule, conditions, sink=collector)

        assert first.total_conflicts == sum(first.conflicts_by_rule.values())
        assert first.total_conflicts == second.total_conflicts
        assert collector.total_conflicts == first.total_conflicts
