"""Tests for employee statistics aggregation."""
from shiftcheck.engine.stats import compute_employee_stats, stats_to_dataframe, stats_to_dict_list
from shiftcheck.models.stats import EmployeeStats


class TestComputeEmployeeStats:
    """Tests for compute_employee_stats function."""

    def test_counts_by_class(self, make_schedule):
        schedule = make_schedule(
            ("2024-03-01", "Alice", "day"),
            ("2024-03-02", "Alice", "weekend-day"),
            ("2024-03-03", "Alice", "night"),
            ("2024-03-04", "Alice", "evening"),
            ("2024-03-05", "Alice", "off"),
        )

        stats = compute_employee_stats(schedule)

        assert stats["Alice"] == EmployeeStats(total_shifts=4, day_shifts=2, night_shifts=1)

    def test_listed_employee_without_shifts(self, make_schedule):
        schedule = make_schedule(("2024-03-01", "Alice", "day"))

        stats = compute_employee_stats(schedule, employees=["Alice", "Bob"])

        assert stats["Bob"] == EmployeeStats()

    def test_date_window(self, make_schedule):
        schedule = make_schedule(
            ("2024-02-29", "Alice", "night"),
            ("2024-03-01", "Alice", "day"),
        )

        stats = compute_employee_stats(schedule, dates=["2024-03-01"])

        assert stats["Alice"].total_shifts == 1
        assert stats["Alice"].night_shifts == 0

    def test_empty_schedule(self):
        assert compute_employee_stats({}) == {}

    def test_only_off_entries(self, make_schedule):
        schedule = make_schedule(("2024-03-01", "Alice", "off"))

        assert compute_employee_stats(schedule) == {}


class TestStatsExport:
    """Tests for stats rendering helpers."""

    def test_dict_list_sorted(self):
        stats = {
            "Bob": EmployeeStats(total_shifts=1, day_shifts=1),
            "Alice": EmployeeStats(total_shifts=2, night_shifts=2),
        }

        rows = stats_to_dict_list(stats)

        assert [r["Employee"] for r in rows] == ["Alice", "Bob"]
        assert rows[0]["Night"] == 2

    def test_dataframe(self):
        df = stats_to_dataframe({"Alice": EmployeeStats(total_shifts=3)})

        assert list(df.columns) == ["Employee", "Total", "Day", "Night"]
        assert df.iloc[0]["Total"] == 3

    def test_empty_dataframe(self):
        assert stats_to_dataframe({}).empty
