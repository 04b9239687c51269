"""Tests for the in-memory finding collector."""
import logging

from shiftcheck.engine.reporting import ConflictFinding, FindingCollector, summary_message


class TestSummaryMessage:
    """Tests for end-of-run messages."""

    def test_no_conflicts(self):
        assert summary_message(0) == "No scheduling conflicts found."

    def test_singular_and_plural(self):
        assert summary_message(1).startswith("1 scheduling conflict found")
        assert summary_message(4).startswith("4 scheduling conflicts found")


class TestFindingCollector:
    """Tests for FindingCollector."""

    def test_same_reason_kept_once(self, collector):
        collector.report("2024-03-05", "Alice is marked unavailable on this date")
        collector.report("2024-03-05", "Alice is marked unavailable on this date")
        collector.report("2024-03-05", "Bob is marked unavailable on this date")

        assert collector.reasons_for("2024-03-05") == [
            "Alice is marked unavailable on this date",
            "Bob is marked unavailable on this date",
        ]
        assert len(collector) == 2

    def test_findings_in_calendar_order(self, collector):
        collector.report("2024-03-10", "b")
        collector.report("2024-03-02", "a")

        assert collector.dates == ["2024-03-02", "2024-03-10"]
        assert collector.findings == [
            ConflictFinding("2024-03-02", "a"),
            ConflictFinding("2024-03-10", "b"),
        ]

    def test_clear_resets(self, collector):
        collector.report("2024-03-02", "a")
        collector.finish(1)

        collector.clear()

        assert collector.findings == []
        assert collector.total_conflicts is None
        assert collector.message == ""

    def test_finish_logs_warning_on_conflicts(self, collector, caplog):
        with caplog.at_level(logging.INFO, logger="shiftcheck"):
            collector.finish(2)

        assert collector.total_conflicts == 2
        assert caplog.records[-1].levelno == logging.WARNING
        assert "2 scheduling conflicts" in caplog.text

    def test_finish_logs_info_when_clean(self, collector, caplog):
        with caplog.at_level(logging.INFO, logger="shiftcheck"):
            collector.finish(0)

        assert caplog.records[-1].levelno == logging.INFO
        assert collector.message == "No scheduling conflicts found."

    def test_to_dataframe(self, collector):
        collector.report("2024-03-02", "a")
        collector.report("2024-03-02", "b")

        df = collector.to_dataframe()

        assert list(df.columns) == ["date", "reason"]
        assert list(df["reason"]) == ["a", "b"]

    def test_empty_dataframe(self, collector):
        assert collector.to_dataframe().empty
