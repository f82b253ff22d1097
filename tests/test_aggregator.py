"""Tests for aggregator module."""

from joggl.aggregator import aggregate, total_duration
from joggl.models import RawTimeEntry, WorkItem


class TestAggregate:
    """Tests for aggregate."""

    def test_merges_same_project_and_description(self):
        entries = [
            RawTimeEntry(1, "X", "Fix ABC-12 bug", 60000),
            RawTimeEntry(1, "X", "Fix ABC-12 bug", 30000),
        ]

        items = aggregate(entries)

        assert len(items) == 1
        item = items[0]
        assert item.project == "X"
        assert item.description == "Fix ABC-12 bug"
        assert item.occurrences == 2
        assert item.total_duration_millis == 90000
        assert item.candidate_ids == ["ABC-12"]

    def test_same_description_different_projects_stay_apart(self):
        entries = [
            RawTimeEntry(1, "X", "Standup ABC-1", 900000),
            RawTimeEntry(2, "Y", "Standup ABC-1", 600000),
        ]

        items = aggregate(entries)

        assert [(i.project, i.total_duration_millis) for i in items] == [("X", 900000), ("Y", 600000)]

    def test_first_seen_order(self, sample_entries):
        entries = [sample_entries[2]] + sample_entries[:2]

        items = aggregate(entries)

        assert [i.description for i in items] == ["Review XYZ-7", "Fix ABC-12 bug"]

    def test_empty_input(self):
        assert aggregate([]) == []

    def test_exact_integer_sum(self):
        entries = [RawTimeEntry(1, "X", "Long ABC-3", 333) for _ in range(1000)]

        items = aggregate(entries)

        assert items[0].total_duration_millis == 333000
        assert isinstance(items[0].total_duration_millis, int)
        assert items[0].occurrences == 1000

    def test_rerun_is_identical(self, sample_entries):
        assert aggregate(sample_entries) == aggregate(sample_entries)

    def test_accepts_generator(self, sample_entries):
        items = aggregate(e for e in sample_entries)
        assert len(items) == 2

    def test_no_ids_keeps_empty_candidates(self):
        items = aggregate([RawTimeEntry(1, "X", "Unplanned work", 1000)])
        assert items[0].candidate_ids == []


class TestTotalDuration:
    """Tests for total_duration."""

    def test_sum(self):
        items = [
            WorkItem("X", "a", total_duration_millis=1000, occurrences=1),
            WorkItem("X", "b", total_duration_millis=2500, occurrences=2),
        ]
        assert total_duration(items) == 3500

    def test_empty(self):
        assert total_duration([]) == 0
