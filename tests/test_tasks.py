"""Tests for core task logic."""

from datetime import date, timedelta

import pytest

from todo_cli.core.errors import InvalidDate, InvalidPriority
from todo_cli.core.tasks import (
    Task,
    collect_projects,
    filter_older_than,
    filter_open,
    filter_waiting,
    is_older_than,
    normalize_priority,
    sort_tasks,
    tier,
)


@pytest.fixture
def today():
    return date(2026, 1, 10)


def make_task(description="Task", **kwargs) -> Task:
    kwargs.setdefault("start_date", date(2026, 1, 1))
    return Task(description=description, **kwargs)


class TestTask:
    def test_is_done(self):
        assert make_task(done_date=date(2026, 1, 2)).is_done is True
        assert make_task().is_done is False

    def test_is_overdue(self, today):
        assert make_task(due_date=today - timedelta(days=1)).is_overdue(today) is True

    def test_due_today_not_overdue(self, today):
        assert make_task(due_date=today).is_overdue(today) is False

    def test_no_due_not_overdue(self, today):
        assert make_task().is_overdue(today) is False

    def test_is_waiting_case_sensitive(self):
        assert make_task(context="WF").is_waiting() is True
        assert make_task(context="wf").is_waiting() is False
        assert make_task().is_waiting() is False

    def test_to_record(self):
        task = make_task(
            "Buy milk",
            priority="A",
            context="shopping",
            project="Personal",
            tags=["urgent"],
            start_date=date(2025, 11, 29),
        )
        assert task.to_record() == {
            "priority": "A",
            "description": "Buy milk",
            "context": "shopping",
            "project": "Personal",
            "tags": ["urgent"],
            "start_date": "2025/11/29",
            "done_date": None,
            "due_date": None,
        }

    def test_from_record(self):
        task = Task.from_record(
            {
                "priority": "A",
                "description": "Buy milk",
                "context": "shopping",
                "project": "Personal",
                "tags": ["urgent"],
                "start_date": "2025/11/29",
                "done_date": None,
            }
        )
        assert task.priority == "A"
        assert task.description == "Buy milk"
        assert task.context == "shopping"
        assert task.project == "Personal"
        assert task.tags == ["urgent"]
        assert task.start_date == date(2025, 11, 29)
        assert task.done_date is None
        assert task.due_date is None

    def test_from_record_lowercase_priority(self):
        task = Task.from_record({"priority": "b", "description": "x", "start_date": "2025/11/29"})
        assert task.priority == "B"

    def test_from_record_missing_start(self):
        with pytest.raises(KeyError):
            Task.from_record({"description": "x"})

    def test_from_record_bad_date(self):
        with pytest.raises(InvalidDate):
            Task.from_record({"description": "x", "start_date": "someday"})

    @pytest.mark.parametrize(
        "field, value",
        [("project", 5), ("context", 3), ("context", ["work"]), ("tags", "urgent"), ("tags", [1])],
    )
    def test_from_record_wrong_types(self, field, value):
        with pytest.raises(TypeError):
            Task.from_record({"description": "x", "start_date": "2025/11/29", field: value})

    def test_from_record_empty_text_is_none(self):
        task = Task.from_record({"description": "x", "start_date": "2025/11/29", "project": ""})
        assert task.project is None


class TestNormalizePriority:
    @pytest.mark.parametrize("value, expected", [("A", "A"), ("b", "B"), ("z", "Z"), ("clear", None), ("CLEAR", None)])
    def test_valid(self, value, expected):
        assert normalize_priority(value) == expected

    @pytest.mark.parametrize("value", ["AB", "1", "", "é", "none"])
    def test_invalid(self, value):
        with pytest.raises(InvalidPriority):
            normalize_priority(value)


class TestAgeFilter:
    def test_boundary(self, today):
        start = today - timedelta(days=10)
        assert is_older_than(start, today, 7) is True
        assert is_older_than(start, today, 10) is False
        assert is_older_than(start, today, 11) is False

    def test_created_today(self, today):
        assert is_older_than(today, today, 0) is False

    def test_filter(self, today):
        entries = [
            (1, make_task("old", start_date=today - timedelta(days=30))),
            (2, make_task("new", start_date=today - timedelta(days=2))),
        ]
        assert [pos for pos, _ in filter_older_than(entries, 7, today)] == [1]

    @pytest.mark.parametrize("age", range(0, 15))
    def test_strict_for_all_ages(self, today, age):
        start = today - timedelta(days=age)
        for threshold in range(0, 15):
            assert is_older_than(start, today, threshold) == (age > threshold)


class TestFilters:
    def test_filter_open(self):
        entries = [(1, make_task()), (2, make_task(done_date=date(2026, 1, 3)))]
        assert [pos for pos, _ in filter_open(entries)] == [1]

    def test_filter_waiting(self):
        entries = [(1, make_task(context="WF")), (2, make_task(context="home")), (3, make_task())]
        assert [pos for pos, _ in filter_waiting(entries)] == [2, 3]

    def test_filter_waiting_custom_context(self):
        entries = [(1, make_task(context="WF")), (2, make_task(context="later"))]
        assert [pos for pos, _ in filter_waiting(entries, "later")] == [1]


class TestSortTasks:
    def test_tiers(self):
        assert tier(make_task(priority="A", due_date=date(2026, 1, 1))) == 0
        assert tier(make_task(due_date=date(2026, 1, 1))) == 1
        assert tier(make_task(priority="A")) == 2
        assert tier(make_task()) == 3

    def test_four_tier_order(self):
        entries = [
            (1, make_task("plain")),
            (2, make_task("a", priority="A", due_date=date(2026, 1, 15))),
            (3, make_task("b", priority="B", due_date=date(2026, 1, 20))),
            (4, make_task("due", due_date=date(2026, 1, 25))),
            (5, make_task("c", priority="C")),
        ]
        assert [pos for pos, _ in sort_tasks(entries)] == [2, 3, 4, 5, 1]

    def test_tier_a_due_breaks_priority_tie(self):
        entries = [
            (1, make_task(priority="A", due_date=date(2026, 3, 1))),
            (2, make_task(priority="A", due_date=date(2026, 2, 1))),
            (3, make_task(priority="B", due_date=date(2026, 1, 1))),
        ]
        assert [pos for pos, _ in sort_tasks(entries)] == [2, 1, 3]

    def test_tier_b_by_due(self):
        entries = [
            (1, make_task(due_date=date(2026, 3, 1))),
            (2, make_task(due_date=date(2026, 2, 1))),
        ]
        assert [pos for pos, _ in sort_tasks(entries)] == [2, 1]

    def test_tier_c_by_priority(self):
        entries = [(1, make_task(priority="C")), (2, make_task(priority="A")), (3, make_task(priority="B"))]
        assert [pos for pos, _ in sort_tasks(entries)] == [2, 3, 1]

    def test_tier_d_by_position(self):
        entries = [(3, make_task()), (1, make_task()), (2, make_task())]
        assert [pos for pos, _ in sort_tasks(entries)] == [1, 2, 3]

    def test_stable_for_equal_keys(self):
        entries = [
            (4, make_task("x", priority="B")),
            (2, make_task("y", priority="B")),
            (7, make_task("z", due_date=date(2026, 1, 1))),
            (5, make_task("w", due_date=date(2026, 1, 1))),
        ]
        assert [pos for pos, _ in sort_tasks(entries)] == [7, 5, 4, 2]

    def test_empty(self):
        assert sort_tasks([]) == []


class TestCollectProjects:
    def test_distinct_sorted(self):
        tasks = [
            make_task(project="Work"),
            make_task(project="Home"),
            make_task(project="Work"),
            make_task(),
            make_task(project="Garden", done_date=date(2026, 1, 2)),
        ]
        assert collect_projects(tasks) == ["Garden", "Home", "Work"]

    def test_none(self):
        assert collect_projects([make_task()]) == []
