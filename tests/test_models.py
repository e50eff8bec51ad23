"""Unit tests for models."""

import pytest
from pydantic import ValidationError

from todoapp.models import Error, Success, Task, TaskOrder
from todoapp.repositories import DataSourceError


class TestTask:
    """Tests for the Task model."""

    def test_new_tasks_get_unique_ids(self):
        """Tasks created without an id get distinct generated ids."""
        first = Task(title="Title")
        second = Task(title="Title")
        assert first.id
        assert first.id != second.id

    def test_explicit_id_is_kept(self):
        task = Task(id="abc", title="Title")
        assert task.id == "abc"

    def test_defaults(self):
        task = Task()
        assert task.title == ""
        assert task.description == ""
        assert task.completed is False
        assert task.is_active is True

    def test_task_is_frozen(self):
        """Tasks cannot be mutated in place."""
        task = Task(title="Title")
        with pytest.raises(ValidationError):
            task.completed = True

    def test_model_copy_changes_only_requested_fields(self):
        task = Task(title="Title", description="Desc")
        completed = task.model_copy(update={"completed": True})

        assert completed.completed is True
        assert completed.id == task.id
        assert completed.title == "Title"
        assert task.completed is False

    def test_is_empty(self):
        assert Task().is_empty
        assert Task(title="  ", description="\n").is_empty
        assert not Task(title="Title").is_empty
        assert not Task(description="Only a description").is_empty

    def test_title_for_list_prefers_title(self):
        assert Task(title="Title", description="Desc").title_for_list == "Title"

    def test_title_for_list_falls_back_to_description(self):
        assert Task(title="", description="Desc").title_for_list == "Desc"


class TestTaskFromFrontmatter:
    """Tests for Task.from_frontmatter edge cases."""

    def test_from_frontmatter_reads_fields(self):
        task = Task.from_frontmatter(
            task_id="abc",
            metadata={"title": "Title", "completed": True},
            body="Body",
        )
        assert task.id == "abc"
        assert task.title == "Title"
        assert task.description == "Body"
        assert task.completed is True

    def test_from_frontmatter_missing_fields_use_defaults(self):
        task = Task.from_frontmatter(task_id="abc", metadata={}, body="")
        assert task.title == ""
        assert task.completed is False

    def test_to_frontmatter_roundtrip_fields(self):
        task = Task(title="Title", description="Body", completed=True)
        assert task.to_frontmatter() == {
            "title": "Title",
            "completed": True,
            "description": "Body",
        }

    def test_from_frontmatter_prefers_description_key(self):
        task = Task.from_frontmatter(
            task_id="abc",
            metadata={"title": "Title", "description": "  kept as is\n"},
            body="ignored",
        )
        assert task.description == "  kept as is\n"


class TestResult:
    """Tests for the Success/Error result types."""

    def test_success_matches_value(self):
        match Success([1, 2]):
            case Success(value=value):
                assert value == [1, 2]
            case _:
                pytest.fail("expected Success")

    def test_error_carries_cause(self):
        cause = DataSourceError()
        result = Error(cause)
        assert result.cause is cause
        assert not isinstance(result, Success)


class TestTaskOrder:
    """Tests for TaskOrder."""

    def test_add_task_appends_once(self):
        order = TaskOrder()
        assert order.add_task("a") is True
        assert order.add_task("b") is True
        assert order.add_task("a") is False
        assert order.order == ["a", "b"]

    def test_remove_task(self):
        order = TaskOrder(order=["a", "b"])
        assert order.remove_task("a") is True
        assert order.remove_task("missing") is False
        assert order.order == ["b"]

    def test_reconcile_drops_stale_and_appends_new_sorted(self):
        order = TaskOrder(order=["gone", "b", "a"])
        changed = order.reconcile({"a", "b", "d", "c"})
        assert changed is True
        assert order.order == ["b", "a", "c", "d"]

    def test_reconcile_unchanged(self):
        order = TaskOrder(order=["a", "b"])
        assert order.reconcile({"a", "b"}) is False

    def test_clear_keeps_version(self):
        order = TaskOrder(version=2, order=["a", "b"])
        order.clear()
        assert order.order == []
        assert order.version == 2
