"""View contracts the presenters talk to.

A view is anything that can render what a presenter tells it to. Views
report ``is_active``; presenters check it after every awaited repository
call and drop late results for views that have gone away.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..models import Task


class BaseView(Protocol):
    presenter: Any

    @property
    def is_active(self) -> bool: ...


class TasksView(BaseView, Protocol):
    """The task list screen."""

    def set_loading_indicator(self, active: bool) -> None: ...

    def show_tasks(self, tasks: list[Task]) -> None: ...

    def show_add_task(self) -> None: ...

    def show_task_details_ui(self, task_id: str) -> None: ...

    def show_task_marked_complete(self) -> None: ...

    def show_task_marked_active(self) -> None: ...

    def show_completed_tasks_cleared(self) -> None: ...

    def show_loading_tasks_error(self) -> None: ...

    def show_no_tasks(self) -> None: ...

    def show_no_active_tasks(self) -> None: ...

    def show_no_completed_tasks(self) -> None: ...

    def show_all_filter_label(self) -> None: ...

    def show_active_filter_label(self) -> None: ...

    def show_completed_filter_label(self) -> None: ...

    def show_successfully_saved_message(self) -> None: ...


class TaskDetailView(BaseView, Protocol):
    """The single task screen."""

    def set_loading_indicator(self, active: bool) -> None: ...

    def show_missing_task(self) -> None: ...

    def hide_title(self) -> None: ...

    def show_title(self, title: str) -> None: ...

    def hide_description(self) -> None: ...

    def show_description(self, description: str) -> None: ...

    def show_completion_status(self, completed: bool) -> None: ...

    def show_edit_task(self, task_id: str) -> None: ...

    def show_task_deleted(self) -> None: ...

    def show_task_marked_complete(self) -> None: ...

    def show_task_marked_active(self) -> None: ...


class AddEditTaskView(BaseView, Protocol):
    """The create/edit form."""

    def show_empty_task_error(self) -> None: ...

    def show_tasks_list(self) -> None: ...

    def set_title(self, title: str) -> None: ...

    def set_description(self, description: str) -> None: ...


class StatisticsView(BaseView, Protocol):
    """The statistics screen."""

    def set_progress_indicator(self, active: bool) -> None: ...

    def show_statistics(self, active_tasks: int, completed_tasks: int) -> None: ...

    def show_loading_statistics_error(self) -> None: ...
