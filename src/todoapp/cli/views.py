"""Console implementations of the presenter view contracts.

Each view prints what its presenter tells it to and records whether the
presenter reported a failure, so commands can turn that into an exit code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .output import error, header, info, success, task_line

if TYPE_CHECKING:
    from ..models import Task

logger = logging.getLogger(__name__)


class ConsoleView:
    """Shared state for console views."""

    def __init__(self) -> None:
        self.presenter: Any = None
        self.failed = False

    @property
    def is_active(self) -> bool:
        return True

    def set_loading_indicator(self, active: bool) -> None:
        logger.debug("Loading indicator: %s", active)

    def _fail(self, message: str) -> None:
        self.failed = True
        error(message)


class ConsoleTasksView(ConsoleView):
    def show_tasks(self, tasks: list[Task]) -> None:
        for task in tasks:
            task_line(task.title_for_list, task.id, task.completed)

    def show_add_task(self) -> None:
        info("Use 'todoapp add TITLE' to create a task")

    def show_task_details_ui(self, task_id: str) -> None:
        info(f"Use 'todoapp show {task_id}' to see the task")

    def show_task_marked_complete(self) -> None:
        success("Task marked complete")

    def show_task_marked_active(self) -> None:
        success("Task marked active")

    def show_completed_tasks_cleared(self) -> None:
        success("Completed tasks cleared")

    def show_loading_tasks_error(self) -> None:
        self._fail("Error while loading tasks")

    def show_no_tasks(self) -> None:
        info("You have no TO-DOs!")

    def show_no_active_tasks(self) -> None:
        info("You have no active TO-DOs!")

    def show_no_completed_tasks(self) -> None:
        info("You have no completed TO-DOs!")

    def show_all_filter_label(self) -> None:
        header("All TO-DOs")

    def show_active_filter_label(self) -> None:
        header("Active TO-DOs")

    def show_completed_filter_label(self) -> None:
        header("Completed TO-DOs")

    def show_successfully_saved_message(self) -> None:
        success("TO-DO saved")


class ConsoleTaskDetailView(ConsoleView):
    def show_missing_task(self) -> None:
        self._fail("No data")

    def hide_title(self) -> None:
        pass

    def show_title(self, title: str) -> None:
        header(title)

    def hide_description(self) -> None:
        pass

    def show_description(self, description: str) -> None:
        print(description)

    def show_completion_status(self, completed: bool) -> None:
        info("Completed" if completed else "Active")

    def show_edit_task(self, task_id: str) -> None:
        info(f"Use 'todoapp edit {task_id}' to edit the task")

    def show_task_deleted(self) -> None:
        success("Task deleted")

    def show_task_marked_complete(self) -> None:
        success("Task marked complete")

    def show_task_marked_active(self) -> None:
        success("Task marked active")


class ConsoleAddEditTaskView(ConsoleView):
    def __init__(self) -> None:
        super().__init__()
        self.title = ""
        self.description = ""

    def show_empty_task_error(self) -> None:
        self._fail("TO-DOs cannot be empty")

    def show_tasks_list(self) -> None:
        success("TO-DO saved")

    def set_title(self, title: str) -> None:
        self.title = title

    def set_description(self, description: str) -> None:
        self.description = description


class ConsoleStatisticsView(ConsoleView):
    def set_progress_indicator(self, active: bool) -> None:
        logger.debug("Progress indicator: %s", active)

    def show_statistics(self, active_tasks: int, completed_tasks: int) -> None:
        if active_tasks == 0 and completed_tasks == 0:
            info("You have no tasks.")
            return
        header("Statistics")
        info(f"Active tasks: {active_tasks}")
        info(f"Completed tasks: {completed_tasks}")

    def show_loading_statistics_error(self) -> None:
        self._fail("Error loading statistics")
