"""Presenter for the task list."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from ..models import Error, Success, Task

if TYPE_CHECKING:
    from ..repositories import TasksDataSource
    from .contracts import TasksView

logger = logging.getLogger(__name__)


class TasksFilterType(StrEnum):
    """Which tasks the list shows."""

    ALL_TASKS = "all"
    ACTIVE_TASKS = "active"
    COMPLETED_TASKS = "completed"

    def matches(self, task: Task) -> bool:
        if self is TasksFilterType.ACTIVE_TASKS:
            return task.is_active
        if self is TasksFilterType.COMPLETED_TASKS:
            return task.completed
        return True


class TasksPresenter:
    """Listens to user actions on the task list, loads tasks and updates the view."""

    def __init__(
        self,
        tasks_repository: TasksDataSource,
        tasks_view: TasksView,
        refresh_on_first_load: bool = True,
    ) -> None:
        """
        Args:
            tasks_repository: Where tasks come from
            tasks_view: The view to update
            refresh_on_first_load: Force a refresh from the remote data
                source the first time tasks are loaded
        """
        self.tasks_repository = tasks_repository
        self.tasks_view = tasks_view
        self.current_filtering = TasksFilterType.ALL_TASKS
        self._first_load = refresh_on_first_load
        tasks_view.presenter = self

    async def start(self) -> None:
        await self.load_tasks(False)

    def task_saved(self) -> None:
        """Called when the add/edit screen reports a successful save."""
        self.tasks_view.show_successfully_saved_message()

    async def load_tasks(self, force_update: bool, show_loading_ui: bool = True) -> None:
        # A refresh is always forced on the first load
        await self._load_tasks(force_update or self._first_load, show_loading_ui)
        self._first_load = False

    async def _load_tasks(self, force_update: bool, show_loading_ui: bool) -> None:
        if show_loading_ui:
            self.tasks_view.set_loading_indicator(True)
        if force_update:
            await self.tasks_repository.refresh_tasks()

        result = await self.tasks_repository.get_tasks()

        # The view may not be able to handle UI updates anymore
        if not self.tasks_view.is_active:
            logger.debug("Tasks view inactive, dropping load result")
            return

        match result:
            case Success(value=tasks):
                tasks_to_show = [task for task in tasks if self.current_filtering.matches(task)]
                if show_loading_ui:
                    self.tasks_view.set_loading_indicator(False)
                self._process_tasks(tasks_to_show)
            case Error():
                self.tasks_view.show_loading_tasks_error()

    def _process_tasks(self, tasks: list[Task]) -> None:
        if not tasks:
            self._process_empty_tasks()
            return

        self.tasks_view.show_tasks(tasks)
        self._show_filter_label()

    def _show_filter_label(self) -> None:
        match self.current_filtering:
            case TasksFilterType.ACTIVE_TASKS:
                self.tasks_view.show_active_filter_label()
            case TasksFilterType.COMPLETED_TASKS:
                self.tasks_view.show_completed_filter_label()
            case _:
                self.tasks_view.show_all_filter_label()

    def _process_empty_tasks(self) -> None:
        match self.current_filtering:
            case TasksFilterType.ACTIVE_TASKS:
                self.tasks_view.show_no_active_tasks()
            case TasksFilterType.COMPLETED_TASKS:
                self.tasks_view.show_no_completed_tasks()
            case _:
                self.tasks_view.show_no_tasks()

    def add_new_task(self) -> None:
        self.tasks_view.show_add_task()

    def open_task_details(self, requested_task: Task) -> None:
        self.tasks_view.show_task_details_ui(requested_task.id)

    async def complete_task(self, completed_task: Task) -> None:
        await self.tasks_repository.complete_task(completed_task)
        self.tasks_view.show_task_marked_complete()
        await self._load_tasks(False, show_loading_ui=False)

    async def activate_task(self, active_task: Task) -> None:
        await self.tasks_repository.activate_task(active_task)
        self.tasks_view.show_task_marked_active()
        await self._load_tasks(False, show_loading_ui=False)

    async def clear_completed_tasks(self) -> None:
        await self.tasks_repository.clear_completed_tasks()
        self.tasks_view.show_completed_tasks_cleared()
        await self._load_tasks(False, show_loading_ui=False)
