"""Presenter for creating and editing tasks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..models import Error, Success, Task

if TYPE_CHECKING:
    from ..repositories import TasksDataSource
    from .contracts import AddEditTaskView

logger = logging.getLogger(__name__)


class AddEditTaskPresenter:
    """Loads an existing task into the form, or creates a new one, and saves it."""

    def __init__(
        self,
        task_id: str | None,
        tasks_repository: TasksDataSource,
        add_task_view: AddEditTaskView,
        should_load_data_from_repo: bool = True,
    ) -> None:
        """
        Args:
            task_id: Id of the task to edit, or None to create a new task
            tasks_repository: Where tasks are read from and saved to
            add_task_view: The form view
            should_load_data_from_repo: Whether start() should populate the
                form from the repository (False when the view restored its
                own state)
        """
        self.task_id = task_id
        self.tasks_repository = tasks_repository
        self.add_task_view = add_task_view
        self.is_data_missing = should_load_data_from_repo
        self._loaded_task: Task | None = None
        add_task_view.presenter = self

    @property
    def is_new_task(self) -> bool:
        return self.task_id is None

    async def start(self) -> None:
        if not self.is_new_task and self.is_data_missing:
            await self.populate_task()

    async def populate_task(self) -> None:
        if self.task_id is None:
            raise RuntimeError("populate_task() was called but task is new.")

        result = await self.tasks_repository.get_task(self.task_id)
        if not self.add_task_view.is_active:
            return

        match result:
            case Success(value=task):
                self._loaded_task = task
                self.add_task_view.set_title(task.title)
                self.add_task_view.set_description(task.description)
                self.is_data_missing = False
            case Error():
                self.add_task_view.show_empty_task_error()

    async def save_task(self, title: str, description: str) -> None:
        if self.is_new_task:
            await self._create_task(title, description)
        else:
            await self._update_task(title, description)

    async def _create_task(self, title: str, description: str) -> None:
        new_task = Task(title=title, description=description)
        if new_task.is_empty:
            self.add_task_view.show_empty_task_error()
            return

        await self.tasks_repository.save_task(new_task)
        logger.info("Task created: %s", new_task.id)
        self.add_task_view.show_tasks_list()

    async def _update_task(self, title: str, description: str) -> None:
        if self.task_id is None:
            raise RuntimeError("update_task() was called but task is new.")

        if self._loaded_task is not None:
            task = self._loaded_task.model_copy(update={"title": title, "description": description})
        else:
            task = Task(id=self.task_id, title=title, description=description)

        await self.tasks_repository.save_task(task)
        logger.info("Task updated: %s", task.id)
        # After an edit, go back to the list
        self.add_task_view.show_tasks_list()
