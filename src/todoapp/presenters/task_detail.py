"""Presenter for a single task."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Error, Success, Task

if TYPE_CHECKING:
    from ..repositories import TasksDataSource
    from .contracts import TaskDetailView


class TaskDetailPresenter:
    """Listens to user actions on the task detail screen, retrieves the task and updates the view."""

    def __init__(
        self,
        task_id: str,
        tasks_repository: TasksDataSource,
        task_detail_view: TaskDetailView,
    ) -> None:
        self.task_id = task_id
        self.tasks_repository = tasks_repository
        self.task_detail_view = task_detail_view
        task_detail_view.presenter = self

    @property
    def _is_missing_id(self) -> bool:
        return not self.task_id.strip()

    async def start(self) -> None:
        await self._open_task()

    async def _open_task(self) -> None:
        if self._is_missing_id:
            self.task_detail_view.show_missing_task()
            return

        self.task_detail_view.set_loading_indicator(True)
        result = await self.tasks_repository.get_task(self.task_id)

        # The view may not be able to handle UI updates anymore
        if not self.task_detail_view.is_active:
            return

        match result:
            case Success(value=task):
                self.task_detail_view.set_loading_indicator(False)
                self._show_task(task)
            case Error():
                self.task_detail_view.show_missing_task()

    def edit_task(self) -> None:
        if self._is_missing_id:
            self.task_detail_view.show_missing_task()
            return
        self.task_detail_view.show_edit_task(self.task_id)

    async def delete_task(self) -> None:
        if self._is_missing_id:
            self.task_detail_view.show_missing_task()
            return
        await self.tasks_repository.delete_task(self.task_id)
        self.task_detail_view.show_task_deleted()

    async def complete_task(self) -> None:
        if self._is_missing_id:
            self.task_detail_view.show_missing_task()
            return
        await self.tasks_repository.complete_task(self.task_id)
        self.task_detail_view.show_task_marked_complete()

    async def activate_task(self) -> None:
        if self._is_missing_id:
            self.task_detail_view.show_missing_task()
            return
        await self.tasks_repository.activate_task(self.task_id)
        self.task_detail_view.show_task_marked_active()

    def _show_task(self, task: Task) -> None:
        view = self.task_detail_view
        if task.title.strip():
            view.show_title(task.title)
        else:
            view.hide_title()

        if task.description.strip():
            view.show_description(task.description)
        else:
            view.hide_description()

        view.show_completion_status(task.completed)
