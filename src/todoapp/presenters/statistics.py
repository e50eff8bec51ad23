"""Presenter for task statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Error, Success

if TYPE_CHECKING:
    from ..repositories import TasksDataSource
    from .contracts import StatisticsView


class StatisticsPresenter:
    """Loads all tasks and reports how many are active and completed."""

    def __init__(self, tasks_repository: TasksDataSource, statistics_view: StatisticsView) -> None:
        self.tasks_repository = tasks_repository
        self.statistics_view = statistics_view
        statistics_view.presenter = self

    async def start(self) -> None:
        await self._load_statistics()

    async def _load_statistics(self) -> None:
        self.statistics_view.set_progress_indicator(True)

        result = await self.tasks_repository.get_tasks()

        # The view may not be able to handle UI updates anymore
        if not self.statistics_view.is_active:
            return

        match result:
            case Success(value=tasks):
                completed_tasks = sum(1 for task in tasks if task.completed)
                active_tasks = len(tasks) - completed_tasks
                self.statistics_view.set_progress_indicator(False)
                self.statistics_view.show_statistics(active_tasks, completed_tasks)
            case Error():
                self.statistics_view.show_loading_statistics_error()
