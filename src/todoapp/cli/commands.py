"""CLI commands.

Each command drives one presenter with a console view and returns an exit
code (0 for success, non-zero for error).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..models import Error
from ..presenters import (
    AddEditTaskPresenter,
    StatisticsPresenter,
    TaskDetailPresenter,
    TasksFilterType,
    TasksPresenter,
)
from .output import error
from .views import (
    ConsoleAddEditTaskView,
    ConsoleStatisticsView,
    ConsoleTaskDetailView,
    ConsoleTasksView,
)

if TYPE_CHECKING:
    from ..repositories import TasksRepository

logger = logging.getLogger(__name__)


async def run_list(
    repository: TasksRepository,
    filtering: TasksFilterType = TasksFilterType.ALL_TASKS,
    refresh: bool = False,
) -> int:
    """List tasks, optionally refreshing from the remote data source first."""
    view = ConsoleTasksView()
    presenter = TasksPresenter(repository, view, refresh_on_first_load=False)
    presenter.current_filtering = filtering
    await presenter.load_tasks(refresh)
    return 1 if view.failed else 0


async def run_show(repository: TasksRepository, task_id: str) -> int:
    view = ConsoleTaskDetailView()
    await TaskDetailPresenter(task_id, repository, view).start()
    return 1 if view.failed else 0


async def run_add(repository: TasksRepository, title: str, description: str = "") -> int:
    view = ConsoleAddEditTaskView()
    await AddEditTaskPresenter(None, repository, view).save_task(title, description)
    return 1 if view.failed else 0


async def run_edit(
    repository: TasksRepository,
    task_id: str,
    title: str | None = None,
    description: str | None = None,
) -> int:
    """Edit a task, keeping any field that was not given."""
    view = ConsoleAddEditTaskView()
    presenter = AddEditTaskPresenter(task_id, repository, view)
    await presenter.start()
    if view.failed:
        return 1

    await presenter.save_task(
        title if title is not None else view.title,
        description if description is not None else view.description,
    )
    return 1 if view.failed else 0


async def _load_into_cache(repository: TasksRepository, task_id: str) -> bool:
    """Make sure the task exists and the repository has it cached.

    Completing or activating by id only resolves against the repository cache.
    Reports the missing task and returns False otherwise.
    """
    if isinstance(await repository.get_task(task_id), Error):
        error(f"Task not found: {task_id}")
        return False
    return True


async def run_complete(repository: TasksRepository, task_id: str) -> int:
    if not await _load_into_cache(repository, task_id):
        return 1
    view = ConsoleTaskDetailView()
    await TaskDetailPresenter(task_id, repository, view).complete_task()
    return 1 if view.failed else 0


async def run_activate(repository: TasksRepository, task_id: str) -> int:
    if not await _load_into_cache(repository, task_id):
        return 1
    view = ConsoleTaskDetailView()
    await TaskDetailPresenter(task_id, repository, view).activate_task()
    return 1 if view.failed else 0


async def run_delete(repository: TasksRepository, task_id: str) -> int:
    if not await _load_into_cache(repository, task_id):
        return 1
    view = ConsoleTaskDetailView()
    await TaskDetailPresenter(task_id, repository, view).delete_task()
    return 1 if view.failed else 0


async def run_clear_completed(repository: TasksRepository) -> int:
    view = ConsoleTasksView()
    presenter = TasksPresenter(repository, view, refresh_on_first_load=False)
    await presenter.clear_completed_tasks()
    return 1 if view.failed else 0


async def run_stats(repository: TasksRepository) -> int:
    view = ConsoleStatisticsView()
    await StatisticsPresenter(repository, view).start()
    return 1 if view.failed else 0
