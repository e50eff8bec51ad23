"""Simulated remote data source."""

from __future__ import annotations

import asyncio
import logging

from ..models import Error, Result, Success, Task
from .errors import RemoteDataNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LATENCY = 0.5

SEED_TASKS = (
    Task(
        title="Build tower in Pisa",
        description="Ground looks good, no foundation work required.",
    ),
    Task(
        title="Finish bridge in Tacoma",
        description="Found awesome girders at half the cost!",
    ),
)


class RemoteDataSource:
    """Remote data source backed by an in-memory table.

    Stands in for a network service: every operation sleeps for ``latency``
    seconds before touching the table, so callers see the same suspension
    points a real client would produce.
    """

    def __init__(self, latency: float = DEFAULT_LATENCY, seed: bool = True) -> None:
        """
        Args:
            latency: Simulated round-trip time in seconds
            seed: Start with the sample tasks in the table
        """
        self.latency = latency
        self._tasks: dict[str, Task] = {}
        if seed:
            for task in SEED_TASKS:
                self._tasks[task.id] = task

    async def _round_trip(self, operation: str) -> None:
        logger.debug("Remote %s (latency=%.3fs)", operation, self.latency)
        await asyncio.sleep(self.latency)

    async def get_tasks(self) -> Result[list[Task]]:
        await self._round_trip("get_tasks")
        if not self._tasks:
            return Error(RemoteDataNotFoundError())
        return Success(list(self._tasks.values()))

    async def get_task(self, task_id: str) -> Result[Task]:
        await self._round_trip("get_task")
        task = self._tasks.get(task_id)
        if task is None:
            return Error(RemoteDataNotFoundError())
        return Success(task)

    async def save_task(self, task: Task) -> None:
        await self._round_trip("save_task")
        self._tasks[task.id] = task

    async def complete_task(self, task: Task | str) -> None:
        await self._round_trip("complete_task")
        self._set_completed(task, True)

    async def activate_task(self, task: Task | str) -> None:
        await self._round_trip("activate_task")
        self._set_completed(task, False)

    async def clear_completed_tasks(self) -> None:
        await self._round_trip("clear_completed_tasks")
        self._tasks = {task_id: task for task_id, task in self._tasks.items() if task.is_active}

    async def refresh_tasks(self) -> None:
        # Refreshing is handled by TasksRepository across all data sources
        pass

    async def delete_all_tasks(self) -> None:
        await self._round_trip("delete_all_tasks")
        self._tasks.clear()

    async def delete_task(self, task_id: str) -> None:
        await self._round_trip("delete_task")
        self._tasks.pop(task_id, None)

    def _set_completed(self, task: Task | str, completed: bool) -> None:
        task_id = task.id if isinstance(task, Task) else task
        stored = self._tasks.get(task_id)
        if stored is None:
            if isinstance(task, Task):
                self._tasks[task_id] = task.model_copy(update={"completed": completed})
            return
        self._tasks[task_id] = stored.model_copy(update={"completed": completed})
