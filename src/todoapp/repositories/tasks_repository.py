"""Caching repository in front of the local and remote data sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..models import Error, Result, Success, Task
from .errors import RemoteDataNotFoundError
from .protocol import TasksDataSource

logger = logging.getLogger(__name__)


class TasksRepository:
    """Loads tasks from the data sources into an in-memory cache.

    Reads are answered from the cache when possible, then from the local
    data source, then from the remote one. This is a deliberately simple
    synchronisation: the remote data source is only used when the local
    store is empty or the cache has been marked dirty by ``refresh_tasks()``.

    Writes update the cache first and then go to the remote and local data
    sources in that order. Exceptions raised by a data source during a write
    are not caught here; the cache keeps the new state either way.

    The repository is a plain object. Create one per application (or per
    test) and pass it to whatever needs it.
    """

    def __init__(
        self,
        remote_data_source: TasksDataSource,
        local_data_source: TasksDataSource,
    ) -> None:
        self.remote_data_source = remote_data_source
        self.local_data_source = local_data_source
        self._cached_tasks: dict[str, Task] = {}
        self._cache_is_dirty = False

    @property
    def cached_tasks(self) -> Mapping[str, Task]:
        """Read-only view of the cache, keyed by task id in insertion order."""
        return MappingProxyType(self._cached_tasks)

    @property
    def cache_is_dirty(self) -> bool:
        """True when the next get_tasks() must go to the remote data source."""
        return self._cache_is_dirty

    # --- Reads ---

    async def get_tasks(self) -> Result[list[Task]]:
        """Get tasks from the cache, local or remote data source, whichever is available first."""
        if self._cached_tasks and not self._cache_is_dirty:
            logger.debug("get_tasks: served %d tasks from cache", len(self._cached_tasks))
            return Success(self._snapshot())

        if self._cache_is_dirty:
            logger.debug("get_tasks: cache is dirty, fetching from remote")
            return await self._get_tasks_from_remote_data_source()

        match await self.local_data_source.get_tasks():
            case Success(value=tasks):
                logger.debug("get_tasks: loaded %d tasks from local", len(tasks))
                self._refresh_cache(tasks)
                return Success(self._snapshot())
            case Error(cause=cause):
                logger.debug("get_tasks: local unavailable (%r), fetching from remote", cause)
                return await self._get_tasks_from_remote_data_source()

    async def get_task(self, task_id: str) -> Result[Task]:
        """Get a task from the cache, local or remote data source, whichever has it first."""
        cached = self._cached_tasks.get(task_id)
        if cached is not None:
            logger.debug("get_task: cache hit for %s", task_id)
            return Success(cached)

        match await self.local_data_source.get_task(task_id):
            case Success(value=task):
                return Success(self._cache(task))
            case Error():
                pass

        match await self.remote_data_source.get_task(task_id):
            case Success(value=task):
                return Success(self._cache(task))
            case Error():
                logger.debug("get_task: %s not found in any data source", task_id)
                return Error(RemoteDataNotFoundError(task_id))

    # --- Writes ---

    async def save_task(self, task: Task) -> None:
        cached = self._cache(task)
        await self.remote_data_source.save_task(cached)
        await self.local_data_source.save_task(cached)

    async def complete_task(self, task: Task | str) -> None:
        if isinstance(task, str):
            cached = self._cached_tasks.get(task)
            if cached is None:
                logger.debug("complete_task: %s not cached, ignoring", task)
                return
            task = cached

        completed = self._cache(task.model_copy(update={"completed": True}))
        await self.remote_data_source.complete_task(completed)
        await self.local_data_source.complete_task(completed)

    async def activate_task(self, task: Task | str) -> None:
        if isinstance(task, str):
            cached = self._cached_tasks.get(task)
            if cached is None:
                logger.debug("activate_task: %s not cached, ignoring", task)
                return
            task = cached

        active = self._cache(task.model_copy(update={"completed": False}))
        await self.remote_data_source.activate_task(active)
        await self.local_data_source.activate_task(active)

    async def clear_completed_tasks(self) -> None:
        await self.remote_data_source.clear_completed_tasks()
        await self.local_data_source.clear_completed_tasks()

        self._cached_tasks = {
            task_id: task for task_id, task in self._cached_tasks.items() if task.is_active
        }

    async def refresh_tasks(self) -> None:
        self._cache_is_dirty = True

    async def delete_all_tasks(self) -> None:
        await self.remote_data_source.delete_all_tasks()
        await self.local_data_source.delete_all_tasks()
        self._cached_tasks.clear()

    async def delete_task(self, task_id: str) -> None:
        await self.remote_data_source.delete_task(task_id)
        await self.local_data_source.delete_task(task_id)
        self._cached_tasks.pop(task_id, None)

    # --- Private Methods ---

    async def _get_tasks_from_remote_data_source(self) -> Result[list[Task]]:
        match await self.remote_data_source.get_tasks():
            case Success(value=tasks):
                logger.info("Loaded %d tasks from remote", len(tasks))
                self._refresh_cache(tasks)
                await self._refresh_local_data_source(tasks)
                return Success(self._snapshot())
            case Error(cause=cause):
                logger.debug("get_tasks: remote unavailable (%r)", cause)
                return Error(RemoteDataNotFoundError())

    def _refresh_cache(self, tasks: list[Task]) -> None:
        self._cached_tasks.clear()
        for task in tasks:
            self._cache(task)
        self._cache_is_dirty = False

    async def _refresh_local_data_source(self, tasks: list[Task]) -> None:
        await self.local_data_source.delete_all_tasks()
        for task in tasks:
            await self.local_data_source.save_task(task)

    def _cache(self, task: Task) -> Task:
        self._cached_tasks[task.id] = task
        return task

    def _snapshot(self) -> list[Task]:
        return list(self._cached_tasks.values())
