"""Data source protocol for task storage backends."""

from typing import Protocol

from ..models import Result, Task


class TasksDataSource(Protocol):
    """Interface for task storage backends.

    This protocol defines the contract shared by the local store, the remote
    store and the caching ``TasksRepository`` that sits in front of both.
    Every operation is a coroutine and may suspend while waiting on I/O.

    Reads return a ``Result`` instead of raising. Writes return nothing and
    are best-effort: a backend that has nothing to update does not complain.
    Operations that accept ``Task | str`` take either the task itself or its
    id.
    """

    async def get_tasks(self) -> Result[list[Task]]:
        """Load all tasks.

        Returns:
            Success with the tasks in storage order, or Error when the
            backend has no tasks.
        """
        ...

    async def get_task(self, task_id: str) -> Result[Task]:
        """Get a single task by ID.

        Returns:
            Success with the task, or Error when it is unknown.
        """
        ...

    async def save_task(self, task: Task) -> None:
        """Create or replace a task."""
        ...

    async def complete_task(self, task: Task | str) -> None:
        """Mark a task as completed."""
        ...

    async def activate_task(self, task: Task | str) -> None:
        """Mark a task as active (not completed)."""
        ...

    async def clear_completed_tasks(self) -> None:
        """Delete every completed task."""
        ...

    async def refresh_tasks(self) -> None:
        """Invalidate any cached state so the next read goes to the source."""
        ...

    async def delete_all_tasks(self) -> None:
        """Delete every task."""
        ...

    async def delete_task(self, task_id: str) -> None:
        """Delete a task by ID.

        Note:
            Does not raise an error if the task doesn't exist.
        """
        ...
