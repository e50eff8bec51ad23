"""Filesystem-based local data source for task storage."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from pathlib import Path

import frontmatter
import yaml

from ..models import Error, Result, Success, Task, TaskOrder
from .errors import LocalDataNotFoundError

logger = logging.getLogger(__name__)


class LocalDataSource:
    """
    Local data source for task files stored on the filesystem.

    Each task is stored as ``<id>.md`` with YAML front matter holding the
    title, completed flag and description. Hand-written files may use the
    markdown body for the description instead.
    Row order is maintained in a tasks.yaml file.

    The public coroutines run the blocking file I/O on a worker thread.
    """

    TASKS_YAML = "tasks.yaml"
    TASK_SUFFIX = ".md"

    def __init__(self, task_root: Path) -> None:
        """
        Initialize the data source.

        Args:
            task_root: Path to the tasks directory (e.g., .tasks/)
        """
        self.task_root = task_root

    def ensure_directory(self) -> None:
        """Create the tasks directory if it doesn't exist."""
        self.task_root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def is_valid_task_id(task_id: str) -> bool:
        """True if the id names a file directly inside the task root."""
        if not task_id or task_id in (".", ".."):
            return False
        return "/" not in task_id and "\\" not in task_id

    def get_filepath(self, task_id: str) -> Path:
        """Get the filesystem path for a task id.

        Raises:
            ValueError: If the id would resolve outside the task root
        """
        if not self.is_valid_task_id(task_id):
            raise ValueError(f"Invalid task id: {task_id!r}")
        return self.task_root / f"{task_id}{self.TASK_SUFFIX}"

    # --- TasksDataSource ---

    async def get_tasks(self) -> Result[list[Task]]:
        tasks = await asyncio.to_thread(self._load_tasks)
        if not tasks:
            return Error(LocalDataNotFoundError())
        return Success(tasks)

    async def get_task(self, task_id: str) -> Result[Task]:
        task = await asyncio.to_thread(self._read_task, task_id)
        if task is None:
            return Error(LocalDataNotFoundError())
        return Success(task)

    async def save_task(self, task: Task) -> None:
        await asyncio.to_thread(self._write_task, task)

    async def complete_task(self, task: Task | str) -> None:
        # Id resolution belongs to TasksRepository, which owns the cache
        if isinstance(task, Task):
            await asyncio.to_thread(self._update_completed, task.id, True)

    async def activate_task(self, task: Task | str) -> None:
        if isinstance(task, Task):
            await asyncio.to_thread(self._update_completed, task.id, False)

    async def clear_completed_tasks(self) -> None:
        await asyncio.to_thread(self._delete_completed)

    async def refresh_tasks(self) -> None:
        # Refreshing is handled by TasksRepository across all data sources
        pass

    async def delete_all_tasks(self) -> None:
        await asyncio.to_thread(self._delete_all)

    async def delete_task(self, task_id: str) -> None:
        await asyncio.to_thread(self._delete_task, task_id)

    # --- Private Methods ---

    def _iter_task_files(self) -> Iterator[Path]:
        """Iterate over all task files in the task root."""
        yield from self.task_root.glob(f"*{self.TASK_SUFFIX}")

    def _load_tasks(self) -> list[Task]:
        """Scan directory and return tasks in tasks.yaml order."""
        if not self.task_root.exists():
            return []

        tasks: dict[str, Task] = {}
        for filepath in self._iter_task_files():
            task = self._parse_task_file(filepath)
            if task:
                tasks[task.id] = task

        order = self._load_order()
        if order.reconcile(set(tasks)):
            self._save_order(order)

        return [tasks[task_id] for task_id in order.order]

    def _read_task(self, task_id: str) -> Task | None:
        if not self.is_valid_task_id(task_id):
            return None
        filepath = self.get_filepath(task_id)
        if not filepath.exists():
            return None
        return self._parse_task_file(filepath)

    def _parse_task_file(self, filepath: Path) -> Task | None:
        """Parse a single task file."""
        try:
            post = frontmatter.load(filepath)
            return Task.from_frontmatter(
                task_id=filepath.name.removesuffix(self.TASK_SUFFIX),
                metadata=post.metadata,
                body=post.content,
            )
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning("Skipping unreadable task file %s: %s", filepath, e)
            return None

    def _write_task(self, task: Task) -> None:
        """Insert or replace the task file and record its position."""
        self.ensure_directory()

        # The whole task lives in the front matter; the body stays empty
        post = frontmatter.Post("")
        post.metadata = task.to_frontmatter()

        # sort_keys=False preserves key order
        with self.get_filepath(task.id).open("w") as f:
            f.write(frontmatter.dumps(post, sort_keys=False))

        order = self._load_order()
        if order.add_task(task.id):
            self._save_order(order)

        logger.debug("Local task saved: %s", task.id)

    def _update_completed(self, task_id: str, completed: bool) -> None:
        task = self._read_task(task_id)
        if task is None:
            logger.debug("Local task not found for update: %s", task_id)
            return
        self._write_task(task.model_copy(update={"completed": completed}))

    def _delete_completed(self) -> None:
        for task in self._load_tasks():
            if task.completed:
                self._delete_task(task.id)

    def _delete_all(self) -> None:
        if not self.task_root.exists():
            return
        for filepath in self._iter_task_files():
            filepath.unlink()
        order = self._load_order()
        order.clear()
        self._save_order(order)
        logger.debug("Local tasks deleted")

    def _delete_task(self, task_id: str) -> None:
        # No file can exist for an id outside the task root
        if not self.is_valid_task_id(task_id):
            return
        filepath = self.get_filepath(task_id)
        if filepath.exists():
            filepath.unlink()

        order = self._load_order()
        if order.remove_task(task_id):
            self._save_order(order)

    def _load_order(self) -> TaskOrder:
        """Load tasks.yaml if it exists."""
        yaml_path = self.task_root / self.TASKS_YAML
        if not yaml_path.exists():
            return TaskOrder()
        with yaml_path.open() as f:
            data = yaml.safe_load(f) or {}
        return TaskOrder(**data)

    def _save_order(self, order: TaskOrder) -> None:
        """Write tasks.yaml to disk."""
        self.ensure_directory()
        yaml_path = self.task_root / self.TASKS_YAML

        data = order.model_dump()
        with yaml_path.open("w") as f:
            f.write("# Auto-generated - do not edit manually\n")
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
