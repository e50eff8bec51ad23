"""Row ordering for the local task store."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TaskOrder(BaseModel):
    """Represents the ordering of tasks in tasks.yaml."""

    version: int = 1
    order: list[str] = Field(default_factory=list)

    def add_task(self, task_id: str) -> bool:
        """Append task to the end unless already present.

        Returns True if the order changed.
        """
        if task_id in self.order:
            return False
        self.order.append(task_id)
        return True

    def remove_task(self, task_id: str) -> bool:
        """Remove task from the order. Returns True if it was present."""
        if task_id not in self.order:
            return False
        self.order.remove(task_id)
        return True

    def reconcile(self, task_ids: set[str]) -> bool:
        """Align the order with the ids actually present on disk.

        - Ids without a backing file are dropped
        - Files missing from the order are appended, sorted by id

        Returns True if the order changed.
        """
        kept = [task_id for task_id in self.order if task_id in task_ids]
        missing = sorted(task_ids - set(kept))
        new_order = kept + missing
        if new_order == self.order:
            return False
        self.order = new_order
        return True

    def clear(self) -> None:
        """Forget every task, keeping the file version."""
        self.order.clear()
