"""Task domain model."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _new_task_id() -> str:
    return uuid4().hex


class Task(BaseModel):
    """A single todo item.

    Tasks are immutable values. Changing a task means building a copy with
    ``model_copy(update=...)``, so a task handed to one layer can never be
    mutated underneath another.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_task_id)
    title: str = ""
    description: str = ""
    completed: bool = False

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def is_empty(self) -> bool:
        """True when the task has neither a title nor a description."""
        return not self.title.strip() and not self.description.strip()

    @property
    def title_for_list(self) -> str:
        """Title for list display - falls back to the description."""
        if self.title.strip():
            return self.title
        return self.description

    def to_frontmatter(self) -> dict:
        """Convert to dict suitable for YAML front matter.

        The description lives in the front matter rather than the markdown
        body, since the body loses leading and trailing whitespace on load.
        """
        return {
            "title": self.title,
            "completed": self.completed,
            "description": self.description,
        }

    @classmethod
    def from_frontmatter(cls, task_id: str, metadata: dict, body: str) -> "Task":
        """Create Task from parsed front matter.

        Hand-written files may put the description in the body instead.
        """
        description = metadata.get("description")
        return cls(
            id=task_id,
            title=metadata.get("title") or "",
            description=body if description is None else str(description),
            completed=bool(metadata.get("completed", False)),
        )
