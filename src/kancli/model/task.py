"""Task entity and status ordering."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any

STATUS_ALIASES = {
    "todo": "todo",
    "to-do": "todo",
    "in-progress": "in-progress",
    "inprogress": "in-progress",
    "doing": "in-progress",
    "done": "done",
}


class Status(IntEnum):
    """Column a task lives in. The ordinal is the stored value."""

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2

    @property
    def slug(self) -> str:
        return ("todo", "in-progress", "done")[self]

    @property
    def title(self) -> str:
        return ("To Do", "In Progress", "Done")[self]

    def next(self) -> Status:
        """Following status; done wraps to todo."""
        return Status((self + 1) % len(Status))

    def prev(self) -> Status:
        """Preceding status; todo wraps to done."""
        return Status((self - 1) % len(Status))

    @classmethod
    def parse(cls, name: str) -> Status:
        """Look up a status by slug or alias. Raises ValueError if unknown."""
        slug = STATUS_ALIASES.get(name.strip().lower())
        if slug is None:
            raise ValueError(f"unknown status {name!r}")
        return next(s for s in cls if s.slug == slug)


@dataclass(frozen=True)
class Task:
    """A card on the board.

    Immutable: status only changes by building an advanced copy, which the
    board does while relocating the task.
    """

    status: Status
    title: str = ""
    description: str = ""

    def advanced(self) -> Task:
        """Copy of this task with the next status."""
        return replace(self, status=self.status.next())

    def to_dict(self) -> dict[str, Any]:
        return {"status": int(self.status), "title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Build a task from its stored mapping.

        Raises ValueError/TypeError when fields are missing or mistyped.
        """
        if not isinstance(data, dict):
            raise TypeError(f"task must be an object, got {type(data).__name__}")
        status = data.get("status", 0)
        if isinstance(status, bool) or not isinstance(status, int):
            raise TypeError(f"task status must be an integer, got {status!r}")
        title = data.get("title", "")
        description = data.get("description", "")
        if not isinstance(title, str) or not isinstance(description, str):
            raise TypeError("task title and description must be strings")
        return cls(status=Status(status), title=title, description=description)


def as_task(item: Any) -> Task:
    """Narrow a column item to a Task, failing loudly on anything else."""
    if not isinstance(item, Task):
        raise TypeError(f"expected Task, got {type(item).__name__}")
    return item
