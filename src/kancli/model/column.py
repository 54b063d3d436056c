"""Ordered task list with a selection cursor."""

from __future__ import annotations

from typing import Iterable, Iterator

from kancli.model.task import Status, Task, as_task


class Column:
    """Tasks under one status, in user-visible order.

    The cursor is the index of the highlighted task, or None when the
    column is empty. It is kept valid across every mutation.
    """

    def __init__(self, status: Status, tasks: Iterable[Task] = ()) -> None:
        self.status = status
        self._tasks: list[Task] = []
        self._cursor: int | None = None
        self.replace(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def __repr__(self) -> str:
        return f"<Column {self.status.slug} [{len(self._tasks)}] cursor={self._cursor}>"

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def cursor(self) -> int | None:
        return self._cursor

    @property
    def selected(self) -> Task | None:
        """The highlighted task, or None if the column is empty."""
        if self._cursor is None:
            return None
        return as_task(self._tasks[self._cursor])

    def select(self, index: int) -> None:
        """Move the cursor to index, clamped into range."""
        if not self._tasks:
            self._cursor = None
            return
        self._cursor = max(0, min(index, len(self._tasks) - 1))

    def select_next(self) -> None:
        if self._cursor is not None:
            self.select(self._cursor + 1)

    def select_prev(self) -> None:
        if self._cursor is not None:
            self.select(self._cursor - 1)

    def insert(self, index: int, task: Task) -> None:
        """Insert task at index (clamped to the end)."""
        task = as_task(task)
        if task.status != self.status:
            raise ValueError(f"{task.status.slug} task cannot live in the {self.status.slug} column")
        index = max(0, min(index, len(self._tasks)))
        self._tasks.insert(index, task)
        if self._cursor is None:
            self._cursor = 0
        elif index <= self._cursor:
            self._cursor += 1

    def append(self, task: Task) -> None:
        self.insert(len(self._tasks), task)

    def remove_at(self, index: int) -> Task:
        """Remove and return the task at index, re-clamping the cursor."""
        task = self._tasks.pop(index)
        if not self._tasks:
            self._cursor = None
        elif self._cursor is not None and (index < self._cursor or self._cursor >= len(self._tasks)):
            self._cursor -= 1
        return task

    def replace(self, tasks: Iterable[Task]) -> None:
        """Swap in a new task sequence and reset the cursor to the top."""
        self._tasks = []
        self._cursor = None
        for task in tasks:
            self.append(task)
        self.select(0)
