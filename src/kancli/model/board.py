"""Board state machine: three columns, focus, and task transitions."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from kancli.model.column import Column
from kancli.model.task import Status, Task

Snapshot = tuple[tuple[Task, ...], tuple[Task, ...], tuple[Task, ...]]


def empty_snapshot() -> Snapshot:
    return ((), (), ())


class Board:
    """The three status columns plus which one has focus.

    Task status and column membership only change together, through
    ``advance_selected`` and ``insert_task``.
    """

    def __init__(self, snapshot: Sequence[Iterable[Task]] | None = None) -> None:
        self.columns: tuple[Column, ...] = tuple(Column(status) for status in Status)
        self.focused: Status = Status.TODO
        if snapshot is not None:
            self.restore(snapshot)

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.status.slug}={len(c)}" for c in self.columns)
        return f"<Board focused={self.focused.slug} {counts}>"

    def column(self, status: Status) -> Column:
        return self.columns[status]

    @property
    def focused_column(self) -> Column:
        return self.columns[self.focused]

    # -- navigation --

    def focus_next(self) -> None:
        self.focused = self.focused.next()

    def focus_prev(self) -> None:
        self.focused = self.focused.prev()

    def select_next(self) -> None:
        self.focused_column.select_next()

    def select_prev(self) -> None:
        self.focused_column.select_prev()

    # -- transitions --

    def advance_selected(self) -> Task | None:
        """Move the focused column's selected task to the next column.

        Returns the relocated task, or None when nothing is selected.
        """
        column = self.focused_column
        task = column.selected
        if task is None:
            return None
        column.remove_at(column.cursor)
        moved = task.advanced()
        self.columns[moved.status].append(moved)
        return moved

    def delete_selected(self) -> Task | None:
        """Remove the focused column's selected task for good."""
        column = self.focused_column
        if column.selected is None:
            return None
        return column.remove_at(column.cursor)

    def insert_task(self, task: Task) -> None:
        """Append task to the column matching its status."""
        self.columns[task.status].append(task)

    # -- snapshots --

    def snapshot(self) -> Snapshot:
        """Order-preserving copy of every column's tasks, indexed by status."""
        return tuple(column.tasks for column in self.columns)

    def restore(self, snapshot: Sequence[Iterable[Task]]) -> None:
        """Replace all column contents wholesale. Cursors reset."""
        if len(snapshot) != len(self.columns):
            raise ValueError(f"snapshot needs {len(self.columns)} columns, got {len(snapshot)}")
        for column, tasks in zip(self.columns, snapshot):
            column.replace(tasks)
