"""Board model: tasks, columns, the board state machine and the create form."""

from kancli.model.board import Board, Snapshot, empty_snapshot
from kancli.model.column import Column
from kancli.model.form import Form, Stage
from kancli.model.loader import deserialize_snapshot, load_board
from kancli.model.task import Status, Task, as_task
from kancli.model.writer import save_board, serialize_snapshot

__all__ = [
    "Board",
    "Column",
    "Form",
    "Snapshot",
    "Stage",
    "Status",
    "Task",
    "as_task",
    "deserialize_snapshot",
    "empty_snapshot",
    "load_board",
    "save_board",
    "serialize_snapshot",
]
