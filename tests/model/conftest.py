"""Shared test helpers for model tests."""

import pytest

from kancli.model.board import Board
from kancli.model.task import Status, Task


def _make_board(todo=(), in_progress=(), done=()):
    """Build a board from title lists, one per column."""
    return Board(
        [
            [Task(Status.TODO, title) for title in todo],
            [Task(Status.IN_PROGRESS, title) for title in in_progress],
            [Task(Status.DONE, title) for title in done],
        ]
    )


def _titles(board):
    return [[t.title for t in column] for column in board]


@pytest.fixture
def board():
    """Two tasks in todo, one in progress, one done."""
    return _make_board(todo=["Write spec", "Review"], in_progress=["Build"], done=["Plan"])
