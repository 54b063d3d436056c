"""Tests for board navigation and task transitions."""

import pytest

from kancli.model.board import Board, empty_snapshot
from kancli.model.task import Status, Task
from tests.model.conftest import _make_board, _titles


def test_new_board_is_empty_and_focused_on_todo():
    board = Board()
    assert board.focused is Status.TODO
    assert board.snapshot() == empty_snapshot()
    assert [c.status for c in board] == list(Status)


def test_focus_next_cycles():
    board = Board()
    seen = []
    for _ in range(3):
        board.focus_next()
        seen.append(board.focused)
    assert seen == [Status.IN_PROGRESS, Status.DONE, Status.TODO]


def test_focus_prev_cycles():
    board = Board()
    seen = []
    for _ in range(3):
        board.focus_prev()
        seen.append(board.focused)
    assert seen == [Status.DONE, Status.IN_PROGRESS, Status.TODO]


def test_focus_does_not_touch_tasks(board):
    before = board.snapshot()
    board.focus_next()
    board.focus_prev()
    assert board.snapshot() == before


def test_advance_todo_to_in_progress(board):
    moved = board.advance_selected()
    assert moved == Task(Status.IN_PROGRESS, "Write spec")
    assert _titles(board) == [["Review"], ["Build", "Write spec"], ["Plan"]]


def test_advance_in_progress_to_done(board):
    board.focus_next()
    moved = board.advance_selected()
    assert moved.status is Status.DONE
    assert board.column(Status.DONE)[-1] == Task(Status.DONE, "Build")
    assert len(board.column(Status.IN_PROGRESS)) == 0


def test_advance_done_wraps_to_todo(board):
    board.focus_prev()
    assert board.focused is Status.DONE
    moved = board.advance_selected()
    assert moved.status is Status.TODO
    assert _titles(board) == [["Write spec", "Review", "Plan"], ["Build"], []]


def test_advance_moves_selected_not_first(board):
    board.select_next()
    board.advance_selected()
    assert _titles(board)[0] == ["Write spec"]
    assert _titles(board)[1] == ["Build", "Review"]


def test_status_always_matches_column(board):
    for _ in range(5):
        board.advance_selected()
        board.focus_next()
    for column in board:
        assert all(task.status is column.status for task in column)


def test_advance_on_empty_column_is_noop():
    board = _make_board(todo=["a"])
    board.focus_next()
    before = board.snapshot()
    assert board.advance_selected() is None
    assert board.snapshot() == before


def test_delete_on_empty_column_is_noop():
    board = _make_board(done=["a"])
    before = board.snapshot()
    assert board.delete_selected() is None
    assert board.snapshot() == before


def test_delete_removes_selected(board):
    board.select_next()
    deleted = board.delete_selected()
    assert deleted.title == "Review"
    assert _titles(board) == [["Write spec"], ["Build"], ["Plan"]]
    assert board.focused_column.selected.title == "Write spec"


def test_insert_task_appends_to_matching_column(board):
    board.insert_task(Task(Status.IN_PROGRESS, "T", "D"))
    assert _titles(board) == [["Write spec", "Review"], ["Build", "T"], ["Plan"]]
    assert board.column(Status.IN_PROGRESS)[-1].description == "D"


def test_insert_task_ignores_focus():
    board = Board()
    board.insert_task(Task(Status.DONE, "x"))
    assert board.focused is Status.TODO
    assert _titles(board) == [[], [], ["x"]]


def test_snapshot_preserves_order(board):
    snap = board.snapshot()
    assert [[t.title for t in col] for col in snap] == _titles(board)


def test_restore_replaces_contents_and_cursors(board):
    board.select_next()
    board.restore([[Task(Status.TODO, "x")], [], [Task(Status.DONE, "y"), Task(Status.DONE, "z")]])
    assert _titles(board) == [["x"], [], ["y", "z"]]
    assert board.column(Status.TODO).cursor == 0
    assert board.column(Status.IN_PROGRESS).cursor is None


def test_restore_roundtrip(board):
    other = Board(board.snapshot())
    assert other.snapshot() == board.snapshot()


def test_restore_requires_three_columns():
    with pytest.raises(ValueError):
        Board().restore([[], []])
