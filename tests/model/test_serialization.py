"""Tests for snapshot encoding, loading and saving."""

import json

import pytest

from kancli.constants import CORRUPT_KEY, LISTS_KEY
from kancli.errors import SnapshotError
from kancli.kv import KV
from kancli.model.board import Board, empty_snapshot
from kancli.model.loader import deserialize_snapshot, ensure_initialized, load_board, recover_board
from kancli.model.task import Status, Task
from kancli.model.writer import save_board, serialize_snapshot
from tests.model.conftest import _make_board, _titles


@pytest.fixture
def kv():
    store = KV.memory()
    yield store
    store.close()


def test_serialize_field_names_and_order():
    board = _make_board(todo=["a", "b"], done=["c"])
    data = json.loads(serialize_snapshot(board.snapshot()))
    assert data == [
        [
            {"status": 0, "title": "a", "description": ""},
            {"status": 0, "title": "b", "description": ""},
        ],
        [],
        [{"status": 2, "title": "c", "description": ""}],
    ]


def test_serialize_empty_board():
    assert serialize_snapshot(empty_snapshot()) == b"[[],[],[]]"


def test_roundtrip_preserves_everything(board):
    board.insert_task(Task(Status.DONE, "Ünïcode ✅", "multi\nline"))
    restored = Board(deserialize_snapshot(serialize_snapshot(board.snapshot())))
    assert restored.snapshot() == board.snapshot()


def test_deserialize_null_column_is_empty():
    snap = deserialize_snapshot(b'[null, [{"status": 1, "title": "x", "description": ""}], []]')
    assert snap == ((), (Task(Status.IN_PROGRESS, "x"),), ())


def test_deserialize_moves_mismatched_status_to_its_column():
    snap = deserialize_snapshot(b'[[{"status": 2, "title": "x", "description": ""}], [], []]')
    assert snap[0] == (Task(Status.TODO, "x"),)


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b"\xff",
        b"{}",
        b"[[], []]",
        b"[[], [], [], []]",
        b'[[], "x", []]',
        b'[[{"status": "todo"}], [], []]',
        b"[[1], [], []]",
        b"[" * 100000 + b"]" * 100000,
    ],
)
def test_deserialize_rejects_bad_data(data):
    with pytest.raises(SnapshotError):
        deserialize_snapshot(data)


def test_first_load_initializes_store(kv):
    assert kv.get(LISTS_KEY) is None
    board = load_board(kv)
    assert board.snapshot() == empty_snapshot()
    assert kv.get(LISTS_KEY) == b"[[],[],[]]"


def test_ensure_initialized_leaves_existing_data(kv):
    kv.set(LISTS_KEY, b'[[{"status": 0, "title": "keep", "description": ""}], [], []]')
    assert ensure_initialized(kv) is False
    assert _titles(load_board(kv)) == [["keep"], [], []]


def test_save_then_load(kv, board):
    save_board(board, kv)
    assert load_board(kv).snapshot() == board.snapshot()


def test_load_bad_data_raises(kv):
    kv.set(LISTS_KEY, b"garbage")
    with pytest.raises(SnapshotError):
        load_board(kv)


def test_recover_falls_back_to_empty_and_backs_up(kv):
    kv.set(LISTS_KEY, b"garbage")
    board, error = recover_board(kv)
    assert isinstance(error, SnapshotError)
    assert board.snapshot() == empty_snapshot()
    assert kv.get(CORRUPT_KEY) == b"garbage"


def test_recover_clean_load_has_no_error(kv, board):
    save_board(board, kv)
    loaded, error = recover_board(kv)
    assert error is None
    assert loaded.snapshot() == board.snapshot()
    assert kv.get(CORRUPT_KEY) is None


def test_recover_from_deeply_nested_data(kv):
    nested = b"[" * 100000 + b"]" * 100000
    kv.set(LISTS_KEY, nested)
    board, error = recover_board(kv)
    assert isinstance(error, SnapshotError)
    assert board.snapshot() == empty_snapshot()
    assert kv.get(CORRUPT_KEY) == nested
