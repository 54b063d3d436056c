"""Load a board from the key-value store."""

import json
import logging

from kancli.constants import CORRUPT_KEY, LISTS_KEY
from kancli.errors import SnapshotError
from kancli.kv import KV
from kancli.model.board import Board, Snapshot, empty_snapshot
from kancli.model.task import Status, Task
from kancli.model.writer import save_snapshot

logger = logging.getLogger(__name__)


def deserialize_snapshot(data: bytes) -> Snapshot:
    """Decode stored JSON into a snapshot.

    Expects a list of three lists of task objects. A null column reads as
    empty. A task whose status disagrees with its column is moved into the
    column it was stored in, since membership is what the board displayed.
    """
    try:
        raw = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise SnapshotError(f"stored board is not valid JSON: {e}") from e

    if not isinstance(raw, list) or len(raw) != len(Status):
        raise SnapshotError(f"stored board must be a list of {len(Status)} columns")

    columns = []
    for status, items in zip(Status, raw):
        if items is None:
            items = []
        if not isinstance(items, list):
            raise SnapshotError(f"column {status.slug} is not a list")
        tasks = []
        for i, item in enumerate(items):
            try:
                task = Task.from_dict(item)
            except (TypeError, ValueError) as e:
                raise SnapshotError(f"bad task {i} in column {status.slug}: {e}") from e
            if task.status != status:
                logger.warning("task %r stored in %s has status %s", task.title, status.slug, task.status.slug)
                task = Task(status=status, title=task.title, description=task.description)
            tasks.append(task)
        columns.append(tuple(tasks))
    return tuple(columns)


def ensure_initialized(kv: KV) -> bool:
    """Write an empty board if the store has none. Returns True if it did."""
    if LISTS_KEY in kv:
        return False
    logger.info("initializing empty board")
    save_snapshot(empty_snapshot(), kv)
    return True


def load_snapshot(kv: KV) -> Snapshot:
    ensure_initialized(kv)
    return deserialize_snapshot(kv.get(LISTS_KEY))


def load_board(kv: KV) -> Board:
    """Read the stored board. Raises SnapshotError on unreadable data."""
    board = Board(load_snapshot(kv))
    logger.info("loaded board %r", board)
    return board


def recover_board(kv: KV) -> tuple[Board, SnapshotError | None]:
    """Load the stored board, falling back to an empty one on bad data.

    The unreadable bytes are copied to a backup key first, so the next
    save cannot destroy them. Returns the board and the error, if any.
    """
    try:
        return load_board(kv), None
    except SnapshotError as e:
        kv.set(CORRUPT_KEY, kv.get(LISTS_KEY) or b"")
        logger.warning("%s; starting with an empty board (backup in %s)", e, CORRUPT_KEY.decode())
        return Board(), e
