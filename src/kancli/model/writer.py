"""Save a board to the key-value store."""

import json
import logging

from kancli.constants import LISTS_KEY
from kancli.kv import KV
from kancli.model.board import Board, Snapshot

logger = logging.getLogger(__name__)


def serialize_snapshot(snapshot: Snapshot) -> bytes:
    """Encode a snapshot as a JSON list of three lists of task objects."""
    data = [[task.to_dict() for task in tasks] for tasks in snapshot]
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def save_snapshot(snapshot: Snapshot, kv: KV) -> None:
    kv.set(LISTS_KEY, serialize_snapshot(snapshot))


def save_board(board: Board, kv: KV) -> None:
    """Write the board's full contents under the lists key."""
    save_snapshot(board.snapshot(), kv)
    logger.debug("saved board %r", board)
