"""Fixtures for UI tests."""

import pytest

from kancli.kv import KV
from kancli.model.task import Status, Task
from kancli.model.writer import save_snapshot


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "kancli.db"


@pytest.fixture
def seeded_db(db_path):
    """A store holding two todo tasks and one done task."""
    with KV.open(db_path) as kv:
        save_snapshot(
            (
                (Task(Status.TODO, "First", "one"), Task(Status.TODO, "Second", "two")),
                (),
                (Task(Status.DONE, "Old", ""),),
            ),
            kv,
        )
    return db_path
