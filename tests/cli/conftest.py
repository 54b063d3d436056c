"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from kancli.config import Config
from kancli.kv import KV
from kancli.model.task import Status, Task
from kancli.model.writer import save_snapshot


def _args(config, **kwargs):
    kwargs.setdefault("json", False)
    return Namespace(config=config, **kwargs)


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=tmp_path / "data")


@pytest.fixture
def seeded(config):
    """A store with two todo tasks and one in progress."""
    with KV.open(config.db_path) as kv:
        save_snapshot(
            (
                (Task(Status.TODO, "First card", "Description one."), Task(Status.TODO, "Second card", "")),
                (Task(Status.IN_PROGRESS, "Doing card", ""),),
                (),
            ),
            kv,
        )
    return config
