"""Tests for argument parsing and dispatch."""

import pytest

from kancli.__main__ import main
from kancli.cli import build_parser
from kancli.cli.task import task_add, task_list


def test_parse_task_add():
    args = build_parser().parse_args(["task", "add", "Title", "--description", "D", "--status", "done"])
    assert args.func is task_add
    assert (args.title, args.description, args.status) == ("Title", "D", "done")


def test_task_without_verb_lists():
    args = build_parser().parse_args(["task"])
    assert args.func is task_list
    assert args.status is None


def test_global_options_survive_subcommand():
    args = build_parser().parse_args(["--data-dir", "/tmp/x", "board"])
    assert args.data_dir == "/tmp/x"


def test_no_command_has_no_handler():
    args = build_parser().parse_args([])
    assert not hasattr(args, "func")


def test_main_runs_command(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--data-dir", str(tmp_path), "task", "add", "From main"])
    assert exc.value.code == 0
    assert "Added 'From main' to To Do at 1" in capsys.readouterr().out

    with pytest.raises(SystemExit):
        main(["task", "list", "--data-dir", str(tmp_path), "--json"])
    assert '"title": "From main"' in capsys.readouterr().out


def test_main_reports_unusable_log_file(tmp_path, capsys):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises(SystemExit) as exc:
        main(["--data-dir", str(tmp_path), "--log-file", str(blocker / "logs" / "k.log"), "board"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("error: cannot open log file")
