"""Tests for the command line interface."""

from pathlib import Path

import pytest

from todoapp.__main__ import main, parse_args
from todoapp.presenters import TasksFilterType


def run_cli(task_dir: Path, *args: str) -> int:
    """Run the CLI against task_dir with no remote latency and return the exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--task-root", str(task_dir), "--latency", "0", *args])
    return exc_info.value.code


def stored_task_ids(task_dir: Path) -> list[str]:
    return sorted(path.stem for path in task_dir.glob("*.md"))


class TestParseArgs:
    """Tests for argument parsing."""

    def test_list_defaults(self):
        args = parse_args(["list"])
        assert args.command == "list"
        assert args.filter is TasksFilterType.ALL_TASKS
        assert args.refresh is False

    def test_list_filter(self):
        args = parse_args(["list", "--filter", "active"])
        assert args.filter is TasksFilterType.ACTIVE_TASKS

    def test_global_options(self):
        args = parse_args(["-vv", "--latency", "0.1", "--no-seed", "stats"])
        assert args.verbose == 2
        assert args.latency == 0.1
        assert args.no_seed is True

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestCommands:
    """End-to-end command runs against a temporary store."""

    def test_first_list_pulls_seed_tasks_from_remote(self, task_dir: Path, capsys):
        assert run_cli(task_dir, "list") == 0

        out = capsys.readouterr().out
        assert "Build tower in Pisa" in out
        assert "Finish bridge in Tacoma" in out
        # The remote data was written through to the local store
        assert len(stored_task_ids(task_dir)) == 2

    def test_list_with_nothing_anywhere_fails(self, task_dir: Path, capsys):
        assert run_cli(task_dir, "--no-seed", "list") == 1

        assert "Error while loading tasks" in capsys.readouterr().out

    def test_add_then_list(self, task_dir: Path, capsys):
        assert run_cli(task_dir, "add", "Buy milk", "-d", "Two litres") == 0
        assert run_cli(task_dir, "list") == 0

        out = capsys.readouterr().out
        assert "TO-DO saved" in out
        assert "Buy milk" in out
        assert "Build tower in Pisa" not in out

    def test_add_empty_task_fails(self, task_dir: Path, capsys):
        assert run_cli(task_dir, "add", "") == 1

        assert "cannot be empty" in capsys.readouterr().out
        assert stored_task_ids(task_dir) == []

    def test_complete_show_and_stats(self, task_dir: Path, capsys):
        run_cli(task_dir, "add", "First")
        run_cli(task_dir, "add", "Second")
        first_id = next(
            task_id
            for task_id in stored_task_ids(task_dir)
            if "First" in (task_dir / f"{task_id}.md").read_text()
        )

        assert run_cli(task_dir, "complete", first_id) == 0
        assert run_cli(task_dir, "show", first_id) == 0
        assert run_cli(task_dir, "stats") == 0

        out = capsys.readouterr().out
        assert "Task marked complete" in out
        assert "Completed" in out
        assert "Active tasks: 1" in out
        assert "Completed tasks: 1" in out

    def test_complete_unknown_task_fails(self, task_dir: Path, capsys):
        assert run_cli(task_dir, "--no-seed", "complete", "missing") == 1

        assert "Task not found: missing" in capsys.readouterr().out

    def test_show_unknown_task_fails(self, task_dir: Path, capsys):
        assert run_cli(task_dir, "--no-seed", "show", "missing") == 1

        assert "No data" in capsys.readouterr().out

    def test_edit_keeps_unspecified_fields(self, task_dir: Path, capsys):
        run_cli(task_dir, "add", "Title", "-d", "Description")
        (task_id,) = stored_task_ids(task_dir)

        assert run_cli(task_dir, "edit", task_id, "--title", "Renamed") == 0
        run_cli(task_dir, "show", task_id)

        out = capsys.readouterr().out
        assert "Renamed" in out
        assert "Description" in out

    def test_delete(self, task_dir: Path):
        run_cli(task_dir, "add", "Doomed")
        (task_id,) = stored_task_ids(task_dir)

        assert run_cli(task_dir, "delete", task_id) == 0

        assert stored_task_ids(task_dir) == []

    def test_delete_unknown_task_fails(self, task_dir: Path, capsys):
        run_cli(task_dir, "add", "Survivor")

        assert run_cli(task_dir, "delete", "missing") == 1

        out = capsys.readouterr().out
        assert "Task not found: missing" in out
        assert "Task deleted" not in out
        assert len(stored_task_ids(task_dir)) == 1

    def test_show_rejects_path_outside_task_root(self, task_dir: Path, capsys):
        (task_dir.parent / "escaped.md").write_text("---\ntitle: Outside\n---\n")

        assert run_cli(task_dir, "--no-seed", "show", "../escaped") == 1

        assert "Outside" not in capsys.readouterr().out

    def test_clear_completed(self, task_dir: Path, capsys):
        run_cli(task_dir, "add", "Keep")
        run_cli(task_dir, "add", "Finish")
        finish_id = next(
            task_id
            for task_id in stored_task_ids(task_dir)
            if "Finish" in (task_dir / f"{task_id}.md").read_text()
        )
        run_cli(task_dir, "complete", finish_id)

        assert run_cli(task_dir, "clear-completed") == 0

        out = capsys.readouterr().out
        assert "Completed tasks cleared" in out
        assert finish_id not in stored_task_ids(task_dir)
        assert len(stored_task_ids(task_dir)) == 1
