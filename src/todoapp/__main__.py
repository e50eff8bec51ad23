"""CLI entry point for todoapp."""

import argparse
import asyncio
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging
from .presenters import TasksFilterType


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="todoapp",
        description="Todo list manager with a local store and a simulated remote",
    )
    parser.add_argument(
        "--task-root",
        type=Path,
        default=None,
        help="Directory holding the local task store (default: .tasks)",
    )
    parser.add_argument(
        "--latency",
        type=float,
        default=None,
        help="Simulated remote latency in seconds",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start the simulated remote without sample tasks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v INFO, -vv DEBUG, -vvv cache tracing)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "--filter",
        type=TasksFilterType,
        choices=list(TasksFilterType),
        default=TasksFilterType.ALL_TASKS,
        help="Which tasks to show (default: all)",
    )
    list_parser.add_argument(
        "--refresh",
        action="store_true",
        help="Reload tasks from the remote data source",
    )

    show_parser = subparsers.add_parser("show", help="Show a task")
    show_parser.add_argument("task_id")

    add_parser = subparsers.add_parser("add", help="Create a task")
    add_parser.add_argument("title")
    add_parser.add_argument("-d", "--description", default="")

    edit_parser = subparsers.add_parser("edit", help="Edit a task")
    edit_parser.add_argument("task_id")
    edit_parser.add_argument("--title", default=None)
    edit_parser.add_argument("-d", "--description", default=None)

    for name, help_text in (
        ("complete", "Mark a task as completed"),
        ("activate", "Mark a task as active"),
        ("delete", "Delete a task"),
    ):
        command_parser = subparsers.add_parser(name, help=help_text)
        command_parser.add_argument("task_id")

    subparsers.add_parser("clear-completed", help="Delete all completed tasks")
    subparsers.add_parser("stats", help="Show task statistics")

    return parser.parse_args(argv)


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Wire the repository and dispatch to the requested command."""
    from .cli import commands
    from .repositories import LocalDataSource, RemoteDataSource, TasksRepository

    repository = TasksRepository(
        remote_data_source=RemoteDataSource(
            latency=settings.remote_latency,
            seed=settings.seed_remote,
        ),
        local_data_source=LocalDataSource(settings.task_root),
    )

    match args.command:
        case "list":
            return await commands.run_list(repository, args.filter, args.refresh)
        case "show":
            return await commands.run_show(repository, args.task_id)
        case "add":
            return await commands.run_add(repository, args.title, args.description)
        case "edit":
            return await commands.run_edit(repository, args.task_id, args.title, args.description)
        case "complete":
            return await commands.run_complete(repository, args.task_id)
        case "activate":
            return await commands.run_activate(repository, args.task_id)
        case "delete":
            return await commands.run_delete(repository, args.task_id)
        case "clear-completed":
            return await commands.run_clear_completed(repository)
        case "stats":
            return await commands.run_stats(repository)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.task_root:
        settings_kwargs["task_root"] = args.task_root
    if args.latency is not None:
        settings_kwargs["remote_latency"] = args.latency
    if args.no_seed:
        settings_kwargs["seed_remote"] = False
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    exit_code = asyncio.run(run_command(args, settings))
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
