"""CLI entry point for todocli."""

import argparse
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .cli.commands import run_command
from .config import Settings
from .logging import setup_logging
from .repositories import JsonFileRepository
from .services import TaskService


def positive_int(value: str) -> int:
    """argparse type accepting integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"task id must be a positive integer: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Manage your tasks from the command line",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Path to the tasks file (default: tasks.json in the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
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

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("description", help="Task description")

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_filter = list_parser.add_mutually_exclusive_group()
    list_filter.add_argument("-t", "--todo", action="store_true", help="Show only pending tasks")
    list_filter.add_argument("-d", "--done", action="store_true", help="Show only completed tasks")

    for name, help_text in (
        ("done", "Mark a task as done"),
        ("undone", "Mark a task as not done"),
        ("remove", "Remove a task"),
    ):
        id_parser = subparsers.add_parser(name, help=help_text)
        id_parser.add_argument("id", type=positive_int, help="Task ID")

    subparsers.add_parser("clear", help="Remove all completed tasks")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Build settings from CLI args; unset flags fall back to TODO_* env vars
    settings_kwargs: dict = {}
    if args.file:
        settings_kwargs["tasks_file"] = args.file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    try:
        settings = Settings(**settings_kwargs)
    except ValidationError as e:
        problems = "; ".join(
            f"TODO_{'.'.join(str(part) for part in detail['loc']).upper()}: {detail['msg']}"
            for detail in e.errors()
        )
        parser.error(f"invalid configuration: {problems}")

    setup_logging(settings.verbose, settings.log_file)

    service = TaskService(JsonFileRepository(settings.tasks_file))
    raise SystemExit(run_command(service, args))


if __name__ == "__main__":
    main()
