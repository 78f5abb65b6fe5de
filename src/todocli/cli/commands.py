"""Command handlers for the todo CLI.

Each handler performs exactly one TaskService call and returns a process
exit code. Domain errors are turned into messages here and nowhere else.
"""

import argparse
import logging

from rich.text import Text

from ..exceptions import StoreLoadError, StoreSaveError, TaskNotFoundError
from ..models import TaskFilter
from ..services import TaskService
from .output import error, format_id, header, notice, success, task_list

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

# Header and empty-listing message for each filter
LIST_LABELS: dict[TaskFilter, tuple[str, str, str, str]] = {
    TaskFilter.ALL: (
        "All Tasks:",
        "bold bright_blue",
        'No tasks yet! Add one with: todo add "your task"',
        "yellow",
    ),
    TaskFilter.TODO: ("Pending Tasks:", "bold bright_red", "No pending tasks!", "bold green"),
    TaskFilter.DONE: ("Completed Tasks:", "bold bright_green", "No completed tasks yet.", "yellow"),
}


def cmd_add(service: TaskService, args: argparse.Namespace) -> int:
    task = service.add_task(args.description)
    success(
        Text.assemble("Task ", format_id(task.id), " added: ", (task.description, "bright_white"))
    )
    return EXIT_OK


def cmd_list(service: TaskService, args: argparse.Namespace) -> int:
    if args.todo:
        task_filter = TaskFilter.TODO
    elif args.done:
        task_filter = TaskFilter.DONE
    else:
        task_filter = TaskFilter.ALL

    tasks = service.list_tasks(task_filter)
    title, title_style, empty_message, empty_style = LIST_LABELS[task_filter]
    if not tasks:
        notice(empty_message, empty_style)
        return EXIT_OK

    header(title, title_style)
    task_list(tasks)
    return EXIT_OK


def cmd_done(service: TaskService, args: argparse.Namespace) -> int:
    task = service.mark_done(args.id)
    success(Text.assemble("Task ", format_id(task.id), " marked as done!"))
    return EXIT_OK


def cmd_undone(service: TaskService, args: argparse.Namespace) -> int:
    task = service.mark_undone(args.id)
    success(Text.assemble("Task ", format_id(task.id), " marked as todo."))
    return EXIT_OK


def cmd_remove(service: TaskService, args: argparse.Namespace) -> int:
    task = service.remove_task(args.id)
    success(Text.assemble("Task ", format_id(task.id), " removed."))
    return EXIT_OK


def cmd_clear(service: TaskService, args: argparse.Namespace) -> int:  # noqa: ARG001
    count = service.clear_completed()
    success(Text.assemble("Cleared ", (str(count), "bold cyan"), " completed task(s)."))
    return EXIT_OK


COMMANDS = {
    "add": cmd_add,
    "list": cmd_list,
    "done": cmd_done,
    "undone": cmd_undone,
    "remove": cmd_remove,
    "clear": cmd_clear,
}


def run_command(service: TaskService, args: argparse.Namespace) -> int:
    """
    Dispatch a parsed command line.

    Returns:
        Exit code (0 = success, 1 = task not found or storage failure)
    """
    handler = COMMANDS[args.command]
    try:
        return handler(service, args)
    except TaskNotFoundError as e:
        logger.info("Command %s failed: %s", args.command, e)
        error(Text.assemble("Task ", format_id(e.task_id), " not found."))
    except StoreLoadError as e:
        logger.info("Load failed: %s", e)
        error(str(e))
    except StoreSaveError as e:
        logger.info("Save failed: %s", e)
        error(f"{e}. Changes were not saved.")
    return EXIT_FAILURE
