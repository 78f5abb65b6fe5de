"""Colorful CLI output helpers."""

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from ..models import Task

CHECK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗
BOX_TODO = "\u2610"  # ☐
BOX_DONE = "\u2611"  # ☑

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def success(message: str | Text) -> None:
    """Print success message with green checkmark."""
    console.print(Text.assemble((CHECK, "bold green"), " ", message))


def error(message: str | Text) -> None:
    """Print error message with red cross to stderr."""
    err_console.print(Text.assemble((CROSS, "bold red"), " ", message))


def notice(message: str, style: str = "yellow") -> None:
    """Print a single styled line."""
    console.print(Text(message, style=style))


def header(message: str, style: str = "bold bright_blue") -> None:
    """Print a listing header surrounded by blank lines."""
    console.print()
    console.print(Text(message, style=style))
    console.print()


def format_id(number: int) -> Text:
    """Render a task number as ``#N``."""
    return Text(f"#{number}", style="bold cyan")


def render_task(task: Task) -> Text:
    """Render one task as ``[id] box description``."""
    if task.is_done:
        box = Text(BOX_DONE, style="bright_green")
        description = Text(task.description, style="bright_black strike")
    else:
        box = Text(BOX_TODO, style="bright_red")
        description = Text(task.description, style="bright_white")
    return Text.assemble("[", (str(task.id), "bright_cyan"), "] ", box, " ", description)


def task_list(tasks: Iterable[Task]) -> None:
    """Print tasks one per line followed by a blank line."""
    for task in tasks:
        console.print(render_task(task))
    console.print()
