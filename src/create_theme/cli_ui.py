"""
Rich interactive UI components for the create-theme CLI.

Provides the console prompter used by ``create-theme`` plus a few styled
output helpers.
"""

import asyncio

import typer
from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from create_theme.core.questions import (
    PACKAGE_QUESTION,
    FileChoice,
    FileQuestion,
    parse_file_selection,
    parse_package_names,
)

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def display_choices_table(choices: list[FileChoice]) -> None:
    """Display numbered file choices."""
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Num", style="cyan", width=4)
    table.add_column("File", style="white")

    for i, choice in enumerate(choices, 1):
        table.add_row(f"{i}.", choice.label)

    console.print(table)
    console.print()


def _ask(prompt: str) -> str:
    try:
        return console.input(Text(prompt, style=STYLES["info"]))
    except (KeyboardInterrupt, EOFError):
        console.print()
        raise typer.Abort()


def prompt_package_names() -> list[str]:
    """Ask for the package to theme."""
    return parse_package_names(_ask(f"{PACKAGE_QUESTION} "))


def prompt_file_selection(question: FileQuestion) -> list[str]:
    """Numbered multi-select; re-asks until the answer parses."""
    if not question.choices:
        print_warning("No theme files found in this package.")
        return []

    print_header(question.message, "Enter numbers, ranges (1-3), file names or 'all'")
    display_choices_table(question.choices)

    while True:
        answer = _ask("Files: ")
        try:
            return parse_file_selection(answer, question.choices)
        except ValueError as e:
            print_error(str(e))


class ConsolePrompter:
    """Prompter that asks on the terminal.

    Blocking input runs in a worker thread so the pipeline stays async.
    """

    async def ask_for_package_names(self) -> list[str]:
        return await asyncio.to_thread(prompt_package_names)

    async def ask_for_desired_files(self, question: FileQuestion) -> list[str]:
        return await asyncio.to_thread(prompt_file_selection, question)
