"""
Questions asked during a run and the prompter contract that answers them.

The pipeline asks two things: which package to theme, then which of the
package's widget files to generate stylesheets for. How the questions are
shown is up to the ``Prompter``; parsing of typed answers lives here so it
can be shared and tested without a terminal.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from .constants import COMPILED_MODULE_PATTERN
from .filesystem import FileSystem
from .models import TargetPackage

PACKAGE_QUESTION = "Which package do you wish to create a theme for?"


class FileChoice(BaseModel):
    """One selectable widget file."""

    value: str
    label: str

    model_config = ConfigDict(frozen=True)


class FileQuestion(BaseModel):
    """Multi-select question listing the widget files of a package."""

    message: str
    choices: list[FileChoice] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Prompter(Protocol):
    async def ask_for_package_names(self) -> list[str]: ...

    async def ask_for_desired_files(self, question: FileQuestion) -> list[str]: ...


def get_file_questions(package: TargetPackage, fs: FileSystem) -> FileQuestion:
    """Build the widget question from the compiled CSS modules in the theme directory."""
    files = fs.glob(package.theme_directory_path, COMPILED_MODULE_PATTERN)
    choices = [FileChoice(value=f.as_posix(), label=f.as_posix()) for f in files]
    return FileQuestion(
        message=f"Which of the {package.name} theme files would you like to scaffold?",
        choices=choices,
    )


def parse_package_names(answer: str) -> list[str]:
    """Split a typed answer on whitespace and commas."""
    return [name for name in re.split(r"[\s,]+", answer.strip()) if name]


def parse_file_selection(answer: str, choices: Sequence[FileChoice]) -> list[str]:
    """
    Resolve a typed selection against the available choices.

    Accepts ``all``, 1-based numbers, ranges (``2-4``) and exact labels,
    separated by commas or whitespace. Order follows the answer; repeats are
    dropped.

    Raises:
        ValueError: A token matches no choice
    """
    text = answer.strip()
    if not text:
        return []
    if text.lower() == "all":
        return [c.value for c in choices]

    by_label = {c.label: c.value for c in choices}
    selected: list[str] = []

    def add(value: str) -> None:
        if value not in selected:
            selected.append(value)

    for token in re.split(r"[\s,]+", text):
        if not token:
            continue
        if token in by_label:
            add(by_label[token])
            continue
        if m := re.fullmatch(r"(\d+)(?:-(\d+))?", token):
            start = int(m.group(1))
            end = int(m.group(2) or start)
            if not (1 <= start <= end <= len(choices)):
                raise ValueError(f"'{token}' is out of range 1-{len(choices)}")
            for idx in range(start, end + 1):
                add(choices[idx - 1].value)
            continue
        raise ValueError(f"Unknown choice '{token}'")

    return selected
