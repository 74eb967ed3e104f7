"""Lesson document parsing: marker extraction and markdown rendering."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .models import FileSeed, HintTest, LessonContent, ProjectTitle
from .parser import (
    MalformedLessonError,
    is_force_flag,
    lesson_description,
    lesson_from_file,
    lesson_hints_and_tests,
    lesson_sections,
    lesson_seed,
    locate_lesson,
    parse_lesson,
    read_project_title,
    seed_commands,
    seed_files,
)
from .render import render_markdown

__all__ = [
    "FileSeed",
    "HintTest",
    "LessonContent",
    "MalformedLessonError",
    "ProjectTitle",
    "__version__",
    "is_force_flag",
    "lesson_description",
    "lesson_from_file",
    "lesson_hints_and_tests",
    "lesson_sections",
    "lesson_seed",
    "locate_lesson",
    "parse_lesson",
    "read_project_title",
    "render_markdown",
    "seed_commands",
    "seed_files",
]


def _version_from_pyproject() -> str | None:
    """Version from a source checkout's pyproject.toml, if this is one."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        with pyproject.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
        if project.get("name") != "lessonparser":
            continue
        return project.get("version")
    return None


__version__ = _version_from_pyproject()
if __version__ is None:
    try:
        __version__ = version("lessonparser")
    except PackageNotFoundError:
        __version__ = "0+unknown"
