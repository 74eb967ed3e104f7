"""CLI entrypoint for inspecting one lesson of a lesson document."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from .models import LessonContent
from .parser import MalformedLessonError, parse_lesson, read_project_title
from .render import render_markdown

PrintFn = Callable[[str], None]
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lessonparser", description="Show the parsed content of one lesson")
    parser.add_argument("file", type=Path, help="lesson document (markdown)")
    parser.add_argument("lesson", type=int, help="lesson number")
    parser.add_argument("--html", action="store_true", help="print the rendered description HTML only")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run the CLI application."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        document = args.file.read_text(encoding="utf-8-sig")
        title = asyncio.run(read_project_title(args.file))
        lesson = parse_lesson(document, args.lesson)
    except OSError as exc:
        logger.error("Could not read %s: %s", args.file, exc)
        return 2
    except MalformedLessonError as exc:
        logger.error("Lesson %d of %s is malformed: %s", args.lesson, args.file, exc)
        return 1

    if lesson is None:
        print_fn(f"Lesson {args.lesson} not found in {args.file}.")
        return 1

    if args.html:
        print_fn(render_markdown(lesson.description or ""))
        return 0

    print_fn(f"=== {title.topic} - {title.project or '?'} ===")
    _print_lesson(lesson, print_fn)
    return 0


def _print_lesson(lesson: LessonContent, print_fn: PrintFn) -> None:
    """Print a plain-text summary of a parsed lesson."""
    print_fn(lesson.description if lesson.description is not None else "(no description)")
    for command in lesson.commands:
        print_fn(f"$ {command}")
    for file_seed in lesson.files:
        print_fn(f"file: {file_seed.path}{' (force)' if lesson.force else ''}")
    for pair in lesson.hints_and_tests:
        print_fn(f"hint: {pair.hint}")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
