"""Extract lessons, sections, seeds and tests from marker-delimited lesson documents."""

from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import TextIO

from .markers import (
    ANY_FENCE_RE,
    CMD_RE,
    DESCRIPTION_RE,
    DESCRIPTION_SECTION,
    FENCE_RE,
    FILE_RE,
    FORCE_MARKER,
    SECTION_RE,
    SEED_RE,
    SEED_SECTION,
    TEST_BLOCK_RE,
    TESTS_SECTION,
    TITLE_PREFIX,
    TITLE_SEPARATOR,
    lesson_pattern,
)
from .models import FileSeed, HintTest, LessonContent, ProjectTitle

logger = logging.getLogger(__name__)


class MalformedLessonError(ValueError):
    """Lesson text does not follow the marker layout closely enough to pair its parts."""


async def read_project_title(source: Path | str | TextIO) -> ProjectTitle:
    """Read the topic and project name from the first line of a lesson document.

    ``source`` is a path, opened and closed here, or an open text stream that
    stays owned (and open) by the caller. Only the first line is read. A
    missing ` - ` separator leaves ``project`` as ``None``; I/O errors propagate.
    """
    if isinstance(source, (str, Path)):
        first_line = await asyncio.to_thread(_read_first_line, Path(source))
    else:
        first_line = await asyncio.to_thread(source.readline)
    segments = first_line.rstrip("\r\n").removeprefix(TITLE_PREFIX).split(TITLE_SEPARATOR)
    project = segments[1] if len(segments) > 1 else None
    return ProjectTitle(topic=segments[0], project=project)


def _read_first_line(path: Path) -> str:
    with path.open(encoding="utf-8-sig") as handle:
        return handle.readline()


def locate_lesson(document: str, lesson_number: int) -> str | None:
    """Return the text between the `## n` and `## n+1` headers, or None."""
    match = lesson_pattern(lesson_number).search(document)
    if match is None:
        logger.debug("Lesson %d not found (missing header or last lesson).", lesson_number)
        return None
    return match.group("body")


def lesson_from_file(path: Path | str, lesson_number: int) -> str | None:
    """Read a lesson document from disk and locate one lesson in it."""
    document = Path(path).read_text(encoding="utf-8-sig")
    return locate_lesson(document, lesson_number)


def lesson_sections(lesson: str) -> dict[str, str]:
    """Map each `### --<name>--` section name to its text, in document order."""
    fences = [fence.span() for fence in ANY_FENCE_RE.finditer(lesson)]
    markers = [
        marker
        for marker in SECTION_RE.finditer(lesson)
        if not any(start <= marker.start() < end for start, end in fences)
    ]
    sections: dict[str, str] = {}
    for index, marker in enumerate(markers):
        name = marker.group("name")
        if name in sections:
            raise MalformedLessonError(f"Duplicate section '### --{name}--' in lesson.")
        end = markers[index + 1].start() if index + 1 < len(markers) else len(lesson)
        sections[name] = lesson[marker.end() : end].strip("\n")
    return sections


def lesson_description(lesson: str) -> str | None:
    """Return the text up to the next `### --` line, or None without a description marker."""
    match = DESCRIPTION_RE.search(lesson)
    if match is None:
        return None
    return match.group("description").strip("\n")


def lesson_seed(lesson: str) -> str:
    """Return everything after the seed marker, or an empty string."""
    match = SEED_RE.search(lesson)
    if match is None:
        return ""
    return match.group("seed")


def lesson_hints_and_tests(lesson: str) -> list[HintTest]:
    """Pair every `js` test block with the hint line written right above it."""
    section = _tests_section(lesson_sections(lesson))
    if section is None:
        return []

    pairs: list[HintTest] = []
    previous_end = 0
    for block in TEST_BLOCK_RE.finditer(section):
        preceding = [line for line in section[previous_end : block.start()].splitlines() if line.strip()]
        if not preceding:
            raise MalformedLessonError(f"Test block {len(pairs) + 1} has no hint line above it.")
        pairs.append(HintTest(hint=preceding[-1].strip(), test=block.group("body")))
        previous_end = block.end()
    logger.debug("Found %d hint/test pairs.", len(pairs))
    return pairs


def _tests_section(sections: dict[str, str]) -> str | None:
    """Pick the tests section by name, else the first non description/seed section."""
    if TESTS_SECTION in sections:
        return sections[TESTS_SECTION]
    for name, text in sections.items():
        if name not in {DESCRIPTION_SECTION, SEED_SECTION}:
            return text
    return None


def seed_commands(seed: str) -> list[str]:
    """Return the commands of every `#### --cmd--` block, in order."""
    commands = [body for _, body in _marked_blocks(seed, CMD_RE)]
    logger.debug("Found %d seed commands.", len(commands))
    return commands


def seed_files(seed: str) -> list[FileSeed]:
    """Return the `(path, content)` seed of every `#### --"<path>"--` block, in order."""
    files = [FileSeed(path=marker.group("path"), content=body) for marker, body in _marked_blocks(seed, FILE_RE)]
    logger.debug("Found %d seeded files.", len(files))
    return files


def _marked_blocks(seed: str, marker_re: re.Pattern[str]) -> list[tuple[re.Match[str], str]]:
    """Scan markers and capture the fenced block that directly follows each one."""
    blocks: list[tuple[re.Match[str], str]] = []
    for marker in marker_re.finditer(seed):
        fence = FENCE_RE.match(seed, marker.end())
        if fence is None:
            raise MalformedLessonError(f"Marker '{marker.group(0).strip()}' is not followed by a fenced code block.")
        blocks.append((marker, fence.group("body").strip()))
    return blocks


def is_force_flag(seed: str) -> bool:
    """Return True when the seed carries the force flag."""
    return FORCE_MARKER in seed


def parse_lesson(document: str, lesson_number: int) -> LessonContent | None:
    """Run every extractor over one lesson of a document."""
    body = locate_lesson(document, lesson_number)
    if body is None:
        return None
    seed = lesson_seed(body)
    return LessonContent(
        number=lesson_number,
        body=body,
        description=lesson_description(body),
        seed=seed,
        commands=tuple(seed_commands(seed)),
        files=tuple(seed_files(seed)),
        force=is_force_flag(seed),
        hints_and_tests=tuple(lesson_hints_and_tests(body)),
    )
