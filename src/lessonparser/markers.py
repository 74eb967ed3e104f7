"""Literal markers of the lesson document convention and patterns built on them."""

from __future__ import annotations

import re

DESCRIPTION_MARKER = "### --description--"
SEED_MARKER = "### --seed--"
NEXT_MARKER = "### --"
CMD_MARKER = "#### --cmd--"
FORCE_MARKER = "#### --force--"

DESCRIPTION_SECTION = "description"
SEED_SECTION = "seed"
TESTS_SECTION = "tests"
TEST_LANGUAGE = "js"

# `### --<name>--` on a line of its own. `#### --cmd--` never matches.
SECTION_RE = re.compile(rf"^{re.escape(NEXT_MARKER)}(?P<name>[^\n]+?)--[ \t]*$", re.MULTILINE)
SEED_RE = re.compile(rf"^{re.escape(SEED_MARKER)}[ \t]*$\n?(?P<seed>.*)", re.MULTILINE | re.DOTALL)
DESCRIPTION_RE = re.compile(
    rf"^{re.escape(DESCRIPTION_MARKER)}[ \t]*$(?P<description>.*?)(?=^{re.escape(NEXT_MARKER)}|\Z)",
    re.MULTILINE | re.DOTALL,
)
CMD_RE = re.compile(rf"^{re.escape(CMD_MARKER)}[ \t]*$", re.MULTILINE)
FILE_RE = re.compile(r'^#### --"(?P<path>[^"\n]+)"--[ \t]*$', re.MULTILINE)
TITLE_SEPARATOR = " - "
TITLE_PREFIX = "# "

# A fenced block starting right after a marker, blank lines allowed in between.
FENCE_RE = re.compile(r"\s*^```(?P<lang>[^\n`]*)\n(?P<body>.*?)\n?^```[ \t]*$", re.MULTILINE | re.DOTALL)
# Any fenced block; section markers inside one belong to the block's content.
ANY_FENCE_RE = re.compile(r"^```[^\n]*\n.*?^```[ \t]*$", re.MULTILINE | re.DOTALL)
TEST_BLOCK_RE = re.compile(
    rf"^```{TEST_LANGUAGE}[ \t]*\n(?P<body>.*?)\n?^```[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


def lesson_pattern(lesson_number: int) -> re.Pattern[str]:
    """Pattern capturing the body between `## n` and `## n+1` header lines."""
    return re.compile(
        rf"^## {lesson_number}[ \t]*\n(?P<body>.*?)\n?^## {lesson_number + 1}[ \t]*$",
        re.MULTILINE | re.DOTALL,
    )
