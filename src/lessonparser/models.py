"""Value types produced by the lesson extractors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectTitle:
    """Topic and project name from a document's `# <topic> - <project>` line."""

    topic: str
    project: str | None


@dataclass(frozen=True)
class FileSeed:
    """Starter content for one file of a challenge."""

    path: str
    content: str


@dataclass(frozen=True)
class HintTest:
    """Hint line paired with the test code that follows it."""

    hint: str
    test: str


@dataclass(frozen=True)
class LessonContent:
    """Everything extracted from one numbered lesson."""

    number: int
    body: str
    description: str | None
    seed: str
    commands: tuple[str, ...]
    files: tuple[FileSeed, ...]
    force: bool
    hints_and_tests: tuple[HintTest, ...]
