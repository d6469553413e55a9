"""Data models for the curriculum tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class ActivityKind(str, Enum):
    """Kinds of gateable activities."""

    VIDEO = "Video"
    ARTICLE = "Article"
    EXERCISE = "Exercise"
    QUIZ = "Quiz"
    UNIT_TEST = "UnitTest"
    COURSE_CHALLENGE = "CourseChallenge"

    @property
    def is_assessment(self) -> bool:
        """Assessments gate on score; passive content gates on completion."""
        return self in ASSESSMENT_KINDS


ASSESSMENT_KINDS = frozenset(
    {
        ActivityKind.EXERCISE,
        ActivityKind.QUIZ,
        ActivityKind.UNIT_TEST,
        ActivityKind.COURSE_CHALLENGE,
    }
)
LESSON_CHILD_KINDS = frozenset({ActivityKind.VIDEO, ActivityKind.ARTICLE, ActivityKind.EXERCISE})
UNIT_ASSESSMENT_KINDS = frozenset({ActivityKind.QUIZ, ActivityKind.UNIT_TEST})


@dataclass(frozen=True)
class ActivityNode:
    """A single activity (leaf of the tree)."""

    id: str
    kind: ActivityKind
    ordering: int = 0
    title: str = ""


@dataclass(frozen=True)
class Lesson:
    """Ordered lesson containing videos, articles and exercises."""

    id: str
    ordering: int = 0
    title: str = ""
    children: tuple[ActivityNode, ...] = field(default_factory=tuple)


UnitChild = Union[Lesson, ActivityNode]


@dataclass(frozen=True)
class Unit:
    """A unit: lessons interleaved with unit-level quizzes and unit tests."""

    id: str
    ordering: int = 0
    title: str = ""
    children: tuple[UnitChild, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Course:
    """A course: ordered units plus trailing course challenges."""

    id: str
    title: str = ""
    units: tuple[Unit, ...] = field(default_factory=tuple)
    challenges: tuple[ActivityNode, ...] = field(default_factory=tuple)
