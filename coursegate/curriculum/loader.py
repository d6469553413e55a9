"""
Curriculum payload loader.

Validates the JSON handed over by the content-aggregation layer and
converts it into the frozen curriculum tree. Payload shape:

    {
        "id": "course-1",
        "title": "Physics",
        "units": [
            {
                "id": "unit-1",
                "ordering": 1,
                "children": [
                    {"type": "Lesson", "id": "lesson-1", "ordering": 1,
                     "children": [{"type": "Video", "id": "v1", "ordering": 1}]},
                    {"type": "Quiz", "id": "quiz-1", "ordering": 2}
                ]
            }
        ],
        "challenges": [{"type": "CourseChallenge", "id": "cc-1"}]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from coursegate.core.errors import CurriculumPayloadError

from .models import (
    LESSON_CHILD_KINDS,
    UNIT_ASSESSMENT_KINDS,
    ActivityKind,
    ActivityNode,
    Course,
    Lesson,
    Unit,
)


# ========================================
# Payload Models
# ========================================


class ActivityPayload(BaseModel):
    """A single activity as delivered by the aggregation layer."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    type: ActivityKind
    ordering: int = 0
    title: str = ""

    def to_node(self) -> ActivityNode:
        return ActivityNode(id=self.id, kind=self.type, ordering=self.ordering, title=self.title)


class LessonPayload(BaseModel):
    """A lesson and its activities."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    type: Literal["Lesson"] = "Lesson"
    ordering: int = 0
    title: str = ""
    children: list[ActivityPayload] = Field(default_factory=list)

    @field_validator("children")
    @classmethod
    def _lesson_children_kinds(cls, children: list[ActivityPayload]) -> list[ActivityPayload]:
        for child in children:
            if child.type not in LESSON_CHILD_KINDS:
                raise ValueError(f"{child.type.value} {child.id!r} cannot be placed inside a lesson")
        return children

    def to_node(self) -> Lesson:
        return Lesson(
            id=self.id,
            ordering=self.ordering,
            title=self.title,
            children=tuple(child.to_node() for child in self.children),
        )


class UnitPayload(BaseModel):
    """A unit: lessons plus unit-level quizzes and tests."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    ordering: int = 0
    title: str = ""
    children: list[Union[LessonPayload, ActivityPayload]] = Field(default_factory=list)

    @field_validator("children")
    @classmethod
    def _unit_children_kinds(cls, children: list[Any]) -> list[Any]:
        for child in children:
            if isinstance(child, ActivityPayload) and child.type not in UNIT_ASSESSMENT_KINDS:
                raise ValueError(f"{child.type.value} {child.id!r} must live inside a lesson")
        return children

    def to_node(self) -> Unit:
        return Unit(
            id=self.id,
            ordering=self.ordering,
            title=self.title,
            children=tuple(child.to_node() for child in self.children),
        )


class CoursePayload(BaseModel):
    """Top-level course payload."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    title: str = ""
    units: list[UnitPayload] = Field(default_factory=list)
    challenges: list[ActivityPayload] = Field(default_factory=list)

    @field_validator("challenges")
    @classmethod
    def _challenge_kinds(cls, challenges: list[ActivityPayload]) -> list[ActivityPayload]:
        for challenge in challenges:
            if challenge.type is not ActivityKind.COURSE_CHALLENGE:
                raise ValueError(f"{challenge.type.value} {challenge.id!r} is not a course challenge")
        return challenges

    def to_course(self) -> Course:
        return Course(
            id=self.id,
            title=self.title,
            units=tuple(unit.to_node() for unit in self.units),
            challenges=tuple(challenge.to_node() for challenge in self.challenges),
        )


# ========================================
# Loading
# ========================================


def load_course(data: dict[str, Any]) -> Course:
    """
    Build a Course from a decoded JSON payload.

    Raises:
        CurriculumPayloadError: If the payload does not describe a valid course
    """
    try:
        payload = CoursePayload.model_validate(data)
    except ValidationError as e:
        course_id = data.get("id") if isinstance(data, dict) else None
        logger.error(f"Invalid curriculum payload for course {course_id}: {e.error_count()} errors")
        raise CurriculumPayloadError("invalid curriculum payload", course_id=course_id) from e

    course = payload.to_course()
    logger.debug(f"Loaded course {course.id}: {len(course.units)} units, {len(course.challenges)} challenges")
    return course


def load_course_file(path: Path | str) -> Course:
    """Load a Course from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Curriculum file not found: {path}")

    return load_course(json.loads(path.read_text(encoding="utf-8")))
