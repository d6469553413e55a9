"""Curriculum tree model, traversal and payload loading."""

from .loader import CoursePayload, load_course, load_course_file
from .models import (
    ASSESSMENT_KINDS,
    ActivityKind,
    ActivityNode,
    Course,
    Lesson,
    Unit,
    UnitChild,
)
from .traversal import first_activity_id_for_unit, ordered_activities

__all__ = [
    "ActivityKind",
    "ActivityNode",
    "ASSESSMENT_KINDS",
    "Course",
    "Lesson",
    "Unit",
    "UnitChild",
    "ordered_activities",
    "first_activity_id_for_unit",
    "CoursePayload",
    "load_course",
    "load_course_file",
]
