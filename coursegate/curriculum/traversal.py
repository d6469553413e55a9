"""
Curriculum traversal.

Flattens a course into the single linear sequence used for gating:
units in order, then each unit's children (lessons expanded into their
activities, unit-level assessments as-is), then course challenges last.
"""

from __future__ import annotations

from loguru import logger

from coursegate.core.errors import EmptyUnitError

from .models import ActivityNode, Course, Lesson, Unit


def _by_ordering(nodes):
    # sorted() is stable, so equal orderings keep their stored order
    return sorted(nodes, key=lambda node: node.ordering)


def ordered_activities(course: Course) -> list[ActivityNode]:
    """Return every activity of ``course`` in traversal order."""
    activities: list[ActivityNode] = []

    for unit in _by_ordering(course.units):
        for child in _by_ordering(unit.children):
            if isinstance(child, Lesson):
                activities.extend(_by_ordering(child.children))
            else:
                activities.append(child)

    # Challenges go last in stored order; their ordering values are not used
    activities.extend(course.challenges)
    return activities


def first_activity_id_for_unit(unit: Unit) -> str:
    """
    Return the id of the first actionable activity within a unit.

    Uses the same ordering rules as ordered_activities. Empty lessons
    are skipped.

    Raises:
        EmptyUnitError: If the unit contains no actionable activity
    """
    for child in _by_ordering(unit.children):
        if isinstance(child, Lesson):
            lesson_children = _by_ordering(child.children)
            if lesson_children:
                return lesson_children[0].id
            continue
        return child.id

    logger.error(f"Unit has no actionable activities: {unit.id} ({unit.title})")
    raise EmptyUnitError("unit has no actionable activities", unit_id=unit.id)
