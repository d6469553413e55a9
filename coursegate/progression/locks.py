"""
Progression Lock Evaluator.

Decides, for every activity in a course, whether it is accessible:
- Activities are visited in a single linear traversal order
- An activity is locked when the activity before it is not complete
- Assessments (Exercise, Quiz, UnitTest, CourseChallenge) complete at
  score >= proficiency threshold; the completed flag is ignored
- Videos and articles complete when their completed flag is set
- The first activity is always open

Missing or malformed progress is read as "not complete". The evaluator
never raises on learner data.
"""
from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from loguru import logger

from coursegate.curriculum.models import ActivityNode, Course
from coursegate.curriculum.traversal import ordered_activities

PROFICIENCY_THRESHOLD = 80.0

LockMap = dict[str, bool]


def _progress_field(record: Any, name: str) -> Any:
    # Snapshots normally hold ProgressRecords; raw dicts from callers are tolerated
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class LockEvaluator:
    """
    Compute lock maps for a course.

    Stateless apart from the threshold; one instance can serve any
    number of learners concurrently.
    """

    def __init__(self, threshold: Optional[float] = None):
        if threshold is None:
            from config import get_settings

            threshold = get_settings().proficiency_threshold
        self.threshold = float(threshold)

    def is_gating_complete(self, activity: ActivityNode, progress: Mapping[str, Any]) -> bool:
        """Whether ``activity`` counts as complete for unlocking the next one."""
        record = progress.get(activity.id)
        if record is None:
            return False

        if activity.kind.is_assessment:
            score = _progress_field(record, "score")
            return _is_number(score) and score >= self.threshold

        return _progress_field(record, "completed") is True

    def evaluate(
        self,
        course: Course,
        progress: Optional[Mapping[str, Any]],
        locking_enabled: bool = True,
    ) -> LockMap:
        """
        Build the lock map for a course.

        Args:
            course: Curriculum tree
            progress: Activity id -> progress record (may be empty or sparse)
            locking_enabled: When False every activity is unlocked

        Returns:
            Mapping of activity id -> locked flag
        """
        ordered = ordered_activities(course)
        lock: LockMap = {}

        if not locking_enabled:
            for activity in ordered:
                lock[activity.id] = False
            return lock

        progress = progress or {}
        previous_complete = True
        for activity in ordered:
            # Duplicate ids share a key: the last occurrence wins
            lock[activity.id] = not previous_complete
            previous_complete = self.is_gating_complete(activity, progress)

        logger.debug(
            f"Evaluated locks for course {course.id}: "
            f"{len(ordered)} activities, {sum(lock.values())} locked"
        )
        return lock

    def first_locked(
        self,
        course: Course,
        progress: Optional[Mapping[str, Any]],
    ) -> Optional[str]:
        """
        Return the id of the first locked activity in traversal order.

        Returns:
            Activity id, or None when every activity is open
        """
        lock = self.evaluate(course, progress, locking_enabled=True)
        for activity in ordered_activities(course):
            if lock.get(activity.id):
                return activity.id
        return None


def evaluate_locks(
    course: Course,
    progress: Optional[Mapping[str, Any]],
    locking_enabled: bool = True,
    threshold: Optional[float] = None,
) -> LockMap:
    """Convenience wrapper around LockEvaluator.evaluate."""
    return LockEvaluator(threshold).evaluate(course, progress, locking_enabled)
