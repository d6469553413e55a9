"""Progress records consumed by the lock evaluator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Proficiency(str, Enum):
    """
    Proficiency categorization for an assessment result.

    Scores are on the 0-100 scale; values above 100 represent the
    mastery upgrade granted on top of a perfect score.
    """

    ATTEMPTED = "attempted"  # 0-69
    FAMILIAR = "familiar"  # 70-99
    PROFICIENT = "proficient"  # 100
    MASTERED = "mastered"  # 110+

    @classmethod
    def from_score(cls, score: float) -> Proficiency:
        """
        Convert a 0-100 score to a proficiency level.

        Args:
            score: Score percentage (may exceed 100 for mastery)

        Returns:
            Corresponding Proficiency
        """
        if score >= 110:
            return cls.MASTERED
        elif score >= 100:
            return cls.PROFICIENT
        elif score >= 70:
            return cls.FAMILIAR
        else:
            return cls.ATTEMPTED


@dataclass(frozen=True)
class ProgressRecord:
    """Progress on one activity."""

    completed: bool = False
    score: float | None = None
    proficiency: Proficiency | None = None


ProgressSnapshot = Mapping[str, ProgressRecord]
