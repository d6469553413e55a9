"""
Deterministic Question Selector.

Applies per-section ordering and selection rules to produce the ordered
question ids a learner sees for one attempt:

1. Shuffle (seeded): items sorted by FNV-1a hash of
   "{seed}:{assessment}:{section}:{item}", ties broken by id
2. Shuffle (unseeded): Fisher-Yates via an injectable random source
3. Select N (seed + attempt): rotating circular window of k = min(N, n)
   items starting at (attempt * k) mod n, so consecutive attempts see
   disjoint windows until the section is fully covered
4. Select N (otherwise): first N items

A specification without sections falls back to pass-through mode and
returns the whole candidate pool in pool order.
"""
from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from loguru import logger

from coursegate.core.errors import DataIntegrityError, EmptySelectionError
from coursegate.core.hashing import fnv1a32

from .models import DeterminismParams, TestSection


def build_base_seed(user_id: str, resource_id: str) -> str:
    """Conventional per-learner, per-resource seed."""
    return f"{user_id}:{resource_id}"


def seeded_order(items: Sequence[str], seed: str) -> list[str]:
    """
    Order ``items`` by the hash of "{seed}:{item}".

    A pure function of (seed, item set): input order does not matter.
    """
    return sorted(items, key=lambda item: (fnv1a32(f"{seed}:{item}"), item))


def window_for_attempt(items: Sequence[str], select_count: int, attempt_number: int) -> list[str]:
    """
    Rotating selection window for one attempt.

    Args:
        items: Ordered section items
        select_count: Requested number of items (N)
        attempt_number: Zero-based attempt index

    Returns:
        k = min(N, n) items starting at (attempt_number * k) mod n,
        wrapping around the end of the list
    """
    n = len(items)
    k = min(select_count, n)
    if n == 0 or k <= 0:
        return []
    offset = (attempt_number * k) % n
    return [items[(offset + i) % n] for i in range(k)]


class DeterministicSelector:
    """
    Select and order question ids for an assessment attempt.

    Handles:
    - Seeded and unseeded section shuffling
    - "Pick N of M" selection with per-attempt rotation
    - Pass-through of the full pool for specifications without sections
    - Integrity checks against the candidate pool
    """

    def __init__(self, assessment_identifier: str, rng: Optional[random.Random] = None):
        """
        Initialize selector.

        Args:
            assessment_identifier: Test identifier mixed into the shuffle seed
            rng: Random source for the unseeded shuffle (tests pass a seeded one)
        """
        self.assessment_identifier = assessment_identifier
        self._rng = rng or random.Random()

    def select(
        self,
        sections: Sequence[TestSection],
        candidates: Mapping[str, Any],
        params: Optional[DeterminismParams] = None,
    ) -> list[str]:
        """
        Produce the ordered question ids for one attempt.

        Args:
            sections: Parsed sections in document order
            candidates: Question id -> payload, in pool order
            params: Optional seed / attempt number

        Returns:
            Ordered list of question ids, all present in ``candidates``

        Raises:
            DataIntegrityError: A selected id is missing from the pool
            EmptySelectionError: Sections exist but none contributed an id
        """
        if not sections:
            return self._pass_through(candidates)

        selected: list[str] = []
        for index, section in enumerate(sections):
            items = self._order_section(section, params)
            items = self._select_from_section(section, items, params)
            logger.debug(
                f"Section {index} ({section.identifier}) of {self.assessment_identifier}: "
                f"{len(section.item_refs)} refs -> {len(items)} selected"
            )
            selected.extend(items)

        if not selected:
            logger.error(
                f"No questions selected for {self.assessment_identifier} "
                f"from {len(sections)} sections"
            )
            raise EmptySelectionError(
                "sections contributed no questions",
                test_identifier=self.assessment_identifier,
                section_count=len(sections),
            )

        self._verify_candidates(selected, candidates)
        return selected

    # ========================================
    # Ordering
    # ========================================

    def _order_section(self, section: TestSection, params: Optional[DeterminismParams]) -> list[str]:
        items = list(section.item_refs)
        if not section.shuffle:
            return items

        base_seed = params.base_seed if params else None
        if base_seed is not None:
            seed = f"{base_seed}:{self.assessment_identifier}:{section.identifier}"
            return seeded_order(items, seed)

        self._rng.shuffle(items)
        return items

    # ========================================
    # Selection
    # ========================================

    def _select_from_section(
        self,
        section: TestSection,
        items: list[str],
        params: Optional[DeterminismParams],
    ) -> list[str]:
        if section.select_count is None or section.select_count <= 0:
            return items

        rotating = (
            params is not None
            and params.base_seed is not None
            and params.attempt_number is not None
            and len(items) > 0
        )
        if rotating:
            return window_for_attempt(items, section.select_count, params.attempt_number)

        return items[: section.select_count]

    # ========================================
    # Fallback & Integrity
    # ========================================

    def _pass_through(self, candidates: Mapping[str, Any]) -> list[str]:
        # Structural fallback: ordering and selection guarantees do not apply on this path
        logger.info(
            f"No sections in test {self.assessment_identifier}; "
            f"returning all {len(candidates)} candidate questions"
        )
        return list(candidates.keys())

    def _verify_candidates(self, selected: Sequence[str], candidates: Mapping[str, Any]) -> None:
        for question_id in selected:
            if question_id not in candidates:
                logger.error(
                    f"Test {self.assessment_identifier} references question "
                    f"{question_id} that was not provided"
                )
                raise DataIntegrityError(
                    "question reference missing from candidate pool",
                    test_identifier=self.assessment_identifier,
                    question_id=question_id,
                )
