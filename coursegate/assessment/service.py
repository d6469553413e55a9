"""
Question selection pipeline.

parse sections -> select ids -> assemble QuestionRefs, for one attempt.
"""
from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from loguru import logger

from config import get_settings

from .assembler import assemble
from .models import DeterminismParams, QuestionRef
from .selector import DeterministicSelector
from .spec_parser import TestSpecParser


def candidate_pool(questions: Iterable[Mapping[str, Any]], key: str = "identifier") -> dict[str, Any]:
    """
    Index a resolved question list by identifier, keeping list order.

    Questions without the key are skipped with a warning.
    """
    pool: dict[str, Any] = {}
    for question in questions:
        question_id = question.get(key)
        if not question_id:
            logger.warning(f"Skipping candidate question without {key!r}")
            continue
        pool[str(question_id)] = question
    return pool


def select_questions(
    spec_text: str,
    candidates: Mapping[str, Any],
    params: Optional[DeterminismParams] = None,
    *,
    assessment_identifier: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> list[QuestionRef]:
    """
    Apply a test specification's selection and ordering rules.

    Args:
        spec_text: Raw test specification document
        candidates: Question id -> payload, in pool order
        params: Seed / attempt number; ignored when rotation_mode is "random"
        assessment_identifier: Test identifier (defaults to the document's own)
        rng: Random source for unseeded shuffles

    Returns:
        Ordered QuestionRefs for this attempt
    """
    parser = TestSpecParser()
    test_identifier = assessment_identifier or parser.parse_test_identifier(spec_text) or ""

    if get_settings().rotation_mode == "random" and params is not None:
        logger.debug(f"Rotation mode is random; ignoring determinism params for {test_identifier}")
        params = None

    logger.debug(f"Selecting questions for {test_identifier}: {len(candidates)} candidates")

    sections = parser.parse_sections(spec_text)
    selector = DeterministicSelector(test_identifier, rng=rng)
    selected_ids = selector.select(sections, candidates, params)
    questions = assemble(selected_ids, candidates)

    logger.info(
        f"Applied selection and ordering for {test_identifier}: "
        f"{len(sections)} sections, {len(candidates)} candidates -> {len(questions)} questions"
    )
    return questions
