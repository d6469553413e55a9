"""Resolve selected question ids into QuestionRefs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from coursegate.core.errors import DataIntegrityError

from .models import QuestionRef


def assemble(selected_ids: Sequence[str], candidates: Mapping[str, Any]) -> list[QuestionRef]:
    """
    Map selected ids to their payloads, preserving selection order.

    Raises:
        DataIntegrityError: If an id is absent from the candidate pool
    """
    questions: list[QuestionRef] = []
    for question_id in selected_ids:
        if question_id not in candidates:
            logger.error(f"Cannot assemble question {question_id}: not in candidate pool")
            raise DataIntegrityError("question reference missing from candidate pool", question_id=question_id)
        questions.append(QuestionRef(id=question_id, payload=candidates[question_id]))
    return questions
