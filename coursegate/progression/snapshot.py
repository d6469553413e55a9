"""
Progress snapshot builder.

Turns the activity-id -> progress mapping assembled from analytics
events into ProgressRecords. Unlike curriculum payloads, malformed
progress never fails the build: a bad entry is dropped with a warning
and the lock evaluator then treats that activity as not complete.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, ValidationError

from .models import Proficiency, ProgressRecord


class ProgressEntry(BaseModel):
    """
    One entry of a progress payload.

    completed and score are strict: "yes", "95" or 1 must not read as
    passing progress. proficiency stays lax so string values still map
    onto the enum.
    """

    model_config = ConfigDict(extra="ignore")

    completed: StrictBool = False
    score: StrictInt | StrictFloat | None = None
    proficiency: Proficiency | None = None

    def to_record(self) -> ProgressRecord:
        proficiency = self.proficiency
        if proficiency is None and self.score is not None:
            proficiency = Proficiency.from_score(self.score)
        return ProgressRecord(completed=self.completed, score=self.score, proficiency=proficiency)


def build_progress_snapshot(data: dict[str, Any] | None) -> dict[str, ProgressRecord]:
    """
    Build a progress snapshot from a decoded JSON mapping.

    Args:
        data: Mapping of activity id to {completed, score, proficiency}

    Returns:
        Mapping of activity id to ProgressRecord (invalid entries omitted)
    """
    snapshot: dict[str, ProgressRecord] = {}
    if not data:
        return snapshot

    if not isinstance(data, dict):
        logger.warning(f"Ignoring progress payload of type {type(data).__name__}")
        return snapshot

    skipped = 0
    for activity_id, raw in data.items():
        try:
            entry = ProgressEntry.model_validate(raw)
        except ValidationError as e:
            skipped += 1
            logger.warning(f"Dropping malformed progress for {activity_id}: {e.error_count()} errors")
            continue
        snapshot[str(activity_id)] = entry.to_record()

    logger.debug(f"Built progress snapshot: {len(snapshot)} records, {skipped} skipped")
    return snapshot


def load_progress_file(path: Path | str) -> dict[str, ProgressRecord]:
    """Load a progress snapshot from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Progress file not found: {path}")

    return build_progress_snapshot(json.loads(path.read_text(encoding="utf-8")))
