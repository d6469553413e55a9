"""Data models for test specifications and question selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class TestSection:
    """One section of a test specification, in document order."""

    __test__ = False  # not a pytest test class

    identifier: Optional[str]
    shuffle: bool = False
    select_count: Optional[int] = None
    item_refs: tuple[str, ...] = field(default_factory=tuple)


class DeterminismParams(BaseModel):
    """
    Seed and attempt number for reproducible selection.

    base_seed alone fixes the shuffle order; base_seed together with
    attempt_number also rotates the "pick N of M" window per attempt.
    """

    model_config = ConfigDict(frozen=True)

    base_seed: Optional[str] = Field(None, description="Caller-supplied seed, e.g. '<user>:<resource>'")
    attempt_number: Optional[int] = Field(None, ge=0, description="Zero-based attempt index")


@dataclass(frozen=True)
class QuestionRef:
    """A selected question resolved against the candidate pool."""

    id: str
    payload: Any = None
