"""
Assessment module for test specification parsing and question selection.

This module provides:
- TestSpecParser: Extracts sections from QTI-style test documents
- DeterministicSelector: Seeded ordering and rotating "pick N of M" windows
- assemble: Resolves selected ids into QuestionRefs
- select_questions: The full parse -> select -> assemble pipeline
"""

from .assembler import assemble
from .models import DeterminismParams, QuestionRef, TestSection
from .selector import (
    DeterministicSelector,
    build_base_seed,
    seeded_order,
    window_for_attempt,
)
from .service import candidate_pool, select_questions
from .spec_parser import TestSpecParser, parse_sections, parse_test_identifier

__all__ = [
    "TestSection",
    "DeterminismParams",
    "QuestionRef",
    "TestSpecParser",
    "parse_sections",
    "parse_test_identifier",
    "DeterministicSelector",
    "build_base_seed",
    "seeded_order",
    "window_for_attempt",
    "assemble",
    "candidate_pool",
    "select_questions",
]
