"""
Core Module - Shared errors and primitives.

Components:
- errors: Error taxonomy shared by gating and selection
- hashing: FNV-1a hashing for reproducible orderings

Design Principle:
Domain modules (curriculum/, progression/, assessment/) import from
coursegate.core rather than defining their own error types.
"""

from coursegate.core.errors import (
    ConfigurationError,
    CoursegateError,
    CurriculumPayloadError,
    DataIntegrityError,
    EmptySelectionError,
    EmptyUnitError,
    MissingSectionIdentifier,
    StructuralError,
)
from coursegate.core.hashing import fnv1a32

__all__ = [
    # Errors
    "CoursegateError",
    "ConfigurationError",
    "StructuralError",
    "MissingSectionIdentifier",
    "DataIntegrityError",
    "EmptySelectionError",
    "EmptyUnitError",
    "CurriculumPayloadError",
    # Hashing
    "fnv1a32",
]
