"""
Error taxonomy for gating and question selection.

Philosophy:
- Progression gating never raises on learner data (fail locked instead)
- Question selection fails fast: a broken assessment is worse than no assessment
- Non-fatal conditions (ConfigurationError, StructuralError) are logged, not raised
"""

from __future__ import annotations

from typing import Any


class CoursegateError(Exception):
    """Base class for all coursegate errors."""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.context: dict[str, Any] = context

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{message} ({details})"


class ConfigurationError(CoursegateError):
    """A directive in a test specification is unusable (e.g. non-numeric select).

    Non-fatal: the parser logs the condition and drops the directive.
    """
    pass


class StructuralError(CoursegateError):
    """A test specification has no parseable sections.

    Non-fatal: selection logs the condition and passes the pool through.
    """
    pass


class MissingSectionIdentifier(CoursegateError):
    """A shuffled section has no identifier to seed its ordering."""
    pass


class DataIntegrityError(CoursegateError):
    """A selected question id is absent from the candidate pool."""
    pass


class EmptySelectionError(CoursegateError):
    """Sections exist but none of them contributed a question."""
    pass


class EmptyUnitError(CoursegateError):
    """A unit contains no actionable activity."""
    pass


class CurriculumPayloadError(CoursegateError):
    """A curriculum payload failed validation."""
    pass
