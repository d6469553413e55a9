"""
Unit tests for the coursegate error taxonomy.

Run: pytest tests/unit/test_errors.py -v
"""
import pytest

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


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "error_cls",
        [
            ConfigurationError,
            StructuralError,
            MissingSectionIdentifier,
            DataIntegrityError,
            EmptySelectionError,
            EmptyUnitError,
            CurriculumPayloadError,
        ],
    )
    def test_all_errors_share_a_base(self, error_cls):
        assert issubclass(error_cls, CoursegateError)

    def test_context_is_kept_and_printed(self):
        error = DataIntegrityError("missing", test_identifier="t1", question_id="q9")
        assert error.context == {"test_identifier": "t1", "question_id": "q9"}
        assert str(error) == "missing (test_identifier='t1', question_id='q9')"

    def test_message_without_context(self):
        assert str(StructuralError("no sections")) == "no sections"
