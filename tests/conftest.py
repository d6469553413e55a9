"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_settings
from coursegate.curriculum import ActivityKind, ActivityNode, Course, Lesson, Unit


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from a developer's .env and cached settings."""
    for key in ("PROFICIENCY_THRESHOLD", "LOCKING_ENABLED", "ROTATION_MODE", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def activity(activity_id: str, kind: ActivityKind, ordering: int = 0) -> ActivityNode:
    return ActivityNode(id=activity_id, kind=kind, ordering=ordering)


@pytest.fixture
def sample_course():
    """
    Two units plus a course challenge.

    Traversal: v1, a1, ex1, quiz1, v2, ex2, test2, cc1
    """
    unit1 = Unit(
        id="unit-1",
        ordering=1,
        title="Motion",
        children=(
            Lesson(
                id="lesson-1",
                ordering=1,
                children=(
                    activity("v1", ActivityKind.VIDEO, 1),
                    activity("a1", ActivityKind.ARTICLE, 2),
                    activity("ex1", ActivityKind.EXERCISE, 3),
                ),
            ),
            activity("quiz1", ActivityKind.QUIZ, 2),
        ),
    )
    unit2 = Unit(
        id="unit-2",
        ordering=2,
        title="Forces",
        children=(
            Lesson(
                id="lesson-2",
                ordering=1,
                children=(
                    activity("v2", ActivityKind.VIDEO, 1),
                    activity("ex2", ActivityKind.EXERCISE, 2),
                ),
            ),
            activity("test2", ActivityKind.UNIT_TEST, 2),
        ),
    )
    return Course(
        id="course-physics",
        title="Physics",
        units=(unit1, unit2),
        challenges=(activity("cc1", ActivityKind.COURSE_CHALLENGE, 1),),
    )


@pytest.fixture
def sample_course_payload():
    """JSON payload equivalent of a small course."""
    return {
        "id": "course-1",
        "title": "Chemistry",
        "units": [
            {
                "id": "unit-1",
                "ordering": 1,
                "children": [
                    {
                        "type": "Lesson",
                        "id": "lesson-1",
                        "ordering": 1,
                        "children": [
                            {"type": "Video", "id": "v1", "ordering": 1},
                            {"type": "Exercise", "id": "ex1", "ordering": 2},
                        ],
                    },
                    {"type": "Quiz", "id": "quiz1", "ordering": 2},
                ],
            }
        ],
        "challenges": [{"type": "CourseChallenge", "id": "cc1"}],
    }


def build_spec(sections: list[dict], test_id: str = "test-1") -> str:
    """Build a QTI-style test document from section descriptions."""
    parts = [f'<qti-assessment-test identifier="{test_id}">', "<qti-test-part>"]
    for section in sections:
        section_id = section.get("id")
        id_attr = f' identifier="{section_id}"' if section_id else ""
        parts.append(f'<qti-assessment-section{id_attr} title="Section">')
        if "shuffle" in section:
            parts.append(f'<qti-ordering shuffle="{"true" if section["shuffle"] else "false"}"/>')
        if "select" in section:
            parts.append(f'<qti-selection select="{section["select"]}"/>')
        for item_id in section.get("items", []):
            parts.append(f'<qti-assessment-item-ref identifier="{item_id}" href="{item_id}.xml"/>')
        parts.append("</qti-assessment-section>")
    parts.extend(["</qti-test-part>", "</qti-assessment-test>"])
    return "\n".join(parts)


@pytest.fixture
def spec_builder():
    """Provide the test document builder."""
    return build_spec


@pytest.fixture
def make_pool():
    """Build a candidate pool (id -> payload) in the given order."""

    def _make(ids):
        return {question_id: {"identifier": question_id, "title": question_id.upper()} for question_id in ids}

    return _make
