"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli_command(*args: str, timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m coursegate.cli'
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    result = subprocess.run(
        [sys.executable, "-m", "coursegate.cli", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=timeout,
        env={**os.environ, "COLUMNS": "200", "PYTHONIOENCODING": "utf-8"},
    )

    return result.returncode, result.stdout, result.stderr


@pytest.fixture
def course_file(tmp_path, sample_course_payload):
    path = tmp_path / "course.json"
    path.write_text(json.dumps(sample_course_payload), encoding="utf-8")
    return path


@pytest.fixture
def progress_file(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text(json.dumps({"v1": {"completed": True}, "ex1": {"score": 90}}), encoding="utf-8")
    return path


@pytest.fixture
def spec_file(tmp_path, spec_builder):
    path = tmp_path / "test.xml"
    items = ["a", "b", "c", "d", "e", "f"]
    path.write_text(spec_builder([{"id": "s1", "shuffle": True, "select": 3, "items": items}]), encoding="utf-8")
    return path


@pytest.fixture
def questions_file(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps([{"identifier": q} for q in "abcdef"]), encoding="utf-8")
    return path


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self):
        code, stdout, stderr = run_cli_command("--help")

        assert code == 0, f"Help failed: {stderr}"
        assert "locks" in stdout
        assert "select" in stdout
        assert "windows" in stdout


class TestCLILocks:
    def test_locks_table(self, course_file, progress_file):
        code, stdout, stderr = run_cli_command("locks", str(course_file), str(progress_file))

        assert code == 0, f"locks failed: {stderr}"
        assert "quiz1" in stdout
        # quiz1 has no score yet, so only the course challenge stays locked
        assert "1 of 4 activities locked" in stdout

    def test_locks_without_progress(self, course_file):
        code, stdout, stderr = run_cli_command("locks", str(course_file))

        assert code == 0, f"locks failed: {stderr}"
        assert "3 of 4 activities locked" in stdout

    def test_locks_disabled(self, course_file):
        code, stdout, stderr = run_cli_command("locks", str(course_file), "--no-locking")

        assert code == 0, f"locks failed: {stderr}"
        assert "0 of 4 activities locked" in stdout

    def test_invalid_course_exits_nonzero(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"units": "nope"}), encoding="utf-8")

        code, stdout, _ = run_cli_command("locks", str(path))

        assert code == 1
        assert "Error" in stdout


class TestCLISelect:
    def test_select_with_seed(self, spec_file, questions_file):
        code, stdout, stderr = run_cli_command(
            "select", str(spec_file), str(questions_file), "--seed", "u1", "--attempt", "0"
        )

        assert code == 0, f"select failed: {stderr}"
        assert "3 of 6 candidates selected" in stdout

    def test_select_missing_candidate(self, tmp_path, spec_builder):
        spec_path = tmp_path / "full.xml"
        spec_path.write_text(spec_builder([{"id": "s1", "items": list("abcdef")}]), encoding="utf-8")
        path = tmp_path / "short.json"
        path.write_text(json.dumps([{"identifier": q} for q in "abcde"]), encoding="utf-8")

        code, stdout, _ = run_cli_command("select", str(spec_path), str(path))

        assert code == 1
        assert "Error" in stdout

    def test_windows_cover_the_bank(self, spec_file, questions_file):
        code, stdout, stderr = run_cli_command(
            "windows", str(spec_file), str(questions_file), "--seed", "u1", "--attempts", "3"
        )

        assert code == 0, f"windows failed: {stderr}"
        assert "All 6 candidates covered by attempt 1" in stdout
