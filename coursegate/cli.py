"""
coursegate developer CLI.

Offline inspection of gating and question selection:
    python -m coursegate.cli locks course.json progress.json
    python -m coursegate.cli select test.xml questions.json --seed u1 --attempt 0
    python -m coursegate.cli windows test.xml questions.json --seed u1 --attempts 4
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import get_settings
from coursegate.core.errors import CoursegateError

app = typer.Typer(
    help="Inspect progression locks and question selection",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else get_settings().log_level.upper())


def _read_json(path: Path):
    if not path.exists():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)
    return json.loads(path.read_text(encoding="utf-8"))


def _read_candidates(path: Path) -> dict:
    from coursegate.assessment import candidate_pool

    data = _read_json(path)
    if isinstance(data, dict):
        return data
    return candidate_pool(data)


@app.command("locks")
def show_locks(
    course_file: Path = typer.Argument(..., help="Curriculum JSON payload"),
    progress_file: Optional[Path] = typer.Argument(None, help="Progress JSON (activity id -> record)"),
    no_locking: bool = typer.Option(False, "--no-locking", help="Disable sequential locking"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Override proficiency threshold"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Show every activity of a course in traversal order with its lock state.

    Examples:
        coursegate locks course.json progress.json
        coursegate locks course.json --no-locking
    """
    from coursegate.curriculum import load_course, ordered_activities
    from coursegate.progression import LockEvaluator, build_progress_snapshot

    _configure_logging(verbose)

    try:
        course = load_course(_read_json(course_file))
        progress = build_progress_snapshot(_read_json(progress_file)) if progress_file else {}
        evaluator = LockEvaluator(threshold)
        locking_enabled = get_settings().locking_enabled and not no_locking
        lock = evaluator.evaluate(course, progress, locking_enabled)
    except CoursegateError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{course.title or course.id} (threshold {evaluator.threshold:g})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Activity")
    table.add_column("Kind", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")

    for position, activity in enumerate(ordered_activities(course), start=1):
        record = progress.get(activity.id)
        score = f"{record.score:g}" if record and record.score is not None else "-"
        status = "[red]locked[/red]" if lock[activity.id] else "[green]open[/green]"
        table.add_row(str(position), activity.id, activity.kind.value, score, status)

    console.print(table)
    console.print(f"  {sum(lock.values())} of {len(lock)} activities locked")


@app.command("select")
def show_selection(
    spec_file: Path = typer.Argument(..., help="Test specification document"),
    questions_file: Path = typer.Argument(..., help="Candidate questions JSON (list or id -> payload)"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Base seed"),
    attempt: Optional[int] = typer.Option(None, "--attempt", "-a", min=0, help="Zero-based attempt number"),
    test_id: Optional[str] = typer.Option(None, "--test-id", help="Override the test identifier"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Print the ordered questions selected for one attempt.

    Examples:
        coursegate select test.xml questions.json --seed user1:quiz1 --attempt 2
    """
    from coursegate.assessment import DeterminismParams, select_questions

    _configure_logging(verbose)

    if not spec_file.exists():
        console.print(f"[red]Error: File not found: {spec_file}[/red]")
        raise typer.Exit(1)
    spec_text = spec_file.read_text(encoding="utf-8")
    candidates = _read_candidates(questions_file)

    params = None
    if seed is not None or attempt is not None:
        params = DeterminismParams(base_seed=seed, attempt_number=attempt)

    try:
        questions = select_questions(spec_text, candidates, params, assessment_identifier=test_id)
    except CoursegateError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for position, question in enumerate(questions, start=1):
        console.print(f"  {position:>3}. {question.id}")
    console.print(f"\n[bold]{len(questions)}[/bold] of {len(candidates)} candidates selected")


@app.command("windows")
def show_windows(
    spec_file: Path = typer.Argument(..., help="Test specification document"),
    questions_file: Path = typer.Argument(..., help="Candidate questions JSON (list or id -> payload)"),
    seed: str = typer.Option(..., "--seed", "-s", help="Base seed"),
    attempts: int = typer.Option(4, "--attempts", "-n", min=1, help="Number of attempts to preview"),
    test_id: Optional[str] = typer.Option(None, "--test-id", help="Override the test identifier"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Preview how selections rotate across attempts and when the bank is covered.

    Examples:
        coursegate windows test.xml questions.json --seed user1:quiz1 --attempts 5
    """
    from coursegate.assessment import DeterminismParams, select_questions

    _configure_logging(verbose)

    if not spec_file.exists():
        console.print(f"[red]Error: File not found: {spec_file}[/red]")
        raise typer.Exit(1)
    spec_text = spec_file.read_text(encoding="utf-8")
    candidates = _read_candidates(questions_file)

    table = Table(title=f"Rotation preview (seed {seed})")
    table.add_column("Attempt", justify="right")
    table.add_column("Questions")
    table.add_column("New", justify="right", style="green")
    table.add_column("Seen", justify="right")

    seen: set[str] = set()
    covered_at: Optional[int] = None
    for attempt in range(attempts):
        params = DeterminismParams(base_seed=seed, attempt_number=attempt)
        try:
            questions = select_questions(spec_text, candidates, params, assessment_identifier=test_id)
        except CoursegateError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1)

        ids = [q.id for q in questions]
        new = [question_id for question_id in ids if question_id not in seen]
        seen.update(ids)
        table.add_row(str(attempt), ", ".join(ids), str(len(new)), str(len(seen)))
        if covered_at is None and len(seen) == len(candidates):
            covered_at = attempt

    console.print(table)
    if covered_at is not None:
        console.print(f"  All {len(candidates)} candidates covered by attempt {covered_at}")
    else:
        console.print(f"  {len(seen)} of {len(candidates)} candidates seen in {attempts} attempts")


def run():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
