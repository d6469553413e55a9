"""
Progression gating.

Components:
- LockEvaluator: Sequential lock map over a course's traversal order
- ProgressRecord / Proficiency: Per-activity progress consumed by the evaluator
- build_progress_snapshot: Lenient builder for progress payloads
"""
from .locks import PROFICIENCY_THRESHOLD, LockEvaluator, LockMap, evaluate_locks
from .models import Proficiency, ProgressRecord, ProgressSnapshot
from .snapshot import ProgressEntry, build_progress_snapshot, load_progress_file

__all__ = [
    "LockEvaluator",
    "LockMap",
    "evaluate_locks",
    "PROFICIENCY_THRESHOLD",
    "Proficiency",
    "ProgressRecord",
    "ProgressSnapshot",
    "ProgressEntry",
    "build_progress_snapshot",
    "load_progress_file",
]
