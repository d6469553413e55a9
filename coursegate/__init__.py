"""
coursegate - progression gating and deterministic question selection.

Two independent, side-effect-free pipelines:
- progression: which activities of a course are open to a learner
- assessment: which questions a learner sees on a given attempt
"""

__version__ = "1.0.0"
