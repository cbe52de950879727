"""
Grading Package

Decomposition, scoring and display annotation for harakat answers.

Pipeline:
    text -> decompose() -> score() -> build_views()

grade_response() runs the whole pipeline for one question response.
"""

from .config import GradingConfig
from .decomposer import decompose, strip_diacritics, LeadingDiacriticError
from .scorer import score, multiset_difference
from .presentation import build_views, build_entry_view
from .grader import grade_response, num_parts_right, GradeOutcome, GradeState

__all__ = [
    "GradingConfig",
    "decompose",
    "strip_diacritics",
    "LeadingDiacriticError",
    "score",
    "multiset_difference",
    "build_views",
    "build_entry_view",
    "grade_response",
    "num_parts_right",
    "GradeOutcome",
    "GradeState",
]
