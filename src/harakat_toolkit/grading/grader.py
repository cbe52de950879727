"""
Module: grading.grader

Purpose:
    Grades one response to a HarakatQuestion: decomposes both texts,
    scores them, builds the display views and maps the fraction onto a
    graded state for the host quiz framework.

Key Functions:
    - grade_response(question, response): Full GradeOutcome
    - num_parts_right(question, response): (right, total) pair

Key Classes:
    - GradeState: Graded state for a fraction
    - GradeOutcome: Everything produced by one grading call

Dependencies:
    - grading.decomposer, grading.scorer, grading.presentation
    - core.models.question.HarakatQuestion

Used By:
    - output.renderer: render_formulation()
    - cli
    - gui.app
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..core.models.question import ANSWER_KEY, HarakatQuestion
from ..core.models.report import PresentationViews, ScoreReport
from ..core.models.units import DecomposedText
from .config import GradingConfig
from .decomposer import LeadingDiacriticError, decompose
from .presentation import build_entry_view, build_views
from .scorer import score

logger = logging.getLogger(__name__)

# Fractions this close to 0 or 1 count as fully wrong or right
FRACTION_TOLERANCE = 0.000001


class GradeState(str, Enum):
    """Graded state of an attempt."""
    GRADED_RIGHT = "gradedright"
    GRADED_PARTIAL = "gradedpartial"
    GRADED_WRONG = "gradedwrong"
    INVALID = "invalid"  # Response incomplete, not graded

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_fraction(cls, fraction: float) -> GradeState:
        """Map a fraction in [0, 1] to a graded state."""
        if fraction < FRACTION_TOLERANCE:
            return cls.GRADED_WRONG
        if fraction > 1 - FRACTION_TOLERANCE:
            return cls.GRADED_RIGHT
        return cls.GRADED_PARTIAL


@dataclass(frozen=True)
class GradeOutcome:
    """
    Result of grading one response.

    Attributes:
        fraction: Partial credit in [0, 1]
        state: Graded state for the fraction, or INVALID
        report: Score report (zero report when not attempted)
        views: Answer and stem views
        reference: Decomposed reference answer
        submission: Decomposed submitted answer
    """

    fraction: float
    state: GradeState
    report: ScoreReport
    views: PresentationViews
    reference: DecomposedText
    submission: DecomposedText

    @property
    def attempted(self) -> bool:
        return self.state is not GradeState.INVALID


def _not_graded(reference: DecomposedText) -> GradeOutcome:
    entry = build_entry_view(reference)
    return GradeOutcome(
        fraction=0.0,
        state=GradeState.INVALID,
        report=ScoreReport.zero(reference.total_diacritics),
        views=PresentationViews(answer_view=entry, stem_view=entry),
        reference=reference,
        submission=DecomposedText.empty(),
    )


def _response_text(response: dict[str, Any], config: GradingConfig) -> str:
    value = response.get(ANSWER_KEY)
    text = "" if value is None else str(value)
    return text.strip() if config.trim_response else text


def grade_response(
    question: HarakatQuestion,
    response: dict[str, Any],
    config: Optional[GradingConfig] = None,
) -> GradeOutcome:
    """
    Grade a response against the question's reference answer.

    Incomplete responses are not scored: they return state INVALID with
    a zero report and the entry view as stem. With leading_policy="reject",
    a submission that starts with a diacritic is treated the same way.
    The policy applies to the submission only; a leading mark on the
    reference answer is always discarded.

    Args:
        question: Question definition
        response: Dict with an "answer" key
        config: Grading configuration (defaults to GradingConfig())

    Returns:
        GradeOutcome; always well-formed
    """
    config = config or GradingConfig()
    reference = decompose(question.answer)

    if not question.is_complete_response(response):
        logger.debug(f"Question {question.id}: empty response, not graded")
        return _not_graded(reference)

    try:
        submission = decompose(_response_text(response, config), leading_policy=config.leading_policy)
    except LeadingDiacriticError as e:
        logger.warning(f"Question {question.id}: response rejected: {e}")
        return _not_graded(reference)

    report = score(reference, submission)

    fraction = report.fraction
    outcome = GradeOutcome(
        fraction=fraction,
        state=GradeState.for_fraction(fraction),
        report=report,
        views=build_views(reference, submission, report),
        reference=reference,
        submission=submission,
    )
    logger.info(
        f"Question {question.id}: {report.right_total}/{report.total_diacritics} "
        f"marks right ({outcome.state})"
    )
    return outcome


def num_parts_right(
    question: HarakatQuestion,
    response: dict[str, Any],
    config: Optional[GradingConfig] = None,
) -> tuple[int, int]:
    """Right diacritics and total expected diacritics for a response."""
    report = grade_response(question, response, config).report
    return report.right_total, report.total_diacritics
