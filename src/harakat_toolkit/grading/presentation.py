"""
Module: grading.presentation

Purpose:
    Builds the display views from decompositions and a score report:
    the answer view shown after grading and the stem view that drives
    the picker.

Key Functions:
    - build_views(reference, submission, report): Answer + stem views
    - build_entry_view(reference, current): Stem view before grading

Dependencies:
    - core.models: DecomposedText, ScoreReport, AnnotatedView, UnitStatus

Used By:
    - grading.grader
    - output.renderer
    - picker.state
"""

from __future__ import annotations

from typing import Optional

from ..core.models.report import (
    AnnotatedUnit,
    AnnotatedView,
    PresentationViews,
    ScoreReport,
    UnitStatus,
)
from ..core.models.units import DecomposedText


def _submitted_marks(submission: Optional[DecomposedText], index: int) -> tuple[str, ...]:
    if submission is None:
        return ()
    unit = submission.unit_at(index)
    return unit.diacritics if unit is not None else ()


def build_views(
    reference: DecomposedText,
    submission: DecomposedText,
    report: ScoreReport,
) -> PresentationViews:
    """
    Annotate every reference unit for display after grading.

    The answer view shows the learner's own marks, styled correct or
    incorrect. Incorrect units show the reference letter under those
    marks. Letters with no expected mark are shown plain in both views.

    Args:
        reference: Decomposed reference answer
        submission: Decomposed submitted answer
        report: Report from scoring this pair

    Returns:
        PresentationViews with one entry per reference unit
    """
    wrong = report.wrong_indices
    answer_units: list[AnnotatedUnit] = []
    stem_units: list[AnnotatedUnit] = []

    for index, ref_unit in enumerate(reference.units):
        sub_unit = submission.unit_at(index)
        letter = sub_unit.letter if sub_unit is not None else ref_unit.letter
        marks = _submitted_marks(submission, index)

        if not ref_unit.has_diacritics:
            answer_status = UnitStatus.NONE_EXPECTED
            stem_status = UnitStatus.NONE_EXPECTED
            marks = ()
        elif index in wrong:
            answer_status = UnitStatus.INCORRECT
            letter = ref_unit.letter
            stem_status = UnitStatus.PICKABLE
        else:
            answer_status = UnitStatus.CORRECT
            stem_status = UnitStatus.PICKABLE_CONFIRMED

        answer_units.append(AnnotatedUnit(index, letter, marks, answer_status))
        stem_units.append(AnnotatedUnit(index, ref_unit.letter, (), stem_status))

    return PresentationViews(
        answer_view=AnnotatedView(tuple(answer_units)),
        stem_view=AnnotatedView(tuple(stem_units)),
    )


def build_entry_view(
    reference: DecomposedText,
    current: Optional[DecomposedText] = None,
) -> AnnotatedView:
    """
    Stem view before grading.

    Every letter that expects a mark is pickable, whatever the current
    answer holds. When a current answer is given, its marks are shown on
    the matching letters so a saved attempt reopens as it was left.

    Args:
        reference: Decomposed reference answer
        current: Decomposed in-progress answer, if any

    Returns:
        AnnotatedView with PICKABLE / NONE_EXPECTED statuses
    """
    units = []
    for index, ref_unit in enumerate(reference.units):
        status = UnitStatus.PICKABLE if ref_unit.has_diacritics else UnitStatus.NONE_EXPECTED
        units.append(AnnotatedUnit(
            index=index,
            letter=ref_unit.letter,
            diacritics=_submitted_marks(current, index),
            status=status,
        ))
    return AnnotatedView(tuple(units))
