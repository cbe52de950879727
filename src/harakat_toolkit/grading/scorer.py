"""
Module: grading.scorer

Purpose:
    Aligns a submission against the reference unit by unit and counts
    right and wrong diacritics to produce a partial-credit fraction.

Key Functions:
    - score(reference, submission): Build a ScoreReport
    - multiset_difference(expected, submitted): Unmatched expected marks

Dependencies:
    - collections.Counter (std)
    - core.models: DecomposedText, ScoreReport, UnitComparison

Used By:
    - grading.grader

Scoring Rules:
    - Units whose reference letter has no diacritic are not scored.
    - Marks are compared as multisets: order on the letter does not
      matter, and each duplicate must be matched by its own duplicate.
    - A letter with several expected marks earns credit for each mark
      that matched, even when another mark on it is wrong.
    - The reference defines the scored population; extra submitted
      marks are not penalised.
    - Alignment is index to index. A missing submission unit counts as
      a letter with no diacritics.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from ..core.models.report import ScoreReport, UnitComparison
from ..core.models.units import DecomposedText, DiacriticSet

logger = logging.getLogger(__name__)


def multiset_difference(expected: Sequence[str], submitted: Sequence[str]) -> DiacriticSet:
    """
    Expected marks with no matching submitted mark.

    Order-insensitive and duplicate-aware. The result keeps the
    expected order.

    Example:
        >>> multiset_difference(["a", "a", "b"], ["a", "c"])
        ('a', 'b')
    """
    available = Counter(submitted)
    unmatched: list[str] = []
    for mark in expected:
        if available[mark] > 0:
            available[mark] -= 1
        else:
            unmatched.append(mark)
    return tuple(unmatched)


def score(reference: DecomposedText, submission: DecomposedText) -> ScoreReport:
    """
    Score a submission against the reference.

    Args:
        reference: Decomposed reference answer
        submission: Decomposed submitted answer

    Returns:
        ScoreReport with totals from the reference. Never raises for a
        length mismatch; the mismatch is flagged on the report instead.

    Example:
        >>> from harakat_toolkit.grading.decomposer import decompose
        >>> score(decompose("بَتِ"), decompose("بَتُ")).fraction
        0.5
    """
    mismatch = len(reference.units) != len(submission.units)
    if mismatch:
        logger.warning(
            f"Unit count mismatch: reference has {len(reference.units)} letters "
            f"({reference.plain!r}), submission has {len(submission.units)} "
            f"({submission.plain!r})"
        )

    right_total = 0
    wrong_total = 0
    wrong_units: list[UnitComparison] = []

    for index, expected_unit in enumerate(reference.units):
        expected = expected_unit.diacritics
        expected_count = len(expected)
        if expected_count == 0:
            continue

        submitted_unit = submission.unit_at(index)
        submitted = submitted_unit.diacritics if submitted_unit is not None else ()

        missing = multiset_difference(expected, submitted)
        wrong_count = len(missing)

        if wrong_count < expected_count:
            right_total += expected_count - wrong_count
        wrong_total += wrong_count

        if wrong_count > 0:
            wrong_units.append(UnitComparison(
                index=index,
                expected_diacritics=expected,
                submitted_diacritics=submitted,
                missing_or_wrong=missing,
                matched_count=expected_count - wrong_count,
            ))

    report = ScoreReport(
        right_total=right_total,
        wrong_total=wrong_total,
        total_diacritics=reference.total_diacritics,
        wrong_units=tuple(wrong_units),
        unit_count_mismatch=mismatch,
    )
    logger.debug(f"Scored {submission.plain!r}: {report!r}")
    return report
