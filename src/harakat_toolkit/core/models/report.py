"""
Module: report

Purpose:
    Result types produced by grading: per-unit comparisons, the score
    report, and the annotated views consumed by the renderer and picker.

Key Classes:
    - UnitComparison: One mismatching unit
    - ScoreReport: Totals, fraction and mismatching units
    - UnitStatus: Display classification of a unit
    - AnnotatedView: Ordered units tagged with a UnitStatus
    - PresentationViews: Answer view + stem view pair

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - grading.scorer
    - grading.presentation
    - grading.grader
    - output.renderer
    - picker.state
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .units import DiacriticSet


@dataclass(frozen=True, slots=True)
class UnitComparison:
    """
    Comparison of a reference unit against the submitted unit at the same index.

    Attributes:
        index: 0-based unit index
        expected_diacritics: Marks on the reference unit
        submitted_diacritics: Marks on the submitted unit (empty if missing)
        missing_or_wrong: Multiset difference expected - submitted
        matched_count: Expected marks found in the submission
    """

    index: int
    expected_diacritics: DiacriticSet
    submitted_diacritics: DiacriticSet
    missing_or_wrong: DiacriticSet
    matched_count: int

    @property
    def wrong_count(self) -> int:
        return len(self.missing_or_wrong)


@dataclass(frozen=True)
class ScoreReport:
    """
    Outcome of scoring one submission against one reference.

    Attributes:
        right_total: Expected marks matched
        wrong_total: Expected marks missing or wrong
        total_diacritics: Marks in the reference (the scored population)
        wrong_units: Comparisons for units with at least one wrong mark
        unit_count_mismatch: Submission had a different number of letters

    Invariants:
        - 0 <= right_total + wrong_total <= total_diacritics
        - fraction is 0.0 when total_diacritics == 0

    Example:
        >>> r = ScoreReport(right_total=1, wrong_total=1, total_diacritics=2)
        >>> r.fraction
        0.5
    """

    right_total: int
    wrong_total: int
    total_diacritics: int
    wrong_units: Tuple[UnitComparison, ...] = ()
    unit_count_mismatch: bool = False

    def __post_init__(self) -> None:
        """Validate totals on construction."""
        if self.right_total < 0 or self.wrong_total < 0:
            raise ValueError(
                f"Totals cannot be negative: right={self.right_total}, wrong={self.wrong_total}"
            )
        if self.right_total + self.wrong_total > self.total_diacritics:
            raise ValueError(
                f"right + wrong ({self.right_total + self.wrong_total}) exceeds "
                f"total_diacritics ({self.total_diacritics})"
            )

    @classmethod
    def zero(cls, total_diacritics: int = 0) -> ScoreReport:
        """Report for a response that was never scored."""
        return cls(right_total=0, wrong_total=0, total_diacritics=total_diacritics)

    @property
    def fraction(self) -> float:
        """Partial credit in [0, 1]; 0.0 when nothing is scored."""
        if self.total_diacritics <= 0:
            return 0.0
        return self.right_total / self.total_diacritics

    @property
    def wrong_indices(self) -> frozenset[int]:
        return frozenset(c.index for c in self.wrong_units)

    def is_wrong(self, index: int) -> bool:
        """Check whether the unit at index had a wrong or missing mark."""
        return index in self.wrong_indices

    def comparison_for(self, index: int) -> Optional[UnitComparison]:
        for comparison in self.wrong_units:
            if comparison.index == index:
                return comparison
        return None

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"ScoreReport({self.right_total}/{self.total_diacritics}, "
            f"wrong={self.wrong_total}, fraction={self.fraction:.3f})"
        )


class UnitStatus(str, Enum):
    """How a unit is displayed."""
    CORRECT = "correct"                        # Answer view: all marks right
    INCORRECT = "incorrect"                    # Answer view: a mark missing or wrong
    NONE_EXPECTED = "none-expected"            # No mark on the reference letter
    PICKABLE = "pickable"                      # Stem view: letter opens the picker
    PICKABLE_CONFIRMED = "pickable-confirmed"  # Stem view: pickable, already right

    def __str__(self) -> str:
        return self.value

    @property
    def is_pickable(self) -> bool:
        return self in (UnitStatus.PICKABLE, UnitStatus.PICKABLE_CONFIRMED)


@dataclass(frozen=True, slots=True)
class AnnotatedUnit:
    """A unit tagged for display."""

    index: int
    letter: str
    diacritics: DiacriticSet
    status: UnitStatus

    @property
    def text(self) -> str:
        return self.letter + "".join(self.diacritics)


@dataclass(frozen=True)
class AnnotatedView:
    """
    Ordered display units, derived from a decomposition and (optionally) a report.

    Never mutated on its own; rebuild it from its sources instead.
    """

    units: Tuple[AnnotatedUnit, ...] = ()

    @property
    def text(self) -> str:
        """Visible line: every letter followed by its shown diacritics."""
        return "".join(u.text for u in self.units)

    @property
    def statuses(self) -> Tuple[UnitStatus, ...]:
        return tuple(u.status for u in self.units)

    def pickable_indices(self) -> Tuple[int, ...]:
        return tuple(u.index for u in self.units if u.status.is_pickable)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[AnnotatedUnit]:
        return iter(self.units)

    def __getitem__(self, index: int) -> AnnotatedUnit:
        return self.units[index]


@dataclass(frozen=True)
class PresentationViews:
    """Answer view (after grading) and stem view (picker entry)."""

    answer_view: AnnotatedView
    stem_view: AnnotatedView
