"""
Core Models Package

Immutable data models for decomposition, scoring and display.

All models in this package are frozen dataclasses. They are derived
values built per grading or render call and are never stored, which
makes them safe to share between threads and to compare for equality.
"""

from .units import DiacriticSet, Unit, DecomposedText
from .report import (
    UnitComparison,
    ScoreReport,
    UnitStatus,
    AnnotatedUnit,
    AnnotatedView,
    PresentationViews,
)
from .question import HarakatQuestion

__all__ = [
    "DiacriticSet",
    "Unit",
    "DecomposedText",
    "UnitComparison",
    "ScoreReport",
    "UnitStatus",
    "AnnotatedUnit",
    "AnnotatedView",
    "PresentationViews",
    "HarakatQuestion",
]
