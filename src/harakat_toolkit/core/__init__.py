"""
Harakat Toolkit Core Package

Shared classification table, data models and utilities. These are the
single source of truth for the grading, output, picker and gui modules.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Frozen dataclasses; a new instance is built for any change

2. **Calculated Totals (Never Stored)**
   - `total_diacritics` is checked against the units on construction
   - `ScoreReport.fraction` is always calculated from the totals

3. **Fixed Classification**
   - The eleven diacritic code points live in `core.diacritics` and are
     not configurable per call
"""

from .diacritics import CandidateTable, DEFAULT_CANDIDATES, is_diacritic
from .models import (
    Unit,
    DecomposedText,
    ScoreReport,
    UnitStatus,
    AnnotatedView,
    HarakatQuestion,
)

__all__ = [
    "CandidateTable",
    "DEFAULT_CANDIDATES",
    "is_diacritic",
    "Unit",
    "DecomposedText",
    "ScoreReport",
    "UnitStatus",
    "AnnotatedView",
    "HarakatQuestion",
]
