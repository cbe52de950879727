"""
Module: grading.decomposer

Purpose:
    Splits answer text into units: each base letter with the diacritics
    typed after it.

Key Functions:
    - decompose(text): Build a DecomposedText
    - strip_diacritics(text): Remove every classified diacritic

Dependencies:
    - core.diacritics: is_diacritic
    - core.models.units: Unit, DecomposedText

Used By:
    - grading.grader
    - gui.app
"""

from __future__ import annotations

import logging

from ..core.diacritics import is_diacritic
from ..core.models.units import DecomposedText, Unit
from .config import LEADING_POLICIES

logger = logging.getLogger(__name__)


class LeadingDiacriticError(ValueError):
    """A diacritic appeared before any base letter."""

    def __init__(self, text: str, mark: str):
        super().__init__(f"Diacritic U+{ord(mark):04X} precedes any letter in {text!r}")
        self.text = text
        self.mark = mark


def decompose(text: str, *, leading_policy: str = "discard") -> DecomposedText:
    """
    Split text into base-letter units.

    Code points are read in source order. A diacritic attaches to the
    current unit; anything else opens a new unit. Whitespace and
    punctuation are base characters too, so they become units with no
    diacritics.

    Args:
        text: Answer text
        leading_policy: "discard" drops diacritics that precede every
            letter; "reject" raises LeadingDiacriticError for them

    Returns:
        DecomposedText with one unit per base character

    Raises:
        LeadingDiacriticError: If leading_policy="reject" and text starts
            with a diacritic
        ValueError: If leading_policy is unknown

    Example:
        >>> d = decompose("كَتَبَ")
        >>> d.plain, d.total_diacritics
        ('كتب', 3)
    """
    if leading_policy not in LEADING_POLICIES:
        raise ValueError(f"Unknown leading_policy: {leading_policy!r}")

    letters: list[str] = []
    marks: list[list[str]] = []

    for char in text:
        if is_diacritic(char):
            if not letters:
                if leading_policy == "reject":
                    raise LeadingDiacriticError(text, char)
                logger.debug(f"Discarding leading diacritic U+{ord(char):04X}")
                continue
            marks[-1].append(char)
        else:
            letters.append(char)
            marks.append([])

    units = tuple(Unit(letter, tuple(m)) for letter, m in zip(letters, marks))
    return DecomposedText.from_units(text, units)


def strip_diacritics(text: str) -> str:
    """Return text with every classified diacritic removed."""
    return "".join(c for c in text if not is_diacritic(c))
