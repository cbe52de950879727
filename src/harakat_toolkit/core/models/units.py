"""
Module: units

Purpose:
    Provides Unit and DecomposedText - the decomposition of an answer string
    into base letters, each carrying the diacritics typed after it.

Key Functions:
    - Unit.expected_count: Number of diacritics on the letter
    - Unit.text: Letter followed by its diacritics
    - DecomposedText.unit_at(index): Unit or None when out of range
    - DecomposedText.empty(): Decomposition of ""

Dependencies:
    - dataclasses (std)
    - core.diacritics: Classification predicate

Used By:
    - grading.decomposer: Builds DecomposedText
    - grading.scorer: Compares units index by index
    - grading.presentation: Annotates units for display

Invariants:
    A diacritic directly after a base letter belongs to that letter's unit.
    One unit per base letter, so len(units) == len(plain).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..diacritics import is_diacritic

# Ordered marks on one letter; duplicates are kept
DiacriticSet = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Unit:
    """
    One base letter plus the diacritics attached to it.

    Attributes:
        letter: Single non-diacritic code point
        diacritics: Marks in the order they appeared in the source text

    Invariants:
        - letter is exactly one code point and is not a diacritic
        - every element of diacritics is a diacritic

    Example:
        >>> u = Unit("ب", ("\\u064E",))
        >>> u.expected_count
        1
    """

    letter: str
    diacritics: DiacriticSet = ()

    def __post_init__(self) -> None:
        """Validate unit on construction."""
        if len(self.letter) != 1:
            raise ValueError(f"Unit letter must be one code point: {self.letter!r}")
        if is_diacritic(self.letter):
            raise ValueError(f"Unit letter cannot be a diacritic: {self.letter!r}")
        for mark in self.diacritics:
            if not is_diacritic(mark):
                raise ValueError(f"Not a diacritic: {mark!r} on {self.letter!r}")

    @property
    def expected_count(self) -> int:
        """Number of diacritics carried by this unit."""
        return len(self.diacritics)

    @property
    def has_diacritics(self) -> bool:
        return bool(self.diacritics)

    @property
    def text(self) -> str:
        """Letter followed by its diacritics, as displayed."""
        return self.letter + "".join(self.diacritics)


@dataclass(frozen=True)
class DecomposedText:
    """
    A string split into units (immutable, derived per call).

    Attributes:
        plain: Concatenation of all letters, no diacritics
        original: Untouched input text
        total_diacritics: Sum of diacritic counts across all units
        units: Units in source order, 0-based

    Invariants:
        - len(units) == len(plain)
        - total_diacritics == sum(len(u.diacritics) for u in units)

    Example:
        >>> d = DecomposedText.from_units("بَت", (Unit("ب", ("\\u064E",)), Unit("ت")))
        >>> d.plain, d.total_diacritics
        ('بت', 1)
    """

    plain: str
    original: str
    total_diacritics: int
    units: Tuple[Unit, ...]

    def __post_init__(self) -> None:
        """Validate decomposition invariants on construction."""
        if len(self.units) != len(self.plain):
            raise ValueError(
                f"Unit count {len(self.units)} does not match plain length {len(self.plain)}"
            )
        counted = sum(u.expected_count for u in self.units)
        if counted != self.total_diacritics:
            raise ValueError(
                f"total_diacritics {self.total_diacritics} != counted {counted}"
            )

    @classmethod
    def from_units(cls, original: str, units: Tuple[Unit, ...]) -> DecomposedText:
        """Build a decomposition, deriving plain text and totals from units."""
        units = tuple(units)
        return cls(
            plain="".join(u.letter for u in units),
            original=original,
            total_diacritics=sum(u.expected_count for u in units),
            units=units,
        )

    @classmethod
    def empty(cls) -> DecomposedText:
        """Decomposition of the empty string."""
        return cls(plain="", original="", total_diacritics=0, units=())

    def unit_at(self, index: int) -> Optional[Unit]:
        """
        Get the unit at index, or None when out of range.

        Negative indices are treated as out of range.
        """
        if 0 <= index < len(self.units):
            return self.units[index]
        return None

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"DecomposedText({self.plain!r}, units={len(self.units)}, marks={self.total_diacritics})"
