"""
Module: core.diacritics

Purpose:
    The fixed diacritic classification table. Decides which code points are
    harakat (attach to the preceding letter) and which are base characters,
    and holds the candidate table offered by the picker, including its
    compact wire format.

Key Functions:
    - is_diacritic(char): Classification predicate
    - CandidateTable.from_wire(text): Parse "0x064E|0x0651::0x064F" strings
    - CandidateTable.to_wire(): Inverse of from_wire

Dependencies:
    - dataclasses (std)
    - logging (std)

Used By:
    - core.models.units: Unit invariants
    - grading.decomposer: Splitting text into units
    - picker.state: Option lists
    - core.schemas.validator: Candidate strings in question data

Wire Format:
    Entries are separated by "|". A two-mark stacked combination joins its
    marks with "::". Each mark is a 0x-prefixed hexadecimal code point. The
    client parses the string verbatim, so the format must stay stable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────────────────────────────

FATHATAN = "\u064B"
DAMMATAN = "\u064C"
KASRATAN = "\u064D"
FATHA = "\u064E"
DAMMA = "\u064F"
KASRA = "\u0650"
SHADDA = "\u0651"
SUKUN = "\u0652"
SUBSCRIPT_ALEF = "\u0656"
INVERTED_DAMMA = "\u0657"
SUPERSCRIPT_ALEF = "\u0670"

DIACRITIC_NAMES: dict[str, str] = {
    FATHATAN: "fathatan",
    DAMMATAN: "dammatan",
    KASRATAN: "kasratan",
    FATHA: "fatha",
    DAMMA: "damma",
    KASRA: "kasra",
    SHADDA: "shadda",
    SUKUN: "sukun",
    SUBSCRIPT_ALEF: "subscript alef",
    INVERTED_DAMMA: "inverted damma",
    SUPERSCRIPT_ALEF: "superscript alef",
}

DIACRITICS: frozenset[str] = frozenset(DIACRITIC_NAMES)

WIRE_SEPARATOR = "|"
COMBINATION_SEPARATOR = "::"
MAX_STACKED_MARKS = 2


def is_diacritic(char: str) -> bool:
    """
    Check whether a single code point is a classified diacritic.

    Args:
        char: One code point

    Returns:
        True if char is one of the eleven harakat code points

    Example:
        >>> is_diacritic("\\u064E")
        True
        >>> is_diacritic("ب")
        False
    """
    return char in DIACRITICS


def format_code_point(char: str) -> str:
    """Format one mark the way the wire format writes it ("0x064E")."""
    return f"0x{ord(char):04X}"


class CandidateTableError(ValueError):
    """Raised for a candidate entry that cannot be used by the picker."""


# ─────────────────────────────────────────────────────────────────────────────
# Candidate Table
# ─────────────────────────────────────────────────────────────────────────────

Candidate = Tuple[str, ...]


def _parse_entry(entry: str) -> Candidate:
    """Parse one wire entry into a tuple of marks."""
    parts = entry.split(COMBINATION_SEPARATOR)
    if len(parts) > MAX_STACKED_MARKS:
        raise CandidateTableError(f"too many stacked marks in {entry!r}")

    marks = []
    for part in parts:
        token = part.strip()
        try:
            char = chr(int(token, 16))
        except (ValueError, OverflowError) as e:
            raise CandidateTableError(f"not a code point: {token!r}") from e
        if not is_diacritic(char):
            raise CandidateTableError(f"{token} is not a diacritic")
        marks.append(char)
    return tuple(marks)


@dataclass(frozen=True)
class CandidateTable:
    """
    Ordered candidate marks offered for one base letter.

    Each entry is either a single mark or a stacked pair (e.g. shadda
    followed by fatha). Order is the display order in the picker.

    Attributes:
        entries: Tuple of candidates; each candidate is a tuple of 1-2 marks

    Invariants:
        - Every mark is a classified diacritic
        - No candidate has more than two marks

    Example:
        >>> table = CandidateTable.from_wire("0x064E|0x0651::0x064E")
        >>> len(table.combinations)
        1
        >>> table.to_wire()
        '0x064E|0x0651::0x064E'
    """

    entries: Tuple[Candidate, ...]

    def __post_init__(self) -> None:
        """Validate entries on construction."""
        for entry in self.entries:
            if not 1 <= len(entry) <= MAX_STACKED_MARKS:
                raise ValueError(f"Candidate must have 1-2 marks: {entry!r}")
            for mark in entry:
                if not is_diacritic(mark):
                    raise ValueError(f"Candidate mark is not a diacritic: {mark!r}")

    @classmethod
    def from_marks(cls, entries: Iterable[Iterable[str]]) -> CandidateTable:
        """Build a table from an iterable of mark sequences."""
        return cls(entries=tuple(tuple(entry) for entry in entries))

    @classmethod
    def from_wire(cls, text: str) -> CandidateTable:
        """
        Parse the compact wire string.

        Unparsable entries are skipped with a warning so one bad entry
        never disables the whole picker.

        Args:
            text: String like "0x064B|0x0651::0x064F"

        Returns:
            CandidateTable holding every entry that parsed
        """
        entries: list[Candidate] = []
        if not text or not text.strip():
            return cls(entries=())

        for position, raw in enumerate(text.split(WIRE_SEPARATOR)):
            try:
                entries.append(_parse_entry(raw))
            except CandidateTableError as e:
                logger.warning(f"Skipping candidate entry {position} ({raw!r}): {e}")
        return cls(entries=tuple(entries))

    def to_wire(self) -> str:
        """Serialize back to the wire string."""
        return WIRE_SEPARATOR.join(
            COMBINATION_SEPARATOR.join(format_code_point(mark) for mark in entry)
            for entry in self.entries
        )

    @property
    def singles(self) -> Tuple[Candidate, ...]:
        """Entries with exactly one mark."""
        return tuple(e for e in self.entries if len(e) == 1)

    @property
    def combinations(self) -> Tuple[Candidate, ...]:
        """Stacked two-mark entries."""
        return tuple(e for e in self.entries if len(e) == MAX_STACKED_MARKS)

    def render(self, letter: str) -> list[str]:
        """Letter followed by each candidate, in table order."""
        return [letter + "".join(entry) for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_WIRE = (
    "0x064B|0x064C|0x064D|0x064E|0x064F|0x0650|"
    "0x0651::0x064F|0x0651::0x064E|0x0651::0x0650|"
    "0x0652|0x0656|0x0657|0x0670"
)

DEFAULT_CANDIDATES = CandidateTable.from_marks([
    (FATHATAN,),
    (DAMMATAN,),
    (KASRATAN,),
    (FATHA,),
    (DAMMA,),
    (KASRA,),
    (SHADDA, DAMMA),
    (SHADDA, FATHA),
    (SHADDA, KASRA),
    (SUKUN,),
    (SUBSCRIPT_ALEF,),
    (INVERTED_DAMMA,),
    (SUPERSCRIPT_ALEF,),
])
