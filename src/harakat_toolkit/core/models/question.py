"""
Module: question

Purpose:
    Provides the HarakatQuestion dataclass - a question definition holding
    the reference answer and the candidate table, plus the response helpers
    the host quiz framework calls (completeness, summaries, correct response).

Key Functions:
    - HarakatQuestion.is_complete_response(response)
    - HarakatQuestion.get_validation_error(response)
    - HarakatQuestion.clean_response(answer)
    - HarakatQuestion.get_correct_response()
    - HarakatQuestion.to_dict() / HarakatQuestion.from_dict()

Dependencies:
    - dataclasses (std)
    - re (std)
    - core.diacritics.CandidateTable

Used By:
    - core.utils.serialization
    - grading.grader
    - output.renderer
    - gui.app

Response Format:
    Responses are dicts with a single "answer" key holding the submitted
    text, matching the hidden field the picker writes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from ..diacritics import DEFAULT_CANDIDATES, CandidateTable
from ..strings import get_string

ANSWER_KEY = "answer"

# Asterisks not preceded by a backslash
_UNESCAPED_STAR = re.compile(r"(?<!\\)\*")


@dataclass(frozen=True)
class HarakatQuestion:
    """
    Harakat question definition (immutable).

    Attributes:
        id: Unique identifier
        name: Short title shown to authors
        question_text: Prompt shown above the answer line
        answer: Reference answer with every expected diacritic
        feedback: General feedback shown after grading
        default_mark: Marks available for the question
        penalty: Fraction deducted per incorrect try in interactive modes
        candidates: Marks offered by the picker

    Invariants:
        - id and answer are non-empty
        - default_mark > 0
        - 0 <= penalty <= 1

    Example:
        >>> q = HarakatQuestion(id="q1", name="Verb", question_text="Vocalise:",
        ...                     answer="كَتَبَ")
        >>> q.is_complete_response({"answer": ""})
        False
    """

    id: str
    name: str
    question_text: str
    answer: str
    feedback: str = ""
    default_mark: float = 1.0
    penalty: float = 0.3333333
    candidates: CandidateTable = field(default=DEFAULT_CANDIDATES)

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise ValueError("Question id cannot be empty")
        if not self.answer or not self.answer.strip():
            raise ValueError(f"Question {self.id!r} has no answer")
        if self.default_mark <= 0:
            raise ValueError(f"default_mark must be positive: {self.default_mark}")
        if not (0 <= self.penalty <= 1):
            raise ValueError(f"penalty must be 0-1: {self.penalty}")

    # ─────────────────────────────────────────────────────────────────────────
    # Response Helpers
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def expected_data() -> dict[str, str]:
        """Response fields and their cleaning rule."""
        return {ANSWER_KEY: "raw_trimmed"}

    @staticmethod
    def summarise_response(response: dict[str, Any]) -> Optional[str]:
        """One-line summary of a response, or None if it has no answer."""
        if ANSWER_KEY in response:
            return response[ANSWER_KEY]
        return None

    @staticmethod
    def un_summarise_response(summary: str) -> dict[str, str]:
        """Inverse of summarise_response; empty summaries give {}."""
        if summary:
            return {ANSWER_KEY: summary}
        return {}

    @staticmethod
    def is_complete_response(response: dict[str, Any]) -> bool:
        """Check whether a response holds a non-blank answer ("0" included)."""
        value = response.get(ANSWER_KEY)
        if value is None:
            return False
        return bool(str(value).strip())

    def is_gradable_response(self, response: dict[str, Any]) -> bool:
        return self.is_complete_response(response)

    def get_validation_error(self, response: dict[str, Any]) -> str:
        """Empty string for a gradable response, else the message to show."""
        if self.is_gradable_response(response):
            return ""
        return get_string("pleaseenterananswer")

    @staticmethod
    def is_same_response(prev: dict[str, Any], new: dict[str, Any]) -> bool:
        """Compare two responses; a missing answer equals a blank one."""
        return (prev.get(ANSWER_KEY) or "") == (new.get(ANSWER_KEY) or "")

    @staticmethod
    def clean_response(answer: str) -> str:
        """
        Tidy an answer for display.

        Splits on unescaped "*", unescapes "\\*" and joins the pieces
        with single spaces.

        Example:
            >>> HarakatQuestion.clean_response("كَ*تَبَ")
            'كَ تَبَ'
        """
        bits = _UNESCAPED_STAR.split(answer)
        return " ".join(bit.replace("\\*", "*") for bit in bits).strip()

    def get_correct_response(self) -> dict[str, str]:
        return {ANSWER_KEY: self.clean_response(self.answer)}

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        The candidate table is stored as its wire string.
        """
        return {
            "id": self.id,
            "name": self.name,
            "question_text": self.question_text,
            "answer": self.answer,
            "feedback": self.feedback,
            "default_mark": self.default_mark,
            "penalty": self.penalty,
            "candidates": self.candidates.to_wire(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> HarakatQuestion:
        """Deserialize from dictionary; missing candidates use the default table."""
        wire = data.get("candidates")
        candidates = CandidateTable.from_wire(wire) if wire else DEFAULT_CANDIDATES
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            question_text=data.get("question_text", ""),
            answer=data["answer"],
            feedback=data.get("feedback", ""),
            default_mark=float(data.get("default_mark", 1.0)),
            penalty=float(data.get("penalty", 0.3333333)),
            candidates=candidates,
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"HarakatQuestion({self.id!r}, answer={self.answer!r})"
