"""
Schema Validation Utilities

Validates question data and reference answer text before models are built.

- `validate_question()` checks stored question dictionaries
- `validate_answer_text()` applies the authoring rules for answers
- `clean_answer_text()` strips characters that cannot be part of an answer
- Fail fast on any violation with a `ValidationError` naming the field
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from ..diacritics import CandidateTable, is_diacritic
from ..strings import get_string


# Schema version constants
QUESTION_SCHEMA_VERSION = 1

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}

# Arabic block plus the punctuation authors may keep in an answer
_NOT_ANSWER_CHARS = re.compile(r"[^\u0600-\u06FF !@#$%^&*()]")
_ARABIC_LETTER = re.compile(r"[\u0620-\u064A\u0671-\u06D3\u06FA-\u06FF]")


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


# ─────────────────────────────────────────────────────────────────────────────
# Answer Text
# ─────────────────────────────────────────────────────────────────────────────

def clean_answer_text(text: str) -> str:
    """
    Remove everything that is not Arabic script or allowed punctuation.

    Example:
        >>> clean_answer_text("كَتَبَ (kataba)")
        'كَتَبَ ()'
    """
    return _NOT_ANSWER_CHARS.sub("", text)


def validate_answer_text(text: Any, path: str = "answer") -> None:
    """
    Validate a reference answer.

    Args:
        text: Answer text to check
        path: Field path reported in the error

    Raises:
        ValidationError: If the answer is blank, has no Arabic letter or
            starts with a diacritic
    """
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(get_string("notenoughanswers", 1), path=path)
    if not _ARABIC_LETTER.search(text):
        raise ValidationError(get_string("notarabicanswers"), path=path)
    first = text.strip()[0]
    if is_diacritic(first):
        raise ValidationError(
            f"Answer starts with diacritic U+{ord(first):04X} before any letter",
            path=path
        )


# ─────────────────────────────────────────────────────────────────────────────
# Question Data
# ─────────────────────────────────────────────────────────────────────────────

def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate question data against the schema.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate with jsonschema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Question data must be an object")

    required = ["schema_version", "id", "answer"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != QUESTION_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported question schema version: {version} (expected {QUESTION_SCHEMA_VERSION})",
            path="schema_version"
        )

    question_id = data.get("id")
    if not isinstance(question_id, str) or not question_id:
        raise ValidationError(f"Invalid id: {question_id!r}", path="id")

    validate_answer_text(data.get("answer"))

    candidates = data.get("candidates")
    if candidates is not None and not isinstance(candidates, str):
        raise ValidationError(
            f"candidates must be a wire string, got {type(candidates).__name__}",
            path="candidates"
        )
    if candidates and candidates.strip() and not CandidateTable.from_wire(candidates).entries:
        raise ValidationError(
            f"No usable candidate in {candidates!r}",
            path="candidates"
        )

    mark = data.get("default_mark", 1.0)
    if isinstance(mark, bool) or not isinstance(mark, (int, float)) or mark <= 0:
        raise ValidationError(
            f"Invalid default_mark: {mark!r} (must be positive)",
            path="default_mark"
        )

    penalty = data.get("penalty", 0.0)
    if isinstance(penalty, bool) or not isinstance(penalty, (int, float)) or not (0 <= penalty <= 1):
        raise ValidationError(
            f"Invalid penalty: {penalty!r} (must be 0-1)",
            path="penalty"
        )

    if strict:
        import jsonschema

        schema = _load_schema("harakat_question")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e
