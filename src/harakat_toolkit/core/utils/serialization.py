"""
Serialization Utilities

Provides to/from JSON utilities for question definitions. This is the
backup/restore surface: one question per file, or a list of questions
in a bank file.

- Clean separation: `serialize_*` and `deserialize_*` functions
- Validation via schemas before deserialization
- UTF-8 JSON written with ensure_ascii=False so answers stay readable
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.question import HarakatQuestion
from ..schemas.validator import (
    QUESTION_SCHEMA_VERSION,
    ValidationError,
    clean_answer_text,
    validate_question,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: HarakatQuestion) -> dict[str, Any]:
    """
    Serialize a HarakatQuestion to a dictionary.

    The output can be written to JSON and will pass schema validation.
    The answer is cleaned of anything that cannot be part of one.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    data = {"schema_version": QUESTION_SCHEMA_VERSION}
    data.update(question.to_dict())
    cleaned = clean_answer_text(data["answer"])
    if cleaned != data["answer"]:
        logger.debug(f"Cleaned answer of question {question.id}: {cleaned!r}")
        data["answer"] = cleaned
    return data


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> HarakatQuestion:
    """
    Deserialize a HarakatQuestion from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first
        strict: Use full jsonschema validation

    Returns:
        HarakatQuestion instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_question(data, strict=strict)
    return HarakatQuestion.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def save_question(question: HarakatQuestion, path: Path) -> None:
    """Write a question to a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_question(question), f, ensure_ascii=False, indent=2)
    logger.debug(f"Saved question {question.id} to {path}")


def load_question(path: Path, *, strict: bool = False) -> HarakatQuestion:
    """
    Load a question from a JSON file.

    Raises:
        ValidationError: If the file is not valid JSON or fails validation
        FileNotFoundError: If path does not exist
    """
    data = _read_json(path)
    return deserialize_question(data, strict=strict)


def load_questions(path: Path, *, strict: bool = False) -> list[HarakatQuestion]:
    """
    Load a question bank (JSON list of question objects).

    Invalid entries are reported with their index in the error path.
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValidationError("Question bank must be a JSON list", path=str(path))

    questions: list[HarakatQuestion] = []
    for i, entry in enumerate(data):
        try:
            questions.append(deserialize_question(entry, strict=strict))
        except ValidationError as e:
            raise ValidationError(
                f"Question [{i}]: {e}",
                path=f"[{i}].{e.path}" if e.path else f"[{i}]",
                errors=e.errors,
            ) from e
    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions


def save_questions(questions: list[HarakatQuestion], path: Path) -> None:
    """Write a question bank file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([serialize_question(q) for q in questions], f, ensure_ascii=False, indent=2)


def _read_json(path: Path) -> Any:
    """Read a JSON file, turning decode errors into ValidationError."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}", path=str(path)) from e
