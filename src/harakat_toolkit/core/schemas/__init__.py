"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_question,
    validate_answer_text,
    clean_answer_text,
    ValidationError,
    QUESTION_SCHEMA_VERSION,
)

__all__ = [
    "validate_question",
    "validate_answer_text",
    "clean_answer_text",
    "ValidationError",
    "QUESTION_SCHEMA_VERSION",
]
