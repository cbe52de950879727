"""
Core Utilities Package

Serialization helpers for question definitions.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    save_question,
    load_question,
    load_questions,
    save_questions,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "save_question",
    "load_question",
    "load_questions",
    "save_questions",
]
