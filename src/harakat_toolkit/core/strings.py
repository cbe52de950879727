"""
Localized strings (English).

Placeholders use "{a}" and are filled by get_string(key, a).
"""

from __future__ import annotations

from typing import Any, Optional

STRINGS: dict[str, str] = {
    "answer": "Answer: {a}",
    "correctansweris": "The correct answer is: {a}",
    "notenoughanswers": "This type of question requires at least {a} answer.",
    "notarabicanswers": "You must provide an answer with Arabic script and diacritics.",
    "pleaseenterananswer": "Please enter an answer.",
    "pluginnamesummary": (
        "Putting a harakat on each letter of the sentence. "
        "Graded on how many harakat were correct."
    ),
    "check": "Check",
    "nomark": "No mark",
    "scoresummary": "({a})",
}


def get_string(key: str, a: Optional[Any] = None) -> str:
    """
    Look up a string and substitute its "{a}" placeholder.

    Raises:
        KeyError: If key is not defined
    """
    template = STRINGS[key]
    if a is None:
        return template.replace("{a}", "")
    return template.replace("{a}", str(a))
