"""
Module: grading.config

Purpose:
    Configuration dataclass for grading. Immutable settings with
    validation on construction.

Key Classes:
    - GradingConfig: Leading-mark policy, response trimming

Dependencies:
    - dataclasses (std)

Used By:
    - grading.grader: grade_response()
    - cli: Command-line flags map onto GradingConfig
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

LeadingPolicy = Literal["discard", "reject"]
LEADING_POLICIES: tuple[str, ...] = ("discard", "reject")


@dataclass(frozen=True)
class GradingConfig:
    """
    Configuration for grading (immutable).

    Attributes:
        leading_policy: What to do with a diacritic before any letter
            of a response
            - "discard": drop it (default)
            - "reject": leave the response ungraded
        trim_response: Strip surrounding whitespace from responses

    Invariants:
        - leading_policy is one of LEADING_POLICIES

    Example:
        >>> config = GradingConfig(leading_policy="reject")
        >>> config.leading_policy
        'reject'
    """

    leading_policy: LeadingPolicy = "discard"
    trim_response: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.leading_policy not in LEADING_POLICIES:
            raise ValueError(
                f"leading_policy must be one of {LEADING_POLICIES}: {self.leading_policy!r}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GradingConfig:
        """Build a config from a plain dict; unknown keys are ignored."""
        return cls(
            leading_policy=data.get("leading_policy", "discard"),
            trim_response=bool(data.get("trim_response", True)),
        )
