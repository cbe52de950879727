"""
Module: output

Purpose:
    HTML rendering of annotated views and question blocks.

Key Functions:
    - render_answer_view(): Graded answer markup
    - render_stem_view(): Entry stem markup
    - render_formulation(): Whole question block

Used By:
    - cli
    - gui.app
"""

from .renderer import (
    ANSWER_STYLESHEET,
    STATUS_CLASSES,
    render_answer_view,
    render_stem_view,
    render_formulation,
    render_correct_response,
)

__all__ = [
    "ANSWER_STYLESHEET",
    "STATUS_CLASSES",
    "render_answer_view",
    "render_stem_view",
    "render_formulation",
    "render_correct_response",
]
