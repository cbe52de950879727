"""
Module: output.renderer

Purpose:
    Turn annotated views into HTML markup. The core only classifies
    units; this module owns the class names, escaping and the layout of
    a rendered question.

Key Functions:
    - render_answer_view(): Graded answer, one span per letter
    - render_stem_view(): Pickable stem for answer entry
    - render_formulation(): Whole question block, graded or for entry
    - render_correct_response(): "The correct answer is: ..."

Dependencies:
    - html (std): Escaping
    - grading: grade_response, decompose, build_entry_view

Used By:
    - cli: --html output
    - gui.app: Graded answer display
"""

from __future__ import annotations

import logging
from html import escape
from typing import Optional

from ..core.models.question import HarakatQuestion
from ..core.models.report import AnnotatedView, UnitStatus
from ..core.strings import get_string
from ..grading.config import GradingConfig
from ..grading.decomposer import decompose
from ..grading.grader import GradeState, grade_response
from ..grading.presentation import build_entry_view

logger = logging.getLogger(__name__)

# Style class per unit status
STATUS_CLASSES: dict[UnitStatus, str] = {
    UnitStatus.CORRECT: "harakat_correct",
    UnitStatus.INCORRECT: "harakat_wrong",
    UnitStatus.NONE_EXPECTED: "harakat_no",
    UnitStatus.PICKABLE: "harakat_yes",
    UnitStatus.PICKABLE_CONFIRMED: "harakat_yes",
}

OPTIONS_CLASS = "qtype_harakat_options"
OPTION_CLASS = "option_letter"

# Matches gui theme status colours
ANSWER_STYLESHEET = """
.harakat_correct { color: #388e3c; }
.harakat_wrong { color: #d32f2f; text-decoration: underline; }
.harakat_no { color: #1f1f1f; }
.harakat_yes { color: #0364B8; cursor: pointer; }
.qtype_harakat_options { display: none; position: absolute; }
.option_letter { padding: 0 6px; cursor: pointer; }
"""


def _span(css_class: str, text: str, **attrs: str) -> str:
    extra = "".join(f' {name}="{escape(value)}"' for name, value in attrs.items())
    return f'<span class="{css_class}"{extra}>{escape(text)}</span>'


def render_answer_view(view: AnnotatedView) -> str:
    """
    Render the graded answer: letters styled correct, wrong or plain.

    Wrong letters show the marks the learner typed, not the expected ones.
    """
    return "".join(_span(STATUS_CLASSES[u.status], u.text) for u in view)


def render_stem_view(view: AnnotatedView) -> str:
    """
    Render the entry stem.

    Pickable letters carry an "original" attribute with the bare letter,
    which the picker uses to build its options.
    """
    parts = []
    for unit in view:
        css_class = STATUS_CLASSES[unit.status]
        if unit.status.is_pickable:
            parts.append(_span(css_class, unit.text, original=unit.letter))
        else:
            parts.append(_span(css_class, unit.text))
    return "".join(parts)


def render_formulation(
    question: HarakatQuestion,
    current_answer: Optional[str],
    *,
    show_correctness: bool,
    input_name: str,
    container_id: str = "",
    state: Optional[GradeState] = None,
    config: Optional[GradingConfig] = None,
) -> str:
    """
    Render the question block.

    With show_correctness, the graded answer is shown with a
    "(right / total)" summary. Otherwise the pickable stem is shown with
    the hidden input that carries the submission.

    Args:
        question: Question definition
        current_answer: Last saved answer text, if any
        show_correctness: Show grading instead of the entry controls
        input_name: Name and id of the hidden answer input
        container_id: Id of the surrounding question container
        state: Attempt state; INVALID adds the validation message
        config: Grading configuration

    Returns:
        HTML string
    """
    config = config or GradingConfig()
    result = f'<div class="qtext">{escape(question.question_text)}</div>'

    if show_correctness:
        outcome = grade_response(question, {"answer": current_answer or ""}, config)
        report = outcome.report
        answer_html = render_answer_view(outcome.views.answer_view)
        summary = get_string("scoresummary", f"{report.right_total} / {report.total_diacritics}")
        result += f"<label>{escape(get_string('answer'))}</label>"
        result += (
            f'<div class="answer"><div class="text-right display-4" dir="rtl">'
            f"{answer_html}</div></div>"
        )
        result += (
            f'<div><span class="feedback {outcome.state}"></span>{escape(summary)}</div>'
        )
    else:
        reference = decompose(question.answer)
        current = decompose(current_answer) if current_answer else None
        stem = build_entry_view(reference, current)
        wire = question.candidates.to_wire()
        ans_id = f"ans-{input_name}"
        result += (
            f'<div class="{OPTIONS_CLASS}" data-container="{escape(container_id)}" '
            f'data-harakat="{escape(wire)}"></div>'
        )
        result += (
            f'<div id="{escape(ans_id)}" class="text-right display-4" dir="rtl">'
            f"{render_stem_view(stem)}</div>"
        )
        result += (
            f'<div class="ablock form-inline">'
            f'<input id="{escape(input_name)}" name="{escape(input_name)}" '
            f'type="hidden" value="{escape(stem.text)}"></div>'
        )

    if state is GradeState.INVALID:
        message = question.get_validation_error({"answer": current_answer or ""})
        if message:
            result += f'<div class="validationerror">{escape(message)}</div>'

    return result


def render_correct_response(question: HarakatQuestion) -> str:
    """Text naming the correct answer."""
    correct = question.get_correct_response()["answer"]
    return escape(get_string("correctansweris", correct))
