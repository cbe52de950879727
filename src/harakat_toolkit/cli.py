"""
Module: cli

Purpose:
    Command-line grading of one answer against a question file.

Key Functions:
    - main(argv): Parse arguments, grade, print a summary, JSON or HTML
    - outcome_to_dict(outcome): JSON-ready view of a GradeOutcome

Dependencies:
    - argparse, json, logging (std)
    - grading.grader, output.renderer, core.utils.serialization

Exit codes:
    0: Graded (or not attempted) successfully
    1: Question file could not be read
    2: Question data is invalid

Example:
    $ harakat-grade question.json "كَتَبَ" --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from . import __version__
from .core.schemas.validator import ValidationError
from .core.strings import get_string
from .core.utils.serialization import load_question
from .grading.config import GradingConfig
from .grading.grader import GradeOutcome, grade_response
from .output.renderer import render_formulation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_QUESTION = 2


def outcome_to_dict(outcome: GradeOutcome) -> dict[str, Any]:
    """
    JSON-ready summary of a grading outcome.

    Example:
        >>> outcome_to_dict(outcome)["state"]
        'gradedpartial'
    """
    report = outcome.report
    return {
        "fraction": outcome.fraction,
        "state": str(outcome.state),
        "right": report.right_total,
        "wrong": report.wrong_total,
        "total": report.total_diacritics,
        "unit_count_mismatch": report.unit_count_mismatch,
        "wrong_units": [
            {
                "index": c.index,
                "expected": "".join(c.expected_diacritics),
                "submitted": "".join(c.submitted_diacritics),
                "missing_or_wrong": "".join(c.missing_or_wrong),
            }
            for c in report.wrong_units
        ],
        "answer_view": [
            {"index": u.index, "text": u.text, "status": str(u.status)}
            for u in outcome.views.answer_view
        ],
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harakat-grade",
        description=get_string("pluginnamesummary"),
    )
    parser.add_argument("question", type=Path, help="Question JSON file")
    parser.add_argument("answer", help="Answer text to grade")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print the outcome as JSON")
    output.add_argument("--html", action="store_true", help="Print the graded answer markup")
    parser.add_argument("--strict-leading", action="store_true",
                        help="Reject answers that start with a diacritic")
    parser.add_argument("--strict-schema", action="store_true",
                        help="Also validate the question file against the JSON schema")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    config = GradingConfig(leading_policy="reject" if args.strict_leading else "discard")

    try:
        question = load_question(args.question, strict=args.strict_schema)
    except ValidationError as e:
        logger.error(f"Invalid question file {args.question}: {e}")
        return EXIT_INVALID_QUESTION
    except OSError as e:
        logger.error(f"Could not read {args.question}: {e}")
        return EXIT_IO_ERROR

    outcome = grade_response(question, {"answer": args.answer}, config)

    if args.json:
        print(json.dumps(outcome_to_dict(outcome), ensure_ascii=False, indent=2))
    elif args.html:
        print(render_formulation(
            question,
            args.answer,
            show_correctness=outcome.attempted,
            input_name="answer",
            container_id=question.id,
            state=outcome.state,
            config=config,
        ))
    elif not outcome.attempted:
        message = question.get_validation_error({"answer": args.answer})
        print(message or f"Not graded ({outcome.state})")
    else:
        report = outcome.report
        print(f"{report.right_total} / {report.total_diacritics} ({outcome.state})")
        for comparison in report.wrong_units:
            unit = outcome.reference.units[comparison.index]
            print(f"  [{comparison.index}] expected {unit.text}, "
                  f"missing or wrong: {''.join(comparison.missing_or_wrong)}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
