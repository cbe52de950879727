"""
Entry point for the harakat picker GUI.

Loads one question file, shows the picker for its answer line and grades
the current answer when Check is pressed.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from harakat_toolkit import __version__
from harakat_toolkit.core.models.question import HarakatQuestion
from harakat_toolkit.core.schemas.validator import ValidationError
from harakat_toolkit.core.strings import get_string
from harakat_toolkit.core.utils.serialization import load_question
from harakat_toolkit.grading.config import GradingConfig
from harakat_toolkit.grading.decomposer import decompose
from harakat_toolkit.grading.grader import grade_response
from harakat_toolkit.grading.presentation import build_entry_view
from harakat_toolkit.gui.picker_widget import HarakatAnswerWidget
from harakat_toolkit.gui.theme import BUTTON_PRIMARY, RESULT_STYLESHEET, apply_theme
from harakat_toolkit.output.renderer import render_correct_response, render_formulation

logger = logging.getLogger(__name__)

APP_NAME = "Harakat Toolkit"


class HarakatWindow(QMainWindow):
    """
    Single-question window: question text, picker, Check button, result.
    """

    def __init__(self, question: HarakatQuestion, config: Optional[GradingConfig] = None, parent=None):
        super().__init__(parent)
        self.question = question
        self.config = config or GradingConfig()
        self.setWindowTitle(f"{APP_NAME} - {question.name or question.id}")

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.question_label = QLabel(question.question_text, central)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label)

        reference = decompose(question.answer)
        self.answer_widget = HarakatAnswerWidget(
            container_id=question.id,
            view=build_entry_view(reference),
            candidates=question.candidates,
            parent=central,
        )
        self.answer_widget.setMinimumHeight(140)
        layout.addWidget(self.answer_widget)

        self.check_button = QPushButton(get_string("check"), central)
        self.check_button.setStyleSheet(BUTTON_PRIMARY)
        self.check_button.clicked.connect(self.check_answer)
        layout.addWidget(self.check_button)

        self.result_view = QTextBrowser(central)
        self.result_view.document().setDefaultStyleSheet(RESULT_STYLESHEET)
        layout.addWidget(self.result_view)

        self.setCentralWidget(central)
        self.resize(640, 420)

    def check_answer(self):
        """Grade the current answer and show the marked-up result."""
        answer = self.answer_widget.answer()
        outcome = grade_response(self.question, {"answer": answer}, self.config)
        html = render_formulation(
            self.question,
            answer,
            show_correctness=outcome.attempted,
            input_name="answer",
            container_id=self.question.id,
            state=outcome.state,
            config=self.config,
        )
        if outcome.attempted and outcome.fraction < 1:
            html += f"<p>{render_correct_response(self.question)}</p>"
        self.result_view.setHtml(html)
        logger.info(f"Checked {self.question.id}: fraction {outcome.fraction:.2f}")

    def closeEvent(self, event):
        self.answer_widget.detach()
        super().closeEvent(event)


def run(question_path: Path, config: Optional[GradingConfig] = None) -> int:
    """
    Main entry point for the GUI application.

    Returns:
        Application exit code
    """
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setApplicationVersion(__version__)
    apply_theme(app)

    try:
        question = load_question(question_path)
    except (OSError, ValidationError) as e:
        logger.error(f"Could not load {question_path}: {e}")
        QMessageBox.critical(None, APP_NAME, f"Could not load question:\n{e}")
        return 2

    window = HarakatWindow(question, config)
    window.show()
    return app.exec()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Harakat picker for one question file")
    parser.add_argument("question", type=Path, help="Question JSON file")
    parser.add_argument("--strict-leading", action="store_true",
                        help="Reject answers that start with a diacritic")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = GradingConfig(leading_policy="reject" if args.strict_leading else "discard")
    return run(args.question, config)


if __name__ == "__main__":
    sys.exit(main())
