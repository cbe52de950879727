"""
Harakat answer entry widget.

Shows the answer line right-to-left, one label per letter. Clicking a
pickable letter opens a row of options (the bare letter, then the letter
with each candidate mark). Choosing one writes it back into the line and
emits answerChanged with the full answer text. A press anywhere outside
the options and pickable letters closes the options.
"""
import logging
from typing import Optional

from PySide6.QtCore import QEvent, QObject, QPoint, Qt, Signal
from PySide6.QtWidgets import QApplication, QFrame, QHBoxLayout, QLabel, QPushButton, QWidget

from harakat_toolkit.core.diacritics import CandidateTable
from harakat_toolkit.core.models.report import AnnotatedView, UnitStatus
from harakat_toolkit.core.strings import get_string
from harakat_toolkit.picker.state import PickerPage, Point, Popup, Rect, TargetKind

logger = logging.getLogger(__name__)


class LetterLabel(QLabel):
    """
    One letter of the answer line.
    """

    clicked = Signal(int, QPoint)  # unit index, global position

    def __init__(self, index: int, text: str, status: UnitStatus, parent=None):
        super().__init__(text, parent)
        self.index = index
        self.status = status
        self.setProperty("status", str(status))
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        if status.is_pickable:
            self.setCursor(Qt.CursorShape.PointingHandCursor)

    @property
    def is_pickable(self) -> bool:
        return self.status.is_pickable

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.is_pickable:
            self.clicked.emit(self.index, event.globalPosition().toPoint())
            # Stop here so the parent does not see the press as outside
            event.accept()
            return
        super().mousePressEvent(event)


class OptionsPopup(QFrame):
    """
    Row of option buttons shown over the answer line.
    """

    optionChosen = Signal(int)  # index into Popup.options

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("harakatOptions")
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(4, 4, 4, 4)
        self.layout.setSpacing(2)
        self.buttons: list[QPushButton] = []
        self.hide()

    def set_options(self, popup: Popup):
        for button in self.buttons:
            self.layout.removeWidget(button)
            button.deleteLater()
        self.buttons = []

        for i, option in enumerate(popup.options):
            button = QPushButton(option.text, self)
            button.setObjectName("optionLetter")
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            if option.is_no_mark:
                button.setToolTip(get_string("nomark"))
            button.clicked.connect(lambda checked=False, i=i: self.optionChosen.emit(i))
            self.layout.addWidget(button)
            self.buttons.append(button)
        self.adjustSize()

    def mousePressEvent(self, event):
        # Presses between the buttons stay on the popup
        event.accept()


class HarakatAnswerWidget(QWidget):
    """
    Answer entry for one harakat question.

    Several widgets may share a PickerPage; the page keeps at most one
    options row open across all of them.
    """

    answerChanged = Signal(str)

    def __init__(
        self,
        container_id: str,
        view: AnnotatedView,
        candidates: CandidateTable,
        page: Optional[PickerPage] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.container_id = container_id
        self.page = page or PickerPage()
        self.question = self.page.register(container_id, view, candidates)

        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(8, 8, 8, 8)
        self.layout.setSpacing(0)
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

        self.labels: list[LetterLabel] = []
        for unit in view:
            label = LetterLabel(unit.index, unit.text, unit.status, self)
            label.clicked.connect(self._on_letter_clicked)
            self.layout.addWidget(label)
            self.labels.append(label)
        self.layout.addStretch()

        self.popup = OptionsPopup(self)
        self.popup.optionChosen.connect(self._on_option_chosen)

        self.page.add_listener(self._on_popup_changed)
        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    def answer(self) -> str:
        """Current answer text, as it would be submitted."""
        return self.question.hidden_value

    def detach(self):
        """Stop listening to the page and the application."""
        self.page.remove_listener(self._on_popup_changed)
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)

    def closeEvent(self, event):
        self.detach()
        super().closeEvent(event)

    # ─────────────────────────────────────────────────────────────────
    # Picker events
    # ─────────────────────────────────────────────────────────────────

    def _on_letter_clicked(self, index: int, global_pos: QPoint):
        origin = self.mapToGlobal(QPoint(0, 0))
        rect = Rect(origin.x(), origin.y(), self.width(), self.height())
        self.page.open(self.container_id, index, Point(global_pos.x(), global_pos.y()), rect)

    def _on_option_chosen(self, option_index: int):
        popup = self.page.open_popup
        if popup is None or popup.container_id != self.container_id:
            return
        value = self.page.choose(option_index)
        self.labels[popup.unit_index].setText(self.question.slots[popup.unit_index])
        logger.debug(f"{self.container_id}: answer now {value!r}")
        self.answerChanged.emit(value)

    def _on_popup_changed(self, popup: Optional[Popup]):
        if popup is None or popup.container_id != self.container_id:
            self.popup.hide()
            return
        self.popup.set_options(popup)
        # Keep the row inside the widget
        x = max(0, min(int(popup.left), self.width() - self.popup.width()))
        y = max(0, min(int(popup.top), self.height() - self.popup.height()))
        self.popup.move(x, y)
        self.popup.raise_()
        self.popup.show()

    @staticmethod
    def _target_kind(obj) -> TargetKind:
        # Any widget's popup counts, since the page may be shared
        if isinstance(obj, OptionsPopup):
            return TargetKind.POPUP
        if isinstance(obj.parent(), OptionsPopup):
            return TargetKind.OPTION
        if isinstance(obj, LetterLabel) and obj.is_pickable:
            return TargetKind.PICKABLE
        return TargetKind.OUTSIDE

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.MouseButtonPress and isinstance(obj, QWidget):
            self.page.dismiss(self._target_kind(obj))
        return False
