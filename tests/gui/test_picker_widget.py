"""Unit tests for HarakatAnswerWidget."""

import pytest
from PySide6.QtCore import QPoint, Qt

from harakat_toolkit.core.diacritics import FATHA, KASRA, CandidateTable
from harakat_toolkit.core.models.report import UnitStatus
from harakat_toolkit.grading.decomposer import decompose
from harakat_toolkit.grading.presentation import build_entry_view
from harakat_toolkit.gui.picker_widget import HarakatAnswerWidget
from harakat_toolkit.picker.state import PickerPage, Point, Rect

BA = "ب"
TA = "ت"

TABLE = CandidateTable.from_marks([(FATHA,), (KASRA,)])


def _make_widget(qtbot, container_id, answer, page=None):
    view = build_entry_view(decompose(answer))
    widget = HarakatAnswerWidget(container_id, view, TABLE, page=page)
    qtbot.addWidget(widget)
    widget.resize(480, 200)
    widget.show()
    qtbot.waitExposed(widget)
    return widget


@pytest.fixture
def widget(qtbot):
    """Widget for ba+fatha, space, ta+kasra."""
    return _make_widget(qtbot, "q1", BA + FATHA + " " + TA + KASRA)


class TestHarakatAnswerWidget:
    """Tests for the answer entry widget."""

    def test_init_when_built_then_one_label_per_letter(self, widget):
        assert [label.text() for label in widget.labels] == [BA, " ", TA]
        assert widget.labels[1].status is UnitStatus.NONE_EXPECTED
        assert widget.labels[0].property("status") == "pickable"
        assert widget.answer() == BA + " " + TA

    def test_click_when_pickable_letter_then_options_shown(self, qtbot, widget):
        qtbot.mouseClick(widget.labels[0], Qt.MouseButton.LeftButton)

        assert not widget.popup.isHidden()
        assert [b.text() for b in widget.popup.buttons] == [BA, BA + FATHA, BA + KASRA]
        assert widget.popup.buttons[0].toolTip() == "No mark"

    def test_click_when_pickable_letter_then_page_opens_once(self, qtbot, widget):
        """The press that opens the options must not also close them."""
        events = []
        widget.page.add_listener(events.append)

        qtbot.mouseClick(widget.labels[0], Qt.MouseButton.LeftButton)

        assert len(events) == 1
        assert events[0].unit_index == 0
        assert widget.page.is_open

    def test_press_when_on_options_row_then_stays_open(self, qtbot, widget):
        qtbot.mouseClick(widget.labels[0], Qt.MouseButton.LeftButton)

        qtbot.mouseClick(widget.popup, Qt.MouseButton.LeftButton, pos=QPoint(1, 1))

        assert widget.page.is_open
        assert not widget.popup.isHidden()

    def test_click_when_plain_letter_then_no_options(self, qtbot, widget):
        qtbot.mouseClick(widget.labels[1], Qt.MouseButton.LeftButton)

        assert widget.popup.isHidden()
        assert not widget.page.is_open

    def test_choose_when_option_clicked_then_written_back_and_signal(self, qtbot, widget):
        qtbot.mouseClick(widget.labels[2], Qt.MouseButton.LeftButton)

        with qtbot.waitSignal(widget.answerChanged, timeout=1000) as blocker:
            qtbot.mouseClick(widget.popup.buttons[2], Qt.MouseButton.LeftButton)

        assert blocker.args == [BA + " " + TA + KASRA]
        assert widget.labels[2].text() == TA + KASRA
        assert widget.popup.isHidden()

    def test_press_when_outside_then_options_closed(self, qtbot, widget):
        qtbot.mouseClick(widget.labels[0], Qt.MouseButton.LeftButton)

        # The space is a plain letter, so it counts as outside
        qtbot.mouseClick(widget.labels[1], Qt.MouseButton.LeftButton)

        assert widget.popup.isHidden()
        assert widget.answer() == BA + " " + TA

    def test_open_when_shared_page_then_other_widget_closes(self, qtbot):
        page = PickerPage()
        first = _make_widget(qtbot, "q1", BA + FATHA, page=page)
        second = _make_widget(qtbot, "q2", TA + KASRA, page=page)

        qtbot.mouseClick(first.labels[0], Qt.MouseButton.LeftButton)
        qtbot.mouseClick(second.labels[0], Qt.MouseButton.LeftButton)

        assert first.popup.isHidden()
        assert not second.popup.isHidden()
        assert page.open_popup.container_id == "q2"

    def test_detach_when_called_then_page_changes_ignored(self, qtbot, widget):
        widget.detach()
        widget.page.open("q1", 0, Point(0, 0), Rect(0, 0))

        assert widget.popup.isHidden()
