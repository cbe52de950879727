"""
Module: picker.state

Purpose:
    Toolkit-free state machine behind the harakat picker. A page holds
    any number of questions and at most one open popup. Clicking a
    pickable letter opens a popup of options for it; choosing an option
    writes it into the letter's slot and re-serializes the answer line.

Key Classes:
    - PickerPage: Page-wide registry and the single open popup
    - PickerQuestion: Display slots and hidden value for one question
    - Popup: Open popup anchored to one letter
    - PickerOption: One entry in a popup
    - TargetKind: What a pointer event landed on, for dismissal

Dependencies:
    - core.models.report: AnnotatedView
    - core.diacritics: CandidateTable

Used By:
    - gui.picker_widget: HarakatAnswerWidget
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..core.diacritics import CandidateTable
from ..core.models.report import AnnotatedView, UnitStatus

logger = logging.getLogger(__name__)


class PickerStateError(RuntimeError):
    """Operation not valid in the current picker state."""


class TargetKind(str, Enum):
    """Kind of element a pointer event landed on."""
    POPUP = "popup"
    OPTION = "option"
    PICKABLE = "pickable"
    OUTSIDE = "outside"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Point:
    """Pointer position in page coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Bounding box of the element the popup is positioned against."""
    left: float
    top: float
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class PickerOption:
    """
    One choice in a popup.

    Attributes:
        marks: Diacritics added to the letter; empty for "no mark"
        text: Letter followed by marks, as displayed and written back
    """
    marks: tuple[str, ...]
    text: str

    @property
    def is_no_mark(self) -> bool:
        return not self.marks


@dataclass(frozen=True)
class Popup:
    """
    An open popup.

    Attributes:
        container_id: Question the popup belongs to
        unit_index: Letter slot the popup writes to
        left: Offset from the anchor rectangle's left edge
        top: Offset from the anchor rectangle's top edge
        options: "No mark" first, then one per candidate
    """
    container_id: str
    unit_index: int
    left: float
    top: float
    options: tuple[PickerOption, ...]


def build_options(letter: str, candidates: CandidateTable) -> tuple[PickerOption, ...]:
    """
    Options for one letter: the bare letter, then each candidate.

    Example:
        >>> opts = build_options("ب", CandidateTable.from_marks(["\\u064E"]))
        >>> [o.text for o in opts]
        ['ب', 'بَ']
    """
    options = [PickerOption(marks=(), text=letter)]
    for entry, text in zip(candidates.entries, candidates.render(letter)):
        options.append(PickerOption(marks=tuple(entry), text=text))
    return tuple(options)


class PickerQuestion:
    """
    Display state for one question on the page.

    Each slot holds the text currently shown for one letter. The hidden
    value is every slot joined in order, which is what gets submitted.
    """

    def __init__(self, container_id: str, view: AnnotatedView, candidates: CandidateTable):
        self.container_id = container_id
        self.candidates = candidates
        self._units = tuple(view)
        self._slots = [unit.text for unit in self._units]

    @property
    def slots(self) -> tuple[str, ...]:
        return tuple(self._slots)

    @property
    def hidden_value(self) -> str:
        return "".join(self._slots)

    def __len__(self) -> int:
        return len(self._units)

    def letter(self, index: int) -> str:
        return self._units[index].letter

    def status(self, index: int) -> UnitStatus:
        return self._units[index].status

    def is_pickable(self, index: int) -> bool:
        return 0 <= index < len(self._units) and self._units[index].status.is_pickable

    def write(self, index: int, text: str) -> str:
        """Replace one slot and return the new hidden value."""
        self._slots[index] = text
        return self.hidden_value

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"PickerQuestion({self.container_id!r}, {self.hidden_value!r})"


Listener = Callable[[Optional[Popup]], None]


class PickerPage:
    """
    Every picker question on a page plus the one open popup.

    Opening a popup closes any other first, so at most one is open at a
    time across all registered questions. Listeners are called with the
    new popup (or None) whenever it changes.

    Example:
        >>> page = PickerPage()
        >>> page.register("q1", entry_view, DEFAULT_CANDIDATES)
        >>> popup = page.open("q1", 0, Point(30, 12), Rect(10, 2))
        >>> popup.left, popup.top
        (20, 10)
        >>> page.choose(0)  # "no mark": bare letter written back
    """

    def __init__(self):
        self._questions: dict[str, PickerQuestion] = {}
        self._listeners: list[Listener] = []
        self.open_popup: Optional[Popup] = None

    # ─────────────────────────────────────────────────────────────────
    # Registry
    # ─────────────────────────────────────────────────────────────────

    def register(
        self,
        container_id: str,
        view: AnnotatedView,
        candidates: CandidateTable,
    ) -> PickerQuestion:
        """
        Add a question to the page.

        Registering an id again replaces the earlier question and closes
        its popup if one is open.
        """
        if container_id in self._questions:
            logger.debug(f"Re-registering picker question {container_id}")
            if self.open_popup is not None and self.open_popup.container_id == container_id:
                self.close()
        question = PickerQuestion(container_id, view, candidates)
        self._questions[container_id] = question
        return question

    def question(self, container_id: str) -> PickerQuestion:
        """Look up a registered question; KeyError if unknown."""
        return self._questions[container_id]

    def __contains__(self, container_id: str) -> bool:
        return container_id in self._questions

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _set_popup(self, popup: Optional[Popup]) -> None:
        self.open_popup = popup
        for listener in list(self._listeners):
            listener(popup)

    # ─────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self.open_popup is not None

    def open(
        self,
        container_id: str,
        unit_index: int,
        pointer: Point,
        target_rect: Rect,
    ) -> Optional[Popup]:
        """
        Open the popup for one letter.

        Letters that are not pickable are ignored and None is returned.
        Any popup already open is closed first.

        Args:
            container_id: Question containing the letter
            unit_index: Index of the letter in the line
            pointer: Pointer position of the triggering event
            target_rect: Rectangle the popup is positioned against

        Returns:
            The new Popup, or None if the letter is not pickable

        Raises:
            KeyError: If container_id is not registered
        """
        question = self._questions[container_id]
        if not question.is_pickable(unit_index):
            return None

        if self.open_popup is not None:
            self.close()

        popup = Popup(
            container_id=container_id,
            unit_index=unit_index,
            left=pointer.x - target_rect.left,
            top=pointer.y - target_rect.top,
            options=build_options(question.letter(unit_index), question.candidates),
        )
        self._set_popup(popup)
        return popup

    def choose(self, option_index: int) -> str:
        """
        Apply an option of the open popup and close it.

        Args:
            option_index: Position in Popup.options (0 is "no mark")

        Returns:
            The question's new hidden value

        Raises:
            PickerStateError: If no popup is open
            IndexError: If option_index is out of range
        """
        popup = self.open_popup
        if popup is None:
            raise PickerStateError("No popup is open")
        if not 0 <= option_index < len(popup.options):
            raise IndexError(f"Option {option_index} out of range (0-{len(popup.options) - 1})")

        option = popup.options[option_index]
        value = self._questions[popup.container_id].write(popup.unit_index, option.text)
        self.close()
        return value

    def dismiss(self, target: TargetKind) -> bool:
        """
        Page-level dismissal for a pointer event.

        Events on the popup, an option or a pickable letter leave the
        popup alone. Anything else closes it.

        Returns:
            True if a popup was closed
        """
        if target is not TargetKind.OUTSIDE or self.open_popup is None:
            return False
        self.close()
        return True

    def close(self) -> None:
        if self.open_popup is not None:
            self._set_popup(None)
