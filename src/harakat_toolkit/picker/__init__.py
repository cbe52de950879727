"""
Picker state machine: one open popup per page, option lists and
write-back of the chosen letter into the answer line.
"""

from .state import (
    PickerOption,
    PickerPage,
    PickerQuestion,
    PickerStateError,
    Point,
    Popup,
    Rect,
    TargetKind,
    build_options,
)

__all__ = [
    "PickerOption",
    "PickerPage",
    "PickerQuestion",
    "PickerStateError",
    "Point",
    "Popup",
    "Rect",
    "TargetKind",
    "build_options",
]
