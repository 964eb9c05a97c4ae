"""Package: ui

Date: 2026-10-19

PyQt5 adapters connecting widgets to the editor core.
"""

from flowcanvas.ui.inspector import LabelFieldBinding
from flowcanvas.ui.shortcuts import HistoryShortcutController, is_text_input, modifiers_from_qt

__all__ = [
    "HistoryShortcutController",
    "LabelFieldBinding",
    "is_text_input",
    "modifiers_from_qt",
]
