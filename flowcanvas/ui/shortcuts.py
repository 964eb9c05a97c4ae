"""History Shortcut Controller.

Date: 2026-10-19

Registers the undo/redo and canvas shortcuts on a host widget and routes
them to an EditorContext. History shortcuts do nothing while an editable
text field has focus, so the field keeps its own text undo.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeyEvent, QKeySequence
from PyQt5.QtWidgets import (
    QAbstractSpinBox,
    QApplication,
    QLineEdit,
    QPlainTextEdit,
    QShortcut,
    QTextEdit,
    QWidget,
)

from flowcanvas.config import CANVAS_SHORTCUTS, HISTORY_SHORTCUTS
from flowcanvas.domain.keyboard import HistoryAction, KeyboardModifier, resolve_history_action
from flowcanvas.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from flowcanvas.core.editor_context import EditorContext

logger = get_cached_logger(__name__)

_QT_MODIFIERS = (
    (Qt.ControlModifier, KeyboardModifier.CTRL),
    (Qt.ShiftModifier, KeyboardModifier.SHIFT),
    (Qt.AltModifier, KeyboardModifier.ALT),
    (Qt.MetaModifier, KeyboardModifier.META),
)


def is_text_input(widget: QWidget | None) -> bool:
    """Check whether widget is an editable text field."""
    if isinstance(widget, (QLineEdit, QTextEdit, QPlainTextEdit, QAbstractSpinBox)):
        return not widget.isReadOnly()
    return False


def modifiers_from_qt(modifiers: Qt.KeyboardModifiers | int) -> KeyboardModifier:
    result = KeyboardModifier.NONE
    for qt_flag, flag in _QT_MODIFIERS:
        if int(modifiers) & int(qt_flag):
            result |= flag
    return result


class HistoryShortcutController:
    """Binds undo/redo and selection shortcuts to an editor context."""

    def __init__(
        self,
        host: QWidget,
        context: EditorContext,
        focus_widget: Callable[[], QWidget | None] | None = None,
    ):
        """Initialize controller.

        Args:
            host: Widget the shortcuts are attached to (usually the main window)
            context: Editor session receiving the actions
            focus_widget: Returns the widget with keyboard focus
                (QApplication.focusWidget by default)

        """
        self.host = host
        self.context = context
        self._focus_widget = focus_widget or QApplication.focusWidget
        self.shortcuts: list[QShortcut] = []
        logger.debug("HistoryShortcutController initialized", extra={"dev_only": True})

    def setup(self) -> None:
        """Create the QShortcut objects."""
        bindings = [
            (HISTORY_SHORTCUTS["UNDO"], self.undo),
            (HISTORY_SHORTCUTS["REDO"], self.redo),
            (HISTORY_SHORTCUTS["REDO_ALT"], self.redo),
            (CANVAS_SHORTCUTS["DELETE_SELECTION"], self.delete_selection),
            (CANVAS_SHORTCUTS["CLEAR_SELECTION"], self.clear_selection),
        ]
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self.host)
            shortcut.activated.connect(handler)
            self.shortcuts.append(shortcut)

        logger.debug(
            "[HistoryShortcutController] Registered %d shortcuts",
            len(self.shortcuts),
            extra={"dev_only": True},
        )

    def text_input_focused(self) -> bool:
        return is_text_input(self._focus_widget())

    def undo(self) -> bool:
        """Undo unless a text field owns the keystroke."""
        if self.text_input_focused():
            return False
        return self.context.undo() is not None

    def redo(self) -> bool:
        """Redo unless a text field owns the keystroke."""
        if self.text_input_focused():
            return False
        return self.context.redo() is not None

    def delete_selection(self) -> bool:
        if self.text_input_focused():
            return False
        return self.context.delete_selection()

    def clear_selection(self) -> None:
        if self.text_input_focused():
            return
        self.context.click_background()

    def handle_key_event(self, event: QKeyEvent) -> bool:
        """Handle a key press forwarded from a keyPressEvent override.

        Returns:
            True if the event was consumed as undo/redo

        """
        action = resolve_history_action(
            QKeySequence(event.key()).toString(),
            modifiers_from_qt(event.modifiers()),
            self.text_input_focused(),
        )
        if action is None:
            return False
        if action is HistoryAction.UNDO:
            self.context.undo()
        else:
            self.context.redo()
        return True
