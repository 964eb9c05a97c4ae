"""Module: keyboard.py

Date: 2026-10-19

Domain types for keyboard input handling.

Pure domain layer - no UI dependencies. The Qt adapter in
flowcanvas.ui.shortcuts uses the same bindings through QKeySequence.
"""

from __future__ import annotations

from enum import Enum, Flag, auto


class KeyboardModifier(Flag):
    """Keyboard modifier keys (Ctrl, Shift, Alt, Meta).

    Uses Flag enum for bitwise operations (multiple modifiers can be active).

    Example:
        >>> mods = KeyboardModifier.CTRL | KeyboardModifier.SHIFT
        >>> bool(mods & KeyboardModifier.CTRL)
        True
        >>> bool(mods & KeyboardModifier.ALT)
        False

    """

    NONE = 0
    CTRL = auto()
    SHIFT = auto()
    ALT = auto()
    META = auto()  # Windows key / Command key

    @property
    def has_primary(self) -> bool:
        """Ctrl on Windows/Linux, Command on macOS."""
        return bool(self & (KeyboardModifier.CTRL | KeyboardModifier.META))


class HistoryAction(Enum):
    UNDO = "undo"
    REDO = "redo"


def resolve_history_action(
    key: str, modifiers: KeyboardModifier, text_input_focused: bool = False
) -> HistoryAction | None:
    """Map a key press to an undo/redo action.

    Bindings:
        primary+Z        -> UNDO
        primary+Shift+Z  -> REDO
        primary+Y        -> REDO

    Args:
        key: Key name, case-insensitive ("z", "Z", "y")
        modifiers: Active modifiers
        text_input_focused: True while an editable text field has focus

    Returns:
        The action, or None when the press is not a history shortcut or is
        suppressed because a text field owns the keystroke

    """
    if text_input_focused or not modifiers.has_primary:
        return None
    if modifiers & KeyboardModifier.ALT:
        return None

    key = key.lower()
    if key == "z":
        return HistoryAction.REDO if modifiers & KeyboardModifier.SHIFT else HistoryAction.UNDO
    if key == "y" and not modifiers & KeyboardModifier.SHIFT:
        return HistoryAction.REDO
    return None
