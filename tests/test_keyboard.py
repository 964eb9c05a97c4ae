"""
Module: test_keyboard.py

Date: 2026-10-19

Tests for undo/redo key resolution.
"""

import pytest

from flowcanvas.domain.keyboard import HistoryAction, KeyboardModifier, resolve_history_action

CTRL = KeyboardModifier.CTRL
META = KeyboardModifier.META
SHIFT = KeyboardModifier.SHIFT
ALT = KeyboardModifier.ALT


@pytest.mark.parametrize(
    ("key", "modifiers", "expected"),
    [
        ("z", CTRL, HistoryAction.UNDO),
        ("Z", META, HistoryAction.UNDO),
        ("z", CTRL | SHIFT, HistoryAction.REDO),
        ("Z", META | SHIFT, HistoryAction.REDO),
        ("y", CTRL, HistoryAction.REDO),
        ("y", META, HistoryAction.REDO),
        ("y", CTRL | SHIFT, None),
        ("z", KeyboardModifier.NONE, None),
        ("z", SHIFT, None),
        ("z", CTRL | ALT, None),
        ("x", CTRL, None),
    ],
)
def test_resolve(key, modifiers, expected):
    assert resolve_history_action(key, modifiers) is expected


def test_suppressed_in_text_field():
    assert resolve_history_action("z", CTRL, text_input_focused=True) is None
    assert resolve_history_action("y", CTRL, text_input_focused=True) is None


def test_primary_modifier():
    assert CTRL.has_primary
    assert META.has_primary
    assert (SHIFT | META).has_primary
    assert not (SHIFT | ALT).has_primary
