"""Label field binding for the inspector panel.

Date: 2026-10-19

Connects a QLineEdit to a LabelEditSession: each keystroke updates the live
graph, and finishing the edit (focus loss or Enter) commits once.
"""

from __future__ import annotations

from PyQt5.QtCore import QObject
from PyQt5.QtWidgets import QLineEdit

from flowcanvas.core.mutation.coordinator import EntityKind
from flowcanvas.core.mutation.label_edit import LabelEditSession
from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class LabelFieldBinding(QObject):
    """Keeps one QLineEdit and one LabelEditSession in step."""

    def __init__(self, field: QLineEdit, session: LabelEditSession, parent: QObject | None = None):
        super().__init__(parent)
        self.field = field
        self.session = session
        field.textEdited.connect(self._on_text_edited)
        field.editingFinished.connect(self._on_editing_finished)

    def bind(self, kind: EntityKind, target_id: str) -> None:
        """Point the field at a node or edge and show its label."""
        text = self.session.begin(kind, target_id)
        # setText does not emit textEdited, so the graph is left alone
        self.field.setText(text)
        self.field.setEnabled(True)

    def unbind(self) -> None:
        self.session.cancel()
        self.field.clear()
        self.field.setEnabled(False)

    def _on_text_edited(self, text: str) -> None:
        self.session.update(text)

    def _on_editing_finished(self) -> None:
        if self.session.is_active:
            self.session.finish()
