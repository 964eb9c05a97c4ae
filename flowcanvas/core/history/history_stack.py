"""Module: history_stack.py

Date: 2026-10-19

Undo/redo history over graph snapshots.

GraphHistory keeps three parts:
    past     - committed snapshots before present (oldest first), at most
               ``max_depth`` entries; the oldest is evicted first
    present  - the snapshot the live graph currently matches
    future   - undone snapshots (nearest first), cleared by every commit

Every stored snapshot is a structural copy, so later in-place edits of the
live graph cannot reach history. Snapshots handed back by undo/redo are
copies too.

A commit whose fingerprint equals the present one is dropped, which keeps
drags that end where they started, or blur events after an unchanged edit,
out of the history.
"""

from __future__ import annotations

from typing import Any, cast

from PyQt5.QtCore import QObject, pyqtSignal

from flowcanvas.config import HISTORY_SETTINGS
from flowcanvas.core.history.fingerprint import fingerprint
from flowcanvas.domain.graph import GraphSnapshot
from flowcanvas.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class GraphHistory(QObject):
    """Linear past/present/future snapshot history.

    All operations are synchronous and run to completion inside one UI
    event, so calls are serialized in dispatch order.
    """

    # Signals for UI updates
    can_undo_changed = pyqtSignal(bool)
    can_redo_changed = pyqtSignal(bool)
    history_changed = pyqtSignal()

    def __init__(self, max_depth: int | None = None, parent: QObject | None = None):
        """Initialize an empty, uninitialized history.

        Args:
            max_depth: Maximum number of past snapshots to keep
            parent: Optional Qt parent

        """
        super().__init__(parent)
        config_max_depth: Any = HISTORY_SETTINGS["MAX_DEPTH"]
        self.max_depth = int(max_depth) if max_depth is not None else int(cast("int", config_max_depth))
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

        self._past: list[GraphSnapshot] = []
        self._present: GraphSnapshot | None = None
        self._present_fingerprint: str = ""
        self._future: list[GraphSnapshot] = []

        logger.debug("[GraphHistory] Initialized with max_depth=%d", self.max_depth)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def present(self) -> GraphSnapshot | None:
        return self._present

    @property
    def present_fingerprint(self) -> str:
        return self._present_fingerprint

    @property
    def past(self) -> tuple[GraphSnapshot, ...]:
        return tuple(self._past)

    @property
    def future(self) -> tuple[GraphSnapshot, ...]:
        return tuple(self._future)

    @property
    def depth_limit(self) -> int:
        return self.max_depth

    @property
    def is_initialized(self) -> bool:
        return self._present is not None

    def can_undo(self) -> bool:
        """Check if undo is available."""
        return self._present is not None and len(self._past) > 0

    def can_redo(self) -> bool:
        """Check if redo is available."""
        return self._present is not None and len(self._future) > 0

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def init(self, snapshot: GraphSnapshot) -> None:
        """Start a session: discard all history and make snapshot the present."""
        self._past.clear()
        self._future.clear()
        self._set_present(snapshot.copy())
        logger.debug(
            "[GraphHistory] Session initialized (%d nodes, %d edges)",
            len(snapshot.nodes),
            len(snapshot.edges),
            extra={"dev_only": True},
        )
        self._emit_state_signals()

    def commit(self, snapshot: GraphSnapshot, force: bool = False) -> None:
        """Record snapshot as a new history point.

        Does nothing when snapshot is equivalent to the present. Otherwise the
        present moves to past (evicting the oldest entry beyond max_depth)
        and the future is discarded.

        With force, a snapshot whose fingerprint matches the present is still
        recorded when it differs in content the fingerprint leaves out (edge
        labels, extra data keys). An identical snapshot is always dropped.

        Called before init, the snapshot becomes the initial present.
        """
        new_fingerprint = fingerprint(snapshot)

        if self._present is None:
            logger.warning("[GraphHistory] Commit before init - using snapshot as initial state")
            self._future.clear()
            self._present = snapshot.copy()
            self._present_fingerprint = new_fingerprint
            self._emit_state_signals()
            return

        if new_fingerprint == self._present_fingerprint and (
            not force or snapshot == self._present
        ):
            logger.debug("[GraphHistory] Skipped no-op commit", extra={"dev_only": True})
            return

        self._push_past(self._present)
        self._present = snapshot.copy()
        self._present_fingerprint = new_fingerprint
        self._future.clear()

        logger.debug(
            "[GraphHistory] Committed (past=%d)", len(self._past), extra={"dev_only": True}
        )
        self._emit_state_signals()

    def undo(self) -> GraphSnapshot | None:
        """Step back one snapshot.

        Returns:
            Copy of the new present to apply to the live graph, or None when
            there is nothing to undo

        """
        if self._present is None or not self._past:
            logger.debug("[GraphHistory] Nothing to undo")
            return None

        previous = self._past.pop()
        self._future.insert(0, self._present)
        self._set_present(previous)

        logger.debug(
            "[GraphHistory] Undo (past=%d, future=%d)",
            len(self._past),
            len(self._future),
            extra={"dev_only": True},
        )
        self._emit_state_signals()
        return previous.copy()

    def redo(self) -> GraphSnapshot | None:
        """Step forward one snapshot.

        Returns:
            Copy of the new present to apply to the live graph, or None when
            there is nothing to redo

        """
        if self._present is None or not self._future:
            logger.debug("[GraphHistory] Nothing to redo")
            return None

        following = self._future.pop(0)
        self._push_past(self._present)
        self._set_present(following)

        logger.debug(
            "[GraphHistory] Redo (past=%d, future=%d)",
            len(self._past),
            len(self._future),
            extra={"dev_only": True},
        )
        self._emit_state_signals()
        return following.copy()

    def clear(self) -> None:
        """Drop past and future; the present stays as it is."""
        self._past.clear()
        self._future.clear()
        self._emit_state_signals()
        logger.info("[GraphHistory] History cleared")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _set_present(self, snapshot: GraphSnapshot) -> None:
        self._present = snapshot
        self._present_fingerprint = fingerprint(snapshot)

    def _push_past(self, snapshot: GraphSnapshot) -> None:
        self._past.append(snapshot)
        overflow = len(self._past) - self.max_depth
        if overflow > 0:
            del self._past[:overflow]

    def _emit_state_signals(self) -> None:
        """Emit signals for UI state updates."""
        self.can_undo_changed.emit(self.can_undo())
        self.can_redo_changed.emit(self.can_redo())
        self.history_changed.emit()
