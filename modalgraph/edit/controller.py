"""
Editor Session - single source of truth for an editing session.

The session owns the mode, the document, the undo tree and its cursor, and
the id counters. Each keystroke goes through `evaluate`:

    key -> mode machine -> outcome -> (interpreter -> document / history)

User mistakes (unknown keys, bad edge text) are reported through the
message side channel and never change the document. An InvariantViolation
from the document is a bug and propagates to the host.
"""

import logging
from typing import Callable, List, Optional

from modalgraph.edit.actions import MalformedEdgeSpec, interpret
from modalgraph.edit.mode import Apply, Command, EditorMode, Error, Insert, ModeChange, transition
from modalgraph.graph import Graph
from modalgraph.history import HistoryTree

logger = logging.getLogger(__name__)


class EditorSession:
    """Modal graph editing session with a branching undo history."""

    def __init__(self, on_error: Optional[Callable[[str], None]] = None):
        """
        :param on_error: Optional callback receiving each user-facing error message.
        """
        self.mode: EditorMode = Command()
        # The document as materialized at the current cursor position
        self.document = Graph()
        # Children of a node are appended in time order
        self.history = HistoryTree()
        # Node of the last realized edit; None for the pristine document
        self.cursor: Optional[int] = None
        self.next_vertex_id = 0
        self.next_edge_id = 0
        self.messages: List[str] = []
        self._on_error = on_error

    @property
    def last_message(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None

    @property
    def can_undo(self) -> bool:
        return self.cursor is not None

    @property
    def can_redo(self) -> bool:
        return self.cursor is not None and self.history.last_child(self.cursor) is not None

    def allocate_vertex_id(self) -> int:
        vertex_id = self.next_vertex_id
        self.next_vertex_id += 1
        return vertex_id

    def allocate_edge_id(self) -> int:
        edge_id = self.next_edge_id
        self.next_edge_id += 1
        return edge_id

    def evaluate(self, key: str) -> None:
        outcome = transition(self.mode, key)

        if isinstance(outcome, ModeChange):
            self.mode = outcome.mode
        elif isinstance(outcome, Error):
            self.mode = outcome.mode
            self._report(outcome.message)
        elif isinstance(outcome, Apply):
            self.mode = outcome.mode
            try:
                interpretation = interpret(outcome.intent, self)
            except MalformedEdgeSpec as e:
                self.mode = Insert()
                self._report(str(e))
                return

            diff = self.document.apply_all(interpretation.operations)

            if interpretation.new_history_node:
                self.cursor = self.history.add(diff, parent=self.cursor)
                logger.debug(f"Recorded history node {self.cursor} with {len(diff)} operation(s)")
            if interpretation.move_cursor:
                self.cursor = interpretation.cursor
                logger.debug(f"History cursor moved to {self.cursor}")

    def _report(self, message: str) -> None:
        logger.info(message)
        self.messages.append(message)
        if self._on_error:
            self._on_error(message)
