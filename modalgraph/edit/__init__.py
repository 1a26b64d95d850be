"""
Modal editing for the graph document.

This package provides the keystroke-driven editing core:
- mode: pure mode machine turning keys into intents
- actions: interpreter resolving intents into graph operations or history moves
- controller: EditorSession, which owns all session state
- handlers: NiceGUI keyboard wiring (imported directly, not re-exported)

Usage:
    from modalgraph.edit import EditorSession
    from modalgraph.edit.handlers import setup_keyboard_handlers
"""

from modalgraph.edit.actions import Interpretation, MalformedEdgeSpec, interpret
from modalgraph.edit.controller import EditorSession
from modalgraph.edit.keys import ENTER, ESC
from modalgraph.edit.mode import (
    Apply,
    Command,
    CreateNewEdge,
    CreateNewVertex,
    Error,
    Insert,
    InsertEdgePending,
    ModeChange,
    Redo,
    Undo,
    transition,
)

__all__ = [
    'EditorSession',
    'Interpretation',
    'MalformedEdgeSpec',
    'interpret',
    'transition',
    'Command',
    'Insert',
    'InsertEdgePending',
    'CreateNewVertex',
    'CreateNewEdge',
    'Undo',
    'Redo',
    'ModeChange',
    'Apply',
    'Error',
    'ESC',
    'ENTER',
]
