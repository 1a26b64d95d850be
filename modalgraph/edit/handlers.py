"""
Edit Handlers - keyboard event handling for the NiceGUI page.

Translates browser key events into logical keys and feeds them to the
EditorSession. Keeps app.py focused on layout.
"""

import logging
from typing import Any, Callable, Dict

from nicegui import ui

from modalgraph.config import get_notify_timeout
from modalgraph.edit.controller import EditorSession
from modalgraph.edit.keys import from_key_name

logger = logging.getLogger(__name__)


def notify_error(message: str) -> None:
    """Show a user-facing session error as a toast."""
    ui.notify(message, type='warning', position='bottom', timeout=get_notify_timeout() * 1000)


def setup_keyboard_handlers(
    session: EditorSession,
    refresh_ui: Callable[[], None],
) -> Dict[str, Callable[[Any], None]]:
    """
    Set up the keyboard handler for an editing session.

    Args:
        session: EditorSession receiving the keystrokes
        refresh_ui: Function re-rendering the chart and mode label

    Returns:
        Dict with handler functions for binding to UI events
    """

    def handle_keyboard(e):
        """Evaluate one keydown; ignore key releases and modifier keys."""
        if not e.action.keydown:
            return

        name = getattr(e.key, 'name', str(e.key))
        key = from_key_name(name)
        if key is None:
            return

        session.evaluate(key)
        logger.debug(f"Key {key!r} -> mode {session.mode}")
        refresh_ui()

    return {
        'handle_keyboard': handle_keyboard,
    }
