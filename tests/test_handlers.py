from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from modalgraph.edit import EditorSession
from modalgraph.edit.handlers import notify_error, setup_keyboard_handlers
from modalgraph.edit.mode import Command, Insert


def key_event(name, keydown=True):
    return SimpleNamespace(key=SimpleNamespace(name=name), action=SimpleNamespace(keydown=keydown))


def test_keydown_events_are_evaluated():
    session = EditorSession()
    refresh = MagicMock()
    handle_keyboard = setup_keyboard_handlers(session, refresh)['handle_keyboard']

    for name in ["i", "v", "v", "e", "0", ",", "1", "Enter", "Escape"]:
        handle_keyboard(key_event(name))

    assert session.mode == Command()
    assert set(session.document.vertices) == {0, 1}
    assert len(session.document.edges) == 1
    assert refresh.call_count == 9


def test_keyup_and_modifier_keys_are_ignored():
    session = EditorSession()
    refresh = MagicMock()
    handle_keyboard = setup_keyboard_handlers(session, refresh)['handle_keyboard']

    handle_keyboard(key_event("i", keydown=False))
    handle_keyboard(key_event("Shift"))

    assert session.mode == Command()
    refresh.assert_not_called()

    handle_keyboard(key_event("i"))
    assert session.mode == Insert()


def test_notify_error_uses_configured_timeout(monkeypatch):
    monkeypatch.setenv("MODALGRAPH_NOTIFY_TIMEOUT", "3")
    with patch('modalgraph.edit.handlers.ui') as mock_ui:
        notify_error("boom")

    mock_ui.notify.assert_called_once()
    args, kwargs = mock_ui.notify.call_args
    assert args[0] == "boom"
    assert kwargs["timeout"] == 3000


def test_session_errors_reach_notify():
    with patch('modalgraph.edit.handlers.ui') as mock_ui:
        session = EditorSession(on_error=notify_error)
        handle_keyboard = setup_keyboard_handlers(session, MagicMock())['handle_keyboard']
        handle_keyboard(key_event("z"))

    mock_ui.notify.assert_called_once()
    assert "'z'" in mock_ui.notify.call_args[0][0]
