"""
NiceGUI page for the modal graph editor.

Renders the session's document with ui.echart and routes every keystroke
through EditorSession.evaluate. Press `i` to insert, `v` for a vertex,
`e` then `src,dst` and Enter for an edge, Escape to go back, `u`/`U` to
undo/redo in command mode.
"""

from nicegui import ui
from dotenv import load_dotenv

load_dotenv()

from modalgraph.config import configure_logging
from modalgraph.edit import EditorSession
from modalgraph.edit.handlers import notify_error, setup_keyboard_handlers
from modalgraph.edit.mode import describe_mode
from modalgraph.graph_viz import GraphVisualizer

configure_logging()


@ui.page('/')
def index():
    session = EditorSession(on_error=notify_error)
    visualizer = GraphVisualizer()
    state = {}

    def refresh_ui():
        state['chart'].options.clear()
        state['chart'].options.update(visualizer.generate_echarts(session.document))
        state['chart'].update()
        state['mode_label'].set_text(describe_mode(session.mode))

    handlers = setup_keyboard_handlers(session, refresh_ui)
    ui.keyboard(on_key=handlers['handle_keyboard'])

    state['chart'] = ui.echart(visualizer.generate_echarts(session.document))
    state['chart'].style('width: 100vw; height: 90vh;')
    with ui.row().classes('items-center gap-2'):
        ui.label('Mode:').classes('text-xs text-gray-400')
        state['mode_label'] = ui.label(describe_mode(session.mode))


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(title='modalgraph', port=8081)
