import pytest

from modalgraph.edit import EditorSession
from modalgraph.edit.actions import Interpretation, MalformedEdgeSpec, interpret
from modalgraph.edit.mode import CreateNewEdge, CreateNewVertex, Redo, Undo
from modalgraph.graph import AddEdge, AddVertex, Diff, Edge, RemoveEdge, RemoveVertex, Vertex


@pytest.fixture
def session():
    """Session whose document holds vertices 0 and 1 (no history)."""
    s = EditorSession()
    s.document.add_vertex(Vertex(0))
    s.document.add_vertex(Vertex(1))
    s.next_vertex_id = 2
    return s


def test_create_new_vertex_allocates_next_id(session):
    result = interpret(CreateNewVertex(), session)

    assert result.operations == [AddVertex(Vertex(2))]
    assert result.new_history_node
    assert not result.move_cursor
    assert session.next_vertex_id == 3


def test_create_new_edge(session):
    result = interpret(CreateNewEdge("0,1"), session)

    assert result.operations == [AddEdge(Edge(0, 0, 1))]
    assert result.new_history_node
    assert session.next_edge_id == 1


def test_create_new_edge_trims_whitespace(session):
    result = interpret(CreateNewEdge(" 1 , 0 "), session)

    assert result.operations == [AddEdge(Edge(0, 1, 0))]


def test_only_last_comma_separates(session):
    with pytest.raises(MalformedEdgeSpec):
        interpret(CreateNewEdge("0,0,1"), session)


@pytest.mark.parametrize("raw", ["", "x", "01", "0,", ",1", "a,1", "0,b", "0,7", "7,0", "1_0,0", "\u0661,0"])
def test_malformed_edge_spec(session, raw):
    with pytest.raises(MalformedEdgeSpec) as excinfo:
        interpret(CreateNewEdge(raw), session)

    assert excinfo.value.raw == raw
    assert session.next_edge_id == 0


def test_undo_without_history_is_noop(session):
    result = interpret(Undo(), session)

    assert result == Interpretation()


def test_redo_without_history_is_noop(session):
    assert interpret(Redo(), session) == Interpretation()


def test_undo_inverts_in_recorded_order(session):
    session.document.add_edge(Edge(0, 0, 1))
    diff = session.document.remove_vertex(Vertex(0))
    root = session.history.add(diff)
    session.cursor = root

    result = interpret(Undo(), session)

    assert result.operations == [AddVertex(Vertex(0)), AddEdge(Edge(0, 0, 1))]
    assert result.move_cursor
    assert result.cursor is None
    assert not result.new_history_node


def test_undo_moves_to_parent(session):
    root = session.history.add(Diff([AddVertex(Vertex(0))]))
    child = session.history.add(Diff([AddVertex(Vertex(1))]), parent=root)
    session.cursor = child

    result = interpret(Undo(), session)

    assert result.operations == [RemoveVertex(Vertex(1))]
    assert result.cursor == root


def test_redo_follows_latest_child(session):
    root = session.history.add(Diff([AddVertex(Vertex(0))]))
    session.history.add(Diff([AddVertex(Vertex(1))]), parent=root)
    newest = session.history.add(Diff([AddEdge(Edge(0, 0, 1))]), parent=root)
    session.cursor = root

    result = interpret(Redo(), session)

    assert result.operations == [AddEdge(Edge(0, 0, 1))]
    assert result.cursor == newest
    assert result.move_cursor


def test_redo_at_leaf_is_noop(session):
    session.cursor = session.history.add(Diff([RemoveEdge(Edge(0, 0, 1))]))

    assert interpret(Redo(), session) == Interpretation()
