"""
Operation interpreter.

Resolves the intents emitted by the mode machine against the session:
fresh edits become concrete graph operations (allocating new ids), while
Undo and Redo become a cursor move in the history tree plus the operations
needed to get the document there. An intent never does both.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from modalgraph.edit.mode import CreateNewEdge, CreateNewVertex, Intent, Redo, Undo
from modalgraph.graph import AddEdge, AddVertex, Edge, GraphOperation, Vertex

if TYPE_CHECKING:
    from modalgraph.edit.controller import EditorSession


class MalformedEdgeSpec(ValueError):
    """Edge text that doesn't name two existing vertices."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Unable to parse {raw!r} as a pair of vertex ids: {reason}")


@dataclass
class Interpretation:
    operations: List[GraphOperation] = field(default_factory=list)
    new_history_node: bool = False
    move_cursor: bool = False
    cursor: Optional[int] = None

    @classmethod
    def standard_op(cls, operations: List[GraphOperation]) -> "Interpretation":
        return cls(operations=operations, new_history_node=True)

    @classmethod
    def cursor_move(cls, operations: List[GraphOperation], cursor: Optional[int]) -> "Interpretation":
        return cls(operations=operations, move_cursor=True, cursor=cursor)


def interpret(intent: Intent, session: "EditorSession") -> Interpretation:
    if isinstance(intent, CreateNewVertex):
        return create_new_vertex(session)
    if isinstance(intent, CreateNewEdge):
        return create_new_edge(session, intent.raw_text)
    if isinstance(intent, Undo):
        return undo(session)
    if isinstance(intent, Redo):
        return redo(session)
    raise TypeError(f"Unknown intent: {intent!r}")


def create_new_vertex(session: "EditorSession") -> Interpretation:
    v = Vertex(id=session.allocate_vertex_id())
    return Interpretation.standard_op([AddVertex(v)])


def parse_edge_spec(session: "EditorSession", raw: str) -> Edge:
    """
    Resolve "source,target" into an Edge with a freshly allocated id.

    Only the last comma separates the two ids. The id is allocated only once
    both ends resolve, so a rejected spec consumes nothing.
    """
    source_text, sep, target_text = raw.rpartition(",")
    if not sep:
        raise MalformedEdgeSpec(raw, "expected 'source,target'")

    source = session.document.resolve_vertex(source_text)
    if source is None:
        raise MalformedEdgeSpec(raw, f"could not find source vertex {source_text.strip()!r}")
    target = session.document.resolve_vertex(target_text)
    if target is None:
        raise MalformedEdgeSpec(raw, f"could not find target vertex {target_text.strip()!r}")

    return Edge(id=session.allocate_edge_id(), source=source, target=target)


def create_new_edge(session: "EditorSession", raw: str) -> Interpretation:
    return Interpretation.standard_op([AddEdge(parse_edge_spec(session, raw))])


def undo(session: "EditorSession") -> Interpretation:
    if session.cursor is None:
        return Interpretation()
    node = session.history.get(session.cursor)
    # Recorded order, not reversed: see Diff.inverted
    return Interpretation.cursor_move(node.diff.inverted().operations, node.parent)


def redo(session: "EditorSession") -> Interpretation:
    if session.cursor is None:
        return Interpretation()
    next_id = session.history.last_child(session.cursor)
    if next_id is None:
        return Interpretation()
    node = session.history.get(next_id)
    return Interpretation.cursor_move(list(node.diff.operations), next_id)
