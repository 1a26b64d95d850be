"""
Graph document for the modal editor.

The document holds vertices and edges keyed by integer id and applies one
mutation at a time. Every mutation returns the Diff of what actually took
effect, so replaying an old diff is always safe: repeated operations simply
come back empty.

Invariant: every edge's source and target exist in the vertex mapping.
Removing a vertex removes all of its incident edges in the same step.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Union

import networkx as nx

logger = logging.getLogger(__name__)

# ASCII digits with an optional sign
VERTEX_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvariantViolation(RuntimeError):
    """Raised when an operation would leave an edge pointing at a missing vertex."""


@dataclass(frozen=True)
class Vertex:
    id: int


@dataclass(frozen=True)
class Edge:
    id: int
    source: int
    target: int


@dataclass(frozen=True)
class AddVertex:
    vertex: Vertex

    def invert(self) -> "RemoveVertex":
        return RemoveVertex(self.vertex)


@dataclass(frozen=True)
class RemoveVertex:
    vertex: Vertex

    def invert(self) -> AddVertex:
        return AddVertex(self.vertex)


@dataclass(frozen=True)
class AddEdge:
    edge: Edge

    def invert(self) -> "RemoveEdge":
        return RemoveEdge(self.edge)


@dataclass(frozen=True)
class RemoveEdge:
    edge: Edge

    def invert(self) -> AddEdge:
        return AddEdge(self.edge)


GraphOperation = Union[AddVertex, RemoveVertex, AddEdge, RemoveEdge]


@dataclass
class Diff:
    """Ordered list of operations one edit actually performed."""
    operations: List[GraphOperation] = field(default_factory=list)

    def __iter__(self) -> Iterator[GraphOperation]:
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)

    def extend(self, other: "Diff") -> None:
        self.operations.extend(other.operations)

    def inverted(self) -> "Diff":
        """
        Invert every operation, keeping the recorded order.

        A cascading vertex removal is recorded vertex first, then its edges,
        so the inverse re-adds the vertex before the edges that need it.
        """
        return Diff([op.invert() for op in self.operations])


class Graph:
    """In-memory graph document: vertex id -> Vertex, edge id -> Edge."""

    def __init__(self):
        self.vertices: Dict[int, Vertex] = {}
        self.edges: Dict[int, Edge] = {}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.vertices == other.vertices and self.edges == other.edges

    def __repr__(self) -> str:
        return f"Graph(vertices={sorted(self.vertices)}, edges={sorted(self.edges)})"

    def copy(self) -> "Graph":
        g = Graph()
        g.vertices = dict(self.vertices)
        g.edges = dict(self.edges)
        return g

    # --- Mutations ---

    def apply(self, operation: GraphOperation) -> Diff:
        if isinstance(operation, AddVertex):
            return self.add_vertex(operation.vertex)
        if isinstance(operation, RemoveVertex):
            return self.remove_vertex(operation.vertex)
        if isinstance(operation, AddEdge):
            return self.add_edge(operation.edge)
        if isinstance(operation, RemoveEdge):
            return self.remove_edge(operation.edge)
        raise TypeError(f"Unsupported graph operation: {operation!r}")

    def apply_all(self, operations: Iterable[GraphOperation]) -> Diff:
        """
        Apply a batch of operations in order and return the combined diff.

        The batch is checked up front, so an edge referencing a missing vertex
        raises InvariantViolation before anything is mutated.
        """
        operations = list(operations)
        self._validate(operations)

        diff = Diff()
        for operation in operations:
            diff.extend(self.apply(operation))
        logger.debug(f"Applied {len(operations)} operation(s), {len(diff)} took effect")
        return diff

    def _validate(self, operations: List[GraphOperation]) -> None:
        present: Set[int] = set(self.vertices)
        for operation in operations:
            if isinstance(operation, AddVertex):
                present.add(operation.vertex.id)
            elif isinstance(operation, RemoveVertex):
                present.discard(operation.vertex.id)
            elif isinstance(operation, AddEdge):
                edge = operation.edge
                for endpoint in (edge.source, edge.target):
                    if endpoint not in present:
                        raise InvariantViolation(
                            f"Edge {edge.id} references unknown vertex {endpoint}"
                        )
            elif not isinstance(operation, RemoveEdge):
                raise TypeError(f"Unsupported graph operation: {operation!r}")

    def add_vertex(self, v: Vertex) -> Diff:
        if v.id in self.vertices:
            return Diff()
        self.vertices[v.id] = v
        return Diff([AddVertex(v)])

    def remove_vertex(self, v: Vertex) -> Diff:
        if v.id not in self.vertices:
            return Diff()
        del self.vertices[v.id]
        ops: List[GraphOperation] = [RemoveVertex(v)]

        # Incident edges go with the vertex, ascending by id.
        incident = sorted(
            (e for e in self.edges.values() if e.source == v.id or e.target == v.id),
            key=lambda e: e.id,
        )
        for edge in incident:
            del self.edges[edge.id]
            ops.append(RemoveEdge(edge))
        return Diff(ops)

    def add_edge(self, e: Edge) -> Diff:
        for endpoint in (e.source, e.target):
            if endpoint not in self.vertices:
                raise InvariantViolation(f"Unknown vertex {endpoint} for edge {e.id}")
        if e.id in self.edges:
            return Diff()
        self.edges[e.id] = e
        return Diff([AddEdge(e)])

    def remove_edge(self, e: Edge) -> Diff:
        if e.id not in self.edges:
            return Diff()
        del self.edges[e.id]
        return Diff([RemoveEdge(e)])

    # --- Lookups ---

    def resolve_vertex(self, text: str) -> Optional[int]:
        """Parse text as a vertex id; None unless the vertex exists."""
        text = text.strip()
        if not VERTEX_ID_PATTERN.fullmatch(text):
            return None
        vertex_id = int(text)
        return vertex_id if vertex_id in self.vertices else None

    def to_networkx(self) -> nx.DiGraph:
        """
        Build a NetworkX view of the document for rendering or analysis.
        Parallel edges between the same pair collapse to the last one by id.
        """
        G = nx.DiGraph()
        for vertex_id in sorted(self.vertices):
            G.add_node(vertex_id)
        for edge in sorted(self.edges.values(), key=lambda e: e.id):
            G.add_edge(edge.source, edge.target, edge_id=edge.id)
        return G
