"""
Undo tree for an editing session.

Nodes live in a flat arena and refer to each other by integer handle, so a
node knows its parent and its children without owning either. Children are
appended in creation order; the last child is the most recent branch.
Nodes are never removed.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from modalgraph.graph import Diff


@dataclass
class HistoryNode:
    diff: Diff
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)


class HistoryTree:
    """Append-only arena of HistoryNodes addressed by index."""

    def __init__(self):
        self._nodes: List[HistoryNode] = []
        self._roots: List[int] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, diff: Diff, parent: Optional[int] = None) -> int:
        """
        Store a diff as the newest child of `parent` (or a new root) and
        return its handle.
        """
        if parent is not None:
            self.get(parent)
        node_id = len(self._nodes)
        self._nodes.append(HistoryNode(diff=diff, parent=parent))
        if parent is None:
            self._roots.append(node_id)
        else:
            self._nodes[parent].children.append(node_id)
        return node_id

    def get(self, node_id: int) -> HistoryNode:
        if node_id < 0 or node_id >= len(self._nodes):
            raise KeyError(f"Unknown history node {node_id}")
        return self._nodes[node_id]

    def parent(self, node_id: int) -> Optional[int]:
        return self.get(node_id).parent

    def children(self, node_id: int) -> List[int]:
        return list(self.get(node_id).children)

    def last_child(self, node_id: int) -> Optional[int]:
        children = self.get(node_id).children
        return children[-1] if children else None

    @property
    def roots(self) -> List[int]:
        return list(self._roots)
