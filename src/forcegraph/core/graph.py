"""
Graph: a directed, optionally labelled multigraph.

Nodes are stored by an identity key computed from the node itself (the
key function defaults to `str`). Inserting a node whose key is already
present returns the stored node instead of adding a second one.

Edges are unique per (origin, destination, label): parallel edges between
the same ordered pair are allowed only with different labels. Removing a
node removes every edge touching it; removing an edge never removes nodes.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterator, Mapping


KeyFn = Callable[[Any], Hashable]


@dataclass(eq=False)
class Edge:
    """A directed edge between two stored nodes, with an optional label."""

    origin: Any
    destination: Any
    content: Any = None

    @property
    def is_loop(self) -> bool:
        return self.origin is self.destination

    def __repr__(self) -> str:
        label = "" if self.content is None else f" [{self.content}]"
        return f"Edge({self.origin} -> {self.destination}{label})"


class Graph:
    """
    Directed graph container.

    Iteration order over nodes and edges is insertion order, which keeps
    every traversal (and therefore every simulation step) deterministic.
    """

    def __init__(self, key: KeyFn = str):
        self._key = key
        self._nodes: dict[Hashable, Any] = {}
        self._edges: list[Edge] = []

    # ── identity ────────────────────────────────────────────────────────

    def identity(self, n: Any) -> Hashable:
        """Identity key of a node (or of the value that would become one)."""
        return self._key(n)

    # ── read access ─────────────────────────────────────────────────────

    @property
    def nodes(self) -> Mapping[Hashable, Any]:
        """Read-only view of key -> stored node."""
        return MappingProxyType(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Snapshot of the edge list, in insertion order."""
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, n: Any) -> bool:
        return n is not None and self.identity(n) in self._nodes

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._nodes.values()))

    def get_node(self, n: Any) -> Any | None:
        if n is None:
            return None
        return self._nodes.get(self.identity(n))

    def get_edge(self, origin: Any, destination: Any, label: Any = None) -> Edge | None:
        """The edge matching (origin, destination, label) exactly, or None."""
        for edge in self._edges:
            if self._matches(edge, origin, destination) and edge.content == label:
                return edge
        return None

    def get_edges(self, origin: Any, destination: Any) -> list[Edge]:
        """All edges from origin to destination, whatever their label."""
        return [e for e in self._edges if self._matches(e, origin, destination)]

    def successors(self, n: Any) -> list[Any]:
        """Destinations of the edges leaving n, in edge order."""
        if n not in self:
            return []
        key = self.identity(n)
        return [e.destination for e in self._edges if self.identity(e.origin) == key]

    def _matches(self, edge: Edge, origin: Any, destination: Any) -> bool:
        if origin is None or destination is None:
            return False
        return (
            self.identity(edge.origin) == self.identity(origin)
            and self.identity(edge.destination) == self.identity(destination)
        )

    # ── mutation ────────────────────────────────────────────────────────

    def add_node(self, n: Any) -> Any | None:
        """
        Insert n unless a node with the same key exists.

        Returns:
            The stored node (the existing one on a duplicate key), or None
            when n is None.
        """
        if n is None:
            return None
        key = self.identity(n)
        stored = self._nodes.get(key)
        if stored is not None:
            return stored
        self._nodes[key] = n
        return n

    def add_edge(self, origin: Any, destination: Any, label: Any = None) -> Edge | None:
        """
        Insert the edge (origin, destination, label), creating both endpoints.

        Returns:
            The new or already existing edge, or None if an endpoint is None.
        """
        if origin is None or destination is None:
            return None
        origin = self.add_node(origin)
        destination = self.add_node(destination)

        edge = self.get_edge(origin, destination, label)
        if edge is None:
            edge = Edge(origin, destination, label)
            self._edges.append(edge)
        return edge

    def rem_edge(self, origin: Any, destination: Any, label: Any = None) -> None:
        """Remove the first edge matching (origin, destination, label)."""
        for i, edge in enumerate(self._edges):
            if self._matches(edge, origin, destination) and edge.content == label:
                del self._edges[i]
                return

    def rem_node(self, n: Any) -> None:
        """Remove n and every edge having it as origin or destination."""
        if n not in self:
            return
        key = self.identity(n)
        self._edges = [
            e for e in self._edges
            if self.identity(e.origin) != key and self.identity(e.destination) != key
        ]
        del self._nodes[key]

    def __str__(self) -> str:
        lines = ["Directed Graph object."]
        for node in self._nodes.values():
            targets = ", ".join(str(d) for d in self.successors(node))
            lines.append(f"{node} --> {targets}")
        return "\n".join(lines)
