"""
Transition Graph - The directed multigraph behind a transducer.

The graph:
- Vertices are plain values (prefix, output, status), not object references
- Edges carry a label of (input codepoint, output fragment)
- Several edges may leave one vertex on the same input codepoint;
  that is the only way ambiguity is represented
- Edges are append-only; there is no removal

Design decisions:
- Adjacency lists keyed by Vertex, in insertion order
- A secondary index by (vertex, input) for the transducer's hot path
- The root exists from creation, so the graph is never vertex-less
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


SIGNATURE_SEPARATOR = ":"


class VertexStatus(Enum):
    """Lifecycle status of a vertex. Part of the vertex identity."""
    INITIAL = "initial"
    TRANSITIONAL = "transitional"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class Vertex:
    """
    A vertex in the transition graph.

    Identity is the consumed input so far, the output fragment of the edge
    that led here (not the cumulative output), and the status. The
    signature string is for display only and never used as a key.
    """
    prefix: str
    output: str
    status: VertexStatus

    @classmethod
    def for_step(cls, prefix: str, output: str, closing: bool) -> Vertex:
        """Vertex reached after consuming `prefix` and emitting `output`."""
        status = VertexStatus.TERMINAL if closing else VertexStatus.TRANSITIONAL
        return cls(prefix=prefix, output=output, status=status)

    @property
    def signature(self) -> str:
        """Display form: prefix, separator, output ("root" for the root)."""
        if self.status == VertexStatus.INITIAL:
            return "root"
        return f"{self.prefix}{SIGNATURE_SEPARATOR}{self.output}"

    @property
    def is_terminal(self) -> bool:
        return self.status == VertexStatus.TERMINAL


ROOT = Vertex(prefix="", output="", status=VertexStatus.INITIAL)


@dataclass(frozen=True)
class EdgeLabel:
    """Input codepoint consumed and output fragment produced by an edge."""
    input: str
    output: str


@dataclass(frozen=True)
class Edge:
    """A labelled transition between two vertices."""
    source: Vertex
    target: Vertex
    label: EdgeLabel


class TransitionGraph:
    """
    Append-only adjacency-list graph.

    Usage:
        graph = TransitionGraph()
        graph.add_edge(Edge(ROOT, target, EdgeLabel("a", "a")))
        for edge in graph.out_edges(ROOT, "a"):
            ...
    """

    def __init__(self, root: Vertex = ROOT):
        self.root = root
        self._adjacency: dict[Vertex, list[Edge]] = {root: []}
        self._by_input: dict[tuple[Vertex, str], list[Edge]] = {}
        self._edges: set[Edge] = set()

    def add_vertex(self, vertex: Vertex) -> None:
        self._adjacency.setdefault(vertex, [])

    def add_edge(self, edge: Edge) -> bool:
        """
        Insert an edge if it is not already present.

        Returns True if the edge was new.
        """
        if edge in self._edges:
            return False

        self.add_vertex(edge.source)
        self.add_vertex(edge.target)
        self._edges.add(edge)
        self._adjacency[edge.source].append(edge)
        self._by_input.setdefault((edge.source, edge.label.input), []).append(edge)
        return True

    def out_edges(self, vertex: Vertex, symbol: str | None = None) -> list[Edge]:
        """
        Outgoing edges of a vertex in insertion order.

        If `symbol` is given, only edges consuming that codepoint.
        """
        if symbol is None:
            return list(self._adjacency.get(vertex, ()))
        return list(self._by_input.get((vertex, symbol), ()))

    def vertices(self) -> list[Vertex]:
        return list(self._adjacency)

    def edges(self) -> list[Edge]:
        return [edge for out in self._adjacency.values() for edge in out]

    def terminal_vertices(self) -> list[Vertex]:
        return [v for v in self._adjacency if v.is_terminal]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return (
            f"TransitionGraph(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
