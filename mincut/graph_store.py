import numpy as np
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from mincut.errors import InvalidEdge, UnknownVertex


class WeightedGraph:
    """
    Undirected weighted graph with stable integer vertex handles.

    Inserting an edge that already exists adds to its weight, so parallel
    edges never exist. Handles are allocated from 0 upwards and are never
    reused; removed vertices are dropped from the adjacency map while their
    labels stay in the arena.
    """
    __slots__ = ['_adj', '_labels', '_handles']

    def __init__(self):
        self._adj: Dict[int, Dict[int, float]] = {}
        self._labels: List[Any] = []
        self._handles: Dict[Hashable, int] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Hashable, Hashable]]) -> "WeightedGraph":
        """
        Builds a unit-weight graph from (label, label) pairs.
        Labels are interned on first occurrence; repeated pairs add up.
        """
        graph = cls()
        for a, b in pairs:
            graph.add_edge(graph.intern(a), graph.intern(b), 1)
        return graph

    @classmethod
    def from_matrix(cls, graph_matrix: np.ndarray) -> "WeightedGraph":
        """
        Builds a graph from an (n, n) symmetric adjacency matrix.
        Vertex i is labelled with the row index i.
        """
        if graph_matrix is None:
            raise ValueError("graph_matrix is None")
        if graph_matrix.ndim != 2 or graph_matrix.shape[0] != graph_matrix.shape[1]:
            raise ValueError("graph_matrix must be square")
        if not np.allclose(graph_matrix, graph_matrix.T):
            raise ValueError("graph_matrix must be undirected")
        if np.any(graph_matrix < 0):
            raise InvalidEdge("graph_matrix has a negative weight")

        n = graph_matrix.shape[0]
        graph = cls()
        for i in range(n):
            graph.add_vertex(i)

        rows, cols = np.where(np.triu(graph_matrix, k=1) > 0)
        for u, v in zip(rows.tolist(), cols.tolist()):
            graph.add_edge(u, v, graph_matrix[u, v].item())
        return graph

    def add_vertex(self, label: Optional[Hashable] = None) -> int:
        handle = len(self._labels)
        self._labels.append(label)
        self._adj[handle] = {}
        if label is not None:
            self._handles[label] = handle
        return handle

    def intern(self, label: Hashable) -> int:
        handle = self._handles.get(label)
        if handle is None:
            handle = self.add_vertex(label)
        return handle

    def handle(self, label: Hashable) -> int:
        if label not in self._handles:
            raise UnknownVertex(f"no vertex labelled {label!r}")
        return self._handles[label]

    def label(self, v: int) -> Any:
        if not 0 <= v < len(self._labels):
            raise UnknownVertex(f"vertex {v} was never allocated")
        return self._labels[v]

    def labels(self) -> List[Any]:
        """Label of every handle ever allocated, indexed by handle."""
        return list(self._labels)

    def _check(self, v: int):
        if v not in self._adj:
            raise UnknownVertex(f"vertex {v} is not live")

    def add_edge(self, a: int, b: int, w: float = 1):
        if a == b:
            raise InvalidEdge(f"self-loop on vertex {a}")
        if w < 0:
            raise InvalidEdge(f"negative weight {w} on edge ({a}, {b})")
        self._check(a)
        self._check(b)

        total = self._adj[a].get(b, 0) + w
        self._adj[a][b] = total
        self._adj[b][a] = total

    def weight(self, a: int, b: int) -> float:
        self._check(a)
        self._check(b)
        return self._adj[a].get(b, 0)

    def neighbors(self, v: int) -> List[Tuple[int, float]]:
        self._check(v)
        return list(self._adj[v].items())

    def remove_vertex(self, v: int):
        self._check(v)
        for u in self._adj.pop(v):
            del self._adj[u][v]

    def vertex_count(self) -> int:
        return len(self._adj)

    def vertices(self) -> List[int]:
        return sorted(self._adj)

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def total_weight(self) -> float:
        return sum(w for u, nbrs in self._adj.items() for v, w in nbrs.items() if u < v)

    def copy(self) -> "WeightedGraph":
        other = WeightedGraph()
        other._adj = {v: dict(nbrs) for v, nbrs in self._adj.items()}
        other._labels = list(self._labels)
        other._handles = dict(self._handles)
        return other

    def __contains__(self, v) -> bool:
        return v in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"
