from typing import NamedTuple

from mincut.errors import InvalidEdge, UnknownVertex
from mincut.graph_store import WeightedGraph


class ContractionRecord(NamedTuple):
    absorbed: int
    surviving: int
    internal_weight: float


def contract(graph: WeightedGraph, s: int, t: int) -> ContractionRecord:
    """
    Merges vertex s into vertex t in place.

    Every edge (s, x) is folded into (t, x), summing weights when t already
    has an edge to x. The (s, t) edge becomes internal to the merged vertex:
    its weight is dropped from the graph and reported on the record.
    """
    if s == t:
        raise InvalidEdge(f"cannot contract vertex {s} into itself")
    for v in (s, t):
        if v not in graph:
            raise UnknownVertex(f"vertex {v} is not live")

    internal_weight = 0
    for x, w in graph.neighbors(s):
        if x == t:
            internal_weight = w
        else:
            graph.add_edge(t, x, w)

    graph.remove_vertex(s)
    return ContractionRecord(s, t, internal_weight)
