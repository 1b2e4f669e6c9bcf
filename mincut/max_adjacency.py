import heapq
from typing import Dict, List, NamedTuple, Optional, Tuple

from mincut.errors import DisconnectedGraph, InsufficientVertices, UnknownVertex
from mincut.graph_store import WeightedGraph


class PhaseResult(NamedTuple):
    cut_weight: float
    s: int
    t: int


class _MaxAdjacencyQueue:
    """
    Max-priority queue of vertices keyed by their total weight to A.
    Equal keys pop the smallest handle first. Outdated heap entries are
    skipped on pop instead of being removed on update.
    """
    __slots__ = ['heap', 'key']

    def __init__(self):
        self.heap: List[Tuple[float, int]] = []
        self.key: Dict[int, float] = {}

    def increase(self, v: int, w: float):
        total = self.key.get(v, 0) + w
        self.key[v] = total
        heapq.heappush(self.heap, (-total, v))

    def pop(self) -> Tuple[int, float]:
        while self.heap:
            neg_total, v = heapq.heappop(self.heap)
            if self.key.get(v) == -neg_total:
                del self.key[v]
                return v, -neg_total
        raise IndexError("pop from an empty queue")

    def __bool__(self) -> bool:
        return bool(self.key)


def minimum_cut_phase(graph: WeightedGraph, start: Optional[int] = None) -> PhaseResult:
    """
    Runs one maximum adjacency phase of Stoer-Wagner.

    Starting from A = {start}, repeatedly adds the vertex most tightly
    connected to A until A holds every live vertex.
    Returns the cut-of-the-phase (weight from the last vertex t to the rest
    of A) together with the last two vertices added, (s, t).
    """
    n = graph.vertex_count()
    if n < 2:
        raise InsufficientVertices(f"a phase needs 2 live vertices, graph has {n}")

    if start is None:
        start = graph.vertices()[0]
    elif start not in graph:
        raise UnknownVertex(f"start vertex {start} is not live")

    visited = {start}
    queue = _MaxAdjacencyQueue()
    for v, w in graph.neighbors(start):
        queue.increase(v, w)

    s = t = start
    cut_weight = 0
    while len(visited) < n:
        if not queue:
            raise DisconnectedGraph(
                f"only {len(visited)} of {n} vertices reachable from {start}")
        s = t
        t, cut_weight = queue.pop()
        visited.add(t)

        # only the new member's neighbors change their weight to A
        for v, w in graph.neighbors(t):
            if v not in visited:
                queue.increase(v, w)

    return PhaseResult(cut_weight, s, t)
