import numpy as np
from typing import FrozenSet, Iterable, Sequence, Tuple

from mincut.contraction import ContractionRecord
from mincut.errors import UnknownVertex


class _UnionFind:
    __slots__ = ['parent', 'rank', 'num_components']

    def __init__(self, n: int):
        self.parent = np.arange(n, dtype=int)
        self.rank = np.zeros(n, dtype=int)
        self.num_components = n

    def find(self, i: int) -> int:
        root = i
        while root != self.parent[root]:
            root = self.parent[root]

        # path compression
        curr = i
        while curr != root:
            nxt = self.parent[curr]
            self.parent[curr] = root
            curr = nxt
        return int(root)

    def union(self, i: int, j: int) -> bool:
        root_i = self.find(i)
        root_j = self.find(j)

        if root_i == root_j:
            return False

        if self.rank[root_i] < self.rank[root_j]:
            self.parent[root_i] = root_j
        elif self.rank[root_i] > self.rank[root_j]:
            self.parent[root_j] = root_i
        else:
            self.parent[root_j] = root_i
            self.rank[root_i] += 1

        self.num_components -= 1
        return True


def reconstruct_members(records: Sequence[ContractionRecord],
                        t: int,
                        vertices: Iterable[int]) -> FrozenSet[int]:
    """
    Replays contraction records and returns the original vertices merged into t.

    Input:
        records: contractions in chronological order. Pass only the prefix
                 that happened before the phase of interest; later merges
                 would pull extra vertices into t.
        t: the surviving (super-)vertex.
        vertices: every original vertex handle of the graph.
    Output:
        frozenset of the original handles that t represents (t included).
    """
    vertices = list(vertices)
    known = set(vertices)
    for v in [t] + [h for r in records for h in (r.absorbed, r.surviving)]:
        if v not in known:
            raise UnknownVertex(f"vertex {v} is not an original vertex")

    uf = _UnionFind(max(vertices) + 1)
    for record in records:
        uf.union(record.absorbed, record.surviving)

    root = uf.find(t)
    return frozenset(v for v in vertices if uf.find(v) == root)


def partition_sizes(records: Sequence[ContractionRecord],
                    t: int,
                    vertices: Iterable[int]) -> Tuple[int, int]:
    vertices = list(vertices)
    side = len(reconstruct_members(records, t, vertices))
    return side, len(vertices) - side
