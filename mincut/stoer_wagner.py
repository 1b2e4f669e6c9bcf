import numpy as np
from tqdm import tqdm
from typing import Any, FrozenSet, Hashable, Iterable, List, NamedTuple, Optional, Set, Tuple

from mincut.contraction import ContractionRecord, contract
from mincut.errors import InsufficientVertices
from mincut.graph_store import WeightedGraph
from mincut.max_adjacency import minimum_cut_phase
from mincut.reconstruct import reconstruct_members


class MinCutResult(NamedTuple):
    cut_weight: float
    side: FrozenSet[int]
    other: FrozenSet[int]
    labels: List[Any]

    @property
    def sizes(self) -> Tuple[int, int]:
        return len(self.side), len(self.other)

    @property
    def product(self) -> int:
        return len(self.side) * len(self.other)

    def labelled_partition(self) -> Tuple[Set[Any], Set[Any]]:
        return ({self.labels[v] for v in self.side},
                {self.labels[v] for v in self.other})


def stoer_wagner(graph: WeightedGraph,
                 known_cut: Optional[float] = None,
                 inplace: bool = False,
                 progress: bool = False) -> MinCutResult:
    """
    Computes a global minimum cut with the Stoer-Wagner algorithm.

    Each phase starts from the smallest live handle and ends by merging its
    last two vertices, until one vertex remains. The lightest cut-of-the-phase
    is the minimum cut; its side is the set of original vertices merged into
    that phase's last vertex before the phase ran.

    Args:
        graph: connected graph with non-negative weights.
        known_cut: if the minimum cut weight is known in advance, stop at the
                   first phase whose cut equals it.
        inplace: contract `graph` itself instead of a copy.
        progress: show a progress bar over the phases.
    """
    n = graph.vertex_count()
    if n < 2:
        raise InsufficientVertices(f"minimum cut needs 2 vertices, graph has {n}")

    if not inplace:
        graph = graph.copy()
    vertices = graph.vertices()
    labels = graph.labels()

    records: List[ContractionRecord] = []
    best_cut = float('inf')
    best_t = None
    best_prefix = 0

    for _ in tqdm(range(n - 1), desc="Stoer-Wagner phases", disable=not progress):
        cut, s, t = minimum_cut_phase(graph)
        if cut < best_cut:
            best_cut = cut
            best_t = t
            best_prefix = len(records)

        records.append(contract(graph, s, t))

        if known_cut is not None and cut == known_cut:
            break

    if best_t is None:
        raise InsufficientVertices("no phase produced a finite cut")

    side = reconstruct_members(records[:best_prefix], best_t, vertices)
    other = frozenset(vertices) - side
    return MinCutResult(best_cut, side, other, labels)


def min_cut_product(pairs: Iterable[Tuple[Hashable, Hashable]],
                    known_cut: Optional[float] = None) -> int:
    """
    Product of the two component sizes left after removing a minimum cut
    from the unit-weight graph described by (label, label) pairs.
    """
    return stoer_wagner(WeightedGraph.from_pairs(pairs), known_cut, inplace=True).product


def min_cut_partition(pairs: Iterable[Tuple[Hashable, Hashable]],
                      known_cut: Optional[float] = None) -> Tuple[Set[Any], Set[Any]]:
    result = stoer_wagner(WeightedGraph.from_pairs(pairs), known_cut, inplace=True)
    return result.labelled_partition()


def stoer_wagner_wrapper(graph_matrix: np.ndarray) -> float:
    """
    Public wrapper. graph_matrix is an (n x n) symmetric adjacency matrix.
    """
    if graph_matrix.shape[0] <= 1:
        return 0.0
    graph = WeightedGraph.from_matrix(graph_matrix)
    return float(stoer_wagner(graph, inplace=True).cut_weight)
