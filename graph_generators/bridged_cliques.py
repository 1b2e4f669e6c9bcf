import numpy as np
from typing import List, Tuple


def _check_sizes(m: int, n: int, k: int):
    if m < 1 or n < 1:
        raise ValueError("clique sizes must be >= 1")
    if not 1 <= k <= m * n:
        raise ValueError(f"k must be in [1, {m * n}]")


def _bridges(m: int, n: int, k: int) -> List[Tuple[int, int]]:
    # k distinct (left, right) pairs in row-major order
    return [(i // n, m + i % n) for i in range(k)]


def bridged_clique_pairs(m: int, n: int, k: int) -> List[Tuple[str, str]]:
    """
    Two unit-weight cliques of sizes m and n joined by k bridging edges,
    as labelled pairs. Left clique labels are 'L0'..., right ones 'R0'....
    For k < min(m, n) - 1 the unique minimum cut is the k bridges.
    """
    _check_sizes(m, n, k)

    def name(v):
        return f"L{v}" if v < m else f"R{v - m}"

    pairs = []
    for lo, size in ((0, m), (m, n)):
        for a in range(lo, lo + size):
            for b in range(a + 1, lo + size):
                pairs.append((name(a), name(b)))
    pairs.extend((name(a), name(b)) for a, b in _bridges(m, n, k))
    return pairs


def generate_bridged_cliques(m: int, n: int, k: int) -> np.ndarray:
    """
    Same graph as `bridged_clique_pairs`, as an (m + n, m + n) adjacency
    matrix. Nodes 0..m-1 form the left clique.
    """
    _check_sizes(m, n, k)

    matrix = np.zeros((m + n, m + n), dtype=int)
    matrix[:m, :m] = 1
    matrix[m:, m:] = 1
    np.fill_diagonal(matrix, 0)

    for a, b in _bridges(m, n, k):
        matrix[a, b] = 1
        matrix[b, a] = 1
    return matrix
