import numpy as np


def generate_ba(n: int, m: int, max_weight: int = 10) -> np.ndarray:
    """
    Generates a weighted Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The seed graph is a clique on m + 1 nodes, so the result is
                 always connected.
        max_weight (int): Edge weights are drawn uniformly from [1, max_weight).

    Returns:
        np.ndarray: An (n, n) symmetric adjacency matrix.
    """
    m0 = m + 1
    if m < 1:
        raise ValueError("m must be >= 1")
    if n < m0:
        raise ValueError("n must be > m")

    adjacency = np.zeros((n, n), dtype=bool)

    rows, cols = np.triu_indices(m0, k=1)
    adjacency[rows, cols] = True
    adjacency[cols, rows] = True

    degrees = np.sum(adjacency, axis=1).astype(float)

    for i in range(m0, n):
        probabilities = degrees[:i] / np.sum(degrees[:i])
        targets = np.random.choice(i, size=m, replace=False, p=probabilities)

        adjacency[i, targets] = True
        adjacency[targets, i] = True

        degrees[i] = m
        degrees[targets] += 1

    weights = np.triu(np.random.randint(1, max_weight, size=(n, n)), k=1)
    weights = weights + weights.T
    return np.where(adjacency, weights, 0)
