import networkx as nx
import numpy as np


def generate_er(n: int, p: float, max_weight: int = 10) -> np.ndarray:
    """
    Generates a weighted Erdős-Rényi (G(n, p)) random graph.

    G(n, p) does not guarantee a connected graph, so only the largest
    connected component is kept (the result may have fewer than n nodes).

    Returns:
        np.ndarray: A symmetric adjacency matrix with integer weights in
                    [1, max_weight).
    """
    seed = int(np.random.randint(0, 2**31 - 1))
    G = nx.erdos_renyi_graph(n, p, seed=seed)

    if G.number_of_nodes() > 0 and not nx.is_connected(G):
        largest_cc_nodes = max(nx.connected_components(G), key=len)
        G = nx.convert_node_labels_to_integers(G.subgraph(largest_cc_nodes), ordering="sorted")

    for (u, v) in G.edges():
        G[u][v]['weight'] = np.random.randint(1, max_weight)

    return nx.to_numpy_array(G, weight='weight', dtype=int)
