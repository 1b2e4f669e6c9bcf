import networkx as nx
import numpy as np
import pytest

from graph_generators.barabasi_albert import generate_ba
from graph_generators.bridged_cliques import bridged_clique_pairs, generate_bridged_cliques
from graph_generators.erdos_renyi import generate_er
from mincut.errors import DisconnectedGraph, InsufficientVertices
from mincut.graph_store import WeightedGraph
from mincut.stoer_wagner import (min_cut_partition, min_cut_product, stoer_wagner,
                                 stoer_wagner_wrapper)


TWO_TRIANGLES = [("A", "B"), ("B", "C"), ("C", "A"),
                 ("A", "D"), ("D", "E"), ("E", "F"), ("F", "D")]


def test_two_triangles_with_bridge():
    result = stoer_wagner(WeightedGraph.from_pairs(TWO_TRIANGLES))

    assert result.cut_weight == 1
    assert sorted(result.sizes) == [3, 3]
    assert result.product == 9
    assert set(map(frozenset, result.labelled_partition())) == {
        frozenset("ABC"), frozenset("DEF")}


def test_min_cut_product_and_partition():
    assert min_cut_product(TWO_TRIANGLES) == 9
    side, other = min_cut_partition(TWO_TRIANGLES)
    assert {frozenset(side), frozenset(other)} == {frozenset("ABC"), frozenset("DEF")}


def test_triangle():
    result = stoer_wagner(WeightedGraph.from_pairs([("a", "b"), ("b", "c"), ("c", "a")]))
    assert result.cut_weight == 2
    assert sorted(result.sizes) == [1, 2]


def test_two_vertices():
    result = stoer_wagner(WeightedGraph.from_pairs([("a", "b")] * 3))
    assert result.cut_weight == 3
    assert result.sizes == (1, 1)


@pytest.mark.parametrize("m, n, k", [(4, 4, 1), (5, 7, 3), (8, 6, 2), (10, 10, 4)])
def test_bridged_cliques(m, n, k):
    result = stoer_wagner(WeightedGraph.from_pairs(bridged_clique_pairs(m, n, k)))

    assert result.cut_weight == k
    assert sorted(result.sizes) == sorted([m, n])
    left = {label for label in result.labelled_partition()[0]}
    assert len({label[0] for label in left}) == 1


def test_bridged_clique_matrix():
    assert stoer_wagner_wrapper(generate_bridged_cliques(6, 9, 2)) == 2.0


def test_partition_is_complete_and_disjoint():
    pairs = bridged_clique_pairs(5, 6, 2)
    graph = WeightedGraph.from_pairs(pairs)
    result = stoer_wagner(graph)

    assert sum(result.sizes) == graph.vertex_count()
    assert not result.side & result.other
    assert result.side | result.other == frozenset(graph.vertices())


def test_repeated_runs_are_identical():
    graph = WeightedGraph.from_matrix(generate_bridged_cliques(5, 5, 2))
    first = stoer_wagner(graph)
    second = stoer_wagner(graph)

    assert graph.vertex_count() == 10
    assert first.cut_weight == second.cut_weight
    assert first.side == second.side


def test_inplace_consumes_graph():
    graph = WeightedGraph.from_pairs(TWO_TRIANGLES)
    stoer_wagner(graph, inplace=True)
    assert graph.vertex_count() == 1


def test_known_cut_stops_early():
    graph = WeightedGraph.from_pairs(TWO_TRIANGLES)
    result = stoer_wagner(graph, known_cut=1, inplace=True)

    assert result.product == 9
    # the bridge is found in the third phase, so three vertices are left
    assert graph.vertex_count() == 3


def test_best_phase_is_not_last():
    # a heavy triangle hanging off a light edge: the light cut comes first
    graph = WeightedGraph()
    for _ in range(4):
        graph.add_vertex()
    graph.add_edge(0, 1, 10)
    graph.add_edge(1, 2, 10)
    graph.add_edge(0, 2, 10)
    graph.add_edge(2, 3, 1)

    result = stoer_wagner(graph)
    assert result.cut_weight == 1
    assert {result.side, result.other} == {frozenset({3}), frozenset({0, 1, 2})}


def test_insufficient_vertices():
    graph = WeightedGraph()
    with pytest.raises(InsufficientVertices):
        stoer_wagner(graph)
    graph.add_vertex("lonely")
    with pytest.raises(InsufficientVertices):
        stoer_wagner(graph)


def test_disconnected_graph():
    with pytest.raises(DisconnectedGraph):
        stoer_wagner(WeightedGraph.from_pairs([("a", "b"), ("c", "d")]))


def test_wrapper_trivial_matrix():
    assert stoer_wagner_wrapper(np.zeros((1, 1))) == 0.0


def _cut_weight(matrix, side):
    mask = np.zeros(matrix.shape[0], dtype=bool)
    mask[list(side)] = True
    return matrix[mask][:, ~mask].sum()


@pytest.mark.parametrize("seed", range(8))
def test_matches_networkx_on_random_graphs(seed):
    np.random.seed(seed)
    matrix = generate_er(30, 0.2) if seed % 2 else generate_ba(30, 2)

    expected, _ = nx.stoer_wagner(nx.from_numpy_array(matrix), weight='weight')
    result = stoer_wagner(WeightedGraph.from_matrix(matrix))

    assert result.cut_weight == expected
    assert _cut_weight(matrix, result.side) == expected
    assert min(result.sizes) >= 1


def test_float_weights():
    rng = np.random.default_rng(7)
    G = nx.connected_watts_strogatz_graph(25, 4, 0.3, seed=7)
    for u, v in G.edges():
        G[u][v]['weight'] = float(rng.uniform(0.5, 3.0))
    matrix = nx.to_numpy_array(G, weight='weight')

    expected, _ = nx.stoer_wagner(G, weight='weight')
    assert stoer_wagner_wrapper(matrix) == pytest.approx(expected)
