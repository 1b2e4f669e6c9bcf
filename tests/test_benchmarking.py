import numpy as np

from benchmarking import BenchmarkRunner
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from main import networkx_reference
from mincut.stoer_wagner import stoer_wagner_wrapper


def test_runner_matches_reference():
    runner = BenchmarkRunner(
        {'stoer_wagner': stoer_wagner_wrapper, 'networkx': networkx_reference},
        {'ER': generate_er, 'BA': generate_ba},
        reference='networkx',
        seed=42)
    df = runner.run(models=['ER', 'BA', 'missing'], n_values=[12, 20], trials=3,
                    model_params={'ER': {'p': 0.3}, 'BA': {'m': 2}})

    assert len(df) == 2 * 2 * 2
    assert set(df['algorithm']) == {'stoer_wagner', 'networkx'}
    assert (df['mismatches'] == 0).all()
    assert (df['mean_time_s'] >= 0).all()


def test_generators_are_symmetric_and_connected():
    np.random.seed(3)
    for matrix in (generate_er(25, 0.15), generate_ba(25, 2)):
        assert np.array_equal(matrix, matrix.T)
        assert np.all(np.diag(matrix) == 0)
        assert stoer_wagner_wrapper(matrix) > 0
