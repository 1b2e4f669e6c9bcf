import argparse
import sys
from typing import Iterator, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
import pandas as pd

from benchmarking import BenchmarkRunner
from graph_generators.barabasi_albert import generate_ba
from graph_generators.bridged_cliques import generate_bridged_cliques
from graph_generators.erdos_renyi import generate_er
from mincut.graph_store import WeightedGraph
from mincut.stoer_wagner import stoer_wagner, stoer_wagner_wrapper


RNG_SEED = 42
N_VALUES = [20, 40, 60, 80, 100]
R_TRIALS = 10

MODEL_PARAMS = {
    'ER': {'p': 0.1},       # G(n, p) with p=0.1, largest component
    'BA': {'m': 3},         # m=3 new edges per node
    'CLIQUES': {'k': 3},    # two n/2 cliques joined by 3 bridges
}


def parse_pairs(text: str) -> Iterator[Tuple[str, str]]:
    """
    Parses a component listing: each line is 'name: other other ...' and
    connects name to every listed component.
    """
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        name, sep, rest = line.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"line {lineno}: expected 'name: other ...', got {line!r}")
        for other in rest.split():
            yield name.strip(), other


def networkx_reference(graph_matrix: np.ndarray) -> float:
    cut_value, _ = nx.stoer_wagner(nx.from_numpy_array(graph_matrix), weight='weight')
    return float(cut_value)


def _cliques(n: int, k: int) -> np.ndarray:
    return generate_bridged_cliques(n // 2, n - n // 2, k)


def solve(args):
    with open(args.input) as f:
        pairs = list(parse_pairs(f.read()))

    graph = WeightedGraph.from_pairs(pairs)
    print(f"Loaded {args.input}: {graph.vertex_count()} nodes, {graph.edge_count()} edges")

    result = stoer_wagner(graph, known_cut=args.known_cut, inplace=True, progress=args.progress)
    print(f"Minimum cut weight: {result.cut_weight}")
    print(f"Component sizes: {result.sizes[0]} x {result.sizes[1]}")
    if args.show_partition:
        side, other = result.labelled_partition()
        print("Side A:", " ".join(sorted(map(str, side))))
        print("Side B:", " ".join(sorted(map(str, other))))
    print(result.product)


def benchmark(args):
    algorithms_to_test = {
        'stoer_wagner': stoer_wagner_wrapper,
        'networkx': networkx_reference,
    }

    graph_generators = {
        'ER': generate_er,
        'BA': generate_ba,
        'CLIQUES': _cliques,
    }

    runner = BenchmarkRunner(algorithms_to_test, graph_generators,
                             reference='networkx', seed=RNG_SEED)
    results_df = runner.run(
        models=list(MODEL_PARAMS),
        n_values=N_VALUES,
        trials=args.trials,
        model_params=MODEL_PARAMS
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")

    if args.plot:
        plt.figure()
        for (model, algo), group in results_df.groupby(['model', 'algorithm']):
            plt.plot(group['n'], group['mean_time_s'], marker='o', label=f"{algo} ({model})")
        plt.xlabel("Number of Nodes")
        plt.ylabel("Runtime (seconds)")
        plt.title("Runtime vs Number of Nodes")
        plt.legend()
        plt.grid(True)
        plt.show()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Stoer-Wagner global minimum cut")

    parser.add_argument("--input", type=str,
                        help="Component listing file ('name: other other ...' per line)")

    parser.add_argument("--known-cut", type=float, default=None,
                        help="Stop at the first phase whose cut has this weight")

    parser.add_argument("--show-partition", action="store_true",
                        help="Print the labels on both sides of the cut")

    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar over the phases")

    parser.add_argument("--benchmark", action="store_true",
                        help="Benchmark against networkx on random graphs")

    parser.add_argument("--trials", type=int, default=R_TRIALS,
                        help="Number of trials per (model, n) pair")

    parser.add_argument("--output", type=str, default="benchmark_results.csv",
                        help="CSV file for benchmark results")

    parser.add_argument("--plot", action="store_true",
                        help="Plot mean runtime per model after benchmarking")

    args = parser.parse_args(argv)

    if not args.input and not args.benchmark:
        parser.error("one of --input or --benchmark is required")

    try:
        if args.input:
            solve(args)
        if args.benchmark:
            benchmark(args)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
