import numpy as np
import pandas as pd
import time
from typing import List, Dict, Callable, Any, Optional


class BenchmarkRunner:
    """
    Times minimum cut algorithms on generated graphs and checks them against a reference.
    """

    def __init__(self,
                 algorithms: Dict[str, Callable],
                 generators: Dict[str, Callable],
                 reference: Optional[str] = None,
                 seed: Optional[int] = None):
        """
        Args:
            algorithms (Dict[str, Callable]):
                Dict of {'algo_name': algorithm_function}
                Each function must accept one arg: an (n, n) numpy matrix,
                and return the minimum cut value.

            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n and **kwargs.

            reference (Optional[str]):
                Name of the algorithm whose cut values are trusted. Every
                other algorithm's cut is compared with it per trial.

            seed (Optional[int]):
                Global random seed for reproducibility.
                If None, randomness is uncontrolled.
        """
        if reference is not None and reference not in algorithms:
            raise ValueError(f"reference algorithm '{reference}' is not in algorithms")

        self.algorithms = algorithms
        self.generators = generators
        self.reference = reference
        self.base_seed = seed

        if seed is not None:
            np.random.seed(seed)

    def _trial_seed(self, model_name: str, n: int, i: int) -> int:
        # hash() of a str is salted per process, so build the offset from stable parts
        offset = sum(ord(c) for c in model_name) * 1_000_003 + n * 1_009 + i
        return (self.base_seed + offset) % (2**32 - 1)

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]],
            seed_per_trial: bool = True) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of trials to run for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}
            seed_per_trial (bool): If True, assigns a deterministic seed per trial
                                   based on (model, n, trial index).

        Returns:
            pd.DataFrame: One row per (model, n, algorithm) with timing and
                          cut statistics, and the number of trials whose cut
                          differs from the reference.
        """
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                print(
                    f"Warning: Generator '{model_name}' not found. Skipping.")
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                print(
                    f"--- Running: Model={model_name}, n={n}, Trials={trials} ---")

                trial_results = {name: {'times': [], 'cuts': [], 'nodes': []}
                                 for name in self.algorithms}

                for i in range(trials):
                    if self.base_seed is not None and seed_per_trial:
                        np.random.seed(self._trial_seed(model_name, n, i))

                    graph = gen_func(n=n, **params)

                    for algo_name, algo_func in self.algorithms.items():
                        graph_copy = np.copy(graph)

                        start_time = time.perf_counter()
                        cut_val = algo_func(graph_copy)
                        end_time = time.perf_counter()

                        trial_results[algo_name]['times'].append(
                            end_time - start_time)
                        trial_results[algo_name]['cuts'].append(cut_val)
                        trial_results[algo_name]['nodes'].append(graph.shape[0])

                reference_cuts = None
                if self.reference is not None:
                    reference_cuts = np.array(trial_results[self.reference]['cuts'])

                for algo_name, data in trial_results.items():
                    cuts = np.array(data['cuts'])
                    mismatches = np.nan
                    if reference_cuts is not None:
                        mismatches = int(np.sum(~np.isclose(cuts, reference_cuts)))

                    all_results.append({
                        'model': model_name,
                        'n': n,
                        'mean_nodes': np.mean(data['nodes']),
                        'algorithm': algo_name,
                        'trials': trials,
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_cut': np.mean(cuts),
                        'std_cut': np.std(cuts),
                        'min_found_cut': np.min(cuts),
                        'max_found_cut': np.max(cuts),
                        'mismatches': mismatches,
                    })

        print("--- Benchmark Complete ---")
        return pd.DataFrame(all_results)
