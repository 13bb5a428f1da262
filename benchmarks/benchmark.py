import os
import time
import random
import string
import tracemalloc
from typing import Dict, List

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from bmsearch.search.algorithms import BoyerMoore, NaiveSearch


class Benchmark:
    def __init__(self, output_dir: str = "benchmark_results"):
        self.output_dir = output_dir
        self.algorithms = {
            "BoyerMoore": BoyerMoore,
            "Naive": NaiveSearch,
        }
        self.results: Dict[str, List[Dict]] = {}
        os.makedirs(output_dir, exist_ok=True)

    def generate_test_file(self, size: int, filename: str, alphabet: str = string.ascii_letters + string.digits + " ") -> str:
        """Writes `size` random bytes drawn from `alphabet`, one line every 80 characters."""
        filepath = os.path.join(self.output_dir, filename)
        with open(filepath, "w") as f:
            remaining = size
            while remaining > 0:
                line_length = min(80, remaining)
                f.write("".join(random.choices(alphabet, k=line_length - 1)) + "\n")
                remaining -= line_length
        return filepath

    def measure_memory(self, func, *args):
        tracemalloc.start()
        func(*args)
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        return peak / 1024

    def measure_throughput(self, search_func, queries, n_runs=3):
        start_time = time.perf_counter()
        for _ in range(n_runs):
            for query in queries:
                search_func(query)
        total_time = time.perf_counter() - start_time
        return (len(queries) * n_runs) / (1000 * total_time) if total_time else 0.0

    def run_benchmark(self, file_sizes: List[int], queries: List[str], reread: bool = False) -> None:
        self.results.clear()
        total_steps = len(file_sizes) * len(self.algorithms)
        current_step = 0

        for size in file_sizes:
            filepath = self.generate_test_file(size, f"bench_{size}.txt")
            for algo_name, algo_class in self.algorithms.items():
                current_step += 1
                print(f"Running benchmark: {current_step}/{total_steps} - Algorithm: {algo_name}, File Size: {size} bytes", end='\r')

                algo = algo_class(filepath, reread_on_query=reread)
                total_search_time = 0.0
                total_memory_usage = 0.0
                total_matches = 0
                for query in queries:
                    search_start = time.perf_counter()
                    total_matches += len(algo.search(query))
                    total_search_time += time.perf_counter() - search_start
                    total_memory_usage += self.measure_memory(algo.search, query)

                self.results.setdefault(algo_name, []).append({
                    "file_size": size,
                    "avg_search_time": 1000 * total_search_time / len(queries),
                    "memory_usage": total_memory_usage / len(queries),
                    "throughput": self.measure_throughput(algo.search, queries),
                    "matches": total_matches,
                })
                algo.cleanup()

        print("\nBenchmark completed.")

    def plot_figure(self, df, x, y, xlabel, ylabel, filename, log_scale_y=False):
        plt.figure(figsize=(15, 10))
        for algo in df["algorithm"].unique():
            algo_data = df[df["algorithm"] == algo]
            plt.plot(algo_data[x], algo_data[y], marker='o', label=algo)
        if log_scale_y:
            plt.yscale('log')
        plt.xlabel(xlabel)
        plt.ylabel(ylabel + " [Log Scale]" if log_scale_y else ylabel)
        plt.legend()
        plt.tight_layout()
        plt.savefig(filename)
        plt.close()

    def to_frame(self) -> pd.DataFrame:
        data = []
        for algo_name, results in self.results.items():
            for result in results:
                data.append(dict(result, algorithm=algo_name))
        return pd.DataFrame(data)

    def generate_report(self) -> None:
        df = self.to_frame()
        print(df.head())
        self.plot_figure(df, "file_size", "avg_search_time", "File Size (bytes)", "Average Search Time (ms)",
                         os.path.join(self.output_dir, "time-speed.png"), log_scale_y=True)
        self.plot_figure(df, "file_size", "memory_usage", "File Size (bytes)", "Memory Usage (kB)",
                         os.path.join(self.output_dir, "memory_usage.png"), log_scale_y=True)
        self.plot_figure(df, "file_size", "throughput", "File Size (bytes)", "Throughput (queries/ms)",
                         os.path.join(self.output_dir, "throughput.png"), log_scale_y=True)

        df.to_csv(os.path.join(self.output_dir, "benchmark_results.csv"), index=False)

        with open(os.path.join(self.output_dir, "benchmark_report.txt"), 'w') as f:
            f.write("Benchmark Summary\n")
            f.write("==================\n\n")
            f.write(f"{'Algorithm':<20}{'Avg Search Time (ms)':<25}{'Memory Usage (kB)':<20}{'Throughput (queries/ms)':<25}\n")
            f.write("=" * 90 + "\n")
            for algo in df["algorithm"].unique():
                algo_data = df[df["algorithm"] == algo]
                f.write(
                    f"{algo:<20}{algo_data['avg_search_time'].mean():<25.4f}"
                    f"{algo_data['memory_usage'].mean():<20.4f}{algo_data['throughput'].mean():<25.4f}\n"
                )
