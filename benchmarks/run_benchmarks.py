import os
import sys
import argparse

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from benchmarks.benchmark import Benchmark


def main():
    parser = argparse.ArgumentParser(description="Compare Boyer-Moore against the naive scan")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10_000, 50_000, 100_000, 250_000],
                        help="File sizes to test, in bytes")
    parser.add_argument("--output-dir", default="benchmark_results",
                        help="Directory for benchmark results")
    parser.add_argument("--reread", action="store_true",
                        help="Reread the file for each query (default: False)")
    args = parser.parse_args()

    queries = [
        "example",
        "performance",
        "algorithm",
        "nonexistent",
        "quick brown fox",
        "abcdefghijklmnopqrstuvwxyz",
        "a",
    ]

    benchmark = Benchmark(args.output_dir)

    print("Running benchmarks...")
    print("===================")
    print(f"File sizes: {args.sizes}")
    print(f"Number of queries: {len(queries)}")
    print()

    benchmark.run_benchmark(file_sizes=args.sizes, queries=queries, reread=args.reread)

    print("\nGenerating reports...")
    benchmark.generate_report()

    print(f"\nBenchmark results saved to {args.output_dir}")
    print("Files generated:")
    for name in ("time-speed.png", "memory_usage.png", "throughput.png",
                 "benchmark_results.csv", "benchmark_report.txt"):
        print(f"- {os.path.join(args.output_dir, name)}")


if __name__ == "__main__":
    main()
