import numpy as np
import operator
import sys
import os

# Add the project root to the path so we can import segtree
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from segtree import SumSegmentTree
from segtree.utils import Benchmarker, naive_fold, plot_benchmark

def run(sizes=(1_000, 10_000, 100_000), queries=200, seed=0):
    rng = np.random.default_rng(seed)
    tree_times = []
    naive_times = []

    for n in sizes:
        values = rng.integers(-1000, 1000, size=n).tolist()
        print(f"Building tree of size {n}...")
        with Benchmarker(label="build"):
            tree = SumSegmentTree(values)

        bounds = np.sort(rng.integers(0, n, size=(queries, 2)), axis=1)

        timer = Benchmarker(label=f"{queries} tree queries")
        tree_results = [tree.sum(int(l), int(r)) for l, r in bounds]
        tree_times.append(timer.stop() / queries)

        timer = Benchmarker(label=f"{queries} naive folds")
        naive_results = [naive_fold(values, int(l), int(r), operator.add, 0) for l, r in bounds]
        naive_times.append(timer.stop() / queries)

        assert tree_results == naive_results, "Tree and naive fold disagree"

    plot_benchmark(sizes, tree_times, naive_times, filename='segment_tree_benchmark.png')
    print("Benchmark finished. Plot saved to segment_tree_benchmark.png")

if __name__ == "__main__":
    run()
