import matplotlib.pyplot as plt
import numpy as np

def plot_benchmark(sizes, tree_times, naive_times, filename='benchmark_plot.png'):
    sizes = np.asarray(sizes)
    plt.figure(figsize=(12, 5))

    plt.subplot(1, 2, 1)
    plt.plot(sizes, tree_times, marker='o', label='Segment tree')
    plt.plot(sizes, naive_times, marker='o', label='Naive fold')
    plt.xscale('log')
    plt.yscale('log')
    plt.xlabel('Sequence length')
    plt.ylabel('Time per query (us)')
    plt.title('Range Query Time')
    plt.legend()

    plt.subplot(1, 2, 2)
    speedup = np.asarray(naive_times) / np.maximum(np.asarray(tree_times), 1e-9)
    plt.plot(sizes, speedup, marker='o', label='Speedup')
    plt.xscale('log')
    plt.xlabel('Sequence length')
    plt.ylabel('Naive / tree')
    plt.title('Speedup over Naive Fold')
    plt.legend()

    plt.tight_layout()
    plt.savefig(filename)
    plt.close()
