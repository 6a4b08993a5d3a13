from .benchmark import Benchmarker, naive_fold
from .plotting import plot_benchmark
