import time


class Benchmarker:
    """Times the enclosing scope and prints the elapsed time when stopped.

    Either call ``stop()`` explicitly or use it as a context manager::

        with Benchmarker():
            tree.query(0, n - 1)
    """

    def __init__(self, label=None):
        self.label = label
        self.elapsed_us = None
        self._start = time.perf_counter()

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def stop(self) -> float:
        duration = (time.perf_counter() - self._start) * 1e6
        self.elapsed_us = duration
        prefix = f"{self.label}: " if self.label else ""
        print(f"{prefix}{duration:.0f}us ({duration * 0.001:.3f}ms)")
        return duration


def naive_fold(values, left, right, operation, identity):
    """Linear fold of ``operation`` over values[left..right], both ends inclusive."""
    res = identity
    for value in values[left:right + 1]:
        res = operation(res, value)
    return res
