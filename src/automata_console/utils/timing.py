"""Timing utilities for measuring request latency."""

import time
from collections.abc import Callable, Generator
from contextlib import contextmanager


@contextmanager
def timer() -> Generator[Callable[[], float], None, None]:
    """A context manager to measure execution time."""
    start_time = time.perf_counter()
    # Yield a function that returns the elapsed time in milliseconds
    yield lambda: (time.perf_counter() - start_time) * 1000
