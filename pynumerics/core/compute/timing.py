"""
Execution timing utilities.

Section timers for backend solves. GPU kernels launch asynchronously, so
a timer built with sync_cuda=True waits for the device before reading
the clock.
"""

import time
from contextlib import contextmanager
from typing import Iterator


def _cuda_synchronize() -> None:
    import torch

    if torch.cuda.is_available():
        torch.cuda.synchronize()


class Timer:
    """
    Accumulating timer with optional CUDA synchronization.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('svd'):
            U, s, Vh = scipy.linalg.svd(A, full_matrices=False)

        with timer.section('invert'):
            A_pinv = (Vh.T * s_inv) @ U.T

        timer.stop()
        timer.result()
        # {'total_seconds': 0.004, 'svd': 0.003, 'invert': 0.001}
    """

    def __init__(self, sync_cuda: bool = False):
        """
        Args:
            sync_cuda: If True, synchronize CUDA before every clock read.
                       Only meaningful when torch is installed.
        """
        self._sync = _cuda_synchronize if sync_cuda else None
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        if self._sync is not None:
            self._sync()
        return time.perf_counter()

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = self._now()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._start_time

    @property
    def running(self) -> bool:
        return self._start_time is not None and self._total is None

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Repeated sections with the same name accumulate. Sections are not
        required to be disjoint.
        """
        start = self._now()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (self._now() - start)

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed(sync_cuda: bool = False) -> Iterator[Timer]:
    """
    Context manager for one-off timing.

    Usage:
        with timed() as timer:
            solution = pseudo_inverse(A)
        print(f"Took {timer.result()['total_seconds']:.3f}s")
    """
    timer = Timer(sync_cuda=sync_cuda)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
