"""
Parallel computation components

Atom-parallel work dispatch over a thread pool. Workers only read the shared
inputs and each one writes a disjoint slice of the output array, so no locks
are needed. With free-threaded CPython (PEP 703) the workers run truly in
parallel; numpy also releases the GIL inside its vectorized kernels.
"""

import concurrent.futures
import sys
from collections.abc import Callable

from ..utils.logger import LogMixin

# Platforms where the interpreter cannot start threads
_NO_THREAD_PLATFORMS = ("emscripten", "wasi")

THREADS_AVAILABLE = sys.platform not in _NO_THREAD_PLATFORMS


def threads_available() -> bool:
    """Whether calculations can be spread over several threads"""
    return THREADS_AVAILABLE


class ThreadStartError(RuntimeError):
    """A worker thread could not be created or joined"""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause))
        self.cause = cause


class ThreadDispatcher(LogMixin):
    """
    Splits an index range into contiguous chunks and runs a kernel on each.

    The kernel is called as ``kernel(start, end)`` and must only write output
    slots in ``[start, end)``.
    """

    def __init__(self, n_threads: int = 1):
        """
        Args:
            n_threads: Number of worker threads, 1 runs in the calling thread
        """
        if n_threads < 1:
            raise ValueError(f"n_threads must be at least 1: {n_threads}")
        self.n_threads = n_threads

    def partition(self, n_items: int) -> list[tuple[int, int]]:
        """
        Contiguous chunks covering range(n_items) exactly once.

        Chunk sizes differ by at most one.
        """
        if n_items <= 0:
            return []
        n_chunks = min(self.n_threads, n_items)
        base, extra = divmod(n_items, n_chunks)
        chunks = []
        start = 0
        for k in range(n_chunks):
            end = start + base + (1 if k < extra else 0)
            chunks.append((start, end))
            start = end
        return chunks

    def run(self, kernel: Callable[[int, int], None], n_items: int) -> None:
        """
        Run kernel over all chunks and wait for every worker to finish.

        Raises:
            ThreadStartError: if the thread pool could not start a worker.
            Any exception raised by the kernel is re-raised after the join.
        """
        chunks = self.partition(n_items)
        if self.n_threads <= 1 or len(chunks) <= 1:
            for start, end in chunks:
                kernel(start, end)
            return

        self.logger.debug("Dispatching %d items to %d threads", n_items, len(chunks))

        futures = []
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=len(chunks), thread_name_prefix="sasa_worker"
        ) as executor:
            try:
                for start, end in chunks:
                    futures.append(executor.submit(kernel, start, end))
            except RuntimeError as e:
                for future in futures:
                    future.cancel()
                raise ThreadStartError(e) from e

        # The executor has joined all workers; surface the first failure
        for future in futures:
            future.result()
