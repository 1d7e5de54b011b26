"""
constantq.utils.parallel
~~~~~~~~~~~~~~~~~~~~~~~~

Thread-pool helpers for the two row-parallel loops (filterbank bins and
signal frames).

Each worker receives a disjoint, contiguous block of output rows and
writes only those, so no locking is needed.  NumPy and SciPy release the
GIL inside their kernels, which is where the time goes.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from constantq import config


def resolve_workers(n_jobs: Optional[int] = None) -> int:
    """Turn an ``n_jobs`` setting into a concrete worker count.

    Parameters
    ----------
    n_jobs : int, optional
        *None* falls back to :data:`constantq.config.N_JOBS` and then to
        ``os.cpu_count()``.  Negative values count back from the CPU
        count (``-1`` = all CPUs, ``-2`` = all but one, …).

    Returns
    -------
    int
        At least 1.

    Raises
    ------
    ValueError
        If *n_jobs* is 0.
    """
    cpus = os.cpu_count() or 1
    if n_jobs is None:
        n_jobs = config.N_JOBS if config.N_JOBS is not None else cpus
    if n_jobs == 0:
        raise ValueError("n_jobs must be non-zero")
    if n_jobs < 0:
        n_jobs = cpus + 1 + n_jobs
    return max(1, n_jobs)


def row_blocks(n_rows: int, n_blocks: int) -> List[slice]:
    """Split ``range(n_rows)`` into at most *n_blocks* contiguous slices."""
    n_blocks = max(1, min(n_blocks, n_rows))
    base, extra = divmod(n_rows, n_blocks)
    blocks = []
    start = 0
    for i in range(n_blocks):
        stop = start + base + (1 if i < extra else 0)
        if stop > start:
            blocks.append(slice(start, stop))
        start = stop
    return blocks


def parallel_for_rows(
    n_rows: int,
    fn: Callable[[slice], None],
    n_jobs: Optional[int] = None,
) -> None:
    """Call ``fn(rows)`` once per row block, in parallel when possible.

    Exceptions raised by *fn* propagate to the caller.
    """
    workers = resolve_workers(n_jobs)
    blocks = row_blocks(n_rows, workers)
    if workers == 1 or len(blocks) <= 1:
        for rows in blocks:
            fn(rows)
        return

    with ThreadPoolExecutor(max_workers=len(blocks)) as pool:
        # list() re-raises the first worker exception here
        list(pool.map(fn, blocks))
