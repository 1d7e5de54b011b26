"""
constantq.filters.filterbank
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Frequency-domain CQT filterbank: one row per bin, holding the FFT of that
bin's complex analysis window.  Rows are computed independently from the
immutable parameters, so blocks of bins are farmed out to a thread pool
and the result does not depend on the number of workers.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from constantq.filters.fft import transform_forward
from constantq.filters.params import TransformParameters
from constantq.filters.window import create_complex_hann_windows
from constantq.utils.parallel import parallel_for_rows

logger = logging.getLogger(__name__)


def compute_cqt_filterbank(
    params: TransformParameters,
    n_jobs: Optional[int] = None,
) -> np.ndarray:
    """Build the CQT filterbank for *params*.

    Parameters
    ----------
    params : TransformParameters
    n_jobs : int, optional
        Thread-pool size (see :func:`~constantq.utils.resolve_workers`).

    Returns
    -------
    np.ndarray, complex128, read-only, shape ``(num_bins, window_length)``

    Raises
    ------
    TransformError
        If the FFT fails for any bin; construction is aborted as a whole.
    """
    n_bins, window_length = params.num_bins, params.window_length
    center_freqs = params.center_freqs()
    filterbank = np.zeros((n_bins, window_length), dtype=np.complex128)

    def build_rows(rows: slice) -> None:
        kernels = create_complex_hann_windows(center_freqs[rows], params)
        filterbank[rows] = transform_forward(kernels, window_length)

    parallel_for_rows(n_bins, build_rows, n_jobs)

    filterbank.setflags(write=False)
    logger.debug(
        "Built CQT filterbank: %d bins x %d samples (%.1f-%.1f Hz)",
        n_bins, window_length, center_freqs[0], center_freqs[-1],
    )
    return filterbank
