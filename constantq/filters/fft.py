"""
constantq.filters.fft
~~~~~~~~~~~~~~~~~~~~~

Forward FFT over fixed-length complex buffers, backed by :mod:`scipy.fft`.
"""

from __future__ import annotations

import numpy as np
import scipy.fft

from constantq.errors import TransformError


def transform_forward(buffer: np.ndarray, length: int) -> np.ndarray:
    """Replace *buffer* with its forward DFT along the last axis.

    Parameters
    ----------
    buffer : np.ndarray, complex
        1-D buffer or 2-D stack of buffers, last axis of size *length*.
    length : int
        Transform length (the plan size).

    Returns
    -------
    np.ndarray
        *buffer* itself, now holding the spectrum.

    Raises
    ------
    TransformError
        If the buffer is not complex, the last axis is not *length*
        samples long, or the FFT itself fails.
    """
    if not np.iscomplexobj(buffer):
        raise TransformError(f"FFT buffer must be complex, got {buffer.dtype}")
    if buffer.ndim == 0 or buffer.shape[-1] != length:
        raise TransformError(
            f"FFT length mismatch: buffer has shape {buffer.shape}, "
            f"plan length is {length}"
        )
    try:
        spectrum = scipy.fft.fft(buffer, n=length, axis=-1, overwrite_x=True)
    except Exception as exc:
        raise TransformError(f"FFT failed: {exc}") from exc
    buffer[...] = spectrum
    return buffer
