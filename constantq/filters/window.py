"""
constantq.filters.window
~~~~~~~~~~~~~~~~~~~~~~~~

Hann window, its normalisation, and the per-bin complex analysis window.

The analysis window for a bin centred at ``f_c`` is

.. math::
    w_k[n] = e^{\\, i \\, \\phi[n] f_c} \\cdot Q \\cdot h[n] \\cdot \\nu,
    \\qquad \\phi[n] = -2\\pi n / f_s

where ``h`` is the shared Hann window and ``ν`` its RMS normalisation.
Every sample is independent, so the whole window (or a whole block of
bins) is built with one broadcast expression.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import librosa
import numpy as np

from constantq.errors import NormalizationError

if TYPE_CHECKING:
    from constantq.filters.params import TransformParameters


def hann_window(length: int) -> np.ndarray:
    """Periodic Hann window of *length* samples, values in ``[0, 1]``.

    Raises
    ------
    NormalizationError
        If *length* ≤ 0.
    """
    if length <= 0:
        raise NormalizationError()
    window = librosa.filters.get_window("hann", length, fftbins=True)
    return np.asarray(window, dtype=np.float64)


def hann_window_sum_of_squares(window: Sequence[float]) -> float:
    """Sum of squared window samples."""
    window = np.asarray(window, dtype=np.float64)
    return float(np.dot(window, window))


def calculate_norm(window: Sequence[float]) -> float:
    """RMS normalisation factor ``sqrt(sum(w²) / len(w))``.

    Parameters
    ----------
    window : array-like of float

    Returns
    -------
    float

    Raises
    ------
    NormalizationError
        If *window* is empty.
    """
    window = np.asarray(window, dtype=np.float64)
    if window.size == 0:
        raise NormalizationError()
    return float(np.sqrt(hann_window_sum_of_squares(window) / window.size))


def create_complex_hann_windows(
    center_freqs: Sequence[float],
    params: "TransformParameters",
) -> np.ndarray:
    """Complex analysis windows for several bins at once.

    Returns
    -------
    np.ndarray, complex128, shape ``(len(center_freqs), window_length)``
    """
    center_freqs = np.asarray(center_freqs, dtype=np.float64).reshape(-1, 1)
    # (n_bins, 1) x (window_length,) -> (n_bins, window_length)
    phases = center_freqs * params.phase_factors
    scale = params.hann_window * (params.q_factor * params.norm_factor)
    return np.exp(1j * phases) * scale


def create_complex_hann_window(
    center_freq: float,
    params: "TransformParameters",
) -> np.ndarray:
    """Complex analysis window for one bin, shape ``(window_length,)``."""
    return create_complex_hann_windows([center_freq], params)[0]
