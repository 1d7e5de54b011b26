"""
constantq.core
~~~~~~~~~~~~~~

The CQT engine: owns the parameters and the prebuilt filterbank, and
turns an arbitrary-length signal into a ``(frames, bins)`` magnitude
matrix.

Pipeline per call::

    validate → pad → frame · window · FFT → project onto filterbank → |·|

The engine holds no mutable state after construction, so one instance
can serve any number of concurrent :meth:`CQT.process` calls.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from constantq.config import (
    BINS_PER_OCTAVE,
    HOP_LENGTH,
    MAX_FREQ,
    MIN_FREQ,
    SR,
    WINDOW_LENGTH,
)
from constantq.errors import SignalError, SignalErrorKind, TransformError
from constantq.filters.fft import transform_forward
from constantq.filters.filterbank import compute_cqt_filterbank
from constantq.filters.params import TransformParameters
from constantq.utils.parallel import parallel_for_rows

logger = logging.getLogger(__name__)


# ── Framing helpers ──────────────────────────────────────────────────
def count_frames(signal_length: int, hop_size: int) -> int:
    """Number of full hops in the signal; a trailing partial hop is dropped."""
    return signal_length // hop_size


def pad_input_signal(
    signal: Sequence[float],
    window_length: int,
    hop_size: int,
) -> np.ndarray:
    """Zero-pad *signal* symmetrically by ``window_length − hop_size``.

    The left side gets ``(window_length − hop_size) // 2`` zeros and the
    right side the remainder.

    Examples
    --------
    >>> pad_input_signal([1.0, 2.0, 3.0, 4.0], window_length=4, hop_size=2)
    array([0., 1., 2., 3., 4., 0.])

    Raises
    ------
    SignalError
        ``INVALID_HOP_SIZE`` unless ``0 < hop_size ≤ window_length``;
        ``EMPTY_INPUT_SIGNAL`` for an empty signal.
    """
    if hop_size <= 0 or hop_size > window_length:
        raise SignalError(SignalErrorKind.INVALID_HOP_SIZE)
    signal = np.asarray(signal, dtype=np.float64)
    if signal.size == 0:
        raise SignalError(SignalErrorKind.EMPTY_INPUT_SIGNAL)

    padding = window_length - hop_size
    left = padding // 2
    padded = np.zeros(signal.size + padding, dtype=np.float64)
    padded[left:left + signal.size] = signal
    return padded


def frame_signal(
    padded: np.ndarray,
    window_length: int,
    hop_size: int,
    num_frames: int,
) -> np.ndarray:
    """View of *padded* as ``(num_frames, window_length)`` overlapping frames.

    Frame ``f`` covers ``padded[f·hop_size : f·hop_size + window_length]``.
    """
    if num_frames == 0:
        return np.zeros((0, window_length), dtype=padded.dtype)
    windows = np.lib.stride_tricks.sliding_window_view(padded, window_length)
    return windows[: num_frames * hop_size : hop_size]


# ── Engine ───────────────────────────────────────────────────────────
class CQT:
    """Constant-Q Transform engine.

    Parameters
    ----------
    params : TransformParameters
        Validated parameters; the engine keeps them for its lifetime.
    n_jobs : int, optional
        Thread-pool size used for filterbank construction and per-frame
        FFTs (see :func:`~constantq.utils.resolve_workers`).

    Raises
    ------
    TransformError
        If the filterbank cannot be built.
    """

    def __init__(
        self,
        params: TransformParameters,
        n_jobs: Optional[int] = None,
    ) -> None:
        self._params = params
        self._n_jobs = n_jobs
        self._filterbank = compute_cqt_filterbank(params, n_jobs=n_jobs)
        # transposed view for the projection; shares the read-only buffer
        self._filterbank_t = self._filterbank.T

    def __repr__(self) -> str:
        p = self._params
        return (
            f"{type(self).__name__}(min_freq={p.min_freq}, max_freq={p.max_freq}, "
            f"bins_per_octave={p.bins_per_octave}, sample_rate={p.sample_rate}, "
            f"window_length={p.window_length})"
        )

    # ── Accessors ────────────────────────────────────────────────────
    @property
    def params(self) -> TransformParameters:
        return self._params

    @property
    def filterbank(self) -> np.ndarray:
        """Read-only complex filterbank, shape ``(num_bins, window_length)``."""
        return self._filterbank

    @property
    def num_bins(self) -> int:
        return self._params.num_bins

    @property
    def window_length(self) -> int:
        return self._params.window_length

    # ── Processing ───────────────────────────────────────────────────
    def process(self, signal: Sequence[float], hop_size: int) -> np.ndarray:
        """Compute CQT magnitudes for *signal*.

        Parameters
        ----------
        signal : array-like of float, 1-D
            Mono audio samples at :attr:`params.sample_rate`.
        hop_size : int
            Samples between successive frames (``0 < hop_size ≤
            window_length``).

        Returns
        -------
        np.ndarray, float64, shape ``(len(signal) // hop_size, num_bins)``
            Freshly allocated magnitude matrix.

        Raises
        ------
        SignalError
            ``EMPTY_INPUT_SIGNAL`` or ``INVALID_HOP_SIZE``.
        TransformError
            If a frame FFT fails (an internal invariant violation).
        """
        signal = np.asarray(signal, dtype=np.float64)
        if signal.ndim != 1:
            raise ValueError(f"signal must be one-dimensional, got shape {signal.shape}")
        if signal.size == 0:
            raise SignalError(SignalErrorKind.EMPTY_INPUT_SIGNAL)
        window_length = self._params.window_length
        if hop_size <= 0 or hop_size > window_length:
            raise SignalError(SignalErrorKind.INVALID_HOP_SIZE)

        num_frames = count_frames(signal.size, hop_size)
        padded = pad_input_signal(signal, window_length, hop_size)
        frames = frame_signal(padded, window_length, hop_size, num_frames)

        spectra = self._frame_spectra(frames)
        projected = spectra @ self._filterbank_t
        if projected.shape != (num_frames, self.num_bins):
            raise TransformError(
                f"projection produced shape {projected.shape}, "
                f"expected {(num_frames, self.num_bins)}"
            )

        logger.debug(
            "CQT of %d samples (hop %d): %d frames x %d bins",
            signal.size, hop_size, num_frames, self.num_bins,
        )
        return np.abs(projected)

    def _frame_spectra(self, frames: np.ndarray) -> np.ndarray:
        """Window and FFT every frame; returns ``(num_frames, window_length)``."""
        window_length = self._params.window_length
        hann = self._params.hann_window
        spectra = np.zeros(frames.shape, dtype=np.complex128)

        def transform_rows(rows: slice) -> None:
            block = spectra[rows]
            block.real = frames[rows] * hann
            transform_forward(block, window_length)

        parallel_for_rows(frames.shape[0], transform_rows, self._n_jobs)
        return spectra

    __call__ = process


CqtEngine = CQT


def cqt(
    signal: Sequence[float],
    sr: int = SR,
    hop_length: int = HOP_LENGTH,
    fmin: float = MIN_FREQ,
    fmax: float = MAX_FREQ,
    bins_per_octave: int = BINS_PER_OCTAVE,
    window_length: int = WINDOW_LENGTH,
    n_jobs: Optional[int] = None,
) -> np.ndarray:
    """One-shot CQT: build parameters and an engine, then process *signal*.

    Build a :class:`CQT` once and reuse it when transforming many signals
    with the same settings; the filterbank dominates setup cost.

    Returns
    -------
    np.ndarray, shape ``(Time, Freq_Bins)``
    """
    params = TransformParameters.create(fmin, fmax, bins_per_octave, sr, window_length)
    return CQT(params, n_jobs=n_jobs).process(signal, hop_length)
