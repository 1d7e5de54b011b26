"""
constantq.filters.params
~~~~~~~~~~~~~~~~~~~~~~~~

Validated, immutable transform parameters.

Five user inputs (frequency range, bins per octave, sample rate, window
length) are checked in a fixed order and expanded into every quantity the
filterbank and the frame pipeline need: bin count, Q factor, base ratio,
Hann window, its normalisation, and the phase-factor ramp.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from constantq.calculations.lookup import LookupCache, default_cache
from constantq.errors import NormalizationError, ParamError, ParamErrorKind
from constantq.filters.window import calculate_norm, hann_window


def next_power_of_two(n: int) -> int:
    """Smallest power of two ≥ *n* (``n`` ≥ 1)."""
    return 1 << (int(n) - 1).bit_length()


def _is_finite_positive(value) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def _as_positive_int(value) -> Optional[int]:
    """*value* as an int if it is a positive whole number, else *None*."""
    if isinstance(value, bool):
        return None
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        return None
    if not as_float.is_integer() or as_float <= 0:
        return None
    return int(value)


def _frozen(values: np.ndarray) -> np.ndarray:
    values = np.array(values, dtype=np.float64)
    values.setflags(write=False)
    return values


@dataclass(frozen=True, eq=False)
class TransformParameters:
    """Parameters of a constant-Q filterbank.

    Build instances with :meth:`create`, which validates the inputs; the
    dataclass fields are the derived results.

    Attributes
    ----------
    min_freq, max_freq : float
        Frequency range in Hz.
    bins_per_octave : int
    sample_rate : int
    window_length : int
        Always a power of two.
    num_bins : int
        ``bins_per_octave · ceil(log2(max_freq / min_freq))``.
    base_freq_ratio : float
        ``2^(1 / bins_per_octave)``.
    q_factor : float
        ``1 / (base_freq_ratio − 1)``.
    norm_factor : float
        RMS of :attr:`hann_window`.
    hann_window : np.ndarray, read-only, shape ``(window_length,)``
    phase_factors : np.ndarray, read-only, shape ``(window_length,)``
    """

    min_freq: float
    max_freq: float
    bins_per_octave: int
    sample_rate: int
    window_length: int
    num_bins: int
    base_freq_ratio: float
    q_factor: float
    norm_factor: float
    hann_window: np.ndarray = field(repr=False)
    phase_factors: np.ndarray = field(repr=False)

    @classmethod
    def create(
        cls,
        min_freq: float,
        max_freq: float,
        bins_per_octave: int,
        sample_rate: int,
        window_length: int,
        cache: Optional[LookupCache] = None,
    ) -> "TransformParameters":
        """Validate the inputs and derive all transform parameters.

        Parameters
        ----------
        min_freq : float
            Lowest centre frequency in Hz (> 0).
        max_freq : float
            Upper frequency bound in Hz (> *min_freq*).
        bins_per_octave : int
            Frequency resolution (> 0).
        sample_rate : int
            Sample rate in Hz (> 0).
        window_length : int
            Requested window length (> 0); rounded up to a power of two.
        cache : LookupCache, optional
            Table for the shared constants; defaults to
            :func:`~constantq.calculations.default_cache`.

        Returns
        -------
        TransformParameters

        Raises
        ------
        ParamError
            For the first failing check, in the order min frequency, max
            frequency, bins per octave, sample rate, window length.
        """
        if not _is_finite_positive(min_freq):
            raise ParamError(ParamErrorKind.INVALID_MIN_FREQUENCY)
        if not _is_finite_positive(max_freq) or max_freq <= min_freq:
            raise ParamError(ParamErrorKind.INVALID_MAX_FREQUENCY)
        bins_per_octave = _as_positive_int(bins_per_octave)
        if bins_per_octave is None:
            raise ParamError(ParamErrorKind.INVALID_BINS_PER_OCTAVE)
        sample_rate = _as_positive_int(sample_rate)
        if sample_rate is None:
            raise ParamError(ParamErrorKind.INVALID_SAMPLE_RATE)
        window_length = _as_positive_int(window_length)
        if window_length is None:
            raise ParamError(ParamErrorKind.INVALID_WINDOW_LENGTH)

        if cache is None:
            cache = default_cache()

        window_length = next_power_of_two(window_length)

        # the ceiling is taken over whole octaves, not over bins
        num_bins = bins_per_octave * math.ceil(math.log2(max_freq / min_freq))

        try:
            window = hann_window(window_length)
            norm_factor = calculate_norm(window)
        except NormalizationError as exc:
            raise ParamError(ParamErrorKind.INVALID_WINDOW_LENGTH) from exc

        return cls(
            min_freq=float(min_freq),
            max_freq=float(max_freq),
            bins_per_octave=bins_per_octave,
            sample_rate=sample_rate,
            window_length=window_length,
            num_bins=num_bins,
            base_freq_ratio=cache.base_freq_ratio(bins_per_octave),
            q_factor=cache.q_factor(bins_per_octave),
            norm_factor=norm_factor,
            hann_window=_frozen(window),
            phase_factors=_frozen(cache.phase_factors(window_length, sample_rate)),
        )

    def center_freq(self, bin: int) -> float:
        """Centre frequency of *bin*: ``min_freq · r^bin``."""
        return self.min_freq * self.base_freq_ratio ** bin

    def center_freqs(self) -> np.ndarray:
        """Centre frequencies of all :attr:`num_bins` bins."""
        return np.array(
            [self.center_freq(b) for b in range(self.num_bins)], dtype=np.float64
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformParameters):
            return NotImplemented
        return (
            self.min_freq == other.min_freq
            and self.max_freq == other.max_freq
            and self.bins_per_octave == other.bins_per_octave
            and self.sample_rate == other.sample_rate
            and self.window_length == other.window_length
        )

    def __hash__(self) -> int:
        return hash((
            self.min_freq,
            self.max_freq,
            self.bins_per_octave,
            self.sample_rate,
            self.window_length,
        ))
