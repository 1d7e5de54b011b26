"""
constantq.calculations.lookup
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Read-through lookup tables for the scalar and vector constants shared by
every filterbank bin: the Q factor and the base frequency ratio (keyed by
bins per octave) and the phase-factor ramp (keyed by window length and
sample rate).

The tables are filled once, for a fixed set of common keys, and never
change afterwards.  A miss falls back to the formula without inserting,
so results are identical whether or not a key was precomputed.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from constantq.config import (
    PRECOMPUTED_BINS_PER_OCTAVE,
    PRECOMPUTED_SAMPLE_RATES,
    PRECOMPUTED_WINDOW_LENGTHS,
)
from constantq.errors import ParamError, ParamErrorKind


# ── Pure formulas ────────────────────────────────────────────────────
def calculate_base_freq_ratio(bins_per_octave: int) -> float:
    """Return ``r = 2^(1 / bins_per_octave)``."""
    return 2.0 ** (1.0 / bins_per_octave)


def calculate_q_factor(bins_per_octave: int) -> float:
    """Return the constant quality factor for *bins_per_octave*.

    With ``r = 2^(1/B)`` the bandwidth of a bin centred at ``f`` is
    ``Δf = f · (r − 1)``, so ``Q = f / Δf = 1 / (r − 1)``, independent
    of ``f``.

    Parameters
    ----------
    bins_per_octave : int
        Number of bins per octave (``B``).

    Returns
    -------
    float
    """
    return 1.0 / (calculate_base_freq_ratio(bins_per_octave) - 1.0)


def calculate_phase_factors(window_length: int, sample_rate: int) -> np.ndarray:
    """Return ``−2π·n / sample_rate`` for ``n`` in ``[0, window_length)``."""
    return -2.0 * np.pi * np.arange(window_length, dtype=np.float64) / sample_rate


def _check_bins_per_octave(bins_per_octave: int) -> None:
    if bins_per_octave <= 0:
        raise ParamError(ParamErrorKind.INVALID_BINS_PER_OCTAVE)


# ── Cache ────────────────────────────────────────────────────────────
class LookupCache:
    """Immutable precomputed tables with direct-computation fallback.

    Use :meth:`build` to populate the tables; the constructor only wraps
    already-computed dicts.

    Parameters
    ----------
    q_factors : dict[int, float]
    base_freq_ratios : dict[int, float]
    phase_factors : dict[tuple[int, int], np.ndarray]
    """

    def __init__(
        self,
        q_factors: Dict[int, float],
        base_freq_ratios: Dict[int, float],
        phase_factors: Dict[Tuple[int, int], np.ndarray],
    ) -> None:
        self._q_factors = dict(q_factors)
        self._base_freq_ratios = dict(base_freq_ratios)
        self._phase_factors = {}
        for key, values in phase_factors.items():
            values = np.array(values, dtype=np.float64)
            values.setflags(write=False)
            self._phase_factors[key] = values

    @classmethod
    def build(
        cls,
        bins_per_octave: Iterable[int] = PRECOMPUTED_BINS_PER_OCTAVE,
        window_lengths: Iterable[int] = PRECOMPUTED_WINDOW_LENGTHS,
        sample_rates: Iterable[int] = PRECOMPUTED_SAMPLE_RATES,
    ) -> "LookupCache":
        """Precompute every table for the given keys."""
        bins_per_octave = tuple(bins_per_octave)
        sample_rates = tuple(sample_rates)
        return cls(
            q_factors={b: calculate_q_factor(b) for b in bins_per_octave},
            base_freq_ratios={b: calculate_base_freq_ratio(b) for b in bins_per_octave},
            phase_factors={
                (w, s): calculate_phase_factors(w, s)
                for w in window_lengths
                for s in sample_rates
            },
        )

    def q_factor(self, bins_per_octave: int) -> float:
        """Cached :func:`calculate_q_factor`.

        Raises
        ------
        ParamError
            ``INVALID_BINS_PER_OCTAVE`` if *bins_per_octave* ≤ 0.
        """
        cached = self._q_factors.get(bins_per_octave)
        if cached is not None:
            return cached
        _check_bins_per_octave(bins_per_octave)
        return calculate_q_factor(bins_per_octave)

    def base_freq_ratio(self, bins_per_octave: int) -> float:
        """Cached :func:`calculate_base_freq_ratio`."""
        cached = self._base_freq_ratios.get(bins_per_octave)
        if cached is not None:
            return cached
        _check_bins_per_octave(bins_per_octave)
        return calculate_base_freq_ratio(bins_per_octave)

    def phase_factors(self, window_length: int, sample_rate: int) -> np.ndarray:
        """Cached :func:`calculate_phase_factors`.

        Hits return the shared read-only array; misses return a freshly
        computed (writeable) one.
        """
        cached = self._phase_factors.get((window_length, sample_rate))
        if cached is not None:
            return cached
        return calculate_phase_factors(window_length, sample_rate)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, tuple):
            return key in self._phase_factors
        return key in self._q_factors

    def __len__(self) -> int:
        return len(self._q_factors) + len(self._phase_factors)


_DEFAULT_CACHE: Optional[LookupCache] = None
_DEFAULT_CACHE_LOCK = threading.Lock()


def default_cache() -> LookupCache:
    """Return the process-wide cache, building it on first call."""
    global _DEFAULT_CACHE
    if _DEFAULT_CACHE is None:
        with _DEFAULT_CACHE_LOCK:
            if _DEFAULT_CACHE is None:
                _DEFAULT_CACHE = LookupCache.build()
    return _DEFAULT_CACHE


# ── Convenience helpers ─────────────────────────────────────────────
def get_calculated_q_factor(bins_per_octave: int) -> float:
    return default_cache().q_factor(bins_per_octave)


def get_calculated_base_freq_ratio(bins_per_octave: int) -> float:
    return default_cache().base_freq_ratio(bins_per_octave)


def get_calculated_phase_factors(window_length: int, sample_rate: int) -> np.ndarray:
    return default_cache().phase_factors(window_length, sample_rate)
