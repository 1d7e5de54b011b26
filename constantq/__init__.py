"""
constantq
~~~~~~~~~

Constant-Q Transform with a prebuilt, FFT-domain filterbank.

Quick-start::

    import constantq as cq

    params = cq.TransformParameters.create(
        min_freq=20.0, max_freq=7902.1, bins_per_octave=12,
        sample_rate=44100, window_length=4096,
    )
    engine = cq.CQT(params)
    features = engine.process(signal, hop_size=512)   # (frames, bins)

    # Straight from a file, as a model-ready tensor
    C = cq.extract_cqt("song.wav", engine=engine)

Subpackages
-----------
calculations  Memoised per-bin constants (Q factor, ratios, phases).
filters       Parameters, analysis windows, FFT and the filterbank.
data          Audio preprocessing and synthetic signals.
theory        Note names and frequency ↔ bin mapping.
utils         Thread-pool helpers.
"""

from __future__ import annotations

__version__: str = "0.1.0"

# ── Core pipeline ────────────────────────────────────────────────────
from constantq.core import CQT, CqtEngine, count_frames, cqt, pad_input_signal

# ── Errors ───────────────────────────────────────────────────────────
from constantq.errors import (
    CQTError,
    NormalizationError,
    ParamError,
    ParamErrorKind,
    SignalError,
    SignalErrorKind,
    TransformError,
)

# ── Filters ──────────────────────────────────────────────────────────
from constantq.filters import (
    TransformParameters,
    calculate_norm,
    compute_cqt_filterbank,
    create_complex_hann_window,
)

# ── Calculations ─────────────────────────────────────────────────────
from constantq.calculations import (
    LookupCache,
    get_calculated_base_freq_ratio,
    get_calculated_phase_factors,
    get_calculated_q_factor,
)

# ── Data ─────────────────────────────────────────────────────────────
from constantq.data import create_dummy_audio_signal, extract_cqt, get_time_frames

# ── Theory ───────────────────────────────────────────────────────────
from constantq.theory import bin_to_note, frequency_to_bin, note_to_hz

# ── Config (re-export constants for convenience) ─────────────────────
from constantq.config import BINS_PER_OCTAVE, HOP_LENGTH, SR, WINDOW_LENGTH

__all__: list[str] = [
    # pipeline
    "CQT",
    "CqtEngine",
    "cqt",
    "count_frames",
    "pad_input_signal",
    # errors
    "CQTError",
    "NormalizationError",
    "ParamError",
    "ParamErrorKind",
    "SignalError",
    "SignalErrorKind",
    "TransformError",
    # filters
    "TransformParameters",
    "calculate_norm",
    "compute_cqt_filterbank",
    "create_complex_hann_window",
    # calculations
    "LookupCache",
    "get_calculated_q_factor",
    "get_calculated_base_freq_ratio",
    "get_calculated_phase_factors",
    # data
    "create_dummy_audio_signal",
    "extract_cqt",
    "get_time_frames",
    # theory
    "bin_to_note",
    "frequency_to_bin",
    "note_to_hz",
    # config
    "SR",
    "HOP_LENGTH",
    "BINS_PER_OCTAVE",
    "WINDOW_LENGTH",
]
