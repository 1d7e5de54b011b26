"""
constantq.data.preprocess
~~~~~~~~~~~~~~~~~~~~~~~~~

Audio loading and CQT feature extraction for downstream models.

Loads raw audio with librosa at the engine's sample rate, runs the CQT
engine, and formats the output as a PyTorch tensor of shape
``(Time, Freq_Bins)``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import librosa
import numpy as np
import torch

from constantq.config import (
    BINS_PER_OCTAVE,
    HOP_LENGTH,
    MAX_FREQ,
    MIN_FREQ,
    SR,
    WINDOW_LENGTH,
)
from constantq.core import CQT
from constantq.filters.params import TransformParameters

logger = logging.getLogger(__name__)


def default_engine() -> CQT:
    """Engine built from the :mod:`constantq.config` defaults."""
    params = TransformParameters.create(
        MIN_FREQ, MAX_FREQ, BINS_PER_OCTAVE, SR, WINDOW_LENGTH
    )
    return CQT(params)


def extract_cqt(
    audio_path: str | Path,
    engine: Optional[CQT] = None,
    hop_length: int = HOP_LENGTH,
    log_scale: bool = True,
) -> torch.Tensor:
    """Load an audio file and compute its CQT magnitude spectrogram.

    Parameters
    ----------
    audio_path : str | Path
        Path to any format librosa can read.
    engine : CQT, optional
        Engine to use; built from the config defaults if *None*.  The
        audio is resampled to ``engine.params.sample_rate``.
    hop_length : int
        Hop size in samples.
    log_scale : bool
        Convert magnitudes to dB relative to the loudest value.

    Returns
    -------
    torch.Tensor, float32, shape ``(Time, Freq_Bins)``
    """
    if engine is None:
        engine = default_engine()
    sr = engine.params.sample_rate

    # librosa resamples to sr and downmixes to mono
    y, _ = librosa.load(str(audio_path), sr=sr, mono=True)
    logger.info("Loaded %s: %d samples at %d Hz", audio_path, y.size, sr)

    C = engine.process(y, hop_length)
    if log_scale and C.size:
        C = librosa.amplitude_to_db(C, ref=np.max)

    return torch.from_numpy(np.ascontiguousarray(C, dtype=np.float32))


def get_time_frames(
    n_frames: int,
    sr: int = SR,
    hop_length: int = HOP_LENGTH,
) -> np.ndarray:
    """Start time in seconds of each of *n_frames* CQT frames.

    Frame ``f`` starts at sample ``f · hop_length`` of the original
    signal.
    """
    return librosa.frames_to_time(np.arange(n_frames), sr=sr, hop_length=hop_length)
