"""
constantq.data.signals
~~~~~~~~~~~~~~~~~~~~~~

Synthetic test signals.
"""

from __future__ import annotations

import numpy as np

FINAL_FREQUENCY = 440.0


def create_dummy_audio_signal(
    sample_rate: int,
    frequency: float,
    duration: float,
) -> np.ndarray:
    """Linear chirp from *frequency* towards 440 Hz over *duration* seconds.

    With ``frequency=440`` the result is a plain 440 Hz sine.

    Returns
    -------
    np.ndarray, float64, shape ``(int(sample_rate · duration),)``
    """
    n_samples = int(sample_rate * duration)
    t = np.arange(n_samples, dtype=np.float64) / sample_rate
    progressing = frequency + (t / duration) * (FINAL_FREQUENCY - frequency)
    return np.sin(2.0 * np.pi * progressing * t)
