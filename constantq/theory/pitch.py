"""
constantq.theory.pitch
~~~~~~~~~~~~~~~~~~~~~~

Note names, MIDI numbers and frequencies, and their mapping onto the
log-spaced CQT bin axis.

Keeps all *musical* logic (which bin is "A4"?) isolated from the
signal-processing code; the note arithmetic itself is librosa's.
"""

from __future__ import annotations

from typing import Final

import librosa
import numpy as np
from librosa.util.exceptions import ParameterError

# ── Pitch-class mapping (0–11) ───────────────────────────────────────
# Enharmonic equivalence: Db and C# both map to 1, etc.
PITCH_CLASSES: Final[dict[str, int]] = {
    'C': 0, 'C#': 1, 'Db': 1, 'D': 2, 'D#': 3, 'Eb': 3,
    'E': 4, 'F': 5, 'F#': 6, 'Gb': 6, 'G': 7, 'G#': 8,
    'Ab': 8, 'A': 9, 'A#': 10, 'Bb': 10, 'B': 11,
}


def _check_positive(freq: float) -> None:
    if not freq > 0:
        raise ValueError(f"frequency must be positive, got {freq}")


def midi_to_hz(midi: float) -> float:
    """Equal-tempered frequency of a (possibly fractional) MIDI number."""
    return float(librosa.midi_to_hz(midi))


def hz_to_midi(freq: float) -> float:
    """Fractional MIDI number of *freq* (Hz > 0)."""
    _check_positive(freq)
    return float(librosa.hz_to_midi(freq))


def note_to_hz(note: str) -> float:
    """Frequency of a scientific-pitch note name.

    Examples
    --------
    >>> note_to_hz('A4')
    440.0
    >>> round(note_to_hz('C1'), 2)
    32.7

    Raises
    ------
    ValueError
        If librosa cannot parse *note*.
    """
    try:
        return float(librosa.note_to_hz(note))
    except ParameterError as exc:
        raise ValueError(f"unrecognised note name: {note!r}") from exc


def frequency_to_bin(freq: float, min_freq: float, bins_per_octave: int) -> int:
    """Nearest CQT bin index for *freq*: ``round(B · log2(freq / f_min))``."""
    _check_positive(freq)
    _check_positive(min_freq)
    return int(np.round(np.log2(freq / min_freq) * bins_per_octave))


def bin_to_note(bin: int, min_freq: float, bins_per_octave: int) -> str:
    """Name of the equal-tempered note closest to the centre of *bin*."""
    freq = min_freq * 2.0 ** (bin / bins_per_octave)
    return librosa.hz_to_note(freq, unicode=False)
