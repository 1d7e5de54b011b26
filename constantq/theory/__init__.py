"""constantq.theory — Note names, frequencies and CQT bin mapping."""

from constantq.theory.pitch import (
    PITCH_CLASSES,
    bin_to_note,
    frequency_to_bin,
    hz_to_midi,
    midi_to_hz,
    note_to_hz,
)

__all__: list[str] = [
    "PITCH_CLASSES",
    "bin_to_note",
    "frequency_to_bin",
    "hz_to_midi",
    "midi_to_hz",
    "note_to_hz",
]
