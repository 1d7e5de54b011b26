"""Tests for note / frequency / bin conversions."""

import pytest

from constantq.theory import (
    PITCH_CLASSES,
    bin_to_note,
    frequency_to_bin,
    hz_to_midi,
    midi_to_hz,
    note_to_hz,
)


def test_reference_pitch():
    assert note_to_hz("A4") == 440.0
    assert hz_to_midi(440.0) == 69.0
    assert midi_to_hz(69) == 440.0


def test_c1():
    assert note_to_hz("C1") == pytest.approx(32.7032, abs=1e-4)


def test_enharmonics():
    assert note_to_hz("Db4") == note_to_hz("C#4")
    assert PITCH_CLASSES["Bb"] == PITCH_CLASSES["A#"]


def test_octaves_double():
    assert note_to_hz("A5") == pytest.approx(2 * note_to_hz("A4"))


@pytest.mark.parametrize("bad", ["H4", "4A", "C4x", ""])
def test_invalid_note(bad):
    with pytest.raises(ValueError):
        note_to_hz(bad)


def test_frequency_to_bin():
    assert frequency_to_bin(440.0, 20.0, 12) == 54
    assert frequency_to_bin(40.0, 20.0, 12) == 12
    assert frequency_to_bin(20.0, 20.0, 36) == 0


def test_frequency_to_bin_rejects_non_positive():
    with pytest.raises(ValueError):
        frequency_to_bin(0.0, 20.0, 12)


def test_bin_to_note():
    assert bin_to_note(0, 440.0, 12) == "A4"
    assert bin_to_note(12, 440.0, 12) == "A5"
    assert bin_to_note(3, 440.0, 12) == "C5"
    assert bin_to_note(0, note_to_hz("C1"), 36) == "C1"


def test_hz_to_midi_rejects_non_positive():
    with pytest.raises(ValueError):
        hz_to_midi(-1.0)


def test_librosa_note_conventions():
    assert note_to_hz("C##4") == pytest.approx(note_to_hz("D4"))
    assert bin_to_note(1, 440.0, 12) == "A#4"


def test_frequency_to_bin_rejects_nan():
    with pytest.raises(ValueError):
        frequency_to_bin(float("nan"), 20.0, 12)
