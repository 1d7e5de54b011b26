"""Tests for audio-file feature extraction and synthetic signals."""

import numpy as np
import pytest
import soundfile as sf
import torch

from constantq import create_dummy_audio_signal, extract_cqt, get_time_frames

SR = 22050


@pytest.fixture
def wav_path(tmp_path):
    path = tmp_path / "tone.wav"
    t = np.arange(SR // 2) / SR
    sf.write(str(path), 0.5 * np.sin(2 * np.pi * 440.0 * t), SR)
    return path


class TestExtractCqt:
    def test_tensor_shape(self, wav_path, small_engine):
        C = extract_cqt(wav_path, engine=small_engine, hop_length=512, log_scale=False)
        assert isinstance(C, torch.Tensor)
        assert C.dtype == torch.float32
        assert tuple(C.shape) == ((SR // 2) // 512, small_engine.num_bins)
        assert torch.all(C >= 0)

    def test_log_scale(self, wav_path, small_engine):
        C = extract_cqt(wav_path, engine=small_engine, hop_length=512)
        assert C.max().item() == pytest.approx(0.0)
        assert C.min().item() >= -80.0 - 1e-3

    def test_peak_bin(self, wav_path, small_engine, small_params):
        C = extract_cqt(wav_path, engine=small_engine, hop_length=256, log_scale=False)
        profile = C[4:-4].mean(dim=0)
        # A4 sits exactly three octaves above A1
        assert int(profile.argmax()) == 36
        assert small_params.center_freq(36) == pytest.approx(440.0)


def test_get_time_frames():
    times = get_time_frames(3, sr=22050, hop_length=512)
    np.testing.assert_allclose(times, [0.0, 512 / 22050, 1024 / 22050])


class TestDummySignal:
    def test_length(self):
        assert create_dummy_audio_signal(44100, 440.0, 1.0).shape == (44100,)
        assert create_dummy_audio_signal(22000, 440.0, 0.5).shape == (11000,)

    def test_constant_440_is_a_sine(self):
        signal = create_dummy_audio_signal(8000, 440.0, 0.25)
        t = np.arange(2000) / 8000
        np.testing.assert_allclose(signal, np.sin(2 * np.pi * 440.0 * t), atol=1e-12)

    def test_bounded(self):
        signal = create_dummy_audio_signal(16000, 100.0, 1.0)
        assert signal[0] == 0.0
        assert np.max(np.abs(signal)) <= 1.0
