"""Shared fixtures: the reference 20 Hz – 7902.1 Hz, 12 bins/octave setup."""

import pytest

from constantq import CQT, TransformParameters

MIN_FREQ = 20.0
MAX_FREQ = 7902.1
BINS_PER_OCTAVE = 12
SAMPLE_RATE = 44100
WINDOW_LENGTH = 4096


@pytest.fixture(scope="session")
def params():
    return TransformParameters.create(
        MIN_FREQ, MAX_FREQ, BINS_PER_OCTAVE, SAMPLE_RATE, WINDOW_LENGTH
    )


@pytest.fixture(scope="session")
def engine(params):
    return CQT(params)


@pytest.fixture(scope="session")
def small_params():
    # 5 octaves from A1, 60 bins
    return TransformParameters.create(55.0, 1760.0, 12, 22050, 2048)


@pytest.fixture(scope="session")
def small_engine(small_params):
    return CQT(small_params, n_jobs=2)
