"""Tests for the error taxonomy and its message tables."""

import pytest

from constantq import (
    CQTError,
    NormalizationError,
    ParamError,
    ParamErrorKind,
    SignalError,
    SignalErrorKind,
    TransformError,
)
from constantq.errors import PARAM_ERROR_MESSAGES, SIGNAL_ERROR_MESSAGES


def test_every_kind_has_a_message():
    assert set(PARAM_ERROR_MESSAGES) == set(ParamErrorKind)
    assert set(SIGNAL_ERROR_MESSAGES) == set(SignalErrorKind)


def test_messages():
    assert str(ParamError(ParamErrorKind.INVALID_MIN_FREQUENCY)) == (
        "Invalid minimum frequency: must be a positive number"
    )
    assert str(SignalError(SignalErrorKind.EMPTY_INPUT_SIGNAL)) == (
        "Empty input signal: the input signal should not be empty."
    )
    assert "window length" in str(NormalizationError())


def test_equality_by_kind():
    assert ParamError(ParamErrorKind.INVALID_SAMPLE_RATE) == ParamError(
        ParamErrorKind.INVALID_SAMPLE_RATE
    )
    assert ParamError(ParamErrorKind.INVALID_SAMPLE_RATE) != ParamError(
        ParamErrorKind.INVALID_WINDOW_LENGTH
    )
    assert SignalError(SignalErrorKind.INVALID_HOP_SIZE) != ParamError(
        ParamErrorKind.INVALID_SAMPLE_RATE
    )


def test_hierarchy():
    for err in (
        ParamError(ParamErrorKind.INVALID_MAX_FREQUENCY),
        SignalError(SignalErrorKind.INVALID_HOP_SIZE),
        NormalizationError(),
    ):
        assert isinstance(err, CQTError)
        assert isinstance(err, ValueError)

    # invariant violations are not part of the recoverable taxonomy
    assert issubclass(TransformError, RuntimeError)
    assert not issubclass(TransformError, ValueError)


def test_repr():
    assert repr(SignalError(SignalErrorKind.INVALID_HOP_SIZE)) == "SignalError(INVALID_HOP_SIZE)"


def test_raise_and_catch_as_value_error():
    with pytest.raises(ValueError):
        raise ParamError(ParamErrorKind.INVALID_BINS_PER_OCTAVE)
