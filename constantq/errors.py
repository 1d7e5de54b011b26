"""
constantq.errors
~~~~~~~~~~~~~~~~

Error taxonomy for parameter derivation and signal processing.

Two independent, recoverable categories (:class:`ParamError` and
:class:`SignalError`), each tagged with a ``kind`` from a fixed enum and
rendered through a one-line message table.  :class:`TransformError` is
kept apart: it marks an FFT or array-shape invariant violation that
validated parameters can never trigger.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class ParamErrorKind(Enum):
    INVALID_MIN_FREQUENCY = "invalid_min_frequency"
    INVALID_MAX_FREQUENCY = "invalid_max_frequency"
    INVALID_BINS_PER_OCTAVE = "invalid_bins_per_octave"
    INVALID_SAMPLE_RATE = "invalid_sample_rate"
    INVALID_WINDOW_LENGTH = "invalid_window_length"


class SignalErrorKind(Enum):
    EMPTY_INPUT_SIGNAL = "empty_input_signal"
    INVALID_HOP_SIZE = "invalid_hop_size"


# ── Message tables ───────────────────────────────────────────────────
PARAM_ERROR_MESSAGES: Final[dict[ParamErrorKind, str]] = {
    ParamErrorKind.INVALID_MIN_FREQUENCY:
        "Invalid minimum frequency: must be a positive number",
    ParamErrorKind.INVALID_MAX_FREQUENCY:
        "Invalid maximum frequency: must be a positive number and greater "
        "than the minimum frequency",
    ParamErrorKind.INVALID_BINS_PER_OCTAVE:
        "Invalid bins per octave: must be a positive integer",
    ParamErrorKind.INVALID_SAMPLE_RATE:
        "Invalid sample rate: must be a positive integer",
    ParamErrorKind.INVALID_WINDOW_LENGTH:
        "Invalid window length: must be a positive integer",
}

SIGNAL_ERROR_MESSAGES: Final[dict[SignalErrorKind, str]] = {
    SignalErrorKind.EMPTY_INPUT_SIGNAL:
        "Empty input signal: the input signal should not be empty.",
    SignalErrorKind.INVALID_HOP_SIZE:
        "Invalid hop size: hop size should be greater than 0 and less than "
        "or equal to the window length.",
}


class CQTError(Exception):
    """Base class for every error raised by :mod:`constantq`."""


class _KindError(CQTError):
    _messages: dict = {}

    def __init__(self, kind) -> None:
        self.kind = kind
        super().__init__(self._messages[kind])

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.kind is self.kind

    def __hash__(self) -> int:
        return hash((type(self), self.kind))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name})"


class ParamError(_KindError, ValueError):
    """Rejected input to :meth:`TransformParameters.create`.

    Parameters
    ----------
    kind : ParamErrorKind
        Which of the five validation checks failed.
    """

    _messages = PARAM_ERROR_MESSAGES


class SignalError(_KindError, ValueError):
    """Rejected input to :meth:`CQT.process`.

    Parameters
    ----------
    kind : SignalErrorKind
        ``EMPTY_INPUT_SIGNAL`` or ``INVALID_HOP_SIZE``.
    """

    _messages = SIGNAL_ERROR_MESSAGES


class NormalizationError(CQTError, ValueError):
    """Raised by :func:`calculate_norm` for an empty window."""

    def __init__(self) -> None:
        super().__init__("Invalid window length: must be greater than zero")


class TransformError(CQTError, RuntimeError):
    """FFT failure or malformed internal array shape (not recoverable)."""
