"""
constantq.config
~~~~~~~~~~~~~~~~

Global constants for transform defaults and the precomputed lookup
tables.  Centralises all magic numbers so they can be imported once and
shared across every submodule.
"""

from typing import Final, Optional, Tuple

# ── Audio ────────────────────────────────────────────────────────────
SR: Final[int] = 22050
"""Sample rate in Hz used when loading audio files."""

HOP_LENGTH: Final[int] = 512
"""Hop length in samples between successive CQT frames."""

# ── CQT ──────────────────────────────────────────────────────────────
MIN_FREQ: Final[float] = 32.70
"""Lowest CQT frequency in Hz (C1 ≈ 32.70 Hz)."""

MAX_FREQ: Final[float] = 7902.13
"""Highest CQT frequency in Hz (B8 ≈ 7902.13 Hz)."""

BINS_PER_OCTAVE: Final[int] = 12
"""Bins per octave (one per semitone)."""

WINDOW_LENGTH: Final[int] = 4096
"""Analysis window length in samples (rounded up to a power of two)."""

# ── Lookup tables ────────────────────────────────────────────────────
PRECOMPUTED_BINS_PER_OCTAVE: Final[Tuple[int, ...]] = tuple(range(1, 13))
"""Bins-per-octave keys for the Q-factor and base-ratio tables."""

PRECOMPUTED_WINDOW_LENGTHS: Final[Tuple[int, ...]] = (256, 512, 1024, 2048, 4096)
"""Window lengths for the phase-factor table."""

PRECOMPUTED_SAMPLE_RATES: Final[Tuple[int, ...]] = (16000, 22050, 44100, 48000)
"""Sample rates for the phase-factor table."""

# ── Execution ────────────────────────────────────────────────────────
N_JOBS: Final[Optional[int]] = None
"""Default thread-pool size; *None* means ``os.cpu_count()``."""
