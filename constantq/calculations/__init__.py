"""constantq.calculations — Memoised per-bin constants."""

from constantq.calculations.lookup import (
    LookupCache,
    calculate_base_freq_ratio,
    calculate_phase_factors,
    calculate_q_factor,
    default_cache,
    get_calculated_base_freq_ratio,
    get_calculated_phase_factors,
    get_calculated_q_factor,
)

__all__: list[str] = [
    "LookupCache",
    "default_cache",
    "calculate_q_factor",
    "calculate_base_freq_ratio",
    "calculate_phase_factors",
    "get_calculated_q_factor",
    "get_calculated_base_freq_ratio",
    "get_calculated_phase_factors",
]
