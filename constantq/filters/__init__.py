"""constantq.filters — Transform parameters, analysis windows and filterbank."""

from constantq.filters.fft import transform_forward
from constantq.filters.filterbank import compute_cqt_filterbank
from constantq.filters.params import TransformParameters, next_power_of_two
from constantq.filters.window import (
    calculate_norm,
    create_complex_hann_window,
    create_complex_hann_windows,
    hann_window,
    hann_window_sum_of_squares,
)

__all__: list[str] = [
    "TransformParameters",
    "next_power_of_two",
    "compute_cqt_filterbank",
    "transform_forward",
    "hann_window",
    "hann_window_sum_of_squares",
    "calculate_norm",
    "create_complex_hann_window",
    "create_complex_hann_windows",
]
