"""constantq.data — Audio preprocessing and synthetic signals."""

from constantq.data.preprocess import default_engine, extract_cqt, get_time_frames
from constantq.data.signals import create_dummy_audio_signal

__all__: list[str] = [
    "create_dummy_audio_signal",
    "default_engine",
    "extract_cqt",
    "get_time_frames",
]
