"""Utility helpers for hosts embedding imgrs_core."""

from .paths import OutputPreset, format_file_size, generate_output_path, is_image_file
from .profiling import timed

__all__ = [
    "OutputPreset",
    "format_file_size",
    "generate_output_path",
    "is_image_file",
    "timed",
]
