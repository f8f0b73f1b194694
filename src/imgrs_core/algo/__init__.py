"""Pure building blocks of the resize pipeline."""

from .dimensions import resolve_height
from .formats import ImageFormat, get_supported_formats, infer_output_format
from .pixels import drop_alpha, reassemble_rgba8, to_rgba8
from .strategy import FilterKernel, ResamplingStrategy, SamplingKind, select_strategy

__all__ = [
    "resolve_height",
    "ImageFormat",
    "get_supported_formats",
    "infer_output_format",
    "drop_alpha",
    "reassemble_rgba8",
    "to_rgba8",
    "FilterKernel",
    "ResamplingStrategy",
    "SamplingKind",
    "select_strategy",
]
