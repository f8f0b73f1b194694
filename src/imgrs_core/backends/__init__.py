"""Default collaborators backed by Pillow."""

from .pillow_codec import PillowCodec
from .pillow_resampler import PillowResampler, get_pil_filter

__all__ = ["PillowCodec", "PillowResampler", "get_pil_filter"]
