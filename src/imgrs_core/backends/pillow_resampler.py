"""Pillow-backed Resampler implementation."""

from typing import override

import numpy as np
from PIL import Image

from ..algo.strategy import FilterKernel, ResamplingStrategy, SamplingKind
from ..common.collaborators import PixelBuffer, Resampler
from ..common.errors import ImageError

_KERNEL_FILTERS: dict[FilterKernel, Image.Resampling] = {
    FilterKernel.BILINEAR: Image.Resampling.BILINEAR,
    # Pillow's LANCZOS uses a support radius of 3
    FilterKernel.LANCZOS: Image.Resampling.LANCZOS,
}


def get_pil_filter(strategy: ResamplingStrategy) -> Image.Resampling:
    """Convert a resampling strategy to the Pillow filter implementing it."""
    if strategy.kind is SamplingKind.NEAREST_NEIGHBOR:
        return Image.Resampling.NEAREST

    if strategy.kernel is None or strategy.kernel not in _KERNEL_FILTERS:
        raise ImageError.processing_error(f"No Pillow filter for kernel {strategy.kernel}")

    return _KERNEL_FILTERS[strategy.kernel]


class PillowResampler(Resampler):
    """Scale RGBA8 buffers with ``PIL.Image.resize``."""

    @override
    def resize(
        self,
        pixels: PixelBuffer,
        src_width: int,
        src_height: int,
        dst_width: int,
        dst_height: int,
        strategy: ResamplingStrategy,
    ) -> PixelBuffer:
        data = np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()
        source = Image.frombytes("RGBA", (src_width, src_height), data)

        resized = source.resize((dst_width, dst_height), resample=get_pil_filter(strategy))
        return np.asarray(resized)
