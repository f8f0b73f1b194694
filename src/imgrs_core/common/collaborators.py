"""Codec and Resampler Protocols - interfaces for pixel work.

The resize pipeline never touches an image library directly. It talks to a
``Codec`` for decoding/encoding files and to a ``Resampler`` for scaling, so
the orchestration can be exercised with in-memory fakes. Pillow-backed
implementations live in ``imgrs_core.backends``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from ..algo.formats import ImageFormat
    from ..algo.strategy import ResamplingStrategy

PixelBuffer: TypeAlias = npt.NDArray[np.generic]
"""Pixel array laid out as (height, width) or (height, width, channels)."""


@dataclass(frozen=True)
class DecodedImage:
    """Result of ``Codec.open_and_decode``.

    ``format`` is a free-form descriptor of the native color layout; it is
    diagnostic only and is reported verbatim in ``ImageInfo.format``.
    """

    pixels: PixelBuffer
    width: int
    height: int
    format: str


@runtime_checkable
class Codec(Protocol):
    """Protocol for reading and writing image files."""

    def open_and_decode(self, path: str) -> DecodedImage:
        """Open ``path`` and decode it into a pixel array.

        Raises:
            OSError: If the file cannot be opened or read
            Exception: Any decoder failure; mapped by the caller
        """
        ...

    def encode_and_write(
        self,
        pixels: PixelBuffer,
        width: int,
        height: int,
        channels: int,
        format: "ImageFormat",
        path: str,
    ) -> None:
        """Encode an 8-bit (height, width, channels) array as ``format`` and write it to ``path``."""
        ...


@runtime_checkable
class Resampler(Protocol):
    """Protocol for scaling a canonical RGBA buffer."""

    def resize(
        self,
        pixels: PixelBuffer,
        src_width: int,
        src_height: int,
        dst_width: int,
        dst_height: int,
        strategy: "ResamplingStrategy",
    ) -> PixelBuffer:
        """Return a buffer holding ``dst_width * dst_height * 4`` bytes of RGBA data."""
        ...
