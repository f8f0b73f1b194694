"""Canonical RGBA8 pixel buffer helpers."""

import numpy as np
import numpy.typing as npt

from ..common.collaborators import PixelBuffer
from ..common.errors import ImageError

RGBA_CHANNELS = 4


def _to_uint8(arr: PixelBuffer) -> npt.NDArray[np.uint8]:
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype == np.bool_:
        return arr.astype(np.uint8) * 255
    if np.issubdtype(arr.dtype, np.unsignedinteger):
        # Keep the most significant byte (e.g. 16-bit grayscale)
        shift = 8 * (arr.dtype.itemsize - 1)
        return (arr >> shift).astype(np.uint8)
    if np.issubdtype(arr.dtype, np.floating):
        return np.rint(np.clip(arr, 0.0, 1.0) * 255.0).astype(np.uint8)
    if np.issubdtype(arr.dtype, np.signedinteger):
        return np.clip(arr, 0, 255).astype(np.uint8)

    raise ImageError.processing_error(f"Unsupported sample type: {arr.dtype}")


def to_rgba8(pixels: PixelBuffer) -> npt.NDArray[np.uint8]:
    """
    Convert a decoded pixel array to a contiguous (height, width, 4) uint8 buffer.

    Accepts grayscale, grayscale+alpha, RGB and RGBA layouts, either as
    (h, w) or (h, w, channels). Missing alpha becomes fully opaque.

    Raises:
        ImageError: PROCESSING_ERROR for any other layout or sample type
    """
    arr = np.asarray(pixels)
    if arr.ndim == 2:
        arr = arr[:, :, np.newaxis]

    if arr.ndim != 3 or arr.shape[2] not in (1, 2, 3, 4):
        raise ImageError.processing_error(f"Unsupported pixel layout: shape {arr.shape}")

    arr = _to_uint8(arr)
    height, width, channels = arr.shape

    if channels == RGBA_CHANNELS:
        return np.ascontiguousarray(arr)

    rgba = np.empty((height, width, RGBA_CHANNELS), dtype=np.uint8)
    if channels in (1, 2):
        rgba[:, :, :3] = arr[:, :, :1]
    else:
        rgba[:, :, :3] = arr
    rgba[:, :, 3] = arr[:, :, 1] if channels == 2 else 255
    return rgba


def reassemble_rgba8(
    buffer: PixelBuffer | bytes, width: int, height: int
) -> npt.NDArray[np.uint8]:
    """Shape a resampler's output into (height, width, 4).

    Raises:
        ImageError: PROCESSING_ERROR if the buffer does not hold exactly
            ``width * height * 4`` samples
    """
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(buffer, dtype=np.uint8)
    else:
        flat = np.asarray(buffer, dtype=np.uint8).reshape(-1)
    expected = width * height * RGBA_CHANNELS
    if flat.size != expected:
        raise ImageError.processing_error(
            f"Resampled buffer holds {flat.size} bytes, expected {expected} for {width}x{height} RGBA"
        )
    return flat.reshape(height, width, RGBA_CHANNELS)


def drop_alpha(rgba: npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    """Truncate the alpha channel. Color values are kept as-is, no blending."""
    return np.ascontiguousarray(rgba[:, :, :3])
