"""Common module - protocols, schemas, and the error taxonomy."""

from .collaborators import Codec, DecodedImage, PixelBuffer, Resampler
from .errors import ImageError, ImageErrorKind, to_image_error
from .schemas import ImageInfo, ResizeAlgorithm, ResizeOptions

__all__ = [
    "Codec",
    "DecodedImage",
    "PixelBuffer",
    "Resampler",
    "ImageError",
    "ImageErrorKind",
    "to_image_error",
    "ImageInfo",
    "ResizeAlgorithm",
    "ResizeOptions",
]
