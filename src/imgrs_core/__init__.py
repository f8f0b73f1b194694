"""imgrs_core - Image inspection and resize engine.

Example:
    Inspect and resize an image::

        from imgrs_core import ResizeAlgorithm, ResizeOptions, get_image_info, resize_image

        info = get_image_info("photo.png")
        print(f"{info.dimensions_string}, {info.formatted_file_size}")

        # Height follows the aspect ratio when omitted
        result = resize_image(
            "photo.png",
            "photo_small.jpg",
            ResizeOptions(width=640, algorithm=ResizeAlgorithm.BILINEAR),
        )
"""

from .algo.dimensions import resolve_height
from .algo.formats import ImageFormat, get_supported_formats, infer_output_format
from .algo.strategy import ResamplingStrategy, select_strategy
from .backends import PillowCodec, PillowResampler
from .common.collaborators import Codec, DecodedImage, Resampler
from .common.errors import ImageError, ImageErrorKind
from .common.schemas import ImageInfo, ResizeAlgorithm, ResizeOptions
from .image_info import get_image_info
from .image_resize import resize_image
from .utils.paths import OutputPreset, format_file_size, generate_output_path, is_image_file

__version__ = "0.1.0"

__all__ = [
    "get_image_info",
    "resize_image",
    "get_supported_formats",
    "infer_output_format",
    "resolve_height",
    "select_strategy",
    "ImageFormat",
    "ResamplingStrategy",
    "ImageInfo",
    "ResizeAlgorithm",
    "ResizeOptions",
    "ImageError",
    "ImageErrorKind",
    "Codec",
    "DecodedImage",
    "Resampler",
    "PillowCodec",
    "PillowResampler",
    "OutputPreset",
    "format_file_size",
    "generate_output_path",
    "is_image_file",
    "__version__",
]
