"""Image resize orchestration.

The pipeline is linear:

1. validate paths and dimensions (no I/O yet)
2. decode the source with the Codec
3. resolve the destination size
4. canonicalize pixels to RGBA8
5. resample with the Resampler
6. reassemble the resampled buffer
7. infer the output format
8. drop alpha for formats that cannot store it
9. encode and write with the Codec
10. report metadata of the written file
"""

from loguru import logger

from .algo.dimensions import resolve_height
from .algo.formats import infer_output_format
from .algo.pixels import RGBA_CHANNELS, drop_alpha, reassemble_rgba8, to_rgba8
from .algo.strategy import select_strategy
from .backends.pillow_codec import PillowCodec
from .backends.pillow_resampler import PillowResampler
from .common.collaborators import Codec, Resampler
from .common.errors import ImageError, to_image_error
from .common.schemas import ImageInfo, ResizeOptions
from .image_info import get_image_info, require_path
from .utils.profiling import timed


def validate_options(options: ResizeOptions) -> None:
    if options.width == 0:
        raise ImageError.invalid_dimensions("Width must be greater than 0")
    if options.height == 0:
        raise ImageError.invalid_dimensions("Height must be greater than 0")


@timed
def resize_image(
    input_path: str,
    output_path: str,
    options: ResizeOptions,
    *,
    codec: Codec | None = None,
    resampler: Resampler | None = None,
) -> ImageInfo:
    """
    Resize an image file and write the result.

    When ``options.height`` is None the source aspect ratio is preserved.
    The output format comes from ``options.output_format`` or, failing
    that, from the extension of ``output_path``.

    Args:
        input_path: Path to the source image
        output_path: Path of the file to write
        options: Target size, algorithm and optional format override
        codec: Codec for decode/encode (default: ``PillowCodec()``)
        resampler: Resampler for scaling (default: ``PillowResampler()``)

    Returns:
        ``ImageInfo`` read back from the written output file

    Raises:
        ImageError: IO_ERROR for empty paths or file access failures,
            INVALID_DIMENSIONS for zero width/height,
            UNSUPPORTED_FORMAT for an unknown output format or unrecognized input,
            PROCESSING_ERROR for decode, resample or encode failures
    """
    require_path(input_path, "input_path")
    require_path(output_path, "output_path")
    validate_options(options)

    if codec is None:
        codec = PillowCodec()
    if resampler is None:
        resampler = PillowResampler()

    try:
        decoded = codec.open_and_decode(input_path)
    except Exception as exc:
        raise to_image_error(exc, action=f"Failed to decode {input_path}") from exc

    dst_width = options.width
    dst_height = resolve_height(decoded.width, decoded.height, dst_width, options.height)
    if dst_height == 0:
        raise ImageError.invalid_dimensions("Resolved height is 0")

    logger.debug(
        f"Resizing {input_path} {decoded.width}x{decoded.height} -> {dst_width}x{dst_height}"
        + f" ({options.algorithm})"
    )

    strategy = select_strategy(options.algorithm)
    try:
        rgba = to_rgba8(decoded.pixels)
        resampled = resampler.resize(
            rgba, decoded.width, decoded.height, dst_width, dst_height, strategy
        )
        pixels = reassemble_rgba8(resampled, dst_width, dst_height)
    except ImageError:
        raise
    except Exception as exc:
        raise ImageError.processing_error(f"Failed to resample {input_path}: {exc}") from exc

    output_format = infer_output_format(output_path, options.output_format)

    channels = RGBA_CHANNELS
    if not output_format.supports_alpha:
        logger.debug(f"Dropping alpha channel for {output_format} output")
        pixels = drop_alpha(pixels)
        channels = 3

    try:
        codec.encode_and_write(pixels, dst_width, dst_height, channels, output_format, output_path)
    except Exception as exc:
        raise to_image_error(exc, action=f"Failed to write {output_path}") from exc

    return get_image_info(output_path, codec=codec)
