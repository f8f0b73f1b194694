"""Image metadata extraction."""

from pathlib import Path

from loguru import logger

from .backends.pillow_codec import PillowCodec
from .common.collaborators import Codec
from .common.errors import ImageError, to_image_error
from .common.schemas import ImageInfo
from .utils.profiling import timed


def require_path(path: str, name: str) -> None:
    """Raise IO_ERROR when ``path`` is empty or whitespace-only."""
    if not path or not path.strip():
        raise ImageError.io_error(f"{name} must not be empty")


@timed
def get_image_info(path: str, *, codec: Codec | None = None) -> ImageInfo:
    """
    Report the dimensions, color format and size of an image file.

    Args:
        path: Path to the image file; returned unmodified in ``ImageInfo.path``
        codec: Codec used to decode the file (default: ``PillowCodec()``)

    Returns:
        A fresh ``ImageInfo`` for the file

    Raises:
        ImageError: IO_ERROR for an empty path or an unreadable file,
            UNSUPPORTED_FORMAT for unrecognized image data,
            PROCESSING_ERROR for any other decode failure
    """
    require_path(path, "path")

    if codec is None:
        codec = PillowCodec()

    try:
        decoded = codec.open_and_decode(path)
    except Exception as exc:
        raise to_image_error(exc, action=f"Failed to decode {path}") from exc

    try:
        file_size = Path(path).stat().st_size
    except OSError as exc:
        raise ImageError.io_error(f"Failed to stat {path}: {exc}") from exc

    logger.debug(f"{path}: {decoded.width}x{decoded.height} {decoded.format}, {file_size} bytes")

    return ImageInfo(
        width=decoded.width,
        height=decoded.height,
        format=decoded.format,
        file_size_bytes=file_size,
        path=path,
    )
