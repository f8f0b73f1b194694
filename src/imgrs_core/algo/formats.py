"""Output format registry and inference."""

from enum import StrEnum
from pathlib import PurePath

from loguru import logger

from ..common.errors import ImageError

MISSING_EXTENSION = "<missing extension>"


class ImageFormat(StrEnum):
    """Formats the engine can write, in registry order."""

    PNG = "png"
    JPEG = "jpeg"
    JPG = "jpg"
    WEBP = "webp"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"

    @property
    def pil_format(self) -> str:
        """Pillow format name used when saving."""
        return _PIL_FORMATS[self]

    @property
    def supports_alpha(self) -> bool:
        # JPEG does not support alpha channel
        return self not in (ImageFormat.JPEG, ImageFormat.JPG)


_PIL_FORMATS = {
    ImageFormat.PNG: "PNG",
    ImageFormat.JPEG: "JPEG",
    ImageFormat.JPG: "JPEG",
    ImageFormat.WEBP: "WEBP",
    ImageFormat.GIF: "GIF",
    ImageFormat.BMP: "BMP",
    ImageFormat.TIFF: "TIFF",
}


def get_supported_formats() -> list[str]:
    """Lowercase names of every writable format, in registry order."""
    return [fmt.value for fmt in ImageFormat]


def normalize_format(text: str) -> str:
    """Trim whitespace, drop one leading dot and lowercase."""
    normalized = text.strip()
    if normalized.startswith("."):
        normalized = normalized[1:]
    return normalized.lower()


def lookup_format(text: str) -> ImageFormat | None:
    normalized = normalize_format(text)
    try:
        return ImageFormat(normalized)
    except ValueError:
        return None


def infer_output_format(output_path: str, override_format: str | None = None) -> ImageFormat:
    """
    Resolve the format to encode ``output_path`` with.

    An explicit override wins over the path extension. Lookup is case- and
    leading-dot-insensitive in both cases.

    Args:
        output_path: Destination file path
        override_format: Explicit format name (e.g. "PNG", ".jpg"), or None

    Returns:
        The matching registry entry

    Raises:
        ImageError: UNSUPPORTED_FORMAT if the override or extension is unknown,
            or if the path has no extension and no override was given
    """
    if override_format is not None:
        fmt = lookup_format(override_format)
        if fmt is None:
            raise ImageError.unsupported_format(normalize_format(override_format))
        logger.debug(f"Output format {fmt} taken from override {override_format!r}")
        return fmt

    suffix = PurePath(output_path).suffix
    if not suffix:
        raise ImageError.unsupported_format(MISSING_EXTENSION)

    extension = suffix[1:]
    fmt = lookup_format(extension)
    if fmt is None:
        raise ImageError.unsupported_format(extension)

    logger.debug(f"Output format {fmt} inferred from {output_path}")
    return fmt
