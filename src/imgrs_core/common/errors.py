"""Error taxonomy shared by every imgrs_core operation."""

from enum import StrEnum
from typing import override

from PIL import UnidentifiedImageError


class ImageErrorKind(StrEnum):
    IO_ERROR = "io_error"
    UNSUPPORTED_FORMAT = "unsupported_format"
    INVALID_DIMENSIONS = "invalid_dimensions"
    PROCESSING_ERROR = "processing_error"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[ImageErrorKind, str] = {
    ImageErrorKind.IO_ERROR: "IO error",
    ImageErrorKind.UNSUPPORTED_FORMAT: "Unsupported format",
    ImageErrorKind.INVALID_DIMENSIONS: "Invalid dimensions",
    ImageErrorKind.PROCESSING_ERROR: "Processing error",
}

_USER_LABELS: dict[ImageErrorKind, str] = {
    **_LABELS,
    ImageErrorKind.IO_ERROR: "File error",
}


class ImageError(Exception):
    """
    The single error type raised by imgrs_core.

    Every failure carries exactly one ``kind`` from the closed
    ``ImageErrorKind`` set plus a human-readable ``message``. Callers branch
    on ``kind`` instead of on exception subclasses.
    """

    def __init__(self, kind: ImageErrorKind, message: str):
        self.kind: ImageErrorKind = ImageErrorKind(kind)
        self.message: str = message
        super().__init__(self.message)

    @classmethod
    def io_error(cls, message: str) -> "ImageError":
        return cls(ImageErrorKind.IO_ERROR, message)

    @classmethod
    def unsupported_format(cls, format: str) -> "ImageError":
        return cls(ImageErrorKind.UNSUPPORTED_FORMAT, format)

    @classmethod
    def invalid_dimensions(cls, message: str) -> "ImageError":
        return cls(ImageErrorKind.INVALID_DIMENSIONS, message)

    @classmethod
    def processing_error(cls, message: str) -> "ImageError":
        return cls(ImageErrorKind.PROCESSING_ERROR, message)

    @property
    def format(self) -> str | None:
        """The offending format name, for ``UNSUPPORTED_FORMAT`` errors only."""
        if self.kind is ImageErrorKind.UNSUPPORTED_FORMAT:
            return self.message
        return None

    @property
    def user_message(self) -> str:
        """Text suitable for showing to an end user in a host application."""
        return f"{_USER_LABELS[self.kind]}: {self.message}"

    @override
    def __str__(self):
        return f"{self.kind.label}: {self.message}"

    @override
    def __repr__(self):
        return f"ImageError(kind={self.kind.value!r}, message={self.message!r})"


def to_image_error(exc: BaseException, *, action: str) -> ImageError:
    """Map a collaborator failure onto exactly one ``ImageErrorKind``.

    Args:
        exc: The exception raised by a codec, resampler or the filesystem
        action: Short description of what was attempted, used as message prefix

    Returns:
        ``exc`` itself if it already is an ``ImageError``, otherwise a new one
    """
    if isinstance(exc, ImageError):
        return exc

    # Checked before OSError: Pillow derives it from OSError without an errno
    if isinstance(exc, UnidentifiedImageError):
        return ImageError.unsupported_format(f"{action}: {exc}")

    # Real I/O failures carry an errno; Pillow's decoder errors do not
    if isinstance(exc, OSError) and exc.errno is not None:
        return ImageError.io_error(f"{action}: {exc}")

    return ImageError.processing_error(f"{action}: {exc}")
