"""Host-side helpers: output path suggestions and file size formatting."""

from enum import StrEnum
from pathlib import Path

KNOWN_IMAGE_EXTENSIONS = frozenset(
    {"png", "jpg", "jpeg", "webp", "gif", "bmp", "tiff", "tif", "heic", "heif", "avif"}
)

_SIZE_UNITS: list[tuple[str, int]] = [
    ("B", 1),
    ("KB", 1024),
    ("MB", 1024**2),
    ("GB", 1024**3),
]


class OutputPreset(StrEnum):
    """Output format choices offered to users."""

    SAME_AS_INPUT = "same_as_input"
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @property
    def display_name(self) -> str:
        return {
            OutputPreset.SAME_AS_INPUT: "Same as input",
            OutputPreset.PNG: "PNG",
            OutputPreset.JPEG: "JPEG",
            OutputPreset.WEBP: "WebP",
        }[self]

    @property
    def output_format(self) -> str | None:
        """Value for ``ResizeOptions.output_format`` (None keeps the path's extension)."""
        if self is OutputPreset.SAME_AS_INPUT:
            return None
        return self.value

    @property
    def extension(self) -> str | None:
        """File extension written for this preset, None when it follows the input."""
        if self is OutputPreset.SAME_AS_INPUT:
            return None
        if self is OutputPreset.JPEG:
            return "jpg"
        return self.value


def format_file_size(size_bytes: int) -> str:
    """
    Human-readable file size using 1024-based units.

    Examples:
        >>> format_file_size(512)
        '512 B'
        >>> format_file_size(1536)
        '1.5 KB'
    """
    suffix, divisor = _SIZE_UNITS[0]
    for unit_suffix, unit_divisor in _SIZE_UNITS:
        if size_bytes >= unit_divisor:
            suffix, divisor = unit_suffix, unit_divisor

    if suffix == "B":
        return f"{size_bytes} B"
    return f"{size_bytes / divisor:.1f} {suffix}"


def generate_output_path(
    input_path: str | Path,
    preset: OutputPreset = OutputPreset.SAME_AS_INPUT,
    suffix: str = "_resized",
) -> Path:
    """Suggest an output file next to ``input_path``.

    ``photo.png`` with the JPEG preset becomes ``photo_resized.jpg``. An input
    without an extension keeps none when the preset follows the input.
    """
    input_path = Path(input_path)
    ext = preset.extension
    if ext is None:
        ext = input_path.suffix[1:]

    filename = f"{input_path.stem}{suffix}.{ext}" if ext else f"{input_path.stem}{suffix}"
    return input_path.with_name(filename)


def is_image_file(path: str | Path) -> bool:
    ext = Path(path).suffix[1:].lower()
    return bool(ext) and ext in KNOWN_IMAGE_EXTENSIONS
