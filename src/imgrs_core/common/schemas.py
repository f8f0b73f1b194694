"""Pydantic records exchanged with host applications."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..utils.paths import format_file_size

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


# ─────────────────────────────────────────────────────────────
# Resize algorithm
# ─────────────────────────────────────────────────────────────


class ResizeAlgorithm(StrEnum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    LANCZOS3 = "lanczos3"

    @property
    def display_name(self) -> str:
        return {
            ResizeAlgorithm.NEAREST: "Nearest (Fastest)",
            ResizeAlgorithm.BILINEAR: "Bilinear (Balanced)",
            ResizeAlgorithm.LANCZOS3: "Lanczos3 (Highest Quality)",
        }[self]


# ─────────────────────────────────────────────────────────────
# Image metadata
# ─────────────────────────────────────────────────────────────


class ImageInfo(BaseModel):
    """Structural metadata of an image file on disk.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        format: Native color layout as reported by the codec (e.g. "RGB", "RGBA", "P")
        file_size_bytes: Size of the file on disk
        path: The path exactly as it was passed in
    """

    width: int = Field(..., ge=0, le=U32_MAX, description="Width in pixels")
    height: int = Field(..., ge=0, le=U32_MAX, description="Height in pixels")
    format: str = Field(..., description="Native color/format descriptor")
    file_size_bytes: int = Field(..., ge=0, le=U64_MAX, description="File size in bytes")
    path: str = Field(..., description="Path of the inspected file")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def dimensions_string(self) -> str:
        return f"{self.width} × {self.height}"

    @property
    def formatted_file_size(self) -> str:
        return format_file_size(self.file_size_bytes)


# ─────────────────────────────────────────────────────────────
# Resize options
# ─────────────────────────────────────────────────────────────


class ResizeOptions(BaseModel):
    """Per-call resize request.

    Only the unsigned 32-bit range is enforced here. Zero width or height is
    accepted by the model and rejected by ``resize_image`` as
    ``INVALID_DIMENSIONS``.
    """

    width: int = Field(..., ge=0, le=U32_MAX, description="Target width in pixels")
    height: int | None = Field(
        default=None,
        ge=0,
        le=U32_MAX,
        description="Target height in pixels (None = keep aspect ratio)",
    )
    algorithm: ResizeAlgorithm = Field(
        default=ResizeAlgorithm.LANCZOS3,
        description="Resampling algorithm",
    )
    output_format: str | None = Field(
        default=None,
        description="Output format override (None = infer from output path)",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")
