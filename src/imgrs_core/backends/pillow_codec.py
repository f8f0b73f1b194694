"""Pillow-backed Codec implementation."""

import errno
from pathlib import Path
from typing import override

import numpy as np
from PIL import Image

from ..algo.formats import ImageFormat
from ..common.collaborators import Codec, DecodedImage, PixelBuffer
from ..common.errors import ImageError

# Modes numpy can represent without loss of meaning; 16-bit byte order is
# carried by the array dtype
_ARRAY_MODES = frozenset({"L", "LA", "RGB", "RGBA", "I;16", "I;16B", "I;16L"})

_CHANNEL_MODES = {3: "RGB", 4: "RGBA"}


def _has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA", "RGBa", "La") or "transparency" in img.info


class PillowCodec(Codec):
    """Decode and encode image files with Pillow.

    Args:
        jpeg_quality: Quality used when saving JPEG (1-100)
        webp_quality: Quality used when saving WebP (1-100)
        optimize_png: Run the PNG optimizer on save
    """

    def __init__(
        self,
        *,
        jpeg_quality: int = 90,
        webp_quality: int = 90,
        optimize_png: bool = True,
    ):
        for name, value in (("jpeg_quality", jpeg_quality), ("webp_quality", webp_quality)):
            if not 1 <= value <= 100:
                raise ValueError(f"{name} must be between 1 and 100, got {value}")

        self.jpeg_quality: int = jpeg_quality
        self.webp_quality: int = webp_quality
        self.optimize_png: bool = optimize_png

    @override
    def open_and_decode(self, path: str) -> DecodedImage:
        with Image.open(path) as img:
            native_mode = img.mode
            decoded = img
            if img.mode not in _ARRAY_MODES:
                decoded = img.convert("RGBA" if _has_alpha(img) else "RGB")

            pixels = np.asarray(decoded)

            return DecodedImage(
                pixels=pixels,
                width=decoded.width,
                height=decoded.height,
                format=native_mode,
            )

    def save_kwargs(self, format: ImageFormat) -> dict[str, object]:
        save_kwargs: dict[str, object] = {}

        if format in (ImageFormat.JPEG, ImageFormat.JPG):
            save_kwargs["quality"] = self.jpeg_quality

        if format == ImageFormat.WEBP:
            save_kwargs["quality"] = self.webp_quality

        if format == ImageFormat.PNG and self.optimize_png:
            save_kwargs["optimize"] = True

        return save_kwargs

    @override
    def encode_and_write(
        self,
        pixels: PixelBuffer,
        width: int,
        height: int,
        channels: int,
        format: ImageFormat,
        path: str,
    ) -> None:
        mode = _CHANNEL_MODES.get(channels)
        if mode is None:
            raise ImageError.processing_error(f"Cannot encode {channels}-channel pixels")

        output_path = Path(path)
        if not output_path.parent.exists():
            raise FileNotFoundError(
                errno.ENOENT, "Output directory does not exist", str(output_path.parent)
            )

        data = np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()
        img = Image.frombytes(mode, (width, height), data)

        created = not output_path.exists()
        try:
            img.save(output_path, format=format.pil_format, **self.save_kwargs(format))
        except KeyError as exc:
            # Pillow looks the encoder up by name; missing when not compiled in
            raise ImageError.unsupported_format(format.value) from exc
        except Exception:
            if created:
                output_path.unlink(missing_ok=True)
            raise
