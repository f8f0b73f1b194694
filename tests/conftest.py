"""Test configuration and fixtures for imgrs_core.

This module provides:
- Function-scoped fixtures that synthesize images with Pillow into tmp_path
- In-memory Codec/Resampler fakes for exercising the pipeline without Pillow
"""

from pathlib import Path
from typing import override

import numpy as np
import pytest
from PIL import Image, ImageDraw

from imgrs_core.algo.formats import ImageFormat
from imgrs_core.algo.strategy import ResamplingStrategy
from imgrs_core.common.collaborators import Codec, DecodedImage, PixelBuffer, Resampler

# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate a 100x50 RGB PNG with a simple pattern."""
    output_path = tmp_path / "synthetic.png"

    img = Image.new("RGB", (100, 50), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 100, 10):
        draw.line([(i, 0), (i, 50)], fill=(255, 255, 255), width=1)
    draw.ellipse([30, 10, 70, 40], fill=(200, 100, 100))

    img.save(output_path, "PNG")

    return output_path


@pytest.fixture
def rgba_image(tmp_path: Path) -> Path:
    """Generate a 100x50 RGBA PNG, left half opaque red, right half translucent blue."""
    output_path = tmp_path / "rgba.png"

    img = Image.new("RGBA", (100, 50), color=(255, 0, 0, 255))
    draw = ImageDraw.Draw(img)
    draw.rectangle([50, 0, 99, 49], fill=(0, 0, 255, 64))

    img.save(output_path, "PNG")

    return output_path


@pytest.fixture
def grayscale_image(tmp_path: Path) -> Path:
    """Generate a 40x40 grayscale JPEG."""
    output_path = tmp_path / "gray.jpg"

    img = Image.linear_gradient("L").resize((40, 40))
    img.save(output_path, "JPEG", quality=90)

    return output_path


@pytest.fixture
def palette_gif(tmp_path: Path) -> Path:
    """Generate a 30x20 palette GIF with a transparent color."""
    output_path = tmp_path / "palette.gif"

    img = Image.new("P", (30, 20), color=1)
    img.putpalette([0, 0, 0, 255, 255, 0] + [0, 0, 0] * 254)
    img.paste(0, (0, 0, 10, 20))
    img.save(output_path, "GIF", transparency=0)

    return output_path


@pytest.fixture
def corrupt_image(tmp_path: Path) -> Path:
    """A file with an image extension but no recognizable image data."""
    output_path = tmp_path / "corrupt.png"
    _ = output_path.write_bytes(b"this is not an image at all")
    return output_path


# ============================================================================
# Fake Collaborators
# ============================================================================


class FakeCodec(Codec):
    """In-memory codec.

    ``sources`` maps a path to the image it decodes to. Encoding writes a
    small placeholder file and registers the encoded pixels as a new source,
    so the orchestrator's final metadata read-back works.
    """

    def __init__(self) -> None:
        self.sources: dict[str, DecodedImage] = {}
        self.encoded: list[tuple[PixelBuffer, int, int, int, ImageFormat, str]] = []
        self.decoded_paths: list[str] = []

    def add_source(self, path: str, pixels: PixelBuffer, format: str = "RGB") -> None:
        height, width = pixels.shape[:2]
        self.sources[path] = DecodedImage(pixels=pixels, width=width, height=height, format=format)

    @override
    def open_and_decode(self, path: str) -> DecodedImage:
        self.decoded_paths.append(path)
        if path not in self.sources:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.sources[path]

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
        self.encoded.append((pixels, width, height, channels, format, path))
        _ = Path(path).write_bytes(b"fake-" + format.value.encode())
        self.sources[path] = DecodedImage(
            pixels=pixels,
            width=width,
            height=height,
            format="RGBA" if channels == 4 else "RGB",
        )


class FakeResampler(Resampler):
    """Returns a solid buffer of the requested size and records each call."""

    def __init__(self, fill: int = 128) -> None:
        self.fill: int = fill
        self.calls: list[tuple[int, int, int, int, ResamplingStrategy]] = []
        self.received: list[PixelBuffer] = []

    @override
    def resize(
        self,
        pixels: PixelBuffer,
        src_width: int,
        src_height: int,
        dst_width: int,
        dst_height: int,
        strategy: ResamplingStrategy,
    ) -> PixelBuffer:
        self.calls.append((src_width, src_height, dst_width, dst_height, strategy))
        self.received.append(pixels)
        return np.full((dst_height, dst_width, 4), self.fill, dtype=np.uint8)


@pytest.fixture
def fake_codec() -> FakeCodec:
    """Provide an empty in-memory codec."""
    return FakeCodec()


@pytest.fixture
def fake_resampler() -> FakeResampler:
    """Provide a recording resampler."""
    return FakeResampler()
