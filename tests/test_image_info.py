"""Tests for get_image_info with the Pillow codec and with fakes."""

import os
from pathlib import Path
from unittest.mock import MagicMock

import numpy as np
import pytest

from imgrs_core import ImageError, ImageErrorKind, ImageInfo, get_image_info
from imgrs_core.backends.pillow_codec import PillowCodec

# ============================================================================
# PILLOW CODEC
# ============================================================================


def test_get_image_info_rgb(synthetic_image: Path):
    """Test metadata of a real PNG."""
    info = get_image_info(str(synthetic_image))

    assert isinstance(info, ImageInfo)
    assert info.width == 100
    assert info.height == 50
    assert info.format == "RGB"
    assert info.file_size_bytes == os.path.getsize(synthetic_image)
    assert info.path == str(synthetic_image)


def test_get_image_info_rgba(rgba_image: Path):
    """Test the native alpha layout is reported."""
    assert get_image_info(str(rgba_image)).format == "RGBA"


def test_get_image_info_palette(palette_gif: Path):
    """Test palette images report their native mode, not the decoded one."""
    info = get_image_info(str(palette_gif))

    assert info.format == "P"
    assert (info.width, info.height) == (30, 20)


@pytest.mark.parametrize("path", ["", "   ", "\t\n"])
def test_get_image_info_empty_path(path: str):
    """Test empty or whitespace paths are IO errors."""
    with pytest.raises(ImageError) as exc_info:
        _ = get_image_info(path)

    assert exc_info.value.kind is ImageErrorKind.IO_ERROR


def test_get_image_info_missing_file(tmp_path: Path):
    """Test a nonexistent file is an IO error."""
    with pytest.raises(ImageError) as exc_info:
        _ = get_image_info(str(tmp_path / "missing.png"))

    assert exc_info.value.kind is ImageErrorKind.IO_ERROR


def test_get_image_info_directory(tmp_path: Path):
    """Test a directory path is an IO error."""
    with pytest.raises(ImageError) as exc_info:
        _ = get_image_info(str(tmp_path))

    assert exc_info.value.kind is ImageErrorKind.IO_ERROR


def test_get_image_info_corrupt_file(corrupt_image: Path):
    """Test unrecognized image data is an unsupported format."""
    with pytest.raises(ImageError) as exc_info:
        _ = get_image_info(str(corrupt_image))

    assert exc_info.value.kind is ImageErrorKind.UNSUPPORTED_FORMAT


def test_get_image_info_returns_fresh_records(synthetic_image: Path):
    """Test each call builds a new record."""
    first = get_image_info(str(synthetic_image))
    second = get_image_info(str(synthetic_image))

    assert first == second
    assert first is not second


# ============================================================================
# INJECTED CODEC
# ============================================================================


def test_get_image_info_uses_injected_codec(fake_codec, tmp_path: Path):
    """Test the codec's descriptor is reported verbatim and size comes from stat."""
    path = tmp_path / "fake.raw"
    _ = path.write_bytes(b"x" * 123)
    fake_codec.add_source(str(path), np.zeros((7, 9, 3), dtype=np.uint8), format="Rgb8")

    info = get_image_info(str(path), codec=fake_codec)

    assert (info.width, info.height) == (9, 7)
    assert info.format == "Rgb8"
    assert info.file_size_bytes == 123


def test_get_image_info_stat_failure_is_io_error(fake_codec, tmp_path: Path):
    """Test a decodable but unstattable path is an IO error."""
    path = str(tmp_path / "only-in-memory.png")
    fake_codec.add_source(path, np.zeros((2, 2, 3), dtype=np.uint8))

    with pytest.raises(ImageError) as exc_info:
        _ = get_image_info(path, codec=fake_codec)

    assert exc_info.value.kind is ImageErrorKind.IO_ERROR
    assert "stat" in exc_info.value.message


def test_get_image_info_decoder_failure_is_processing_error(tmp_path: Path):
    """Test an unclassified decoder failure is a processing error."""
    path = tmp_path / "x.png"
    _ = path.write_bytes(b"")
    codec = MagicMock(spec=PillowCodec)
    codec.open_and_decode.side_effect = ValueError("broken data stream")

    with pytest.raises(ImageError) as exc_info:
        _ = get_image_info(str(path), codec=codec)

    assert exc_info.value.kind is ImageErrorKind.PROCESSING_ERROR
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_get_image_info_empty_path_never_touches_codec():
    """Test validation happens before the codec is called."""
    codec = MagicMock(spec=PillowCodec)

    with pytest.raises(ImageError):
        _ = get_image_info(" ", codec=codec)

    codec.open_and_decode.assert_not_called()
