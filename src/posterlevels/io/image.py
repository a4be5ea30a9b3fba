"""Image I/O for posterization.

Images are decoded with imageio v3 (first frame only) and returned as
RGBA8 PixelBuffers: grayscale is expanded to RGB, missing alpha becomes
opaque, and 16-bit data is scaled down to 8 bits.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import imageio.v3 as iio
import numpy as np

from posterlevels.config import (
    IMAGE_EXTENSIONS,
    MAX_IMAGE_DIMENSION,
    MAX_IMAGE_PIXELS,
)
from posterlevels.core.types import PixelBuffer
from posterlevels.errors import ImageDimensionError, ImageFormatError

logger = logging.getLogger(__name__)


def _image_path(filepath: str | Path) -> Path:
    """Resolve a path and require an extension imageio can round-trip as RGBA8."""
    path = Path(filepath).resolve()
    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise ImageFormatError(
            f"Cannot posterize '{path.suffix or path.name}' files; "
            f"use one of {', '.join(sorted(IMAGE_EXTENSIONS))}"
        )
    return path


def validate_input_path(filepath: str | Path) -> Path:
    """Resolve the path of a source image to posterize.

    Raises:
        ImageFormatError: Unsupported extension, or the path is not a file.
        FileNotFoundError: Nothing exists at the path.
    """
    path = _image_path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Source image not found: {path}")
    if not path.is_file():
        raise ImageFormatError(f"Source image is not a file: {path}")
    return path


def validate_output_path(filepath: str | Path) -> Path:
    """Resolve the destination for a posterized image or preview strip.

    Raises:
        ImageFormatError: Unsupported extension.
        FileNotFoundError: The destination directory is missing.
        PermissionError: The destination directory is read-only.
    """
    path = _image_path(filepath)
    folder = path.parent
    if not folder.is_dir():
        raise FileNotFoundError(f"Destination folder missing: {folder}")
    if not os.access(folder, os.W_OK):
        raise PermissionError(f"Destination folder is read-only: {folder}")
    return path


def validate_dimensions(width: int, height: int) -> None:
    """Reject sizes whose RGBA8 buffer would be empty or too large."""
    if min(width, height) < 1:
        raise ImageDimensionError(f"Empty RGBA8 buffer: {width}x{height}")
    longest = max(width, height)
    if longest > MAX_IMAGE_DIMENSION:
        raise ImageDimensionError(
            f"Side of {longest} px is over the {MAX_IMAGE_DIMENSION} px limit"
        )
    count = width * height
    if count > MAX_IMAGE_PIXELS:
        raise ImageDimensionError(
            f"{count:,} pixels ({count * 4:,} RGBA8 bytes) is over the "
            f"{MAX_IMAGE_PIXELS:,} pixel limit"
        )


def to_rgba8(raw: np.ndarray) -> np.ndarray:
    """Convert a decoded image array to (H, W, 4) uint8.

    Raises:
        ImageFormatError: If the array shape or dtype cannot be converted.
    """
    if raw.dtype == np.uint8:
        data = raw
    elif raw.dtype == np.uint16:
        data = (raw >> 8).astype(np.uint8)
    elif raw.dtype == np.bool_:
        data = raw.astype(np.uint8) * 255
    elif np.issubdtype(raw.dtype, np.floating):
        data = np.floor(np.clip(raw, 0.0, 1.0) * 255 + 0.5).astype(np.uint8)
    else:
        raise ImageFormatError(f"Unsupported pixel dtype: {raw.dtype}")

    if data.ndim == 2:
        data = data[:, :, np.newaxis]
    if data.ndim != 3:
        raise ImageFormatError(f"Unsupported image shape: {raw.shape}")

    channels = data.shape[2]
    if channels == 1:
        rgb = np.repeat(data, 3, axis=2)
        alpha = np.full(data.shape[:2] + (1,), 255, dtype=np.uint8)
    elif channels == 2:
        rgb = np.repeat(data[:, :, :1], 3, axis=2)
        alpha = data[:, :, 1:2]
    elif channels == 3:
        rgb = data
        alpha = np.full(data.shape[:2] + (1,), 255, dtype=np.uint8)
    elif channels == 4:
        return np.ascontiguousarray(data)
    else:
        raise ImageFormatError(f"Unsupported channel count: {channels}")

    return np.concatenate([rgb, alpha], axis=2)


def load_image(filepath: str | Path) -> tuple[PixelBuffer, dict]:
    """Load an image file as an RGBA8 PixelBuffer.

    Args:
        filepath: Path to image file.

    Returns:
        (buffer, metadata): PixelBuffer and metadata dict.
    """
    path = validate_input_path(filepath)

    logger.debug("Loading with imageio: %s", path)
    try:
        raw = iio.imread(str(path), index=0)
    except Exception as e:
        raise ImageFormatError(f"Failed to decode {path}: {e}") from e

    if raw.ndim not in (2, 3):
        raise ImageFormatError(f"Unsupported image shape: {raw.shape}")

    validate_dimensions(raw.shape[1], raw.shape[0])
    buffer = PixelBuffer(to_rgba8(raw))

    metadata = {
        "width": buffer.width,
        "height": buffer.height,
        "channels": raw.shape[2] if raw.ndim == 3 else 1,
        "format": str(raw.dtype),
        "backend": "imageio",
    }
    return buffer, metadata


def save_image(buffer: PixelBuffer, filepath: str | Path) -> Path:
    """Save a PixelBuffer to file.

    Formats without alpha support (JPEG, BMP) receive RGB only.

    Returns:
        Resolved output path.
    """
    path = validate_output_path(filepath)

    out = buffer.array
    if path.suffix.lower() in (".jpg", ".jpeg", ".bmp"):
        out = np.ascontiguousarray(out[:, :, :3])

    try:
        iio.imwrite(str(path), out)
    except (OSError, ValueError) as e:
        raise ImageFormatError(f"Failed to encode {path}: {e}") from e

    logger.info("Saved image: %s (%dx%d)", path, buffer.width, buffer.height)
    return path
