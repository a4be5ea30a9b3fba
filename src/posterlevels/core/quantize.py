"""Apply a quantization table to every pixel of an RGBA8 image.

Per pixel:
    luminance = 0.299 R + 0.587 G + 0.114 B          (BT.601)
    index     = floor(luminance / 255 * (N - 1)), clamped to [0, N - 1]
    RGB       <- table[index], alpha unchanged

The index is computed with integer weights (299, 587, 114) over a
denominator of 255000. This is the same quantity as the floating-point
formula but without rounding error, so pure white always reaches the last
level.

Ownership: every function here returns a new buffer. Sources are never
modified.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from posterlevels.config import (
    LUMA_SCALE,
    LUMA_WEIGHT_B,
    LUMA_WEIGHT_G,
    LUMA_WEIGHT_R,
    MAX_CHANNEL_VALUE,
)
from posterlevels.core.table import QuantizationTable, build_table_for
from posterlevels.core.types import BytesLike, PixelBuffer, PosterizeParams
from posterlevels.errors import InvalidParameterError

logger = logging.getLogger(__name__)

TableLike = Union[QuantizationTable, Sequence[Sequence[int]], np.ndarray]


def _table_colors(table: TableLike) -> np.ndarray:
    """Validate a table argument and return it as an (N, 3) uint8 array."""
    if isinstance(table, QuantizationTable):
        return table.colors

    try:
        colors = np.asarray(table, dtype=np.int64)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"Table is not a sequence of RGB triplets: {e}") from e

    if colors.ndim != 2 or colors.shape[1] != 3 or colors.shape[0] == 0:
        raise InvalidParameterError(
            f"Table shape {colors.shape} != expected (N, 3) with N >= 1"
        )
    if colors.min() < 0 or colors.max() > MAX_CHANNEL_VALUE:
        raise InvalidParameterError("Table colors must be in [0, 255]")
    return colors.astype(np.uint8)


def level_indices(pixels: np.ndarray, level_count: int) -> np.ndarray:
    """Table index for each pixel from its BT.601 luminance.

    Args:
        pixels: (..., 3) or (..., 4) uint8 array; only RGB is read.
        level_count: Number of table entries.

    Returns:
        int64 array with the leading shape of ``pixels``, values in
        [0, level_count - 1].
    """
    if level_count < 1:
        raise InvalidParameterError(f"Level count must be >= 1, got {level_count}")
    rgb = pixels[..., :3].astype(np.int64)
    luma = (
        rgb[..., 0] * LUMA_WEIGHT_R
        + rgb[..., 1] * LUMA_WEIGHT_G
        + rgb[..., 2] * LUMA_WEIGHT_B
    )
    idx = (luma * (level_count - 1)) // (LUMA_SCALE * MAX_CHANNEL_VALUE)
    return np.clip(idx, 0, level_count - 1)


def quantize_buffer(
    source: PixelBuffer,
    table: TableLike,
    parallel: bool = False,
) -> PixelBuffer:
    """Posterize a pixel buffer through a quantization table.

    Args:
        source: Input image. Not modified.
        table: QuantizationTable or sequence of (r, g, b) triplets.
        parallel: Use the multi-threaded Numba kernel.

    Returns:
        New PixelBuffer of the same size.
    """
    colors = _table_colors(table)

    if parallel:
        from posterlevels._numba_kernels.quantize import quantize_pixels_numba

        logger.debug("Quantizing %d pixels with Numba kernel", source.size)
        flat = np.ascontiguousarray(source.array.reshape(-1, 4))
        out = quantize_pixels_numba(flat, np.ascontiguousarray(colors))
        return PixelBuffer(out.reshape(source.array.shape))

    logger.debug("Quantizing %d pixels with NumPy", source.size)
    idx = level_indices(source.array, colors.shape[0])
    result = source.array.copy()
    result[..., :3] = colors[idx]
    return PixelBuffer(result)


def quantize(
    source: BytesLike,
    width: int,
    height: int,
    table: TableLike,
) -> bytes:
    """Posterize a flat RGBA8 byte buffer.

    Raises:
        InvalidInputError: If ``len(source) != width * height * 4``.
    """
    buffer = PixelBuffer.from_bytes(source, width, height)
    return quantize_buffer(buffer, table).to_bytes()


def posterize(
    source: PixelBuffer,
    params: PosterizeParams,
    enabled: bool = True,
    parallel: bool = False,
) -> PixelBuffer:
    """Build the table for ``params`` and apply it.

    With ``enabled=False`` (passthrough) no table is built and an unmodified
    copy of the source is returned.
    """
    if not enabled:
        logger.debug("Quantization disabled, passing image through")
        return source.copy()
    table = build_table_for(params)
    return quantize_buffer(source, table, parallel=parallel)
