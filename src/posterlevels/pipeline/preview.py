"""Preview strip: one swatch per quantization level, left to right."""

from __future__ import annotations

import numpy as np

from posterlevels.config import DEFAULT_PREVIEW_HEIGHT, DEFAULT_PREVIEW_WIDTH
from posterlevels.core.table import QuantizationTable
from posterlevels.core.types import PixelBuffer
from posterlevels.errors import InvalidParameterError


def swatch_columns(level_count: int, width: int) -> np.ndarray:
    """Table index for each column of a strip ``width`` pixels wide.

    Swatches differ in width by at most one pixel.
    """
    if width < level_count:
        raise InvalidParameterError(
            f"Strip width {width} is narrower than {level_count} levels"
        )
    return (np.arange(width, dtype=np.int64) * level_count) // width


def render_preview_strip(
    table: QuantizationTable,
    width: int = DEFAULT_PREVIEW_WIDTH,
    height: int = DEFAULT_PREVIEW_HEIGHT,
) -> PixelBuffer:
    """Render the table as an opaque horizontal strip of swatches."""
    if height < 1:
        raise InvalidParameterError(f"Strip height must be >= 1, got {height}")

    columns = swatch_columns(len(table), width)
    row = np.empty((width, 4), dtype=np.uint8)
    row[:, :3] = table.colors[columns]
    row[:, 3] = 255
    strip = np.repeat(row[np.newaxis, :, :], height, axis=0)
    return PixelBuffer(strip)
