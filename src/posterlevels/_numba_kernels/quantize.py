"""Numba JIT-compiled posterization kernel.

Each pixel is independent, so the loop runs under ``prange`` with no shared
accumulators. Output matches ``posterlevels.core.quantize.level_indices``
exactly because both use the same integer luminance arithmetic.
"""

from __future__ import annotations

import numba
import numpy as np

from posterlevels.config import (
    LUMA_SCALE,
    LUMA_WEIGHT_B,
    LUMA_WEIGHT_G,
    LUMA_WEIGHT_R,
    MAX_CHANNEL_VALUE,
)

_LUMA_DENOM = LUMA_SCALE * MAX_CHANNEL_VALUE


@numba.njit(parallel=True, cache=True)
def quantize_pixels_numba(pixels: np.ndarray, colors: np.ndarray) -> np.ndarray:
    """Replace RGB of every pixel with its table color (Numba JIT).

    Args:
        pixels: (M, 4) uint8 RGBA pixels.
        colors: (N, 3) uint8 table colors.

    Returns:
        (M, 4) uint8 array; alpha copied from the input.
    """
    M = pixels.shape[0]
    top = colors.shape[0] - 1
    out = np.empty((M, 4), dtype=np.uint8)

    for i in numba.prange(M):
        luma = (
            LUMA_WEIGHT_R * np.int64(pixels[i, 0])
            + LUMA_WEIGHT_G * np.int64(pixels[i, 1])
            + LUMA_WEIGHT_B * np.int64(pixels[i, 2])
        )
        idx = (luma * top) // _LUMA_DENOM
        if idx < 0:
            idx = 0
        elif idx > top:
            idx = top

        out[i, 0] = colors[idx, 0]
        out[i, 1] = colors[idx, 1]
        out[i, 2] = colors[idx, 2]
        out[i, 3] = pixels[i, 3]

    return out
