"""Power-law distribution curve mapping level indices to intensities.

For a table of N levels, level i sits at x = i / (N - 1) in [0, 1] and is
mapped to round(x ** (2 ** d) * 255), where d is the distribution
parameter. d > 0 pushes the middle levels toward black, d < 0 toward white,
and d = 0 is linear. Rounding is half-up so that 127.5 becomes 128.
"""

from __future__ import annotations

import math

import numpy as np

from posterlevels.config import MAX_CHANNEL_VALUE, MIN_LEVEL_COUNT
from posterlevels.errors import InvalidParameterError


def _check_level_count(level_count: int) -> None:
    if level_count < MIN_LEVEL_COUNT:
        raise InvalidParameterError(
            f"Level count must be >= {MIN_LEVEL_COUNT}, got {level_count}"
        )


def check_distribution(distribution: float) -> float:
    """Return the distribution parameter as a finite float.

    Raises:
        InvalidParameterError: If the parameter is not a finite number.
    """
    try:
        d = float(distribution)
    except (TypeError, ValueError):
        raise InvalidParameterError(
            f"Distribution must be numeric, got {distribution!r}"
        ) from None
    if not math.isfinite(d):
        raise InvalidParameterError(f"Distribution must be finite, got {d}")
    return d


def distribution_exponent(distribution: float) -> float:
    """Return the curve exponent 2 ** distribution.

    Raises:
        InvalidParameterError: If the parameter is not a finite number or
            the exponent overflows or underflows to zero.
    """
    d = check_distribution(distribution)
    try:
        power = 2.0 ** d
    except OverflowError:
        raise InvalidParameterError(f"Distribution {d} overflows the exponent") from None
    # 0 ** 0 == 1 would turn level 0 white
    if power == 0.0:
        raise InvalidParameterError(f"Distribution {d} underflows the exponent to zero")
    return power


def value_at(index: int, level_count: int, distribution: float) -> int:
    """Intensity in [0, 255] for one level of the curve.

    Args:
        index: Level index in [0, level_count - 1].
        level_count: Number of levels (>= 2).
        distribution: Raw distribution parameter.

    Returns:
        Integer intensity.
    """
    _check_level_count(level_count)
    if not 0 <= index <= level_count - 1:
        raise InvalidParameterError(
            f"Level index {index} outside [0, {level_count - 1}]"
        )
    return int(curve_values(level_count, distribution)[index])


def curve_values(level_count: int, distribution: float) -> np.ndarray:
    """Intensities for every level of the curve.

    Returns:
        (level_count,) int64 array of intensities, non-decreasing.
    """
    _check_level_count(level_count)
    power = distribution_exponent(distribution)
    x = np.arange(level_count, dtype=np.float64) / (level_count - 1)
    if power != 1.0:
        x = np.power(x, power)
    values = np.floor(x * MAX_CHANNEL_VALUE + 0.5)
    return np.clip(values, 0, MAX_CHANNEL_VALUE).astype(np.int64)
