"""Quantization table: the ordered output colors for one parameter set.

The table is a pure function of (level_count, distribution, channel). It is
never patched in place; any parameter change means building a new one.
The same table drives both image quantization and the preview strip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from posterlevels.core.channels import colors_for
from posterlevels.core.curve import check_distribution, curve_values
from posterlevels.core.types import ChannelMode, PosterizeParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class QuantizationTable:
    """Ordered output colors, one per level."""
    params: PosterizeParams
    colors: np.ndarray  # (N, 3) uint8, read-only
    intensities: np.ndarray  # (N,) int64, read-only

    @property
    def level_count(self) -> int:
        return self.colors.shape[0]

    def __len__(self) -> int:
        return self.colors.shape[0]

    def __getitem__(self, index: int) -> tuple[int, int, int]:
        r, g, b = self.colors[index]
        return int(r), int(g), int(b)

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        for i in range(len(self)):
            yield self[i]

    def as_tuples(self) -> list[tuple[int, int, int]]:
        return list(self)


def build_table(
    level_count: int,
    distribution: float,
    channel: ChannelMode = ChannelMode.LUMINANCE,
) -> QuantizationTable:
    """Build the quantization table for one parameter set.

    Entry i is ``color_for(value_at(i, level_count, distribution), channel)``.

    Raises:
        InvalidParameterError: If level_count < 2 or the distribution is not
            finite.
    """
    params = PosterizeParams(
        level_count=int(level_count),
        distribution=check_distribution(distribution),
        channel=ChannelMode.parse(channel),
    )
    return build_table_for(params)


def build_table_for(params: PosterizeParams) -> QuantizationTable:
    """Build the quantization table for a ``PosterizeParams``."""
    intensities = curve_values(params.level_count, params.distribution)
    colors = colors_for(intensities, params.channel)
    intensities.setflags(write=False)
    colors.setflags(write=False)
    logger.debug(
        "Built table: %d levels, distribution=%.2f, channel=%s",
        params.level_count, params.distribution, params.channel.value,
    )
    return QuantizationTable(params=params, colors=colors, intensities=intensities)
