"""Interactive posterization session.

Holds the parameters a user adjusts one action at a time (level up/down,
distribution slider, channel pick, quantization on/off) together with the
current source image. Every mutation rebuilds the quantization table
synchronously, so ``table`` always reflects the current parameters.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

from posterlevels.config import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_PREVIEW_HEIGHT,
    DEFAULT_PREVIEW_WIDTH,
    DISTRIBUTION_DECIMALS,
    DISTRIBUTION_MAX,
    DISTRIBUTION_MIN,
)
from posterlevels.core.levels import LevelSet
from posterlevels.core.quantize import quantize_buffer
from posterlevels.core.table import QuantizationTable, build_table_for
from posterlevels.core.types import ChannelMode, PixelBuffer, PosterizeParams
from posterlevels.pipeline.preview import render_preview_strip

logger = logging.getLogger(__name__)


def parse_distribution(raw: object) -> float:
    """Parse a raw distribution value, failing closed to the default.

    None, booleans, non-numeric strings, NaN and infinities become
    DEFAULT_DISTRIBUTION. Finite values are clamped to the slider range and
    snapped to its 0.1 step.
    """
    if raw is None or isinstance(raw, bool):
        logger.warning("Invalid distribution %r, using %.1f", raw, DEFAULT_DISTRIBUTION)
        return DEFAULT_DISTRIBUTION

    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        logger.warning("Invalid distribution %r, using %.1f", raw, DEFAULT_DISTRIBUTION)
        return DEFAULT_DISTRIBUTION

    if not math.isfinite(value):
        logger.warning("Non-finite distribution %r, using %.1f", raw, DEFAULT_DISTRIBUTION)
        return DEFAULT_DISTRIBUTION

    value = min(max(value, DISTRIBUTION_MIN), DISTRIBUTION_MAX)
    # round() can return -0.0; normalize so it formats as "0.0"
    return round(value, DISTRIBUTION_DECIMALS) + 0.0


class PosterizeSession:
    """Current parameters, source image, and the table derived from them."""

    def __init__(
        self,
        level_set: Optional[LevelSet] = None,
        distribution: object = DEFAULT_DISTRIBUTION,
        channel: object = ChannelMode.LUMINANCE,
        enabled: bool = True,
        parallel: bool = False,
    ):
        self.level_set = level_set if level_set is not None else LevelSet()
        self.parallel = parallel
        self._distribution = parse_distribution(distribution)
        self._channel = ChannelMode.parse(channel)
        self._enabled = bool(enabled)
        self._image: Optional[PixelBuffer] = None
        self._table: QuantizationTable = self._build()

    # -- derived state -----------------------------------------------------

    def _build(self) -> QuantizationTable:
        return build_table_for(self.params)

    def _rebuild(self) -> None:
        self._table = self._build()

    @property
    def params(self) -> PosterizeParams:
        return PosterizeParams(
            level_count=self.level_set.current(),
            distribution=self._distribution,
            channel=self._channel,
        )

    @property
    def table(self) -> QuantizationTable:
        return self._table

    @property
    def level_count(self) -> int:
        return self.level_set.current()

    @property
    def distribution(self) -> float:
        return self._distribution

    @property
    def channel(self) -> ChannelMode:
        return self._channel

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def image(self) -> Optional[PixelBuffer]:
        return self._image

    # -- user actions ------------------------------------------------------

    def increase_levels(self) -> int:
        count = self.level_set.increase()
        self._rebuild()
        return count

    def decrease_levels(self) -> int:
        count = self.level_set.decrease()
        self._rebuild()
        return count

    def set_distribution(self, raw: object) -> float:
        self._distribution = parse_distribution(raw)
        self._rebuild()
        return self._distribution

    def reset_distribution(self) -> float:
        return self.set_distribution(DEFAULT_DISTRIBUTION)

    def set_channel(self, raw: object) -> ChannelMode:
        self._channel = ChannelMode.parse(raw)
        self._rebuild()
        return self._channel

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def load(self, image: PixelBuffer) -> None:
        """Replace the source image."""
        self._image = image
        logger.debug("Loaded %dx%d source image", image.width, image.height)

    def load_file(self, filepath: str | Path) -> PixelBuffer:
        from posterlevels.io.image import load_image

        image, _ = load_image(filepath)
        self.load(image)
        return image

    # -- output ------------------------------------------------------------

    def render(self) -> Optional[PixelBuffer]:
        """Processed copy of the source image, or None if none is loaded."""
        if self._image is None:
            return None
        if not self._enabled:
            return self._image.copy()
        return quantize_buffer(self._image, self._table, parallel=self.parallel)

    def preview_strip(
        self,
        width: int = DEFAULT_PREVIEW_WIDTH,
        height: int = DEFAULT_PREVIEW_HEIGHT,
    ) -> PixelBuffer:
        return render_preview_strip(self._table, width, height)
