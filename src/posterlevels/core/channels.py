"""Map a quantized intensity onto an output RGB triplet."""

from __future__ import annotations

from typing import Optional

import numpy as np

from posterlevels.core.types import ChannelMode

# Channel slot written for each isolated mode. LUMINANCE writes all three.
_CHANNEL_SLOTS = (
    (ChannelMode.RED, 0),
    (ChannelMode.GREEN, 1),
    (ChannelMode.BLUE, 2),
)


def _slot(channel: object) -> Optional[int]:
    """Index of the isolated channel, or None for luminance output."""
    mode = ChannelMode.parse(channel)
    for isolated, slot in _CHANNEL_SLOTS:
        if mode is isolated:
            return slot
    return None


def color_for(intensity: int, channel: object) -> tuple[int, int, int]:
    """Output color for one intensity.

    Channel values are parsed like ``ChannelMode.parse``; unrecognized ones
    fall through to luminance replication. Intensity is clamped to [0, 255].
    """
    v = min(max(int(intensity), 0), 255)
    slot = _slot(channel)
    if slot is None:
        return (v, v, v)
    color = [0, 0, 0]
    color[slot] = v
    return (color[0], color[1], color[2])


def colors_for(intensities: np.ndarray, channel: object) -> np.ndarray:
    """Vectorized ``color_for``.

    Args:
        intensities: (N,) integer intensities in [0, 255].
        channel: Channel mode.

    Returns:
        (N, 3) uint8 colors.
    """
    values = np.clip(np.asarray(intensities), 0, 255).astype(np.uint8)
    slot = _slot(channel)
    if slot is None:
        return np.repeat(values[:, np.newaxis], 3, axis=1)

    out = np.zeros((values.shape[0], 3), dtype=np.uint8)
    out[:, slot] = values
    return out
