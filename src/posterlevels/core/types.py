"""Core data types and enums for PosterLevels.

CONVENTION:
    Pixel buffers are (H, W, 4) uint8 arrays in RGBA order, indexed as
    array[y, x, channel]. Flat byte buffers use the same row-major layout,
    so byte offset = (y * W + x) * 4 + channel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

from posterlevels.config import DEFAULT_DISTRIBUTION, LEVEL_CATALOG, DEFAULT_LEVEL_INDEX
from posterlevels.errors import InvalidInputError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, np.ndarray]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChannelMode(str, Enum):
    """Output channel for the quantized intensity."""
    LUMINANCE = "gray"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @classmethod
    def parse(cls, value: object) -> "ChannelMode":
        """Parse a channel selector, falling back to LUMINANCE.

        Accepts enum members and their string values ("gray", "red", ...),
        ignoring case and surrounding whitespace. Member names such as
        "LUMINANCE" are accepted too. Anything else maps to LUMINANCE.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key in (mode.value, mode.name.lower()):
                    return mode
        logger.debug("Unrecognized channel mode %r, using luminance", value)
        return cls.LUMINANCE


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PosterizeParams:
    """Immutable parameter set that fully determines a quantization table."""
    level_count: int = LEVEL_CATALOG[DEFAULT_LEVEL_INDEX]
    distribution: float = DEFAULT_DISTRIBUTION
    channel: ChannelMode = ChannelMode.LUMINANCE


@dataclass
class PixelBuffer:
    """Owned RGBA8 image buffer with bounds-checked pixel access."""
    array: np.ndarray  # (H, W, 4) uint8, indexed as [y, x, ch]

    def __post_init__(self):
        if not isinstance(self.array, np.ndarray):
            raise InvalidInputError(f"Expected ndarray, got {type(self.array).__name__}")
        if self.array.dtype != np.uint8:
            raise InvalidInputError(f"Pixel dtype {self.array.dtype} != uint8")
        if self.array.ndim != 3 or self.array.shape[2] != 4:
            raise InvalidInputError(
                f"Pixel array shape {self.array.shape} != expected (H, W, 4)"
            )
        if self.array.shape[0] == 0 or self.array.shape[1] == 0:
            raise InvalidInputError(f"Empty pixel array: {self.array.shape}")

    @property
    def width(self) -> int:
        return self.array.shape[1]

    @property
    def height(self) -> int:
        return self.array.shape[0]

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self.width * self.height

    @classmethod
    def from_bytes(cls, data: BytesLike, width: int, height: int) -> "PixelBuffer":
        """Copy a flat RGBA8 buffer into a new PixelBuffer.

        Raises:
            InvalidInputError: If dimensions are not positive or the buffer
                length is not width * height * 4.
        """
        if width <= 0 or height <= 0:
            raise InvalidInputError(f"Invalid buffer dimensions: {width}x{height}")

        if isinstance(data, np.ndarray):
            if data.dtype != np.uint8:
                raise InvalidInputError(f"Buffer dtype {data.dtype} != uint8")
            flat = data.reshape(-1)
        else:
            flat = np.frombuffer(data, dtype=np.uint8)

        expected = width * height * 4
        if flat.size != expected:
            raise InvalidInputError(
                f"Buffer length {flat.size} != {width}x{height}x4 = {expected}"
            )
        return cls(flat.reshape(height, width, 4).copy())

    def to_bytes(self) -> bytes:
        return np.ascontiguousarray(self.array).tobytes()

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the (r, g, b, a) value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )
        r, g, b, a = self.array[y, x]
        return int(r), int(g), int(b), int(a)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.array.copy())
