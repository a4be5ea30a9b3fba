"""PosterLevels: power-curve luminance posterization for RGBA images."""

__version__ = "0.1.0"

from posterlevels.core.channels import color_for
from posterlevels.core.levels import LevelSet, level_catalog
from posterlevels.core.quantize import posterize, quantize, quantize_buffer
from posterlevels.core.table import QuantizationTable, build_table
from posterlevels.core.types import ChannelMode, PixelBuffer, PosterizeParams
from posterlevels.pipeline.session import PosterizeSession

__all__ = [
    "ChannelMode",
    "LevelSet",
    "PixelBuffer",
    "PosterizeParams",
    "PosterizeSession",
    "QuantizationTable",
    "build_table",
    "color_for",
    "level_catalog",
    "posterize",
    "quantize",
    "quantize_buffer",
    "__version__",
]
