"""Tests for channel mode parsing and color mapping."""

from __future__ import annotations

import numpy as np
import pytest

from posterlevels.core.channels import color_for, colors_for
from posterlevels.core.table import build_table
from posterlevels.core.types import ChannelMode


class TestChannelModeParse:

    @pytest.mark.parametrize("raw, expected", [
        ("gray", ChannelMode.LUMINANCE),
        ("red", ChannelMode.RED),
        (" Green ", ChannelMode.GREEN),
        ("BLUE", ChannelMode.BLUE),
        ("luminance", ChannelMode.LUMINANCE),
        (ChannelMode.RED, ChannelMode.RED),
    ])
    def test_known_values(self, raw, expected):
        assert ChannelMode.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["purple", "", None, 3, object()])
    def test_unknown_falls_back_to_luminance(self, raw):
        assert ChannelMode.parse(raw) is ChannelMode.LUMINANCE


class TestColorFor:

    def test_luminance_replicates(self):
        assert color_for(77, ChannelMode.LUMINANCE) == (77, 77, 77)

    def test_isolated_channels(self):
        assert color_for(200, ChannelMode.RED) == (200, 0, 0)
        assert color_for(200, ChannelMode.GREEN) == (0, 200, 0)
        assert color_for(200, ChannelMode.BLUE) == (0, 0, 200)

    @pytest.mark.parametrize("channel", ["magenta", None, 42])
    def test_unknown_mode_replicates(self, channel):
        assert color_for(10, channel) == (10, 10, 10)

    @pytest.mark.parametrize("channel, expected", [
        ("RED", (10, 0, 0)),
        (" green", (0, 10, 0)),
        ("Blue", (0, 0, 10)),
    ])
    def test_channel_strings_parsed_like_table(self, channel, expected):
        """color_for and build_table agree on case-insensitive names."""
        assert color_for(10, channel) == expected
        assert build_table(5, 0.0, channel)[4] == color_for(255, channel)

    def test_intensity_clamped(self):
        assert color_for(300, ChannelMode.RED) == (255, 0, 0)
        assert color_for(-5, ChannelMode.LUMINANCE) == (0, 0, 0)


class TestColorsFor:

    def test_matches_scalar(self):
        intensities = np.array([0, 64, 128, 191, 255])
        for mode in list(ChannelMode) + ["unknown"]:
            expected = [color_for(v, mode) for v in intensities]
            np.testing.assert_array_equal(colors_for(intensities, mode), expected)

    def test_dtype_and_shape(self):
        out = colors_for(np.array([1, 2, 3]), ChannelMode.GREEN)
        assert out.dtype == np.uint8
        assert out.shape == (3, 3)
