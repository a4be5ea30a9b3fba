"""Tests for the interactive posterization session."""

from __future__ import annotations

import numpy as np
import pytest

from posterlevels.core.levels import LevelSet
from posterlevels.core.quantize import quantize_buffer
from posterlevels.core.table import build_table
from posterlevels.core.types import ChannelMode
from posterlevels.pipeline.session import PosterizeSession, parse_distribution


class TestParseDistribution:
    """Boundary parsing fails closed to 0."""

    @pytest.mark.parametrize("raw, expected", [
        ("0", 0.0),
        ("1.26", 1.3),
        (" -0.7 ", -0.7),
        (2, 2.0),
        (0.04, 0.0),
        (-0.04, 0.0),
    ])
    def test_valid(self, raw, expected):
        assert parse_distribution(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "abc", "nan", "inf", None, True, [1.0], float("nan")])
    def test_invalid_becomes_zero(self, raw):
        assert parse_distribution(raw) == 0.0

    def test_clamped_to_range(self):
        assert parse_distribution("12") == 3.0
        assert parse_distribution(-7.5) == -3.0

    def test_no_negative_zero(self):
        assert str(parse_distribution(-0.01)) == "0.0"


class TestSessionParameters:
    """Every mutation rebuilds the table."""

    def test_defaults(self):
        session = PosterizeSession()
        assert session.level_count == 10
        assert session.distribution == 0.0
        assert session.channel is ChannelMode.LUMINANCE
        assert session.enabled
        assert len(session.table) == 10

    def test_level_navigation_rebuilds(self):
        session = PosterizeSession()
        assert session.increase_levels() == 15
        assert len(session.table) == 15
        session.decrease_levels()
        session.decrease_levels()
        session.decrease_levels()
        assert session.level_count == 5
        assert len(session.table) == 5

    def test_distribution_rebuilds(self):
        session = PosterizeSession()
        before = session.table
        session.set_distribution("1.5")
        assert session.table is not before
        assert session.table.params.distribution == 1.5
        np.testing.assert_array_equal(session.table.colors, build_table(10, 1.5).colors)

    def test_malformed_distribution(self):
        session = PosterizeSession(distribution="1.0")
        session.set_distribution("not a number")
        assert session.distribution == 0.0
        np.testing.assert_array_equal(session.table.colors, build_table(10, 0.0).colors)

    def test_reset_distribution(self):
        session = PosterizeSession(distribution=2.5)
        assert session.reset_distribution() == 0.0
        assert session.table.params.distribution == 0.0

    def test_channel(self):
        session = PosterizeSession()
        assert session.set_channel("red") is ChannelMode.RED
        assert np.all(session.table.colors[:, 1:] == 0)
        assert session.set_channel("chartreuse") is ChannelMode.LUMINANCE

    def test_custom_level_set(self):
        session = PosterizeSession(level_set=LevelSet(catalog=[2, 3], index=0))
        assert session.table.as_tuples() == [(0, 0, 0), (255, 255, 255)]

    def test_params_snapshot(self):
        session = PosterizeSession(distribution=-1, channel="green")
        params = session.params
        session.increase_levels()
        assert params.level_count == 10
        assert session.params.level_count == 15


class TestSessionRender:

    def test_no_image(self):
        assert PosterizeSession().render() is None

    def test_render_uses_current_table(self, random_image):
        session = PosterizeSession(distribution=0.8, channel="blue")
        session.load(random_image)
        out = session.render()
        expected = quantize_buffer(random_image, session.table)
        np.testing.assert_array_equal(out.array, expected.array)

    def test_render_after_change(self, random_image):
        session = PosterizeSession()
        session.load(random_image)
        first = session.render()
        session.increase_levels()
        second = session.render()
        assert not np.array_equal(first.array, second.array)

    def test_passthrough(self, random_image):
        session = PosterizeSession()
        session.load(random_image)
        session.set_enabled(False)
        out = session.render()
        np.testing.assert_array_equal(out.array, random_image.array)
        assert out is not random_image

    def test_parallel_session(self, random_image):
        serial = PosterizeSession()
        threaded = PosterizeSession(parallel=True)
        serial.load(random_image)
        threaded.load(random_image)
        np.testing.assert_array_equal(serial.render().array, threaded.render().array)

    def test_load_file(self, sample_image_path):
        path, original = sample_image_path
        session = PosterizeSession()
        image = session.load_file(path)
        assert session.image is image
        np.testing.assert_array_equal(image.array, original.array)

    def test_preview_strip(self):
        session = PosterizeSession(channel="red")
        strip = session.preview_strip(width=50, height=2)
        assert strip.pixel(49, 1)[:3] == (255, 0, 0)
        assert strip.pixel(0, 0)[:3] == (0, 0, 0)
