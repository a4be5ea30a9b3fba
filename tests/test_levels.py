"""Tests for the level catalog and clamped navigation."""

from __future__ import annotations

import pytest

from posterlevels.config import LEVEL_CATALOG
from posterlevels.core.levels import LevelSet, level_catalog
from posterlevels.errors import InvalidParameterError


class TestLevelCatalog:

    def test_default_catalog(self):
        assert level_catalog() == (5, 10, 15, 20, 25)

    def test_catalog_starts_above_one(self):
        """Every catalog entry must give a defined curve."""
        assert min(level_catalog()) >= 2


class TestLevelSet:
    """Tests for LevelSet navigation."""

    def test_default_selection(self):
        assert LevelSet().current() == 10

    def test_increase_and_decrease(self):
        levels = LevelSet()
        assert levels.increase() == 15
        assert levels.decrease() == 10
        assert levels.decrease() == 5

    def test_clamps_at_bottom(self):
        """Stepping below the first entry stays on it."""
        levels = LevelSet(index=0)
        for _ in range(3):
            assert levels.decrease() == 5
        assert levels.index == 0

    def test_clamps_at_top(self):
        """Stepping past the last entry stays on it, no wraparound."""
        levels = LevelSet(index=len(LEVEL_CATALOG) - 1)
        for _ in range(3):
            assert levels.increase() == 25
        assert levels.index == len(LEVEL_CATALOG) - 1

    def test_initial_index_clamped(self):
        assert LevelSet(index=99).current() == 25
        assert LevelSet(index=-4).current() == 5

    def test_select_clamps(self):
        levels = LevelSet()
        assert levels.select(-1) == 5
        assert levels.select(100) == 25
        assert levels.select(2) == 15

    def test_select_count(self):
        levels = LevelSet()
        assert levels.select_count(20) == 20
        assert levels.index == 3

    def test_select_count_not_in_catalog(self):
        levels = LevelSet()
        with pytest.raises(InvalidParameterError, match="not in catalog"):
            levels.select_count(7)
        assert levels.current() == 10

    def test_custom_catalog(self):
        levels = LevelSet(catalog=[2, 3, 4], index=0)
        assert levels.current() == 2
        assert levels.increase() == 3

    def test_catalog_with_single_level_rejected(self):
        with pytest.raises(InvalidParameterError):
            LevelSet(catalog=[1, 5])

    def test_empty_catalog_rejected(self):
        with pytest.raises(InvalidParameterError):
            LevelSet(catalog=[])

    def test_unordered_catalog_rejected(self):
        with pytest.raises(InvalidParameterError, match="increasing"):
            LevelSet(catalog=[10, 5])
