"""Level catalog and clamped level selection."""

from __future__ import annotations

from typing import Sequence

from posterlevels.config import DEFAULT_LEVEL_INDEX, LEVEL_CATALOG, MIN_LEVEL_COUNT
from posterlevels.errors import InvalidParameterError


def level_catalog() -> tuple[int, ...]:
    """Return the default ordered catalog of permitted level counts."""
    return LEVEL_CATALOG


class LevelSet:
    """Ordered catalog of level counts with a clamped current selection.

    Navigation never wraps and never raises: stepping past either end of
    the catalog leaves the selection on the end entry.
    """

    def __init__(
        self,
        catalog: Sequence[int] = LEVEL_CATALOG,
        index: int = DEFAULT_LEVEL_INDEX,
    ):
        catalog = tuple(int(c) for c in catalog)
        if not catalog:
            raise InvalidParameterError("Level catalog must not be empty")
        if catalog[0] < MIN_LEVEL_COUNT:
            raise InvalidParameterError(
                f"Level counts must be >= {MIN_LEVEL_COUNT}, got {catalog[0]}"
            )
        if any(b <= a for a, b in zip(catalog, catalog[1:])):
            raise InvalidParameterError(f"Level catalog must be strictly increasing: {catalog}")

        self._catalog = catalog
        self._index = self._clamp(index)

    def _clamp(self, index: int) -> int:
        return min(max(0, index), len(self._catalog) - 1)

    @property
    def catalog(self) -> tuple[int, ...]:
        return self._catalog

    @property
    def index(self) -> int:
        return self._index

    def current(self) -> int:
        """Active level count."""
        return self._catalog[self._index]

    def select(self, index: int) -> int:
        self._index = self._clamp(index)
        return self.current()

    def select_count(self, count: int) -> int:
        """Select the catalog entry equal to ``count``.

        Raises:
            InvalidParameterError: If ``count`` is not in the catalog.
        """
        try:
            self._index = self._catalog.index(count)
        except ValueError:
            raise InvalidParameterError(
                f"Level count {count} not in catalog {list(self._catalog)}"
            ) from None
        return self.current()

    def increase(self) -> int:
        return self.select(self._index + 1)

    def decrease(self) -> int:
        return self.select(self._index - 1)

    def __repr__(self) -> str:
        return f"LevelSet(catalog={self._catalog}, index={self._index})"
