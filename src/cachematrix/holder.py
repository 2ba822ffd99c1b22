"""A matrix paired with a cache slot for its inverse.

Replacing the matrix through :meth:`CacheMatrix.set_matrix` always empties
the slot, so a cached inverse never outlives the matrix it was computed for.
Use :func:`cachematrix.solve.cache_solve` to fill and read the slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0

    @property
    def calls(self) -> int:
        return self.hits + self.misses


class CacheMatrix:
    """Holds a matrix and the last inverse computed for it.

    Not designed for concurrent use -- each caller should own its holder.
    """

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix
        self._inverse: Any = None
        self.stats = CacheStats()

    def set_matrix(self, matrix: Any) -> None:
        """Replace the matrix and drop any cached inverse."""
        self._matrix = matrix
        self._inverse = None

    def get_matrix(self) -> Any:
        return self._matrix

    def set_cached_inverse(self, inverse: Any) -> None:
        self._inverse = inverse

    def get_cached_inverse(self) -> Any | None:
        """Return the cached inverse, or ``None`` if none has been stored
        since the last :meth:`set_matrix`."""
        return self._inverse

    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        shape = getattr(self._matrix, "shape", None)
        return (
            f"CacheMatrix(shape={shape}, cached={self.has_cached_inverse()}, "
            f"hits={self.stats.hits}, misses={self.stats.misses})"
        )


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Wrap ``x`` in a :class:`CacheMatrix`.

    With no argument the holder starts from an empty ``0x0`` float matrix;
    call :meth:`CacheMatrix.set_matrix` to give it a real one.
    """
    if x is None:
        x = np.empty((0, 0), dtype=np.float64)
    return CacheMatrix(x)
