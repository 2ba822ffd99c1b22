"""cachematrix -- memoized matrix inversion.

    >>> import numpy as np
    >>> from cachematrix import make_cache_matrix, cache_solve
    >>> m = make_cache_matrix(np.array([[2.0, 0.0], [0.0, 2.0]]))
    >>> cache_solve(m)
    array([[0.5, 0. ],
           [0. , 0.5]])

The second ``cache_solve(m)`` returns the stored inverse without solving
again; ``m.set_matrix(...)`` clears it.
"""

from __future__ import annotations

from .backend import MLXBackend, NumpyBackend, get_backend
from .holder import CacheMatrix, CacheStats, make_cache_matrix
from .solve import SingularMatrixError, cache_solve

__version__ = "0.1.0"

__all__ = [
    "CacheMatrix",
    "CacheStats",
    "MLXBackend",
    "NumpyBackend",
    "SingularMatrixError",
    "cache_solve",
    "get_backend",
    "make_cache_matrix",
]
