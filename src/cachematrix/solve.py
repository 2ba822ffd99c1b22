"""Compute-or-fetch access to a :class:`CacheMatrix` inverse."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from . import config
from .backend import Backend, get_backend
from .holder import CacheMatrix
from .utils import describe_shape

logger = logging.getLogger("cachematrix.solve")

# Raised by the NumPy backend for singular or non-square input. This is the
# library's own exception class, re-exported under a descriptive name.
SingularMatrixError = np.linalg.LinAlgError


def cache_solve(
    holder: CacheMatrix,
    *args: Any,
    backend: Backend | str | None = None,
    **kwargs: Any,
) -> Any:
    """Return the inverse of ``holder``'s matrix, computing it at most once.

    On a cache hit the stored object is returned as-is. On a miss the matrix
    is handed to ``backend.solve`` together with ``*args``/``**kwargs``
    (e.g. a right-hand side ``b``), and the result is stored in the holder.

    Args:
        holder: The :class:`CacheMatrix` to read and fill.
        *args: Forwarded to the backend's ``solve``.
        backend: A backend instance or name. Defaults to
            ``CACHEMATRIX_BACKEND`` (``"numpy"`` when unset).
        **kwargs: Forwarded to the backend's ``solve``.

    Returns:
        The cached or freshly computed inverse.

    Raises:
        SingularMatrixError: (NumPy backend) if the matrix is singular or not
            square. The holder's cache is left empty so the next call retries.
        ValueError: if ``CACHEMATRIX_NOTICE`` is invalid. This is checked
            before the cache is read, so hits and misses fail alike and the
            stats are unchanged.
    """
    notice = config.cache_notice_enabled()

    inverse = holder.get_cached_inverse()
    if inverse is not None:
        if notice:
            logger.info("getting cached data")
        holder.stats.hits += 1
        return inverse

    if backend is None or isinstance(backend, str):
        backend = get_backend(backend)

    data = holder.get_matrix()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("computing inverse of %s matrix with %s backend", describe_shape(data), backend.name)
    inverse = backend.solve(data, *args, **kwargs)
    holder.set_cached_inverse(inverse)
    holder.stats.misses += 1
    return inverse
