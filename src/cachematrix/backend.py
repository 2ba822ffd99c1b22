"""Linear-solve backends used to compute matrix inverses.

Both backends expose the same small surface:

* ``solve(a)`` returns the inverse of ``a``.
* ``solve(a, b, ...)`` solves ``a @ x = b`` and returns ``x``.

Errors raised by the underlying library (``numpy.linalg.LinAlgError`` for a
singular or non-square matrix, for instance) are not caught here.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from . import config
from .utils import to_numpy


# ---------------------------------------------------------------------------
# NumpyBackend -- default, always available
# ---------------------------------------------------------------------------


class NumpyBackend:
    """Backend that delegates to ``numpy.linalg``."""

    name = "numpy"

    def is_available(self) -> bool:
        return True

    def solve(self, a: Any, *args: Any, **kwargs: Any) -> np.ndarray:
        a = to_numpy(a)
        if not args and "b" not in kwargs:
            return np.linalg.inv(a, **kwargs)
        if args:
            b, *rest = args
        else:
            b, rest = kwargs.pop("b"), []
        return np.linalg.solve(a, to_numpy(b), *rest, **kwargs)


# ---------------------------------------------------------------------------
# MLXBackend -- optional, needs ``pip install cachematrix[mlx]``
# ---------------------------------------------------------------------------


class MLXBackend:
    """Backend that delegates to ``mlx.core.linalg`` on the CPU stream.

    MLX only implements its linear-algebra routines on the CPU, so every
    call is pinned to ``mx.cpu``. Inputs are cast to float32.
    """

    name = "mlx"

    def __init__(self) -> None:
        try:
            import mlx.core as mx
            self._mx = mx
        except Exception as exc:
            self._mx = None
            self._import_error = exc

    def is_available(self) -> bool:
        return self._mx is not None

    def _require(self) -> Any:
        if self._mx is None:
            raise RuntimeError(
                "MLX backend requires mlx. Install with: pip install cachematrix[mlx]"
            ) from self._import_error
        return self._mx

    def array(self, x: Any) -> Any:
        mx = self._require()
        if isinstance(x, mx.array):
            return x.astype(mx.float32)
        return mx.array(to_numpy(x).astype(np.float32))

    def solve(self, a: Any, *args: Any, **kwargs: Any) -> Any:
        mx = self._require()
        kwargs.setdefault("stream", mx.cpu)
        if not args and "b" not in kwargs:
            return mx.linalg.inv(self.array(a), **kwargs)
        if args:
            b, *rest = args
        else:
            b, rest = kwargs.pop("b"), []
        return mx.linalg.solve(self.array(a), self.array(b), *rest, **kwargs)


Backend = NumpyBackend | MLXBackend

_BACKENDS = {
    "numpy": NumpyBackend,
    "mlx": MLXBackend,
}


def get_backend(name: str | None = None) -> Backend:
    """Factory function to get a solve backend by name.

    Args:
        name: One of ``"numpy"``, ``"mlx"``. ``None`` reads
            ``CACHEMATRIX_BACKEND`` and falls back to ``"numpy"``.

    Returns:
        A backend instance.
    """
    if name is None:
        name = config.backend_name()
    try:
        cls = _BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown solve backend: {name!r}. "
            f"Choose from: {', '.join(_BACKENDS)}"
        ) from None
    return cls()
