from __future__ import annotations

from typing import Any

import numpy as np


def to_numpy(x: Any) -> np.ndarray:
    """Convert common matrix types to a NumPy array without copying when possible.

    Supports:
    - numpy.ndarray
    - mlx.core.array (via ``np.array``, which understands the buffer protocol)
    - torch.Tensor (via .detach().cpu().numpy())
    - nested lists/tuples and objects implementing __array__
    """
    if isinstance(x, np.ndarray):
        return x
    if hasattr(x, "detach") and hasattr(x, "cpu") and hasattr(x, "numpy"):
        return np.asarray(x.detach().cpu().numpy())
    return np.asarray(x)


def describe_shape(x: Any) -> str:
    shape = getattr(x, "shape", None)
    if shape is None:
        shape = np.shape(x)
    return "x".join(str(d) for d in shape) or "scalar"
