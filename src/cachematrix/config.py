"""Environment-driven defaults.

- ``CACHEMATRIX_BACKEND`` -- default solve backend (``numpy`` or ``mlx``)
- ``CACHEMATRIX_NOTICE``  -- log a notice when a cached inverse is returned
  (default on)
"""

from __future__ import annotations

import os

ENV_BACKEND = "CACHEMATRIX_BACKEND"
ENV_NOTICE = "CACHEMATRIX_NOTICE"

DEFAULT_BACKEND = "numpy"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid {name}={raw!r}; expected one of 1/0, true/false, yes/no, on/off.")


def backend_name() -> str:
    raw = os.environ.get(ENV_BACKEND, "").strip().lower()
    return raw or DEFAULT_BACKEND


def cache_notice_enabled() -> bool:
    return _parse_bool_env(ENV_NOTICE, True)
