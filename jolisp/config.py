from __future__ import annotations
import os
from typing import Optional

# Defaults
_DEFAULT_MAX_DEPTH = 150


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_max_depth() -> Optional[int]:
    """Maximum evaluation nesting depth, or None when the limit is disabled.

    Read on every call so hosts (and tests) can change JOLISP_MAX_DEPTH
    between evaluations.
    """
    limit = int_from_env('JOLISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)
    return limit if limit > 0 else None
