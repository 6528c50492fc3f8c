"""Argument validation helpers shared by the public operations.

Each helper raises ``InvalidArgumentError`` before any side effect takes
place, so a rejected call never leaves partial state behind.
"""

from __future__ import annotations

import os
from numbers import Real
from typing import Any

from geoaccess.core.exceptions import InvalidArgumentError


def is_real(value: object) -> bool:
    """Return True for real numbers, excluding ``bool``."""
    return isinstance(value, Real) and not isinstance(value, bool)


def require_non_empty_str(value: Any, argument: str, *, stage: str = "") -> str:
    """Return *value* if it is a non-empty string.

    Raises:
        InvalidArgumentError: If *value* is not a string or is empty.
    """
    if not isinstance(value, str):
        msg = f"{argument} must be a string"
        raise InvalidArgumentError(msg, argument=argument, stage=stage)
    if not value:
        msg = f"{argument} must be a non-empty string"
        raise InvalidArgumentError(msg, argument=argument, stage=stage)
    return value


def require_path(value: Any, argument: str = "path", *, stage: str = "") -> str:
    """Coerce a string or ``os.PathLike`` into a non-empty path string."""
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    return require_non_empty_str(value, argument, stage=stage)


def require_real(value: Any, argument: str, *, stage: str = "") -> float:
    """Return *value* as a float if it is a real number."""
    if not is_real(value):
        msg = f"{argument} must be a number"
        raise InvalidArgumentError(msg, argument=argument, stage=stage)
    return float(value)


def require_non_negative_int(value: Any, argument: str, *, stage: str = "") -> int:
    """Return *value* if it is an integer >= 0 (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{argument} must be an integer"
        raise InvalidArgumentError(msg, argument=argument, stage=stage)
    if value < 0:
        msg = f"{argument} must be >= 0"
        raise InvalidArgumentError(msg, argument=argument, stage=stage)
    return value
