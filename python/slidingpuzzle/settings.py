"""Package-wide defaults, overridable from the environment.

``SLIDINGPUZZLE_STORAGE``
    Storage used when a constructor is not told otherwise:
    ``auto`` (default), ``array`` or ``packed``.
``SLIDINGPUZZLE_PACKED_MAX_SIDE``
    Largest side that ``auto`` stores as a packed integer (default 4,
    at least 1).
"""

from __future__ import annotations

import os

from slidingpuzzle.errors import InvalidArgumentError


def env_int(name: str, default: int, minimum: int) -> int:
    """Read integer setting *name*, falling back to *default* when unset."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {raw!r}."
        ) from None
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value}.")
    return value


DEFAULT_STORAGE: str = os.environ.get("SLIDINGPUZZLE_STORAGE", "auto").lower()
PACKED_MAX_SIDE: int = env_int("SLIDINGPUZZLE_PACKED_MAX_SIDE", 4, minimum=1)

# Random blank moves per cell when scrambling, e.g. 1600 for a 4×4 board.
SCRAMBLE_FACTOR: int = 100
