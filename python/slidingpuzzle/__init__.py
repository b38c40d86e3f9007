"""Sliding puzzle state: an N×N board value type for state-space search."""

import logging

from slidingpuzzle.errors import (
    IllegalMoveError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidStateError,
    MalformedEncodingError,
    PuzzleError,
    ValueOutOfRangeError,
)
from slidingpuzzle.models import Direction, PuzzleState, StorageKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Direction",
    "IllegalMoveError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MalformedEncodingError",
    "PuzzleError",
    "PuzzleState",
    "StorageKind",
    "ValueOutOfRangeError",
]
