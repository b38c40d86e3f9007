"""Cell storage variants for :class:`~slidingpuzzle.models.puzzle.PuzzleState`.

Two layouts share one small interface, addressed by flat row-major index:

* :class:`ArrayStorage`: a plain list, one int per cell.
* :class:`PackedStorage`: every cell packed into a single int using
  ``bits`` bits per cell; copies are a single int copy.

Neither variant validates indices or values; the state does that.
"""

from __future__ import annotations

from enum import StrEnum

from slidingpuzzle import settings
from slidingpuzzle.errors import InvalidArgumentError


class StorageKind(StrEnum):
    AUTO = "auto"
    ARRAY = "array"
    PACKED = "packed"


class ArrayStorage:
    """One list slot per cell."""

    __slots__ = ("_cells",)

    kind = StorageKind.ARRAY

    def __init__(self, size: int) -> None:
        self._cells: list[int] = [0] * size

    def get(self, index: int) -> int:
        return self._cells[index]

    def set(self, index: int, value: int) -> None:
        self._cells[index] = value

    def swap(self, a: int, b: int) -> None:
        cells = self._cells
        cells[a], cells[b] = cells[b], cells[a]

    def values(self) -> tuple[int, ...]:
        return tuple(self._cells)

    def copy(self) -> ArrayStorage:
        other = ArrayStorage.__new__(ArrayStorage)
        other._cells = self._cells[:]
        return other


class PackedStorage:
    """All cells in one int, cell ``i`` at bits ``[i*bits, (i+1)*bits)``."""

    __slots__ = ("_size", "_bits", "_mask", "_word")

    kind = StorageKind.PACKED

    def __init__(self, size: int) -> None:
        self._size = size
        self._bits = max(1, (size - 1).bit_length())
        self._mask = (1 << self._bits) - 1
        self._word = 0

    @property
    def word(self) -> int:
        return self._word

    def get(self, index: int) -> int:
        return (self._word >> (index * self._bits)) & self._mask

    def set(self, index: int, value: int) -> None:
        shift = index * self._bits
        self._word = (self._word & ~(self._mask << shift)) | (value << shift)

    def swap(self, a: int, b: int) -> None:
        va, vb = self.get(a), self.get(b)
        self.set(a, vb)
        self.set(b, va)

    def values(self) -> tuple[int, ...]:
        word, bits, mask = self._word, self._bits, self._mask
        return tuple((word >> (i * bits)) & mask for i in range(self._size))

    def copy(self) -> PackedStorage:
        other = PackedStorage.__new__(PackedStorage)
        other._size = self._size
        other._bits = self._bits
        other._mask = self._mask
        other._word = self._word
        return other


Storage = ArrayStorage | PackedStorage


def resolve_kind(side: int, kind: StorageKind | str | None = None) -> StorageKind:
    """Turn ``kind`` (or the configured default) into a concrete layout."""
    raw = settings.DEFAULT_STORAGE if kind is None else kind
    try:
        resolved = StorageKind(str(raw).lower())
    except ValueError:
        choices = ", ".join(k.value for k in StorageKind)
        raise InvalidArgumentError(
            f"Unknown storage {raw!r}; expected one of: {choices}."
        ) from None
    if resolved is StorageKind.AUTO:
        if side <= settings.PACKED_MAX_SIDE:
            return StorageKind.PACKED
        return StorageKind.ARRAY
    return resolved


def make_storage(side: int, kind: StorageKind | str | None = None) -> Storage:
    """Allocate zeroed storage for a ``side``×``side`` board."""
    if resolve_kind(side, kind) is StorageKind.PACKED:
        return PackedStorage(side * side)
    return ArrayStorage(side * side)
