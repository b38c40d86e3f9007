from slidingpuzzle.models.direction import Direction
from slidingpuzzle.models.puzzle import PuzzleState
from slidingpuzzle.models.storage import ArrayStorage, PackedStorage, StorageKind

__all__ = ["ArrayStorage", "Direction", "PackedStorage", "PuzzleState", "StorageKind"]
