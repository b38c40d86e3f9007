from slidingpuzzle.engine.generator import PuzzleGenerator

__all__ = ["PuzzleGenerator"]
