# src/hexweave/errors.py
from typing import List, Optional, Tuple


class MazeError(Exception):
    """Base class for every condition the maze core reports."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width: int, height: int):
        super().__init__(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x},{y}) is outside the {width}x{height} grid")
        self.x, self.y = x, y
        self.width, self.height = width, height


class InvalidInput(MazeError, ValueError):
    pass


class PathDivergence(MazeError, RuntimeError):
    """
    Raised by line_of_sight when the stepping did not land on the target
    within its step bound. `path` holds the cells visited so far.
    """
    def __init__(self, frm: Tuple[int, int], to: Tuple[int, int],
                 path: Optional[List[Tuple[int, int]]] = None):
        super().__init__(f"line of sight {frm} -> {to} diverged after {len(path or []) - 1} steps")
        self.frm = frm
        self.to = to
        self.path = list(path or [])
