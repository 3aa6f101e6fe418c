# src/hexweave/grid.py
from dataclasses import dataclass, field
from typing import List, Tuple

from .directions import (
    HEX_DELTA, HEX_ORDER, HEX_STATUS, RECT_DELTA, RECT_ORDER, HexDir,
)
from .errors import InvalidDimensions, OutOfBounds

HEX = "hex"
RECT = "rect"

_TOPOLOGY = {
    HEX: (HEX_ORDER, HEX_DELTA),
    RECT: (RECT_ORDER, RECT_DELTA),
}

# Value plane markers (hex mazes); the core never interprets them.
EMPTY = 0
PLAYER, ENEMY, SHELL = 1, 2, 4


def _check_dims(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)


@dataclass
class BorderGrid:
    """
    Per-cell direction bitmasks, row-major in a flat buffer, (0,0) at the
    lower left for hex grids and the upper left for rectangular ones.
    """
    width: int
    height: int
    topology: str = HEX
    buf: List[int] = field(default_factory=list)

    def __post_init__(self):
        _check_dims(self.width, self.height)
        if self.topology not in _TOPOLOGY:
            raise ValueError(f"unknown topology {self.topology!r}")
        if not self.buf:
            self.buf = [0] * (self.width * self.height)
        elif len(self.buf) != self.width * self.height:
            raise ValueError("buffer size does not match dimensions")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set_all(self, x: int, y: int, mask: int) -> None:
        self.buf[self.idx(x, y)] = int(mask)

    def set_on(self, x: int, y: int, d: int) -> None:
        i = self.idx(x, y)
        self.buf[i] |= int(d)

    def set_off(self, x: int, y: int, d: int) -> None:
        i = self.idx(x, y)
        self.buf[i] &= ~int(d)

    def has_flag(self, x: int, y: int, d: int) -> bool:
        return (self.get(x, y) & d) == d

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int, int]]:
        """In-bounds neighbors as (nx, ny, dir) in the topology's fixed order."""
        self.idx(x, y)
        order, delta = _TOPOLOGY[self.topology]
        out = []
        for d in order:
            dx, dy = delta[d]
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                out.append((nx, ny, d))
        return out

    def cells(self):
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def draw_borders(self) -> None:
        """Wall off the outer rim of a hex grid."""
        if self.topology != HEX:
            raise ValueError("draw_borders only applies to hex grids")
        for x in range(self.width):  # bottom and top
            self.set_on(x, 0, HexDir.S | HexDir.SE)
            self.set_on(x, self.height - 1, HexDir.N | HexDir.NW)
        for y in range(self.height):  # left and right
            self.set_on(0, y, HexDir.S | HexDir.SW)
            self.set_on(self.width - 1, y, HexDir.N | HexDir.NE)

    def clear_status(self) -> None:
        for i, v in enumerate(self.buf):
            self.buf[i] = v & ~int(HEX_STATUS)

    def rows(self) -> List[Tuple[int, ...]]:
        """Read-only copy for renderers, rows indexed by y."""
        w = self.width
        return [tuple(self.buf[y * w:(y + 1) * w]) for y in range(self.height)]

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.buf)


@dataclass
class ValuePlane:
    """Opaque per-cell payload laid over a hex maze (player/enemy/shell markers)."""
    width: int
    height: int
    buf: List[int] = field(default_factory=list)

    def __post_init__(self):
        _check_dims(self.width, self.height)
        if not self.buf:
            self.buf = [EMPTY] * (self.width * self.height)
        elif len(self.buf) != self.width * self.height:
            raise ValueError("buffer size does not match dimensions")

    def idx(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y, self.width, self.height)
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def rows(self) -> List[Tuple[int, ...]]:
        w = self.width
        return [tuple(self.buf[y * w:(y + 1) * w]) for y in range(self.height)]
