# src/hexweave/hexgeom.py
# Pure geometry over the sheared hex grid (see directions.py for the layout).
# Nothing here reads border masks; a grid is only needed for bounds checks.

from typing import List, Optional, Tuple

from .directions import HEX_DELTA, HEX_OPPOSITE, HEX_ORDER, HexDir
from .errors import InvalidInput, OutOfBounds, PathDivergence

Cell = Tuple[int, int]

_DELTA_TO_DIR = {delta: d for d, delta in HEX_DELTA.items()}


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _check(cell: Cell, width: Optional[int], height: Optional[int]) -> None:
    if width is None or height is None:
        return
    x, y = cell
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfBounds(x, y, width, height)


def neighbors(cell: Cell, width: int, height: int) -> List[Cell]:
    """Adjacent in-bounds cells in N, NE, SE, S, SW, NW order."""
    _check(cell, width, height)
    x, y = cell
    out = []
    for d in HEX_ORDER:
        dx, dy = HEX_DELTA[d]
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            out.append((nx, ny))
    return out


def adjacent(a: Cell, b: Cell) -> bool:
    return (b[0] - a[0], b[1] - a[1]) in _DELTA_TO_DIR


def direction(frm: Cell, to: Cell, width: Optional[int] = None,
              height: Optional[int] = None) -> HexDir:
    """
    Direction from `frm` to the adjacent cell `to`, classified by the signs
    of the coordinate deltas:

        dx>0 dy>0  N      dx<0 dy<0  S
        dx>0 dy=0  NE     dx<0 dy=0  SW
        dx=0 dy<0  SE     dx=0 dy>0  NW

    Cells that are not adjacent raise InvalidInput.
    """
    _check(frm, width, height)
    _check(to, width, height)
    dx, dy = to[0] - frm[0], to[1] - frm[1]
    if abs(dx) > 1 or abs(dy) > 1:
        raise InvalidInput(f"{frm} and {to} are not adjacent")
    d = _DELTA_TO_DIR.get((_sign(dx), _sign(dy)))
    if d is None:
        raise InvalidInput(f"{frm} and {to} are not adjacent")
    return d


def opposite(d: HexDir) -> HexDir:
    return HEX_OPPOSITE[d]


def distance(frm: Cell, to: Cell, width: Optional[int] = None,
             height: Optional[int] = None) -> int:
    """Distance in hexes. Along the N/S diagonal one step covers both axes."""
    _check(frm, width, height)
    _check(to, width, height)
    dx = to[0] - frm[0]
    dy = to[1] - frm[1]
    if _sign(dx) == _sign(dy):
        return max(abs(dx), abs(dy))
    return abs(dx) + abs(dy)


def line_of_sight(frm: Cell, to: Cell, width: Optional[int] = None,
                  height: Optional[int] = None) -> List[Cell]:
    """
    Cells along the segment frm -> to, both ends included, stepped with an
    integer error accumulator (Bresenham on the oblique axes).

    Only valid while the x extent dominates (|dx| >= |dy|). The walk gets
    |dx| advances; if it has not landed on `to` by then it raises
    PathDivergence with the partial path instead of returning a wrong one.
    When the deltas have opposite signs every diagonal advance is split into
    two adjacent hex steps, so consecutive cells are always neighbors.
    """
    _check(frm, width, height)
    _check(to, width, height)
    fx, fy = frm
    tx, ty = to
    dx, dy = tx - fx, ty - fy
    xone = 1 if dx >= 0 else -1
    yone = 1 if dy >= 0 else -1
    diagonal = _sign(dx) == _sign(dy)

    run, rise = 2 * abs(dx), 2 * abs(dy)
    factor = abs(dx)
    max_steps = abs(dx)

    x, y = fx, fy
    path = [(x, y)]
    steps = 0
    while (x, y) != (tx, ty):
        if steps >= max_steps:
            raise PathDivergence(frm, to, path)
        steps += 1
        factor += rise
        if factor >= run:
            factor -= run
            if diagonal:
                x += xone
                y += yone
            else:
                x += xone
                path.append((x, y))
                y += yone
        else:
            x += xone
        path.append((x, y))
    return path
