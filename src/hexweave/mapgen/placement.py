# src/hexweave/mapgen/placement.py
# Markers on the value plane of a finished hex maze.

from typing import List, Tuple

from ..grid import ENEMY, PLAYER, SHELL, ValuePlane
from ..hexgeom import line_of_sight
from ..rng import SeededRandom

XY = Tuple[int, int]


def place_random_marker(values: ValuePlane, rng: SeededRandom, marker: int) -> XY:
    """
    Drop `marker` on a uniformly random cell (two draws, x then y).
    Cells are not checked for an existing marker; a later marker overwrites.
    """
    x = rng.below(values.width)
    y = rng.below(values.height)
    values.set(x, y, marker)
    return (x, y)


def place_player_and_enemy(values: ValuePlane, rng: SeededRandom) -> Tuple[XY, XY]:
    player = place_random_marker(values, rng, PLAYER)
    enemy = place_random_marker(values, rng, ENEMY)
    return player, enemy


def mark_line_of_sight(values: ValuePlane, frm: XY, to: XY) -> List[XY]:
    """
    Trace frm -> to and mark the cells in between as SHELL, leaving
    player/enemy markers alone. Raises PathDivergence (nothing is marked)
    when the pair is outside what line_of_sight can trace.
    """
    path = line_of_sight(frm, to, values.width, values.height)
    for x, y in path:
        if values.get(x, y) not in (PLAYER, ENEMY):
            values.set(x, y, SHELL)
    return path
