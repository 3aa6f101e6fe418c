# src/hexweave/mapgen/prim.py
# Randomized Prim's algorithm on the hex grid.
# Cell status only moves forward: unvisited -> FRONTIER -> IN.

from typing import Callable, List, Optional, Tuple

from ..directions import HEX_ALL_SIDES, HexDir
from ..grid import HEX, BorderGrid
from ..hexgeom import direction, opposite
from ..log import get_logger
from ..rng import SeededRandom

log = get_logger(__name__)

XY = Tuple[int, int]
StepHook = Callable[[BorderGrid, XY], None]


def add_frontier(grid: BorderGrid, x: int, y: int, frontier: List[XY]) -> None:
    """Queue a cell next to the IN region unless it is IN or queued already."""
    if grid.in_bounds(x, y) and not grid.has_flag(x, y, HexDir.IN) and (x, y) not in frontier:
        grid.set_on(x, y, HexDir.FRONTIER)
        frontier.append((x, y))


def mark(grid: BorderGrid, x: int, y: int, frontier: List[XY]) -> None:
    """
    Bring a cell IN: every border goes up (one comes down again when the cell
    is linked to the tree) and its neighbors join the frontier.
    """
    grid.set_all(x, y, HEX_ALL_SIDES | HexDir.IN)
    for nx, ny, _ in grid.neighbors(x, y):
        add_frontier(grid, nx, ny, frontier)


def neighbors_in(grid: BorderGrid, x: int, y: int) -> List[XY]:
    return [(nx, ny) for nx, ny, _ in grid.neighbors(x, y) if grid.has_flag(nx, ny, HexDir.IN)]


def carve_prim(
    grid: BorderGrid,
    rng: SeededRandom,
    on_step: Optional[StepHook] = None,
) -> XY:
    """
    Grow a spanning tree over `grid` and return the start cell.
    The grid must be a fresh hex grid; it is left holding border bits only.
    """
    if grid.topology != HEX:
        raise ValueError("Prim's generator needs a hex grid")

    frontier: List[XY] = []
    start = (rng.below(grid.width), rng.below(grid.height))
    mark(grid, start[0], start[1], frontier)
    log.debug("prim start=%s frontier=%d", start, len(frontier))
    if on_step:
        on_step(grid, start)

    steps = 0
    while frontier:
        x, y = rng.pop_random(frontier)
        mark(grid, x, y, frontier)

        # link to one random IN neighbor
        nx, ny = rng.choice(neighbors_in(grid, x, y))
        d = direction((x, y), (nx, ny))
        grid.set_off(x, y, d)
        grid.set_off(nx, ny, opposite(d))
        steps += 1
        if on_step:
            on_step(grid, (x, y))

    grid.clear_status()
    log.debug("prim linked %d cells", steps)
    return start
