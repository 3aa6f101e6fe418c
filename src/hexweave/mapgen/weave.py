# src/hexweave/mapgen/weave.py
# Weave maze on the rectangular grid: over/under crossings are laid down
# first, then Kruskal's algorithm fills in the rest. Kruskal's treats cells
# as separate sets, so the crossings just become pre-joined sets.

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..directions import RECT_DELTA, RECT_OPPOSITE, TUNNEL_EW, TUNNEL_NS, RectDir
from ..grid import RECT, BorderGrid
from ..log import get_logger
from ..rng import SeededRandom
from ..unionfind import UnionFind

log = get_logger(__name__)

XY = Tuple[int, int]
Edge = Tuple[int, int, RectDir]
StepHook = Callable[[BorderGrid, XY], None]


@dataclass
class DecorationReport:
    tunnels: List[XY]
    attempts: int
    longest_failure_run: int


def build_edges(width: int, height: int) -> List[Edge]:
    """Every interior wall once: the N and W edge of each cell, row-major."""
    edges: List[Edge] = []
    for y in range(height):
        for x in range(width):
            if y > 0:
                edges.append((x, y, RectDir.N))
            if x > 0:
                edges.append((x, y, RectDir.W))
    return edges


def _crossing_would_cycle(sets: UnionFind, n: XY, s: XY, e: XY, w: XY) -> bool:
    rn, rs, re, rw = sets.find(n), sets.find(s), sets.find(e), sets.find(w)
    if rn == rs or re == rw:
        return True
    # joining N-S would also join E-W
    return {rn, rs} == {re, rw}


def decorate_weave(
    grid: BorderGrid,
    sets: UnionFind,
    edges: List[Edge],
    rng: SeededRandom,
    max_failures: int,
    on_step: Optional[StepHook] = None,
) -> DecorationReport:
    """
    Lay down crossings at random interior cells until `max_failures`
    candidates in a row have been rejected. Each crossing pre-joins its
    N/S and E/W neighbor pairs and removes its four edges from `edges`
    (in place, keeping the order of the rest).
    """
    report = DecorationReport(tunnels=[], attempts=0, longest_failure_run=0)
    if grid.width < 3 or grid.height < 3:
        log.debug("weave: no interior cells in %dx%d, skipping crossings", grid.width, grid.height)
        return report

    fails = 0
    while fails < max_failures:
        report.attempts += 1
        cx = rng.below(grid.width - 2) + 1
        cy = rng.below(grid.height - 2) + 1

        n, s = (cx, cy - 1), (cx, cy + 1)
        e, w = (cx + 1, cy), (cx - 1, cy)

        if grid.get(cx, cy) != 0 or _crossing_would_cycle(sets, n, s, e, w):
            fails += 1
            report.longest_failure_run = max(report.longest_failure_run, fails)
            continue

        sets.union(n, s)
        sets.union(e, w)
        fails = 0

        over = TUNNEL_EW if rng.coin() else TUNNEL_NS
        grid.set_all(cx, cy, over)
        # the crossing cell itself belongs to the passage running over it
        sets.union(e if over == TUNNEL_EW else n, (cx, cy))
        grid.set_on(n[0], n[1], RectDir.S)
        grid.set_on(w[0], w[1], RectDir.E)
        grid.set_on(e[0], e[1], RectDir.W)
        grid.set_on(s[0], s[1], RectDir.N)

        edges[:] = [
            (x, y, d) for x, y, d in edges
            if not ((x, y) == (cx, cy)
                    or ((x, y) == e and d == RectDir.W)
                    or ((x, y) == s and d == RectDir.N))
        ]
        report.tunnels.append((cx, cy))
        if on_step:
            on_step(grid, (cx, cy))

    log.debug("weave: %d crossings in %d attempts", len(report.tunnels), report.attempts)
    return report


def complete_kruskal(
    grid: BorderGrid,
    sets: UnionFind,
    edges: List[Edge],
    on_step: Optional[StepHook] = None,
) -> int:
    """Consume `edges` from the end, opening every wall that joins two sets."""
    joined = 0
    while edges:
        x, y, d = edges.pop()
        dx, dy = RECT_DELTA[d]
        nx, ny = x + dx, y + dy

        if sets.union((x, y), (nx, ny)):
            grid.set_on(x, y, d)
            grid.set_on(nx, ny, RECT_OPPOSITE[d])
            joined += 1
            if on_step:
                on_step(grid, (x, y))
    log.debug("kruskal opened %d passages", joined)
    return joined


def carve_weave(
    grid: BorderGrid,
    rng: SeededRandom,
    max_failures: int,
    on_step: Optional[StepHook] = None,
) -> Tuple[UnionFind, DecorationReport]:
    if grid.topology != RECT:
        raise ValueError("weave generator needs a rectangular grid")

    sets = UnionFind(grid.cells())
    edges = build_edges(grid.width, grid.height)
    rng.shuffle(edges)

    report = decorate_weave(grid, sets, edges, rng, max_failures, on_step)
    complete_kruskal(grid, sets, edges, on_step)
    return sets, report
