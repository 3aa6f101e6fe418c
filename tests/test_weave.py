# tests/test_weave.py
from collections import deque

from hexweave.config import WeaveMazeConfig
from hexweave.directions import RECT_DELTA, RECT_OPPOSITE, TUNNEL_EW, TUNNEL_NS, RectDir, is_tunnel
from hexweave.grid import RECT, BorderGrid
from hexweave.mapgen.generator import generate_weave_maze
from hexweave.mapgen.weave import (
    _crossing_would_cycle, build_edges, complete_kruskal, decorate_weave,
)
from hexweave.rng import SeededRandom
from hexweave.unionfind import UnionFind

# Rect bits are passages. A crossing cell is open on all four sides: two
# sides belong to the cell (the passage on top), the other two to a
# separate "under" node.

def open_side(mask, d):
    return bool(mask & d) or is_tunnel(mask)

def node(cell, mask, d):
    if is_tunnel(mask) and not mask & d:
        return ("under", cell)
    return cell

def passage_graph(grid):
    nodes = set(grid.cells())
    edges = []
    for x, y in grid.cells():
        m = grid.get(x, y)
        if is_tunnel(m):
            nodes.add(("under", (x, y)))
        for d in (RectDir.S, RectDir.E):
            dx, dy = RECT_DELTA[d]
            nx, ny = x + dx, y + dy
            if not grid.in_bounds(nx, ny):
                continue
            nm = grid.get(nx, ny)
            opp = RECT_OPPOSITE[d]
            assert open_side(m, d) == open_side(nm, opp), f"asymmetric at {(x, y)} {d!r}"
            if open_side(m, d):
                edges.append((node((x, y), m, d), node((nx, ny), nm, opp)))
    return nodes, edges

def connected(nodes, edges):
    adj = {n: [] for n in nodes}
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    start = next(iter(nodes))
    seen = {start}
    q = deque([start])
    while q:
        for n in adj[q.popleft()]:
            if n not in seen:
                seen.add(n)
                q.append(n)
    return len(seen) == len(nodes)

def tunnels_of(grid):
    return [(x, y) for x, y in grid.cells() if is_tunnel(grid.get(x, y))]

def assert_weave_tree(grid):
    cells = grid.width * grid.height
    nodes, edges = passage_graph(grid)
    assert len(edges) == cells - 1 + len(tunnels_of(grid))
    assert connected(nodes, edges)
    for x, y in grid.cells():
        for d in (RectDir.N, RectDir.S, RectDir.E, RectDir.W):
            dx, dy = RECT_DELTA[d]
            if not grid.in_bounds(x + dx, y + dy):
                assert not grid.get(x, y) & d

def test_7x7_seed7_leaves_nothing_unconnected():
    res = generate_weave_maze(WeaveMazeConfig(width=7, height=7, max_failures=5, seed=7))
    assert res.sets.components() == 1
    cells = list(res.grid.cells())
    for c in cells:
        assert res.sets.connected(cells[0], c)
    assert_weave_tree(res.grid)

def test_same_seed_same_weave():
    cfg = WeaveMazeConfig(width=10, height=10, seed=42)
    a = generate_weave_maze(cfg)
    b = generate_weave_maze(cfg)
    assert a.grid.snapshot() == b.grid.snapshot()
    assert a.report.tunnels == b.report.tunnels

def test_various_shapes_are_weave_trees():
    for w, h, fails, seed in [(1, 1, 5, 0), (2, 2, 5, 1), (1, 8, 5, 2), (3, 3, 5, 3),
                              (9, 4, 3, 4), (12, 12, 20, 5), (15, 15, 50, 6)]:
        res = generate_weave_maze(WeaveMazeConfig(width=w, height=h, max_failures=fails, seed=seed))
        assert_weave_tree(res.grid)
        assert res.sets.components() == 1

def test_large_grid_gets_crossings():
    res = generate_weave_maze(WeaveMazeConfig(width=20, height=20, max_failures=50, seed=3))
    assert res.report.tunnels
    assert set(res.report.tunnels) == set(tunnels_of(res.grid))

def test_crossing_neighbors_face_the_crossing():
    res = generate_weave_maze(WeaveMazeConfig(width=20, height=20, max_failures=50, seed=8))
    g = res.grid
    for cx, cy in res.report.tunnels:
        assert g.get(cx, cy) in (TUNNEL_NS, TUNNEL_EW)
        assert 1 <= cx < g.width - 1 and 1 <= cy < g.height - 1
        assert g.has_flag(cx, cy - 1, RectDir.S)
        assert g.has_flag(cx, cy + 1, RectDir.N)
        assert g.has_flag(cx + 1, cy, RectDir.W)
        assert g.has_flag(cx - 1, cy, RectDir.E)

def test_decoration_stops_after_max_failures():
    for fails in (1, 5, 12):
        grid = BorderGrid(9, 9, RECT)
        sets = UnionFind(grid.cells())
        edges = build_edges(9, 9)
        report = decorate_weave(grid, sets, edges, SeededRandom(21), fails)
        assert report.longest_failure_run == fails
        assert report.attempts >= fails + len(report.tunnels)

def test_decoration_drops_decided_edges():
    grid = BorderGrid(12, 12, RECT)
    sets = UnionFind(grid.cells())
    edges = build_edges(12, 12)
    total = len(edges)
    report = decorate_weave(grid, sets, edges, SeededRandom(4), 30)
    assert report.tunnels
    assert len(edges) == total - 4 * len(report.tunnels)
    crossings = set(report.tunnels)
    for x, y, d in edges:
        dx, dy = RECT_DELTA[d]
        assert (x, y) not in crossings
        assert (x + dx, y + dy) not in crossings

def test_decoration_keeps_remaining_edge_order():
    grid = BorderGrid(8, 8, RECT)
    edges = build_edges(8, 8)
    original = list(edges)
    decorate_weave(grid, UnionFind(grid.cells()), edges, SeededRandom(2), 10)
    it = iter(original)
    assert all(e in it for e in edges)  # subsequence

def test_no_crossings_without_interior():
    for w, h in [(2, 9), (9, 2), (1, 1)]:
        grid = BorderGrid(w, h, RECT)
        report = decorate_weave(grid, UnionFind(grid.cells()), build_edges(w, h), SeededRandom(0), 5)
        assert report.tunnels == [] and report.attempts == 0

def test_crossing_check():
    uf = UnionFind([(1, 0), (1, 2), (2, 1), (0, 1)])
    n, s, e, w = (1, 0), (1, 2), (2, 1), (0, 1)
    assert not _crossing_would_cycle(uf, n, s, e, w)
    uf.union(n, e)
    assert not _crossing_would_cycle(uf, n, s, e, w)
    uf.union(s, w)
    # N-S would now also join E-W
    assert _crossing_would_cycle(uf, n, s, e, w)

def test_build_edges_order():
    assert build_edges(3, 2) == [
        (1, 0, RectDir.W), (2, 0, RectDir.W),
        (0, 1, RectDir.N), (1, 1, RectDir.N), (1, 1, RectDir.W),
        (2, 1, RectDir.N), (2, 1, RectDir.W),
    ]

def test_plain_kruskal_opens_cells_minus_one():
    grid = BorderGrid(4, 4, RECT)
    sets = UnionFind(grid.cells())
    edges = build_edges(4, 4)
    opened = complete_kruskal(grid, sets, edges)
    assert opened == 15
    assert edges == []
    assert_weave_tree(grid)
