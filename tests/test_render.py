# tests/test_render.py
from hexweave.config import HexMazeConfig, WeaveMazeConfig
from hexweave.directions import HEX_ALL_SIDES, TUNNEL_EW, TUNNEL_NS, RectDir
from hexweave.grid import HEX, PLAYER, RECT, BorderGrid, ValuePlane
from hexweave.mapgen.generator import generate_hex_maze, generate_weave_maze
from hexweave.render.image import MARKER_COLORS, WALL, render_hex_image, render_weave_image, save_png
from hexweave.render.text import WEAVE_TILES, render_hex, render_values, render_weave

def test_single_hex_text():
    g = BorderGrid(1, 1, HEX)
    g.set_all(0, 0, HEX_ALL_SIDES)
    assert render_hex(g) == ["/  \\", "\\__/"]
    v = ValuePlane(1, 1)
    v.set(0, 0, PLAYER)
    assert render_hex(g, v)[0] == "//\\\\"

def test_hex_text_size():
    res = generate_hex_maze(HexMazeConfig(width=5, height=3, seed=2))
    lines = render_hex(res.grid, res.values)
    assert len(lines) == 5 + 3
    assert max(len(l) for l in lines) <= 3 * 5 + 3 * 2 + 1

def test_weave_text_tiles_are_three_wide():
    res = generate_weave_maze(WeaveMazeConfig(width=9, height=6, seed=5))
    lines = render_weave(res.grid, ansi=False)
    assert len(lines) == 2 * 6
    assert all(len(l) == 3 * 9 for l in lines)

def test_weave_tiles_cover_every_mask():
    for m in range(1, 16):
        assert m in WEAVE_TILES
    assert TUNNEL_NS in WEAVE_TILES

def test_blank_weave_cell():
    g = BorderGrid(1, 1, RECT)
    assert render_weave(g, ansi=False) == ["###", "###"]
    assert "\x1b[47m" in render_weave(g)[0]

def test_value_dump():
    v = ValuePlane(2, 2)
    v.set(1, 1, PLAYER)
    assert render_values(v) == ["1: |  0   1 |", "0: |  0   0 |"]

def test_weave_image_size(tmp_path):
    res = generate_weave_maze(WeaveMazeConfig(width=7, height=4, seed=1))
    img = render_weave_image(res.grid, cell_size=10, margin=5)
    assert img.size == (7 * 10 + 10, 4 * 10 + 10)
    out = tmp_path / "png" / "weave.png"
    save_png(img, str(out))
    assert out.exists()

def test_weave_image_shades_crossings():
    g = BorderGrid(3, 3, RECT)
    g.set_all(1, 1, TUNNEL_NS)
    g.set_on(1, 0, RectDir.S)
    g.set_on(1, 2, RectDir.N)
    g.set_on(0, 1, RectDir.E)
    g.set_on(2, 1, RectDir.W)
    img = render_weave_image(g, cell_size=20, margin=0)
    colors = {c for _, c in img.getcolors(maxcolors=1 << 16)}
    assert (200, 200, 200, 255) in colors

def test_weave_image_leaves_under_passage_open():
    for over, openings in ((TUNNEL_NS, [(20, 30), (40, 30)]), (TUNNEL_EW, [(30, 20), (30, 40)])):
        g = BorderGrid(3, 3, RECT)
        g.set_all(1, 1, over)
        g.set_on(1, 0, RectDir.S)
        g.set_on(1, 2, RectDir.N)
        g.set_on(0, 1, RectDir.E)
        g.set_on(2, 1, RectDir.W)
        img = render_weave_image(g, cell_size=20, margin=0)
        for px in openings:
            assert img.getpixel(px) != WALL
        # the over-passage edges are still drawn inside the crossing
        assert WALL in {c for _, c in img.crop((20, 20, 40, 40)).getcolors(maxcolors=1 << 16)}

def test_hex_image_draws_markers():
    res = generate_hex_maze(HexMazeConfig(width=6, height=6, seed=3))
    res.values.set(2, 3, PLAYER)
    img = render_hex_image(res.grid, res.values, cell_radius=12)
    assert img.mode == "RGBA"
    w, h = img.size
    assert w > 6 * 12 and h > 6 * 12
    colors = {c for _, c in img.getcolors(maxcolors=1 << 20)}
    assert MARKER_COLORS[PLAYER] in colors
