# src/hexweave/render/text.py
# Character renderers. Both read grid snapshots only; nothing is mutated.

from typing import Dict, List, Optional, Tuple

from ..directions import RectDir, HexDir
from ..grid import EMPTY, ENEMY, PLAYER, SHELL, BorderGrid, ValuePlane

N, S, E, W, U = RectDir.N, RectDir.S, RectDir.E, RectDir.W, RectDir.U

# box drawing
EW, NS, SE, SW, NE, NW = "\u2500", "\u2502", "\u250c", "\u2510", "\u2514", "\u2518"
NSE, NSW, EWS, EWN = "\u251c", "\u2524", "\u252c", "\u2534"

BLANK_ANSI = "\x1b[47m   \x1b[m"
BLANK_PLAIN = "###"

# two 3-char rows per cell
WEAVE_TILES: Dict[int, Tuple[str, str]] = {
    N:         (f"{NS} {NS}", f"{NE}{EW}{NW}"),
    S:         (f"{SE}{EW}{SW}", f"{NS} {NS}"),
    E:         (f"{SE}{EW}{EW}", f"{NE}{EW}{EW}"),
    W:         (f"{EW}{EW}{SW}", f"{EW}{EW}{NW}"),
    N | S:     (f"{NS} {NS}", f"{NS} {NS}"),
    N | W:     (f"{NW} {NS}", f"{EW}{EW}{NW}"),
    N | E:     (f"{NS} {NE}", f"{NE}{EW}{EW}"),
    S | W:     (f"{EW}{EW}{SW}", f"{SW} {NS}"),
    S | E:     (f"{SE}{EW}{EW}", f"{NS} {SE}"),
    E | W:     (f"{EW}{EW}{EW}", f"{EW}{EW}{EW}"),
    N | S | E: (f"{NS} {NE}", f"{NS} {SE}"),
    N | S | W: (f"{NW} {NS}", f"{SW} {NS}"),
    E | W | N: (f"{NW} {NE}", f"{EW}{EW}{EW}"),
    E | W | S: (f"{EW}{EW}{EW}", f"{SW} {SE}"),
    N | S | E | W: (f"{NW} {NE}", f"{SW} {SE}"),
    N | S | U: (f"{NSW} {NSE}", f"{NSW} {NSE}"),
    E | W | U: (f"{EWN}{EW}{EWN}", f"{EWS}{EW}{EWS}"),
}

VALUE_GLYPHS = {EMPTY: "  ", PLAYER: "/\\", ENEMY: "}{", SHELL: "<>"}


def render_weave(grid: BorderGrid, ansi: bool = True) -> List[str]:
    blank = BLANK_ANSI if ansi else BLANK_PLAIN
    lines = []
    for row in grid.rows():
        for i in (0, 1):
            lines.append("".join(WEAVE_TILES[m][i] if m else blank for m in row))
    return lines


def _value_glyph(v: int) -> str:
    return VALUE_GLYPHS.get(v, f"{v:>2}"[-2:])


def render_hex(grid: BorderGrid, values: Optional[ValuePlane] = None) -> List[str]:
    """
    Draw the sheared grid as hexes, (0,0) at the bottom. Row y, column x
    lands at screen column 3*(height-1) + 3*x - 3*y, screen row x + y:

         __/11\\__
        /01\\__/10\\
        \\__/00\\__/
           \\__/
    """
    w, h = grid.width, grid.height
    screen_h = w + h
    screen_w = 3 * w + 3 * (h - 1) + 1
    offset = 3 * h - 3
    screen = [[" "] * screen_w for _ in range(screen_h)]

    borders = grid.rows()
    vals = values.rows() if values is not None else None
    for row in range(h):
        for col in range(w):
            x = offset + 3 * col - 3 * row
            y = row + col
            b = borders[row][col]
            # bottom half: \__/
            if b & HexDir.SW:
                screen[y][x] = "\\"
            if b & HexDir.S:
                screen[y][x + 1:x + 3] = "__"
            if b & HexDir.SE:
                screen[y][x + 3] = "/"
            # top half: /  \
            if b & HexDir.NW:
                screen[y + 1][x] = "/"
            glyph = _value_glyph(vals[row][col] if vals else EMPTY)
            screen[y + 1][x + 1:x + 3] = glyph
            if b & HexDir.NE:
                screen[y + 1][x + 3] = "\\"
            if y + 2 < screen_h and b & HexDir.N:
                screen[y + 2][x + 1:x + 3] = "__"

    # screen row 0 is the bottom
    return ["".join(r).rstrip() for r in reversed(screen)]


def render_values(values: ValuePlane) -> List[str]:
    """Raw value dump, top row first, with row labels."""
    label_w = len(str(values.height))
    lines = []
    for y, row in reversed(list(enumerate(values.rows()))):
        cells = " ".join(f"{v:>3}" for v in row)
        lines.append(f"{y:>{label_w}}: |{cells} |")
    return lines
