# src/hexweave/render/image.py
# Render finished mazes to Pillow images (PNG via save()).

from __future__ import annotations

import math
import os
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from ..directions import HEX_ORDER, HexDir, RectDir, TUNNEL_NS, is_tunnel
from ..grid import ENEMY, PLAYER, SHELL, BorderGrid, ValuePlane

BACKGROUND = (240, 240, 240, 255)
WALL = (0, 0, 0, 255)
UNDER = (200, 200, 200, 255)

MARKER_COLORS: Dict[int, Tuple[int, int, int, int]] = {
    PLAYER: (30, 90, 220, 255),
    ENEMY: (220, 30, 30, 255),
    SHELL: (240, 170, 0, 255),
}

SQRT_THREE = math.sqrt(3.0)

# flat-topped hex: each border sits between two corners (angle index k*60deg)
_HEX_EDGE_CORNERS = {
    HexDir.NE: (0, 1),
    HexDir.N: (1, 2),
    HexDir.NW: (2, 3),
    HexDir.SW: (3, 4),
    HexDir.S: (4, 5),
    HexDir.SE: (5, 0),
}


def _hex_center(x: int, y: int, r: float) -> Tuple[float, float]:
    # N (+1,+1) is straight up, NE (+1,0) is up and to the right
    return 1.5 * r * (x - y), -(SQRT_THREE / 2.0) * r * (x + y)


def render_hex_image(
    grid: BorderGrid,
    values: Optional[ValuePlane] = None,
    cell_radius: int = 16,
    margin: int = 8,
    wall_width: int = 2,
) -> Image.Image:
    w, h = grid.width, grid.height
    r = float(cell_radius)
    # bounding box of all centers
    xs = [_hex_center(x, y, r)[0] for x, y in ((w - 1, 0), (0, h - 1))]
    ys = [_hex_center(x, y, r)[1] for x, y in ((0, 0), (w - 1, h - 1))]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    width_px = int(math.ceil(max_x - min_x + 2 * r + 2 * margin))
    height_px = int(math.ceil(max_y - min_y + SQRT_THREE * r + 2 * margin))
    ox = margin + r - min_x
    oy = margin + SQRT_THREE / 2.0 * r - min_y

    canvas = Image.new("RGBA", (width_px, height_px), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for x, y in grid.cells():
        cx, cy = _hex_center(x, y, r)
        cx, cy = cx + ox, cy + oy
        corners = [
            (cx + r * math.cos(math.radians(60 * k)), cy - r * math.sin(math.radians(60 * k)))
            for k in range(6)
        ]
        mask = grid.get(x, y)
        for d in HEX_ORDER:
            if mask & d:
                a, b = _HEX_EDGE_CORNERS[d]
                draw.line([corners[a], corners[b]], fill=WALL, width=wall_width)
        if values is not None:
            color = MARKER_COLORS.get(values.get(x, y))
            if color:
                m = r * 0.45
                draw.ellipse((cx - m, cy - m, cx + m, cy + m), fill=color)
    return canvas


def render_weave_image(
    grid: BorderGrid,
    cell_size: int = 16,
    margin: int = 8,
    wall_width: int = 2,
) -> Image.Image:
    c = cell_size
    canvas = Image.new("RGBA", (grid.width * c + 2 * margin, grid.height * c + 2 * margin), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for x, y in grid.cells():
        mask = grid.get(x, y)
        left, top = margin + x * c, margin + y * c
        right, bottom = left + c, top + c
        if not mask:
            draw.rectangle((left, top, right - 1, bottom - 1), fill=WALL)
            continue
        if is_tunnel(mask):
            # all four sides are open; shade the under-passage and edge the one on top
            q = c // 4
            if mask == TUNNEL_NS:
                draw.rectangle((left, top + q, right - 1, bottom - q - 1), fill=UNDER)
                draw.line([(left + q, top), (left + q, bottom)], fill=WALL, width=wall_width)
                draw.line([(right - q, top), (right - q, bottom)], fill=WALL, width=wall_width)
            else:
                draw.rectangle((left + q, top, right - q - 1, bottom - 1), fill=UNDER)
                draw.line([(left, top + q), (right, top + q)], fill=WALL, width=wall_width)
                draw.line([(left, bottom - q), (right, bottom - q)], fill=WALL, width=wall_width)
            continue
        if not mask & RectDir.N:
            draw.line([(left, top), (right, top)], fill=WALL, width=wall_width)
        if not mask & RectDir.S:
            draw.line([(left, bottom), (right, bottom)], fill=WALL, width=wall_width)
        if not mask & RectDir.W:
            draw.line([(left, top), (left, bottom)], fill=WALL, width=wall_width)
        if not mask & RectDir.E:
            draw.line([(right, top), (right, bottom)], fill=WALL, width=wall_width)
    return canvas


def save_png(img: Image.Image, out_png: str) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
