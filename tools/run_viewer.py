#!/usr/bin/env python3
# Animated viewer for hexweave mazes (watch the generator work).
# - Source: hex (Prim's) or weave (Kruskal's + crossings)
# - Redraws after every generator step, pausing --delay seconds
# - N: new maze with a fresh seed, R: replay the same seed, ESC: quit

import argparse
import math

import pygame

from hexweave.config import HexMazeConfig, WeaveMazeConfig
from hexweave.directions import HEX_ORDER, HexDir, RectDir, TUNNEL_NS, is_tunnel
from hexweave.log import get_logger, setup_logging
from hexweave.mapgen.generator import generate_hex_maze, generate_weave_maze

log = get_logger("hexweave.viewer")

BG = (240, 240, 240)
WALL = (0, 0, 0)
UNDER = (200, 200, 200)
FRONTIER = (255, 220, 0)
CURRENT = (220, 30, 30)

SQRT_THREE = math.sqrt(3.0)
HEX_EDGE_CORNERS = {
    HexDir.NE: (0, 1), HexDir.N: (1, 2), HexDir.NW: (2, 3),
    HexDir.SW: (3, 4), HexDir.S: (4, 5), HexDir.SE: (5, 0),
}


class Aborted(Exception):
    pass


# ---------- window sizing ----------
def hex_window(width, height, r, margin):
    w = 1.5 * r * (width + height - 2) + 2 * r + 2 * margin
    h = SQRT_THREE / 2.0 * r * (width + height - 2) + SQRT_THREE * r + 2 * margin
    return int(math.ceil(w)), int(math.ceil(h))


# ---------- drawing ----------
def draw_hex(screen, grid, r, margin, current=None):
    ox = margin + r + 1.5 * r * (grid.height - 1)
    oy = margin + SQRT_THREE / 2.0 * r * (grid.width + grid.height - 1)
    for x, y in grid.cells():
        cx = ox + 1.5 * r * (x - y)
        cy = oy - SQRT_THREE / 2.0 * r * (x + y)
        corners = [(cx + r * math.cos(math.radians(60 * k)), cy - r * math.sin(math.radians(60 * k)))
                   for k in range(6)]
        mask = grid.get(x, y)
        if mask & HexDir.FRONTIER:
            pygame.draw.polygon(screen, FRONTIER, corners)
        if (x, y) == current:
            pygame.draw.polygon(screen, CURRENT, corners)
        for d in HEX_ORDER:
            if mask & d:
                a, b = HEX_EDGE_CORNERS[d]
                pygame.draw.line(screen, WALL, corners[a], corners[b], 2)


def draw_weave(screen, grid, c, margin, current=None):
    for x, y in grid.cells():
        mask = grid.get(x, y)
        rect = pygame.Rect(margin + x * c, margin + y * c, c, c)
        if not mask:
            pygame.draw.rect(screen, WALL, rect)
            continue
        if (x, y) == current:
            pygame.draw.rect(screen, CURRENT, rect)
        if is_tunnel(mask):
            q = c // 4
            band = rect.inflate(0, -2 * q) if mask == TUNNEL_NS else rect.inflate(-2 * q, 0)
            pygame.draw.rect(screen, UNDER, band)
            # crossings are open on all four sides; only the over-passage gets edges
            if mask == TUNNEL_NS:
                for ex in (rect.left + q, rect.right - q):
                    pygame.draw.line(screen, WALL, (ex, rect.top), (ex, rect.bottom), 2)
            else:
                for ey in (rect.top + q, rect.bottom - q):
                    pygame.draw.line(screen, WALL, (rect.left, ey), (rect.right, ey), 2)
            continue
        if not mask & RectDir.N:
            pygame.draw.line(screen, WALL, rect.topleft, rect.topright, 2)
        if not mask & RectDir.S:
            pygame.draw.line(screen, WALL, rect.bottomleft, rect.bottomright, 2)
        if not mask & RectDir.W:
            pygame.draw.line(screen, WALL, rect.topleft, rect.bottomleft, 2)
        if not mask & RectDir.E:
            pygame.draw.line(screen, WALL, rect.topright, rect.bottomright, 2)


def pump():
    """Handle window events while the generator is running."""
    for ev in pygame.event.get():
        if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
            raise Aborted()


# ---------- viewer ----------
def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("kind", choices=["hex", "weave"], help="Which maze to generate")
    ap.add_argument("--width", type=int, default=10)
    ap.add_argument("--height", type=int, default=None, help="Defaults to width")
    ap.add_argument("--seed", type=int, default=None, help="Defaults to a fresh seed")
    ap.add_argument("--max-failures", type=int, default=5)
    ap.add_argument("--delay", type=float, default=0.01, help="Seconds between frames")
    ap.add_argument("--tile", type=int, default=24, help="Cell size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(args.verbose)

    margin = 8
    height = args.height or args.width
    if args.kind == "hex":
        r = args.tile / 2
        size = hex_window(args.width, height, r, margin)
    else:
        size = (args.width * args.tile + 2 * margin, height * args.tile + 2 * margin)

    pygame.init()
    screen = pygame.display.set_mode(size)
    clock = pygame.time.Clock()

    def frame(grid, cell):
        pump()
        screen.fill(BG)
        if args.kind == "hex":
            draw_hex(screen, grid, args.tile / 2, margin, current=cell)
        else:
            draw_weave(screen, grid, args.tile, margin, current=cell)
        pygame.display.flip()
        if args.delay > 0:
            pygame.time.wait(int(args.delay * 1000))

    def run(seed):
        if args.kind == "hex":
            cfg = HexMazeConfig(width=args.width, height=args.height, seed=seed)
            result = generate_hex_maze(cfg, on_step=frame)
        else:
            cfg = WeaveMazeConfig(width=args.width, height=args.height, seed=seed,
                                  max_failures=args.max_failures, delay=args.delay)
            result = generate_weave_maze(cfg, on_step=frame)
        pygame.display.set_caption(f"hexweave {args.kind} " + " ".join(str(a) for a in result.replay_args()))
        frame(result.grid, None)
        print("hexweave", args.kind, *result.replay_args())
        return result

    try:
        result = run(args.seed)
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == pygame.KEYDOWN:
                    if ev.key == pygame.K_ESCAPE:
                        running = False
                    elif ev.key == pygame.K_n:
                        result = run(None)
                    elif ev.key == pygame.K_r:
                        result = run(result.config.seed)
            clock.tick(60)
    except Aborted:
        log.info("viewer closed during generation")
    pygame.quit()


if __name__ == "__main__":
    main()
