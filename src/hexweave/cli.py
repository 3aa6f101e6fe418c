#!/usr/bin/env python3
# Command-line driver: build a config, run one generator, print the maze and
# the command line that replays it.

import argparse
import sys

from .config import DEFAULT_DELAY, DEFAULT_MAX_FAILURES, DEFAULT_WIDTH, HexMazeConfig, WeaveMazeConfig
from .errors import MazeError, PathDivergence
from .hexgeom import distance
from .log import get_logger, setup_logging
from .mapgen.generator import generate_hex_maze, generate_weave_maze
from .mapgen.placement import mark_line_of_sight, place_player_and_enemy
from .render.text import render_hex, render_weave

log = get_logger(__name__)

PROG = "hexweave"


def _replay_line(cmd, args):
    return " ".join([PROG, cmd] + [str(a) for a in args])


def _write_png(img, path):
    from .render.image import save_png
    save_png(img, path)
    print(f"Wrote {path}")


def cmd_hex(args):
    cfg = HexMazeConfig(width=args.width, height=args.height, seed=args.seed)
    result = generate_hex_maze(cfg)

    path = None
    if not args.no_markers:
        player, enemy = place_player_and_enemy(result.values, result.rng)
        try:
            path = mark_line_of_sight(result.values, player, enemy)
        except PathDivergence as e:
            log.warning("no line of sight %s -> %s: %s", player, enemy, e)

    for line in render_hex(result.grid, result.values):
        print(line)
    print(_replay_line("hex", result.replay_args()))

    if not args.no_markers:
        print(f"Distance from {player} to {enemy} = {distance(player, enemy)}")
        if path is not None:
            print("LOS: " + " ".join(f"({x},{y})" for x, y in path))
        else:
            print("LOS: none")

    if args.png:
        from .render.image import render_hex_image
        _write_png(render_hex_image(result.grid, result.values), args.png)
    return 0


def cmd_weave(args):
    cfg = WeaveMazeConfig(width=args.width, height=args.height, seed=args.seed,
                          max_failures=args.max_failures, delay=args.delay)
    result = generate_weave_maze(cfg)
    for line in render_weave(result.grid, ansi=not args.plain):
        print(line)
    print(_replay_line("weave", result.replay_args()))
    if args.png:
        from .render.image import render_weave_image
        _write_png(render_weave_image(result.grid), args.png)
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog=PROG, description="Hex and weave maze generator")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p1 = sub.add_parser("hex", help="Prim's maze on a hex grid")
    p1.add_argument("width", type=int, nargs="?", default=DEFAULT_WIDTH)
    p1.add_argument("height", type=int, nargs="?", default=None, help="Defaults to width")
    p1.add_argument("seed", type=int, nargs="?", default=None, help="Defaults to a fresh seed")
    p1.add_argument("--no-markers", action="store_true", help="Skip player/enemy/line-of-sight markers")
    p1.add_argument("--png", type=str, default=None, help="Also write a PNG here")
    p1.set_defaults(func=cmd_hex)

    p2 = sub.add_parser("weave", help="Kruskal's weave maze on a rectangular grid")
    p2.add_argument("width", type=int, nargs="?", default=DEFAULT_WIDTH)
    p2.add_argument("height", type=int, nargs="?", default=None, help="Defaults to width")
    p2.add_argument("max_failures", type=int, nargs="?", default=DEFAULT_MAX_FAILURES,
                    help="Consecutive rejected crossings before the crossing pass stops")
    p2.add_argument("seed", type=int, nargs="?", default=None, help="Defaults to a fresh seed")
    p2.add_argument("delay", type=float, nargs="?", default=DEFAULT_DELAY,
                    help="Animation delay (viewer only)")
    p2.add_argument("--plain", action="store_true", help="No ANSI colors")
    p2.add_argument("--png", type=str, default=None, help="Also write a PNG here")
    p2.set_defaults(func=cmd_weave)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except MazeError as e:
        log.error("%s", e)
        return 2
    except ValueError as e:
        log.error("bad arguments: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
