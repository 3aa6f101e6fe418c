# src/hexweave/directions.py
# Direction bitsets for both topologies.
#
# Hex cells are stored in a rectangular array that is sheared into hexes:
#
#    +y  __/++\__  +x
#       /0+\__/+0\
#       \__/00\__/
#       /-0\__/0-\
#       \__/--\__/
#    -x    \__/    -y

from enum import IntFlag
from typing import Dict, Tuple


class HexDir(IntFlag):
    N = 1
    NE = 2
    SE = 4
    S = 8
    SW = 16
    NW = 32
    # generation-time status, stripped once the maze is finished
    IN = 64
    FRONTIER = 128


class RectDir(IntFlag):
    N = 0x1
    S = 0x2
    E = 0x4
    W = 0x8
    U = 0x10  # tunnel: a second passage crosses underneath


HEX_ALL_SIDES = HexDir.N | HexDir.NE | HexDir.SE | HexDir.S | HexDir.SW | HexDir.NW
HEX_STATUS = HexDir.IN | HexDir.FRONTIER

# Enumeration order is load-bearing: the seeded generators consume neighbor
# lists in this order.
HEX_ORDER: Tuple[HexDir, ...] = (
    HexDir.N, HexDir.NE, HexDir.SE, HexDir.S, HexDir.SW, HexDir.NW,
)
RECT_ORDER: Tuple[RectDir, ...] = (RectDir.N, RectDir.S, RectDir.E, RectDir.W)

HEX_DELTA: Dict[HexDir, Tuple[int, int]] = {
    HexDir.N: (1, 1),
    HexDir.NE: (1, 0),
    HexDir.SE: (0, -1),
    HexDir.S: (-1, -1),
    HexDir.SW: (-1, 0),
    HexDir.NW: (0, 1),
}
RECT_DELTA: Dict[RectDir, Tuple[int, int]] = {
    RectDir.N: (0, -1),
    RectDir.S: (0, 1),
    RectDir.E: (1, 0),
    RectDir.W: (-1, 0),
}

HEX_OPPOSITE: Dict[HexDir, HexDir] = {
    HexDir.N: HexDir.S, HexDir.NE: HexDir.SW, HexDir.SE: HexDir.NW,
    HexDir.S: HexDir.N, HexDir.SW: HexDir.NE, HexDir.NW: HexDir.SE,
}
RECT_OPPOSITE: Dict[RectDir, RectDir] = {
    RectDir.N: RectDir.S, RectDir.S: RectDir.N,
    RectDir.E: RectDir.W, RectDir.W: RectDir.E,
}

# Tunnel composites: which passage runs over the crossing.
TUNNEL_NS = RectDir.N | RectDir.S | RectDir.U
TUNNEL_EW = RectDir.E | RectDir.W | RectDir.U


def is_tunnel(mask: int) -> bool:
    return mask in (TUNNEL_NS, TUNNEL_EW)
