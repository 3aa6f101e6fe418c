# src/hexweave/mapgen/generator.py
# Entry points: one config in, one finished maze out.

from dataclasses import dataclass, field
from typing import Optional

from ..config import HexMazeConfig, WeaveMazeConfig
from ..grid import HEX, RECT, BorderGrid, ValuePlane
from ..log import get_logger
from ..rng import SeededRandom
from ..unionfind import UnionFind
from .prim import StepHook, carve_prim
from .weave import DecorationReport, carve_weave

log = get_logger(__name__)


@dataclass
class HexMazeResult:
    config: HexMazeConfig
    grid: BorderGrid
    values: ValuePlane
    start: tuple
    # the run's random source, left where generation stopped so marker
    # placement continues the same sequence
    rng: SeededRandom = field(repr=False)

    def replay_args(self):
        return self.config.replay_args()


@dataclass
class WeaveMazeResult:
    config: WeaveMazeConfig
    grid: BorderGrid
    sets: UnionFind = field(repr=False)
    report: DecorationReport

    def replay_args(self):
        return self.config.replay_args()


def generate_hex_maze(config: HexMazeConfig, on_step: Optional[StepHook] = None) -> HexMazeResult:
    log.info("hex maze %dx%d seed=%d", config.width, config.height, config.seed)
    rng = SeededRandom(config.seed)
    grid = BorderGrid(config.width, config.height, HEX)
    start = carve_prim(grid, rng, on_step=on_step)
    values = ValuePlane(config.width, config.height)
    return HexMazeResult(config=config, grid=grid, values=values, start=start, rng=rng)


def generate_weave_maze(config: WeaveMazeConfig, on_step: Optional[StepHook] = None) -> WeaveMazeResult:
    log.info("weave maze %dx%d seed=%d max_failures=%d",
             config.width, config.height, config.seed, config.max_failures)
    rng = SeededRandom(config.seed)
    grid = BorderGrid(config.width, config.height, RECT)
    sets, report = carve_weave(grid, rng, config.max_failures, on_step=on_step)
    log.info("weave maze done: %d crossings", len(report.tunnels))
    return WeaveMazeResult(config=config, grid=grid, sets=sets, report=report)
