from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidDimensions
from .rng import SEED_LIMIT, fresh_seed

DEFAULT_WIDTH = 10
DEFAULT_MAX_FAILURES = 5
DEFAULT_DELAY = 0.01  # seconds between animation frames; renderer-only


def _resolve(width: int, height: Optional[int], seed: Optional[int]):
    height = width if height is None else height
    if width <= 0 or height <= 0:
        raise InvalidDimensions(width, height)
    seed = fresh_seed() if seed is None else seed
    if not (0 <= seed <= SEED_LIMIT):
        raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
    return height, seed


@dataclass(frozen=True)
class HexMazeConfig:
    # height defaults to width, seed to a freshly drawn one
    width: int = DEFAULT_WIDTH
    height: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        height, seed = _resolve(self.width, self.height, self.seed)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "seed", seed)

    def replay_args(self):
        return [self.width, self.height, self.seed]


@dataclass(frozen=True)
class WeaveMazeConfig:
    width: int = DEFAULT_WIDTH
    height: Optional[int] = None
    seed: Optional[int] = None
    max_failures: int = DEFAULT_MAX_FAILURES
    # Only the animated viewer reads this.
    delay: float = field(default=DEFAULT_DELAY, compare=False)

    def __post_init__(self):
        height, seed = _resolve(self.width, self.height, self.seed)
        if self.max_failures <= 0:
            raise ValueError(f"max_failures must be positive, got {self.max_failures}")
        if self.delay < 0:
            raise ValueError(f"delay must not be negative, got {self.delay}")
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "seed", seed)

    def replay_args(self):
        # Same positional order the CLI accepts.
        return [self.width, self.height, self.max_failures, self.seed]
