import random
from dataclasses import dataclass, field
from typing import List, Sequence, TypeVar

T = TypeVar("T")

SEED_LIMIT = 0xFFFF_FFFF  # seeds are unsigned 32-bit


def fresh_seed() -> int:
    """Draw a new seed from OS entropy; echo it back to make a run repeatable."""
    return random.SystemRandom().randrange(SEED_LIMIT)


@dataclass
class SeededRandom:
    """
    The single random source of a generation run.
    Every draw goes through here so that a (seed, dimensions) pair replays
    the same maze bit-for-bit.
    """
    seed: int
    _rand: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        self._rand = random.Random(self.seed)

    def below(self, n: int) -> int:
        """Uniform integer in 0..n-1."""
        assert n > 0
        return self._rand.randrange(n)

    def coin(self) -> bool:
        return self._rand.randrange(2) == 0

    def choice(self, items: Sequence[T]) -> T:
        return items[self.below(len(items))]

    def pop_random(self, items: List[T]) -> T:
        # Removal order (not insertion order) shapes a Prim's maze.
        return items.pop(self.below(len(items)))

    def shuffle(self, items: List[T]) -> None:
        self._rand.shuffle(items)
