"""
Random source for maze carving.

Every generator draws from a ``SeededRNG`` handed to it by ``MazeGenerator``,
never from the ``random`` module directly, so one seed replays one maze. Tests
swap in scripted stand-ins that expose the same five draw methods.
"""

import random
from typing import Optional


class SeededRNG:
    """Reproducible source of the draws the carving algorithms make."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Seed the current sequence was started from (None if unseeded)."""
        return self._seed

    def set_seed(self, seed: Optional[int]):
        """Restart the sequence from a new seed."""
        self._seed = seed
        self._rng.seed(seed)

    def random(self) -> float:
        """Coin flip source for Eller's merges and the binary tree / sidewinder choices."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Integer in [a, b]; Eller's uses it for the number of downward links per set."""
        return self._rng.randint(a, b)

    def choice(self, seq):
        return self._rng.choice(seq)

    def pop_random(self, items: list):
        """Remove and return a uniformly chosen element of a non-empty list."""
        index = self._rng.randrange(len(items))
        return items.pop(index)

    def shuffle(self, seq) -> None:
        """Shuffle in place (direction orders, Kruskal's edge list)."""
        self._rng.shuffle(seq)


# Shared by every MazeGenerator built without an rng or seed
default_rng = SeededRNG()


def set_global_seed(seed: Optional[int]):
    """Reseed the shared generator so unseeded generation becomes repeatable."""
    default_rng.set_seed(seed)


def get_global_seed() -> Optional[int]:
    return default_rng.seed


def resolve_rng(rng: Optional[SeededRNG] = None, seed: Optional[int] = None) -> SeededRNG:
    """
    Pick the generator for one call: an injected one wins, then a fresh one
    built from ``seed``, then the process-level default.
    """
    if rng is not None:
        return rng
    if seed is not None:
        return SeededRNG(seed)
    return default_rng
