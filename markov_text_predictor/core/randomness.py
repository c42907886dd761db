# randomness.py
# Injectable random sources for model sampling.
#
# Two policies are supported:
#  - independent: every ContextModel owns its own random.Random, seeded
#    seed + order when a seed is given (default)
#  - shared: one caller-supplied generator wrapped in LockedRandom so
#    concurrent draws from several models are serialised

from __future__ import annotations

import random
import threading
from typing import Callable, Optional, Sequence, TypeVar

from .protocols import RandomSource

T = TypeVar("T")

RandomFactory = Callable[[int], RandomSource]


class LockedRandom:
    """Mutex-guarded wrapper that lets several models share one generator."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    def choice(self, seq: Sequence[T]) -> T:
        with self._lock:
            return self._rng.choice(seq)


def independent_sources(seed: Optional[int] = None) -> RandomFactory:
    """
    Factory giving each order its own generator.
    With a seed, order k gets random.Random(seed + k), so runs are reproducible
    regardless of how build threads are scheduled.
    """
    def make(order: int) -> RandomSource:
        if seed is None:
            return random.Random()
        return random.Random(seed + order)
    return make


def shared_source(rng: RandomSource) -> RandomFactory:
    """Factory handing the same (locked) generator to every order."""
    if isinstance(rng, random.Random):
        rng = LockedRandom(rng)

    def make(order: int) -> RandomSource:
        return rng
    return make
