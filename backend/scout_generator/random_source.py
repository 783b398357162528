"""
Random sources threaded through every sampler.

Samplers never touch the `random` module directly; they take a source that
exposes `random() -> float` in [0, 1). Tests pass a seeded or scripted source
to make draws reproducible.
"""

from __future__ import annotations

import math
import random as _random
import threading
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        """Next uniform float in [0, 1)."""
        ...


class SeededRandomSource:
    """
    Deterministic source backed by its own `random.Random` instance.

    Draws are lock-guarded so one seeded source can be shared by request
    worker threads; the sequence is reproducible, its split across threads is not.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = _random.Random(seed)
        self._lock = threading.Lock()

    def random(self) -> float:
        with self._lock:
            return self._rng.random()


class SystemRandomSource:
    """Process-wide source; safe to share between concurrent requests."""

    def __init__(self) -> None:
        self._rng = _random.Random()
        self._lock = threading.Lock()

    def random(self) -> float:
        with self._lock:
            return self._rng.random()


_DEFAULT_SOURCE = SystemRandomSource()


def default_source() -> RandomSource:
    return _DEFAULT_SOURCE


def randint(source: RandomSource, low: float, high: float) -> int:
    """
    Uniform integer draw in [low, high].

    Bounds may be floats; the width is `high - low + 1` and the result is
    floored, so a fractional upper bound still gives its integer ceiling a
    reduced share of draws.
    """
    return int(math.floor(source.random() * (high - low + 1)) + low)


def choice(source: RandomSource, items: Sequence[T]) -> T:
    if not items:
        raise IndexError("Cannot choose from an empty sequence")
    return items[int(math.floor(source.random() * len(items)))]


def coin_flip(source: RandomSource) -> bool:
    return source.random() < 0.5
