"""Uniform random number sources used by interior sampling."""
from __future__ import annotations

import random
from typing import Optional, Protocol

import numpy as np

from .config import SamplingConfig


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from ``[low, high]``."""
        ...


class SeededRandomSource:
    """Random source backed by :class:`random.Random`."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def uniform(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)


class NumpyRandomSource:
    """Random source backed by a numpy :class:`~numpy.random.Generator`."""

    def __init__(self, generator: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> None:
        self._generator = generator if generator is not None else np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        if low == high:
            return float(low)
        # Generator.uniform leaves high < low undefined.
        if high < low:
            low, high = high, low
        return float(self._generator.uniform(low, high))


def create_random_source(config: Optional[SamplingConfig] = None) -> RandomSource:
    settings = config or SamplingConfig()
    return SeededRandomSource(settings.seed)
