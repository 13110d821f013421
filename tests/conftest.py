"""Shared instrumented sources."""

from __future__ import annotations

import pytest

from noisefn.core import MultiFractal, NoiseFn, Seedable, to_seed


class CountingSource(NoiseFn):
    """Deterministic source that records every evaluation."""

    def __init__(self, dimension=2, fn=None):
        self._dimension = dimension
        self.fn = fn or (lambda p: sum((i + 1) * c for i, c in enumerate(p)))
        self.calls = []

    @property
    def dimension(self):
        return self._dimension

    def get(self, point):
        self.calls.append(tuple(point))
        return self.fn(point)


class SeededCountingSource(CountingSource, Seedable, MultiFractal):
    """Counting source whose output depends on seed and octaves."""

    def __init__(self, dimension=2, seed=0, octaves=1, frequency=1.0,
                 lacunarity=2.0, persistence=0.5):
        super().__init__(dimension, fn=lambda p: self._seed + self._octaves * sum(p))
        self._seed = to_seed(seed)
        self._octaves = octaves
        self._frequency = frequency
        self._lacunarity = lacunarity
        self._persistence = persistence

    def _replace(self, **changes):
        params = dict(dimension=self._dimension, seed=self._seed, octaves=self._octaves,
                      frequency=self._frequency, lacunarity=self._lacunarity,
                      persistence=self._persistence)
        params.update(changes)
        return SeededCountingSource(**params)

    @classmethod
    def from_seed(cls, seed, **kwargs):
        return cls(seed=seed, **kwargs)

    def set_seed(self, seed):
        return self._replace(seed=seed)

    @property
    def seed(self):
        return self._seed

    @property
    def octaves(self):
        return self._octaves

    @property
    def frequency(self):
        return self._frequency

    @property
    def lacunarity(self):
        return self._lacunarity

    @property
    def persistence(self):
        return self._persistence

    def set_octaves(self, octaves):
        return self._replace(octaves=octaves)

    def set_frequency(self, frequency):
        return self._replace(frequency=frequency)

    def set_lacunarity(self, lacunarity):
        return self._replace(lacunarity=lacunarity)

    def set_persistence(self, persistence):
        return self._replace(persistence=persistence)


@pytest.fixture
def counting():
    return CountingSource()


@pytest.fixture
def seeded():
    return SeededCountingSource(seed=7)
