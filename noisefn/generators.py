"""
Leaf generators: adapters over the gradient noise kernels of the `noise` package
"""

from typing import Callable, Dict, Sequence, Tuple

import noise
import numpy as np

from .core import (
    DimensionMismatchError,
    MultiFractal,
    NoiseFn,
    Seedable,
    check_point,
    to_seed,
)

MAX_OCTAVES = 32
DEFAULT_SEED = 0
DEFAULT_OCTAVES = 1
DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = 2.0
DEFAULT_PERSISTENCE = 0.5

# Seeds pick a region of the kernel; pnoise tiles every 1024 units.
OFFSET_RANGE = 512.0


def _clamp_octaves(octaves: int) -> int:
    return max(1, min(int(octaves), MAX_OCTAVES))


def seed_offset(seed: int, dimension: int) -> Tuple[float, ...]:
    """Per-axis coordinate offset derived deterministically from a seed."""
    rng = np.random.default_rng(seed)
    return tuple(float(v) for v in rng.uniform(-OFFSET_RANGE, OFFSET_RANGE, size=dimension))


class Constant(NoiseFn):
    """Outputs the same value everywhere"""

    def __init__(self, value: float, dimension: int = 2):
        self.value = float(value)
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def get(self, point: Sequence[float]) -> float:
        check_point(point, self._dimension)
        return self.value

    def __repr__(self):
        return f"Constant({self.value}, dimension={self._dimension})"


class FractalNoise(NoiseFn, Seedable, MultiFractal):
    """
    Multi-octave gradient noise sampled from one of the `noise` kernels.

    Instances are immutable; set_seed() and the fractal setters return a
    reconfigured copy. Subclasses only declare which kernel serves which
    dimension.
    """

    KERNELS: Dict[int, Callable[..., float]] = {}

    def __init__(self, dimension: int = 2, seed: int = DEFAULT_SEED,
                 octaves: int = DEFAULT_OCTAVES, frequency: float = DEFAULT_FREQUENCY,
                 lacunarity: float = DEFAULT_LACUNARITY,
                 persistence: float = DEFAULT_PERSISTENCE):
        if dimension not in self.KERNELS:
            supported = ", ".join(str(d) for d in sorted(self.KERNELS))
            raise DimensionMismatchError(
                f"{type(self).__name__} supports dimensions {supported}, got {dimension}"
            )
        self._dimension = dimension
        self._seed = to_seed(seed)
        self._octaves = _clamp_octaves(octaves)
        self._frequency = float(frequency)
        self._lacunarity = float(lacunarity)
        self._persistence = float(persistence)
        self._kernel = self.KERNELS[dimension]
        self._offset = seed_offset(self._seed, dimension)

    def _replace(self, **changes) -> "FractalNoise":
        params = dict(
            dimension=self._dimension,
            seed=self._seed,
            octaves=self._octaves,
            frequency=self._frequency,
            lacunarity=self._lacunarity,
            persistence=self._persistence,
        )
        params.update(changes)
        return type(self)(**params)

    @property
    def dimension(self) -> int:
        return self._dimension

    def get(self, point: Sequence[float]) -> float:
        point = check_point(point, self._dimension)
        coords = [c * self._frequency + o for c, o in zip(point, self._offset)]
        return self._kernel(
            *coords,
            octaves=self._octaves,
            persistence=self._persistence,
            lacunarity=self._lacunarity,
        )

    # Seedable

    @classmethod
    def from_seed(cls, seed: int, **kwargs) -> "FractalNoise":
        return cls(seed=seed, **kwargs)

    def set_seed(self, seed: int) -> "FractalNoise":
        return self._replace(seed=seed)

    @property
    def seed(self) -> int:
        return self._seed

    # MultiFractal

    @property
    def octaves(self) -> int:
        return self._octaves

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def lacunarity(self) -> float:
        return self._lacunarity

    @property
    def persistence(self) -> float:
        return self._persistence

    def set_octaves(self, octaves: int) -> "FractalNoise":
        return self._replace(octaves=octaves)

    def set_frequency(self, frequency: float) -> "FractalNoise":
        return self._replace(frequency=frequency)

    def set_lacunarity(self, lacunarity: float) -> "FractalNoise":
        return self._replace(lacunarity=lacunarity)

    def set_persistence(self, persistence: float) -> "FractalNoise":
        return self._replace(persistence=persistence)

    def __repr__(self):
        return (
            f"{type(self).__name__}(dimension={self._dimension}, seed={self._seed}, "
            f"octaves={self._octaves}, frequency={self._frequency}, "
            f"lacunarity={self._lacunarity}, persistence={self._persistence})"
        )


class Perlin(FractalNoise):
    """Classic Perlin noise, 1 to 3 dimensions"""
    KERNELS = {1: noise.pnoise1, 2: noise.pnoise2, 3: noise.pnoise3}


class Simplex(FractalNoise):
    """Simplex noise, 2 to 4 dimensions"""
    KERNELS = {2: noise.snoise2, 3: noise.snoise3, 4: noise.snoise4}
