"""
Base abstractions shared by every node in a noise tree
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

Point = Tuple[float, ...]

SEED_MASK = 0xFFFFFFFF


class NoiseError(Exception):
    """Base class for noise composition errors"""


class DimensionMismatchError(NoiseError, ValueError):
    """Nodes or points of different dimension were combined"""


class CapabilityError(NoiseError, TypeError):
    """A capability was requested from a source that does not support it"""


def to_seed(value: int) -> int:
    """Wrap any integer into the unsigned 32-bit seed range."""
    return int(value) & SEED_MASK


def ensure_same_dimension(*sources: "NoiseFn") -> int:
    """Check once, at composition time, that all sources share one dimension."""
    if not sources:
        raise ValueError("ensure_same_dimension needs at least one source")
    dims = {source.dimension for source in sources}
    if len(dims) != 1:
        names = ", ".join(f"{type(s).__name__}({s.dimension}D)" for s in sources)
        raise DimensionMismatchError(f"Sources disagree on dimension: {names}")
    return dims.pop()


def check_point(point: Sequence[float], dimension: int) -> Point:
    """Return point as a tuple, refusing one with the wrong number of coordinates."""
    point = tuple(point)
    if len(point) != dimension:
        raise DimensionMismatchError(
            f"Expected {dimension} coordinates, got {len(point)}"
        )
    return point


class NoiseFn(ABC):
    """A pure function from an N-dimensional point to a float."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Number of coordinates every point passed to get() carries"""

    @abstractmethod
    def get(self, point: Sequence[float]) -> float:
        """Evaluate the function at point"""

    def __call__(self, point: Sequence[float]) -> float:
        return self.get(point)


class Seedable(ABC):
    """Generators whose output is parameterized by a 32-bit seed.

    set_seed() never mutates: it returns a new node and leaves the old one
    usable with its previous seed.
    """

    @classmethod
    @abstractmethod
    def from_seed(cls, seed: int, **kwargs) -> "Seedable":
        pass

    @abstractmethod
    def set_seed(self, seed: int) -> "Seedable":
        pass

    @property
    @abstractmethod
    def seed(self) -> int:
        pass


class MultiFractal(ABC):
    """Generators built from several octaves of a base noise.

    Like Seedable, every setter returns a new node.
    """

    @property
    @abstractmethod
    def octaves(self) -> int:
        pass

    @property
    @abstractmethod
    def frequency(self) -> float:
        pass

    @property
    @abstractmethod
    def lacunarity(self) -> float:
        pass

    @property
    @abstractmethod
    def persistence(self) -> float:
        pass

    @abstractmethod
    def set_octaves(self, octaves: int) -> "MultiFractal":
        pass

    @abstractmethod
    def set_frequency(self, frequency: float) -> "MultiFractal":
        pass

    @abstractmethod
    def set_lacunarity(self, lacunarity: float) -> "MultiFractal":
        pass

    @abstractmethod
    def set_persistence(self, persistence: float) -> "MultiFractal":
        pass
