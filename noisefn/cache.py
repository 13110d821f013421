"""
Cache decorator: remembers the last value produced by its source
"""

import logging
from typing import Optional, Sequence, Tuple

from .core import (
    CapabilityError,
    MultiFractal,
    NoiseFn,
    Point,
    Seedable,
    check_point,
)

logger = logging.getLogger(__name__)


def _same_point(a: Point, b: Point) -> bool:
    # Compare values, not identity: a NaN coordinate never matches.
    return all(x == y for x, y in zip(a, b))


class Cache(NoiseFn, Seedable, MultiFractal):
    """
    Noise function that caches the last output value of its source.

    If get() is called with the same coordinates as the previous call, the
    remembered value is returned without evaluating the source. Otherwise the
    source is evaluated, the memo is overwritten and the new value returned.

    Caching pays off when one source feeds several noise functions; without
    it the source would compute the same value once per consumer.

    The memo is a single slot: a second distinct point always evicts the
    first. It is the only state in a tree that changes across get() calls.
    The (point, value) pair is swapped in one assignment, so a reader never
    sees a point paired with another point's value, but the decorator is
    meant for one thread at a time; concurrent callers may recompute.

    Reseeding or changing a fractal parameter returns a new Cache with an
    empty memo, since the source no longer computes the remembered value.
    """

    def __init__(self, source: NoiseFn):
        self.source = source
        self._memo: Optional[Tuple[Point, float]] = None

    @property
    def dimension(self) -> int:
        return self.source.dimension

    @property
    def is_empty(self) -> bool:
        return self._memo is None

    def clear(self):
        """Forget the remembered point"""
        if self._memo is not None:
            logger.debug("Clearing cache memo for %r", self.source)
        self._memo = None

    def get(self, point: Sequence[float]) -> float:
        point = check_point(point, self.source.dimension)
        memo = self._memo
        if memo is not None:
            cached_point, cached_value = memo
            if _same_point(cached_point, point):
                return cached_value

        value = self.source.get(point)
        self._memo = (point, value)
        return value

    def _require(self, capability: type, name: str):
        if not isinstance(self.source, capability):
            raise CapabilityError(
                f"{type(self.source).__name__} does not support {name}"
            )
        return self.source

    def _rewrap(self, source: NoiseFn, reason: str) -> "Cache":
        logger.debug("Cache memo invalidated by %s", reason)
        return Cache(source)

    # Seedable

    @classmethod
    def from_seed(cls, seed: int, source_cls: type, **kwargs) -> "Cache":
        """Build a cache around source_cls.from_seed(seed, **kwargs)."""
        if not issubclass(source_cls, Seedable):
            raise CapabilityError("Cache.from_seed needs a Seedable source class")
        return cls(source_cls.from_seed(seed, **kwargs))

    def set_seed(self, seed: int) -> "Cache":
        source = self._require(Seedable, "seeding")
        return self._rewrap(source.set_seed(seed), f"set_seed({seed})")

    @property
    def seed(self) -> int:
        return self._require(Seedable, "seeding").seed

    # MultiFractal

    @property
    def octaves(self) -> int:
        return self._require(MultiFractal, "octaves").octaves

    @property
    def frequency(self) -> float:
        return self._require(MultiFractal, "frequency").frequency

    @property
    def lacunarity(self) -> float:
        return self._require(MultiFractal, "lacunarity").lacunarity

    @property
    def persistence(self) -> float:
        return self._require(MultiFractal, "persistence").persistence

    def set_octaves(self, octaves: int) -> "Cache":
        source = self._require(MultiFractal, "octaves")
        return self._rewrap(source.set_octaves(octaves), f"set_octaves({octaves})")

    def set_frequency(self, frequency: float) -> "Cache":
        source = self._require(MultiFractal, "frequency")
        return self._rewrap(source.set_frequency(frequency), f"set_frequency({frequency})")

    def set_lacunarity(self, lacunarity: float) -> "Cache":
        source = self._require(MultiFractal, "lacunarity")
        return self._rewrap(source.set_lacunarity(lacunarity), f"set_lacunarity({lacunarity})")

    def set_persistence(self, persistence: float) -> "Cache":
        source = self._require(MultiFractal, "persistence")
        return self._rewrap(source.set_persistence(persistence), f"set_persistence({persistence})")

    def __repr__(self):
        return f"Cache({self.source!r})"
