"""
Combiners: merge the outputs of two sources with a binary rule
"""

from abc import abstractmethod
from typing import Sequence

import numpy as np

from .core import NoiseFn, ensure_same_dimension


class Combiner(NoiseFn):
    """
    Evaluates both sources at the same point and merges the results.

    Both sources are always evaluated, source1 first, even when one output
    alone would decide the result. Subclasses only define combine().
    """

    def __init__(self, source1: NoiseFn, source2: NoiseFn):
        self._dimension = ensure_same_dimension(source1, source2)
        self.source1 = source1
        self.source2 = source2

    @property
    def dimension(self) -> int:
        return self._dimension

    def get(self, point: Sequence[float]) -> float:
        point = tuple(point)
        a = self.source1.get(point)
        b = self.source2.get(point)
        return self.combine(a, b)

    @abstractmethod
    def combine(self, a: float, b: float) -> float:
        """Merge the two source outputs"""

    def __repr__(self):
        return f"{type(self).__name__}({self.source1!r}, {self.source2!r})"


class Min(Combiner):
    """
    Smaller of the two outputs.

    Follows IEEE 754 minNum: if exactly one output is NaN the other one is
    returned, NaN only when both are.
    """

    def combine(self, a: float, b: float) -> float:
        return float(np.fmin(a, b))


class Max(Combiner):
    """Larger of the two outputs, IEEE 754 maxNum (NaN handled as in Min)"""

    def combine(self, a: float, b: float) -> float:
        return float(np.fmax(a, b))


class Add(Combiner):
    def combine(self, a: float, b: float) -> float:
        return a + b


class Multiply(Combiner):
    def combine(self, a: float, b: float) -> float:
        return a * b


class Power(Combiner):
    """
    source1 raised to the power of source2.

    A negative base with a fractional exponent gives NaN, overflow gives inf.
    """

    def combine(self, a: float, b: float) -> float:
        with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
            return float(np.power(np.float64(a), np.float64(b)))
