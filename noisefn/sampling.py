"""
Evaluate a noise function over regular grids
"""

from typing import Tuple, Union

import numpy as np

from .core import DimensionMismatchError, NoiseFn


def _require_dimension(source: NoiseFn, dimension: int):
    if source.dimension != dimension:
        raise DimensionMismatchError(
            f"Expected a {dimension}D source, got {type(source).__name__} ({source.dimension}D)"
        )


def sample_line(source: NoiseFn, count: int,
                bounds: Tuple[float, float] = (-1.0, 1.0)) -> np.ndarray:
    """Sample a 1D source at count evenly spaced positions, bounds inclusive."""
    _require_dimension(source, 1)
    xs = np.linspace(bounds[0], bounds[1], count)
    return np.array([source.get((float(x),)) for x in xs], dtype=np.float64)


def sample_plane(source: NoiseFn, size: Union[int, Tuple[int, int]],
                 x_bounds: Tuple[float, float] = (-1.0, 1.0),
                 y_bounds: Tuple[float, float] = (-1.0, 1.0)) -> np.ndarray:
    """
    Sample a 2D source over a width x height grid.

    Returns a float64 array indexed [y, x]; the grid corners land exactly on
    the bounds.
    """
    _require_dimension(source, 2)
    width, height = (size, size) if isinstance(size, int) else size

    xs = np.linspace(x_bounds[0], x_bounds[1], width)
    ys = np.linspace(y_bounds[0], y_bounds[1], height)

    result = np.zeros((height, width), dtype=np.float64)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            result[j, i] = source.get((float(x), float(y)))
    return result
