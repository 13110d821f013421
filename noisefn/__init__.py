"""
Composable N-dimensional noise functions
"""

from .core import (
    CapabilityError,
    DimensionMismatchError,
    MultiFractal,
    NoiseError,
    NoiseFn,
    Point,
    Seedable,
    check_point,
    ensure_same_dimension,
)
from .cache import Cache
from .combiners import Add, Combiner, Max, Min, Multiply, Power
from .generators import MAX_OCTAVES, Constant, FractalNoise, Perlin, Simplex
from .config import NoiseConfig, NoisePreset, NoiseType
from .sampling import sample_line, sample_plane

__all__ = [
    'NoiseFn', 'Point', 'Seedable', 'MultiFractal',
    'NoiseError', 'DimensionMismatchError', 'CapabilityError', 'check_point', 'ensure_same_dimension',
    'Cache',
    'Combiner', 'Min', 'Max', 'Add', 'Multiply', 'Power',
    'Constant', 'FractalNoise', 'Perlin', 'Simplex', 'MAX_OCTAVES',
    'NoiseConfig', 'NoisePreset', 'NoiseType',
    'sample_line', 'sample_plane',
]
