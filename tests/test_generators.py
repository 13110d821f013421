"""Tests for the leaf generators."""

from __future__ import annotations

import math

import pytest

from noisefn import (
    MAX_OCTAVES,
    Cache,
    Constant,
    DimensionMismatchError,
    Min,
    MultiFractal,
    Perlin,
    Seedable,
    Simplex,
)

POINTS = [(0.1, 0.2), (3.7, -1.1), (12.5, 8.25), (0.1, 0.2), (-40.0, 2.0)]


class TestPerlin:
    @pytest.mark.parametrize("dimension", [1, 2, 3])
    def test_supported_dimensions(self, dimension):
        perlin = Perlin(dimension=dimension, seed=3)
        value = perlin.get(tuple(0.37 * (i + 1) for i in range(dimension)))
        assert math.isfinite(value)
        assert -1.5 < value < 1.5

    def test_unsupported_dimension(self):
        with pytest.raises(DimensionMismatchError):
            Perlin(dimension=4)

    def test_capabilities(self):
        perlin = Perlin()
        assert isinstance(perlin, Seedable)
        assert isinstance(perlin, MultiFractal)

    def test_set_seed_is_functional(self):
        perlin = Perlin(seed=1)
        other = perlin.set_seed(2)
        assert perlin.seed == 1
        assert other.seed == 2
        assert other.octaves == perlin.octaves

    def test_seed_changes_output(self):
        point = (0.3, 0.7)
        assert Perlin(seed=1).get(point) != Perlin(seed=2).get(point)

    def test_from_seed(self):
        perlin = Perlin.from_seed(11, dimension=3, octaves=4)
        assert (perlin.seed, perlin.dimension, perlin.octaves) == (11, 3, 4)

    def test_setters_copy_other_fields(self):
        perlin = (Perlin(seed=9)
                  .set_octaves(5)
                  .set_frequency(0.5)
                  .set_lacunarity(2.5)
                  .set_persistence(0.25))
        assert perlin.seed == 9
        assert perlin.octaves == 5
        assert perlin.frequency == 0.5
        assert perlin.lacunarity == 2.5
        assert perlin.persistence == 0.25

    def test_octaves_clamped(self):
        assert Perlin().set_octaves(0).octaves == 1
        assert Perlin().set_octaves(1000).octaves == MAX_OCTAVES

    def test_frequency_scales_coordinates(self):
        slow = Perlin(seed=4, frequency=0.5)
        fast = Perlin(seed=4, frequency=1.0)
        assert slow.get((2.0, 3.0)) == fast.get((1.0, 1.5))


class TestSimplex:
    @pytest.mark.parametrize("dimension", [2, 3, 4])
    def test_supported_dimensions(self, dimension):
        simplex = Simplex(dimension=dimension, seed=5, octaves=3)
        value = simplex.get(tuple(0.21 * (i + 1) for i in range(dimension)))
        assert math.isfinite(value)

    def test_unsupported_dimension(self):
        with pytest.raises(DimensionMismatchError):
            Simplex(dimension=1)


class TestConstant:
    def test_constant(self):
        c = Constant(0.25, dimension=3)
        assert c.dimension == 3
        assert c.get((1.0, 2.0, 3.0)) == 0.25


class TestDeterminism:
    def _tree(self):
        base = Cache(Perlin(seed=42, octaves=4, frequency=0.1))
        detail = Simplex(seed=43, octaves=2).set_persistence(0.4)
        return Min(base, detail)

    def test_identical_trees_identical_outputs(self):
        a, b = self._tree(), self._tree()
        assert [a.get(p) for p in POINTS] == [b.get(p) for p in POINTS]

    def test_cache_does_not_change_values(self):
        leaf = Perlin(seed=42, octaves=4, frequency=0.1)
        cache = Cache(Perlin(seed=42, octaves=4, frequency=0.1))
        assert [cache.get(p) for p in POINTS] == [leaf.get(p) for p in POINTS]

    def test_cache_fractal_forwarding_on_real_leaf(self):
        cache = Cache(Perlin(seed=1)).set_octaves(6)
        assert cache.source.octaves == 6


class TestPointLength:
    @pytest.mark.parametrize("point", [(0.1,), (0.1, 0.2, 0.3)])
    def test_perlin_rejects_wrong_length(self, point):
        with pytest.raises(DimensionMismatchError):
            Perlin(dimension=2).get(point)

    def test_simplex_rejects_wrong_length(self):
        with pytest.raises(DimensionMismatchError):
            Simplex(dimension=3).get((0.1, 0.2))

    def test_constant_rejects_wrong_length(self):
        with pytest.raises(DimensionMismatchError):
            Constant(1.0, dimension=2).get((0.0, 0.0, 0.0))

    def test_cache_rejects_wrong_length_on_empty_memo(self):
        cache = Cache(Perlin(dimension=2))
        with pytest.raises(DimensionMismatchError):
            cache.get((0.1, 0.2, 0.3))
        assert cache.is_empty
        assert math.isfinite(cache.get((0.1, 0.2)))
