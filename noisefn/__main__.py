"""
Small demo: build a cached tree from presets and print a few samples
"""

import sys

import numpy as np

from .cache import Cache
from .combiners import Add, Min
from .config import NoiseConfig
from .sampling import sample_plane


def main(preset: str = "hills", seed: int = 42):
    base = Cache(NoiseConfig(preset=preset, seed=seed).build())
    detail = NoiseConfig(noise_type="simplex", preset="mountains", seed=seed + 1).build()

    # `base` feeds both branches, so each grid point evaluates it once.
    tree = Min(Add(base, detail), base)
    print(f"Tree: {tree!r}")

    grid = sample_plane(tree, 32, x_bounds=(0, 64), y_bounds=(0, 64))
    print(f"Sampled {grid.shape[1]}x{grid.shape[0]} grid")
    print(f"  range [{grid.min():.3f}, {grid.max():.3f}], mean {np.mean(grid):.3f}")

    reseeded = base.set_seed(seed + 100)
    print(f"Reseeded base: seed {reseeded.seed}, value at origin {reseeded.get((0.0, 0.0)):.4f}")


if __name__ == "__main__":
    args = sys.argv[1:]
    preset = args[0] if args else "hills"
    seed = int(args[1]) if len(args) > 1 else 42
    main(preset, seed)
