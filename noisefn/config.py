import json
import logging
import os
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .cache import Cache
from .core import NoiseFn
from .generators import (
    DEFAULT_FREQUENCY,
    DEFAULT_LACUNARITY,
    DEFAULT_OCTAVES,
    DEFAULT_PERSISTENCE,
    DEFAULT_SEED,
    Perlin,
    Simplex,
)

logger = logging.getLogger(__name__)


class NoiseType(Enum):
    PERLIN = "perlin"
    SIMPLEX = "simplex"


class NoisePreset(Enum):
    PLAINS = "plains"
    HILLS = "hills"
    MOUNTAINS = "mountains"
    CANYON = "canyon"


GENERATORS = {
    NoiseType.PERLIN: Perlin,
    NoiseType.SIMPLEX: Simplex,
}

PRESETS: Dict[NoisePreset, Dict[str, Any]] = {
    NoisePreset.PLAINS: {
        'octaves': 4, 'frequency': 1 / 40.0, 'persistence': 0.3, 'lacunarity': 2.0
    },
    NoisePreset.HILLS: {
        'octaves': 5, 'frequency': 1 / 30.0, 'persistence': 0.4, 'lacunarity': 2.0
    },
    NoisePreset.MOUNTAINS: {
        'octaves': 6, 'frequency': 1 / 20.0, 'persistence': 0.5, 'lacunarity': 2.0
    },
    NoisePreset.CANYON: {
        'octaves': 6, 'frequency': 1 / 15.0, 'persistence': 0.6, 'lacunarity': 2.2
    },
}


def _parse_enum(enum_cls, value, label: str):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"Unknown {label}: {value}") from None


@dataclass
class NoiseConfig:
    noise_type: NoiseType = NoiseType.PERLIN
    dimension: int = 2
    seed: int = DEFAULT_SEED
    octaves: int = DEFAULT_OCTAVES
    frequency: float = DEFAULT_FREQUENCY
    lacunarity: float = DEFAULT_LACUNARITY
    persistence: float = DEFAULT_PERSISTENCE

    # Overrides the fractal fields above when set
    preset: Optional[NoisePreset] = None
    cached: bool = False

    def __post_init__(self):
        """Resolve names and apply the preset's fractal settings"""
        self.noise_type = _parse_enum(NoiseType, self.noise_type, "noise type")
        self.preset = _parse_enum(NoisePreset, self.preset, "preset")

        if self.preset is not None:
            for key, value in PRESETS[self.preset].items():
                setattr(self, key, value)

    def build(self) -> NoiseFn:
        generator = GENERATORS[self.noise_type](
            dimension=self.dimension,
            seed=self.seed,
            octaves=self.octaves,
            frequency=self.frequency,
            lacunarity=self.lacunarity,
            persistence=self.persistence,
        )
        if self.cached:
            return Cache(generator)
        return generator

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['noise_type'] = self.noise_type.value
        data['preset'] = self.preset.value if self.preset else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoiseConfig":
        return cls(
            noise_type=data.get('noise_type', NoiseType.PERLIN.value),
            dimension=data.get('dimension', 2),
            seed=data.get('seed', DEFAULT_SEED),
            octaves=data.get('octaves', DEFAULT_OCTAVES),
            frequency=data.get('frequency', DEFAULT_FREQUENCY),
            lacunarity=data.get('lacunarity', DEFAULT_LACUNARITY),
            persistence=data.get('persistence', DEFAULT_PERSISTENCE),
            preset=data.get('preset'),
            cached=data.get('cached', False),
        )

    @classmethod
    def load(cls, path: str) -> "NoiseConfig":
        """Read a config from JSON; a missing file gives the defaults"""
        if not os.path.exists(path):
            logger.warning("%s not found, using defaults", path)
            return cls()

        with open(path, 'r') as f:
            return cls.from_dict(json.load(f))

    def save(self, path: str):
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
