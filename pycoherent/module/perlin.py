"""
Perlin noise generator module.

Sums octaves of gradient-coherent noise into the classic fractal Perlin
pattern. With a persistence below one the output stays roughly in [-1, 1],
although the sum of several octaves may slightly exceed it.

Usage:
    import pycoherent as pc

    perlin = pc.module.Perlin(frequency=4.0, octave_count=6, seed=42)
    h = perlin.get_value(0.25, 0.75)
"""

from .. import constants as cte
from .fractal import FractalModule


class Perlin(FractalModule):
    """
    Fractal gradient noise.

    Args:
        frequency: Frequency of the first octave (> 0, default 1.0)
        lacunarity: Frequency multiplier between octaves (> 0, default 2.0)
        octave_count: Number of octaves, 1 to 30 (default 6)
        persistence: Amplitude multiplier between octaves (default 0.5)
        quality: NoiseQuality of each octave (default QUALITY_STD)
        seed: 32-bit seed (default 0)
    """

    default_frequency = cte.DEFAULT_PERLIN_FREQUENCY
    default_lacunarity = cte.DEFAULT_PERLIN_LACUNARITY
    default_octave_count = cte.DEFAULT_PERLIN_OCTAVE_COUNT
    default_persistence = cte.DEFAULT_PERLIN_PERSISTENCE
    default_quality = cte.DEFAULT_PERLIN_QUALITY
    default_seed = cte.DEFAULT_PERLIN_SEED
    max_octave = cte.PERLIN_MAX_OCTAVE
