"""
Billow noise generator module.

Same octave loop as Perlin, but every octave's signal is folded with
``2 * |signal| - 1`` before weighting, which turns smooth noise into rounded,
lumpy shapes (clouds, rocks). A constant 0.5 is added to the final sum.
"""

from .. import constants as cte
from .fractal import FractalModule


class Billow(FractalModule):
    """
    Fractal noise of folded gradient-coherent octaves.

    Accepts the same settings as Perlin, with the Billow defaults.
    """

    default_frequency = cte.DEFAULT_BILLOW_FREQUENCY
    default_lacunarity = cte.DEFAULT_BILLOW_LACUNARITY
    default_octave_count = cte.DEFAULT_BILLOW_OCTAVE_COUNT
    default_persistence = cte.DEFAULT_BILLOW_PERSISTENCE
    default_quality = cte.DEFAULT_BILLOW_QUALITY
    default_seed = cte.DEFAULT_BILLOW_SEED
    max_octave = cte.BILLOW_MAX_OCTAVE

    def _shape_signal(self, signal):
        return 2.0 * abs(signal) - 1.0

    def _finish(self, value):
        return value + 0.5
