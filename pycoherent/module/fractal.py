"""
Shared octave loop of the fractal generator modules (Perlin, Billow).

A fractal generator sums several octaves of gradient-coherent noise. Each
octave samples at ``lacunarity`` times the previous frequency, weights the
signal by ``persistence ** octave`` and uses its own seed so that octaves are
decorrelated.
"""

import numpy as np

from ..noise import gradient_coherent_noise, make_int32_range
from ..noise.vectorized import gradient_coherent_noise_array, make_int32_range_array
from .base import (
    Module,
    check_finite,
    check_octave_count,
    check_positive,
    check_quality,
    check_seed,
)


class FractalModule(Module):
    """
    Generator summing octaves of gradient-coherent noise.

    Subclasses provide the default settings and may reshape each octave's
    signal (``_shape_signal``) or the final sum (``_finish``).
    """

    source_module_count = 0

    default_frequency = 1.0
    default_lacunarity = 2.0
    default_octave_count = 6
    default_persistence = 0.5
    default_quality = 1
    default_seed = 0
    max_octave = 30

    def __init__(
        self,
        frequency=None,
        lacunarity=None,
        octave_count=None,
        persistence=None,
        quality=None,
        seed=None,
    ):
        super().__init__()
        self.frequency = self.default_frequency if frequency is None else frequency
        self.lacunarity = self.default_lacunarity if lacunarity is None else lacunarity
        self.octave_count = self.default_octave_count if octave_count is None else octave_count
        self.persistence = self.default_persistence if persistence is None else persistence
        self.quality = self.default_quality if quality is None else quality
        self.seed = self.default_seed if seed is None else seed

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    @property
    def frequency(self) -> float:
        """Frequency of the first octave."""
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        self._frequency = check_positive("frequency", value)

    @property
    def lacunarity(self) -> float:
        """Frequency multiplier between successive octaves."""
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, value):
        self._lacunarity = check_positive("lacunarity", value)

    @property
    def octave_count(self) -> int:
        """Number of octaves, between 1 and ``max_octave``."""
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value):
        self._octave_count = check_octave_count(value, self.max_octave)

    @property
    def persistence(self) -> float:
        """
        Amplitude multiplier between successive octaves.

        Usually in (0, 1); any finite value is accepted.
        """
        return self._persistence

    @persistence.setter
    def persistence(self, value):
        self._persistence = check_finite("persistence", value)

    @property
    def quality(self):
        """NoiseQuality used by every octave."""
        return self._quality

    @quality.setter
    def quality(self, value):
        self._quality = check_quality(value)

    @property
    def seed(self) -> int:
        """Seed of the first octave; octave ``i`` uses ``seed + i``."""
        return self._seed

    @seed.setter
    def seed(self, value):
        self._seed = check_seed(value)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def _shape_signal(self, signal):
        return signal

    def _finish(self, value):
        return value

    def get_value(self, x: float, y: float) -> float:
        value = 0.0
        cur_persistence = 1.0

        x *= self._frequency
        y *= self._frequency

        for octave in range(self._octave_count):
            # Keep the coordinates within the range the integer kernel accepts
            nx = make_int32_range(x)
            ny = make_int32_range(y)

            seed = (self._seed + octave) & 0xFFFFFFFF
            signal = gradient_coherent_noise(nx, ny, seed, self._quality)
            value += self._shape_signal(signal) * cur_persistence

            x *= self._lacunarity
            y *= self._lacunarity
            cur_persistence *= self._persistence

        return self._finish(value)

    def get_values(self, x, y) -> np.ndarray:
        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        value = np.zeros(x.shape, dtype=np.float64)
        cur_persistence = 1.0

        x = x * self._frequency
        y = y * self._frequency

        for octave in range(self._octave_count):
            nx = make_int32_range_array(x)
            ny = make_int32_range_array(y)

            seed = (self._seed + octave) & 0xFFFFFFFF
            signal = gradient_coherent_noise_array(nx, ny, seed, self._quality)
            value += self._shape_signal(signal) * cur_persistence

            x = x * self._lacunarity
            y = y * self._lacunarity
            cur_persistence *= self._persistence

        return self._finish(value)

    def __repr__(self):
        return (
            f"{type(self).__name__}(frequency={self._frequency}, "
            f"lacunarity={self._lacunarity}, octave_count={self._octave_count}, "
            f"persistence={self._persistence}, quality={self._quality.name}, "
            f"seed={self._seed})"
        )
