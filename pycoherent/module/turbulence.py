"""
Turbulence transformer module.

Randomly displaces the input coordinate with two internal Perlin modules
before evaluating the source module, which adds a swirling distortion to any
noise tree.
"""

import numpy as np

from .. import constants as cte
from .base import Module, check_finite, check_octave_count, check_positive, check_seed, offset_seed
from .perlin import Perlin


class Turbulence(Module):
    """
    Evaluate the source module at a Perlin-distorted coordinate.

    The internal distortion modules always share frequency and roughness, and
    use the consecutive seeds ``seed``, ``seed + 1`` and ``seed + 2`` so that
    the x and y displacements are uncorrelated. The third module only exists
    to keep seeds aligned with the 3D form of this module; it is not sampled
    in the plane.

    Args:
        source: Optional source module
        frequency: Frequency of the distortion modules (default 1.0)
        power: Scale of the displacement (default 1.0)
        roughness: Octave count of the distortion modules (default 3)
        seed: Seed of the x distortion module (default 0)
    """

    source_module_count = 1

    def __init__(self, source=None, frequency=None, power=None, roughness=None, seed=None):
        super().__init__()
        self._x_distort_module = Perlin()
        self._y_distort_module = Perlin()
        self._z_distort_module = Perlin()

        self.seed = cte.DEFAULT_TURBULENCE_SEED if seed is None else seed
        self.frequency = cte.DEFAULT_TURBULENCE_FREQUENCY if frequency is None else frequency
        self.roughness = cte.DEFAULT_TURBULENCE_ROUGHNESS if roughness is None else roughness
        self.power = cte.DEFAULT_TURBULENCE_POWER if power is None else power

        if source is not None:
            self.set_source_module(0, source)

    @property
    def _distort_modules(self):
        return (self._x_distort_module, self._y_distort_module, self._z_distort_module)

    @property
    def distort_seeds(self) -> tuple:
        """Seeds of the x, y and z distortion modules."""
        return tuple(module.seed for module in self._distort_modules)

    @property
    def distort_frequencies(self) -> tuple:
        """Frequencies of the x, y and z distortion modules."""
        return tuple(module.frequency for module in self._distort_modules)

    @property
    def distort_octave_counts(self) -> tuple:
        """Octave counts of the x, y and z distortion modules."""
        return tuple(module.octave_count for module in self._distort_modules)

    @property
    def frequency(self) -> float:
        # All distortion modules share one frequency
        return self._x_distort_module.frequency

    @frequency.setter
    def frequency(self, value):
        value = check_positive("frequency", value)
        for module in self._distort_modules:
            module.frequency = value

    @property
    def roughness(self) -> int:
        """Octave count of the distortion modules."""
        return self._x_distort_module.octave_count

    @roughness.setter
    def roughness(self, value):
        value = check_octave_count(value, cte.PERLIN_MAX_OCTAVE)
        for module in self._distort_modules:
            module.octave_count = value

    @property
    def seed(self) -> int:
        return self._x_distort_module.seed

    @seed.setter
    def seed(self, value):
        value = check_seed(value)
        for offset, module in enumerate(self._distort_modules):
            module.seed = offset_seed(value, offset)

    @property
    def power(self) -> float:
        return self._power

    @power.setter
    def power(self, value):
        self._power = check_finite("power", value)

    def get_value(self, x: float, y: float) -> float:
        self._require_source_modules()

        x0 = x + cte.TURBULENCE_X_OFFSET[0]
        y0 = y + cte.TURBULENCE_X_OFFSET[1]
        x1 = x + cte.TURBULENCE_Y_OFFSET[0]
        y1 = y + cte.TURBULENCE_Y_OFFSET[1]

        x_distort = x + (self._x_distort_module.get_value(x0, y0) * self._power)
        y_distort = y + (self._y_distort_module.get_value(x1, y1) * self._power)

        return self._source_modules[0].get_value(x_distort, y_distort)

    def get_values(self, x, y) -> np.ndarray:
        self._require_source_modules()
        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))

        x0 = x + cte.TURBULENCE_X_OFFSET[0]
        y0 = y + cte.TURBULENCE_X_OFFSET[1]
        x1 = x + cte.TURBULENCE_Y_OFFSET[0]
        y1 = y + cte.TURBULENCE_Y_OFFSET[1]

        x_distort = x + (self._x_distort_module.get_values(x0, y0) * self._power)
        y_distort = y + (self._y_distort_module.get_values(x1, y1) * self._power)

        return self._source_modules[0].get_values(x_distort, y_distort)
