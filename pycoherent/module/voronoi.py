"""
Voronoi cell generator module.

The plane is divided into unit cells, each holding one pseudo-random seed
point. An input position belongs to the cell of its nearest seed point. The
output is a per-cell constant (flat plateaus, useful for cracked or cellular
terrain), optionally plus the distance to the seed point.
"""

import math

import numpy as np

from .. import constants as cte
from ..noise import value_noise
from ..noise.vectorized import value_noise_array
from .base import Module, check_finite, check_positive, check_seed

# A seed point may sit anywhere around its cell, so the nearest one can be up
# to two cells away.
_SEARCH_RADIUS = 2


class Voronoi(Module):
    """
    Voronoi cells.

    Args:
        frequency: Number of cells per unit length (> 0, default 1.0)
        displacement: Scale of the per-cell value (default 1.0)
        enable_distance: Add the distance to the nearest seed point
            (default False)
        seed: 32-bit seed of the seed point positions (default 0)
    """

    source_module_count = 0

    def __init__(self, frequency=None, displacement=None, enable_distance=False, seed=None):
        super().__init__()
        self.frequency = cte.DEFAULT_VORONOI_FREQUENCY if frequency is None else frequency
        self.displacement = (
            cte.DEFAULT_VORONOI_DISPLACEMENT if displacement is None else displacement
        )
        self.enable_distance = enable_distance
        self.seed = cte.DEFAULT_VORONOI_SEED if seed is None else seed

    @property
    def frequency(self) -> float:
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        self._frequency = check_positive("frequency", value)

    @property
    def displacement(self) -> float:
        """Scale applied to the per-cell value in [-1, 1]."""
        return self._displacement

    @displacement.setter
    def displacement(self, value):
        self._displacement = check_finite("displacement", value)

    @property
    def enable_distance(self) -> bool:
        return self._enable_distance

    @enable_distance.setter
    def enable_distance(self, value):
        self._enable_distance = bool(value)

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value):
        self._seed = check_seed(value)

    def get_value(self, x: float, y: float) -> float:
        x *= self._frequency
        y *= self._frequency

        x_int = math.floor(x)
        y_int = math.floor(y)

        min_dist = cte.VORONOI_MAX_DIST
        x_candidate = 0.0
        y_candidate = 0.0

        # Rows outer, columns inner: on equal distances the first cell wins
        for y_cur in range(y_int - _SEARCH_RADIUS, y_int + _SEARCH_RADIUS + 1):
            for x_cur in range(x_int - _SEARCH_RADIUS, x_int + _SEARCH_RADIUS + 1):
                x_pos = x_cur + value_noise(x_cur, y_cur, self._seed)
                y_pos = y_cur + value_noise(x_cur, y_cur, self._seed + 1)
                x_dist = x_pos - x
                y_dist = y_pos - y
                dist = x_dist * x_dist + y_dist * y_dist

                if dist < min_dist:
                    min_dist = dist
                    x_candidate = x_pos
                    y_candidate = y_pos

        if self._enable_distance:
            x_dist = x_candidate - x
            y_dist = y_candidate - y
            value = math.sqrt(x_dist * x_dist + y_dist * y_dist) * cte.SQRT_3 - 1.0
        else:
            value = 0.0

        return value + (
            self._displacement
            * value_noise(math.floor(x_candidate), math.floor(y_candidate))
        )

    def get_values(self, x, y) -> np.ndarray:
        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        x = x * self._frequency
        y = y * self._frequency

        x_int = np.floor(x).astype(np.int64)
        y_int = np.floor(y).astype(np.int64)

        min_dist = np.full(x.shape, cte.VORONOI_MAX_DIST)
        x_candidate = np.zeros(x.shape)
        y_candidate = np.zeros(x.shape)

        for dy in range(-_SEARCH_RADIUS, _SEARCH_RADIUS + 1):
            y_cur = y_int + dy
            for dx in range(-_SEARCH_RADIUS, _SEARCH_RADIUS + 1):
                x_cur = x_int + dx
                x_pos = x_cur + value_noise_array(x_cur, y_cur, self._seed)
                y_pos = y_cur + value_noise_array(x_cur, y_cur, self._seed + 1)
                x_dist = x_pos - x
                y_dist = y_pos - y
                dist = x_dist * x_dist + y_dist * y_dist

                closer = dist < min_dist
                min_dist = np.where(closer, dist, min_dist)
                x_candidate = np.where(closer, x_pos, x_candidate)
                y_candidate = np.where(closer, y_pos, y_candidate)

        if self._enable_distance:
            x_dist = x_candidate - x
            y_dist = y_candidate - y
            value = np.sqrt(x_dist * x_dist + y_dist * y_dist) * cte.SQRT_3 - 1.0
        else:
            value = np.zeros(x.shape)

        return value + (
            self._displacement
            * value_noise_array(
                np.floor(x_candidate).astype(np.int64),
                np.floor(y_candidate).astype(np.int64),
            )
        )
