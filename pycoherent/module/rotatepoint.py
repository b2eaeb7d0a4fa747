"""
RotatePoint transformer module.

Rotates the input coordinate before handing it to the source module. The
rotation is a full 3D rotation built from three Euler angles; in the plane
only the first two rows of the matrix are applied.
"""

import math

import numpy as np

from .. import constants as cte
from .base import Module, check_finite


class RotatePoint(Module):
    """
    Evaluate the source module at a rotated coordinate.

    Args:
        source: Optional source module
        x_angle: Rotation around the x axis, in degrees (default 0)
        y_angle: Rotation around the y axis, in degrees (default 0)
        z_angle: Rotation around the z axis, in degrees (default 0)
    """

    source_module_count = 1

    def __init__(
        self,
        source=None,
        x_angle=cte.DEFAULT_ROTATE_X,
        y_angle=cte.DEFAULT_ROTATE_Y,
        z_angle=cte.DEFAULT_ROTATE_Z,
    ):
        super().__init__()
        self.set_angles(x_angle, y_angle, z_angle)
        if source is not None:
            self.set_source_module(0, source)

    def set_angles(self, x_angle, y_angle, z_angle):
        """
        Set the three rotation angles (degrees) and rebuild the matrix.

        Raises:
            InvalidParameterError: If an angle is not a finite number
        """
        x_angle = check_finite("x_angle", x_angle)
        y_angle = check_finite("y_angle", y_angle)
        z_angle = check_finite("z_angle", z_angle)

        x_cos = math.cos(x_angle * cte.DEG_TO_RAD)
        y_cos = math.cos(y_angle * cte.DEG_TO_RAD)
        z_cos = math.cos(z_angle * cte.DEG_TO_RAD)
        x_sin = math.sin(x_angle * cte.DEG_TO_RAD)
        y_sin = math.sin(y_angle * cte.DEG_TO_RAD)
        z_sin = math.sin(z_angle * cte.DEG_TO_RAD)

        self._x1_matrix = y_sin * x_sin * z_sin + y_cos * z_cos
        self._y1_matrix = x_cos * z_sin
        self._z1_matrix = y_sin * z_cos - y_cos * x_sin * z_sin
        self._x2_matrix = y_sin * x_sin * z_cos - y_cos * z_sin
        self._y2_matrix = x_cos * z_cos
        self._z2_matrix = -y_cos * x_sin * z_cos - y_sin * z_sin
        self._x3_matrix = -y_sin * x_cos
        self._y3_matrix = x_sin
        self._z3_matrix = y_cos * x_cos

        self._x_angle = x_angle
        self._y_angle = y_angle
        self._z_angle = z_angle

    @property
    def x_angle(self) -> float:
        return self._x_angle

    @x_angle.setter
    def x_angle(self, value):
        self.set_angles(value, self._y_angle, self._z_angle)

    @property
    def y_angle(self) -> float:
        return self._y_angle

    @y_angle.setter
    def y_angle(self, value):
        self.set_angles(self._x_angle, value, self._z_angle)

    @property
    def z_angle(self) -> float:
        return self._z_angle

    @z_angle.setter
    def z_angle(self, value):
        self.set_angles(self._x_angle, self._y_angle, value)

    @property
    def matrix(self) -> np.ndarray:
        """The 3x3 rotation matrix, one row per output axis."""
        return np.array(
            [
                [self._x1_matrix, self._y1_matrix, self._z1_matrix],
                [self._x2_matrix, self._y2_matrix, self._z2_matrix],
                [self._x3_matrix, self._y3_matrix, self._z3_matrix],
            ]
        )

    def get_value(self, x: float, y: float) -> float:
        self._require_source_modules()
        nx = (self._x1_matrix * x) + (self._y1_matrix * y)
        ny = (self._x2_matrix * x) + (self._y2_matrix * y)
        return self._source_modules[0].get_value(nx, ny)

    def get_values(self, x, y) -> np.ndarray:
        self._require_source_modules()
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        nx = (self._x1_matrix * x) + (self._y1_matrix * y)
        ny = (self._x2_matrix * x) + (self._y2_matrix * y)
        return self._source_modules[0].get_values(nx, ny)
