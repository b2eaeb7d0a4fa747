"""
Plane noise map builder.

Evaluates a module tree over a rectangular window of the (x, z) plane and
writes the results into a NoiseMap, or streams them to a callback. In
seamless mode every value is blended with the values one window extent to
the right, below, and diagonally, so that copies of the rendered tile can be
placed side by side without visible seams.

Usage:
    import pycoherent as pc

    builder = pc.raster.NoiseMapBuilderPlane()
    builder.set_source_module(pc.module.Perlin(seed=3))
    builder.set_dest_noise_map(pc.raster.NoiseMap())
    builder.set_dest_size(256, 256)
    builder.set_bounds(2.0, 6.0, 1.0, 5.0)
    builder.enable_seamless(True)
    noise_map = builder.build()
"""

import logging
import numbers

import numpy as np

from .. import constants as cte
from ..exceptions import InvalidParameterError
from ..module import Module
from ..module.base import check_finite
from ..noise import linear_interp
from .noise_map import NoiseMap

logger = logging.getLogger(__name__)


class NoiseMapBuilderPlane:
    """
    Rasterize a module over a window of the plane.

    Cell (col, row) samples the coordinate
    ``(lower_x + col * x_extent / width, lower_z + row * z_extent / height)``.

    Args:
        source_module: Optional root module of the tree to render
        dest_noise_map: Optional NoiseMap receiving the values
        seamless: Enable seamless tiling (default False)
    """

    def __init__(self, source_module=None, dest_noise_map=None, seamless=False):
        self._source_module = None
        self._dest_noise_map = None
        self._dest_width = 0
        self._dest_height = 0
        self._lower_x_bound = 0.0
        self._upper_x_bound = 0.0
        self._lower_z_bound = 0.0
        self._upper_z_bound = 0.0
        self._is_seamless_enabled = False

        if source_module is not None:
            self.set_source_module(source_module)
        if dest_noise_map is not None:
            self.set_dest_noise_map(dest_noise_map)
        self.enable_seamless(seamless)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_bounds(self, lower_x: float, upper_x: float, lower_z: float, upper_z: float):
        """
        Set the window of the plane to render.

        Raises:
            InvalidParameterError: If a bound is not finite or an upper bound
                is not strictly greater than its lower bound
        """
        lower_x = check_finite("lower_x", lower_x)
        upper_x = check_finite("upper_x", upper_x)
        lower_z = check_finite("lower_z", lower_z)
        upper_z = check_finite("upper_z", upper_z)
        if upper_x <= lower_x or upper_z <= lower_z:
            raise InvalidParameterError(
                f"Invalid bounds x=[{lower_x}, {upper_x}], z=[{lower_z}, {upper_z}]: "
                "upper bounds must be greater than lower bounds"
            )
        self._lower_x_bound = lower_x
        self._upper_x_bound = upper_x
        self._lower_z_bound = lower_z
        self._upper_z_bound = upper_z

    def set_dest_size(self, width: int, height: int):
        """
        Set the size, in cells, of the rendered map.

        Raises:
            InvalidParameterError: If a dimension is not an integer between 1
                and the raster limits
        """
        for name, value, limit in (
            ("width", width, cte.RASTER_MAX_WIDTH),
            ("height", height, cte.RASTER_MAX_HEIGHT),
        ):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
            if not 1 <= value <= limit:
                raise InvalidParameterError(f"{name} must be between 1 and {limit}, got {value}")
        self._dest_width = int(width)
        self._dest_height = int(height)

    def set_source_module(self, module: Module):
        if not isinstance(module, Module):
            raise InvalidParameterError(
                f"Source module must be a Module instance, got {type(module).__name__}"
            )
        self._source_module = module

    def set_dest_noise_map(self, noise_map: NoiseMap):
        if not isinstance(noise_map, NoiseMap):
            raise InvalidParameterError(
                f"Destination must be a NoiseMap instance, got {type(noise_map).__name__}"
            )
        self._dest_noise_map = noise_map

    def enable_seamless(self, enable: bool = True):
        self._is_seamless_enabled = bool(enable)

    @property
    def is_seamless_enabled(self) -> bool:
        return self._is_seamless_enabled

    @property
    def source_module(self):
        return self._source_module

    @property
    def dest_noise_map(self):
        return self._dest_noise_map

    @property
    def dest_width(self) -> int:
        return self._dest_width

    @property
    def dest_height(self) -> int:
        return self._dest_height

    @property
    def lower_x_bound(self) -> float:
        return self._lower_x_bound

    @property
    def upper_x_bound(self) -> float:
        return self._upper_x_bound

    @property
    def lower_z_bound(self) -> float:
        return self._lower_z_bound

    @property
    def upper_z_bound(self) -> float:
        return self._upper_z_bound

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _check_bounds(self):
        if (
            self._upper_x_bound <= self._lower_x_bound
            or self._upper_z_bound <= self._lower_z_bound
        ):
            raise InvalidParameterError("Bounds have not been set (see set_bounds)")

    def _check_source(self):
        if self._source_module is None:
            raise InvalidParameterError("No source module (see set_source_module)")
        self._source_module.check_sources()

    def _check_size(self):
        if self._dest_width <= 0 or self._dest_height <= 0:
            raise InvalidParameterError("Destination size has not been set (see set_dest_size)")

    def _check_dest(self):
        if self._dest_noise_map is None:
            raise InvalidParameterError("No destination noise map (see set_dest_noise_map)")

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def _seamless(self, x, z, evaluate):
        # evaluate is the scalar or the array entry point of the source module
        x_extent = self._upper_x_bound - self._lower_x_bound
        z_extent = self._upper_z_bound - self._lower_z_bound

        sw_value = evaluate(x, z)
        se_value = evaluate(x + x_extent, z)
        nw_value = evaluate(x, z + z_extent)
        ne_value = evaluate(x + x_extent, z + z_extent)

        x_blend = 1.0 - ((x - self._lower_x_bound) / x_extent)
        z_blend = 1.0 - ((z - self._lower_z_bound) / z_extent)

        z0 = linear_interp(sw_value, se_value, x_blend)
        z1 = linear_interp(nw_value, ne_value, x_blend)
        return linear_interp(z0, z1, z_blend)

    def get_value(self, x: float, z: float) -> float:
        """
        Value the builder writes for the plane coordinate (x, z).

        In seamless mode this is the blended value; it can be evaluated past
        the window, e.g. at ``x = upper_x`` to check tile continuity.

        Raises:
            InvalidParameterError: If the source module (or, in seamless mode,
                the bounds) have not been set
        """
        self._check_source()
        if not self._is_seamless_enabled:
            return self._source_module.get_value(x, z)
        self._check_bounds()
        return self._seamless(x, z, self._source_module.get_value)

    def _row_values(self, row: int) -> np.ndarray:
        x_delta = (self._upper_x_bound - self._lower_x_bound) / self._dest_width
        z_delta = (self._upper_z_bound - self._lower_z_bound) / self._dest_height

        x = self._lower_x_bound + np.arange(self._dest_width) * x_delta
        z = np.full(self._dest_width, self._lower_z_bound + row * z_delta)

        if not self._is_seamless_enabled:
            return self._source_module.get_values(x, z)
        return self._seamless(x, z, self._source_module.get_values)

    def build(self) -> NoiseMap:
        """
        Render the source module into the destination noise map.

        Every parameter is validated before the destination is touched.

        Returns:
            The destination NoiseMap, resized to the destination size

        Raises:
            InvalidParameterError: If the bounds, size, source module or
                destination noise map are missing or invalid
            NoModuleError: If a module in the source tree has an empty slot
            OutOfMemoryError: If the destination cannot be resized
        """
        self._check_bounds()
        self._check_size()
        self._check_source()
        self._check_dest()

        logger.debug(
            f"Building {self._dest_width}x{self._dest_height} noise map over "
            f"x=[{self._lower_x_bound}, {self._upper_x_bound}], "
            f"z=[{self._lower_z_bound}, {self._upper_z_bound}], "
            f"seamless={self._is_seamless_enabled}"
        )

        noise_map = self._dest_noise_map
        noise_map.resize(self._dest_width, self._dest_height)
        for row in range(self._dest_height):
            noise_map.get_row(row)[:] = self._row_values(row)
        return noise_map

    def build_stream(self, sink):
        """
        Render the source module cell by cell into ``sink(col, row, value)``.

        Cells are delivered in row-major order. Only one row is held in memory
        at a time and no destination noise map is needed.

        Raises:
            InvalidParameterError: If the bounds, size or source module are
                missing or invalid, or sink is not callable
            NoModuleError: If a module in the source tree has an empty slot
        """
        self._check_bounds()
        self._check_size()
        self._check_source()
        if not callable(sink):
            raise InvalidParameterError("sink must be callable")

        logger.debug(
            f"Streaming {self._dest_width}x{self._dest_height} noise values, "
            f"seamless={self._is_seamless_enabled}"
        )

        for row in range(self._dest_height):
            for col, value in enumerate(self._row_values(row)):
                sink(col, row, float(value))
