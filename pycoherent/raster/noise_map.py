"""
Resizable 2D buffer of noise values.

A NoiseMap stores its cells row by row in a flat NumPy array. Rows are padded
to a stride that is a multiple of RASTER_STRIDE_BOUNDARY, and the array is
kept when the map shrinks so that repeated resizing does not reallocate. The
padding is never visible: every accessor works in (x, y) cell coordinates.

Reads outside the map return the border value and writes outside the map are
ignored, which lets callers sample or splat slightly past the edges.
"""

import logging
import numbers
import operator

import numpy as np

from .. import constants as cte
from ..exceptions import InvalidParameterError, OutOfMemoryError

logger = logging.getLogger(__name__)


def calc_stride(width: int) -> int:
    """Row stride, in cells, of a map ``width`` cells wide."""
    boundary = cte.RASTER_STRIDE_BOUNDARY
    return ((width + boundary - 1) // boundary) * boundary


def calc_min_mem_usage(width: int, height: int) -> int:
    """Minimum number of cells needed to store a ``width`` x ``height`` map."""
    return calc_stride(width) * height


class NoiseMap:
    """
    2D array of noise values with a border value and a reusable backing store.

    Args:
        width: Initial width in cells (default 0, empty map)
        height: Initial height in cells (default 0, empty map)
        border_value: Value returned for reads outside the map (default 0.0)

    Note:
        Cell contents are undefined after ``resize`` until they are written
        (``clear`` or a builder pass).
    """

    def __init__(self, width: int = 0, height: int = 0, border_value: float = 0.0):
        self._init_obj()
        self.border_value = border_value
        self.resize(width, height)

    def _init_obj(self):
        self._store = None
        self._width = 0
        self._height = 0
        self._stride = 0
        self._mem_used = 0

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self):
        """(height, width), the shape returned by ``to_numpy``."""
        return (self._height, self._width)

    @property
    def stride(self) -> int:
        """Distance, in cells, between the starts of two consecutive rows."""
        return self._stride

    @property
    def mem_used(self) -> int:
        """Capacity of the backing store, in cells."""
        return self._mem_used

    @property
    def border_value(self) -> float:
        return self._border_value

    @border_value.setter
    def border_value(self, value):
        self._border_value = float(value)

    # ------------------------------------------------------------------
    # Storage management
    # ------------------------------------------------------------------
    @staticmethod
    def _allocate(count: int) -> np.ndarray:
        try:
            return np.empty(count, dtype=cte.FLOAT_TYPE_NP)
        except MemoryError as e:
            raise OutOfMemoryError(f"Cannot allocate a noise map of {count} cells") from e

    def _delete_and_reset(self):
        self._init_obj()

    def resize(self, width: int, height: int):
        """
        Change the dimensions of the map.

        The backing store is reused whenever it is large enough, so shrinking
        never reallocates. A zero width or height releases the store.

        Raises:
            InvalidParameterError: If a dimension is negative, not an integer
                or larger than the raster limits
            OutOfMemoryError: If the store cannot be allocated
        """
        for name, value, limit in (
            ("width", width, cte.RASTER_MAX_WIDTH),
            ("height", height, cte.RASTER_MAX_HEIGHT),
        ):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= limit:
                raise InvalidParameterError(f"{name} must be between 0 and {limit}, got {value}")

        width = int(width)
        height = int(height)

        if width == 0 or height == 0:
            self._delete_and_reset()
            return

        new_mem_usage = calc_min_mem_usage(width, height)
        if self._mem_used < new_mem_usage:
            store = self._allocate(new_mem_usage)
            self._delete_and_reset()
            self._store = store
            self._mem_used = new_mem_usage
            logger.debug(f"Allocated noise map store of {new_mem_usage} cells for {width}x{height}")

        self._stride = calc_stride(width)
        self._width = width
        self._height = height

    def reclaim_mem(self):
        """Shrink the backing store to the minimum needed, keeping the cell values."""
        new_mem_usage = calc_min_mem_usage(self._width, self._height)
        if self._mem_used > new_mem_usage:
            store = self._allocate(new_mem_usage)
            store[:] = self._store[:new_mem_usage]
            self._store = store
            logger.debug(f"Reclaimed noise map store: {self._mem_used} -> {new_mem_usage} cells")
            self._mem_used = new_mem_usage

    def take_ownership(self, source: "NoiseMap"):
        """
        Move the backing store of ``source`` into this map without copying.

        This map takes the dimensions and values of ``source``, which is left
        empty. Each map keeps its own border value.
        """
        if source is self:
            return
        self._store = source._store
        self._width = source._width
        self._height = source._height
        self._stride = source._stride
        self._mem_used = source._mem_used
        source._delete_and_reset()
        logger.debug(f"Took ownership of a {self._width}x{self._height} noise map store")

    def _grid(self) -> np.ndarray:
        # (height, width) view over the store, padding excluded
        rows = self._store[: self._stride * self._height].reshape(self._height, self._stride)
        return rows[:, : self._width]

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    @staticmethod
    def _cell_index(x, y):
        try:
            return operator.index(x), operator.index(y)
        except TypeError:
            raise InvalidParameterError(
                f"Cell coordinates must be integers, got ({x!r}, {y!r})"
            ) from None

    def get_value(self, x: int, y: int) -> float:
        """
        Return the value of cell (x, y), or the border value outside the map.

        Raises:
            InvalidParameterError: If a coordinate is not an integer
        """
        x, y = self._cell_index(x, y)
        if self._store is not None and 0 <= x < self._width and 0 <= y < self._height:
            return float(self._store[y * self._stride + x])
        return self._border_value

    def set_value(self, x: int, y: int, value: float):
        """
        Set the value of cell (x, y); does nothing outside the map.

        Raises:
            InvalidParameterError: If a coordinate is not an integer
        """
        x, y = self._cell_index(x, y)
        if self._store is not None and 0 <= x < self._width and 0 <= y < self._height:
            self._store[y * self._stride + x] = value

    def get_row(self, y: int) -> np.ndarray:
        """
        Writable view of row ``y`` (exactly ``width`` cells).

        Raises:
            InvalidParameterError: If the row does not exist
        """
        if self._store is None or not 0 <= y < self._height:
            raise InvalidParameterError(f"Row {y} is outside a map of height {self._height}")
        start = y * self._stride
        return self._store[start : start + self._width]

    def clear(self, value: float):
        """Set every cell to ``value``."""
        if self._store is not None:
            self._grid()[:] = value

    def to_numpy(self) -> np.ndarray:
        """Return a (height, width) copy of the cell values."""
        if self._store is None:
            return np.empty((self._height, self._width), dtype=cte.FLOAT_TYPE_NP)
        return self._grid().copy()

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------
    def assign(self, source: "NoiseMap"):
        """Make this map a deep copy of ``source`` (values and border value)."""
        if source is self:
            return
        self.resize(source._width, source._height)
        if source._store is not None:
            self._grid()[:] = source._grid()
        self._border_value = source._border_value

    def copy(self) -> "NoiseMap":
        """Return a deep copy of this map, with a minimal backing store."""
        clone = NoiseMap(border_value=self._border_value)
        clone.assign(self)
        return clone

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __repr__(self):
        return (
            f"NoiseMap(width={self._width}, height={self._height}, "
            f"stride={self._stride}, mem_used={self._mem_used}, "
            f"border_value={self._border_value})"
        )
