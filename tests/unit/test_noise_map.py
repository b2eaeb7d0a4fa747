"""
Unit tests for the NoiseMap buffer.
"""

import copy

import numpy as np
import pytest

from pycoherent.exceptions import InvalidParameterError
from pycoherent.raster import NoiseMap, calc_min_mem_usage, calc_stride


class TestStride:
    """Test stride helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize("width, stride", [(1, 4), (3, 4), (4, 4), (5, 8), (17, 20)])
    def test_calc_stride(self, width, stride):
        assert calc_stride(width) == stride

    @pytest.mark.unit
    def test_calc_min_mem_usage(self):
        assert calc_min_mem_usage(5, 3) == 24


class TestNoiseMapBasics:
    """Test construction, metadata and cell access."""

    @pytest.mark.unit
    def test_empty_by_default(self):
        noise_map = NoiseMap()
        assert noise_map.width == 0
        assert noise_map.height == 0
        assert noise_map.mem_used == 0
        assert noise_map.border_value == 0.0
        assert noise_map.to_numpy().shape == (0, 0)

    @pytest.mark.unit
    def test_dimensions(self):
        noise_map = NoiseMap(5, 3)
        assert noise_map.width == 5
        assert noise_map.height == 3
        assert noise_map.shape == (3, 5)
        assert noise_map.stride == 8
        assert noise_map.mem_used == 24

    @pytest.mark.unit
    def test_set_and_get(self):
        noise_map = NoiseMap(4, 4)
        noise_map.clear(0.0)
        noise_map.set_value(2, 3, 0.75)
        assert noise_map.get_value(2, 3) == 0.75
        assert noise_map.get_value(3, 2) == 0.0

    @pytest.mark.unit
    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100)])
    def test_border_value_outside(self, x, y):
        """Reads outside the map return the border value."""
        noise_map = NoiseMap(4, 3, border_value=-9.5)
        noise_map.clear(1.0)
        assert noise_map.get_value(x, y) == -9.5

    @pytest.mark.unit
    def test_set_outside_is_ignored(self):
        """Writes outside the map do nothing."""
        noise_map = NoiseMap(4, 3)
        noise_map.clear(1.0)
        noise_map.set_value(4, 0, 5.0)
        noise_map.set_value(-1, 2, 5.0)
        np.testing.assert_array_equal(noise_map.to_numpy(), np.ones((3, 4)))

    @pytest.mark.unit
    @pytest.mark.parametrize("x, y", [(1.5, 0), (0, 2.0), ("1", 0), (None, 0)])
    def test_non_integer_coordinates(self, x, y):
        """Non-integer cell coordinates raise InvalidParameterError."""
        noise_map = NoiseMap(4, 3)
        noise_map.clear(1.0)
        with pytest.raises(InvalidParameterError):
            noise_map.get_value(x, y)
        with pytest.raises(InvalidParameterError):
            noise_map.set_value(x, y, 2.0)
        assert np.all(noise_map.to_numpy() == 1.0)

    @pytest.mark.unit
    def test_numpy_integer_coordinates(self):
        noise_map = NoiseMap(4, 3)
        noise_map.clear(0.0)
        noise_map.set_value(np.int64(3), np.int32(2), 0.5)
        assert noise_map.get_value(np.int64(3), np.int64(2)) == 0.5

    @pytest.mark.unit
    def test_empty_map_reads_border(self):
        noise_map = NoiseMap(border_value=2.0)
        assert noise_map.get_value(0, 0) == 2.0
        noise_map.set_value(0, 0, 1.0)

    @pytest.mark.unit
    def test_clear(self):
        noise_map = NoiseMap(6, 2)
        noise_map.clear(-0.5)
        values = noise_map.to_numpy()
        assert values.dtype == np.float32
        assert np.all(values == -0.5)

    @pytest.mark.unit
    def test_get_row_is_writable_view(self):
        noise_map = NoiseMap(5, 2)
        noise_map.clear(0.0)
        row = noise_map.get_row(1)
        assert row.shape == (5,)
        row[:] = 3.0
        assert noise_map.get_value(4, 1) == 3.0
        assert noise_map.get_value(4, 0) == 0.0

    @pytest.mark.unit
    @pytest.mark.parametrize("y", [-1, 2])
    def test_get_row_out_of_range(self, y):
        with pytest.raises(InvalidParameterError):
            NoiseMap(5, 2).get_row(y)


class TestNoiseMapStorage:
    """Test resizing and memory reuse."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "width, height", [(-1, 4), (4, -1), (32768, 1), (1, 32768), (2.5, 3), (True, 3)]
    )
    def test_invalid_sizes(self, width, height):
        noise_map = NoiseMap(2, 2)
        with pytest.raises(InvalidParameterError):
            noise_map.resize(width, height)
        assert noise_map.shape == (2, 2)

    @pytest.mark.unit
    def test_shrink_reuses_store(self):
        """Shrinking keeps the backing store."""
        noise_map = NoiseMap(10, 10)
        store = noise_map._store
        noise_map.resize(5, 5)
        assert noise_map._store is store
        assert noise_map.mem_used == 120
        assert noise_map.stride == 8

    @pytest.mark.unit
    def test_regrow_within_capacity_reuses_store(self):
        """Growing back to a size the store already held does not reallocate."""
        noise_map = NoiseMap()
        noise_map.resize(100, 100)
        store = noise_map._store
        noise_map.resize(10, 10)
        noise_map.resize(100, 100)
        assert noise_map._store is store
        assert noise_map.mem_used == calc_min_mem_usage(100, 100)
        assert noise_map.shape == (100, 100)

    @pytest.mark.unit
    def test_grow_reallocates(self):
        noise_map = NoiseMap(4, 4)
        noise_map.resize(40, 40)
        assert noise_map.mem_used == calc_min_mem_usage(40, 40)

    @pytest.mark.unit
    def test_reclaim_mem(self):
        """Reclaiming shrinks the store and keeps the values."""
        noise_map = NoiseMap(10, 10)
        noise_map.resize(5, 5)
        noise_map.clear(1.5)
        noise_map.set_value(4, 4, 3.0)
        noise_map.reclaim_mem()
        assert noise_map.mem_used == 40
        assert noise_map.get_value(4, 4) == 3.0
        assert noise_map.get_value(0, 0) == 1.5

    @pytest.mark.unit
    def test_resize_to_zero_frees(self):
        noise_map = NoiseMap(8, 8, border_value=4.0)
        noise_map.resize(0, 5)
        assert noise_map.width == 0
        assert noise_map.height == 0
        assert noise_map.mem_used == 0
        assert noise_map.border_value == 4.0

    @pytest.mark.unit
    def test_take_ownership(self):
        source = NoiseMap(4, 3, border_value=1.0)
        source.clear(7.0)
        store = source._store

        dest = NoiseMap(border_value=-1.0)
        dest.take_ownership(source)

        assert dest._store is store
        assert dest.shape == (3, 4)
        assert dest.get_value(3, 2) == 7.0
        assert dest.border_value == -1.0
        assert source.width == 0
        assert source.mem_used == 0


class TestNoiseMapCopy:
    """Test deep copies."""

    @pytest.mark.unit
    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy, NoiseMap.copy])
    def test_copy_is_independent(self, copier):
        original = NoiseMap(3, 2, border_value=0.25)
        original.clear(1.0)
        clone = copier(original)
        original.set_value(0, 0, 9.0)
        assert clone.get_value(0, 0) == 1.0
        assert clone.border_value == 0.25
        assert clone.shape == original.shape

    @pytest.mark.unit
    def test_assign(self):
        source = NoiseMap(6, 2, border_value=3.0)
        source.clear(2.0)
        source.set_value(5, 1, -1.0)
        dest = NoiseMap(1, 1)
        dest.assign(source)
        np.testing.assert_array_equal(dest.to_numpy(), source.to_numpy())
        assert dest.border_value == 3.0
        assert dest._store is not source._store
