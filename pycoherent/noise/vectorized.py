"""
NumPy rendition of the coherent-noise kernel.

Each function mirrors its scalar counterpart in pycoherent.noise.noisegen and
performs the same floating-point operations in the same order, so an array
result equals the scalar result element by element. The integer hash runs in
uint64 with wrap-around; only the low 31 bits are kept, which are the same
bits the unbounded scalar arithmetic produces.

Inputs may be scalars or arrays of any shape; outputs broadcast accordingly.
"""

import numpy as np

from .. import constants as cte
from .interp import linear_interp, s_curve3, s_curve5
from .noisegen import GRADIENT_INDEX_SHIFT, GRADIENT_NORMALIZATION, GRADIENTS_2D, NoiseQuality

_GRADIENTS = np.array(GRADIENTS_2D, dtype=np.float64)

_MASK31 = np.uint64(0x7FFFFFFF)
_MUL_A = np.uint64(60493)
_ADD_B = np.uint64(19990303)
_ADD_C = np.uint64(1376312589)


def int_hash_array(x, y, seed: int = 0) -> np.ndarray:
    """
    Vectorised int_hash.

    Args:
        x: Integer x coordinates (array-like)
        y: Integer y coordinates (array-like)
        seed: Random seed (scalar)

    Returns:
        int64 array of hashes in [0, 2147483647]
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.int64), np.asarray(y, dtype=np.int64))
    shape = x.shape
    x = np.atleast_1d(x)
    y = np.atleast_1d(y)

    with np.errstate(over="ignore"):
        n = (1619 * x + 6971 * y + 1013 * int(seed)) & 0x7FFFFFFF
        n = (n >> 13) ^ n
        n = n.astype(np.uint64)
        n = (n * (n * n * _MUL_A + _ADD_B) + _ADD_C) & _MASK31

    return n.astype(np.int64).reshape(shape)


def value_noise_array(x, y, seed: int = 0) -> np.ndarray:
    """Vectorised value_noise."""
    return 1.0 - (int_hash_array(x, y, seed) / 1073741824.0)


def gradient_noise_array(fx, fy, ix, iy, seed: int = 0) -> np.ndarray:
    """Vectorised gradient_noise; same precondition on |fx - ix| and |fy - iy|."""
    g = _GRADIENTS[int_hash_array(ix, iy, seed) >> GRADIENT_INDEX_SHIFT]
    return GRADIENT_NORMALIZATION * ((g[..., 0] * (fx - ix)) + (g[..., 1] * (fy - iy)))


def gradient_coherent_noise_array(x, y, seed: int = 0, quality: int = NoiseQuality.QUALITY_STD) -> np.ndarray:
    """
    Vectorised gradient_coherent_noise.

    Args:
        x: x coordinates (float array-like, within the 32-bit range)
        y: y coordinates (float array-like, within the 32-bit range)
        seed: Random seed
        quality: NoiseQuality selecting the shaping curve

    Returns:
        float64 array of noise values in [-1, 1]
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))

    fx0 = np.floor(x)
    fy0 = np.floor(y)
    x0 = fx0.astype(np.int64)
    y0 = fy0.astype(np.int64)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = x - fx0
    ys = y - fy0
    if quality == NoiseQuality.QUALITY_STD:
        xs = s_curve3(xs)
        ys = s_curve3(ys)
    elif quality != NoiseQuality.QUALITY_FAST:
        xs = s_curve5(xs)
        ys = s_curve5(ys)

    n0 = gradient_noise_array(x, y, x0, y0, seed)
    n1 = gradient_noise_array(x, y, x1, y0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise_array(x, y, x0, y1, seed)
    n1 = gradient_noise_array(x, y, x1, y1, seed)
    ix1 = linear_interp(n0, n1, xs)
    return linear_interp(ix0, ix1, ys)


def make_int32_range_array(n) -> np.ndarray:
    """Vectorised make_int32_range."""
    n = np.asarray(n, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        folded = 2.0 * np.fmod(n, cte.INT32_RANGE)
    return np.where(
        n >= cte.INT32_RANGE,
        folded - cte.INT32_RANGE,
        np.where(n <= -cte.INT32_RANGE, folded + cte.INT32_RANGE, n),
    )
