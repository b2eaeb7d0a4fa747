"""
Coherent-noise kernel for PyCoherent.

Stateless functions that turn integer lattice coordinates and a seed into
deterministic pseudo-random values, and blend those values into continuous
gradient-coherent noise. All integer arithmetic is explicitly masked to
31 bits, so results are identical on every platform and interpreter.

Functions:
- int_hash: 31-bit integer hash of a lattice point
- value_noise: value noise in [-1, 1] at a lattice point
- gradient_noise: gradient noise contribution of one lattice corner
- gradient_coherent_noise: continuous noise from the four surrounding corners
- make_int32_range: fold a coordinate into the safe 32-bit range
"""

import enum
import math

from .. import constants as cte
from .interp import linear_interp, s_curve3, s_curve5


class NoiseQuality(enum.IntEnum):
    """
    Shaping curve applied to the fractional coordinates.

    QUALITY_FAST has a discontinuous first derivative at integer boundaries
    (visible creases), QUALITY_STD a discontinuous second derivative, and
    QUALITY_BEST is continuous in both.
    """

    QUALITY_FAST = cte.QUALITY_FAST
    QUALITY_STD = cte.QUALITY_STD
    QUALITY_BEST = cte.QUALITY_BEST


# 8-direction 2D gradient vectors
GRADIENTS_2D = (
    (1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),  # Diagonal gradients
    (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0),    # Axis-aligned gradients
)

# Keeps a single corner contribution inside [-1, 1]
GRADIENT_NORMALIZATION = 0.5

# The three top bits of the 31-bit hash select the gradient
GRADIENT_INDEX_SHIFT = 28


def int_hash(x: int, y: int, seed: int = 0) -> int:
    """
    Hash a lattice point into a 31-bit integer.

    All constants are primes and must stay prime for the hash to behave.

    Args:
        x: Integer x coordinate
        y: Integer y coordinate
        seed: Random seed

    Returns:
        Integer in [0, 2147483647]
    """
    n = (1619 * x + 6971 * y + 1013 * seed) & 0x7FFFFFFF
    n = (n >> 13) ^ n
    return (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF


def value_noise(x: int, y: int, seed: int = 0) -> float:
    """Value noise in [-1, 1] at an integer lattice point."""
    return 1.0 - (int_hash(x, y, seed) / 1073741824.0)


def gradient_noise(fx: float, fy: float, ix: int, iy: int, seed: int = 0) -> float:
    """
    Gradient-noise contribution of the lattice point (ix, iy) at (fx, fy).

    A pseudo-random gradient is picked from GRADIENTS_2D using the hash of the
    lattice point, and dotted with the offset from the lattice point.

    Args:
        fx: Floating-point x coordinate
        fy: Floating-point y coordinate
        ix: Integer x coordinate of a nearby lattice point
        iy: Integer y coordinate of a nearby lattice point
        seed: Random seed

    Returns:
        Value in [-1, 1], provided |fx - ix| <= 1 and |fy - iy| <= 1
    """
    gx, gy = GRADIENTS_2D[int_hash(ix, iy, seed) >> GRADIENT_INDEX_SHIFT]
    return GRADIENT_NORMALIZATION * ((gx * (fx - ix)) + (gy * (fy - iy)))


def _shape(a, quality):
    if quality == NoiseQuality.QUALITY_FAST:
        return a
    if quality == NoiseQuality.QUALITY_STD:
        return s_curve3(a)
    return s_curve5(a)


def gradient_coherent_noise(
    x: float, y: float, seed: int = 0, quality: int = NoiseQuality.QUALITY_STD
) -> float:
    """
    Gradient-coherent noise at a 2D coordinate.

    Args:
        x: x coordinate, must lie within the 32-bit range (see make_int32_range)
        y: y coordinate, same restriction
        seed: Random seed
        quality: NoiseQuality selecting the shaping curve

    Returns:
        Value in [-1, 1]; zero on every integer lattice point
    """
    x0 = math.floor(x)
    y0 = math.floor(y)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = _shape(x - x0, quality)
    ys = _shape(y - y0, quality)

    n0 = gradient_noise(x, y, x0, y0, seed)
    n1 = gradient_noise(x, y, x1, y0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise(x, y, x0, y1, seed)
    n1 = gradient_noise(x, y, x1, y1, seed)
    ix1 = linear_interp(n0, n1, xs)
    return linear_interp(ix0, ix1, ys)


def make_int32_range(n: float) -> float:
    """
    Fold a floating-point coordinate into [-2^30, 2^30].

    Large coordinates (many octaves of lacunarity scaling) would otherwise
    overflow once truncated to a lattice index. Values already in range are
    returned unchanged.
    """
    if n >= cte.INT32_RANGE:
        return (2.0 * math.fmod(n, cte.INT32_RANGE)) - cte.INT32_RANGE
    elif n <= -cte.INT32_RANGE:
        return (2.0 * math.fmod(n, cte.INT32_RANGE)) + cte.INT32_RANGE
    return n
