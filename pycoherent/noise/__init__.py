"""
Coherent-noise kernel for PyCoherent.

Provides the deterministic building blocks every noise module is made of:
integer hashing of lattice points, value and gradient noise, the
quality-dependent gradient-coherent noise, and the interpolation curves.
Each function exists in a scalar form and in a NumPy array form (suffix
``_array``) that returns identical values.

Usage:
    import pycoherent as pc

    n = pc.noise.gradient_coherent_noise(0.5, 0.5, seed=0,
                                         quality=pc.noise.NoiseQuality.QUALITY_BEST)
    grid = pc.noise.gradient_coherent_noise_array(xs, ys, seed=0)
"""

from .interp import linear_interp, cubic_interp, s_curve3, s_curve5
from .noisegen import (
    NoiseQuality,
    GRADIENTS_2D,
    int_hash,
    value_noise,
    gradient_noise,
    gradient_coherent_noise,
    make_int32_range,
)
from .vectorized import (
    int_hash_array,
    value_noise_array,
    gradient_noise_array,
    gradient_coherent_noise_array,
    make_int32_range_array,
)

__all__ = [
    "NoiseQuality",
    "GRADIENTS_2D",
    "linear_interp",
    "cubic_interp",
    "s_curve3",
    "s_curve5",
    "int_hash",
    "value_noise",
    "gradient_noise",
    "gradient_coherent_noise",
    "make_int32_range",
    "int_hash_array",
    "value_noise_array",
    "gradient_noise_array",
    "gradient_coherent_noise_array",
    "make_int32_range_array",
]
