"""
Default values and hard limits shared across PyCoherent.

Module defaults mirror the classic coherent-noise settings. Raster limits bound
the noise map size, and the float type controls how noise maps are stored.

Usage:
    from pycoherent import constants as cte

    octaves = cte.DEFAULT_PERLIN_OCTAVE_COUNT
"""

import math

import numpy as np

# Storage type of noise map cells
FLOAT_TYPE_NP = np.float32

# Noise quality levels (see pycoherent.noise.NoiseQuality)
QUALITY_FAST = 0
QUALITY_STD = 1
QUALITY_BEST = 2

# Half the range of a signed 32-bit integer. Coordinates handed to the
# integer-based noise functions are folded into [-INT32_RANGE, INT32_RANGE].
INT32_RANGE = 1073741824.0

# Seeds are 32-bit integers, accepted in signed or unsigned form
SEED_MIN = -(2**31)
SEED_MAX = 2**32 - 1

SQRT_3 = 1.7320508075688772935
DEG_TO_RAD = math.pi / 180.0

# --- Perlin ---
DEFAULT_PERLIN_FREQUENCY = 1.0
DEFAULT_PERLIN_LACUNARITY = 2.0
DEFAULT_PERLIN_OCTAVE_COUNT = 6
DEFAULT_PERLIN_PERSISTENCE = 0.5
DEFAULT_PERLIN_QUALITY = QUALITY_STD
DEFAULT_PERLIN_SEED = 0
# Each octave adds one to the seed and shrinks the usable coordinate range,
# past 30 octaves the integer folding stops being meaningful.
PERLIN_MAX_OCTAVE = 30

# --- Billow ---
DEFAULT_BILLOW_FREQUENCY = 1.0
DEFAULT_BILLOW_LACUNARITY = 2.0
DEFAULT_BILLOW_OCTAVE_COUNT = 6
DEFAULT_BILLOW_PERSISTENCE = 0.5
DEFAULT_BILLOW_QUALITY = QUALITY_STD
DEFAULT_BILLOW_SEED = 0
BILLOW_MAX_OCTAVE = 30

# --- Voronoi ---
DEFAULT_VORONOI_DISPLACEMENT = 1.0
DEFAULT_VORONOI_FREQUENCY = 1.0
DEFAULT_VORONOI_SEED = 0
# Initial squared distance of the nearest-seed search
VORONOI_MAX_DIST = 2147483647.0

# --- RotatePoint (degrees) ---
DEFAULT_ROTATE_X = 0.0
DEFAULT_ROTATE_Y = 0.0
DEFAULT_ROTATE_Z = 0.0

# --- Turbulence ---
DEFAULT_TURBULENCE_FREQUENCY = DEFAULT_PERLIN_FREQUENCY
DEFAULT_TURBULENCE_POWER = 1.0
DEFAULT_TURBULENCE_ROUGHNESS = 3
DEFAULT_TURBULENCE_SEED = DEFAULT_PERLIN_SEED

# Offsets added to the input before sampling the distortion modules. Gradient
# noise is zero on integer lattice points, the offsets keep the x and y
# distortions away from those zeros and from each other.
TURBULENCE_X_OFFSET = (12414.0 / 65536.0, 65124.0 / 65536.0)
TURBULENCE_Y_OFFSET = (26519.0 / 65536.0, 18128.0 / 65536.0)

# --- Rasters ---
RASTER_MAX_WIDTH = 32767
RASTER_MAX_HEIGHT = 32767
# Row strides are rounded up to a multiple of this many cells
RASTER_STRIDE_BOUNDARY = 4
