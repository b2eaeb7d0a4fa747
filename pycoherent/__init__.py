"""
PyCoherent: coherent noise generation with composable modules.

PyCoherent produces smooth, deterministic pseudo-random scalar fields from 2D
coordinates. Noise modules are connected into trees (generators feeding
combinators and transformers), and a plane builder rasterizes a tree into a
NoiseMap, optionally as a seamlessly tileable texture.

Subpackages:
- noise: integer hash and gradient-coherent noise kernels, interpolation
- module: noise modules (Perlin, Billow, Voronoi, Blend, RotatePoint, Turbulence)
- raster: NoiseMap buffer and NoiseMapBuilderPlane
- misc: NumPy and PNG export helpers
- cli: command line tools (loaded on demand)

Usage:
    import pycoherent as pc

    source = pc.module.Turbulence(pc.module.Perlin(seed=7), power=0.25)
    builder = pc.raster.NoiseMapBuilderPlane(source, pc.raster.NoiseMap())
    builder.set_dest_size(512, 256)
    builder.set_bounds(0.0, 8.0, 0.0, 4.0)
    noise_map = builder.build()
    pc.misc.save_noise_map_png(noise_map, "terrain.png")
"""

__version__ = "0.1.0"

from . import constants
from . import noise
from . import module
from . import raster
from . import misc
from .exceptions import InvalidParameterError, NoiseError, NoModuleError, OutOfMemoryError
from .noise import NoiseQuality

__all__ = [
    "__version__",
    "constants",
    "noise",
    "module",
    "raster",
    "misc",
    "NoiseError",
    "InvalidParameterError",
    "OutOfMemoryError",
    "NoModuleError",
    "NoiseQuality",
]
