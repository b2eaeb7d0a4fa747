"""
Raster module for PyCoherent.

Provides the NoiseMap buffer and the plane builder that fills it by
evaluating a module tree over a window of the plane.

Usage:
    import pycoherent as pc

    noise_map = pc.raster.NoiseMap()
    builder = pc.raster.NoiseMapBuilderPlane(pc.module.Perlin(), noise_map)
    builder.set_dest_size(128, 128)
    builder.set_bounds(0.0, 4.0, 0.0, 4.0)
    builder.build()
    heights = noise_map.to_numpy()
"""

from .noise_map import NoiseMap, calc_stride, calc_min_mem_usage
from .builder import NoiseMapBuilderPlane

__all__ = [
    "NoiseMap",
    "NoiseMapBuilderPlane",
    "calc_stride",
    "calc_min_mem_usage",
]
