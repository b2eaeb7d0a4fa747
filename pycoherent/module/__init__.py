"""
Noise modules for PyCoherent.

Modules form a tree: generators produce values from coordinates, while
combinators and transformers read one or more source modules. Every module
offers ``get_value(x, y)`` for a single coordinate and ``get_values(x, y)``
for NumPy arrays.

Generators:
- Perlin: fractal gradient noise
- Billow: fractal noise of folded octaves
- Voronoi: cellular plateaus, optionally with seed-point distance

Combinators and transformers:
- Blend: mix two sources using a third as weight
- RotatePoint: rotate the input coordinate
- Turbulence: displace the input coordinate with Perlin noise

Usage:
    import pycoherent as pc

    hills = pc.module.Perlin(frequency=2.0, seed=1)
    cells = pc.module.Voronoi(frequency=4.0, seed=2)
    mask = pc.module.Billow(frequency=0.5, seed=3)
    terrain = pc.module.Turbulence(pc.module.Blend(hills, cells, mask), power=0.125)
    values = terrain.get_values(xs, ys)
"""

from .base import Module
from .fractal import FractalModule
from .perlin import Perlin
from .billow import Billow
from .voronoi import Voronoi
from .blend import Blend
from .rotatepoint import RotatePoint
from .turbulence import Turbulence

__all__ = [
    "Module",
    "FractalModule",
    "Perlin",
    "Billow",
    "Voronoi",
    "Blend",
    "RotatePoint",
    "Turbulence",
]
