"""
Miscellaneous Utilities for PyCoherent

Helpers that sit outside the noise pipeline itself, currently the export of
noise maps to NumPy arrays, .npy files and PNG images.

Available Functions:
- noise_map_to_numpy: Copy the cell values of a NoiseMap into an array
- save_noise_map_numpy: Save a NoiseMap as a .npy file
- save_noise_map_png: Save a NoiseMap as a normalised greyscale PNG
"""

from .raster_utils import noise_map_to_numpy, save_noise_map_numpy, save_noise_map_png

# Export public API
__all__ = [
    "noise_map_to_numpy",
    "save_noise_map_numpy",
    "save_noise_map_png",
]
