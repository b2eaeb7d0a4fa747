"""
Export utilities for noise maps.

Helpers to move a NoiseMap out of PyCoherent: as a NumPy array in memory, as
a .npy file, or as a single-band greyscale PNG image.

Dependencies:
- numpy: array conversion and .npy output
- pillow: PNG encoding
"""

import logging

import numpy as np
from PIL import Image

from ..raster import NoiseMap

logger = logging.getLogger(__name__)


def noise_map_to_numpy(noise_map: NoiseMap) -> np.ndarray:
    """
    Return the cell values of a noise map as a (height, width) array.

    The array is a copy: row padding is dropped and later changes to the map
    are not reflected.

    Raises:
        TypeError: If noise_map is not a NoiseMap
    """
    if not isinstance(noise_map, NoiseMap):
        raise TypeError(f"Expected a NoiseMap, got {type(noise_map).__name__}")
    return noise_map.to_numpy()


def save_noise_map_numpy(noise_map: NoiseMap, output_path):
    """
    Save the cell values of a noise map as a .npy file.

    Args:
        noise_map: Map to save
        output_path: Destination path (numpy appends .npy if missing)

    Example:
        pc.misc.save_noise_map_numpy(noise_map, "heights.npy")
        heights = np.load("heights.npy")
    """
    values = noise_map_to_numpy(noise_map)
    np.save(output_path, values)
    logger.info(f"Saved {values.shape[1]}x{values.shape[0]} noise map to {output_path}")


def save_noise_map_png(noise_map: NoiseMap, output_path, uint: bool = False):
    """
    Save a noise map as a greyscale PNG image.

    Values are normalised with the map's minimum and maximum, then stored as
    16-bit greyscale, or 8-bit when ``uint`` is set. A constant map is written
    as an all-zero image. Row 0 of the map is the top row of the image.

    Args:
        noise_map: Map to save
        output_path: Destination PNG path
        uint: Save as uint8 (0-255) instead of uint16 (0-65535)

    Returns:
        (min, max) value range used for the normalisation

    Raises:
        ValueError: If the map is empty
    """
    values = noise_map_to_numpy(noise_map).astype(np.float64)
    if values.size == 0:
        raise ValueError("Cannot save an empty noise map as PNG")

    value_min = float(np.min(values))
    value_max = float(np.max(values))

    if value_min == value_max:
        logger.warning("Noise map has constant values, writing a blank image")
        normalized = np.zeros_like(values)
    else:
        normalized = (values - value_min) / (value_max - value_min)

    if uint:
        img_data = np.round(normalized * 255).astype(np.uint8)
        mode = "L"
    else:
        img_data = np.round(normalized * 65535).astype(np.uint16)
        mode = "I;16"

    # uint8 arrays map to mode "L", uint16 arrays to "I;16"
    img = Image.fromarray(img_data)
    img.save(output_path)
    logger.info(f"Saved noise map to {output_path} (mode {mode}, range {value_min}-{value_max})")
    return value_min, value_max
