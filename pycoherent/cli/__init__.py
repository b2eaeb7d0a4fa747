"""
Command Line Interface for PyCoherent

This module provides command line utilities for PyCoherent, so that noise
maps can be rendered from the terminal without writing Python scripts.

Available Commands:
- build_noise_map: Render a Perlin, Billow or Voronoi noise map to .npy or .png
"""

_CLI_SUBMODULES = {
    "build_noise_map": (".build_commands", "build_noise_map"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
