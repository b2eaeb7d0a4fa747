"""
Exception types raised by PyCoherent.

InvalidParameterError and OutOfMemoryError are part of the public contract and
can be caught. NoModuleError signals a programming error: a module was
evaluated before all of its source modules were assigned.
"""


class NoiseError(Exception):
    """Base class of every PyCoherent error."""


class InvalidParameterError(NoiseError, ValueError):
    """A parameter is out of range or the configuration is inconsistent."""


class OutOfMemoryError(NoiseError, MemoryError):
    """The backing store of a raster could not be allocated."""


class NoModuleError(NoiseError, AssertionError):
    """A required source module slot is empty."""


__all__ = [
    "NoiseError",
    "InvalidParameterError",
    "OutOfMemoryError",
    "NoModuleError",
]
