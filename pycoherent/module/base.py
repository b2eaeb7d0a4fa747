"""
Base class of the noise module tree, and the parameter checks shared by the
concrete modules.

A module turns a 2D coordinate into a scalar. Generator modules compute the
value themselves; combinator and transformer modules read it from a fixed
number of source modules ("slots") and combine or reposition it. Modules keep
plain references to their sources and never copy them, so one module can feed
several others.
"""

import math
import numbers

import numpy as np

from .. import constants as cte
from ..exceptions import InvalidParameterError, NoModuleError
from ..noise import NoiseQuality


class Module:
    """
    Abstract noise module.

    Subclasses set ``source_module_count`` and implement ``get_value``. The
    default ``get_values`` applies ``get_value`` element-wise; the built-in
    modules override it with a NumPy implementation returning the same values.

    Evaluation never mutates a module, so a configured tree may be evaluated
    from several threads. Changing a module's settings while another thread
    evaluates the tree is not supported; callers sharing a tree across threads
    must synchronise configuration changes themselves.
    """

    #: Number of source modules this module requires
    source_module_count = 0

    def __init__(self):
        self._source_modules = [None] * self.source_module_count

    # ------------------------------------------------------------------
    # Source module slots
    # ------------------------------------------------------------------
    def get_source_module(self, index: int) -> "Module":
        """
        Return the source module in slot ``index``.

        Raises:
            InvalidParameterError: If the index is not a valid slot
            NoModuleError: If the slot has not been assigned
        """
        self._check_slot(index)
        module = self._source_modules[index]
        if module is None:
            raise NoModuleError(
                f"{type(self).__name__} source module {index} has not been set"
            )
        return module

    def set_source_module(self, index: int, module: "Module"):
        """
        Connect ``module`` to slot ``index``.

        The module is referenced, not copied: later changes to its settings
        are visible through this module.

        Raises:
            InvalidParameterError: If the index is not a valid slot, the
                object is not a Module, or the assignment would create a cycle
        """
        self._check_slot(index)
        if not isinstance(module, Module):
            raise InvalidParameterError(
                f"Source module must be a Module instance, got {type(module).__name__}"
            )
        if module is self or module.depends_on(self):
            raise InvalidParameterError(
                f"Connecting {type(module).__name__} to {type(self).__name__} would create a cycle"
            )
        self._source_modules[index] = module

    def depends_on(self, other: "Module") -> bool:
        """Return True if ``other`` is reachable through this module's sources."""
        pending = [m for m in self._source_modules if m is not None]
        seen = set()
        while pending:
            module = pending.pop()
            if module is other:
                return True
            if id(module) in seen:
                continue
            seen.add(id(module))
            pending.extend(m for m in module._source_modules if m is not None)
        return False

    def _check_slot(self, index):
        if (
            not isinstance(index, numbers.Integral)
            or isinstance(index, bool)
            or not 0 <= index < self.source_module_count
        ):
            raise InvalidParameterError(
                f"{type(self).__name__} has {self.source_module_count} source "
                f"module slot(s), got index {index!r}"
            )

    def _require_source_modules(self):
        for index, module in enumerate(self._source_modules):
            if module is None:
                raise NoModuleError(
                    f"{type(self).__name__} cannot be evaluated: source module "
                    f"{index} has not been set"
                )

    def check_sources(self):
        """
        Check that every slot of this module and of all its sources is set.

        Raises:
            NoModuleError: If any module in the tree has an empty slot
        """
        pending = [self]
        seen = set()
        while pending:
            module = pending.pop()
            if id(module) in seen:
                continue
            seen.add(id(module))
            module._require_source_modules()
            pending.extend(m for m in module._source_modules if m is not None)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def get_value(self, x: float, y: float) -> float:
        """Return the output value at (x, y)."""
        raise NotImplementedError

    def get_values(self, x, y) -> np.ndarray:
        """
        Return the output values for arrays of coordinates.

        Args:
            x: x coordinates (array-like, broadcast against y)
            y: y coordinates (array-like)

        Returns:
            float64 array of the broadcast shape
        """
        evaluate = np.vectorize(self.get_value, otypes=[np.float64])
        return evaluate(x, y)


# ----------------------------------------------------------------------
# Parameter checks
# ----------------------------------------------------------------------
def check_finite(name: str, value) -> float:
    """Return ``value`` as a float, rejecting non-numbers, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return value


def check_positive(name: str, value) -> float:
    """Return ``value`` as a float, rejecting anything not strictly positive."""
    value = check_finite(name, value)
    if value <= 0.0:
        raise InvalidParameterError(f"{name} must be > 0, got {value!r}")
    return value


def check_octave_count(value, max_octave: int = cte.PERLIN_MAX_OCTAVE) -> int:
    """Return ``value`` as an int in [1, max_octave]."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"octave_count must be an integer, got {value!r}")
    if not 1 <= value <= max_octave:
        raise InvalidParameterError(
            f"octave_count must be between 1 and {max_octave}, got {value}"
        )
    return int(value)


def check_seed(value) -> int:
    """Return ``value`` as an int within the signed or unsigned 32-bit range."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"seed must be an integer, got {value!r}")
    if not cte.SEED_MIN <= value <= cte.SEED_MAX:
        raise InvalidParameterError(f"seed must fit in 32 bits, got {value}")
    return int(value)


def offset_seed(seed: int, offset: int) -> int:
    """Add ``offset`` to a seed, wrapping around the unsigned 32-bit range."""
    seed = seed + offset
    if seed > cte.SEED_MAX:
        seed &= 0xFFFFFFFF
    return seed


def check_quality(value) -> NoiseQuality:
    """Return ``value`` as a NoiseQuality member."""
    try:
        return NoiseQuality(value)
    except ValueError:
        raise InvalidParameterError(
            f"quality must be one of {[q.name for q in NoiseQuality]}, got {value!r}"
        ) from None
