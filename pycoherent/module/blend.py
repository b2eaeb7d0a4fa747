"""
Blend combinator module.

Mixes two source modules, using a third (the control module) as a spatially
varying weight.
"""

import numpy as np

from ..noise import linear_interp
from .base import Module


class Blend(Module):
    """
    Linear blend of source modules 0 and 1, weighted by source module 2.

    The control module's natural [-1, 1] output is remapped to a [0, 1] weight:
    -1 selects source 0, +1 selects source 1.

    Args:
        source0: Optional module for slot 0
        source1: Optional module for slot 1
        control: Optional control module (slot 2)
    """

    source_module_count = 3

    def __init__(self, source0=None, source1=None, control=None):
        super().__init__()
        for index, module in enumerate((source0, source1, control)):
            if module is not None:
                self.set_source_module(index, module)

    @property
    def control_module(self) -> Module:
        return self.get_source_module(2)

    @control_module.setter
    def control_module(self, module):
        self.set_source_module(2, module)

    def get_value(self, x: float, y: float) -> float:
        self._require_source_modules()
        source0, source1, control = self._source_modules

        v0 = source0.get_value(x, y)
        v1 = source1.get_value(x, y)
        alpha = (control.get_value(x, y) + 1.0) / 2.0
        return linear_interp(v0, v1, alpha)

    def get_values(self, x, y) -> np.ndarray:
        self._require_source_modules()
        source0, source1, control = self._source_modules

        v0 = source0.get_values(x, y)
        v1 = source1.get_values(x, y)
        alpha = (control.get_values(x, y) + 1.0) / 2.0
        return linear_interp(v0, v1, alpha)
