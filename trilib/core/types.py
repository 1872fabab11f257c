"""Small value types shared by the vector and triangle kernels."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


class AngleUnit(Enum):
    """Output unit for angle-producing operations."""

    RADIANS = 'rad'
    DEGREES = 'deg'

    def from_radians(self, value: float) -> float:
        if self is AngleUnit.DEGREES:
            return math.degrees(value)
        return value


@dataclass(frozen=True)
class AngleExtremum:
    """An extreme interior angle and the 0-based vertex it occurs at.

    ``vertex_index`` is 0 for p1, 1 for p2 and 2 for p3.
    """
    value: Any
    vertex_index: int


class Triangle(NamedTuple):
    """Ordered vertex triple; unpack it into the kernel calls with ``*tri``."""
    p1: Any
    p2: Any
    p3: Any


__all__ = ['AngleUnit', 'AngleExtremum', 'Triangle']
