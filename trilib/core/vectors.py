"""Vector and scalar algebra primitives.

Points and vectors are 2D or 3D coordinate tuples (anything ``numpy.asarray``
accepts). Results come back in the scalar dtype of the inputs, see
:mod:`trilib.core.scalars`.
"""
from __future__ import annotations

import math
from functools import reduce
from typing import Sequence

import numpy as np

from .errors import InvalidArgumentError, ZeroVectorError
from .logging_utils import get_logger
from .scalars import as_coords, as_samples, cast, result_dtype, same_dimension
from .types import AngleUnit

logger = get_logger('trilib.vectors')

__all__ = [
    'length', 'length2', 'magnitude', 'make_vector',
    'dot_product', 'cross_product', 'unit_vector',
    'angle', 'coordinate_angle',
    'max_value', 'min_value', 'average_value', 'mean_value', 'standard_deviation',
]


def _pair(a, b, names=('a', 'b')):
    a = as_coords(a, names[0])
    b = as_coords(b, names[1])
    same_dimension(a, b)
    return a, b


def _norm(v: np.ndarray) -> float:
    # hypot scales internally, so tiny or huge components do not under/overflow
    return math.hypot(*np.asarray(v, dtype=np.float64).tolist())


def length(a, b):
    """Euclidean distance between points a and b."""
    a, b = _pair(a, b)
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return cast(_norm(diff), result_dtype(a, b))


def length2(a, b):
    """Squared Euclidean distance; exact for integral coordinates."""
    a, b = _pair(a, b)
    dtype = result_dtype(a, b)
    diff = a.astype(dtype) - b.astype(dtype)
    return cast(np.dot(diff, diff), dtype)


def magnitude(v):
    """Euclidean norm of vector v."""
    v = as_coords(v, 'v')
    return cast(_norm(v), v.dtype)


def make_vector(head, tail):
    """Displacement vector ``head - tail``."""
    head, tail = _pair(head, tail, ('head', 'tail'))
    dtype = result_dtype(head, tail)
    return head.astype(dtype) - tail.astype(dtype)


def dot_product(a, b):
    a, b = _pair(a, b)
    dtype = result_dtype(a, b)
    return cast(np.dot(a.astype(dtype), b.astype(dtype)), dtype)


def cross_product(a, b):
    """Right-handed 3D cross product. Parallel inputs give the zero vector."""
    a, b = _pair(a, b)
    if a.shape[0] != 3:
        logger.debug("cross product requested on %dD vectors", a.shape[0])
        raise InvalidArgumentError("cross_product is only defined for 3D vectors")
    dtype = result_dtype(a, b)
    return np.cross(a.astype(dtype), b.astype(dtype)).astype(dtype)


def unit_vector(v):
    """Return ``v / |v|``.

    Raises
    ------
    ZeroVectorError
        When v has zero magnitude; a zero vector has no direction.
    """
    v = as_coords(v, 'v')
    mag = _norm(v)
    if mag == 0.0:
        logger.debug("unit_vector of zero vector %s", v.tolist())
        raise ZeroVectorError("cannot normalize a zero-magnitude vector")
    return cast(np.asarray(v, dtype=np.float64) / mag, v.dtype)


def _vector_angle(a: np.ndarray, b: np.ndarray, unit: AngleUnit):
    dtype = result_dtype(a, b)
    ma = _norm(a)
    mb = _norm(b)
    # zero vectors have no direction; report 0 rather than failing
    if ma == 0.0 or mb == 0.0:
        return cast(0.0, dtype)
    ua = np.asarray(a, dtype=np.float64) / ma
    ub = np.asarray(b, dtype=np.float64) / mb
    cosang = float(np.dot(ua, ub))
    theta = math.acos(min(1.0, max(-1.0, cosang)))
    return cast(unit.from_radians(theta), dtype)


def _check_unit(unit) -> AngleUnit:
    if not isinstance(unit, AngleUnit):
        raise InvalidArgumentError(f"unit must be an AngleUnit, got {unit!r}")
    return unit


def coordinate_angle(x1, y1, x2, y2, unit: AngleUnit = AngleUnit.RADIANS):
    """Angle between the 2D directions (x1, y1) and (x2, y2), in [0, pi]."""
    a = as_coords([x1, y1], 'first direction')
    b = as_coords([x2, y2], 'second direction')
    return _vector_angle(a, b, _check_unit(unit))


def angle(*args, unit: AngleUnit = AngleUnit.RADIANS):
    """Angle between two vectors, in [0, pi] (or [0, 180] degrees).

    Call as ``angle(a, b)`` with two vectors or ``angle(x1, y1, x2, y2)`` with
    two 2D directions. A zero-magnitude input yields 0.
    """
    unit = _check_unit(unit)
    if len(args) == 2:
        a, b = _pair(*args)
        return _vector_angle(a, b, unit)
    if len(args) == 4:
        return coordinate_angle(*args, unit=unit)
    raise InvalidArgumentError(f"angle takes 2 vectors or 4 coordinates, got {len(args)} arguments")


def max_value(*values):
    """Largest of the arguments under ``<``; the first wins ties."""
    if not values:
        raise InvalidArgumentError("max_value requires at least one value")
    return reduce(lambda best, v: v if best < v else best, values)


def min_value(*values):
    """Smallest of the arguments under ``<``; the first wins ties."""
    if not values:
        raise InvalidArgumentError("min_value requires at least one value")
    return reduce(lambda best, v: v if v < best else best, values)


def average_value(values: Sequence):
    """Arithmetic mean of a non-empty sequence."""
    arr = as_samples(values)
    return cast(np.mean(arr, dtype=np.float64), arr.dtype)


def mean_value(values: Sequence):
    """Arithmetic mean of a non-empty sequence (same as average_value).

    Order does not matter: ``mean_value([1, 3, 2, 5, 4]) == 3``.
    """
    return average_value(values)


def standard_deviation(values: Sequence):
    """Sample standard deviation (N - 1 denominator).

    Needs at least two samples.
    """
    arr = as_samples(values)
    if arr.size < 2:
        raise InvalidArgumentError("standard_deviation needs at least two samples")
    return cast(np.std(arr, dtype=np.float64, ddof=1), arr.dtype)
