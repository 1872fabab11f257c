"""Triangle geometry built on the vector primitives.

Every function takes the three vertices ``p1, p2, p3`` (2D or 3D, all of
the same dimension). Vertex order fixes the winding used by ``normal`` and
the order of per-vertex results (angles, barycentric weights); metric
properties do not depend on it.

Circumcenter, incenter, normal and barycentric coordinates are undefined for
degenerate triangles (area <= EPS_AREA) and raise DegenerateGeometryError.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .constants import EPS_AREA, EPS_RIGHT_ANGLE_DEG, RIGHT_ANGLE_DEG
from .errors import DegenerateGeometryError, InvalidArgumentError
from .logging_utils import get_logger
from .scalars import as_coords, cast, lift3, result_dtype, same_dimension
from .types import AngleExtremum, AngleUnit
from .vectors import cross_product, length, magnitude, make_vector, max_value, min_value

logger = get_logger('trilib.triangles')

__all__ = [
    'minlength', 'maxlength', 'edge_lengths', 'perimeter',
    'angles', 'angle_at', 'maxangle', 'minangle',
    'area', 'is_acute', 'is_obtuse', 'is_degenerate',
    'centroid', 'normal',
    'circumcenter', 'circumradius', 'incenter', 'inradius',
    'barycoordinates',
]


def _vertices(p1, p2, p3):
    a = as_coords(p1, 'p1')
    b = as_coords(p2, 'p2')
    c = as_coords(p3, 'p3')
    same_dimension(a, b, c)
    return a, b, c


def _side_lengths(a, b, c) -> Tuple[float, float, float]:
    """Float64 lengths of the sides opposite p1, p2 and p3."""
    fa, fb, fc = (np.asarray(p, dtype=np.float64) for p in (a, b, c))
    return float(length(fb, fc)), float(length(fc, fa)), float(length(fa, fb))


def _cross3(a, b, c) -> np.ndarray:
    """Float64 ``(p2 - p1) x (p3 - p1)`` with 2D input lifted to z = 0."""
    la, lb, lc = lift3(a), lift3(b), lift3(c)
    return cross_product(make_vector(lb, la), make_vector(lc, la))


def _area(a, b, c) -> float:
    return 0.5 * float(magnitude(_cross3(a, b, c)))


def _require_nondegenerate(a, b, c, what: str) -> float:
    tri_area = _area(a, b, c)
    if tri_area <= EPS_AREA:
        logger.debug("%s undefined: degenerate triangle %s %s %s (area=%g)",
                     what, a.tolist(), b.tolist(), c.tolist(), tri_area)
        raise DegenerateGeometryError(f"{what} is undefined for a degenerate triangle")
    return tri_area


def _interior_angles(a, b, c) -> Tuple[float, float, float]:
    """Radian angles at p1, p2, p3 by the law of cosines."""
    la, lb, lc = _side_lengths(a, b, c)
    if la == 0.0 or lb == 0.0 or lc == 0.0:
        logger.debug("angles undefined: coincident vertices %s %s %s", a.tolist(), b.tolist(), c.tolist())
        raise DegenerateGeometryError("interior angles are undefined when two vertices coincide")

    def opposite(A, B, C):
        cosang = (B * B + C * C - A * A) / (2.0 * B * C)
        return math.acos(min(1.0, max(-1.0, cosang)))

    return opposite(la, lb, lc), opposite(lb, lc, la), opposite(lc, la, lb)


def _check_unit(unit) -> AngleUnit:
    if not isinstance(unit, AngleUnit):
        raise InvalidArgumentError(f"unit must be an AngleUnit, got {unit!r}")
    return unit


# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------

def edge_lengths(p1, p2, p3):
    """Lengths ``(|p1p2|, |p2p3|, |p3p1|)`` in the input scalar type."""
    a, b, c = _vertices(p1, p2, p3)
    return length(a, b), length(b, c), length(c, a)


def minlength(p1, p2, p3):
    return min_value(*edge_lengths(p1, p2, p3))


def maxlength(p1, p2, p3):
    return max_value(*edge_lengths(p1, p2, p3))


def perimeter(p1, p2, p3):
    a, b, c = _vertices(p1, p2, p3)
    return cast(sum(_side_lengths(a, b, c)), result_dtype(a, b, c))


# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------

def angles(p1, p2, p3, unit: AngleUnit = AngleUnit.RADIANS):
    """Interior angles at p1, p2 and p3, in that order.

    Computed from the side lengths by the law of cosines; the three values sum
    to pi (180 degrees) for any triangle with distinct vertices.

    Raises
    ------
    DegenerateGeometryError
        When two vertices coincide.
    """
    unit = _check_unit(unit)
    a, b, c = _vertices(p1, p2, p3)
    dtype = result_dtype(a, b, c)
    return tuple(cast(unit.from_radians(t), dtype) for t in _interior_angles(a, b, c))


def angle_at(p1, p2, p3, vertex: int = 0, unit: AngleUnit = AngleUnit.RADIANS):
    """Interior angle at one vertex (0 for p1, 1 for p2, 2 for p3).

    The default ``vertex=0`` gives the angle at p1, so ``angle_at(p1, p2, p3)``
    is the classic single-vertex form. Equivalent to ``angles(...)[vertex]``.
    """
    if vertex not in (0, 1, 2):
        raise InvalidArgumentError(f"vertex must be 0, 1 or 2, got {vertex!r}")
    return angles(p1, p2, p3, unit=unit)[vertex]


def _extremum(p1, p2, p3, unit, pick) -> AngleExtremum:
    unit = _check_unit(unit)
    a, b, c = _vertices(p1, p2, p3)
    rads = _interior_angles(a, b, c)
    idx = int(pick(rads))
    return AngleExtremum(cast(unit.from_radians(rads[idx]), result_dtype(a, b, c)), idx)


def maxangle(p1, p2, p3, unit: AngleUnit = AngleUnit.RADIANS) -> AngleExtremum:
    """Largest interior angle and the index of its vertex."""
    return _extremum(p1, p2, p3, unit, np.argmax)


def minangle(p1, p2, p3, unit: AngleUnit = AngleUnit.RADIANS) -> AngleExtremum:
    """Smallest interior angle and the index of its vertex."""
    return _extremum(p1, p2, p3, unit, np.argmin)


# ---------------------------------------------------------------------------
# Area and classification
# ---------------------------------------------------------------------------

def area(p1, p2, p3):
    """Unsigned area, half the magnitude of ``(p2 - p1) x (p3 - p1)``."""
    a, b, c = _vertices(p1, p2, p3)
    return cast(_area(a, b, c), result_dtype(a, b, c))


def is_degenerate(p1, p2, p3) -> bool:
    """True for collinear (or coincident) vertices, i.e. area <= EPS_AREA."""
    a, b, c = _vertices(p1, p2, p3)
    return _area(a, b, c) <= EPS_AREA


def _max_angle_deg(p1, p2, p3) -> float:
    return math.degrees(max(_interior_angles(*_vertices(p1, p2, p3))))


def is_acute(p1, p2, p3) -> bool:
    """True when the largest angle is at most 90 degrees.

    Right triangles count as acute; ``is_acute`` and ``is_obtuse`` never
    both hold and exactly one of them holds for any triangle.
    """
    return _max_angle_deg(p1, p2, p3) <= RIGHT_ANGLE_DEG + EPS_RIGHT_ANGLE_DEG


def is_obtuse(p1, p2, p3) -> bool:
    """True when the largest angle exceeds 90 degrees."""
    return _max_angle_deg(p1, p2, p3) > RIGHT_ANGLE_DEG + EPS_RIGHT_ANGLE_DEG


# ---------------------------------------------------------------------------
# Centres
# ---------------------------------------------------------------------------

def centroid(p1, p2, p3):
    a, b, c = _vertices(p1, p2, p3)
    mean = (np.asarray(a, dtype=np.float64) + b + c) / 3.0
    return cast(mean, result_dtype(a, b, c))


def normal(p1, p2, p3):
    """Unit normal of the triangle plane following the p1 -> p2 -> p3 winding.

    Always a 3-vector; 2D triangles get (0, 0, +-1).
    """
    a, b, c = _vertices(p1, p2, p3)
    _require_nondegenerate(a, b, c, 'normal')
    n = _cross3(a, b, c)
    return cast(n / float(magnitude(n)), result_dtype(a, b, c))


def _circumcenter3(a, b, c) -> np.ndarray:
    # with u = p1 - p3, v = p2 - p3:
    # cc = p3 + ((|u|^2 v - |v|^2 u) x (u x v)) / (2 |u x v|^2)
    la, lb, lc = lift3(a), lift3(b), lift3(c)
    u = la - lc
    v = lb - lc
    w = np.cross(u, v)
    num = np.cross(np.dot(u, u) * v - np.dot(v, v) * u, w)
    return lc + num / (2.0 * np.dot(w, w))


def circumcenter(p1, p2, p3):
    """Point equidistant from the three vertices, in the input dimension."""
    a, b, c = _vertices(p1, p2, p3)
    _require_nondegenerate(a, b, c, 'circumcenter')
    cc = _circumcenter3(a, b, c)[:a.shape[0]]
    return cast(cc, result_dtype(a, b, c))


def circumradius(p1, p2, p3):
    """Circumcircle radius, ``abc / (4 * area)``."""
    a, b, c = _vertices(p1, p2, p3)
    tri_area = _require_nondegenerate(a, b, c, 'circumradius')
    la, lb, lc = _side_lengths(a, b, c)
    return cast(la * lb * lc / (4.0 * tri_area), result_dtype(a, b, c))


def incenter(p1, p2, p3):
    """Centre of the inscribed circle.

    Vertices are weighted by the length of their opposite side and the sum is
    normalized by the perimeter.
    """
    a, b, c = _vertices(p1, p2, p3)
    _require_nondegenerate(a, b, c, 'incenter')
    la, lb, lc = _side_lengths(a, b, c)
    weighted = la * np.asarray(a, dtype=np.float64) + lb * np.asarray(b, dtype=np.float64) \
        + lc * np.asarray(c, dtype=np.float64)
    return cast(weighted / (la + lb + lc), result_dtype(a, b, c))


def inradius(p1, p2, p3):
    """Inscribed circle radius, ``area / semiperimeter``."""
    a, b, c = _vertices(p1, p2, p3)
    tri_area = _require_nondegenerate(a, b, c, 'inradius')
    semiperimeter = 0.5 * sum(_side_lengths(a, b, c))
    return cast(tri_area / semiperimeter, result_dtype(a, b, c))


# ---------------------------------------------------------------------------
# Barycentric coordinates
# ---------------------------------------------------------------------------

def barycoordinates(p1, p2, p3, point):
    """Weights ``(l1, l2, l3)`` with ``point = l1*p1 + l2*p2 + l3*p3``.

    Each weight is the signed area of the sub-triangle opposite its vertex
    divided by the triangle area, so points outside the triangle get negative
    weights. The weights always sum to 1; for a point off the plane they
    describe its orthogonal projection onto the plane.

    Like every result, the weights are cast to the scalar type of the inputs.
    With integral coordinates they are truncated toward zero and no longer
    sum to 1: ``barycoordinates((0, 0), (3, 0), (0, 3), (1, 1))`` is
    ``[0, 0, 0]``. Pass float coordinates to get fractional weights.
    """
    a, b, c = _vertices(p1, p2, p3)
    p = as_coords(point, 'point')
    same_dimension(a, p)
    _require_nondegenerate(a, b, c, 'barycentric coordinates')
    la, lb, lc, lp = lift3(a), lift3(b), lift3(c), lift3(p)
    n = np.cross(lb - la, lc - la)
    nn = float(np.dot(n, n))
    l1 = float(np.dot(np.cross(lc - lb, lp - lb), n)) / nn
    l2 = float(np.dot(np.cross(la - lc, lp - lc), n)) / nn
    l3 = float(np.dot(np.cross(lb - la, lp - la), n)) / nn
    return cast(np.array([l1, l2, l3]), result_dtype(a, b, c, p))
