"""Vectorized helpers over many triangles sharing one point array.

points: (N, 2) or (N, 3) float array
tris:   (M, 3) int array of vertex indices

Results are float64 regardless of the input dtype.
"""
from __future__ import annotations

import numpy as np

from .constants import EPS_AREA
from .errors import InvalidArgumentError
from .types import AngleUnit

__all__ = ['triangles_areas', 'triangles_angles', 'triangles_min_angles', 'degenerate_mask']


def _corners(points, tris):
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int64)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise InvalidArgumentError(f"points must have shape (N, 2) or (N, 3), got {pts.shape}")
    if T.size == 0:
        return None
    if T.ndim != 2 or T.shape[1] != 3:
        raise InvalidArgumentError(f"tris must have shape (M, 3), got {T.shape}")
    if pts.shape[1] == 2:
        pts = np.hstack([pts, np.zeros((pts.shape[0], 1))])
    return pts[T[:, 0]], pts[T[:, 1]], pts[T[:, 2]]


def triangles_areas(points, tris):
    """(M,) unsigned areas."""
    corners = _corners(points, tris)
    if corners is None:
        return np.empty((0,), dtype=np.float64)
    p0, p1, p2 = corners
    return 0.5 * np.linalg.norm(np.cross(p1 - p0, p2 - p0), axis=1)


def triangles_angles(points, tris, unit: AngleUnit = AngleUnit.RADIANS):
    """(M, 3) interior angles at each triangle's first, second and third vertex.

    Rows with coincident vertices are NaN.
    """
    corners = _corners(points, tris)
    if corners is None:
        return np.empty((0, 3), dtype=np.float64)
    p0, p1, p2 = corners
    # side lengths opposite to vertices: a=|p1-p2|, b=|p0-p2|, c=|p0-p1|
    a = np.linalg.norm(p1 - p2, axis=1)
    b = np.linalg.norm(p0 - p2, axis=1)
    c = np.linalg.norm(p0 - p1, axis=1)

    def angle_opposite(A, B, C):
        denom = 2.0 * B * C
        with np.errstate(divide='ignore', invalid='ignore'):
            cosang = np.where(denom > 0.0, (B * B + C * C - A * A) / denom, np.nan)
        return np.arccos(np.clip(cosang, -1.0, 1.0))

    out = np.stack([angle_opposite(a, b, c), angle_opposite(b, c, a), angle_opposite(c, a, b)], axis=1)
    if unit is AngleUnit.DEGREES:
        out = np.degrees(out)
    return out


def triangles_min_angles(points, tris, unit: AngleUnit = AngleUnit.RADIANS):
    """(M,) minimum interior angle per triangle; NaN for rows with coincident vertices."""
    angs = triangles_angles(points, tris, unit=unit)
    if angs.shape[0] == 0:
        return np.empty((0,), dtype=np.float64)
    return np.min(angs, axis=1)


def degenerate_mask(points, tris):
    """(M,) boolean mask of triangles whose area is at most EPS_AREA."""
    return triangles_areas(points, tris) <= EPS_AREA
