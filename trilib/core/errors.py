"""Exception taxonomy for the geometry kernel.

Every error is raised by the call that detected it and describes a local,
caller-detectable condition. All of them derive from ``ValueError`` so
callers that only care about bad input can catch that.
"""
from __future__ import annotations


class GeometryError(ValueError):
    """Base class for all kernel errors."""


class DegenerateGeometryError(GeometryError):
    """The triangle is degenerate (collinear or coincident vertices)."""


class ZeroVectorError(GeometryError):
    """A zero-magnitude vector was given where a direction is required."""


class InvalidArgumentError(GeometryError):
    """Malformed input: empty sequence, wrong dimension, bad index or unit."""


__all__ = [
    'GeometryError',
    'DegenerateGeometryError',
    'ZeroVectorError',
    'InvalidArgumentError',
]
