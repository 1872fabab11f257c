"""Public package API for the trilib triangle and vector kernel.

This facade provides a flat import surface on top of the internal
implementation package ``trilib.core``. Matplotlib-backed plotting is
loaded lazily on first use so ``import trilib`` stays light.

Example
-------
    from trilib import area, circumcenter, AngleUnit, angles

The deeper modules (``trilib.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
import logging as _logging

try:
    __version__ = _pkg_version("trilib")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import EPS_AREA, EPS_RIGHT_ANGLE_DEG, RIGHT_ANGLE_DEG
from .core.errors import (
    GeometryError, DegenerateGeometryError, ZeroVectorError, InvalidArgumentError,
)
from .core.types import AngleUnit, AngleExtremum, Triangle
from .core.vectors import (
    length, length2, magnitude, make_vector, dot_product, cross_product, unit_vector,
    angle, coordinate_angle, max_value, min_value, average_value, mean_value,
    standard_deviation,
)
from .core.triangles import (
    minlength, maxlength, edge_lengths, perimeter, angles, angle_at, maxangle, minangle,
    area, is_acute, is_obtuse, is_degenerate, centroid, normal,
    circumcenter, circumradius, incenter, inradius, barycoordinates,
)
from .core.batch import triangles_areas, triangles_angles, triangles_min_angles, degenerate_mask
from .core.logging_utils import configure_logging, get_logger

# Namespace submodules for exploratory users
vectors = _imp('trilib.core.vectors')
triangles = _imp('trilib.core.triangles')
batch = _imp('trilib.core.batch')
constants = _imp('trilib.core.constants')


def plot_triangle(*args, **kwargs):
    """Lazy proxy for :func:`trilib.core.visualization.plot_triangle`."""
    return _imp('trilib.core.visualization').plot_triangle(*args, **kwargs)


__all__ = [
    '__version__',
    # tolerances
    'EPS_AREA', 'EPS_RIGHT_ANGLE_DEG', 'RIGHT_ANGLE_DEG',
    # errors
    'GeometryError', 'DegenerateGeometryError', 'ZeroVectorError', 'InvalidArgumentError',
    # types
    'AngleUnit', 'AngleExtremum', 'Triangle',
    # vector kernel
    'length', 'length2', 'magnitude', 'make_vector', 'dot_product', 'cross_product',
    'unit_vector', 'angle', 'coordinate_angle', 'max_value', 'min_value',
    'average_value', 'mean_value', 'standard_deviation',
    # triangle kernel
    'minlength', 'maxlength', 'edge_lengths', 'perimeter', 'angles', 'angle_at',
    'maxangle', 'minangle', 'area', 'is_acute', 'is_obtuse', 'is_degenerate',
    'centroid', 'normal', 'circumcenter', 'circumradius', 'incenter', 'inradius',
    'barycoordinates',
    # batch helpers
    'triangles_areas', 'triangles_angles', 'triangles_min_angles', 'degenerate_mask',
    # logging / plotting
    'configure_logging', 'get_logger', 'plot_triangle',
    # submodules
    'vectors', 'triangles', 'batch', 'constants',
]
