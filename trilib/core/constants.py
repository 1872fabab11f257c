"""Central numerical tolerances and small geometry constants.

This module centralizes the numeric thresholds used by the kernel so they
can be tuned consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Geometry tolerances
EPS_AREA: float = 1e-12             # triangles with |area| <= EPS_AREA are degenerate
EPS_RIGHT_ANGLE_DEG: float = 1e-9   # slack on the 90 degree acute/obtuse split

# Reference angles
RIGHT_ANGLE_DEG: float = 90.0

__all__ = [
    'EPS_AREA',
    'EPS_RIGHT_ANGLE_DEG',
    'RIGHT_ANGLE_DEG',
]
