"""Matplotlib rendering of a single triangle and its centres.

3D triangles are drawn in their x/y projection.
"""
from __future__ import annotations

import os as _os

import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle

from .logging_utils import get_logger
from .triangles import centroid, circumcenter, circumradius, incenter, inradius, is_degenerate

logger = get_logger('trilib.viz')

__all__ = ['plot_triangle', 'save_triangle_plot']


def plot_triangle(p1, p2, p3, ax=None, show_circles: bool = True):
    """Draw the triangle outline, its vertices and centroid.

    When the triangle is non-degenerate and ``show_circles`` is set, the
    circumcircle and incircle are added with their centres. Returns the axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    pts = np.array([np.asarray(p, dtype=np.float64)[:2] for p in (p1, p2, p3)])
    closed = np.vstack([pts, pts[:1]])
    ax.plot(closed[:, 0], closed[:, 1], color='black', linewidth=1.5)
    ax.scatter(pts[:, 0], pts[:, 1], color='black', s=20, zorder=3)
    for i, (x, y) in enumerate(pts):
        ax.annotate(f'P{i + 1}', (x, y), textcoords='offset points', xytext=(4, 4))
    g = np.asarray(centroid(p1, p2, p3), dtype=np.float64)
    ax.scatter([g[0]], [g[1]], marker='x', color='tab:green', label='centroid', zorder=3)
    if show_circles and not is_degenerate(p1, p2, p3):
        cc = np.asarray(circumcenter(p1, p2, p3), dtype=np.float64)
        ic = np.asarray(incenter(p1, p2, p3), dtype=np.float64)
        ax.add_patch(Circle((cc[0], cc[1]), float(circumradius(p1, p2, p3)),
                            fill=False, color='tab:blue', label='circumcircle'))
        ax.add_patch(Circle((ic[0], ic[1]), float(inradius(p1, p2, p3)),
                            fill=False, color='tab:red', label='incircle'))
        ax.scatter([cc[0], ic[0]], [cc[1], ic[1]], color=['tab:blue', 'tab:red'], s=12, zorder=3)
    elif show_circles:
        logger.info("degenerate triangle: circles omitted")
    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.legend(loc='best', fontsize='small')
    return ax


def save_triangle_plot(p1, p2, p3, outname: str = 'triangle.png') -> str:
    """Render the triangle to ``outname`` and return the path."""
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        plot_triangle(p1, p2, p3, ax=ax)
        fig.savefig(outname, dpi=150)
    finally:
        plt.close(fig)
    logger.info("wrote %s", outname)
    return outname
