"""Demonstration program: prints the kernel results for a sample triangle and vectors.

Run as ``trilib-demo`` or ``python -m trilib.core.demo``.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from .config import DemoConfig
from .logging_utils import configure_logging, get_logger
from .triangles import (
    angles, area, barycoordinates, centroid, circumcenter, circumradius,
    incenter, inradius, is_acute, is_degenerate, is_obtuse, maxlength, minlength, normal,
)
from .types import AngleUnit
from .vectors import angle, cross_product, dot_product, magnitude, unit_vector

logger = get_logger('trilib.demo')

P1 = (0.0, 0.0, 0.0)
P2 = (4.0, 0.0, 0.0)
P3 = (0.0, 3.0, 0.0)
V1 = (3.0, 4.0, 0.0)
V2 = (1.0, 0.0, 0.0)
QUERY = (1.0, 1.0, 0.0)

_UNIT_LABEL = {AngleUnit.RADIANS: 'radians', AngleUnit.DEGREES: 'degrees'}


def _num(value, precision: int) -> str:
    return f"{float(value):.{precision}f}"


def _vec(values, precision: int) -> str:
    return '(' + ', '.join(_num(v, precision) for v in values) + ')'


def _yes(flag: bool) -> str:
    return 'Yes' if flag else 'No'


def render_report(cfg: DemoConfig) -> List[str]:
    """Build the demo output as a list of lines."""
    n = cfg.precision
    unit = cfg.angle_unit
    lines = ['=== Trilib Examples ===', '', '--- Triangle Operations ---', 'Triangle vertices:']
    for name, p in (('P1', P1), ('P2', P2), ('P3', P3)):
        lines.append(f"  {name}: {_vec(p, n)}")
    lines.append(f"Area: {_num(area(P1, P2, P3), n)}")
    lines.append(f"Min edge length: {_num(minlength(P1, P2, P3), n)}")
    lines.append(f"Max edge length: {_num(maxlength(P1, P2, P3), n)}")
    lines.append(f"Angles ({_UNIT_LABEL[unit]}):")
    for name, a in zip(('P1', 'P2', 'P3'), angles(P1, P2, P3, unit=unit)):
        lines.append(f"  At {name}: {_num(a, n)}")
    lines.append('Classification:')
    lines.append(f"  Acute: {_yes(is_acute(P1, P2, P3))}")
    lines.append(f"  Obtuse: {_yes(is_obtuse(P1, P2, P3))}")
    lines.append(f"  Degenerate: {_yes(is_degenerate(P1, P2, P3))}")

    lines += ['', '--- Geometric Properties ---']
    lines.append(f"Centroid: {_vec(centroid(P1, P2, P3), n)}")
    lines.append(f"Circumcenter: {_vec(circumcenter(P1, P2, P3), n)}")
    lines.append(f"Circumradius: {_num(circumradius(P1, P2, P3), n)}")
    lines.append(f"Incenter: {_vec(incenter(P1, P2, P3), n)}")
    lines.append(f"Inradius: {_num(inradius(P1, P2, P3), n)}")
    lines.append(f"Normal vector: {_vec(normal(P1, P2, P3), n)}")

    lines += ['', '--- Vector Operations ---']
    lines.append(f"Vector v1: {_vec(V1, n)}")
    lines.append(f"Vector v2: {_vec(V2, n)}")
    lines.append(f"Magnitude of v1: {_num(magnitude(V1), n)}")
    lines.append(f"Dot product (v1 . v2): {_num(dot_product(V1, V2), n)}")
    lines.append(f"Cross product (v1 x v2): {_vec(cross_product(V1, V2), n)}")
    lines.append(f"Unit vector of v1: {_vec(unit_vector(V1), n)}")
    lines.append(f"Angle between v1 and v2 ({_UNIT_LABEL[unit]}): {_num(angle(V1, V2, unit=unit), n)}")

    lines += ['', '--- Barycentric Coordinates ---']
    bary = barycoordinates(P1, P2, P3, QUERY)
    lines.append(f"Barycentric coordinates of point {_vec(QUERY, n)}:")
    for i, lam in enumerate(bary, start=1):
        lines.append(f"  Lambda {i}: {_num(lam, n)}")
    lines.append(f"  Sum (should be ~1.0): {_num(sum(bary), n)}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Print triangle and vector kernel results for sample inputs')
    parser.add_argument('--precision', type=int, default=DemoConfig.precision,
                        help='fixed-point digits for printed numbers')
    parser.add_argument('--unit', choices=[u.value for u in AngleUnit], default=DemoConfig.angle_unit.value,
                        help='unit for printed angles')
    parser.add_argument('--log-level', default=DemoConfig.log_level)
    parser.add_argument('--plot', default=None, metavar='PATH',
                        help='also render the sample triangle to an image file')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = DemoConfig.from_args(args)
    configure_logging(cfg.log_level)
    for line in render_report(cfg):
        print(line)
    if cfg.plot_path:
        # matplotlib is only imported when a plot is requested
        from .visualization import save_triangle_plot
        save_triangle_plot(P1, P2, P3, cfg.plot_path)
    logger.debug("demo finished")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
