"""Configuration for the demonstration program."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .types import AngleUnit


@dataclass
class DemoConfig:
    """Presentation settings for ``trilib-demo``.

    Attributes
    ----------
    precision : int
        Fixed-point digits used when printing scalars and coordinates.
    angle_unit : AngleUnit
        Unit for printed triangle and vector angles.
    log_level : str
        Level applied to the 'trilib' logger family.
    plot_path : str, optional
        When set, the sample triangle is rendered to this image file.
    """
    precision: int = 4
    angle_unit: AngleUnit = AngleUnit.DEGREES
    log_level: str = 'INFO'
    plot_path: Optional[str] = None

    @classmethod
    def from_args(cls, args) -> 'DemoConfig':
        return cls(
            precision=args.precision,
            angle_unit=AngleUnit(args.unit),
            log_level=args.log_level,
            plot_path=args.plot,
        )


__all__ = ['DemoConfig']
