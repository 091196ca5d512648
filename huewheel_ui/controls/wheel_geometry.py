from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class WheelGeometry:
    """Derived placement of the hue ring and the inscribed shade square.

    Coordinates are local to the container (origin at its top-left corner).
    """

    center_x: float
    center_y: float
    ring_radius: float
    square_half_extent: float
    ring_thickness: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def is_degenerate(self) -> bool:
        return self.ring_radius <= 0.0 or self.square_half_extent <= 0.0


def square_half_extent(ring_radius: float, ring_thickness: float) -> float:
    """Half side of the square whose circumscribed circle touches the ring's inner edge."""

    return (ring_radius - ring_thickness / 2.0) / math.sqrt(2.0)


def interaction_geometry(width: float, height: float, ring_thickness: float) -> WheelGeometry:
    """Geometry used to hit-test and map pointer samples.

    The ring radius here subtracts the full thickness, unlike `paint_geometry`.
    The two bases are not interchangeable.
    """

    radius = min(float(width), float(height)) / 2.0 - ring_thickness
    return _build(width, height, radius, ring_thickness)


def paint_geometry(width: float, height: float, ring_thickness: float) -> WheelGeometry:
    """Geometry used to place the painted ring stroke, square and thumbs."""

    radius = min(float(width), float(height)) / 2.0 - ring_thickness / 2.0
    return _build(width, height, radius, ring_thickness)


def _build(width: float, height: float, radius: float, ring_thickness: float) -> WheelGeometry:
    return WheelGeometry(
        center_x=float(width) / 2.0,
        center_y=float(height) / 2.0,
        ring_radius=radius,
        square_half_extent=square_half_extent(radius, ring_thickness),
        ring_thickness=float(ring_thickness),
    )
