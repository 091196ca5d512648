"""Pure conversions between pointer vectors and hue/saturation/value.

Vectors are relative to the wheel center, in screen orientation (y grows downward).
Saturation increases left to right, value increases bottom to top.
"""

from __future__ import annotations

import math
from typing import Literal

from huewheel_ui.color import clamp_unit


ActiveRegion = Literal["ring", "square"]


def vector_to_hue(vx: float, vy: float) -> float:
    """Angle of the vector from the positive x axis in degrees, wrapped to [0, 360)."""

    hue = (math.atan2(vy, vx) * 180.0 / math.pi + 360.0) % 360.0
    return 0.0 if hue >= 360.0 else hue


def hue_to_vector(
    hue_radians: float, radius: float, center: tuple[float, float]
) -> tuple[float, float]:
    cx, cy = center
    return (math.cos(hue_radians) * radius + cx, math.sin(hue_radians) * radius + cy)


def vector_to_saturation(vx: float, half_extent: float) -> float:
    return clamp_unit(vx * 0.5 / half_extent + 0.5)


def vector_to_value(vy: float, half_extent: float) -> float:
    return clamp_unit(0.5 - vy * 0.5 / half_extent)


def saturation_to_vector(saturation: float, half_extent: float, center_x: float) -> float:
    return (saturation - 0.5) * half_extent / 0.5 + center_x


def value_to_vector(value: float, half_extent: float, center_y: float) -> float:
    return (0.5 - value) * half_extent / 0.5 + center_y


def classify_region(vx: float, vy: float, half_extent: float) -> ActiveRegion:
    # strict bounds: a sample exactly on the square edge belongs to the ring
    if abs(vx) < half_extent and abs(vy) < half_extent:
        return "square"
    return "ring"
