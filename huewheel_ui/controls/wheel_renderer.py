from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, Union

from huewheel_ui.color import RGBA


GradientAxis = Literal["horizontal", "vertical"]


@dataclass(frozen=True)
class LinearGradient:
    """Two-stop gradient spanning the full bounds of the shape it fills.

    `horizontal` runs left to right, `vertical` runs top to bottom.
    """

    start: RGBA
    end: RGBA
    axis: GradientAxis = "horizontal"


@dataclass(frozen=True)
class ArcStrokeCommand:
    """Stroke of a circular arc centered on `radius`.

    Angles are radians, measured clockwise on screen from the positive x axis.
    A negative sweep runs counter-clockwise from `start_angle`.
    """

    center_x: float
    center_y: float
    radius: float
    start_angle: float
    sweep_angle: float
    stroke_width: float
    color: RGBA


@dataclass(frozen=True)
class CircleStrokeCommand:
    center_x: float
    center_y: float
    radius: float
    stroke_width: float
    color: RGBA


@dataclass(frozen=True)
class RoundedRectFillCommand:
    x: float
    y: float
    width: float
    height: float
    corner_radius: float
    gradient: LinearGradient


@dataclass(frozen=True)
class RoundedRectStrokeCommand:
    x: float
    y: float
    width: float
    height: float
    corner_radius: float
    stroke_width: float
    color: RGBA


WheelDrawCommand = Union[
    ArcStrokeCommand,
    CircleStrokeCommand,
    RoundedRectFillCommand,
    RoundedRectStrokeCommand,
]


@dataclass(frozen=True)
class WheelRenderBatch:
    """Draw commands for one paint cycle, ordered back to front."""

    commands: tuple[WheelDrawCommand, ...]

    @property
    def is_empty(self) -> bool:
        return not self.commands


class WheelRenderer(Protocol):
    """Backend-agnostic renderer interface for picker paint calls."""

    def draw_wheel_batch(self, batch: WheelRenderBatch) -> None:
        ...
