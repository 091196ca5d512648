from __future__ import annotations

import math

from huewheel_ui.color import RGBA, HSVColor, parse_hex_color
from huewheel_ui.config import PickerConfig
from huewheel_ui.style.theme import DEFAULT_TOKENS, ThemeTokens

from .wheel_geometry import WheelGeometry, paint_geometry
from .wheel_mapping import hue_to_vector, saturation_to_vector, value_to_vector
from .wheel_renderer import (
    ArcStrokeCommand,
    CircleStrokeCommand,
    LinearGradient,
    RoundedRectFillCommand,
    RoundedRectStrokeCommand,
    WheelDrawCommand,
    WheelRenderBatch,
)
from .wheel_state import WheelColorState


WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)

# Segment start is pulled back by this fraction of a step so neighbours overlap.
ARC_ALIASING = 0.5


def paint_wheel(
    state: WheelColorState,
    width: float,
    height: float,
    config: PickerConfig,
    tokens: ThemeTokens = DEFAULT_TOKENS,
) -> WheelRenderBatch:
    """Build the full picker visual for one frame, back to front.

    Recomputes everything from `state` and the container size on every call.
    A container too small for a positive ring yields an empty batch.
    """

    geometry = paint_geometry(width, height, config.ring_thickness)
    if geometry.is_degenerate:
        return WheelRenderBatch(commands=())

    border = parse_hex_color(config.border_color or tokens.border_color)
    commands: list[WheelDrawCommand] = []
    commands.extend(_ring_segments(geometry, config.segments))
    if config.draw_border:
        commands.extend(_ring_borders(geometry, border, tokens))
    commands.extend(_shade_square(geometry, state.hue, tokens))
    if config.draw_border:
        x, y, side = _square_rect(geometry)
        commands.append(
            RoundedRectStrokeCommand(
                x=x,
                y=y,
                width=side,
                height=side,
                corner_radius=tokens.square_corner_radius_px,
                stroke_width=tokens.border_width_px,
                color=border,
            )
        )
    ring_x, ring_y = hue_to_vector(
        (state.hue + 360.0) * math.pi / 180.0, geometry.ring_radius, geometry.center
    )
    commands.extend(
        _thumb(ring_x, ring_y, geometry.ring_thickness / 2.0 + tokens.ring_thumb_padding_px, tokens)
    )
    square_x = saturation_to_vector(state.saturation, geometry.square_half_extent, geometry.center_x)
    square_y = value_to_vector(state.value, geometry.square_half_extent, geometry.center_y)
    commands.extend(_thumb(square_x, square_y, tokens.square_thumb_radius_px, tokens))
    return WheelRenderBatch(commands=tuple(commands))


def _ring_segments(geometry: WheelGeometry, segments: int) -> list[ArcStrokeCommand]:
    step = 2.0 * math.pi / segments
    out: list[ArcStrokeCommand] = []
    for i in range(segments):
        start = (i - ARC_ALIASING) * step
        end = (i + 1) * step
        out.append(
            ArcStrokeCommand(
                center_x=geometry.center_x,
                center_y=geometry.center_y,
                radius=geometry.ring_radius,
                start_angle=start,
                sweep_angle=start - end,
                stroke_width=geometry.ring_thickness,
                color=HSVColor.from_ahsv(1.0, i * 360.0 / segments, 1.0, 1.0).to_rgba(),
            )
        )
    return out


def _ring_borders(geometry: WheelGeometry, color: RGBA, tokens: ThemeTokens) -> list[CircleStrokeCommand]:
    half = geometry.ring_thickness / 2.0
    return [
        CircleStrokeCommand(
            center_x=geometry.center_x,
            center_y=geometry.center_y,
            radius=radius,
            stroke_width=tokens.border_width_px,
            color=color,
        )
        for radius in (geometry.ring_radius - half, geometry.ring_radius + half)
    ]


def _square_rect(geometry: WheelGeometry) -> tuple[float, float, float]:
    half = geometry.square_half_extent
    return (geometry.center_x - half, geometry.center_y - half, half * 2.0)


def _shade_square(geometry: WheelGeometry, hue: float, tokens: ThemeTokens) -> list[RoundedRectFillCommand]:
    x, y, side = _square_rect(geometry)
    pure_hue = HSVColor.from_ahsv(1.0, hue, 1.0, 1.0).to_rgba()
    return [
        RoundedRectFillCommand(
            x=x,
            y=y,
            width=side,
            height=side,
            corner_radius=tokens.square_corner_radius_px,
            gradient=LinearGradient(start=WHITE, end=pure_hue, axis="horizontal"),
        ),
        RoundedRectFillCommand(
            x=x,
            y=y,
            width=side,
            height=side,
            corner_radius=tokens.square_corner_radius_px,
            gradient=LinearGradient(start=TRANSPARENT, end=BLACK, axis="vertical"),
        ),
    ]


def _thumb(x: float, y: float, radius: float, tokens: ThemeTokens) -> list[CircleStrokeCommand]:
    # wide dark ring first, narrow light ring on top of it
    return [
        CircleStrokeCommand(
            center_x=x,
            center_y=y,
            radius=radius,
            stroke_width=tokens.thumb_outer_width_px,
            color=parse_hex_color(tokens.thumb_outer_color),
        ),
        CircleStrokeCommand(
            center_x=x,
            center_y=y,
            radius=radius,
            stroke_width=tokens.thumb_inner_width_px,
            color=parse_hex_color(tokens.thumb_inner_color),
        ),
    ]
