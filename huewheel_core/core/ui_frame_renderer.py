from __future__ import annotations

from dataclasses import dataclass
import math

import torch

from huewheel_ui.color import RGBA
from huewheel_ui.component_schema import DisplayableArea
from huewheel_ui.controls.wheel_renderer import (
    ArcStrokeCommand,
    CircleStrokeCommand,
    RoundedRectFillCommand,
    RoundedRectStrokeCommand,
    WheelRenderBatch,
)


_TWO_PI = 2.0 * math.pi


@dataclass
class MatrixWheelFrameRenderer:
    """Torch-first draw-command-to-matrix renderer for picker frames.

    Coverage is sampled at pixel centers; there is no anti-aliasing.
    """

    _frame: torch.Tensor | None = None
    _grid_x: torch.Tensor | None = None
    _grid_y: torch.Tensor | None = None

    def begin_frame(self, display: DisplayableArea, clear_color: RGBA) -> None:
        width = int(round(display.content_width_px))
        height = int(round(display.content_height_px))
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be > 0")
        self._frame = torch.zeros((height, width, 4), dtype=torch.uint8)
        self._frame[:, :, 0] = clear_color[0]
        self._frame[:, :, 1] = clear_color[1]
        self._frame[:, :, 2] = clear_color[2]
        self._frame[:, :, 3] = clear_color[3]
        self._grid_x = (torch.arange(width, dtype=torch.float32) + 0.5).unsqueeze(0).expand(height, width)
        self._grid_y = (torch.arange(height, dtype=torch.float32) + 0.5).unsqueeze(1).expand(height, width)

    def draw_wheel_batch(self, batch: WheelRenderBatch) -> None:
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            raise RuntimeError("begin_frame must be called before draw_wheel_batch")
        for command in batch.commands:
            if isinstance(command, ArcStrokeCommand):
                self._draw_arc(command)
            elif isinstance(command, CircleStrokeCommand):
                self._draw_circle(command)
            elif isinstance(command, RoundedRectFillCommand):
                self._fill_rounded_rect(command)
            elif isinstance(command, RoundedRectStrokeCommand):
                self._stroke_rounded_rect(command)
            else:
                raise TypeError(f"unsupported draw command: {type(command).__name__}")

    def end_frame(self) -> torch.Tensor:
        if self._frame is None:
            raise RuntimeError("begin_frame must be called before end_frame")
        out = self._frame.clone()
        self._frame = None
        self._grid_x = None
        self._grid_y = None
        return out

    def _draw_arc(self, command: ArcStrokeCommand) -> None:
        half = command.stroke_width / 2.0
        window = self._window(command.center_x, command.center_y, command.radius + half)
        if window is None:
            return
        x0, y0, gx, gy = window
        dx = gx - command.center_x
        dy = gy - command.center_y
        band = (torch.sqrt(dx * dx + dy * dy) - command.radius).abs() <= half
        span = abs(command.sweep_angle)
        if span < _TWO_PI:
            lo = command.start_angle + min(command.sweep_angle, 0.0)
            delta = torch.remainder(torch.atan2(dy, dx) - lo, _TWO_PI)
            band = band & (delta <= span)
        self._blend_mask(band, x=x0, y=y0, color=command.color)

    def _draw_circle(self, command: CircleStrokeCommand) -> None:
        half = max(0.5, command.stroke_width / 2.0)
        window = self._window(command.center_x, command.center_y, command.radius + half)
        if window is None:
            return
        x0, y0, gx, gy = window
        dist = torch.sqrt((gx - command.center_x) ** 2 + (gy - command.center_y) ** 2)
        self._blend_mask((dist - command.radius).abs() <= half, x=x0, y=y0, color=command.color)

    def _fill_rounded_rect(self, command: RoundedRectFillCommand) -> None:
        window = self._rect_window(command.x, command.y, command.width, command.height)
        if window is None:
            return
        x0, y0, gx, gy = window
        mask = _rounded_rect_mask(gx, gy, command.x, command.y, command.width, command.height, command.corner_radius)
        gradient = command.gradient
        if gradient.axis == "horizontal":
            t = ((gx - command.x) / max(command.width, 1e-9)).clamp(0.0, 1.0)
        else:
            t = ((gy - command.y) / max(command.height, 1e-9)).clamp(0.0, 1.0)
        start = torch.tensor(gradient.start, dtype=torch.float32).view(1, 1, 4)
        end = torch.tensor(gradient.end, dtype=torch.float32).view(1, 1, 4)
        rgba = start + (end - start) * t.unsqueeze(-1)
        self._blend_pixels(mask, rgba, x=x0, y=y0)

    def _stroke_rounded_rect(self, command: RoundedRectStrokeCommand) -> None:
        half = max(0.5, command.stroke_width / 2.0)
        window = self._rect_window(
            command.x - half, command.y - half, command.width + 2 * half, command.height + 2 * half
        )
        if window is None:
            return
        x0, y0, gx, gy = window
        outer = _rounded_rect_mask(
            gx,
            gy,
            command.x - half,
            command.y - half,
            command.width + 2 * half,
            command.height + 2 * half,
            command.corner_radius + half,
        )
        inner = _rounded_rect_mask(
            gx,
            gy,
            command.x + half,
            command.y + half,
            command.width - 2 * half,
            command.height - 2 * half,
            max(0.0, command.corner_radius - half),
        )
        self._blend_mask(outer & ~inner, x=x0, y=y0, color=command.color)

    def _window(self, cx: float, cy: float, extent: float):
        return self._rect_window(cx - extent, cy - extent, 2 * extent, 2 * extent)

    def _rect_window(self, x: float, y: float, w: float, h: float):
        if self._frame is None or self._grid_x is None or self._grid_y is None:
            return None
        x0 = max(0, int(math.floor(x)) - 1)
        y0 = max(0, int(math.floor(y)) - 1)
        x1 = min(self._frame.shape[1], int(math.ceil(x + w)) + 2)
        y1 = min(self._frame.shape[0], int(math.ceil(y + h)) + 2)
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, self._grid_x[y0:y1, x0:x1], self._grid_y[y0:y1, x0:x1]

    def _blend_mask(self, mask: torch.Tensor, *, x: int, y: int, color: RGBA) -> None:
        h, w = mask.shape
        rgba = torch.tensor(color, dtype=torch.float32).view(1, 1, 4).expand(h, w, 4)
        self._blend_pixels(mask, rgba, x=x, y=y)

    def _blend_pixels(self, mask: torch.Tensor, rgba: torch.Tensor, *, x: int, y: int) -> None:
        if self._frame is None:
            return
        h, w = mask.shape
        if h <= 0 or w <= 0 or not bool(mask.any()):
            return
        alpha = (rgba[:, :, 3] / 255.0) * mask.to(torch.float32)
        if not bool((alpha > 0).any()):
            return
        patch = self._frame[y : y + h, x : x + w]
        dst = patch[:, :, :3].to(torch.float32)
        a = alpha.unsqueeze(-1)
        out = torch.clamp(rgba[:, :, :3] * a + dst * (1.0 - a), 0, 255).round().to(torch.uint8)
        patch[:, :, :3] = torch.where(mask.unsqueeze(-1), out, patch[:, :, :3])
        patch[:, :, 3] = torch.where(mask, torch.full_like(patch[:, :, 3], 255), patch[:, :, 3])


def _rounded_rect_mask(
    gx: torch.Tensor,
    gy: torch.Tensor,
    x: float,
    y: float,
    w: float,
    h: float,
    radius: float,
) -> torch.Tensor:
    if w <= 0 or h <= 0:
        return torch.zeros_like(gx, dtype=torch.bool)
    hw = w / 2.0
    hh = h / 2.0
    r = max(0.0, min(radius, hw, hh))
    ax = (gx - (x + hw)).abs()
    ay = (gy - (y + hh)).abs()
    qx = (ax - (hw - r)).clamp(min=0.0)
    qy = (ay - (hh - r)).clamp(min=0.0)
    return (ax <= hw) & (ay <= hh) & (qx * qx + qy * qy <= r * r)
