from __future__ import annotations

from dataclasses import dataclass, field
import logging

import torch

from huewheel_ui.color import RGBA, to_hex_color
from huewheel_ui.component_schema import CoordinatePoint, DisplayableArea
from huewheel_ui.controls.interaction import parse_pointer_event
from huewheel_ui.controls.wheel_picker import ColorWheelPicker

from .ui_frame_renderer import MatrixWheelFrameRenderer

LOGGER = logging.getLogger(__name__)


@dataclass
class PickerHost:
    """Single-threaded host for one picker session.

    Feeds normalized pointer payloads and external color changes into the picker,
    records every emitted color, and paints a full frame on request.
    """

    picker: ColorWheelPicker
    renderer: MatrixWheelFrameRenderer = field(default_factory=MatrixWheelFrameRenderer)
    emitted: list[RGBA] = field(default_factory=list)
    frames_painted: int = 0

    def dispatch(self, event_type: str, payload: object) -> RGBA | None:
        event = parse_pointer_event(event_type, payload)
        if event is None:
            LOGGER.warning("ignoring unparseable %s event: %r", event_type, payload)
            return None
        if event.phase == "start" and not self.picker.hit_test(CoordinatePoint(event.x, event.y)):
            # a press outside the picker never starts a gesture, and ends any open one
            self.picker.on_end()
            LOGGER.debug("start at (%.1f, %.1f) outside picker %s", event.x, event.y, self.picker.component_id)
            return None
        color = self.picker.on_pointer(event)
        if color is not None:
            self.emitted.append(color)
            LOGGER.debug("%s at (%.1f, %.1f) -> %s", event.phase, event.x, event.y, to_hex_color(color))
        return color

    def update_external_color(self, color: RGBA) -> bool:
        changed = self.picker.set_color(color)
        LOGGER.debug("external color %s (reconciled=%s)", to_hex_color(color), changed)
        return changed

    def resize(self, width: float, height: float) -> None:
        self.picker.resize(width, height)

    def paint(self, clear_color: RGBA = (255, 255, 255, 255)) -> torch.Tensor:
        width = int(round(self.picker.width))
        height = int(round(self.picker.height))
        if width <= 0 or height <= 0:
            LOGGER.debug("picker %s has no pixels at %sx%s", self.picker.component_id, width, height)
            return torch.zeros((max(height, 0), max(width, 0), 4), dtype=torch.uint8)
        display = DisplayableArea(content_width_px=float(width), content_height_px=float(height))
        self.renderer.begin_frame(display, clear_color=clear_color)
        batch = self.picker.render(self.renderer)
        frame = self.renderer.end_frame()
        self.frames_painted += 1
        if batch.is_empty:
            LOGGER.debug("picker %s drew nothing at %sx%s", self.picker.component_id, width, height)
        return frame
