from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable

from huewheel_ui.color import RGBA, HSVColor
from huewheel_ui.component_schema import BoundingBox, ComponentBase, CoordinatePoint
from huewheel_ui.config import PickerConfig
from huewheel_ui.style.theme import ThemeTokens

from .interaction import PointerEvent
from .wheel_geometry import WheelGeometry, interaction_geometry
from .wheel_mapping import (
    ActiveRegion,
    classify_region,
    vector_to_hue,
    vector_to_saturation,
    vector_to_value,
)
from .wheel_painter import paint_wheel
from .wheel_renderer import WheelRenderBatch, WheelRenderer
from .wheel_state import WheelColorState


LOGGER = logging.getLogger(__name__)

ColorCallback = Callable[[RGBA], None]


@dataclass
class ColorWheelPicker(ComponentBase):
    """HSV picker made of a hue ring around a saturation/value square.

    The region under the pointer at `on_start` owns the whole gesture: updates keep
    mapping into that region even after the pointer leaves it. Every accepted start
    or update emits the resulting RGBA color through `on_changed`, with alpha taken
    from the externally supplied `color`.
    """

    color: RGBA | None = None
    on_changed: ColorCallback | None = None
    origin: CoordinatePoint = field(default_factory=lambda: CoordinatePoint(0.0, 0.0))
    width: float = 200.0
    height: float = 200.0
    config: PickerConfig = field(default_factory=PickerConfig)
    theme: ThemeTokens = field(default_factory=ThemeTokens)
    _state: WheelColorState = field(default_factory=WheelColorState, init=False, repr=False)
    _interacting: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.color is None:
            raise ValueError("ColorWheelPicker requires a color")
        self._check_size(self.width, self.height)
        self._state = WheelColorState.from_color(self.color)
        self.color = tuple(self.color)  # type: ignore[assignment]

    @property
    def state(self) -> WheelColorState:
        return self._state

    @property
    def active_region(self) -> ActiveRegion:
        return self._state.active_region

    @property
    def interacting(self) -> bool:
        return self._interacting

    def interaction_geometry(self) -> WheelGeometry:
        return interaction_geometry(self.width, self.height, self.config.ring_thickness)

    def on_start(self, x: float, y: float) -> RGBA | None:
        self._interacting = False
        if self.disabled:
            return None
        geometry = self.interaction_geometry()
        if geometry.is_degenerate:
            LOGGER.debug(
                "picker %s too small to interact (%sx%s)", self.component_id, self.width, self.height
            )
            return None
        vx, vy = self._vector(x, y, geometry)
        self._state.active_region = classify_region(vx, vy, geometry.square_half_extent)
        self._interacting = True
        LOGGER.debug("picker %s gesture targets %s", self.component_id, self._state.active_region)
        return self._apply(vx, vy, geometry)

    def on_update(self, x: float, y: float) -> RGBA | None:
        if self.disabled or not self._interacting:
            return None
        geometry = self.interaction_geometry()
        if geometry.is_degenerate:
            return None
        vx, vy = self._vector(x, y, geometry)
        return self._apply(vx, vy, geometry)

    def on_end(self) -> None:
        self._interacting = False

    def on_pointer(self, event: PointerEvent) -> RGBA | None:
        if event.phase == "start":
            return self.on_start(event.x, event.y)
        if event.phase == "update":
            return self.on_update(event.x, event.y)
        self.on_end()
        return None

    def set_color(self, color: RGBA) -> bool:
        """Accept an externally changed color.

        Alpha always follows the external color. Saturation/value are re-synced only
        when `reconcile_on_external_change` is set. Returns True if the held
        saturation/value changed.
        """

        external = HSVColor.from_rgba(color)
        self.color = tuple(color)  # type: ignore[assignment]
        self._state.set_alpha(external.alpha)
        if not self.config.reconcile_on_external_change:
            return False
        return self._state.reconcile(self.color)  # type: ignore[arg-type]

    def resize(self, width: float, height: float) -> None:
        self._check_size(width, height)
        self.width = width
        self.height = height

    def should_repaint(self) -> bool:
        return True

    def layout(self) -> WheelRenderBatch:
        return paint_wheel(self._state, self.width, self.height, self.config, self.theme)

    def render(self, renderer: WheelRenderer) -> WheelRenderBatch:
        batch = self.layout()
        renderer.draw_wheel_batch(batch)
        return batch

    def visual_bounds(self) -> BoundingBox:
        return BoundingBox(x=self.origin.x, y=self.origin.y, width=self.width, height=self.height)

    def _vector(self, x: float, y: float, geometry: WheelGeometry) -> tuple[float, float]:
        return (x - self.origin.x - geometry.center_x, y - self.origin.y - geometry.center_y)

    def _apply(self, vx: float, vy: float, geometry: WheelGeometry) -> RGBA:
        if self._state.active_region == "square":
            self._state.apply_square(
                vector_to_saturation(vx, geometry.square_half_extent),
                vector_to_value(vy, geometry.square_half_extent),
            )
        else:
            self._state.apply_hue(vector_to_hue(vx, vy))
        color = self._state.to_rgba()
        if self.on_changed is not None:
            self.on_changed(color)
        return color

    @staticmethod
    def _check_size(width: float, height: float) -> None:
        if width < 0 or height < 0:
            raise ValueError("ColorWheelPicker width/height must be >= 0")
