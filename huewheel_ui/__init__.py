"""HSV color wheel picker core: geometry, mapping, interaction and paint commands."""

from .color import RGBA, HSVColor, parse_hex_color, to_hex_color
from .component_schema import (
    BoundingBox,
    ComponentBase,
    CoordinatePoint,
    DisplayableArea,
    parse_coordinate_notation,
)
from .config import DEFAULT_CONFIG, PickerConfig, load_picker_config, validate_picker_config
from .controls.interaction import PointerEvent, PointerPhase, parse_pointer_event
from .controls.wheel_painter import paint_wheel
from .controls.wheel_picker import ColorWheelPicker
from .controls.wheel_renderer import WheelRenderBatch, WheelRenderer
from .controls.wheel_state import WheelColorState
from .style.theme import ThemeTokens, validate_theme_tokens

__all__ = [
    "BoundingBox",
    "ColorWheelPicker",
    "ComponentBase",
    "CoordinatePoint",
    "DEFAULT_CONFIG",
    "DisplayableArea",
    "HSVColor",
    "PickerConfig",
    "PointerEvent",
    "PointerPhase",
    "RGBA",
    "ThemeTokens",
    "WheelColorState",
    "WheelRenderBatch",
    "WheelRenderer",
    "load_picker_config",
    "paint_wheel",
    "parse_coordinate_notation",
    "parse_hex_color",
    "parse_pointer_event",
    "to_hex_color",
    "validate_picker_config",
    "validate_theme_tokens",
]
