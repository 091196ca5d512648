"""Color wheel controls and interaction contracts for huewheel."""

from .interaction import PointerEvent, PointerPhase, parse_pointer_event
from .wheel_geometry import WheelGeometry, interaction_geometry, paint_geometry, square_half_extent
from .wheel_mapping import (
    ActiveRegion,
    classify_region,
    hue_to_vector,
    saturation_to_vector,
    value_to_vector,
    vector_to_hue,
    vector_to_saturation,
    vector_to_value,
)
from .wheel_painter import paint_wheel
from .wheel_picker import ColorWheelPicker
from .wheel_renderer import (
    ArcStrokeCommand,
    CircleStrokeCommand,
    LinearGradient,
    RoundedRectFillCommand,
    RoundedRectStrokeCommand,
    WheelRenderBatch,
    WheelRenderer,
)
from .wheel_state import WheelColorState

__all__ = [
    "ActiveRegion",
    "ArcStrokeCommand",
    "CircleStrokeCommand",
    "ColorWheelPicker",
    "LinearGradient",
    "PointerEvent",
    "PointerPhase",
    "RoundedRectFillCommand",
    "RoundedRectStrokeCommand",
    "WheelColorState",
    "WheelGeometry",
    "WheelRenderBatch",
    "WheelRenderer",
    "classify_region",
    "hue_to_vector",
    "interaction_geometry",
    "paint_geometry",
    "paint_wheel",
    "parse_pointer_event",
    "saturation_to_vector",
    "square_half_extent",
    "value_to_vector",
    "vector_to_hue",
    "vector_to_saturation",
    "vector_to_value",
]
