from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from huewheel_ui.color import is_hex_color


@dataclass(frozen=True)
class ThemeTokens:
    """Visual token set for the color wheel picker."""

    border_color: str = "#9E9E9E"
    thumb_outer_color: str = "#000000"
    thumb_inner_color: str = "#FFFFFF"
    thumb_outer_width_px: float = 5.0
    thumb_inner_width_px: float = 3.0
    ring_thumb_padding_px: float = 4.0
    square_thumb_radius_px: float = 12.0
    square_corner_radius_px: float = 4.0
    border_width_px: float = 1.0


DEFAULT_TOKENS = ThemeTokens()

_COLOR_TOKENS = ("border_color", "thumb_outer_color", "thumb_inner_color")
_POSITIVE_TOKENS = (
    "thumb_outer_width_px",
    "thumb_inner_width_px",
    "square_thumb_radius_px",
    "border_width_px",
)
_NON_NEGATIVE_TOKENS = ("ring_thumb_padding_px", "square_corner_radius_px")


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ThemeTokens:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not is_hex_color(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    for key in _POSITIVE_TOKENS:
        if not _is_number(raw[key]) or float(raw[key]) <= 0:
            raise ValueError(f"Token `{key}` must be a positive number")

    for key in _NON_NEGATIVE_TOKENS:
        if not _is_number(raw[key]) or float(raw[key]) < 0:
            raise ValueError(f"Token `{key}` must be a non-negative number")

    return ThemeTokens(
        border_color=str(raw["border_color"]),
        thumb_outer_color=str(raw["thumb_outer_color"]),
        thumb_inner_color=str(raw["thumb_inner_color"]),
        thumb_outer_width_px=float(raw["thumb_outer_width_px"]),
        thumb_inner_width_px=float(raw["thumb_inner_width_px"]),
        ring_thumb_padding_px=float(raw["ring_thumb_padding_px"]),
        square_thumb_radius_px=float(raw["square_thumb_radius_px"]),
        square_corner_radius_px=float(raw["square_corner_radius_px"]),
        border_width_px=float(raw["border_width_px"]),
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
