from __future__ import annotations

import colorsys
from dataclasses import dataclass
import math
import numbers
import re


RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _to_u8(channel: float) -> int:
    return int(math.floor(clamp_unit(channel) * 255.0 + 0.5))


@dataclass(frozen=True)
class HSVColor:
    """Hue in degrees [0, 360), saturation/value/alpha in [0, 1].

    Use `from_ahsv` to build a color from unnormalized components; the constructor
    only accepts values already inside their ranges.
    """

    hue: float
    saturation: float
    value: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.hue < 360.0:
            raise ValueError(f"hue must be in [0, 360), got {self.hue}")
        for name in ("saturation", "value", "alpha"):
            component = getattr(self, name)
            if not 0.0 <= component <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {component}")

    @classmethod
    def from_ahsv(cls, alpha: float, hue: float, saturation: float, value: float) -> "HSVColor":
        return cls(
            hue=wrap_hue(hue),
            saturation=clamp_unit(saturation),
            value=clamp_unit(value),
            alpha=clamp_unit(alpha),
        )

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "HSVColor":
        r, g, b, a = _check_rgba(rgba)
        h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
        return cls.from_ahsv(a / 255.0, h * 360.0, s, v)

    def to_rgba(self) -> RGBA:
        r, g, b = colorsys.hsv_to_rgb(self.hue / 360.0, self.saturation, self.value)
        return (_to_u8(r), _to_u8(g), _to_u8(b), _to_u8(self.alpha))


def wrap_hue(hue: float) -> float:
    wrapped = float(hue) % 360.0
    # -1e-18 % 360.0 rounds up to exactly 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def parse_hex_color(hex_color: str) -> RGBA:
    """Parse `#RRGGBB` or `#RRGGBBAA` into an 8-bit RGBA tuple."""

    value = hex_color.strip() if isinstance(hex_color, str) else ""
    if not _HEX_COLOR.match(value):
        raise ValueError(f"color must be #RRGGBB or #RRGGBBAA, got `{hex_color}`")
    raw = value[1:]
    r = int(raw[0:2], 16)
    g = int(raw[2:4], 16)
    b = int(raw[4:6], 16)
    a = int(raw[6:8], 16) if len(raw) == 8 else 255
    return (r, g, b, a)


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR.match(value))


def to_hex_color(rgba: RGBA) -> str:
    r, g, b, a = _check_rgba(rgba)
    return f"#{r:02X}{g:02X}{b:02X}{a:02X}"


def _check_rgba(rgba: RGBA) -> RGBA:
    if rgba is None:
        raise ValueError("a color is required")
    if not isinstance(rgba, (tuple, list)) or len(rgba) != 4:
        raise ValueError(f"color must be an (r, g, b, a) tuple, got {rgba!r}")
    channels = tuple(rgba)
    for c in channels:
        if isinstance(c, bool) or not isinstance(c, numbers.Integral):
            raise ValueError(f"color channels must be integers, got {rgba!r}")
        if c < 0 or c > 255:
            raise ValueError(f"color channels must be in [0, 255], got {rgba!r}")
    return tuple(int(c) for c in channels)  # type: ignore[return-value]
