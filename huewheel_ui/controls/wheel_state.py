from __future__ import annotations

from dataclasses import dataclass

from huewheel_ui.color import RGBA, HSVColor, clamp_unit, wrap_hue

from .wheel_mapping import ActiveRegion


@dataclass
class WheelColorState:
    """Held hue/saturation/value of the picker plus the region of the current gesture.

    Hue belongs to the ring; saturation and value belong to the square. External color
    updates only ever reconcile the square's components.
    """

    hue: float = 0.0
    saturation: float = 0.0
    value: float = 0.0
    alpha: float = 1.0
    active_region: ActiveRegion = "ring"

    def __post_init__(self) -> None:
        self.hue = wrap_hue(self.hue)
        self.saturation = clamp_unit(self.saturation)
        self.value = clamp_unit(self.value)
        self.alpha = clamp_unit(self.alpha)

    @classmethod
    def from_color(cls, rgba: RGBA) -> "WheelColorState":
        hsv = HSVColor.from_rgba(rgba)
        return cls(hue=hsv.hue, saturation=hsv.saturation, value=hsv.value, alpha=hsv.alpha)

    def apply_hue(self, hue: float) -> None:
        self.hue = wrap_hue(hue)

    def apply_square(self, saturation: float, value: float) -> None:
        self.saturation = clamp_unit(saturation)
        self.value = clamp_unit(value)

    def set_alpha(self, alpha: float) -> None:
        self.alpha = clamp_unit(alpha)

    def reconcile(self, rgba: RGBA) -> bool:
        """Overwrite saturation/value from an externally supplied color; hue is kept."""

        external = HSVColor.from_rgba(rgba)
        changed = False
        if external.value != self.value:
            self.value = external.value
            changed = True
        if external.saturation != self.saturation:
            self.saturation = external.saturation
            changed = True
        return changed

    def to_hsv(self) -> HSVColor:
        return HSVColor.from_ahsv(self.alpha, self.hue, self.saturation, self.value)

    def to_rgba(self) -> RGBA:
        return self.to_hsv().to_rgba()
