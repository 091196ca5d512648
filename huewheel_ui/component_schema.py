from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoordinatePoint:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass(frozen=True)
class DisplayableArea:
    """Pixel area a renderer paints into."""

    content_width_px: float
    content_height_px: float

    def __post_init__(self) -> None:
        if self.content_width_px <= 0 or self.content_height_px <= 0:
            raise ValueError("content dimensions must be > 0")


def parse_coordinate_notation(notation: str) -> CoordinatePoint:
    """Parse `x,y` into a CoordinatePoint."""

    raw = notation.strip()
    if not raw:
        raise ValueError("coordinate notation must be non-empty")
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError("coordinates must use `x,y` format")
    return CoordinatePoint(x=float(parts[0]), y=float(parts[1]))


@dataclass
class ComponentBase:
    """Shared schema for huewheel components.

    Interaction bounds default to visual bounds, but can be overridden without
    changing visual rendering.
    """

    component_id: str
    disabled: bool = False
    interaction_bounds_override: BoundingBox | None = None

    def visual_bounds(self) -> BoundingBox:
        raise NotImplementedError

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled

    def interaction_bounds(self) -> BoundingBox:
        return self.interaction_bounds_override or self.visual_bounds()

    def hit_test(self, point: CoordinatePoint) -> bool:
        return self.interaction_bounds().contains(point.x, point.y)
