from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import tomllib
from typing import Any, Mapping

from .color import is_hex_color


MIN_RING_THICKNESS = 4.0
MAX_RING_THICKNESS = 50.0


@dataclass(frozen=True)
class PickerConfig:
    """Per-session picker configuration, validated at construction.

    `reconcile_on_external_change` re-syncs saturation/value from every external
    color update; hue always stays with the ring.
    """

    ring_thickness: float = 16.0
    draw_border: bool = False
    border_color: str | None = None
    reconcile_on_external_change: bool = False
    segments: int = 360

    def __post_init__(self) -> None:
        if isinstance(self.ring_thickness, bool) or not isinstance(self.ring_thickness, (int, float)):
            raise ValueError("ring_thickness must be a number")
        if not MIN_RING_THICKNESS <= float(self.ring_thickness) <= MAX_RING_THICKNESS:
            raise ValueError(
                f"ring_thickness must be in [{MIN_RING_THICKNESS:g}, {MAX_RING_THICKNESS:g}], "
                f"got {self.ring_thickness}"
            )
        if not isinstance(self.draw_border, bool):
            raise ValueError("draw_border must be a bool")
        if self.border_color is not None and not is_hex_color(self.border_color):
            raise ValueError("border_color must be a hex color (#RRGGBB or #RRGGBBAA)")
        if not isinstance(self.reconcile_on_external_change, bool):
            raise ValueError("reconcile_on_external_change must be a bool")
        if isinstance(self.segments, bool) or not isinstance(self.segments, int) or self.segments < 1:
            raise ValueError("segments must be an integer >= 1")


DEFAULT_CONFIG = PickerConfig()


def validate_picker_config(overrides: Mapping[str, Any] | None = None) -> PickerConfig:
    """Merge overrides onto the default config, rejecting unknown keys."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown picker option: {key}")
            raw[key] = value
    return PickerConfig(**raw)


def load_picker_config(path: str | Path) -> PickerConfig:
    """Load a TOML file whose `[picker]` table overrides the defaults."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"picker config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("picker", {})
    if not isinstance(table, dict):
        raise ValueError("`picker` must be a TOML table")
    return validate_picker_config(table)
