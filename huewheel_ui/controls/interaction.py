from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Mapping


PointerPhase = Literal["start", "update", "end", "cancel"]

_PHASES = {"start", "update", "end", "cancel"}


@dataclass(frozen=True)
class PointerEvent:
    """Normalized pointer sample in the same coordinate space as the container origin."""

    phase: PointerPhase
    x: float
    y: float


def parse_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    """Parse a normalized `pointer` event into a typed pointer sample.

    Returns None for other event types, unknown phases and non-finite coordinates.
    `end` and `cancel` may omit coordinates.
    """

    if event_type != "pointer" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _PHASES:
        return None
    try:
        x = float(payload.get("x", 0.0))
        y = float(payload.get("y", 0.0))
    except (TypeError, ValueError):
        return None
    if phase in ("start", "update") and ("x" not in payload or "y" not in payload):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return PointerEvent(phase=phase, x=x, y=y)
