from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.domain.models.geo import GeoPoint, Route


class AnimationMode(str, Enum):
    COASTING = "coasting"
    TRACKING = "tracking"
    FREE = "free"


@dataclass(slots=True)
class VehicleState:
    """Mutable animation state for one train marker."""

    position: GeoPoint
    telemetry_position: GeoPoint
    speed_kmh: float = 0.0
    heading: float = 0.0
    segment_index: int = 0
    progress: float = 0.0
    route: Route = field(default_factory=tuple)
    mode: AnimationMode = AnimationMode.COASTING
    last_frame_at: float | None = None
    telemetry_at: float | None = None
