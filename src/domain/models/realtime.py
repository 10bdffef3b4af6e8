from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.models.geo import GeoPoint


@dataclass(frozen=True, slots=True)
class TrainTelemetry:
    """One GPS sample from the virtual-train vehicle feed."""

    train_number: int
    ride_id: str
    lat: float
    lon: float
    speed_kmh: float = 0.0
    heading: float = 0.0
    accuracy_m: float | None = None
    train_type: str | None = None
    source: str | None = None
    material_types: tuple[str, ...] = field(default_factory=tuple)

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lon=self.lon)
