from __future__ import annotations

from dataclasses import dataclass

from src.domain.models.geo import GeoPoint, Route


@dataclass(frozen=True, slots=True)
class RoutePosition:
    """A point on a route, addressed by segment and fractional progress."""

    position: GeoPoint
    segment_index: int
    progress: float


@dataclass(frozen=True, slots=True)
class TrackSection:
    """A stretch of rail between two stations from the track map."""

    from_station: str | None
    to_station: str | None
    points: Route
