from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import ITrackGeometryProvider
from src.app.services.ns_payloads import parse_track_sections
from src.app.services.ttl_cache import TtlCache
from src.domain.algorithms.geo_utils import (
    heading_difference_deg,
    planar_bearing_deg,
    planar_distance,
)
from src.domain.algorithms.route_projection import project_onto_route
from src.domain.models import GeoPoint, Route, TrackSection

logger = logging.getLogger(__name__)

TRACK_GEOMETRY_CACHE_TTL_S = 24 * 3600.0


@dataclass(slots=True)
class TrackGeometryService:
    """Finds the rail track a train is running on.

    The track map is fetched once per cache TTL. Lookups return the whole
    section polyline, oriented so that it runs in the train's direction of
    travel.
    """

    provider: ITrackGeometryProvider
    max_distance_deg: float = 0.01
    cache: TtlCache[tuple[TrackSection, ...]] = field(
        default_factory=lambda: TtlCache(ttl_s=TRACK_GEOMETRY_CACHE_TTL_S)
    )

    async def _load(self) -> tuple[TrackSection, ...]:
        sections = parse_track_sections(await self.provider.track_map())
        logger.info("Loaded %d track sections", len(sections))
        return sections

    async def sections(self) -> tuple[TrackSection, ...]:
        return await self.cache.get_or_refresh(self._load)

    async def nearest_route(self, position: GeoPoint, heading: float) -> Route | None:
        return nearest_route(
            await self.sections(),
            position,
            heading,
            max_distance_deg=self.max_distance_deg,
        )


def _near_bbox(points: Route, position: GeoPoint, margin: float) -> bool:
    lats = [p.lat for p in points]
    lons = [p.lon for p in points]
    return (
        min(lats) - margin <= position.lat <= max(lats) + margin
        and min(lons) - margin <= position.lon <= max(lons) + margin
    )


def nearest_route(
    sections: tuple[TrackSection, ...],
    position: GeoPoint,
    heading: float,
    *,
    max_distance_deg: float,
) -> Route | None:
    best_points: Route | None = None
    best_segment = 0
    best_d = float("inf")

    for section in sections:
        if not _near_bbox(section.points, position, max_distance_deg):
            continue
        projected = project_onto_route(position, section.points)
        d = planar_distance(position, projected.position)
        if d < best_d:
            best_d = d
            best_points = section.points
            best_segment = projected.segment_index

    if best_points is None or best_d > max_distance_deg:
        return None

    a = best_points[best_segment]
    b = best_points[best_segment + 1]
    if heading_difference_deg(planar_bearing_deg(a, b), heading) > 90.0:
        return tuple(reversed(best_points))
    return best_points
