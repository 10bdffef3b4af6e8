from __future__ import annotations

import math

from src.domain.models import GeoPoint

KM_PER_DEGREE_LAT = 111.32


def planar_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Euclidean distance in degree units, lat/lon treated as y/x."""

    return math.hypot(b.lon - a.lon, b.lat - a.lat)


def lerp(a: GeoPoint, b: GeoPoint, t: float) -> GeoPoint:
    return GeoPoint(lat=a.lat + (b.lat - a.lat) * t, lon=a.lon + (b.lon - a.lon) * t)


def planar_bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Compass bearing from a to b in the planar approximation (0 = north)."""

    return math.degrees(math.atan2(b.lon - a.lon, b.lat - a.lat)) % 360.0


def heading_difference_deg(a: float, b: float) -> float:
    """Smallest absolute angle between two headings, in [0, 180]."""

    diff = abs(a - b) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def km_to_degrees(distance_km: float, lat: float) -> float:
    """Convert kilometers to planar degree units at a given latitude.

    Uses the mean of the meridional and zonal degree lengths so one factor
    serves movement in any direction.
    """

    km_per_degree = KM_PER_DEGREE_LAT * (1.0 + math.cos(math.radians(lat))) / 2.0
    return distance_km / km_per_degree
