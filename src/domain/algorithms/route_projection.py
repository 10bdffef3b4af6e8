from __future__ import annotations

from itertools import pairwise

from src.domain.algorithms.geo_utils import lerp, planar_distance
from src.domain.models import GeoPoint, Route, RoutePosition


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def project_onto_route(position: GeoPoint, route: Route) -> RoutePosition:
    """Find the point on the route polyline closest to `position`.

    Routes with fewer than two points have no segments; the query position
    comes back as-is on segment 0 with progress 0.
    """

    if len(route) < 2:
        return RoutePosition(position=position, segment_index=0, progress=0.0)

    best = RoutePosition(position=route[0], segment_index=0, progress=0.0)
    best_d = float("inf")

    for i, (a, b) in enumerate(pairwise(route)):
        dx = b.lon - a.lon
        dy = b.lat - a.lat
        len_sq = dx * dx + dy * dy
        if len_sq == 0.0:
            t = 0.0
        else:
            t = _clamp01(((position.lon - a.lon) * dx + (position.lat - a.lat) * dy) / len_sq)

        projected = lerp(a, b, t)
        d = planar_distance(position, projected)
        if d < best_d:
            best_d = d
            best = RoutePosition(position=projected, segment_index=i, progress=t)

    return best


def advance_along_route(
    position: GeoPoint,
    route: Route,
    distance: float,
    segment_index: int,
    progress: float,
) -> RoutePosition:
    """Move `distance` planar units forward along the route.

    Crosses segment boundaries as needed and stops at the last route point.
    """

    if len(route) < 2 or distance <= 0.0:
        return RoutePosition(position=position, segment_index=segment_index, progress=progress)

    last = len(route) - 2
    i = max(0, min(segment_index, last))
    t = _clamp01(progress)
    remaining = float(distance)

    while True:
        a = route[i]
        b = route[i + 1]
        seg_len = planar_distance(a, b)
        left = seg_len * (1.0 - t)

        if remaining < left:
            t = _clamp01(t + remaining / seg_len)
            return RoutePosition(position=lerp(a, b, t), segment_index=i, progress=t)

        remaining -= left
        if i == last:
            return RoutePosition(position=b, segment_index=last, progress=1.0)
        i += 1
        t = 0.0
