from __future__ import annotations

import math
from dataclasses import dataclass, field

from src.domain.algorithms.geo_utils import km_to_degrees, lerp
from src.domain.algorithms.route_projection import (
    advance_along_route,
    project_onto_route,
)
from src.domain.models import AnimationMode, GeoPoint, Route, VehicleState


@dataclass(frozen=True, slots=True)
class _PendingTelemetry:
    position: GeoPoint
    speed_kmh: float
    heading: float
    route: Route | None
    received_at: float | None


@dataclass(slots=True)
class TrainAnimator:
    """Dead-reckons one train marker between GPS samples.

    The host calls `tick(now)` once per frame and draws the returned
    position. Telemetry arrives on a much slower cadence through
    `update_telemetry`; only the latest sample is kept and it is merged at the
    start of the next tick.

    Modes:
      - COASTING: speed below `speed_threshold_kmh`; blend a fixed fraction
        of the way toward the last raw GPS fix every tick.
      - TRACKING: moving with a known route; advance along the polyline.
      - FREE: moving without a route; displace along the heading.

    Stale telemetry is not detected: without new samples the marker keeps
    moving on the last known speed and heading.
    """

    state: VehicleState
    speed_threshold_kmh: float = 5.0
    blend_factor: float = 0.1
    _pending: _PendingTelemetry | None = field(default=None, init=False, repr=False)

    @classmethod
    def start(
        cls,
        *,
        position: GeoPoint,
        speed_kmh: float = 0.0,
        heading: float = 0.0,
        route: Route | None = None,
        received_at: float | None = None,
        **options: float,
    ) -> "TrainAnimator":
        state = VehicleState(
            position=position,
            telemetry_position=position,
            speed_kmh=speed_kmh,
            heading=heading,
            telemetry_at=received_at,
        )
        animator = cls(state=state, **options)
        if route:
            animator._adopt_route(route)
        animator.state.mode = animator._select_mode()
        return animator

    def update_telemetry(
        self,
        *,
        position: GeoPoint,
        speed_kmh: float,
        heading: float,
        route: Route | None = None,
        received_at: float | None = None,
    ) -> None:
        """Record a new sample; the latest one wins."""

        self._pending = _PendingTelemetry(
            position=position,
            speed_kmh=speed_kmh,
            heading=heading,
            route=route,
            received_at=received_at,
        )

    def telemetry_age_s(self, now: float) -> float | None:
        if self.state.telemetry_at is None:
            return None
        return max(0.0, now - self.state.telemetry_at)

    def tick(self, now: float) -> GeoPoint:
        """Advance the animation to `now` (seconds, monotonic clock)."""

        self._merge_pending()

        state = self.state
        elapsed_s = 0.0
        if state.last_frame_at is not None:
            elapsed_s = max(0.0, now - state.last_frame_at)
        state.last_frame_at = now

        previous_mode = state.mode
        state.mode = self._select_mode()
        if (
            state.mode is AnimationMode.TRACKING
            and previous_mode is not AnimationMode.TRACKING
        ):
            # The marker may have drifted off the route while coasting.
            self._adopt_route(state.route)

        if state.mode is AnimationMode.COASTING:
            state.position = lerp(
                state.position, state.telemetry_position, self.blend_factor
            )
            return state.position

        distance_km = state.speed_kmh * elapsed_s / 3600.0
        distance_deg = km_to_degrees(distance_km, state.position.lat)

        if state.mode is AnimationMode.TRACKING:
            moved = advance_along_route(
                state.position,
                state.route,
                distance_deg,
                state.segment_index,
                state.progress,
            )
            state.position = moved.position
            state.segment_index = moved.segment_index
            state.progress = moved.progress
            return state.position

        heading = math.radians(state.heading)
        lat = state.position.lat + distance_deg * math.cos(heading)
        lon = state.position.lon + distance_deg * math.sin(heading)
        state.position = GeoPoint(
            lat=max(-90.0, min(90.0, lat)), lon=((lon + 180.0) % 360.0) - 180.0
        )
        return state.position

    def _merge_pending(self) -> None:
        pending = self._pending
        if pending is None:
            return
        self._pending = None

        state = self.state
        state.telemetry_position = pending.position
        state.speed_kmh = pending.speed_kmh
        state.heading = pending.heading
        if pending.received_at is not None:
            state.telemetry_at = pending.received_at
        if pending.route is not None:
            self._adopt_route(pending.route)

    def _adopt_route(self, route: Route) -> None:
        state = self.state
        state.route = tuple(route)
        projected = project_onto_route(state.position, state.route)
        state.segment_index = projected.segment_index
        state.progress = projected.progress
        if len(state.route) >= 2:
            state.position = projected.position

    def _select_mode(self) -> AnimationMode:
        if self.state.speed_kmh < self.speed_threshold_kmh:
            return AnimationMode.COASTING
        if len(self.state.route) >= 2:
            return AnimationMode.TRACKING
        return AnimationMode.FREE
