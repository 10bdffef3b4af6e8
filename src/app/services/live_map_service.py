from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from src.app.ports.output import IVirtualTrainProvider
from src.app.services.ns_payloads import parse_vehicles
from src.app.services.track_geometry_service import TrackGeometryService
from src.app.services.ttl_cache import TtlCache
from src.domain.algorithms.train_animator import TrainAnimator
from src.domain.exceptions import RailCompanionError
from src.domain.models import AnimationMode, GeoPoint, TrainTelemetry

logger = logging.getLogger(__name__)

TRAINS_MAP_CACHE_TTL_S = 15.0


@dataclass(frozen=True, slots=True)
class AnimatedTrain:
    telemetry: TrainTelemetry
    position: GeoPoint
    mode: AnimationMode
    telemetry_age_s: float | None


@dataclass(slots=True)
class LiveMapService:
    """Serves the live train map.

    Keeps one `TrainAnimator` per ride id. Each telemetry refresh creates
    animators for trains that appeared, drops those of trains that vanished
    and pushes the new sample (plus the nearest track) into the rest.
    """

    virtual_train: IVirtualTrainProvider
    tracks: TrackGeometryService | None = None
    cache: TtlCache[dict[str, Any]] = field(
        default_factory=lambda: TtlCache(ttl_s=TRAINS_MAP_CACHE_TTL_S)
    )
    clock: Callable[[], float] = time.monotonic

    animators: dict[str, TrainAnimator] = field(default_factory=dict)
    _telemetry: dict[str, TrainTelemetry] = field(default_factory=dict, init=False)
    _last_feed: dict[str, Any] | None = field(default=None, init=False, repr=False)

    async def trains_map(self) -> dict[str, Any]:
        """Raw vehicle feed, cached for a few seconds."""

        return await self.cache.get_or_refresh(self.virtual_train.vehicles)

    async def refresh(self) -> None:
        feed = await self.trains_map()
        if feed is self._last_feed:
            return

        now = self.clock()
        samples = {t.ride_id: t for t in parse_vehicles(feed)}

        for ride_id in list(self.animators):
            if ride_id not in samples:
                del self.animators[ride_id]
                self._telemetry.pop(ride_id, None)

        use_tracks = self.tracks is not None
        for ride_id, sample in samples.items():
            route = None
            if use_tracks:
                try:
                    route = await self.tracks.nearest_route(
                        sample.position, sample.heading
                    )
                except RailCompanionError as exc:
                    # Moving trains fall back to FREE mode; retried on the next feed.
                    logger.warning("Track geometry unavailable: %s", exc)
                    use_tracks = False

            animator = self.animators.get(ride_id)
            if animator is None:
                self.animators[ride_id] = TrainAnimator.start(
                    position=sample.position,
                    speed_kmh=sample.speed_kmh,
                    heading=sample.heading,
                    route=route,
                    received_at=now,
                )
            else:
                animator.update_telemetry(
                    position=sample.position,
                    speed_kmh=sample.speed_kmh,
                    heading=sample.heading,
                    route=route if route is not None else (),
                    received_at=now,
                )
            self._telemetry[ride_id] = sample

        self._last_feed = feed
        logger.debug("Live map refreshed: %d trains", len(self.animators))

    def frame(self, now: float | None = None) -> list[AnimatedTrain]:
        """Tick every animator and return the positions to draw."""

        if now is None:
            now = self.clock()

        out: list[AnimatedTrain] = []
        for ride_id, animator in self.animators.items():
            position = animator.tick(now)
            out.append(
                AnimatedTrain(
                    telemetry=self._telemetry[ride_id],
                    position=position,
                    mode=animator.state.mode,
                    telemetry_age_s=animator.telemetry_age_s(now),
                )
            )
        return out

    async def animated_frame(self) -> list[AnimatedTrain]:
        await self.refresh()
        return self.frame()
