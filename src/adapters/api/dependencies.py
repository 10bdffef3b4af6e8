from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.ns.http_ns_api_client import HttpNsApiClient
from src.adapters.tracks.s3_cached_track_geometry_provider import (
    S3CachedTrackGeometryProvider,
)
from src.app.ports.output import ITrackGeometryProvider
from src.app.services.disruptions_service import DisruptionsService
from src.app.services.live_map_service import LiveMapService
from src.app.services.station_lookup_service import StationLookupService
from src.app.services.track_geometry_service import TrackGeometryService
from src.app.services.train_info_service import TrainInfoService
from src.app.services.travel_info_service import TravelInfoService
from src.app.services.ttl_cache import TtlCache

# Services below hold in-process caches; lru_cache keeps one instance per
# process so every request shares them.


@lru_cache(maxsize=1)
def get_ns_client() -> HttpNsApiClient:
    return HttpNsApiClient()


@lru_cache(maxsize=1)
def get_station_lookup_service() -> StationLookupService:
    service = StationLookupService(travel_info=get_ns_client())
    if os.getenv("STATIONS_CACHE_TTL_S"):
        service.cache = TtlCache(ttl_s=float(os.environ["STATIONS_CACHE_TTL_S"]))
    return service


def get_travel_info_service() -> TravelInfoService:
    return TravelInfoService(
        travel_info=get_ns_client(), stations=get_station_lookup_service()
    )


def get_disruptions_service() -> DisruptionsService:
    return DisruptionsService(
        disruptions=get_ns_client(), stations=get_station_lookup_service()
    )


def get_train_info_service() -> TrainInfoService:
    client = get_ns_client()
    return TrainInfoService(virtual_train=client, travel_info=client)


@lru_cache(maxsize=1)
def get_track_geometry_service() -> TrackGeometryService:
    provider: ITrackGeometryProvider = get_ns_client()
    if os.getenv("TRACK_GEOMETRY_BUCKET"):
        provider = S3CachedTrackGeometryProvider(upstream=provider)

    service = TrackGeometryService(provider=provider)

    # Allow tuning via env without changing code.
    if os.getenv("TRACK_GEOMETRY_CACHE_TTL_S"):
        service.cache = TtlCache(ttl_s=float(os.environ["TRACK_GEOMETRY_CACHE_TTL_S"]))
    if os.getenv("TRACK_MAX_DISTANCE_DEG"):
        service.max_distance_deg = float(os.environ["TRACK_MAX_DISTANCE_DEG"])
    return service


@lru_cache(maxsize=1)
def get_live_map_service() -> LiveMapService:
    service = LiveMapService(
        virtual_train=get_ns_client(), tracks=get_track_geometry_service()
    )
    if os.getenv("TRAINS_MAP_CACHE_TTL_S"):
        service.cache = TtlCache(ttl_s=float(os.environ["TRAINS_MAP_CACHE_TTL_S"]))
    return service
