from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_live_map_service, get_train_info_service
from src.adapters.api.schemas.errors import ERROR_RESPONSES
from src.adapters.api.schemas.live_map import (
    AnimatedTrainSchema,
    AnimatedTrainsResponseSchema,
    GeoPointSchema,
)
from src.app.services.live_map_service import LiveMapService
from src.app.services.train_info_service import TrainInfoService

router = APIRouter(prefix="/api", tags=["trains"], responses=ERROR_RESPONSES)


@router.get("/journey-by-material")
async def journey_by_material(
    material: str | None = None,
    service: TrainInfoService = Depends(get_train_info_service),
) -> Any:
    return await service.journey_by_material(material=material)


@router.get("/train-composition/{ride_number}")
async def train_composition(
    ride_number: str,
    features: str | None = None,
    date_time: str | None = Query(default=None, alias="dateTime"),
    service: TrainInfoService = Depends(get_train_info_service),
) -> Any:
    return await service.composition(
        ride_number=ride_number, features=features, date_time=date_time
    )


@router.get("/train-crowding/{ride_number}")
async def train_crowding(
    ride_number: str,
    service: TrainInfoService = Depends(get_train_info_service),
) -> Any:
    return await service.crowding(ride_number=ride_number)


@router.get("/trains-map")
async def trains_map(
    service: LiveMapService = Depends(get_live_map_service),
) -> Any:
    return await service.trains_map()


@router.get("/trains-map/animated", response_model=AnimatedTrainsResponseSchema)
async def trains_map_animated(
    service: LiveMapService = Depends(get_live_map_service),
) -> AnimatedTrainsResponseSchema:
    frame = await service.animated_frame()

    return AnimatedTrainsResponseSchema(
        generated_at=datetime.now(timezone.utc),
        trains=[
            AnimatedTrainSchema(
                ride_id=t.telemetry.ride_id,
                train_number=t.telemetry.train_number,
                train_type=t.telemetry.train_type,
                material_types=list(t.telemetry.material_types),
                position=GeoPointSchema(lat=t.position.lat, lon=t.position.lon),
                gps_position=GeoPointSchema(
                    lat=t.telemetry.lat, lon=t.telemetry.lon
                ),
                speed_kmh=t.telemetry.speed_kmh,
                heading=t.telemetry.heading,
                mode=t.mode.value,
                telemetry_age_s=t.telemetry_age_s,
            )
            for t in frame
        ],
    )
