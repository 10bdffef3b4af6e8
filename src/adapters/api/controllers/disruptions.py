from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_disruptions_service
from src.adapters.api.schemas.errors import ERROR_RESPONSES
from src.app.services.disruptions_service import DisruptionsService

router = APIRouter(
    prefix="/api/disruptions", tags=["disruptions"], responses=ERROR_RESPONSES
)


@router.get("")
async def list_disruptions(
    is_active: str | None = Query(default=None, alias="isActive"),
    disruption_type: str | None = Query(default=None, alias="type"),
    service: DisruptionsService = Depends(get_disruptions_service),
) -> Any:
    return await service.list_disruptions(
        is_active=is_active, disruption_type=disruption_type
    )


@router.get("/station/{station_code}")
async def station_disruptions(
    station_code: str,
    service: DisruptionsService = Depends(get_disruptions_service),
) -> Any:
    return await service.for_station(station=station_code)


@router.get("/{disruption_type}/{disruption_id}")
async def disruption_detail(
    disruption_type: str,
    disruption_id: str,
    service: DisruptionsService = Depends(get_disruptions_service),
) -> Any:
    return await service.detail(
        disruption_type=disruption_type, disruption_id=disruption_id
    )
