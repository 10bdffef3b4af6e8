from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_travel_info_service
from src.adapters.api.schemas.errors import ERROR_RESPONSES
from src.app.services.travel_info_service import TravelInfoService

router = APIRouter(prefix="/api", tags=["travel"], responses=ERROR_RESPONSES)


@router.get("/departures")
async def departures(
    station: str | None = None,
    max_journeys: str = Query(default="10", alias="maxJourneys"),
    lang: str = "nl",
    service: TravelInfoService = Depends(get_travel_info_service),
) -> Any:
    return await service.departures(
        station=station, max_journeys=max_journeys, lang=lang
    )


@router.get("/arrivals")
async def arrivals(
    station: str | None = None,
    uic_code: str | None = Query(default=None, alias="uicCode"),
    date_time: str | None = Query(default=None, alias="dateTime"),
    max_journeys: str = Query(default="10", alias="maxJourneys"),
    lang: str = "nl",
    service: TravelInfoService = Depends(get_travel_info_service),
) -> Any:
    return await service.arrivals(
        station=station,
        uic_code=uic_code,
        date_time=date_time,
        max_journeys=max_journeys,
        lang=lang,
    )


@router.get("/trips")
async def trips(
    from_station: str | None = Query(default=None, alias="fromStation"),
    to_station: str | None = Query(default=None, alias="toStation"),
    date_time: str | None = Query(default=None, alias="dateTime"),
    search_for_arrival: str | None = Query(default=None, alias="searchForArrival"),
    via_station: list[str] | None = Query(default=None, alias="viaStation"),
    lang: str = "nl",
    add_change_time: str | None = Query(default=None, alias="addChangeTime"),
    wheelchair_accessible: str | None = Query(
        default=None, alias="wheelChairAccessible"
    ),
    service: TravelInfoService = Depends(get_travel_info_service),
) -> Any:
    return await service.trips(
        from_station=from_station,
        to_station=to_station,
        via_stations=via_station,
        date_time=date_time,
        search_for_arrival=search_for_arrival,
        lang=lang,
        add_change_time=add_change_time,
        wheelchair_accessible=wheelchair_accessible,
    )


@router.get("/journey")
async def journey(
    journey_id: str | None = Query(default=None, alias="id"),
    train: str | None = None,
    date_time: str | None = Query(default=None, alias="dateTime"),
    service: TravelInfoService = Depends(get_travel_info_service),
) -> Any:
    return await service.journey(
        journey_id=journey_id, train=train, date_time=date_time
    )


@router.get("/stations")
async def stations(
    service: TravelInfoService = Depends(get_travel_info_service),
) -> Any:
    return await service.stations_raw()
