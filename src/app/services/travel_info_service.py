from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.app.ports.output import ITravelInfoProvider
from src.app.services.station_lookup_service import StationLookupService
from src.domain.exceptions import InvalidRequest


def _positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass(slots=True)
class TravelInfoService:
    """Departure boards, journey planning and journey details."""

    travel_info: ITravelInfoProvider
    stations: StationLookupService

    async def departures(
        self, *, station: str | None, max_journeys: str = "10", lang: str = "nl"
    ) -> dict[str, Any]:
        if not station:
            raise InvalidRequest("Station parameter is required")
        code = await self.stations.require_code(station)
        return await self.travel_info.departures(
            station=code, max_journeys=max_journeys, lang=lang
        )

    async def arrivals(
        self,
        *,
        station: str | None = None,
        uic_code: str | None = None,
        date_time: str | None = None,
        max_journeys: str = "10",
        lang: str = "nl",
    ) -> dict[str, Any]:
        if not station and not uic_code:
            raise InvalidRequest("Station or uicCode parameter is required")

        code = await self.stations.require_code(station) if station else None
        return await self.travel_info.arrivals(
            station=code,
            uic_code=uic_code or None,
            date_time=date_time or None,
            max_journeys=max_journeys,
            lang=lang,
        )

    async def trips(
        self,
        *,
        from_station: str | None,
        to_station: str | None,
        via_stations: list[str] | None = None,
        date_time: str | None = None,
        search_for_arrival: str | None = None,
        lang: str = "nl",
        add_change_time: str | None = None,
        wheelchair_accessible: str | None = None,
    ) -> dict[str, Any]:
        if not from_station or not to_station:
            raise InvalidRequest("fromStation and toStation parameters are required")

        from_code = await self.stations.require_code(from_station, role="From")
        to_code = await self.stations.require_code(to_station, role="To")

        via_codes: list[str] = []
        for via in via_stations or []:
            if not via:
                continue
            via_codes.append(await self.stations.require_code(via, role="Via"))

        return await self.travel_info.trips(
            from_station=from_code,
            to_station=to_code,
            via_stations=tuple(via_codes),
            date_time=date_time or None,
            search_for_arrival=search_for_arrival == "true",
            lang=lang,
            add_change_time=_positive_int(add_change_time),
            wheelchair_accessible=wheelchair_accessible or None,
        )

    async def journey(
        self,
        *,
        journey_id: str | None = None,
        train: str | None = None,
        date_time: str | None = None,
    ) -> dict[str, Any]:
        if not journey_id and not train:
            raise InvalidRequest("Either id or train parameter is required")
        return await self.travel_info.journey(
            journey_id=journey_id or None,
            train=train or None,
            date_time=date_time or None,
        )

    async def stations_raw(self) -> dict[str, Any]:
        return await self.travel_info.stations()
