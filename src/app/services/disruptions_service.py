from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.app.ports.output import IDisruptionsProvider
from src.app.services.station_lookup_service import StationLookupService
from src.domain.exceptions import InvalidRequest


@dataclass(slots=True)
class DisruptionsService:
    disruptions: IDisruptionsProvider
    stations: StationLookupService

    async def list_disruptions(
        self, *, is_active: str | None = None, disruption_type: str | None = None
    ) -> Any:
        return await self.disruptions.disruptions(
            is_active=is_active, disruption_type=disruption_type or None
        )

    async def for_station(self, *, station: str) -> Any:
        if not station:
            raise InvalidRequest("Station code is required")
        code = await self.stations.require_code(station)
        return await self.disruptions.station_disruptions(station_code=code)

    async def detail(self, *, disruption_type: str, disruption_id: str) -> Any:
        if not disruption_type or not disruption_id:
            raise InvalidRequest("Type and ID are required")
        return await self.disruptions.disruption(
            disruption_type=disruption_type, disruption_id=disruption_id
        )
