from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ITravelInfoProvider(ABC):
    """Port for the NS travel information API (departures, trips, journeys)."""

    @abstractmethod
    async def departures(
        self, *, station: str, max_journeys: str, lang: str
    ) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def arrivals(
        self,
        *,
        station: str | None,
        uic_code: str | None,
        date_time: str | None,
        max_journeys: str,
        lang: str,
    ) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def trips(
        self,
        *,
        from_station: str,
        to_station: str,
        via_stations: tuple[str, ...] = (),
        date_time: str | None = None,
        search_for_arrival: bool = False,
        lang: str = "nl",
        add_change_time: int | None = None,
        wheelchair_accessible: str | None = None,
    ) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def journey(
        self,
        *,
        journey_id: str | None = None,
        train: str | None = None,
        date_time: str | None = None,
    ) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def stations(self) -> dict[str, Any]:
        raise NotImplementedError
