from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import ITravelInfoProvider
from src.app.services.ns_payloads import parse_stations
from src.app.services.ttl_cache import TtlCache
from src.domain.exceptions import StationLookupUnavailable, StationNotFound
from src.domain.models import Station

logger = logging.getLogger(__name__)

STATIONS_CACHE_TTL_S = 3600.0


@dataclass(slots=True)
class StationLookupService:
    """Resolves user-entered station names to NS station codes.

    The station list is fetched once per cache TTL and shared by all callers
    holding this service.
    """

    travel_info: ITravelInfoProvider
    cache: TtlCache[tuple[Station, ...]] = field(
        default_factory=lambda: TtlCache(ttl_s=STATIONS_CACHE_TTL_S)
    )

    async def _load(self) -> tuple[Station, ...]:
        data = await self.travel_info.stations()
        stations = parse_stations(data)
        logger.info("Loaded %d stations for code lookup", len(stations))
        return stations

    async def list_stations(self) -> tuple[Station, ...]:
        try:
            return await self.cache.get_or_refresh(self._load)
        except Exception as exc:
            logger.error("Failed to fetch stations for code lookup: %s", exc)
            raise StationLookupUnavailable("Station lookup service unavailable") from exc

    async def resolve_code(self, query: str | None) -> str | None:
        """Return the station code for a code or name, or None if unknown."""

        if query is None:
            return None
        trimmed = query.strip()
        if not trimmed:
            return None

        for station in await self.list_stations():
            if station.matches(trimmed):
                return station.code

        logger.warning("Station not found: %s", trimmed)
        return None

    async def require_code(self, query: str, *, role: str | None = None) -> str:
        code = await self.resolve_code(query)
        if code is None:
            raise StationNotFound(query, role=role)
        return code
