from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import httpx

from src.app.ports.output import (
    IDisruptionsProvider,
    ITrackGeometryProvider,
    ITravelInfoProvider,
    IVirtualTrainProvider,
)
from src.domain.exceptions import UpstreamError, UpstreamNotFound

logger = logging.getLogger(__name__)

ParamValue = str | Sequence[str] | None

DEFAULT_REISINFO_BASE_URL = "https://gateway.apiportal.ns.nl/reisinformatie-api/api"
DEFAULT_DISRUPTIONS_BASE_URL = "https://gateway.apiportal.ns.nl/disruptions"
DEFAULT_VIRTUAL_TRAIN_BASE_URL = "https://gateway.apiportal.ns.nl/virtual-train-api"
DEFAULT_SPOORKAART_BASE_URL = "https://gateway.apiportal.ns.nl/Spoorkaart-API/api/v1"


def build_query(params: Mapping[str, ParamValue]) -> list[tuple[str, str]]:
    """Flatten params; lists repeat the key, empty values are dropped."""

    out: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, str):
            if value:
                out.append((key, value))
            continue
        for item in value:
            if item:
                out.append((key, item))
    return out


@dataclass(slots=True)
class HttpNsApiClient(
    ITravelInfoProvider,
    IDisruptionsProvider,
    IVirtualTrainProvider,
    ITrackGeometryProvider,
):
    """Calls the NS public APIs over HTTP.

    Env vars:
      - NS_API_KEY: subscription key, sent as Ocp-Apim-Subscription-Key
      - NS_TIMEOUT_S: request timeout (default 10)
      - NS_REISINFO_BASE_URL, NS_DISRUPTIONS_BASE_URL,
        NS_VIRTUAL_TRAIN_BASE_URL, NS_SPOORKAART_BASE_URL: base URL overrides
    """

    api_key: str | None = None
    timeout_s: float = 10.0
    reisinfo_base_url: str | None = None
    disruptions_base_url: str | None = None
    virtual_train_base_url: str | None = None
    spoorkaart_base_url: str | None = None
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.api_key is None:
            self.api_key = os.getenv("NS_API_KEY", "")
        if os.getenv("NS_TIMEOUT_S"):
            self.timeout_s = float(os.environ["NS_TIMEOUT_S"])
        if self.reisinfo_base_url is None:
            self.reisinfo_base_url = os.getenv(
                "NS_REISINFO_BASE_URL", DEFAULT_REISINFO_BASE_URL
            )
        if self.disruptions_base_url is None:
            self.disruptions_base_url = os.getenv(
                "NS_DISRUPTIONS_BASE_URL", DEFAULT_DISRUPTIONS_BASE_URL
            )
        if self.virtual_train_base_url is None:
            self.virtual_train_base_url = os.getenv(
                "NS_VIRTUAL_TRAIN_BASE_URL", DEFAULT_VIRTUAL_TRAIN_BASE_URL
            )
        if self.spoorkaart_base_url is None:
            self.spoorkaart_base_url = os.getenv(
                "NS_SPOORKAART_BASE_URL", DEFAULT_SPOORKAART_BASE_URL
            )

    def _headers(self) -> dict[str, str]:
        return {"Ocp-Apim-Subscription-Key": self.api_key or ""}

    async def _get(
        self,
        api: str,
        url: str,
        params: Mapping[str, ParamValue] | None = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout_s, transport=self.transport
        ) as client:
            try:
                resp = await client.get(
                    url, params=build_query(params or {}), headers=self._headers()
                )
            except httpx.RequestError as exc:
                logger.error("%s request to %s failed: %s", api, url, exc)
                raise UpstreamError(
                    api, 0, str(exc), message=f"{api} unreachable: {exc}"
                ) from exc

        if resp.status_code == 404:
            raise UpstreamNotFound(api, resp.status_code, resp.text)
        if resp.is_error:
            logger.error("%s returned %s for %s", api, resp.status_code, url)
            raise UpstreamError(api, resp.status_code, resp.text)
        return resp

    async def _reisinfo(
        self, endpoint: str, params: Mapping[str, ParamValue] | None = None
    ) -> Any:
        resp = await self._get("NS API", f"{self.reisinfo_base_url}{endpoint}", params)
        return resp.json()

    async def _disruptions(
        self, endpoint: str, params: Mapping[str, ParamValue] | None = None
    ) -> Any:
        resp = await self._get(
            "NS Disruptions API", f"{self.disruptions_base_url}{endpoint}", params
        )
        return resp.json()

    async def _virtual_train(
        self, endpoint: str, params: Mapping[str, ParamValue] | None = None
    ) -> httpx.Response:
        return await self._get(
            "Virtual Train API", f"{self.virtual_train_base_url}{endpoint}", params
        )

    # Travel information

    async def departures(
        self, *, station: str, max_journeys: str, lang: str
    ) -> dict[str, Any]:
        return await self._reisinfo(
            "/v2/departures",
            {"station": station, "maxJourneys": max_journeys, "lang": lang},
        )

    async def arrivals(
        self,
        *,
        station: str | None,
        uic_code: str | None,
        date_time: str | None,
        max_journeys: str,
        lang: str,
    ) -> dict[str, Any]:
        return await self._reisinfo(
            "/v2/arrivals",
            {
                "maxJourneys": max_journeys,
                "lang": lang,
                "station": station,
                "uicCode": uic_code,
                "dateTime": date_time,
            },
        )

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
        return await self._reisinfo(
            "/v3/trips",
            {
                "fromStation": from_station,
                "toStation": to_station,
                "lang": lang,
                "dateTime": date_time,
                "searchForArrival": "true" if search_for_arrival else None,
                "viaStation": list(via_stations),
                "addChangeTime": str(add_change_time) if add_change_time else None,
                "wheelChairAccessible": wheelchair_accessible,
            },
        )

    async def journey(
        self,
        *,
        journey_id: str | None = None,
        train: str | None = None,
        date_time: str | None = None,
    ) -> dict[str, Any]:
        return await self._reisinfo(
            "/v2/journey", {"id": journey_id, "train": train, "dateTime": date_time}
        )

    async def stations(self) -> dict[str, Any]:
        return await self._reisinfo("/v2/stations")

    # Disruptions

    async def disruptions(
        self, *, is_active: str | None = None, disruption_type: str | None = None
    ) -> Any:
        return await self._disruptions(
            "/v3", {"isActive": is_active, "type": disruption_type}
        )

    async def station_disruptions(self, *, station_code: str) -> Any:
        return await self._disruptions(f"/v3/station/{station_code}")

    async def disruption(self, *, disruption_type: str, disruption_id: str) -> Any:
        return await self._disruptions(f"/v3/{disruption_type}/{disruption_id}")

    # Virtual train

    async def ride_number_for_material(self, *, material: str) -> str:
        resp = await self._virtual_train(f"/v1/ritnummer/{material}")
        return resp.text.strip()

    async def composition(
        self,
        *,
        ride_number: str,
        features: str | None = None,
        date_time: str | None = None,
    ) -> Any:
        resp = await self._virtual_train(
            f"/v1/trein/{ride_number}",
            {"features": features, "dateTime": date_time},
        )
        return resp.json()

    async def crowding(self, *, ride_number: str) -> Any:
        resp = await self._virtual_train(f"/v1/prognose/{ride_number}")
        return resp.json()

    async def vehicles(self) -> dict[str, Any]:
        resp = await self._virtual_train("/api/vehicle")
        return resp.json()

    # Track map

    async def track_map(self) -> dict[str, Any]:
        resp = await self._get("Spoorkaart API", f"{self.spoorkaart_base_url}/spoorkaart")
        return resp.json()
