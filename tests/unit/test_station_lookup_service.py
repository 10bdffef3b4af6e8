from __future__ import annotations

import asyncio

import pytest

from src.app.services.station_lookup_service import StationLookupService
from src.app.services.ttl_cache import TtlCache
from src.domain.exceptions import StationLookupUnavailable, StationNotFound
from tests.unit.fakes import FakeNsApi


@pytest.mark.parametrize(
    "query",
    ["UT", "ut", "Utrecht Centraal", "utrecht c.", "Utrecht C", "  Utrecht Centraal  "],
)
def test_resolve_code_matches_code_and_every_name(query: str) -> None:
    svc = StationLookupService(travel_info=FakeNsApi())
    assert asyncio.run(svc.resolve_code(query)) == "UT"


@pytest.mark.parametrize("query", [None, "", "   "])
def test_resolve_code_returns_none_for_blank_input(query) -> None:
    api = FakeNsApi()
    svc = StationLookupService(travel_info=api)

    assert asyncio.run(svc.resolve_code(query)) is None
    assert api.calls_to("stations") == []


def test_unknown_station_resolves_to_none() -> None:
    svc = StationLookupService(travel_info=FakeNsApi())
    assert asyncio.run(svc.resolve_code("Atlantis")) is None


def test_require_code_raises_with_role_in_message() -> None:
    svc = StationLookupService(travel_info=FakeNsApi())

    with pytest.raises(StationNotFound, match="Via station not found: Atlantis"):
        asyncio.run(svc.require_code("Atlantis", role="Via"))


def test_station_list_is_fetched_once_per_ttl() -> None:
    api = FakeNsApi()
    svc = StationLookupService(travel_info=api, cache=TtlCache(ttl_s=3600.0))

    async def run() -> None:
        await svc.resolve_code("UT")
        await svc.resolve_code("ASD")
        await svc.resolve_code("GVC")

    asyncio.run(run())
    assert len(api.calls_to("stations")) == 1


def test_failed_station_fetch_is_reported_as_unavailable() -> None:
    svc = StationLookupService(travel_info=FakeNsApi(fail_stations=True))

    with pytest.raises(StationLookupUnavailable):
        asyncio.run(svc.resolve_code("UT"))
