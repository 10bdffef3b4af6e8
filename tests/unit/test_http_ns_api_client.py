from __future__ import annotations

import asyncio

import httpx
import pytest

from src.adapters.ns.http_ns_api_client import HttpNsApiClient, build_query
from src.domain.exceptions import UpstreamError, UpstreamNotFound


def _client(handler) -> HttpNsApiClient:
    return HttpNsApiClient(
        api_key="secret",
        reisinfo_base_url="https://ns.test/reisinformatie-api/api",
        disruptions_base_url="https://ns.test/disruptions",
        virtual_train_base_url="https://ns.test/virtual-train-api",
        spoorkaart_base_url="https://ns.test/Spoorkaart-API/api/v1",
        transport=httpx.MockTransport(handler),
    )


def test_build_query_repeats_lists_and_drops_empty_values() -> None:
    query = build_query(
        {"fromStation": "UT", "viaStation": ["GVC", "", "ASD"], "dateTime": None, "lang": ""}
    )
    assert query == [("fromStation", "UT"), ("viaStation", "GVC"), ("viaStation", "ASD")]


def test_requests_carry_subscription_key_and_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"payload": {"departures": []}})

    out = asyncio.run(_client(handler).departures(station="UT", max_journeys="5", lang="en"))

    assert out == {"payload": {"departures": []}}
    (req,) = seen
    assert req.headers["Ocp-Apim-Subscription-Key"] == "secret"
    assert req.url.path == "/reisinformatie-api/api/v2/departures"
    assert dict(req.url.params) == {"station": "UT", "maxJourneys": "5", "lang": "en"}


def test_trips_sends_multiple_via_stations() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"trips": []})

    asyncio.run(
        _client(handler).trips(
            from_station="UT",
            to_station="ASD",
            via_stations=("GVC", "RTD"),
            search_for_arrival=True,
            add_change_time=5,
        )
    )

    params = seen[0].url.params
    assert params.get_list("viaStation") == ["GVC", "RTD"]
    assert params["searchForArrival"] == "true"
    assert params["addChangeTime"] == "5"
    assert "dateTime" not in params


def test_error_status_raises_upstream_error_with_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(_client(handler).stations())

    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "NS API error: 500 - boom"


def test_not_found_raises_upstream_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="")

    with pytest.raises(UpstreamNotFound):
        asyncio.run(_client(handler).crowding(ride_number="123"))


def test_ride_number_for_material_returns_trimmed_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/virtual-train-api/v1/ritnummer/2601"
        return httpx.Response(200, text=" 3531\n")

    assert asyncio.run(_client(handler).ride_number_for_material(material="2601")) == "3531"


@pytest.mark.parametrize(
    ("call", "path"),
    [
        (lambda c: c.vehicles(), "/virtual-train-api/api/vehicle"),
        (lambda c: c.track_map(), "/Spoorkaart-API/api/v1/spoorkaart"),
        (lambda c: c.disruptions(is_active="true"), "/disruptions/v3"),
        (lambda c: c.station_disruptions(station_code="UT"), "/disruptions/v3/station/UT"),
        (
            lambda c: c.disruption(disruption_type="calamity", disruption_id="42"),
            "/disruptions/v3/calamity/42",
        ),
        (lambda c: c.composition(ride_number="3531"), "/virtual-train-api/v1/trein/3531"),
    ],
)
def test_endpoints_hit_expected_paths(call, path: str) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={})

    asyncio.run(call(_client(handler)))
    assert seen == [path]


def test_env_overrides_are_applied(monkeypatch) -> None:
    monkeypatch.setenv("NS_API_KEY", "from-env")
    monkeypatch.setenv("NS_TIMEOUT_S", "3.5")
    monkeypatch.setenv("NS_REISINFO_BASE_URL", "https://proxy.test/api")

    client = HttpNsApiClient()

    assert client.api_key == "from-env"
    assert client.timeout_s == 3.5
    assert client.reisinfo_base_url == "https://proxy.test/api"


@pytest.mark.parametrize(
    "error", [httpx.ConnectError("connection refused"), httpx.ReadTimeout("timed out")]
)
def test_transport_failures_raise_upstream_error(error: httpx.RequestError) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(_client(handler).journey(train="3531"))

    assert not isinstance(excinfo.value, UpstreamNotFound)
    assert excinfo.value.status_code == 0
    assert str(excinfo.value).startswith("NS API unreachable:")
