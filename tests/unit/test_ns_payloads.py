from __future__ import annotations

from src.app.services.ns_payloads import (
    parse_stations,
    parse_track_sections,
    parse_vehicles,
)
from src.domain.models import GeoPoint


def test_parse_stations_reads_codes_and_names() -> None:
    data = {
        "payload": [
            {
                "code": "UT",
                "UICCode": "8400621",
                "land": "NL",
                "namen": {"lang": "Utrecht Centraal", "middel": "Utrecht C.", "kort": "Utrecht C"},
            },
            {"namen": {"lang": "No code"}},
        ]
    }

    stations = parse_stations(data)

    assert len(stations) == 1
    ut = stations[0]
    assert ut.code == "UT"
    assert ut.uic_code == "8400621"
    assert ut.matches("utrecht centraal")
    assert ut.matches(" ut ")
    assert not ut.matches("")


def test_parse_vehicles_skips_rows_without_position() -> None:
    data = {
        "payload": {
            "treinen": [
                {
                    "treinNummer": 3531,
                    "ritId": "3531",
                    "lat": 52.09,
                    "lng": 5.11,
                    "snelheid": 97.5,
                    "richting": 181.0,
                    "horizontaleNauwkeurigheid": 3.2,
                    "type": "SPR",
                    "bron": "KV6",
                    "materieel": [{"materieelnummer": 2601, "type": "SLT"}],
                },
                {"treinNummer": 1, "ritId": "1"},
            ]
        }
    }

    vehicles = parse_vehicles(data)

    assert len(vehicles) == 1
    v = vehicles[0]
    assert v.train_number == 3531
    assert v.speed_kmh == 97.5
    assert v.heading == 181.0
    assert v.material_types == ("SLT",)
    assert v.position == GeoPoint(lat=52.09, lon=5.11)


def test_parse_vehicles_tolerates_missing_speed_and_heading() -> None:
    data = {"payload": {"treinen": [{"treinNummer": 7, "ritId": "7", "lat": 52.0, "lng": 5.0}]}}

    (v,) = parse_vehicles(data)

    assert v.speed_kmh == 0.0
    assert v.heading == 0.0
    assert v.accuracy_m is None


def test_parse_track_sections_swaps_geojson_coordinate_order() -> None:
    data = {
        "payload": {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "properties": {"from": "ut", "to": "ht"},
                    "geometry": {"type": "LineString", "coordinates": [[5.11, 52.09], [5.29, 51.69]]},
                },
                {
                    "type": "Feature",
                    "properties": {},
                    "geometry": {
                        "type": "MultiLineString",
                        "coordinates": [[[4.9, 52.37], [4.8, 52.3]], [[4.7, 52.2]]],
                    },
                },
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [5.0, 52.0]}},
            ],
        }
    }

    sections = parse_track_sections(data)

    assert len(sections) == 2
    assert sections[0].from_station == "ut"
    assert sections[0].points[0] == GeoPoint(lat=52.09, lon=5.11)
    assert sections[1].points == (GeoPoint(lat=52.37, lon=4.9), GeoPoint(lat=52.3, lon=4.8))
