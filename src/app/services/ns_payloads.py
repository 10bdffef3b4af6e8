from __future__ import annotations

import logging
from typing import Any, Iterable

from src.domain.models import GeoPoint, Station, TrackSection, TrainTelemetry

logger = logging.getLogger(__name__)


def _payload(data: Any) -> Any:
    if isinstance(data, dict) and "payload" in data:
        return data["payload"]
    return data


def parse_stations(data: Any) -> tuple[Station, ...]:
    """Parse a `/v2/stations` response into stations."""

    rows = _payload(data) or []
    out: list[Station] = []
    for row in rows:
        code = row.get("code")
        if not code:
            continue
        names = row.get("namen") or {}
        uic = row.get("UICCode")
        out.append(
            Station(
                code=str(code),
                name_long=names.get("lang"),
                name_medium=names.get("middel"),
                name_short=names.get("kort"),
                uic_code=str(uic) if uic is not None else None,
                country=row.get("land"),
            )
        )
    return tuple(out)


def parse_vehicles(data: Any) -> tuple[TrainTelemetry, ...]:
    """Parse the virtual-train vehicle feed (`payload.treinen`)."""

    payload = _payload(data) or {}
    rows = payload.get("treinen") or [] if isinstance(payload, dict) else []

    out: list[TrainTelemetry] = []
    for row in rows:
        try:
            lat = float(row["lat"])
            lon = float(row["lng"])
            ride_id = str(row["ritId"])
            train_number = int(row["treinNummer"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Skipping malformed vehicle row: %r", row)
            continue

        materials = tuple(
            str(m["type"])
            for m in (row.get("materieel") or [])
            if isinstance(m, dict) and m.get("type")
        )
        accuracy = row.get("horizontaleNauwkeurigheid")

        out.append(
            TrainTelemetry(
                train_number=train_number,
                ride_id=ride_id,
                lat=lat,
                lon=lon,
                speed_kmh=float(row.get("snelheid") or 0.0),
                heading=float(row.get("richting") or 0.0),
                accuracy_m=float(accuracy) if accuracy is not None else None,
                train_type=row.get("type"),
                source=row.get("bron"),
                material_types=materials,
            )
        )
    return tuple(out)


def _line_points(coords: Iterable[Any]) -> tuple[GeoPoint, ...]:
    # GeoJSON order is [lon, lat].
    return tuple(GeoPoint(lat=float(c[1]), lon=float(c[0])) for c in coords)


def parse_track_sections(data: Any) -> tuple[TrackSection, ...]:
    """Parse the track map GeoJSON into sections with at least two points."""

    collection = _payload(data) or {}
    features = collection.get("features") or [] if isinstance(collection, dict) else []

    out: list[TrackSection] = []
    for feature in features:
        geometry = feature.get("geometry") or {}
        props = feature.get("properties") or {}
        gtype = geometry.get("type")
        coords = geometry.get("coordinates") or []

        if gtype == "LineString":
            lines = [coords]
        elif gtype == "MultiLineString":
            lines = list(coords)
        else:
            continue

        for line in lines:
            points = _line_points(line)
            if len(points) < 2:
                continue
            out.append(
                TrackSection(
                    from_station=props.get("from"),
                    to_station=props.get("to"),
                    points=points,
                )
            )
    return tuple(out)
