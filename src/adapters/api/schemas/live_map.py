from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class AnimatedTrainSchema(BaseModel):
    ride_id: str
    train_number: int
    train_type: str | None = None
    material_types: list[str] = Field(default_factory=list)
    position: GeoPointSchema
    gps_position: GeoPointSchema
    speed_kmh: float
    heading: float
    mode: Literal["coasting", "tracking", "free"]
    telemetry_age_s: float | None = None


class AnimatedTrainsResponseSchema(BaseModel):
    generated_at: datetime
    trains: list[AnimatedTrainSchema]
