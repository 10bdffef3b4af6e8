from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorSchema(BaseModel):
    error: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorSchema, "description": "Missing parameter or unknown station"},
    404: {"model": ErrorSchema, "description": "Unknown train, material or disruption"},
    502: {"model": ErrorSchema, "description": "NS API call failed"},
    503: {"model": ErrorSchema, "description": "Station lookup unavailable"},
}
