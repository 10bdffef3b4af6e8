from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.disruptions import router as disruptions_router
from src.adapters.api.controllers.trains import router as trains_router
from src.adapters.api.controllers.travel import router as travel_router
from src.domain.exceptions import (
    InvalidRequest,
    RailCompanionError,
    StationLookupUnavailable,
    StationNotFound,
    UpstreamError,
    UpstreamNotFound,
)

app = FastAPI(title="RailCompanion")
app.include_router(travel_router)
app.include_router(trains_router)
app.include_router(disruptions_router)

_STATUS_BY_ERROR: tuple[tuple[type[RailCompanionError], int], ...] = (
    (InvalidRequest, 400),
    (StationNotFound, 400),
    (UpstreamNotFound, 404),
    (StationLookupUnavailable, 503),
    (UpstreamError, 502),
)


@app.exception_handler(RailCompanionError)
async def rail_companion_error_handler(
    request: Request, exc: RailCompanionError
) -> JSONResponse:
    status_code = 500
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = code
            break

    if status_code >= 500:
        logging.getLogger("uvicorn.error").warning(
            "Upstream failure: %s", exc, extra={"path": str(request.url.path)}
        )

    return JSONResponse(status_code=status_code, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the frontend can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("RAILCOMPANION_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
