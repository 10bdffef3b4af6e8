from __future__ import annotations


class RailCompanionError(Exception):
    """Base exception for failures surfaced to API clients."""


class InvalidRequest(RailCompanionError):
    """Raised when a request misses or malforms a required parameter."""


class StationNotFound(RailCompanionError):
    """Raised when a station name or code does not match any known station."""

    def __init__(self, query: str, *, role: str | None = None) -> None:
        self.query = query
        self.role = role
        label = f"{role} station" if role else "Station"
        super().__init__(f"{label} not found: {query}")


class StationLookupUnavailable(RailCompanionError):
    """Raised when the station list cannot be fetched for code lookup."""


class UpstreamError(RailCompanionError):
    """Raised when an NS API call fails."""

    def __init__(
        self, api: str, status_code: int, body: str = "", *, message: str | None = None
    ) -> None:
        self.api = api
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"{api} error: {status_code} - {body}")


class UpstreamNotFound(UpstreamError):
    """Raised when an NS API answers 404 for the requested resource."""
