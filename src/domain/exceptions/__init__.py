from .ns_api import (
    InvalidRequest,
    RailCompanionError,
    StationLookupUnavailable,
    StationNotFound,
    UpstreamError,
    UpstreamNotFound,
)

__all__ = [
    "InvalidRequest",
    "RailCompanionError",
    "StationLookupUnavailable",
    "StationNotFound",
    "UpstreamError",
    "UpstreamNotFound",
]
