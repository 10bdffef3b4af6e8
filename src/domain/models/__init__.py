from .geo import GeoPoint, Route
from .realtime import TrainTelemetry
from .station import Station
from .track import RoutePosition, TrackSection
from .vehicle_state import AnimationMode, VehicleState

__all__ = [
    "AnimationMode",
    "GeoPoint",
    "Route",
    "RoutePosition",
    "Station",
    "TrackSection",
    "TrainTelemetry",
    "VehicleState",
]
