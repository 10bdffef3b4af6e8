from .disruptions_provider import IDisruptionsProvider
from .track_geometry_provider import ITrackGeometryProvider
from .travel_info_provider import ITravelInfoProvider
from .virtual_train_provider import IVirtualTrainProvider

__all__ = [
    "IDisruptionsProvider",
    "ITrackGeometryProvider",
    "ITravelInfoProvider",
    "IVirtualTrainProvider",
]
