from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ITrackGeometryProvider(ABC):
    """Port for fetching the rail track map as GeoJSON."""

    @abstractmethod
    async def track_map(self) -> dict[str, Any]:
        raise NotImplementedError
