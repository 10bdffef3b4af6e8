from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IVirtualTrainProvider(ABC):
    """Port for the NS virtual-train API (material, composition, live positions)."""

    @abstractmethod
    async def ride_number_for_material(self, *, material: str) -> str:
        """Return the ride number (ritnummer) currently run by a material unit."""

    @abstractmethod
    async def composition(
        self,
        *,
        ride_number: str,
        features: str | None = None,
        date_time: str | None = None,
    ) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def crowding(self, *, ride_number: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def vehicles(self) -> dict[str, Any]:
        """Return the raw live vehicle feed (`payload.treinen`)."""
