from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IDisruptionsProvider(ABC):
    """Port for the NS disruptions API."""

    @abstractmethod
    async def disruptions(
        self, *, is_active: str | None = None, disruption_type: str | None = None
    ) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def station_disruptions(self, *, station_code: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def disruption(self, *, disruption_type: str, disruption_id: str) -> Any:
        raise NotImplementedError
