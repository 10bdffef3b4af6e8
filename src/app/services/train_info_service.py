from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.app.ports.output import ITravelInfoProvider, IVirtualTrainProvider
from src.domain.exceptions import InvalidRequest, UpstreamNotFound


def _not_found(exc: UpstreamNotFound, message: str) -> UpstreamNotFound:
    return UpstreamNotFound(exc.api, exc.status_code, exc.body, message=message)


@dataclass(slots=True)
class TrainInfoService:
    """Material tracking, composition and crowding for a single train."""

    virtual_train: IVirtualTrainProvider
    travel_info: ITravelInfoProvider

    async def journey_by_material(self, *, material: str | None) -> dict[str, Any]:
        if not material:
            raise InvalidRequest("Material number parameter is required")

        try:
            ride_number = await self.virtual_train.ride_number_for_material(
                material=material
            )
        except UpstreamNotFound as exc:
            raise _not_found(exc, "Material number not found") from exc

        ride_number = ride_number.strip()
        journey = await self.travel_info.journey(train=ride_number)
        return {"ritnummer": ride_number, "journeyData": journey}

    async def composition(
        self,
        *,
        ride_number: str,
        features: str | None = None,
        date_time: str | None = None,
    ) -> Any:
        if not ride_number:
            raise InvalidRequest("Journey number parameter is required")
        try:
            return await self.virtual_train.composition(
                ride_number=ride_number,
                features=features or None,
                date_time=date_time or None,
            )
        except UpstreamNotFound as exc:
            raise _not_found(exc, "Train composition not found") from exc

    async def crowding(self, *, ride_number: str) -> Any:
        if not ride_number:
            raise InvalidRequest("Journey number parameter is required")
        try:
            return await self.virtual_train.crowding(ride_number=ride_number)
        except UpstreamNotFound as exc:
            raise _not_found(exc, "Train crowding data not found") from exc
