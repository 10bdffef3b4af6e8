from __future__ import annotations

import asyncio
import gzip
import json
import logging
import os
from dataclasses import dataclass
from typing import Any

from src.adapters.aws import s3_client
from src.app.ports.output import ITrackGeometryProvider

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class S3CachedTrackGeometryProvider(ITrackGeometryProvider):
    """Caches the track map GeoJSON in S3.

    This is an adapter-level decorator around another ITrackGeometryProvider.

    Env vars:
      - TRACK_GEOMETRY_BUCKET (required)
      - TRACK_GEOMETRY_PREFIX (default: track-geometry)
      - ENDPOINT_URL (preferred for LocalStack)
    """

    upstream: ITrackGeometryProvider
    bucket: str | None = None
    prefix: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("TRACK_GEOMETRY_BUCKET")
        if not value:
            raise RuntimeError("Missing TRACK_GEOMETRY_BUCKET")
        return value

    def _key(self) -> str:
        prefix = (
            self.prefix or os.getenv("TRACK_GEOMETRY_PREFIX") or "track-geometry"
        ).strip("/")
        return f"{prefix}/spoorkaart.json.gz"

    def _read(self) -> dict[str, Any] | None:
        s3 = s3_client()
        try:
            obj = s3.get_object(Bucket=self._bucket(), Key=self._key())
        except s3.exceptions.NoSuchKey:
            return None
        body = obj["Body"].read()
        return json.loads(gzip.decompress(body))

    def _write(self, data: dict[str, Any]) -> None:
        s3 = s3_client()
        payload = gzip.compress(json.dumps(data).encode("utf-8"))
        s3.put_object(Bucket=self._bucket(), Key=self._key(), Body=payload)

    async def track_map(self) -> dict[str, Any]:
        cached = await asyncio.to_thread(self._read)
        if cached is not None:
            return cached

        logger.info("Track map not cached in S3; fetching from upstream")
        data = await self.upstream.track_map()
        await asyncio.to_thread(self._write, data)
        return data
