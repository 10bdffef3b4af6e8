from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class TtlCache(Generic[T]):
    """Single-value async cache with a time-to-live.

    `get_or_refresh(loader)` returns the cached value while it is younger
    than `ttl_s`, otherwise awaits `loader()` and stores the result.
    Concurrent callers share one refresh. A failing loader leaves the
    previous value (if any) in place and propagates the error.
    """

    ttl_s: float
    clock: Callable[[], float] = time.monotonic

    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _value: T | None = field(default=None, init=False, repr=False)
    _loaded_at: float | None = field(default=None, init=False, repr=False)

    def is_fresh(self) -> bool:
        if self._loaded_at is None:
            return False
        return (self.clock() - self._loaded_at) < self.ttl_s

    async def get_or_refresh(self, loader: Callable[[], Awaitable[T]]) -> T:
        async with self._lock:
            if self._value is not None and self.is_fresh():
                return self._value

            value = await loader()
            self._value = value
            self._loaded_at = self.clock()
            return value

    def invalidate(self) -> None:
        self._value = None
        self._loaded_at = None
