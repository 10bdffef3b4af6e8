from __future__ import annotations

import asyncio

import pytest

from src.app.services.ttl_cache import TtlCache


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _counting_loader():
    calls: list[int] = []

    async def load() -> int:
        calls.append(1)
        return len(calls)

    return load, calls


def test_value_is_reused_within_ttl() -> None:
    clock = _Clock()
    cache: TtlCache[int] = TtlCache(ttl_s=60.0, clock=clock)
    load, calls = _counting_loader()

    async def run() -> tuple[int, int]:
        first = await cache.get_or_refresh(load)
        clock.now = 59.0
        second = await cache.get_or_refresh(load)
        return first, second

    assert asyncio.run(run()) == (1, 1)
    assert len(calls) == 1


def test_value_is_refreshed_after_ttl() -> None:
    clock = _Clock()
    cache: TtlCache[int] = TtlCache(ttl_s=60.0, clock=clock)
    load, calls = _counting_loader()

    async def run() -> int:
        await cache.get_or_refresh(load)
        clock.now = 61.0
        return await cache.get_or_refresh(load)

    assert asyncio.run(run()) == 2
    assert len(calls) == 2


def test_concurrent_callers_share_one_refresh() -> None:
    cache: TtlCache[int] = TtlCache(ttl_s=60.0)
    calls: list[int] = []

    async def slow_load() -> int:
        calls.append(1)
        await asyncio.sleep(0.01)
        return 42

    async def run() -> list[int]:
        return list(
            await asyncio.gather(*(cache.get_or_refresh(slow_load) for _ in range(5)))
        )

    assert asyncio.run(run()) == [42] * 5
    assert len(calls) == 1


def test_failed_refresh_propagates_and_keeps_cache_empty() -> None:
    cache: TtlCache[int] = TtlCache(ttl_s=60.0)

    async def boom() -> int:
        raise RuntimeError("upstream down")

    with pytest.raises(RuntimeError):
        asyncio.run(cache.get_or_refresh(boom))
    assert not cache.is_fresh()


def test_invalidate_forces_reload() -> None:
    cache: TtlCache[int] = TtlCache(ttl_s=60.0)
    load, calls = _counting_loader()

    async def run() -> int:
        await cache.get_or_refresh(load)
        cache.invalidate()
        return await cache.get_or_refresh(load)

    assert asyncio.run(run()) == 2
