import asyncio
import logging

import pytest
import redis.asyncio

from shmcache import aadd, adelete, afetch, astore


@pytest.mark.asyncio
async def test_add_and_fetch_async_redis(setup_async_redis: redis.asyncio.Redis):
    """Test that add only writes absent keys (async)."""
    assert await aadd("key", [1, 2, 3], 60) is True
    assert await aadd("key", "other", 60) is False
    assert await afetch("key") == [1, 2, 3]


@pytest.mark.asyncio
async def test_cache_expiration_async_redis(setup_async_redis: redis.asyncio.Redis):
    """Test that cached values expire after TTL (async)."""
    await astore("key", "value", 1)

    # Wait for expiration
    await asyncio.sleep(1.5)

    assert await afetch("key") is False


@pytest.mark.asyncio
async def test_concurrent_add_async_redis(setup_async_redis: redis.asyncio.Redis):
    """Test that only one concurrent add wins."""
    results = await asyncio.gather(*(aadd("contended", i, 60) for i in range(5)))

    assert results.count(True) == 1


@pytest.mark.asyncio
async def test_fetch_many_and_delete_many_async_redis(setup_async_redis: redis.asyncio.Redis):
    await astore("a", 1)
    await astore("b", 2)

    assert await afetch(["a", "b", "missing"]) == {"a": 1, "b": 2}
    assert await adelete(["a", "b", "missing"]) is False
    assert await afetch(["a", "b"]) == {}


@pytest.mark.asyncio
async def test_unsupported_parameters_async_redis(
    setup_async_redis: redis.asyncio.Redis,
    caplog: pytest.LogCaptureFixture,
):
    await astore("key", "value")

    assert await afetch("key", generator=lambda: "generated") == "value"
    assert await adelete("key", cluster_delete=True) is True

    assert len([record for record in caplog.records if record.levelno == logging.ERROR]) == 2


@pytest.mark.asyncio
async def test_end_to_end_async_redis(setup_async_redis: redis.asyncio.Redis):
    assert await aadd("ns::a", 1, 60) is True
    assert await aadd("ns::a", 2, 60) is False
    assert await afetch("ns::a") == 1
    assert await astore("ns::a", 2, 60) is True
    assert await afetch("ns::a") == 2
    assert await adelete("ns::a") is True
    assert await afetch("ns::a") is False
