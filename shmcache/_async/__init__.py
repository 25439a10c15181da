from typing import Any, Callable

from shmcache.config import get_backend, logger
from shmcache.types import CacheKey, Number
from shmcache.utils.keys import is_key_set


async def aadd(key: str, value: Any, ttl: Number = 0) -> bool:
    """Async version of `add`."""
    if not key:
        logger.warning("aadd called with an empty key")
        return False
    return await get_backend().aadd(key, value, max(ttl, 0))


async def astore(key: str, value: Any, ttl: Number = 0) -> bool:
    """Async version of `store`."""
    if not key:
        logger.warning("astore called with an empty key")
        return False
    return await get_backend().astore(key, value, max(ttl, 0))


async def afetch(key: CacheKey, generator: Callable[..., Any] | None = None) -> Any:
    """Async version of `fetch`. `generator` is ignored."""
    if generator is not None:
        logger.error("afetch does not support generator parameter")

    backend = get_backend()
    if is_key_set(key):
        return await backend.afetch_many(key)
    return await backend.afetch(key)  # type: ignore[arg-type]


async def adelete(key: CacheKey, cluster_delete: bool = False) -> bool:
    """Async version of `delete`. Deletes are always local."""
    if cluster_delete:
        logger.error("adelete does not support cluster_delete parameter")

    backend = get_backend()
    if is_key_set(key):
        return await backend.adelete_many(key)
    return await backend.adelete(key)  # type: ignore[arg-type]
