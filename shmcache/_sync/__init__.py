from typing import Any, Callable

from shmcache.config import get_backend, logger
from shmcache.types import CacheKey, Number
from shmcache.utils.keys import is_key_set


def add(key: str, value: Any, ttl: Number = 0) -> bool:
    """
    Store `value` under `key` unless the key is already cached.

    Args:
        key: The data's key, optionally prefixed with a `namespace::`
        value: Any picklable object
        ttl: Time to live in seconds, 0 for no expiration

    Returns:
        True if the value was stored, False if the key is already cached or the backend rejected the write
    """
    if not key:
        logger.warning("add called with an empty key")
        return False
    return get_backend().add(key, value, max(ttl, 0))


def store(key: str, value: Any, ttl: Number = 0) -> bool:
    """
    Store `value` under `key`, replacing any cached value.

    Returns:
        False if the backend rejected the write, True otherwise
    """
    if not key:
        logger.warning("store called with an empty key")
        return False
    return get_backend().store(key, value, max(ttl, 0))


def fetch(key: CacheKey, generator: Callable[..., Any] | None = None) -> Any:
    """
    Fetch a value, or several, from the cache.

    `generator` is accepted for compatibility only; it is never called.

    Returns:
        For a single key, the stored value or False when nothing matches.
        For a sequence of keys, a dict of the keys that were found and their values.
    """
    if generator is not None:
        logger.error("fetch does not support generator parameter")

    backend = get_backend()
    if is_key_set(key):
        return backend.fetch_many(key)
    return backend.fetch(key)  # type: ignore[arg-type]


def delete(key: CacheKey, cluster_delete: bool = False) -> bool:
    """
    Delete a key, or several, from the cache.

    `cluster_delete` is accepted for compatibility only; deletes are always local.

    Returns:
        True if every given key existed and was removed, False otherwise
    """
    if cluster_delete:
        logger.error("delete does not support cluster_delete parameter")

    backend = get_backend()
    if is_key_set(key):
        return backend.delete_many(key)
    return backend.delete(key)  # type: ignore[arg-type]
