import logging

from shmcache.types import CacheStorage

logger = logging.getLogger("shmcache")

_backend: CacheStorage | None = None


def setup_backend(storage: CacheStorage) -> None:
    """
    Select the process-wide backend used by the legacy facade.

    Can only be called once. Use reset_backend() first if a different backend is needed.

    Args:
        storage: Any object implementing the CacheStorage protocol (e.g. MemoryStorage, RedisStorage)

    Raises:
        RuntimeError: If a backend has already been configured
    """
    global _backend

    if _backend is not None:
        raise RuntimeError("Cache backend already set. Call reset_backend() first if you need to reconfigure.")

    _backend = storage


def get_backend() -> CacheStorage:
    """
    Get the process-wide backend.

    Falls back to MemoryStorage when setup_backend() was never called.
    """
    global _backend

    if _backend is None:
        from shmcache.storage.memory_storage import MemoryStorage

        MemoryStorage.start_cache_clear_thread()
        _backend = MemoryStorage
    return _backend


def reset_backend() -> None:
    """Forget the configured backend. The next call falls back to MemoryStorage again."""
    global _backend
    _backend = None


def use_redis() -> None:
    """Route the legacy facade to Redis. Requires setup_redis_config() to have been called."""
    from shmcache.redis.config import get_redis_config
    from shmcache.storage.redis_storage import RedisStorage

    get_redis_config()
    setup_backend(RedisStorage)
