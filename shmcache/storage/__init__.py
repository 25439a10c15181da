from shmcache.storage.memory_storage import CacheEntry, MemoryStorage
from shmcache.storage.redis_storage import RedisStorage

__all__ = [
    "CacheEntry",
    "MemoryStorage",
    "RedisStorage",
]
