import contextlib
import pickle
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Sequence

from shmcache.config import logger
from shmcache.types import Number

_CACHE_CLEAR_INTERVAL_SECONDS: int = 10

_CACHE_CLEAR_THREAD: threading.Thread | None = None
_CACHE_CLEAR_LOCK: threading.Lock = threading.Lock()


@dataclass
class CacheEntry:
    data: bytes
    ttl: Number

    cached_at: float = field(init=False)
    expires_at: float = field(init=False)

    @classmethod
    def time(cls) -> float:
        return time.monotonic()

    def __post_init__(self):
        self.cached_at = self.time()
        self.expires_at = 0 if self.ttl <= 0 else self.cached_at + self.ttl

    def is_expired(self) -> bool:
        if self.ttl <= 0:
            return False
        return self.time() > self.expires_at

    @property
    def value(self) -> Any:
        return pickle.loads(self.data)


class MemoryStorage:
    """Process-local storage implementing CacheStorage protocol. Values are pickled, so callers get copies."""

    _CACHE: dict[str, CacheEntry] = {}
    _LOCK: threading.Lock = threading.Lock()

    @classmethod
    def clear_expired_cached_items(cls):
        """Clear expired cached items from the cache."""
        while True:
            with contextlib.suppress(Exception):
                with cls._LOCK:
                    expired = [key for key, entry in cls._CACHE.items() if entry.is_expired()]
                    for key in expired:
                        del cls._CACHE[key]
                if expired:
                    logger.debug(f"Purged {len(expired)} expired entries from memory storage")

            time.sleep(_CACHE_CLEAR_INTERVAL_SECONDS)

    @classmethod
    def start_cache_clear_thread(cls):
        """This is to avoid memory leaks by clearing expired cache items periodically."""
        global _CACHE_CLEAR_THREAD
        with _CACHE_CLEAR_LOCK:
            if _CACHE_CLEAR_THREAD and _CACHE_CLEAR_THREAD.is_alive():
                return
            _CACHE_CLEAR_THREAD = threading.Thread(target=cls.clear_expired_cached_items, daemon=True)
            _CACHE_CLEAR_THREAD.start()

    @classmethod
    def _make_entry(cls, key: str, value: Any, ttl: Number) -> CacheEntry | None:
        try:
            data = pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            logger.warning(f"Cannot store {key!r}: {type(value).__name__} cannot be pickled ({exc})")
            return None
        return CacheEntry(data, ttl)

    @classmethod
    def _get_live(cls, key: str) -> CacheEntry | None:
        """Must be called with the lock held."""
        if entry := cls._CACHE.get(key):
            if not entry.is_expired():
                return entry
            del cls._CACHE[key]
        return None

    @classmethod
    def add(cls, key: str, value: Any, ttl: Number) -> bool:
        entry = cls._make_entry(key, value, ttl)
        if entry is None:
            return False

        with cls._LOCK:
            if cls._get_live(key) is not None:
                return False
            cls._CACHE[key] = entry
            return True

    @classmethod
    def store(cls, key: str, value: Any, ttl: Number) -> bool:
        entry = cls._make_entry(key, value, ttl)
        if entry is None:
            return False

        with cls._LOCK:
            cls._CACHE[key] = entry
            return True

    @classmethod
    def fetch(cls, key: str) -> Any:
        with cls._LOCK:
            entry = cls._get_live(key)
        if entry is None:
            return False
        return entry.value

    @classmethod
    def fetch_many(cls, keys: Sequence[str]) -> dict[str, Any]:
        with cls._LOCK:
            entries = {key: entry for key in keys if (entry := cls._get_live(key)) is not None}
        return {key: entry.value for key, entry in entries.items()}

    @classmethod
    def delete(cls, key: str) -> bool:
        with cls._LOCK:
            if cls._get_live(key) is None:
                return False
            del cls._CACHE[key]
            return True

    @classmethod
    def delete_many(cls, keys: Sequence[str]) -> bool:
        if not keys:
            return False

        with cls._LOCK:
            deleted = [key for key in dict.fromkeys(keys) if cls._get_live(key) is not None]
            for key in deleted:
                del cls._CACHE[key]
        return len(deleted) == len(set(keys))

    @classmethod
    async def aadd(cls, key: str, value: Any, ttl: Number) -> bool:
        return cls.add(key, value, ttl)

    @classmethod
    async def astore(cls, key: str, value: Any, ttl: Number) -> bool:
        return cls.store(key, value, ttl)

    @classmethod
    async def afetch(cls, key: str) -> Any:
        return cls.fetch(key)

    @classmethod
    async def afetch_many(cls, keys: Sequence[str]) -> dict[str, Any]:
        return cls.fetch_many(keys)

    @classmethod
    async def adelete(cls, key: str) -> bool:
        return cls.delete(key)

    @classmethod
    async def adelete_many(cls, keys: Sequence[str]) -> bool:
        return cls.delete_many(keys)

    @classmethod
    def clear(cls):
        with cls._LOCK:
            cls._CACHE.clear()
