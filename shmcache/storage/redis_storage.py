import pickle
from typing import Any, Sequence

from shmcache.config import logger
from shmcache.redis.config import get_redis_config
from shmcache.types import Number


class RedisStorage:
    """Redis storage implementing CacheStorage protocol."""

    @classmethod
    def _make_key(cls, key: str) -> str:
        """Create a Redis key from a (possibly namespaced) cache key."""
        config = get_redis_config()
        return f"{config.key_prefix}:{key}"

    @classmethod
    def _serialize(cls, key: str, value: Any) -> bytes | None:
        """Serialize a value to bytes, or None if it cannot be pickled."""
        try:
            return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            logger.warning(f"Cannot store {key!r}: {type(value).__name__} cannot be pickled ({exc})")
            return None

    @classmethod
    def _deserialize(cls, data: bytes) -> Any:
        """Deserialize bytes to a stored value."""
        return pickle.loads(data)

    @classmethod
    def _expiry_ms(cls, ttl: Number) -> int | None:
        """TTL in milliseconds, None meaning no expiration."""
        if ttl <= 0:
            return None
        return int(ttl * 1000)

    @classmethod
    def _unique_keys(cls, keys: Sequence[str]) -> list[str]:
        return [cls._make_key(key) for key in dict.fromkeys(keys)]

    @classmethod
    def _handle_error(cls, exc: Exception, operation: str):
        """Handle Redis errors based on config."""
        config = get_redis_config()
        if config.on_error == "raise":
            raise

        logger.warning(f"Redis {operation} error (silent mode): {exc}")

    @classmethod
    def _handle_many_result(cls, keys: Sequence[str], values: list[bytes | None]) -> dict[str, Any]:
        """Map MGET results back onto the caller's keys, leaving out misses."""
        return {key: cls._deserialize(data) for key, data in zip(dict.fromkeys(keys), values) if data is not None}

    @classmethod
    def add(cls, key: str, value: Any, ttl: Number) -> bool:
        """Store a value in Redis only if the key is absent."""
        data = cls._serialize(key, value)
        if data is None:
            return False

        client = get_redis_config().get_client(is_async=False)
        try:
            return bool(client.set(cls._make_key(key), data, nx=True, px=cls._expiry_ms(ttl)))
        except Exception as exc:
            cls._handle_error(exc, "add")
            return False

    @classmethod
    def store(cls, key: str, value: Any, ttl: Number) -> bool:
        """Store a value in Redis, replacing any existing one."""
        data = cls._serialize(key, value)
        if data is None:
            return False

        client = get_redis_config().get_client(is_async=False)
        try:
            return bool(client.set(cls._make_key(key), data, px=cls._expiry_ms(ttl)))
        except Exception as exc:
            cls._handle_error(exc, "store")
            return False

    @classmethod
    def fetch(cls, key: str) -> Any:
        """Retrieve a value from Redis."""
        client = get_redis_config().get_client(is_async=False)
        try:
            data = client.get(cls._make_key(key))
        except Exception as exc:
            cls._handle_error(exc, "fetch")
            return False

        if data is None:
            return False
        return cls._deserialize(data)  # type: ignore[arg-type]

    @classmethod
    def fetch_many(cls, keys: Sequence[str]) -> dict[str, Any]:
        """Retrieve several values from Redis in one round trip."""
        if not keys:
            return {}

        client = get_redis_config().get_client(is_async=False)
        try:
            values = client.mget(cls._unique_keys(keys))
        except Exception as exc:
            cls._handle_error(exc, "fetch_many")
            return {}
        return cls._handle_many_result(keys, values)  # type: ignore[arg-type]

    @classmethod
    def delete(cls, key: str) -> bool:
        """Remove a key from Redis."""
        client = get_redis_config().get_client(is_async=False)
        try:
            return client.delete(cls._make_key(key)) == 1
        except Exception as exc:
            cls._handle_error(exc, "delete")
            return False

    @classmethod
    def delete_many(cls, keys: Sequence[str]) -> bool:
        """Remove several keys from Redis. True only if all of them existed."""
        if not keys:
            return False

        client = get_redis_config().get_client(is_async=False)
        redis_keys = cls._unique_keys(keys)
        try:
            return client.delete(*redis_keys) == len(redis_keys)
        except Exception as exc:
            cls._handle_error(exc, "delete_many")
            return False

    @classmethod
    async def aadd(cls, key: str, value: Any, ttl: Number) -> bool:
        """Store a value in Redis only if the key is absent (async)."""
        data = cls._serialize(key, value)
        if data is None:
            return False

        client = get_redis_config().get_client(is_async=True)
        try:
            return bool(await client.set(cls._make_key(key), data, nx=True, px=cls._expiry_ms(ttl)))
        except Exception as exc:
            cls._handle_error(exc, "aadd")
            return False

    @classmethod
    async def astore(cls, key: str, value: Any, ttl: Number) -> bool:
        """Store a value in Redis, replacing any existing one (async)."""
        data = cls._serialize(key, value)
        if data is None:
            return False

        client = get_redis_config().get_client(is_async=True)
        try:
            return bool(await client.set(cls._make_key(key), data, px=cls._expiry_ms(ttl)))
        except Exception as exc:
            cls._handle_error(exc, "astore")
            return False

    @classmethod
    async def afetch(cls, key: str) -> Any:
        """Retrieve a value from Redis (async)."""
        client = get_redis_config().get_client(is_async=True)
        try:
            data = await client.get(cls._make_key(key))
        except Exception as exc:
            cls._handle_error(exc, "afetch")
            return False

        if data is None:
            return False
        return cls._deserialize(data)  # type: ignore[arg-type]

    @classmethod
    async def afetch_many(cls, keys: Sequence[str]) -> dict[str, Any]:
        """Retrieve several values from Redis in one round trip (async)."""
        if not keys:
            return {}

        client = get_redis_config().get_client(is_async=True)
        try:
            values = await client.mget(cls._unique_keys(keys))
        except Exception as exc:
            cls._handle_error(exc, "afetch_many")
            return {}
        return cls._handle_many_result(keys, values)  # type: ignore[arg-type]

    @classmethod
    async def adelete(cls, key: str) -> bool:
        """Remove a key from Redis (async)."""
        client = get_redis_config().get_client(is_async=True)
        try:
            return await client.delete(cls._make_key(key)) == 1
        except Exception as exc:
            cls._handle_error(exc, "adelete")
            return False

    @classmethod
    async def adelete_many(cls, keys: Sequence[str]) -> bool:
        """Remove several keys from Redis (async). True only if all of them existed."""
        if not keys:
            return False

        client = get_redis_config().get_client(is_async=True)
        redis_keys = cls._unique_keys(keys)
        try:
            return await client.delete(*redis_keys) == len(redis_keys)
        except Exception as exc:
            cls._handle_error(exc, "adelete_many")
            return False
