from typing import Sequence

from shmcache.types import CacheKey

NAMESPACE_SEPARATOR = "::"


def namespaced_key(namespace: str, key: str) -> str:
    """Compose a `namespace::key` cache key. Identical keys may live under different namespaces."""
    if not namespace:
        return key
    return f"{namespace}{NAMESPACE_SEPARATOR}{key}"


def split_key(key: str) -> tuple[str | None, str]:
    """Split a cache key into its namespace (None for the global namespace) and local key."""
    namespace, separator, local_key = key.partition(NAMESPACE_SEPARATOR)
    if not separator:
        return None, key
    return namespace, local_key


def is_key_set(key: CacheKey) -> bool:
    """A key set is any sequence of keys other than a plain string."""
    return not isinstance(key, str) and isinstance(key, Sequence)
