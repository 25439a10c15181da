from typing import Any, Protocol, Sequence, TypeAlias

Number: TypeAlias = int | float
CacheKey: TypeAlias = str | Sequence[str]


class CacheStorage(Protocol):
    """Protocol defining the primitives a backend must expose to the legacy facade."""

    def add(self, key: str, value: Any, ttl: Number) -> bool:
        """Store `value` only if `key` has no live entry. Returns False when the key exists or the write fails."""
        ...

    def store(self, key: str, value: Any, ttl: Number) -> bool:
        """Store `value`, replacing any existing entry. Returns False when the write fails."""
        ...

    def fetch(self, key: str) -> Any:
        """Return the stored value, or False if there is none."""
        ...

    def fetch_many(self, keys: Sequence[str]) -> dict[str, Any]:
        """Return a mapping of the present keys to their values. Absent keys are omitted."""
        ...

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns True if it existed."""
        ...

    def delete_many(self, keys: Sequence[str]) -> bool:
        """Remove every key. Returns True only if all of them existed."""
        ...

    async def aadd(self, key: str, value: Any, ttl: Number) -> bool:
        """Async version of add."""
        ...

    async def astore(self, key: str, value: Any, ttl: Number) -> bool:
        """Async version of store."""
        ...

    async def afetch(self, key: str) -> Any:
        """Async version of fetch."""
        ...

    async def afetch_many(self, keys: Sequence[str]) -> dict[str, Any]:
        """Async version of fetch_many."""
        ...

    async def adelete(self, key: str) -> bool:
        """Async version of delete."""
        ...

    async def adelete_many(self, keys: Sequence[str]) -> bool:
        """Async version of delete_many."""
        ...
