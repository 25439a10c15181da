import pytest

from shmcache import reset_backend
from shmcache.storage.memory_storage import MemoryStorage


@pytest.fixture(autouse=True)
def memory_backend():
    """Run every test against a fresh, empty MemoryStorage."""
    reset_backend()
    MemoryStorage.clear()
    yield MemoryStorage
    MemoryStorage.clear()
    reset_backend()
