from ._async import aadd, adelete, afetch, astore
from ._sync import add, delete, fetch, store
from .config import get_backend, reset_backend, setup_backend, use_redis
from .redis import DEFAULT_KEY_PREFIX, get_redis_config, reset_redis_config, setup_redis_config
from .storage import MemoryStorage, RedisStorage
from .types import CacheStorage
from .utils.keys import NAMESPACE_SEPARATOR, namespaced_key, split_key

zend_shm_cache_add = add
zend_shm_cache_store = store
zend_shm_cache_fetch = fetch
zend_shm_cache_delete = delete

__all__ = [
    "add",
    "store",
    "fetch",
    "delete",
    "aadd",
    "astore",
    "afetch",
    "adelete",
    "zend_shm_cache_add",
    "zend_shm_cache_store",
    "zend_shm_cache_fetch",
    "zend_shm_cache_delete",
    "setup_backend",
    "get_backend",
    "reset_backend",
    "use_redis",
    "setup_redis_config",
    "get_redis_config",
    "reset_redis_config",
    "DEFAULT_KEY_PREFIX",
    "MemoryStorage",
    "RedisStorage",
    "CacheStorage",
    "NAMESPACE_SEPARATOR",
    "namespaced_key",
    "split_key",
]
