from shmcache.redis.config import (
    DEFAULT_KEY_PREFIX,
    RedisConfig,
    get_redis_config,
    reset_redis_config,
    setup_redis_config,
)

__all__ = [
    "DEFAULT_KEY_PREFIX",
    "RedisConfig",
    "setup_redis_config",
    "get_redis_config",
    "reset_redis_config",
]
