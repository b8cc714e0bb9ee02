"""
Redis Cache Utilities
"""
import redis
from typing import Optional, Any
import pickle

from jobmatch.core.config import settings
from jobmatch.core.logging import logger


# Redis client (connects lazily on first command)
redis_client = redis.from_url(settings.REDIS_URL, decode_responses=False)

COMPANIES_CACHE_KEY = "companies:all"


def get_cache(key: str) -> Optional[Any]:
    """Get value from cache"""
    if not settings.CACHE_ENABLED:
        return None
    try:
        cached = redis_client.get(key)
        if cached:
            return pickle.loads(cached)
        return None
    except redis.RedisError as e:
        logger.warning(f"Cache get error for {key}: {e}")
        return None


def set_cache(key: str, value: Any, expire: Optional[int] = None) -> bool:
    """Set value in cache"""
    if not settings.CACHE_ENABLED:
        return False
    try:
        redis_client.setex(key, expire or settings.CACHE_EXPIRE_SECONDS, pickle.dumps(value))
        return True
    except redis.RedisError as e:
        logger.warning(f"Cache set error for {key}: {e}")
        return False


def delete_cache(key: str) -> bool:
    """Delete value from cache"""
    if not settings.CACHE_ENABLED:
        return False
    try:
        redis_client.delete(key)
        return True
    except redis.RedisError as e:
        logger.warning(f"Cache delete error for {key}: {e}")
        return False


def invalidate_companies() -> None:
    """Drop the cached company directory after any company insert/update"""
    delete_cache(COMPANIES_CACHE_KEY)
