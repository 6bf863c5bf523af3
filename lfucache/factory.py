"""Factory for creating caches."""

from typing import Optional

from lfucache.cache.lfuCache import LFUCache
from lfucache.cache.lruCache import LRUCache
from lfucache.cache.synchronizedCache import SynchronizedCache
from lfucache.config import CacheConfig
from lfucache.errors import CacheConfigError

POLICIES = {
    'lfu': LFUCache,
    'lru': LRUCache,
}


def create_cache(config: Optional[CacheConfig] = None):
    """
    Create a cache instance.
    
    Args:
        config: CacheConfig instance (if None, loads from environment)
        
    Returns:
        LFUCache or LRUCache, wrapped in SynchronizedCache when
        config.thread_safe is set
        
    Raises:
        CacheConfigError: If policy is not supported or capacity is invalid
    """
    if config is None:
        config = CacheConfig.from_env()
    
    policy = config.policy.lower()
    cache_cls = POLICIES.get(policy)
    if cache_cls is None:
        raise CacheConfigError(
            f"Unsupported policy: {policy}. "
            f"Supported policies: {', '.join(repr(p) for p in POLICIES)}"
        )
    
    cache = cache_cls(config.capacity)
    if config.thread_safe:
        return SynchronizedCache(cache)
    return cache
