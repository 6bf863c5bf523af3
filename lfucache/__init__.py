"""Bounded in-memory caches with O(1) LFU eviction."""

from lfucache.cache import (
    Entry,
    EntryStore,
    FrequencyIndex,
    LFUCache,
    LRUCache,
    RandomTable,
    SynchronizedCache,
)
from lfucache.config import CacheConfig
from lfucache.errors import CacheConfigError, CacheError, CacheInvariantError
from lfucache.factory import create_cache

__all__ = [
    'Entry',
    'EntryStore',
    'FrequencyIndex',
    'LFUCache',
    'LRUCache',
    'RandomTable',
    'SynchronizedCache',
    'CacheConfig',
    'CacheError',
    'CacheConfigError',
    'CacheInvariantError',
    'create_cache',
]
