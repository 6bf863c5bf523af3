"""LFU (Least Frequently Used) cache implementation."""

import logging
from typing import Any, Hashable, Iterator, Optional, Tuple

from lfucache.cache.entryStore import EntryStore
from lfucache.cache.frequencyIndex import FrequencyIndex
from lfucache.errors import CacheConfigError, CacheInvariantError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


def check_capacity(capacity: Any) -> int:
    """
    Validate a cache capacity.
    
    Args:
        capacity: Requested maximum number of entries
        
    Returns:
        The capacity as an int
        
    Raises:
        CacheConfigError: If capacity is not an integer >= 1
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise CacheConfigError(
            f"Cache capacity must be an integer, got {capacity!r}"
        )
    if capacity < 1:
        raise CacheConfigError(
            f"Cache capacity must be at least 1, got {capacity}"
        )
    return capacity


class LFUCache:
    """
    LFU cache with size limit.
    
    Evicts a least frequently used item when a new key is added to a full
    cache. Every operation is O(1): entries live in an EntryStore, keys are
    grouped by access count in a FrequencyIndex, and the smallest non-empty
    frequency is tracked in min_frequency.
    
    Keys sharing the minimum frequency are evicted in no particular order.
    Arbitrary removal by key is not offered, since min_frequency can only
    be kept exact while it changes through inserts and bumps.
    """
    
    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize LFU cache.
        
        Args:
            capacity: Maximum number of items in cache
            
        Raises:
            CacheConfigError: If capacity is less than 1
        """
        self._capacity = check_capacity(capacity)
        self._store = EntryStore()
        self._index = FrequencyIndex()
        self._min_freq = 0
    
    @property
    def capacity(self) -> int:
        return self._capacity
    
    @property
    def min_frequency(self) -> Optional[int]:
        """Smallest access count present, or None when the cache is empty."""
        if not self._store:
            return None
        return self._min_freq
    
    def get(self, key: Hashable) -> Optional[Any]:
        """
        Get item from cache and update frequency.
        
        Args:
            key: Cache key
            
        Returns:
            Cached value or None
        """
        entry = self._store.get(key)
        if entry is None:
            return None
        self._bump(key)
        return entry.value
    
    def put(self, key: Hashable, value: Any) -> Optional[Any]:
        """
        Add or update item in cache.
        
        Updating an existing key counts as an access.
        
        Args:
            key: Cache key
            value: Value to cache
            
        Returns:
            Previous value for key, or None if the key is new
        """
        entry = self._store.get(key)
        if entry is not None:
            previous = entry.value
            self._bump(key)
            entry.value = value
            return previous
        
        if len(self._store) >= self._capacity:
            self._evict()
        
        self._store.insert(key, value)
        self._index.add(1, key)
        self._min_freq = 1
        return None
    
    def peek(self, key: Hashable) -> Optional[Any]:
        """Get item without counting it as an access."""
        entry = self._store.get(key)
        return None if entry is None else entry.value
    
    def frequency(self, key: Hashable) -> Optional[int]:
        """Current access count of key, or None if it is not cached."""
        entry = self._store.get(key)
        return None if entry is None else entry.frequency
    
    def _bump(self, key: Hashable):
        entry = self._store.get(key)
        old_freq = entry.frequency
        entry.frequency = old_freq + 1
        
        self._index.add(old_freq + 1, key)
        emptied = self._index.remove(old_freq, key)
        # Only the tracked minimum moves; a lower bucket may still exist otherwise.
        if emptied and old_freq == self._min_freq:
            self._min_freq = old_freq + 1
    
    def _evict(self):
        """
        Evict least frequently used item.
        
        Leaves min_frequency stale when the minimum bucket empties, so this
        must only run as the first step of inserting a new key, which resets
        min_frequency to 1.
        """
        key = self._index.pick_any(self._min_freq)
        entry = self._store.remove(key)
        self._index.remove(entry.frequency, key)
        logger.debug(
            "Evicted key %r at frequency %d (capacity %d)",
            key, entry.frequency, self._capacity
        )
    
    def check_invariants(self):
        """
        Verify the store, the index and min_frequency agree.
        
        Raises:
            CacheInvariantError: On any inconsistency
        """
        if len(self._store) > self._capacity:
            raise CacheInvariantError(
                f"Cache holds {len(self._store)} entries, capacity is {self._capacity}"
            )
        
        indexed = 0
        for freq in self._index.frequencies():
            keys = self._index.keys_at(freq)
            if not keys:
                raise CacheInvariantError(f"Empty bucket left at frequency {freq}")
            for key in keys:
                entry = self._store.get(key)
                if entry is None:
                    raise CacheInvariantError(
                        f"Indexed key {key!r} is missing from the store"
                    )
                if entry.frequency != freq:
                    raise CacheInvariantError(
                        f"Key {key!r} indexed at {freq} but has frequency {entry.frequency}"
                    )
            indexed += len(keys)
        
        if indexed != len(self._store):
            raise CacheInvariantError(
                f"{len(self._store)} stored keys but {indexed} indexed keys"
            )
        
        if self._store:
            lowest = min(self._index.frequencies())
            if self._min_freq != lowest:
                raise CacheInvariantError(
                    f"min_frequency is {self._min_freq}, lowest bucket is {lowest}"
                )
    
    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Iterate (key, value) pairs without touching frequencies."""
        for key, entry in self._store.items():
            yield key, entry.value
    
    def clear(self):
        """Clear all items from cache."""
        self._store.clear()
        self._index.clear()
        self._min_freq = 0
    
    def size(self) -> int:
        """Get current cache size."""
        return len(self._store)
    
    def contains(self, key: Hashable) -> bool:
        """Check if key exists in cache."""
        return key in self._store
    
    def __len__(self) -> int:
        return len(self._store)
    
    def __contains__(self, key: Hashable) -> bool:
        return key in self._store
    
    def __repr__(self) -> str:
        return (
            f"LFUCache(capacity={self._capacity}, size={len(self._store)}, "
            f"min_frequency={self.min_frequency})"
        )
