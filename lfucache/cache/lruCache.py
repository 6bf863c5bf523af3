"""LRU (Least Recently Used) cache implementation."""

import logging
from collections import OrderedDict
from typing import Any, Hashable, Iterator, Optional, Tuple

from lfucache.cache.lfuCache import DEFAULT_CAPACITY, check_capacity

logger = logging.getLogger(__name__)


class LRUCache:
    """
    Classic Least-Recently-Used cache bounded by entry count.
    
    Both reads and writes move a key to the most-recent end; once the cache
    grows past capacity the oldest key is dropped.
    """
    
    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._capacity = check_capacity(capacity)
        self._entries: "OrderedDict[Hashable, Any]" = OrderedDict()
    
    @property
    def capacity(self) -> int:
        return self._capacity
    
    def get(self, key: Hashable) -> Optional[Any]:
        """
        Get item from cache and mark it most recently used.
        
        Args:
            key: Cache key
            
        Returns:
            Cached value or None
        """
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]
    
    def put(self, key: Hashable, value: Any) -> Optional[Any]:
        """
        Add or update item in cache.
        
        Args:
            key: Cache key
            value: Value to cache
            
        Returns:
            Previous value for key, or None if the key is new
        """
        previous = self._entries.pop(key, None)
        self._entries[key] = value
        if len(self._entries) > self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted least recent key %r", evicted)
        return previous
    
    def peek(self, key: Hashable) -> Optional[Any]:
        return self._entries.get(key)
    
    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Iterate (key, value) pairs from least to most recent."""
        return iter(self._entries.items())
    
    def clear(self):
        self._entries.clear()
    
    def size(self) -> int:
        return len(self._entries)
    
    def contains(self, key: Hashable) -> bool:
        return key in self._entries
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries
