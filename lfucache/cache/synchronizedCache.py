"""Lock-guarded wrapper for sharing a cache between threads."""

import threading
from typing import Any, Hashable, List, Optional, Tuple


class SynchronizedCache:
    """
    Runs every operation of the wrapped cache under a single lock.
    
    A bump touches the entry, the frequency index and the minimum frequency
    together, so callers must never observe one without the others.
    """
    
    def __init__(self, cache):
        """
        Args:
            cache: LFUCache or LRUCache instance
        """
        self._cache = cache
        self._lock = threading.RLock()
    
    @property
    def cache(self):
        return self._cache
    
    @property
    def capacity(self) -> int:
        return self._cache.capacity
    
    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            return self._cache.get(key)
    
    def put(self, key: Hashable, value: Any) -> Optional[Any]:
        with self._lock:
            return self._cache.put(key, value)
    
    def peek(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            return self._cache.peek(key)
    
    def contains(self, key: Hashable) -> bool:
        with self._lock:
            return self._cache.contains(key)
    
    def items(self) -> List[Tuple[Hashable, Any]]:
        """Snapshot of (key, value) pairs taken under the lock."""
        with self._lock:
            return list(self._cache.items())
    
    def clear(self):
        with self._lock:
            self._cache.clear()
    
    def size(self) -> int:
        with self._lock:
            return len(self._cache)
    
    def __len__(self) -> int:
        return self.size()
    
    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)
