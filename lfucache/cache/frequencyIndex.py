"""Frequency to key-set index used by the LFU cache."""

from typing import Dict, FrozenSet, Hashable, Iterator, Set

from lfucache.errors import CacheInvariantError


class FrequencyIndex:
    """
    Maps each frequency count to the set of keys at that frequency.
    
    Buckets are created lazily and deleted as soon as they become empty,
    so every frequency present in the index has at least one key.
    """
    
    def __init__(self):
        self._buckets: Dict[int, Set[Hashable]] = {}
    
    def add(self, freq: int, key: Hashable):
        """
        Add a key to the bucket for a frequency.
        
        Args:
            freq: Frequency count
            key: Cache key
        """
        bucket = self._buckets.get(freq)
        if bucket is None:
            bucket = self._buckets[freq] = set()
        bucket.add(key)
    
    def remove(self, freq: int, key: Hashable) -> bool:
        """
        Remove a key from the bucket for a frequency.
        
        Args:
            freq: Frequency count
            key: Cache key
            
        Returns:
            True if the bucket became empty and was deleted
            
        Raises:
            CacheInvariantError: If the key is not in that bucket
        """
        bucket = self._buckets.get(freq)
        if bucket is None or key not in bucket:
            raise CacheInvariantError(
                f"Key {key!r} is not in frequency bucket {freq}"
            )
        bucket.remove(key)
        if bucket:
            return False
        del self._buckets[freq]
        return True
    
    def pick_any(self, freq: int) -> Hashable:
        """
        Return an arbitrary key at a frequency.
        
        Raises:
            CacheInvariantError: If there is no bucket for freq
        """
        bucket = self._buckets.get(freq)
        if not bucket:
            raise CacheInvariantError(f"No keys at frequency {freq}")
        return next(iter(bucket))
    
    def keys_at(self, freq: int) -> FrozenSet[Hashable]:
        return frozenset(self._buckets.get(freq, ()))
    
    def frequencies(self) -> Iterator[int]:
        return iter(self._buckets)
    
    def clear(self):
        self._buckets.clear()
    
    def __contains__(self, freq: int) -> bool:
        return freq in self._buckets
    
    def __len__(self) -> int:
        return len(self._buckets)
