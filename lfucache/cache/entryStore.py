"""Key to (value, frequency) storage for the LFU cache."""

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, Optional, Tuple

from lfucache.errors import CacheInvariantError


@dataclass
class Entry:
    """A cached value and its access frequency."""
    
    value: Any
    frequency: int = 1


class EntryStore:
    """
    Maps each key to its Entry.
    
    Absence is reported as None. Removal is reserved for eviction.
    """
    
    def __init__(self):
        self._entries: Dict[Hashable, Entry] = {}
    
    def get(self, key: Hashable) -> Optional[Entry]:
        """
        Look up the live entry for a key.
        
        Args:
            key: Cache key
            
        Returns:
            Entry or None
        """
        return self._entries.get(key)
    
    def insert(self, key: Hashable, value: Any) -> Entry:
        """Create a fresh entry at frequency 1."""
        entry = Entry(value=value)
        self._entries[key] = entry
        return entry
    
    def insert_or_update(self, key: Hashable, value: Any) -> Entry:
        """
        Overwrite the value of an existing entry, or create a new one.
        
        The frequency of an existing entry is left untouched.
        
        Args:
            key: Cache key
            value: Value to store
            
        Returns:
            The live entry
        """
        entry = self._entries.get(key)
        if entry is None:
            return self.insert(key, value)
        entry.value = value
        return entry
    
    def remove(self, key: Hashable) -> Entry:
        try:
            return self._entries.pop(key)
        except KeyError:
            raise CacheInvariantError(f"Entry store has no key {key!r}") from None
    
    def items(self) -> Iterator[Tuple[Hashable, Entry]]:
        return iter(self._entries.items())
    
    def clear(self):
        self._entries.clear()
    
    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries
    
    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)
    
    def __len__(self) -> int:
        return len(self._entries)
