"""Table with O(1) insert, delete and uniform random access."""

import random
from typing import Any, Dict, Hashable, Iterator, List, Optional


class RandomTable:
    """
    Key-value table supporting uniform random sampling.
    
    Keys are kept in a dense list and a map records each key's position,
    so deletion swaps the last key into the freed slot and pops.
    """
    
    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source (default: a fresh random.Random)
        """
        self._rng = rng or random.Random()
        self._values: Dict[Hashable, Any] = {}
        self._positions: Dict[Hashable, int] = {}
        self._keys: List[Hashable] = []
    
    def insert(self, key: Hashable, value: Any):
        """Insert a key, or overwrite its value in place if present."""
        if key not in self._positions:
            self._positions[key] = len(self._keys)
            self._keys.append(key)
        self._values[key] = value
    
    def delete(self, key: Hashable) -> bool:
        """
        Remove a key.
        
        Args:
            key: Key to remove
            
        Returns:
            True if the key was present
        """
        position = self._positions.pop(key, None)
        if position is None:
            return False
        last = self._keys.pop()
        if last != key:
            self._keys[position] = last
            self._positions[last] = position
        del self._values[key]
        return True
    
    def get(self, key: Hashable) -> Optional[Any]:
        return self._values.get(key)
    
    def random_key(self) -> Hashable:
        """
        Pick a key uniformly at random.
        
        Raises:
            KeyError: If the table is empty
        """
        if not self._keys:
            raise KeyError("random_key from an empty table")
        return self._keys[self._rng.randrange(len(self._keys))]
    
    def get_random(self) -> Any:
        """Value of a uniformly random key. Raises KeyError when empty."""
        return self._values[self.random_key()]
    
    def __contains__(self, key: Hashable) -> bool:
        return key in self._positions
    
    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._keys))
    
    def __len__(self) -> int:
        return len(self._keys)
