"""In-memory bounded caches and supporting structures."""

from lfucache.cache.entryStore import Entry, EntryStore
from lfucache.cache.frequencyIndex import FrequencyIndex
from lfucache.cache.lfuCache import LFUCache
from lfucache.cache.lruCache import LRUCache
from lfucache.cache.randomTable import RandomTable
from lfucache.cache.synchronizedCache import SynchronizedCache

__all__ = [
    'Entry',
    'EntryStore',
    'FrequencyIndex',
    'LFUCache',
    'LRUCache',
    'RandomTable',
    'SynchronizedCache',
]
