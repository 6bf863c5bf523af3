"""Exceptions raised by the cache package."""


class CacheError(Exception):
    """Base class for all cache errors."""


class CacheConfigError(CacheError, ValueError):
    """Raised for invalid construction or configuration values."""


class CacheInvariantError(CacheError, AssertionError):
    """
    Raised when internal bookkeeping is inconsistent.
    
    This always indicates a bug in the cache, never a caller mistake.
    """
