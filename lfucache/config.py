"""Cache configuration management."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from lfucache.errors import CacheConfigError

# Load .env from project root
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class CacheConfig:
    """Configuration for building a cache."""
    
    policy: str = "lfu"
    capacity: int = 100
    thread_safe: bool = False
    log_level: str = "INFO"
    
    @classmethod
    def from_env(cls) -> 'CacheConfig':
        """
        Create config from environment variables.
        
        Returns:
            CacheConfig instance
            
        Raises:
            CacheConfigError: If CACHE_CAPACITY is not an integer
        """
        capacity = os.getenv('CACHE_CAPACITY')
        if capacity is not None:
            try:
                capacity = int(capacity)
            except ValueError:
                raise CacheConfigError(
                    f"CACHE_CAPACITY must be an integer, got {capacity!r}"
                ) from None
        return cls(
            policy=os.getenv('CACHE_POLICY', 'lfu'),
            capacity=capacity if capacity is not None else 100,
            thread_safe=os.getenv('CACHE_THREAD_SAFE', '').strip().lower() in TRUTHY,
            log_level=os.getenv('CACHE_LOG_LEVEL', 'INFO'),
        )
    
    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            'policy': self.policy,
            'capacity': self.capacity,
            'thread_safe': self.thread_safe,
            'log_level': self.log_level,
        }
