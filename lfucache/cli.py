import logging
import random

import click

from lfucache.cache.lfuCache import LFUCache
from lfucache.cache.lruCache import LRUCache
from lfucache.cache.randomTable import RandomTable
from lfucache.config import CacheConfig
from lfucache.logging_config import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    '--log-level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level (default: CACHE_LOG_LEVEL or INFO)'
)
@click.pass_context
def cli(ctx, log_level):
    """Bounded cache playground CLI"""
    config = CacheConfig.from_env()
    configure_logging(log_level or config.log_level)
    ctx.obj = config


def print_entries(cache):
    for key, value in cache.items():
        click.echo(f"{key}::{value}")


@cli.command('lfu-demo')
@click.option('--capacity', default=100, type=click.IntRange(min=1), help='Cache capacity')
@click.option('--count', default=1000, type=click.IntRange(min=0), help='Number of keys to insert')
@click.option('--hot', default=50, type=click.IntRange(min=0), help='Keys below this get one extra access')
def lfu_demo(capacity, count, hot):
    """Fills an LFU cache, reading the first keys once so they survive."""
    cache = LFUCache(capacity)
    for i in range(count):
        cache.put(i, f"value{i}")
        if i < hot:
            cache.get(i)
    logger.info("LFU cache holds %d of %d keys", len(cache), count)
    print_entries(cache)


@cli.command('lru-demo')
@click.option('--capacity', default=100, type=click.IntRange(min=1), help='Cache capacity')
@click.option('--count', default=2000, type=click.IntRange(min=0), help='Number of keys to insert')
@click.option('--lag', default=50, type=int, help='Read back the key inserted this many steps earlier')
def lru_demo(capacity, count, lag):
    """Fills an LRU cache while re-reading a trailing key."""
    cache = LRUCache(capacity)
    for i in range(count):
        cache.put(i, f"value{i}")
        cache.get(i - lag)
    logger.info("LRU cache holds %d of %d keys", len(cache), count)
    print_entries(cache)


@cli.command('random-demo')
@click.option('--count', default=100, type=click.IntRange(min=1), help='Number of keys to insert')
@click.option('--draws', default=50, type=click.IntRange(min=0), help='Random draws per round')
@click.option('--seed', default=None, type=int, help='Seed for reproducible draws')
def random_demo(count, draws, seed):
    """Samples a random table before and after deleting odd keys."""
    table = RandomTable(rng=random.Random(seed))
    for i in range(count):
        table.insert(i, f"value{i}")
    
    for _ in range(draws):
        click.echo(table.get_random())
    
    for i in range(1, count, 2):
        table.delete(i)
    logger.info("Deleted odd keys, %d remain", len(table))
    
    for _ in range(draws):
        click.echo(table.get_random())


@cli.command()
@click.pass_obj
def config(config):
    """Shows the cache configuration resolved from the environment."""
    for key, value in config.to_dict().items():
        click.echo(f"{key}: {value}")


if __name__ == '__main__':
    cli()
