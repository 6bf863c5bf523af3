"""Tests for the LFU cache."""

import logging
import random

import pytest

from lfucache.cache.lfuCache import LFUCache
from lfucache.errors import CacheConfigError


def frequencies(cache):
    return {key: cache.frequency(key) for key, _ in cache.items()}


class TestConstruction:
    @pytest.mark.parametrize("capacity", [0, -1, 1.5, "3", True, None])
    def test_rejects_invalid_capacity(self, capacity):
        with pytest.raises(CacheConfigError):
            LFUCache(capacity)
    
    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            LFUCache(0)
    
    def test_empty_cache(self):
        cache = LFUCache(3)
        assert cache.capacity == 3
        assert len(cache) == 0
        assert cache.min_frequency is None
        assert cache.get("missing") is None
        cache.check_invariants()


class TestScenarios:
    def test_evicts_only_key_at_minimum(self):
        cache = LFUCache(2)
        assert cache.put(1, "a") is None
        assert cache.put(2, "b") is None
        assert frequencies(cache) == {1: 1, 2: 1}
        assert cache.min_frequency == 1
        
        assert cache.get(1) == "a"
        assert cache.frequency(1) == 2
        assert cache.min_frequency == 1
        
        assert cache.put(3, "c") is None
        assert set(k for k, _ in cache.items()) == {1, 3}
        assert cache.get(2) is None
        cache.check_invariants()
    
    def test_update_in_single_slot_cache(self):
        cache = LFUCache(1)
        assert cache.put(1, "a") is None
        assert cache.put(1, "b") == "a"
        assert len(cache) == 1
        assert cache.get(1) == "b"
        assert cache.frequency(1) == 3
    
    def test_new_key_evicts_in_single_slot_cache(self):
        cache = LFUCache(1)
        cache.put(1, "a")
        cache.get(1)
        cache.put(2, "b")
        assert 1 not in cache
        assert cache.get(2) == "b"
        assert cache.min_frequency == 2
        cache.check_invariants()
    
    def test_min_frequency_advances_when_minimum_bucket_empties(self):
        cache = LFUCache(3)
        cache.put("a", 1)
        cache.get("a")
        assert cache.min_frequency == 2
        cache.put("b", 2)
        assert cache.min_frequency == 1
        cache.get("b")
        assert cache.min_frequency == 2
        cache.check_invariants()
    
    def test_bump_above_minimum_keeps_minimum(self):
        cache = LFUCache(3)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.get("a")
        assert cache.min_frequency == 1
        cache.get("b")
        assert cache.min_frequency == 2
        assert frequencies(cache) == {"a": 3, "b": 2}
        cache.check_invariants()
    
    def test_put_on_existing_key_counts_as_access(self):
        cache = LFUCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 10)
        cache.put("c", 3)
        assert "b" not in cache
        assert cache.peek("a") == 10
    
    def test_hot_keys_survive_churn(self):
        cache = LFUCache(100)
        for i in range(1000):
            cache.put(i, f"value{i}")
            if i < 50:
                cache.get(i)
        assert len(cache) == 100
        for i in range(50):
            assert cache.contains(i)
        cache.check_invariants()
    
    def test_none_values(self):
        cache = LFUCache(2)
        cache.put("a", None)
        assert cache.contains("a")
        assert cache.get("a") is None
        assert cache.frequency("a") == 2


class TestReadOnlyAccess:
    def test_peek_and_contains_do_not_bump(self):
        cache = LFUCache(2)
        cache.put("a", 1)
        assert cache.peek("a") == 1
        assert "a" in cache
        assert cache.contains("a")
        assert cache.frequency("a") == 1
        assert cache.peek("b") is None
        assert cache.frequency("b") is None
    
    def test_items_do_not_bump(self):
        cache = LFUCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        assert dict(cache.items()) == {"a": 1, "b": 2}
        assert frequencies(cache) == {"a": 1, "b": 1}
    
    def test_repeated_get_adds_one_per_call(self):
        cache = LFUCache(4)
        cache.put("k", "v")
        before = cache.frequency("k")
        assert cache.get("k") == "v"
        assert cache.get("k") == "v"
        assert cache.frequency("k") == before + 2


def test_clear_resets_state():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.get("a")
    cache.clear()
    assert cache.size() == 0
    assert cache.min_frequency is None
    cache.put("b", 2)
    assert cache.min_frequency == 1
    cache.check_invariants()


def test_eviction_is_logged(caplog):
    cache = LFUCache(1)
    cache.put("a", 1)
    with caplog.at_level(logging.DEBUG, logger="lfucache.cache.lfuCache"):
        cache.put("b", 2)
    assert "Evicted key 'a'" in caplog.text


@pytest.mark.parametrize("seed", range(5))
def test_random_workload_preserves_invariants(seed):
    rng = random.Random(seed)
    capacity = rng.randint(1, 8)
    cache = LFUCache(capacity)
    last_seen = {}
    
    for step in range(2000):
        key = rng.randrange(20)
        before = frequencies(cache)
        before_min = cache.min_frequency
        
        if rng.random() < 0.5:
            previous = cache.put(key, step)
            if key in before:
                assert previous is not None
        else:
            cache.get(key)
        
        cache.check_invariants()
        assert len(cache) <= capacity
        
        after = frequencies(cache)
        evicted = set(before) - set(after)
        if evicted:
            assert key not in before
            assert len(before) == capacity
            assert len(evicted) == 1
            victim = evicted.pop()
            assert before[victim] == before_min == min(before.values())
        
        for k, freq in after.items():
            if k in last_seen and k in before:
                assert freq >= last_seen[k]
        last_seen = after
