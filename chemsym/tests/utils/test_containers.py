'''Unit tests for containers module'''

__author__ = 'chemsym developers'

import pytest

from chemsym.utils.containers import MinimalCache


@pytest.fixture
def counting_generator():
    '''A value generator which records how many times it has been called'''
    calls = []
    def generator() -> int:
        calls.append(None)
        return 42
    generator.calls = calls
    
    return generator

def test_minimal_cache_generates_once(counting_generator) -> None:
    '''Test that a value is generated only on the first request for its key'''
    cache = MinimalCache()
    first = cache.get_or_generate('key', counting_generator)
    second = cache.get_or_generate('key', counting_generator)
    
    assert first == second == 42
    assert len(counting_generator.calls) == 1

def test_minimal_cache_distinct_keys(counting_generator) -> None:
    '''Test that values are generated separately for each distinct key'''
    cache = MinimalCache()
    cache.get_or_generate(('a', 1), counting_generator)
    cache.get_or_generate(('a', 2), counting_generator)
    
    assert len(counting_generator.calls) == 2
    assert cache.has(('a', 1)) and cache.has(('a', 2))
    assert not cache.has(('a', 3))

def test_minimal_cache_invalidate(counting_generator) -> None:
    '''Test that invalidation forces regeneration'''
    cache = MinimalCache()
    cache.get_or_generate('key', counting_generator)
    cache.invalidate()
    
    assert len(cache) == 0
    cache.get_or_generate('key', counting_generator)
    assert len(counting_generator.calls) == 2
