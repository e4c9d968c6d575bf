'''Unit tests for memoization of transition mappings'''

__author__ = 'chemsym developers'

import pytest

from chemsym.shapes import ShapeName
from chemsym.transitions import TransitionMappingCache, shape_transition_mapping


@pytest.fixture
def cache() -> TransitionMappingCache:
    return TransitionMappingCache()


def test_mapping_memoized(cache : TransitionMappingCache) -> None:
    '''Test that repeated requests for the same transition are served from a single computation'''
    first = cache.mapping(ShapeName.LINEAR, ShapeName.T_SHAPED)
    second = cache.mapping('linear', 'T-shaped')
    
    assert first is second
    assert len(cache) == 1
    assert (ShapeName.LINEAR, ShapeName.T_SHAPED, None) in cache

def test_mapping_matches_uncached(cache : TransitionMappingCache) -> None:
    '''Test that cached mappings are identical to freshly-computed ones'''
    assert cache.mapping(ShapeName.TETRAHEDRAL, ShapeName.CUT_TETRAHEDRAL, 0) == shape_transition_mapping(
        ShapeName.TETRAHEDRAL,
        ShapeName.CUT_TETRAHEDRAL,
        removed_position=0,
    )

def test_removed_position_keys_distinct(cache : TransitionMappingCache) -> None:
    '''Test that losses of different positions are memoized separately'''
    cache.mapping(ShapeName.TETRAHEDRAL, ShapeName.CUT_TETRAHEDRAL, 0)
    cache.mapping(ShapeName.TETRAHEDRAL, ShapeName.CUT_TETRAHEDRAL, 1)
    
    assert len(cache) == 2
    assert cache.key_for('tetrahedral', 'cut tetrahedral', 1) in cache
    assert cache.key_for(ShapeName.TETRAHEDRAL, ShapeName.CUT_TETRAHEDRAL, 2) not in cache

def test_failed_mapping_not_stored(cache : TransitionMappingCache) -> None:
    '''Test that transitions which cannot be computed leave no entry behind'''
    with pytest.raises(ValueError):
        cache.mapping(ShapeName.LINEAR, ShapeName.OCTAHEDRAL)
    assert len(cache) == 0

def test_clear(cache : TransitionMappingCache) -> None:
    '''Test that clearing discards all memoized mappings'''
    cache.mapping(ShapeName.LINEAR, ShapeName.BENT)
    cache.clear()
    
    assert len(cache) == 0
    assert (ShapeName.LINEAR, ShapeName.BENT, None) not in cache
