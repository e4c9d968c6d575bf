'''Unit tests for counting stereopermutations of unlinked substituents'''

__author__ = 'chemsym developers'

import pytest

from math import factorial

from chemsym.shapes import ShapeName
from chemsym.shapes.properties import rotation_group_order
from chemsym.stereo import (
    UnlinkedStereopermutationCache,
    num_unlinked_stereopermutations,
    has_multiple_unlinked_stereopermutations,
)
from chemsym.stereo.counting import unlinked_characters
from chemsym.stereo.uniques import iter_unique_stereopermutations
from chemsym.utils.iteration import iter_len


def test_unlinked_characters() -> None:
    '''Test generation of characters with a given number of identical substituents'''
    assert unlinked_characters(ShapeName.OCTAHEDRAL, 3) == ('A', 'A', 'A', 'B', 'C', 'D')
    assert unlinked_characters(ShapeName.TETRAHEDRAL, 0) == ('B', 'C', 'D', 'E')
    assert unlinked_characters(ShapeName.LINEAR, 2) == ('A', 'A')

@pytest.mark.parametrize('n_identical', [-1, 7])
def test_unlinked_characters_out_of_range(n_identical : int) -> None:
    '''Test that numbers of identical substituents exceeding the shape size are rejected'''
    with pytest.raises(ValueError):
        unlinked_characters(ShapeName.OCTAHEDRAL, n_identical)

@pytest.mark.parametrize(
    'shape_name, n_identical, expected_count',
    [
        (ShapeName.LINEAR, 0, 1),
        (ShapeName.T_SHAPED, 0, 3),
        (ShapeName.CUT_TETRAHEDRAL, 0, 2),
        (ShapeName.TETRAHEDRAL, 0, 2),
        (ShapeName.SQUARE_PLANAR, 0, 3),
        (ShapeName.OCTAHEDRAL, 0, 30),
        (ShapeName.TETRAHEDRAL, 1, 2),
        (ShapeName.TETRAHEDRAL, 2, 1),
        (ShapeName.OCTAHEDRAL, 4, 2),
        (ShapeName.OCTAHEDRAL, 6, 1),
    ]
)
def test_num_unlinked_stereopermutations(shape_name : ShapeName, n_identical : int, expected_count : int) -> None:
    '''Test counts of stereopermutations for partially identical substituents'''
    assert num_unlinked_stereopermutations(shape_name, n_identical) == expected_count

@pytest.mark.parametrize('shape_name', [ShapeName.LINEAR, ShapeName.TETRAHEDRAL, ShapeName.SQUARE_PLANAR, ShapeName.OCTAHEDRAL])
def test_all_distinct_count_matches_group_order(shape_name : ShapeName) -> None:
    '''Test that fully distinct substituents over a shape yield size! / |rotation group| stereopermutations'''
    size = len(unlinked_characters(shape_name, 0))
    assert num_unlinked_stereopermutations(shape_name, 0) == factorial(size) // rotation_group_order(shape_name)

@pytest.mark.parametrize('n_identical', [0, 1])
@pytest.mark.parametrize('shape_name', [ShapeName.BENT, ShapeName.TRIGONAL_BIPYRAMIDAL, ShapeName.SQUARE_PYRAMIDAL, ShapeName.OCTAHEDRAL])
def test_distinct_count_agrees_with_enumeration(shape_name : ShapeName, n_identical : int) -> None:
    '''Test that the group order shortcut for distinct substituents agrees with explicit enumeration'''
    enumerated = iter_len(iter_unique_stereopermutations(shape_name, unlinked_characters(shape_name, n_identical)))
    assert num_unlinked_stereopermutations(shape_name, n_identical) == enumerated

@pytest.mark.parametrize(
    'shape_name, n_identical, expected',
    [
        (ShapeName.TETRAHEDRAL, 0, True),
        (ShapeName.TETRAHEDRAL, 2, False),
        (ShapeName.TETRAHEDRAL, 4, False),
        (ShapeName.OCTAHEDRAL, 4, True),
        (ShapeName.OCTAHEDRAL, 5, False),
        (ShapeName.LINEAR, 0, False),
    ]
)
def test_has_multiple(shape_name : ShapeName, n_identical : int, expected : bool) -> None:
    '''Test early-exiting check for stereogenicity'''
    assert has_multiple_unlinked_stereopermutations(shape_name, n_identical) == expected
    assert expected == (num_unlinked_stereopermutations(shape_name, n_identical) > 1)

# caching
def test_cache_count() -> None:
    '''Test that counts are memoized by shape and number of identical substituents'''
    cache = UnlinkedStereopermutationCache()
    assert cache.count(ShapeName.OCTAHEDRAL, 4) == 2
    assert len(cache) == 1
    
    assert cache.count('octahedral', 4) == 2 # resolved to the same key
    assert len(cache) == 1

def test_cache_has_multiple_reuses_count() -> None:
    '''Test that stereogenicity checks are answered from an existing count where possible'''
    cache = UnlinkedStereopermutationCache()
    cache.count(ShapeName.TETRAHEDRAL, 0)
    
    assert cache.has_multiple(ShapeName.TETRAHEDRAL, 0)
    assert len(cache) == 1
    
    assert not cache.has_multiple(ShapeName.TETRAHEDRAL, 3)
    assert len(cache) == 2

def test_cache_clear() -> None:
    '''Test that clearing the cache discards all memoized results'''
    cache = UnlinkedStereopermutationCache()
    cache.count(ShapeName.SQUARE_PLANAR, 0)
    cache.has_multiple(ShapeName.SQUARE_PLANAR, 2)
    cache.clear()
    
    assert len(cache) == 0
