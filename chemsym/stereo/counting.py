'''Counts of stereopermutations for substituents without links, used to decide whether a center is stereogenic'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from math import factorial
from string import ascii_uppercase

from .uniques import iter_unique_stereopermutations
from ..shapes.names import ShapeName
from ..shapes.catalog import ShapeLike, as_shape
from ..shapes.properties import rotation_group_order
from ..utils.containers import MinimalCache
from ..utils.iteration import iter_len


def unlinked_characters(shape : ShapeLike, n_identical : int) -> tuple[str, ...]:
    '''
    Characters for a shape in which a given number of substituents are identical and all others are mutually distinct,
    e.g. AAABCD for 3 identical substituents over a 6-position shape
    '''
    shape = as_shape(shape)
    if not (0 <= n_identical <= shape.size):
        raise ValueError(f'Number of identical substituents must be between 0 and {shape.size} for shape "{shape.name}", not {n_identical}')
    
    n_distinct = shape.size - n_identical
    identical = ('A',) * n_identical
    distinct = tuple(ascii_uppercase[1:n_distinct + 1])
    
    return identical + distinct

def num_unlinked_stereopermutations(shape : ShapeLike, n_identical : int) -> int:
    '''
    Number of rotationally-unique stereopermutations of a shape in which a given number
    of substituents are identical and all others are mutually distinct (and no substituents are linked)
    
    With at most one identical substituent, every rotation moves every arrangement,
    so the count is simply the number of arrangements divided by the rotation group order
    '''
    shape = as_shape(shape)
    if n_identical <= 1:
        unlinked_characters(shape, n_identical) # range check only
        return factorial(shape.size) // rotation_group_order(shape)
    
    return iter_len(iter_unique_stereopermutations(shape, unlinked_characters(shape, n_identical)))

def has_multiple_unlinked_stereopermutations(shape : ShapeLike, n_identical : int) -> bool:
    '''
    Whether more than one rotationally-unique stereopermutation exists for a shape in which a given number
    of substituents are identical and all others are mutually distinct (and no substituents are linked)
    
    Stops enumerating as soon as a second stereopermutation is found
    '''
    shape = as_shape(shape)
    characters = unlinked_characters(shape, n_identical)
    if n_identical == shape.size:
        return False # all substituents are identical, so only one arrangement can exist
    
    uniques = iter_unique_stereopermutations(shape, characters)
    next(uniques) # the first arrangement always constitutes a class of its own
    
    return next(uniques, None) is not None


class UnlinkedStereopermutationCache:
    '''
    Memoizes stereopermutation counts and stereogenicity checks for unlinked substituents, keyed by shape and number of identical substituents
    
    Intended to be owned by whichever component orchestrates many such queries; not safe for concurrent writes
    '''
    def __init__(self) -> None:
        self._counts : MinimalCache[tuple[ShapeName, int], int] = MinimalCache()
        self._multiples : MinimalCache[tuple[ShapeName, int], bool] = MinimalCache()
        
    def __len__(self) -> int:
        return len(self._counts) + len(self._multiples)
        
    def count(self, shape : ShapeLike, n_identical : int) -> int:
        '''Cached num_unlinked_stereopermutations()'''
        shape_name = as_shape(shape).name
        return self._counts.get_or_generate(
            (shape_name, n_identical),
            lambda : num_unlinked_stereopermutations(shape_name, n_identical),
        )
        
    def has_multiple(self, shape : ShapeLike, n_identical : int) -> bool:
        '''Cached has_multiple_unlinked_stereopermutations(), reusing a full count if one has already been made'''
        shape_name = as_shape(shape).name
        key = (shape_name, n_identical)
        if self._counts.has(key):
            return self._counts[key] > 1
        
        return self._multiples.get_or_generate(
            key,
            lambda : has_multiple_unlinked_stereopermutations(shape_name, n_identical),
        )
    
    def clear(self) -> None:
        '''Discard all memoized results'''
        LOGGER.debug(f'Clearing {len(self)} memoized unlinked stereopermutation results')
        self._counts.invalidate()
        self._multiples.invalidate()
