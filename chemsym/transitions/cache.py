'''Memoization of shape transition mappings, owned explicitly by whichever component makes repeated queries'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Optional

from .mappings import SymmetryTransitionGroup, shape_transition_mapping
from ..shapes.names import ShapeName
from ..shapes.catalog import ShapeLike, as_shape_name
from ..utils.comparison import FLOATING_POINT_EQUALITY_THRESHOLD
from ..utils.containers import MinimalCache


TransitionKey = tuple[ShapeName, ShapeName, Optional[int]]

class TransitionMappingCache:
    '''
    Get-or-compute store of best transition mappings, keyed by source shape, target shape, and removed position (if any)
    
    The key space is small and bounded by the catalog, so entries are never evicted;
    not safe for concurrent writes without external locking
    '''
    def __init__(self, tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD) -> None:
        self.tolerance = tolerance
        self._mappings : MinimalCache[TransitionKey, SymmetryTransitionGroup] = MinimalCache()
        
    def __len__(self) -> int:
        return len(self._mappings)
    
    def __contains__(self, key : TransitionKey) -> bool:
        return self._mappings.has(key)
    
    def key_for(self, shape_from : ShapeLike, shape_to : ShapeLike, removed_position : Optional[int]=None) -> TransitionKey:
        return (as_shape_name(shape_from), as_shape_name(shape_to), removed_position)
        
    def mapping(
            self,
            shape_from : ShapeLike,
            shape_to : ShapeLike,
            removed_position : Optional[int]=None,
        ) -> SymmetryTransitionGroup:
        '''Best index mappings for a single-step transition between shapes, computed at most once per key'''
        key = self.key_for(shape_from, shape_to, removed_position)
        shape_from_name, shape_to_name, _ = key
        
        return self._mappings.get_or_generate(
            key,
            lambda : shape_transition_mapping(shape_from_name, shape_to_name, removed_position=removed_position, tolerance=self.tolerance),
        )
    
    def clear(self) -> None:
        '''Discard all memoized mappings'''
        LOGGER.debug(f'Clearing {len(self._mappings)} memoized transition mappings')
        self._mappings.invalidate()
