'''Custom data containers with useful properties'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Callable, Generic, Hashable, TypeVar
from collections import UserDict


KeyT = TypeVar('KeyT', bound=Hashable)
ValueT = TypeVar('ValueT')

class MinimalCache(UserDict, Generic[KeyT, ValueT]):
    '''
    A dict with get-or-generate semantics: values are computed by a supplied
    generator callable on first request and stored (without eviction) for all subsequent requests
    '''
    def get_or_generate(self, key : KeyT, generator : Callable[[], ValueT]) -> ValueT:
        '''Fetch the value stored under key, computing and storing it by calling "generator" if absent'''
        if key in self.data:
            return self.data[key]
        
        LOGGER.debug(f'Cache miss for key {key!r}; generating value')
        value = generator()
        self.data[key] = value
        
        return value
    
    def has(self, key : KeyT) -> bool:
        '''Whether a value has already been generated for the given key'''
        return key in self.data
    
    def invalidate(self) -> None:
        '''Discard all stored values'''
        self.data.clear()
