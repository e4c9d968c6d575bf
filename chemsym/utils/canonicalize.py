'''Canonical presentations of objects which are equivalent under relabelings of shape positions'''

__author__ = 'chemsym developers'

from typing import Hashable, Iterable, Protocol, TypeVar, runtime_checkable
from collections import Counter
T = TypeVar('T')


@runtime_checkable
class Canonicalizable(Protocol):
    '''Object whose equivalent instances (e.g. rotations of one another) all share a single hashable canonical form'''
    def canonical_form(self) -> Hashable:
        ...

def least_presentation(presentations : Iterable[T]) -> T:
    '''
    The lexicographically-least of a collection of equivalent presentations of an object,
    e.g. the (characters, links) pairs of every rotation of a stereopermutation
    '''
    presentations = list(presentations)
    if not presentations:
        raise ValueError('Cannot select a canonical presentation from an empty collection')
    
    return min(presentations)

# multisets of characters
def character_counts(characters : Iterable[str]) -> tuple[tuple[str, int], ...]:
    '''Number of occurrences of each distinct character, in alphabetical order, e.g. AABAC -> (A, 3), (B, 1), (C, 1)'''
    return tuple(sorted(Counter(characters).items()))

def composition_string(
        characters : Iterable[str],
        separator : str=':',
        joiner : str='-',
    ) -> str:
    '''Compact presentation of the counts of each character in a multiset, e.g. "A:3-B:2-C:1" for AAABBC'''
    return joiner.join(
        f'{character}{separator}{count}'
            for character, count in character_counts(characters)
    )
