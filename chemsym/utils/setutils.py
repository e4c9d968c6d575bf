'''
Utilities related to generic set-theoretic operations,
namely permutations of integer index sets and their inverses
'''

__author__ = 'chemsym developers'

from typing import Hashable, Iterable, Sequence, TypeVar
T = TypeVar('T')


class NotAPermutationError(ValueError):
    '''Raised when a sequence of indices fails to place a range of integers in 1-to-1 correspondence with itself'''
    pass


def is_permutation(indices : Iterable[int], n : int) -> bool:
    '''Whether a collection of integers contains each of 0, 1, ..., n - 1 exactly once'''
    indices = tuple(indices)
    return (len(indices) == n) and (set(indices) == set(range(n)))

def check_bijection(indices : Sequence[int], n : int) -> None:
    '''Check that a sequence of indices puts the integers 0, 1, ..., n - 1 into 1-to-1 correspondence with themselves'''
    if not is_permutation(indices, n):
        raise NotAPermutationError(f'Sequence {tuple(indices)} is not a permutation of the integers 0-{n - 1}')
    
def apply_permutation(sequence : Sequence[T], permutation : Sequence[int]) -> tuple[T, ...]:
    '''
    Rearrange the items of a sequence by an index permutation, 
    such that the k-th item of the result is the item at index permutation[k] of the original sequence
    '''
    return tuple(sequence[index] for index in permutation)

def inverse_permutation(permutation : Sequence[int]) -> tuple[int, ...]:
    '''The permutation which undoes the rearrangement of the given index permutation'''
    inverse = [0] * len(permutation)
    for i, index in enumerate(permutation):
        inverse[index] = i
        
    return tuple(inverse)

def pair_key(i : Hashable, j : Hashable) -> tuple:
    '''Order-independent hashable key for an unordered pair of comparable items'''
    return (i, j) if i <= j else (j, i)
