'''Tools for simplifying iteration over collections of items, including permutation generation'''

__author__ = 'chemsym developers'

from typing import Iterable, MutableSequence, TypeVar
T = TypeVar('T')


def iter_len(itera : Iterable[T]) -> int:
    '''
    Get number of elements in an iterable object, even if unsized (namely a generator)
    
    Note that this will "use up" an iterator on call, i.e. 
    DON'T call this on collections you intend to iterate over later
    '''
    return sum(1 for _  in itera)

def iota(n : int) -> tuple[int, ...]:
    '''The identity sequence (0, 1, ..., n - 1)'''
    return tuple(range(n))

def next_permutation(items : MutableSequence[T]) -> bool:
    '''
    Rearrange a mutable sequence in-place into the next lexicographically greater ordering of its elements
    
    Returns True if such an ordering exists; otherwise the sequence is wrapped around
    to its lexicographically smallest (i.e. sorted) ordering and False is returned.
    Elements which compare equal are never exchanged with one another, so that 
    cycling from the sorted ordering visits each distinct permutation of a multiset exactly once
    
    Parameters
    ----------
    items : MutableSequence[T]
        A sequence of mutually-comparable items, modified in-place
        
    Returns
    -------
    advanced : bool
        Whether a lexicographically greater permutation was produced
    '''
    n = len(items)
    if n < 2:
        return False
    
    # find the rightmost ascent (pivot), i.e. the longest non-increasing suffix begins after it
    i = n - 2
    while i >= 0 and not (items[i] < items[i + 1]):
        i -= 1
        
    if i < 0: # entire sequence is non-increasing; wrap around to the first permutation
        items.reverse()
        return False
    
    j = n - 1 # rightmost element strictly exceeding the pivot
    while not (items[i] < items[j]):
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1:] = reversed(items[i + 1:])
    
    return True
