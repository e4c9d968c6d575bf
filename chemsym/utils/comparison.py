'''Tolerance-based comparison of floating-point quantities'''

__author__ = 'chemsym developers'

from typing import Callable, Iterable, TypeVar
T = TypeVar('T')


FLOATING_POINT_EQUALITY_THRESHOLD : float = 1E-4

def approximately_equal(
        a : float,
        b : float,
        tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD,
    ) -> bool:
    '''
    Relative equality of two floats, expanded to absolute equality for values near zero,
    i.e. |a - b| <= tolerance * max(1, |a|, |b|)
    '''
    return abs(a - b) <= tolerance * max(1.0, abs(a), abs(b))

def approximate_minimizers(
        items : Iterable[T],
        key : Callable[[T], float],
        tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD,
    ) -> list[T]:
    '''
    Select all items whose key value is approximately equal to the minimal key value among the items
    Relative order of the selected items is preserved; returns an empty list for an empty collection
    '''
    items = list(items)
    if not items:
        return []
    
    minimum = min(key(item) for item in items)
    return [
        item
            for item in items
                if approximately_equal(key(item), minimum, tolerance=tolerance)
    ]
