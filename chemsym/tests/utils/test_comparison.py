'''Unit tests for tolerance-based floating point comparison'''

__author__ = 'chemsym developers'

import pytest

from chemsym.utils.comparison import (
    FLOATING_POINT_EQUALITY_THRESHOLD,
    approximately_equal,
    approximate_minimizers,
)


@pytest.mark.parametrize(
    'a, b, expected',
    [
        (0.0, 0.0, True),
        (0.0, 1E-6, True),    # absolute comparison near zero
        (0.0, 1E-2, False),
        (1000.0, 1000.05, True), # relative comparison for large values
        (1000.0, 1001.0, False),
        (3.14159, 3.14160, True),
    ]
)
def test_approximately_equal(a : float, b : float, expected : bool) -> None:
    '''Test that floats are compared relatively, expanding to an absolute comparison near zero'''
    assert approximately_equal(a, b) == expected
    assert approximately_equal(b, a) == expected # symmetric
    
def test_approximate_minimizers_keeps_near_ties() -> None:
    '''Test that all items within tolerance of the minimum are kept, in their original order'''
    values = [3.0, 1.0, 1.0 + 1E-7, 2.0, 1.0 - 1E-7]
    assert approximate_minimizers(values, key=lambda x : x) == [1.0, 1.0 + 1E-7, 1.0 - 1E-7]

def test_approximate_minimizers_empty() -> None:
    '''Test that no minimizers are found among no items'''
    assert approximate_minimizers([], key=lambda x : x) == []
