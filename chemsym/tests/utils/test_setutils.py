'''Unit tests for permutation and set-theoretic utilities'''

__author__ = 'chemsym developers'

import pytest

from chemsym.utils.setutils import (
    NotAPermutationError,
    is_permutation,
    check_bijection,
    apply_permutation,
    inverse_permutation,
    pair_key,
)


@pytest.mark.parametrize(
    'indices, n, expected',
    [
        ((0, 1, 2), 3, True),
        ((2, 0, 1), 3, True),
        ((0, 0, 1), 3, False), # repeated index
        ((0, 1, 3), 3, False), # out of range
        ((0, 1), 3, False),    # too short
        ((), 0, True),
    ]
)
def test_is_permutation(indices : tuple[int, ...], n : int, expected : bool) -> None:
    '''Test that permutations of index ranges are correctly recognized'''
    assert is_permutation(indices, n) == expected
    
@pytest.mark.xfail(
    reason='Repeated indices do not constitute a bijection',
    raises=NotAPermutationError,
    strict=True,
)
def test_check_bijection_fails() -> None:
    '''Test that non-bijective index sequences are rejected'''
    check_bijection((1, 1, 0), 3)

def test_apply_permutation() -> None:
    '''Test that the k-th item of a permuted sequence is drawn from the index given by the k-th permutation entry'''
    assert apply_permutation('abcd', (3, 0, 1, 2)) == ('d', 'a', 'b', 'c')

@pytest.mark.parametrize('permutation', [(0, 1, 2, 3), (3, 0, 1, 2), (1, 0, 3, 2), (2, 3, 1, 0)])
def test_inverse_permutation_restores(permutation : tuple[int, ...]) -> None:
    '''Test that applying a permutation and then its inverse restores the original sequence'''
    sequence = ('w', 'x', 'y', 'z')
    permuted = apply_permutation(sequence, permutation)
    
    assert apply_permutation(permuted, inverse_permutation(permutation)) == sequence

def test_pair_key_order_independent() -> None:
    '''Test that unordered pairs produce identical keys regardless of the order of their members'''
    assert pair_key(4, 1) == pair_key(1, 4) == (1, 4)
