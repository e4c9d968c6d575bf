'''Unit tests for checking whether relabelings of points are realized by rigid operations'''

__author__ = 'chemsym developers'

import pytest

import numpy as np

from chemsym.geometry.transforms.rigid import (
    relabeling_alignment,
    is_realized_by_proper_rotation,
    is_realized_by_improper_rotation,
)

SQUARE_PYRAMID = np.array([
    [ 1.0,  0.0, 0.0],
    [ 0.0,  1.0, 0.0],
    [-1.0,  0.0, 0.0],
    [ 0.0, -1.0, 0.0],
    [ 0.0,  0.0, 1.0],
])


def test_quarter_turn_is_proper() -> None:
    '''Test that cycling the base of a square pyramid is realized by a proper rotation'''
    assert is_realized_by_proper_rotation(SQUARE_PYRAMID, (3, 0, 1, 2, 4))

def test_base_reflection_is_improper() -> None:
    '''Test that exchanging two opposite base positions is a reflection, not a rotation'''
    relabeling = (0, 3, 2, 1, 4)
    assert not is_realized_by_proper_rotation(SQUARE_PYRAMID, relabeling)
    assert is_realized_by_improper_rotation(SQUARE_PYRAMID, relabeling)

def test_alignment_rotation_maps_points() -> None:
    '''Test that the alignment found takes the relabeled points onto the original ones'''
    relabeling = (1, 2, 3, 0, 4)
    rotation, rssd = relabeling_alignment(SQUARE_PYRAMID, relabeling)
    
    assert rssd == pytest.approx(0.0, abs=1E-6)
    np.testing.assert_allclose(rotation.apply(SQUARE_PYRAMID[list(relabeling)]), SQUARE_PYRAMID, atol=1E-6)

def test_collinear_relabeling() -> None:
    '''Test that relabelings of collinear points are handled without error'''
    linear = np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])
    assert is_realized_by_proper_rotation(linear, (1, 0))
