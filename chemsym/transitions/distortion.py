'''
Measures of how strongly an index mapping between two shapes distorts idealized geometry

Mappings are indexed by the first of the two shapes passed, i.e. index_mapping[i] is the position
of the second shape which position i of the first shape is mapped onto
'''

__author__ = 'chemsym developers'

from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

import numpy as np

from ..shapes.names import Center
from ..shapes.data import Tetrahedron
from ..shapes.catalog import Shape, ShapeLike, as_shape, PositionIndexError
from ..shapes.properties import signed_tetrahedron_volume


@dataclass(frozen=True)
class DistortionInfo:
    '''An index mapping between two shapes, along with the angular and chiral distortion it incurs'''
    index_mapping : tuple[int, ...]
    angular_distortion : float
    chiral_distortion : float


@lru_cache(maxsize=None)
def _upper_triangle_indices(n : int) -> tuple[np.ndarray, np.ndarray]:
    return np.triu_indices(n, k=1)

def _check_mapping(shape_from : Shape, shape_to : Shape, index_mapping : Sequence[int]) -> np.ndarray:
    '''Ensure an index mapping covers all positions common to both shapes and targets only positions of the second shape'''
    n_common = min(shape_from.size, shape_to.size)
    mapping = np.asarray(index_mapping, dtype=int)
    if mapping.ndim != 1 or mapping.size < n_common:
        raise PositionIndexError(f'Index mapping {tuple(index_mapping)} must map at least {n_common} positions')
    if np.any(mapping[:n_common] < 0) or np.any(mapping[:n_common] >= shape_to.size):
        raise PositionIndexError(f'Index mapping {tuple(index_mapping)} refers to positions outside of "{shape_to.name}"')
    
    return mapping

def angular_distortion(shape_from : ShapeLike, shape_to : ShapeLike, index_mapping : Sequence[int]) -> float:
    '''
    Sum of absolute differences between idealized angles of the first shape and the angles between
    the positions of the second shape onto which they are mapped, over all pairs of positions common to both shapes
    '''
    shape_from, shape_to = as_shape(shape_from), as_shape(shape_to)
    mapping = _check_mapping(shape_from, shape_to, index_mapping)
    
    rows, cols = _upper_triangle_indices(min(shape_from.size, shape_to.size))
    return float(np.sum(np.abs(
        shape_from.angles[rows, cols] - shape_to.angles[mapping[rows], mapping[cols]]
    )))

def map_tetrahedron(tetrahedron : Tetrahedron, index_mapping : Sequence[int]) -> Tetrahedron:
    '''Translate the position vertices of a tetrahedron through an index mapping, leaving the center in place'''
    return tuple(
        vertex if isinstance(vertex, Center) else int(index_mapping[vertex])
            for vertex in tetrahedron
    )

def chiral_distortion(shape_from : ShapeLike, shape_to : ShapeLike, index_mapping : Sequence[int]) -> float:
    '''
    Sum of absolute differences between the signed volumes of each chirality tetrahedron of
    the first shape and the volume of that tetrahedron's image under the mapping in the second shape
    '''
    shape_from, shape_to = as_shape(shape_from), as_shape(shape_to)
    mapping = _check_mapping(shape_from, shape_to, index_mapping)
    
    return float(sum(
        abs(
            signed_tetrahedron_volume(shape_from, tetrahedron)
            - signed_tetrahedron_volume(shape_to, map_tetrahedron(tetrahedron, mapping))
        )
            for tetrahedron in shape_from.tetrahedra
    ))

def distortion_info(shape_from : ShapeLike, shape_to : ShapeLike, index_mapping : Sequence[int]) -> DistortionInfo:
    '''Score an index mapping by both its angular and chiral distortion'''
    return DistortionInfo(
        index_mapping=tuple(int(index) for index in index_mapping),
        angular_distortion=angular_distortion(shape_from, shape_to, index_mapping),
        chiral_distortion=chiral_distortion(shape_from, shape_to, index_mapping),
    )
