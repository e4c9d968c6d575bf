'''Derived properties of catalog shapes, computed from their tabulated rotations, coordinates and angles'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from string import ascii_uppercase
from typing import Hashable, Iterable, Optional, Sequence, TypeVar
T = TypeVar('T', bound=Hashable)

import numpy as np

from .names import ShapeName, Center, name_index
from .data import Tetrahedron, TetrahedronVertex
from .catalog import SHAPES, Shape, ShapeLike, as_shape, all_shapes_of_size
from .rotations import apply_rotation, enumerate_rotation_closure

from ..geometry.arraytypes import Vector3
from ..geometry.coordinates.reference import ORIGIN3
from ..geometry.measure import tetrahedron_volume
from ..geometry.transforms.rigid import is_realized_by_proper_rotation, is_realized_by_improper_rotation


ANGLE_GROUPING_DECIMALS : int = 6 # number of decimal places (in radians) to which angles are compared when grouping positions

# ROTATIONAL ORBITS
def generate_all_rotations(shape : ShapeLike, sequence : Sequence[T]) -> set[tuple[T, ...]]:
    '''
    All distinct rearrangements of a sequence of per-position items reachable by rotating the shape,
    i.e. the orbit of that sequence under the shape's rotation group (the sequence itself included)
    '''
    shape = as_shape(shape)
    shape.check_size(sequence, description='position labels')
    
    return enumerate_rotation_closure(shape.rotations, sequence)

def rotation_group(shape : ShapeLike) -> frozenset[tuple[int, ...]]:
    '''Every position permutation realizable by a rotation of the shape, including the identity'''
    return as_shape(shape).rotation_group

def rotation_group_order(shape : ShapeLike) -> int:
    '''Number of distinct rotations of a shape'''
    return len(rotation_group(shape))

# ANGULAR PROPERTIES
def minimum_angle(shape : ShapeLike) -> float:
    '''Smallest idealized angle between two distinct positions of a shape'''
    return as_shape(shape).minimum_angle

def maximum_angle(shape : ShapeLike) -> float:
    '''Largest idealized angle between two positions of a shape'''
    return as_shape(shape).maximum_angle

def smallest_angle() -> float:
    '''Smallest idealized angle between distinct positions across all shapes in the catalog'''
    return min(shape.minimum_angle for shape in SHAPES.values())

def position_groups(shape : ShapeLike) -> tuple[str, ...]:
    '''
    Partition the positions of a shape into classes of positions with identical angular environments
    
    Each position is labelled by a character ('A', 'B', ...) assigned in order of first
    appearance of its sorted angles to all other positions, e.g. trigonal bipyramidal -> A A A B B
    '''
    shape = as_shape(shape)
    environments = [
        tuple(sorted(np.round(np.delete(shape.angles[i], i), decimals=ANGLE_GROUPING_DECIMALS)))
            for i in range(shape.size)
    ]
    
    characters : dict[tuple[float, ...], str] = {}
    for environment in environments:
        if environment not in characters:
            characters[environment] = ascii_uppercase[len(characters)]
            
    return tuple(characters[environment] for environment in environments)

def has_trans_position_pair(shape : ShapeLike, atol : float=1E-6) -> bool:
    '''Whether any two positions of a shape lie directly opposite one another'''
    return bool(np.any(np.isclose(as_shape(shape).angles, np.pi, rtol=0.0, atol=atol)))

# SELECTION
def most_symmetric(
        size : Optional[int]=None,
        selection : Optional[Iterable[ShapeName]]=None,
    ) -> ShapeName:
    '''
    The shape with the most generator rotations, chosen from an explicit selection of shapes
    if provided, or otherwise from all shapes of the given size (or the entire catalog if no size is given)
    
    Ties are broken in favor of the shape which appears earliest in the catalog
    '''
    if selection is not None:
        candidates = [as_shape(shape_name).name for shape_name in selection]
    elif size is not None:
        candidates = list(all_shapes_of_size(size))
    else:
        candidates = list(SHAPES.keys())
        
    if not candidates:
        raise ValueError(f'No shapes to select the most symmetric from (size={size}, selection={selection})')
    
    return max(
        candidates,
        key=lambda shape_name : (len(SHAPES[shape_name].rotations), -name_index(shape_name)),
    )

# CHIRALITY TETRAHEDRA
def vertex_coordinates(shape : ShapeLike, vertex : TetrahedronVertex) -> Vector3:
    '''Idealized coordinates of a tetrahedron vertex, which is either a position or the central atom'''
    if isinstance(vertex, Center):
        return ORIGIN3
    
    shape = as_shape(shape)
    shape.check_position(vertex)
    return shape.coordinates[vertex]

def signed_tetrahedron_volume(shape : ShapeLike, tetrahedron : Tetrahedron) -> float:
    '''Signed volume of a tetrahedron whose vertices are positions (or the center) of a shape, in idealized coordinates'''
    shape = as_shape(shape)
    return tetrahedron_volume(*(vertex_coordinates(shape, vertex) for vertex in tetrahedron))

# CONSISTENCY CHECKS
def rotation_preserves_angles(shape : ShapeLike, rotation : Sequence[int], atol : float=1E-8) -> bool:
    '''Whether applying a position permutation leaves all idealized angles of the shape unchanged'''
    shape = as_shape(shape)
    rotation = list(rotation)
    return bool(np.allclose(shape.angles, shape.angles[np.ix_(rotation, rotation)], rtol=0.0, atol=atol))

def rotation_is_proper(shape : ShapeLike, rotation : Sequence[int]) -> bool:
    '''Whether a position permutation is realized by a proper rotation of the idealized coordinates'''
    shape = as_shape(shape)
    return is_realized_by_proper_rotation(shape.coordinates, rotation)

def mirror_is_improper(shape : ShapeLike) -> bool:
    '''Whether the mirror permutation of a shape is realized by a reflection of its idealized coordinates'''
    shape = as_shape(shape)
    return is_realized_by_improper_rotation(shape.coordinates, shape.mirror)

def inconsistencies(shape : ShapeLike) -> list[str]:
    '''
    Descriptions of every way in which the tabulated combinatorial data of a shape
    disagrees with its idealized coordinates; empty for a consistent shape
    '''
    shape = as_shape(shape)
    problems = []
    for rotation in shape.rotations:
        if not rotation_preserves_angles(shape, rotation):
            problems.append(f'rotation {rotation} does not preserve angles')
        if not rotation_is_proper(shape, rotation):
            problems.append(f'rotation {rotation} is not realized by a proper rotation')
            
    if apply_rotation(shape.mirror, shape.mirror) != tuple(range(shape.size)):
        problems.append(f'mirror {shape.mirror} is not an involution')
    if not rotation_preserves_angles(shape, shape.mirror):
        problems.append(f'mirror {shape.mirror} does not preserve angles')
    if not mirror_is_improper(shape):
        problems.append(f'mirror {shape.mirror} is not realized by a reflection')
        
    for tetrahedron in shape.tetrahedra:
        if (volume := signed_tetrahedron_volume(shape, tetrahedron)) < 0.0:
            problems.append(f'tetrahedron {tetrahedron} has negative volume {volume}')
            
    for problem in problems:
        LOGGER.debug(f'Shape "{shape.name}": {problem}')
    
    return problems
