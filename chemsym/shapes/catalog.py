'''Immutable, validated registry of idealized shapes and read-only accessors to their properties'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Iterable, Mapping, Union

import numpy as np

from .names import ShapeName, UnknownShapeError, Center, name_from_string
from .data import ShapeDefinition, SHAPE_DEFINITIONS, Tetrahedron
from .rotations import (
    MAX_ROTATION_PERIODICITY,
    rotation_periodicity,
    enumerate_rotation_closure,
)

from ..geometry.arraytypes import ArrayNx3, ArrayNxN
from ..geometry.measure import normalized, pairwise_angles
from ..utils.setutils import is_permutation
from ..utils.iteration import iota


# Custom Exceptions
class InvalidShapeError(ValueError):
    '''Raised when tabulated shape data violates the structural requirements of a Shape'''
    pass


class PositionIndexError(IndexError):
    '''Raised when a position index does not refer to any position of a shape'''
    pass


class ShapeSizeMismatchError(ValueError):
    '''Raised when the number of items supplied for a shape differs from the number of positions of that shape'''
    pass


@dataclass(frozen=True)
class Shape:
    '''
    An idealized arrangement of a fixed number of substituent positions around a central atom
    
    Instances are immutable; all arrays they hold are write-protected.
    Construct via Shape.from_definition() to have the underlying data validated
    '''
    name : ShapeName
    size : int
    point_group : str
    rotations : tuple[tuple[int, ...], ...]
    tetrahedra : tuple[Tetrahedron, ...]
    mirror : tuple[int, ...]
    coordinates : ArrayNx3 = field(repr=False, compare=False)
    angles : ArrayNxN = field(repr=False, compare=False)
    
    @classmethod
    def from_definition(cls, name : ShapeName, definition : ShapeDefinition) -> 'Shape':
        '''Validate tabulated shape data and build a Shape from it, deriving idealized angles from the coordinates'''
        size = definition.size
        if size < 1:
            raise InvalidShapeError(f'Shape "{name}" must have at least one position, not {size}')
        
        for rotation in definition.rotations:
            if not is_permutation(rotation, size):
                raise InvalidShapeError(f'Rotation {rotation} of shape "{name}" is not a permutation of its {size} positions')
            if (period := rotation_periodicity(rotation)) >= MAX_ROTATION_PERIODICITY:
                raise InvalidShapeError(f'Rotation {rotation} of shape "{name}" has periodicity {period}, exceeding the limit of {MAX_ROTATION_PERIODICITY}')
            
        if not is_permutation(definition.mirror, size):
            raise InvalidShapeError(f'Mirror {definition.mirror} of shape "{name}" is not a permutation of its {size} positions')
        
        for tetrahedron in definition.tetrahedra:
            if len(tetrahedron) != 4:
                raise InvalidShapeError(f'Tetrahedron {tetrahedron} of shape "{name}" does not have exactly 4 vertices')
            positions = [vertex for vertex in tetrahedron if not isinstance(vertex, Center)]
            if len(set(positions)) != len(positions) or (len(positions) < len(tetrahedron) - 1):
                raise InvalidShapeError(f'Tetrahedron {tetrahedron} of shape "{name}" has repeated vertices')
            if not all(isinstance(position, int) and (0 <= position < size) for position in positions):
                raise InvalidShapeError(f'Tetrahedron {tetrahedron} of shape "{name}" refers to positions outside of 0-{size - 1}')
            
        coordinates = np.array(definition.coordinates, dtype=float)
        if coordinates.shape != (size, 3):
            raise InvalidShapeError(f'Shape "{name}" must have {size} 3D coordinates, not array of shape {coordinates.shape}')
        coordinates = normalized(coordinates)
        coordinates.setflags(write=False)
        
        return cls(
            name=name,
            size=size,
            point_group=definition.point_group,
            rotations=tuple(tuple(rotation) for rotation in definition.rotations),
            tetrahedra=tuple(tuple(tetrahedron) for tetrahedron in definition.tetrahedra),
            mirror=tuple(definition.mirror),
            coordinates=coordinates,
            angles=pairwise_angles(coordinates),
        )
    
    def __str__(self) -> str:
        return str(self.name)
    
    def check_position(self, position : int) -> None:
        '''Raise PositionIndexError if the given index does not refer to a position of this shape'''
        if not (isinstance(position, (int, np.integer)) and (0 <= position < self.size)):
            raise PositionIndexError(f'Position {position!r} is out of range for {self.size}-position shape "{self.name}"')
        
    def check_size(self, items : Iterable, description : str='items') -> None:
        '''Raise ShapeSizeMismatchError if the number of items given does not match the number of positions'''
        if (n_items := len(tuple(items))) != self.size:
            raise ShapeSizeMismatchError(f'Expected {self.size} {description} for shape "{self.name}", got {n_items}')
        
    def angle(self, i : int, j : int) -> float:
        '''Idealized angle (in radians) between positions i and j'''
        self.check_position(i)
        self.check_position(j)
        
        return float(self.angles[i, j])
    
    @cached_property
    def rotation_group(self) -> frozenset[tuple[int, ...]]:
        '''Every distinct permutation of positions reachable by composing generator rotations, including the identity'''
        group = frozenset(enumerate_rotation_closure(self.rotations, iota(self.size)))
        LOGGER.debug(f'Rotation group of shape "{self.name}" has order {len(group)}')
        
        return group
    
    @property
    def minimum_angle(self) -> float:
        '''Smallest idealized angle between any pair of distinct positions'''
        if self.size < 2:
            return 0.0
        return float(np.min(self.angles[~np.eye(self.size, dtype=bool)]))
    
    @property
    def maximum_angle(self) -> float:
        '''Largest idealized angle between any pair of positions'''
        return float(np.max(self.angles))
    

# REGISTRY CONSTRUCTION
def _build_registry(definitions : Mapping[ShapeName, ShapeDefinition]) -> Mapping[ShapeName, Shape]:
    '''Validate all tabulated shape data and freeze it into a read-only mapping'''
    missing = set(ShapeName) - set(definitions)
    if missing:
        raise InvalidShapeError(f'No tabulated data provided for shapes {sorted(missing)}')
    
    registry = {
        shape_name : Shape.from_definition(shape_name, definitions[shape_name])
            for shape_name in ShapeName # preserve catalog order
    }
    LOGGER.info(f'Constructed catalog of {len(registry)} idealized shapes')
    
    return MappingProxyType(registry)

SHAPES : Mapping[ShapeName, Shape] = _build_registry(SHAPE_DEFINITIONS)


# ACCESSORS
ShapeLike = Union[Shape, ShapeName, str]

def as_shape(shape : ShapeLike) -> Shape:
    '''Resolve a catalog Shape from either a Shape, a ShapeName, or a human-readable shape name'''
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, str):
        shape = name_from_string(shape)
    if not isinstance(shape, ShapeName):
        raise UnknownShapeError(f'Cannot interpret object of type {type(shape).__name__} as a catalog shape')
    
    return SHAPES[shape]
shape_data = as_shape

def as_shape_name(shape : ShapeLike) -> ShapeName:
    '''Resolve the catalog ShapeName of either a Shape, a ShapeName, or a human-readable shape name'''
    return as_shape(shape).name

def size(shape : ShapeLike) -> int:
    '''Number of positions of a shape'''
    return as_shape(shape).size

def angle(shape : ShapeLike, i : int, j : int) -> float:
    '''Idealized angle (in radians) between two positions of a shape'''
    return as_shape(shape).angle(i, j)

def rotations(shape : ShapeLike) -> tuple[tuple[int, ...], ...]:
    '''Generator rotations of a shape, as position permutations'''
    return as_shape(shape).rotations

def tetrahedra(shape : ShapeLike) -> tuple[Tetrahedron, ...]:
    '''Chirality tetrahedra of a shape, whose vertices are positions or the CENTER marker'''
    return as_shape(shape).tetrahedra

def coordinates(shape : ShapeLike) -> ArrayNx3:
    '''Idealized unit-vector coordinates of a shape's positions (read-only)'''
    return as_shape(shape).coordinates

def mirror(shape : ShapeLike) -> tuple[int, ...]:
    '''Permutation taking each position of a shape to its mirror-image position'''
    return as_shape(shape).mirror

def name(shape : ShapeLike) -> str:
    '''Human-readable name of a shape'''
    return as_shape(shape).name.value

def point_group(shape : ShapeLike) -> str:
    '''Schoenflies symbol of the point group of a shape'''
    return as_shape(shape).point_group

def all_shapes_of_size(n : int) -> tuple[ShapeName, ...]:
    '''All shapes in the catalog with exactly n positions, in catalog order'''
    return tuple(shape_name for shape_name, shape in SHAPES.items() if shape.size == n)

def catalog_sizes() -> tuple[int, ...]:
    '''Distinct numbers of positions across all shapes in the catalog, ascending'''
    return tuple(sorted({shape.size for shape in SHAPES.values()}))
