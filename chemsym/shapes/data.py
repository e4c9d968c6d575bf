'''
Raw tabulated definitions of each idealized shape in the catalog

Rotations are generators of each shape's rotation group, written as position permutations;
applying rotation r to a sequence s produces t, where t[k] = s[r[k]]

Tetrahedra are ordered so that their signed volumes are non-negative in the idealized coordinates;
the CENTER marker stands in for the central atom
'''

__author__ = 'chemsym developers'

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .names import ShapeName, Center, CENTER
from ..geometry.arraytypes import ArrayNx3


TetrahedronVertex = Union[int, Center]
Tetrahedron = tuple[TetrahedronVertex, TetrahedronVertex, TetrahedronVertex, TetrahedronVertex]

@dataclass(frozen=True)
class ShapeDefinition:
    '''Unvalidated tabular data from which a catalog Shape is constructed'''
    size : int
    point_group : str
    rotations : tuple[tuple[int, ...], ...]
    tetrahedra : tuple[Tetrahedron, ...]
    mirror : tuple[int, ...]
    coordinates : ArrayNx3 = field(repr=False, compare=False)


# idealized coordinate construction
BENT_ANGLE : float = np.radians(107.0)
TRIGONAL_PRISM_ECLIPSED_ANGLE : float = np.radians(76.0)

def _regular_polygon(n : int, radius : float=1.0, height : float=0.0, phase : float=0.0) -> ArrayNx3:
    '''Points of a regular n-gon parallel to the xy-plane, ordered counterclockwise starting from "phase"'''
    azimuths = phase + 2*np.pi*np.arange(n) / n
    return np.column_stack([
        radius*np.cos(azimuths),
        radius*np.sin(azimuths),
        np.full(n, height),
    ])

def _with_apices(base : ArrayNx3, *apices : tuple[float, float, float]) -> ArrayNx3:
    return np.vstack([base, np.array(apices, dtype=float).reshape(-1, 3)])

def _tetrahedral_coordinates() -> ArrayNx3:
    '''Apex on the z-axis followed by the three basal vertices'''
    return _with_apices(
        np.array([[0.0, 0.0, 1.0]]),
        *_regular_polygon(3, radius=np.sqrt(8/9), height=-1/3),
    )

def _trigonal_prism_coordinates() -> ArrayNx3:
    '''Lower triangle followed by the eclipsed upper triangle'''
    cosine = np.cos(TRIGONAL_PRISM_ECLIPSED_ANGLE)  # eclipsed pair cosine = r^2 - h^2 and r^2 + h^2 = 1
    radius, height = np.sqrt((1 + cosine) / 2), np.sqrt((1 - cosine) / 2)
    return np.vstack([
        _regular_polygon(3, radius=radius, height=-height),
        _regular_polygon(3, radius=radius, height=height),
    ])

def _square_antiprism_coordinates() -> ArrayNx3:
    '''
    Upper square (positions 0-3) staggered by 45 degrees against the lower square (positions 4-7),
    with all edges of equal length
    '''
    radius_sq = 1 / (1 + np.sqrt(2)/4) # equal edges <=> h^2 = (sqrt(2) / 4) r^2
    radius, height = np.sqrt(radius_sq), np.sqrt(1 - radius_sq)
    return np.vstack([
        _regular_polygon(4, radius=radius, height=height, phase=3*np.pi/4),
        _regular_polygon(4, radius=radius, height=-height, phase=np.pi),
    ])


SHAPE_DEFINITIONS : dict[ShapeName, ShapeDefinition] = {
    ShapeName.LINEAR : ShapeDefinition(
        size=2,
        point_group='Dinfh',
        rotations=((1, 0),),
        tetrahedra=(),
        mirror=(0, 1),
        coordinates=np.array([
            [ 1.0, 0.0, 0.0],
            [-1.0, 0.0, 0.0],
        ]),
    ),
    ShapeName.BENT : ShapeDefinition(
        size=2,
        point_group='C2v',
        rotations=((1, 0),),
        tetrahedra=(),
        mirror=(0, 1),
        coordinates=np.array([
            [1.0, 0.0, 0.0],
            [np.cos(BENT_ANGLE), np.sin(BENT_ANGLE), 0.0],
        ]),
    ),
    ShapeName.TRIGONAL_PLANAR : ShapeDefinition(
        size=3,
        point_group='D3h',
        rotations=(
            (1, 2, 0), # C3
            (0, 2, 1), # C2 through 0
        ),
        tetrahedra=(),
        mirror=(0, 1, 2),
        coordinates=_regular_polygon(3),
    ),
    ShapeName.CUT_TETRAHEDRAL : ShapeDefinition(
        size=3,
        point_group='C3v',
        rotations=((2, 0, 1),),
        tetrahedra=((CENTER, 0, 1, 2),),
        mirror=(0, 2, 1),
        coordinates=_tetrahedral_coordinates()[1:], # tetrahedron with its apex vacant
    ),
    ShapeName.T_SHAPED : ShapeDefinition(
        size=3,
        point_group='C2v',
        rotations=((2, 1, 0),),
        tetrahedra=(),
        mirror=(0, 1, 2),
        coordinates=np.array([
            [-1.0, 0.0, 0.0],
            [ 0.0, 1.0, 0.0],
            [ 1.0, 0.0, 0.0],
        ]),
    ),
    ShapeName.TETRAHEDRAL : ShapeDefinition(
        size=4,
        point_group='Td',
        rotations=( # C3 about each vertex
            (0, 3, 1, 2),
            (2, 1, 3, 0),
            (3, 0, 2, 1),
            (1, 2, 0, 3),
        ),
        tetrahedra=((0, 1, 2, 3),),
        mirror=(0, 1, 3, 2),
        coordinates=_tetrahedral_coordinates(),
    ),
    ShapeName.SQUARE_PLANAR : ShapeDefinition(
        size=4,
        point_group='D4h',
        rotations=(
            (3, 0, 1, 2), # C4
            (1, 0, 3, 2), # C2 between 0 and 1
            (3, 2, 1, 0), # C2 between 0 and 3
        ),
        tetrahedra=(),
        mirror=(0, 1, 2, 3),
        coordinates=np.array([
            [ 1.0,  0.0, 0.0],
            [ 0.0,  1.0, 0.0],
            [-1.0,  0.0, 0.0],
            [ 0.0, -1.0, 0.0],
        ]),
    ),
    ShapeName.SEESAW : ShapeDefinition(
        size=4,
        point_group='C2v',
        rotations=((3, 2, 1, 0),),
        tetrahedra=(
            (CENTER, 0, 1, 2),
            (3, CENTER, 1, 2),
        ),
        mirror=(0, 2, 1, 3),
        coordinates=np.array([ # trigonal bipyramid with one equatorial position vacant; 0 and 3 are axial
            [-1.0,  0.0,  0.0],
            [ 0.0, -0.5,  np.sqrt(3)/2],
            [ 0.0, -0.5, -np.sqrt(3)/2],
            [ 1.0,  0.0,  0.0],
        ]),
    ),
    ShapeName.TRIGONAL_PYRAMIDAL : ShapeDefinition(
        size=4,
        point_group='C3v',
        rotations=((2, 0, 1, 3),),
        tetrahedra=((0, 1, 3, 2),),
        mirror=(0, 2, 1, 3),
        coordinates=_with_apices(_regular_polygon(3), (0.0, 0.0, 1.0)), # trigonal bipyramid with one axial position vacant
    ),
    ShapeName.SQUARE_PYRAMIDAL : ShapeDefinition(
        size=5,
        point_group='C4v',
        rotations=((3, 0, 1, 2, 4),),
        tetrahedra=(
            (0, 1, 4, CENTER),
            (1, 2, 4, CENTER),
            (2, 3, 4, CENTER),
            (3, 0, 4, CENTER),
        ),
        mirror=(0, 3, 2, 1, 4),
        coordinates=np.array([
            [ 1.0,  0.0, 0.0],
            [ 0.0,  1.0, 0.0],
            [-1.0,  0.0, 0.0],
            [ 0.0, -1.0, 0.0],
            [ 0.0,  0.0, 1.0],
        ]),
    ),
    ShapeName.TRIGONAL_BIPYRAMIDAL : ShapeDefinition(
        size=5,
        point_group='D3h',
        rotations=(
            (2, 0, 1, 3, 4), # C3 about the axial positions
            (0, 2, 1, 4, 3), # C2 through 0
            (2, 1, 0, 4, 3), # C2 through 1
            (1, 0, 2, 4, 3), # C2 through 2
        ),
        tetrahedra=(
            (0, 1, 3, 2),
            (0, 1, 2, 4),
        ),
        mirror=(0, 1, 2, 4, 3),
        coordinates=_with_apices(_regular_polygon(3), (0.0, 0.0, 1.0), (0.0, 0.0, -1.0)),
    ),
    ShapeName.PENTAGONAL_PLANAR : ShapeDefinition(
        size=5,
        point_group='D5h',
        rotations=(
            (4, 0, 1, 2, 3), # C5
            (0, 4, 3, 2, 1), # C2 through 0
        ),
        tetrahedra=(),
        mirror=(0, 1, 2, 3, 4),
        coordinates=_regular_polygon(5),
    ),
    ShapeName.OCTAHEDRAL : ShapeDefinition(
        size=6,
        point_group='Oh',
        rotations=( # C4 about each axis
            (3, 0, 1, 2, 4, 5),
            (0, 5, 2, 4, 1, 3),
            (4, 1, 5, 3, 2, 0),
        ),
        tetrahedra=(
            (3, 0, 4, CENTER),
            (0, 1, 4, CENTER),
            (1, 2, 4, CENTER),
            (2, 3, 4, CENTER),
            (3, 0, CENTER, 5),
            (0, 1, CENTER, 5),
            (1, 2, CENTER, 5),
            (2, 3, CENTER, 5),
        ),
        mirror=(0, 3, 2, 1, 4, 5),
        coordinates=np.array([
            [ 1.0,  0.0,  0.0],
            [ 0.0,  1.0,  0.0],
            [-1.0,  0.0,  0.0],
            [ 0.0, -1.0,  0.0],
            [ 0.0,  0.0,  1.0],
            [ 0.0,  0.0, -1.0],
        ]),
    ),
    ShapeName.TRIGONAL_PRISMATIC : ShapeDefinition(
        size=6,
        point_group='D3h',
        rotations=(
            (2, 0, 1, 5, 3, 4), # C3 about the prism axis
            (5, 4, 3, 2, 1, 0), # C2 between 1 and 4
        ),
        tetrahedra=(
            (CENTER, 0, 1, 2),
            (3, CENTER, 4, 5),
        ),
        mirror=(3, 4, 5, 0, 1, 2),
        coordinates=_trigonal_prism_coordinates(),
    ),
    ShapeName.PENTAGONAL_PYRAMIDAL : ShapeDefinition(
        size=6,
        point_group='C5v',
        rotations=((4, 0, 1, 2, 3, 5),),
        tetrahedra=(
            (0, 1, 5, CENTER),
            (1, 2, 5, CENTER),
            (2, 3, 5, CENTER),
            (3, 4, 5, CENTER),
            (4, 0, 5, CENTER),
        ),
        mirror=(0, 4, 3, 2, 1, 5),
        coordinates=_with_apices(_regular_polygon(5), (0.0, 0.0, 1.0)),
    ),
    ShapeName.PENTAGONAL_BIPYRAMIDAL : ShapeDefinition(
        size=7,
        point_group='D5h',
        rotations=(
            (4, 0, 1, 2, 3, 5, 6), # C5 about the axial positions
            (1, 0, 4, 3, 2, 6, 5), # C2 through 3
        ),
        tetrahedra=(
            (0, 1, 5, 6),
            (1, 2, 5, 6),
            (2, 3, 5, 6),
            (3, 4, 5, 6),
            (4, 0, 5, 6),
        ),
        mirror=(0, 1, 2, 3, 4, 6, 5),
        coordinates=_with_apices(_regular_polygon(5), (0.0, 0.0, 1.0), (0.0, 0.0, -1.0)),
    ),
    ShapeName.SQUARE_ANTIPRISMATIC : ShapeDefinition(
        size=8,
        point_group='D4d',
        rotations=(
            (3, 0, 1, 2, 7, 4, 5, 6), # C4 about the antiprism axis
            (5, 4, 7, 6, 1, 0, 3, 2), # C2 exchanging the two squares
        ),
        tetrahedra=(
            (0, 1, 2, CENTER),
            (1, 2, 3, CENTER),
            (2, 3, 0, CENTER),
            (3, 0, 1, CENTER),
            (5, 4, 6, CENTER),
            (6, 5, 7, CENTER),
            (7, 6, 4, CENTER),
            (4, 7, 5, CENTER),
        ),
        mirror=(1, 0, 3, 2, 4, 7, 6, 5),
        coordinates=_square_antiprism_coordinates(),
    ),
}
