'''
Search for the index mappings between two shapes which least distort idealized geometry,
modelling the gain of a substituent, the loss of one, or a rearrangement between shapes of equal size
'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from dataclasses import dataclass
from typing import Optional, Sequence

from .distortion import DistortionInfo, distortion_info
from ..shapes.catalog import ShapeLike, as_shape
from ..shapes.rotations import enumerate_rotation_closure
from ..utils.comparison import FLOATING_POINT_EQUALITY_THRESHOLD, approximate_minimizers
from ..utils.iteration import iota, next_permutation
from ..utils.setutils import inverse_permutation


# Custom Exceptions
class NonAdjacentShapesError(ValueError):
    '''Raised when requesting a transition between shapes whose sizes do not differ by a single step'''
    pass


@dataclass(frozen=True)
class SymmetryTransitionGroup:
    '''
    The set of equally-good index mappings between two shapes, all of which share
    the minimal angular distortion and (among those) the minimal chiral distortion
    '''
    index_mappings : tuple[tuple[int, ...], ...]
    angular_distortion : float
    chiral_distortion : float
    
    def __len__(self) -> int:
        return len(self.index_mappings)
    
    @property
    def multiplicity(self) -> int:
        '''Number of distinct, equally-good mappings'''
        return len(self.index_mappings)
    
    @property
    def is_unique(self) -> bool:
        '''Whether a single best mapping exists'''
        return len(self.index_mappings) == 1


# ENUMERATION OF CANDIDATE MAPPINGS
def gain_or_rearrangement_distortions(shape_from : ShapeLike, shape_to : ShapeLike) -> list[DistortionInfo]:
    '''
    Score every rotationally-distinct mapping from the positions of one shape onto those of a shape 
    with either the same number of positions (rearrangement) or one more position (substituent gain)
    
    Each mapping is a permutation of the positions of the larger shape, whose i-th entry is
    the target position of source position i; when gaining a substituent, the final entry is the position the new substituent occupies.
    Mappings which differ only by a rotation of the target shape are scored only once
    '''
    shape_from, shape_to = as_shape(shape_from), as_shape(shape_to)
    if (shape_to.size - shape_from.size) not in (0, 1):
        raise NonAdjacentShapesError(
            f'Gain or rearrangement requires "{shape_to.name}" to have the same number of positions as "{shape_from.name}", or one more '
            f'(got {shape_from.size} -> {shape_to.size})'
        )
    
    distortions : list[DistortionInfo] = []
    encountered : set[tuple[int, ...]] = set() # mappings expressed as source positions at each target position
    
    mapping = list(iota(shape_to.size))
    while True:
        target_indexed = inverse_permutation(mapping)
        if target_indexed not in encountered:
            distortions.append(distortion_info(shape_from, shape_to, mapping))
            encountered.update(enumerate_rotation_closure(shape_to.rotations, target_indexed))
            
        if not next_permutation(mapping):
            break
    LOGGER.debug(f'Scored {len(distortions)} rotationally-distinct mappings from "{shape_from.name}" to "{shape_to.name}"')
        
    return distortions

def ligand_loss_distortions(
        shape_from : ShapeLike,
        shape_to : ShapeLike,
        removed_position : int,
    ) -> list[DistortionInfo]:
    '''
    Score every rotationally-distinct mapping from a shape onto a shape with one fewer position,
    in which a given position of the larger shape is vacated
    
    Treated as the reverse of substituent gain: each mapping is indexed by the smaller shape, with entry i
    being the position of the larger shape which position i of the smaller shape corresponds to, 
    and the final entry always being the removed position.
    Mappings which differ only by a rotation of the smaller shape are scored only once
    '''
    shape_from, shape_to = as_shape(shape_from), as_shape(shape_to)
    if shape_from.size != shape_to.size + 1:
        raise NonAdjacentShapesError(
            f'Loss of a substituent requires "{shape_to.name}" to have exactly one fewer position than "{shape_from.name}" '
            f'(got {shape_from.size} -> {shape_to.size})'
        )
    shape_from.check_position(removed_position)
    
    distortions : list[DistortionInfo] = []
    encountered : set[tuple[int, ...]] = set()
    
    retained = [position for position in range(shape_from.size) if position != removed_position] # ascending, i.e. lexicographically first
    while True:
        key = tuple(retained)
        if key not in encountered:
            distortions.append(distortion_info(shape_to, shape_from, retained + [removed_position]))
            encountered.update(enumerate_rotation_closure(shape_to.rotations, key))
            
        if not next_permutation(retained):
            break
    LOGGER.debug(f'Scored {len(distortions)} rotationally-distinct mappings from "{shape_from.name}" to "{shape_to.name}" upon loss of position {removed_position}')
        
    return distortions

# SELECTION
def select_best_transition_mappings(
        distortions : Sequence[DistortionInfo],
        tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD,
    ) -> SymmetryTransitionGroup:
    '''
    Keep only those mappings with minimal angular distortion and, among those, minimal chiral distortion
    
    Distortions are compared up to a floating-point tolerance, so near-ties are all retained;
    callers must be prepared to choose among several equally-good mappings
    '''
    assert len(distortions) > 0, 'Cannot select best transition mappings from an empty set of candidates'
    
    least_angular = approximate_minimizers(distortions, key=lambda info : info.angular_distortion, tolerance=tolerance)
    least_chiral = approximate_minimizers(least_angular, key=lambda info : info.chiral_distortion, tolerance=tolerance)
    assert len(least_chiral) > 0
    
    return SymmetryTransitionGroup(
        index_mappings=tuple(info.index_mapping for info in least_chiral),
        angular_distortion=min(info.angular_distortion for info in least_angular),
        chiral_distortion=min(info.chiral_distortion for info in least_chiral),
    )

def transition_mappings(
        shape_from : ShapeLike,
        shape_to : ShapeLike,
        tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD,
    ) -> SymmetryTransitionGroup:
    '''Best index mappings for a rearrangement between shapes of equal size, or the gain of a substituent'''
    return select_best_transition_mappings(
        gain_or_rearrangement_distortions(shape_from, shape_to),
        tolerance=tolerance,
    )

def ligand_loss_transition_mappings(
        shape_from : ShapeLike,
        shape_to : ShapeLike,
        removed_position : int,
        tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD,
    ) -> SymmetryTransitionGroup:
    '''Best index mappings for the loss of the substituent at a given position of a shape'''
    return select_best_transition_mappings(
        ligand_loss_distortions(shape_from, shape_to, removed_position),
        tolerance=tolerance,
    )

def shape_transition_mapping(
        shape_from : ShapeLike,
        shape_to : ShapeLike,
        removed_position : Optional[int]=None,
        tolerance : float=FLOATING_POINT_EQUALITY_THRESHOLD,
    ) -> SymmetryTransitionGroup:
    '''
    Best index mappings for any single-step change between two shapes, dispatching on their relative sizes:
    a removed position must be given exactly when the target shape has one fewer position than the source shape
    '''
    shape_from, shape_to = as_shape(shape_from), as_shape(shape_to)
    size_change = shape_to.size - shape_from.size
    
    if size_change in (0, 1):
        if removed_position is not None:
            raise ValueError(f'No position can be removed in a transition from "{shape_from.name}" to "{shape_to.name}", which does not lose a substituent')
        return transition_mappings(shape_from, shape_to, tolerance=tolerance)
    elif size_change == -1:
        if removed_position is None:
            raise ValueError(f'Transition from "{shape_from.name}" to "{shape_to.name}" loses a substituent, but no removed position was given')
        return ligand_loss_transition_mappings(shape_from, shape_to, removed_position, tolerance=tolerance)
    else:
        raise NonAdjacentShapesError(f'Transitions are only defined between shapes differing by at most one position (got {shape_from.size} -> {shape_to.size})')
