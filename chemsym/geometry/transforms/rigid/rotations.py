'''Utilities for handling proper rotations (i.e. elements of the special orthogonal group SO(3))'''

__author__ = 'chemsym developers'

from typing import Sequence
import warnings

import numpy as np
from scipy.spatial.transform import Rotation

from ...arraytypes import ArrayNx3


RELABELING_ALIGNMENT_TOLERANCE : float = 1E-6

def relabeling_alignment(
    coordinates : ArrayNx3,
    relabeling : Sequence[int],
    improper : bool=False,
) -> tuple[Rotation, float]:
    '''
    Find the proper rotation R which best takes the point at index relabeling[k] onto the point at index k,
    i.e. minimizes sum_k |coordinates[k] - R coordinates[relabeling[k]]|^2
    
    If "improper" is True, instead aligns against the inverted points, so that
    -R is the best improper operation (rotoreflection) realizing the relabeling
    
    Returns the best rotation found and the root-sum-of-squares deviation of that alignment
    '''
    coordinates = np.asarray(coordinates, dtype=float)
    targets = -coordinates if improper else coordinates
    with warnings.catch_warnings(): # alignment of collinear point sets is underdetermined, but still has an exact solution
        warnings.simplefilter('ignore', UserWarning)
        rotation, rssd = Rotation.align_vectors(targets, coordinates[list(relabeling)])
        
    return rotation, float(rssd)

def is_realized_by_proper_rotation(
    coordinates : ArrayNx3,
    relabeling : Sequence[int],
    tolerance : float=RELABELING_ALIGNMENT_TOLERANCE,
) -> bool:
    '''Whether some proper rotation carries every point onto its relabeled counterpart'''
    _, rssd = relabeling_alignment(coordinates, relabeling, improper=False)
    return rssd < tolerance

def is_realized_by_improper_rotation(
    coordinates : ArrayNx3,
    relabeling : Sequence[int],
    tolerance : float=RELABELING_ALIGNMENT_TOLERANCE,
) -> bool:
    '''Whether some reflection or rotoreflection carries every point onto its relabeled counterpart'''
    _, rssd = relabeling_alignment(coordinates, relabeling, improper=True)
    return rssd < tolerance
