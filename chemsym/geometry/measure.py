'''For measuring angles and signed volumes spanned by idealized position vectors'''

__author__ = 'chemsym developers'

from typing import Optional, Union
import numpy as np

from .arraytypes import Shape, N, Numeric, Vector3, ArrayNx3, ArrayNxN


def normalized(
        vector : np.ndarray[Shape[N, ...], Numeric],
        order  : Optional[Union[int, float, str]]=None,
    ) -> np.ndarray[Shape[N, ...], Numeric]:
    '''Return a normalized copy of a vector or array of vectors;
    The array supplied to "vector" is unchanged'''
    vector = np.asarray(vector, dtype=float)
    norms = np.atleast_1d( # ensure shape is broadcastable, even for scalars
        np.linalg.norm(vector, ord=order, axis=-1, keepdims=True)
    )
    ## DEVNOTE: opted for clear Exception being raised by numpy when attempting division by zero,
    ## rather than silently replacing zero norms
    return vector / norms

def angle_between(vector_1 : Vector3, vector_2 : Vector3) -> float:
    '''Angle (in radians, within [0, pi]) between two non-zero vectors'''
    cosine = np.dot(normalized(vector_1), normalized(vector_2))
    return float(np.arccos(np.clip(cosine, -1.0, 1.0))) # clip guards against rounding just outside arccos' domain

def pairwise_angles(unit_vectors : ArrayNx3) -> ArrayNxN:
    '''
    Compute the symmetric matrix of angles (in radians) between every pair of unit vectors
    
    The diagonal is exactly zero, and the returned matrix is write-protected
    
    Parameters
    ----------
    unit_vectors : Array[N, 3]
        Array whose rows are unit vectors
        
    Returns
    -------
    angles : Array[N, N]
        Read-only matrix whose (i, j)-th entry is the angle between the i-th and j-th vectors
    '''
    unit_vectors = np.asarray(unit_vectors, dtype=float)
    cosines = np.clip(unit_vectors @ unit_vectors.T, -1.0, 1.0)
    angles = np.arccos(cosines)
    angles = (angles + angles.T) / 2 # symmetrize exactly, regardless of rounding in the matrix product
    np.fill_diagonal(angles, 0.0)
    angles.setflags(write=False)
    
    return angles

def tetrahedron_volume(
        vertex_1 : Vector3,
        vertex_2 : Vector3,
        vertex_3 : Vector3,
        vertex_4 : Vector3,
    ) -> float:
    '''
    Signed volume (scaled by 6, i.e. the scalar triple product) of the tetrahedron spanned by 4 points,
    computed as (v1 - v4) . ((v2 - v4) x (v3 - v4))
    
    Positive when vertices 1-3 wind counterclockwise as seen from beyond vertex 4, i.e. depends on vertex order
    '''
    vertex_4 = np.asarray(vertex_4, dtype=float)
    return float(
        np.dot(
            np.asarray(vertex_1, dtype=float) - vertex_4,
            np.cross(
                np.asarray(vertex_2, dtype=float) - vertex_4,
                np.asarray(vertex_3, dtype=float) - vertex_4,
            )
        )
    )
