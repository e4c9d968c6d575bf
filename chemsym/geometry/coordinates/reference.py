'''Reference points for coordinate operations'''

__author__ = 'chemsym developers'

import numpy as np


def origin(dimension : int=3, dtype : type=float) -> np.ndarray:
    '''
    Return the origin in the specified number of dimensions
    '''
    _origin = np.zeros(dimension, dtype=dtype)
    _origin.setflags(write=False) # make immutable
    
    return _origin

ORIGIN3 = origin(3) # position of the central atom of every idealized shape
