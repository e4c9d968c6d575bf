'''Typehints for numpy arrays of coordinates and pairwise measures'''

__author__ = 'chemsym developers'

from typing import Literal, TypeVar

import numpy as np
from numbers import Number


# Numeric typehints
Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type

# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
N = TypeVar('N', bound=int) # typehint the size of a given dimension

## DEV: this type of hard-coding sucks, but is the best we can do with the current Python type system
Vector3  = np.ndarray[Shape[Literal[3]], Numeric]
ArrayNx3 = np.ndarray[Shape[N, Literal[3]], Numeric]
ArrayNxN = np.ndarray[Shape[N, N], Numeric]
