'''Utilities for testing whether relabelings of points are realized by rigid operations
i.e. for working with the (special) orthogonal groups SO(3) and O(3)'''

from .rotations import (
    relabeling_alignment,
    is_realized_by_proper_rotation,
    is_realized_by_improper_rotation,
)
