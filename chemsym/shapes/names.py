'''Identifiers for the closed catalog of idealized coordination shapes'''

__author__ = 'chemsym developers'

from enum import Enum


class UnknownShapeError(KeyError):
    '''Raised when attempting to look up a shape which is not part of the catalog'''
    pass


class ShapeName(Enum):
    '''
    Closed enumeration of supported idealized shapes, in catalog order
    Member values are the human-readable names of each shape
    '''
    LINEAR                 = 'linear'
    BENT                   = 'bent'
    TRIGONAL_PLANAR        = 'trigonal planar'
    CUT_TETRAHEDRAL        = 'cut tetrahedral'
    T_SHAPED               = 'T-shaped'
    TETRAHEDRAL            = 'tetrahedral'
    SQUARE_PLANAR          = 'square planar'
    SEESAW                 = 'seesaw'
    TRIGONAL_PYRAMIDAL     = 'trigonal pyramidal'
    SQUARE_PYRAMIDAL       = 'square pyramidal'
    TRIGONAL_BIPYRAMIDAL   = 'trigonal bipyramidal'
    PENTAGONAL_PLANAR      = 'pentagonal planar'
    OCTAHEDRAL             = 'octahedral'
    TRIGONAL_PRISMATIC     = 'trigonal prismatic'
    PENTAGONAL_PYRAMIDAL   = 'pentagonal pyramidal'
    PENTAGONAL_BIPYRAMIDAL = 'pentagonal bipyramidal'
    SQUARE_ANTIPRISMATIC   = 'square antiprismatic'

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other : 'ShapeName') -> bool: # permit sorting by catalog order
        if not isinstance(other, ShapeName):
            return NotImplemented
        return name_index(self) < name_index(other)


_NAME_INDICES : dict[ShapeName, int] = {
    shape_name : i
        for i, shape_name in enumerate(ShapeName)
}

def name_index(shape_name : ShapeName) -> int:
    '''Position of a shape within the catalog order'''
    return _NAME_INDICES[shape_name]

def space_free_name(shape_name : ShapeName) -> str:
    '''Human-readable name of a shape with whitespace removed, suitable for use in identifiers'''
    return shape_name.value.replace(' ', '')

def name_from_string(name : str) -> ShapeName:
    '''
    Look up a shape by its human-readable name, either with or without spaces
    Matching ignores case, as well as underscores and hyphens; raises UnknownShapeError if no shape matches
    '''
    def _squashed(text : str) -> str:
        return ''.join(char for char in text.lower() if char not in ' _-')
    
    target = _squashed(name)
    for shape_name in ShapeName:
        if _squashed(shape_name.value) == target:
            return shape_name
    raise UnknownShapeError(f'No shape in the catalog is named "{name}"')


class Center(Enum):
    '''
    Marker for the central atom of a shape, distinct from any position index
    Used as a vertex of chirality tetrahedra, where it stands in for the origin
    '''
    CENTER = 'center'

    def __repr__(self) -> str:
        return 'CENTER'

CENTER = Center.CENTER
