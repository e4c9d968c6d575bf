'''Representation of a single assignment of substituent characters and links to the positions of a shape'''

__author__ = 'chemsym developers'

from dataclasses import dataclass
from typing import Hashable, Iterable, Sequence

import numpy as np

from ..shapes.names import ShapeName
from ..shapes.catalog import Shape, ShapeLike, as_shape
from ..shapes.properties import generate_all_rotations
from ..utils.canonicalize import Canonicalizable, least_presentation
from ..utils.setutils import apply_permutation, inverse_permutation, check_bijection, pair_key


TRANS_ANGLE_TOLERANCE : float = 1E-3 # radians within which an idealized angle is considered to be exactly pi

Link = tuple[int, int]
Column = tuple[str, tuple[bool, ...]] # character at a position, and whether that position belongs to each link

# Custom Exceptions
class InvalidLinkError(ValueError):
    '''Raised when a link does not connect exactly two distinct positions'''
    pass


def canonical_links(links : Iterable[Sequence[int]], shape : ShapeLike) -> tuple[Link, ...]:
    '''
    Validate a collection of links between positions of a shape and bring them into canonical order,
    with the lesser position first within each link and links sorted lexicographically; duplicate links are merged
    '''
    shape = as_shape(shape)
    pairs : set[Link] = set()
    for link in links:
        link = tuple(link)
        if len(link) != 2:
            raise InvalidLinkError(f'Links must connect exactly 2 positions, not {len(link)} (got {link})')
        
        i, j = link
        shape.check_position(i)
        shape.check_position(j)
        if i == j:
            raise InvalidLinkError(f'Cannot link position {i} to itself')
        pairs.add(pair_key(int(i), int(j)))
        
    return tuple(sorted(pairs))


@dataclass(frozen=True)
class Stereopermutation(Canonicalizable):
    '''
    Symbolic characters (one per position) assigned to the positions of a shape,
    along with links between pairs of positions occupied by the same multidentate ligand
    
    Two stereopermutations are equivalent if one can be rotated into the other by a rotation of the shape
    '''
    shape : ShapeName
    characters : tuple[str, ...]
    links : tuple[Link, ...] = ()
    
    def __post_init__(self) -> None:
        shape = as_shape(self.shape)
        characters = tuple(self.characters)
        shape.check_size(characters, description='characters')
        
        object.__setattr__(self, 'shape', shape.name) # normalize any accepted shape specifier to its name
        object.__setattr__(self, 'characters', characters)
        object.__setattr__(self, 'links', canonical_links(self.links, shape))
        
    def __str__(self) -> str:
        link_str = ', '.join(f'{i}-{j}' for i, j in self.links)
        return f'{"".join(self.characters)}{{{link_str}}} ({self.shape})'
        
    @property
    def shape_data(self) -> Shape:
        return as_shape(self.shape)
        
    # column representation
    def columns(self) -> tuple[Column, ...]:
        '''Per-position pairs of character and link-membership flags'''
        return tuple(
            (character, tuple(position in link for link in self.links))
                for position, character in enumerate(self.characters)
        )
    
    @classmethod
    def from_columns(cls, shape : ShapeLike, columns : Sequence[Column]) -> 'Stereopermutation':
        '''Reconstruct a stereopermutation from per-position pairs of character and link-membership flags'''
        characters = tuple(character for character, _ in columns)
        n_links = len(columns[0][1]) if columns else 0
        links = [
            tuple(position for position, (_, flags) in enumerate(columns) if flags[link_idx])
                for link_idx in range(n_links)
        ]
        return cls(shape=shape, characters=characters, links=links)
        
    # symmetry operations
    def rotated(self, rotation : Sequence[int]) -> 'Stereopermutation':
        '''
        Apply a position permutation to both the characters and links,
        moving whatever occupies position rotation[k] to position k
        '''
        self.shape_data.check_size(rotation, description='permuted positions')
        check_bijection(rotation, self.shape_data.size)
        moved_to = inverse_permutation(rotation)
        
        return self.__class__(
            shape=self.shape,
            characters=apply_permutation(self.characters, rotation),
            links=[(moved_to[i], moved_to[j]) for i, j in self.links],
        )
        
    def mirrored(self) -> 'Stereopermutation':
        '''The mirror image of this stereopermutation'''
        return self.rotated(self.shape_data.mirror)
        
    def all_rotations(self) -> set['Stereopermutation']:
        '''All distinct stereopermutations obtained by rotating this one (itself included)'''
        return {
            self.__class__.from_columns(self.shape, columns)
                for columns in generate_all_rotations(self.shape, self.columns())
        }
    
    def canonical_form(self) -> Hashable:
        '''Lexicographically-least characters and links among all rotations; identical for rotationally-equivalent stereopermutations'''
        return (self.shape, least_presentation(
            (stereoperm.characters, stereoperm.links)
                for stereoperm in self.all_rotations()
        ))
        
    def is_rotationally_superimposable(self, other : 'Stereopermutation') -> bool:
        '''Whether this stereopermutation can be rotated into another'''
        if self.shape != other.shape:
            return False
        if sorted(self.characters) != sorted(other.characters) or len(self.links) != len(other.links):
            return False # quick rejection, since rotations preserve character and link counts
        
        return other in self.all_rotations()
    
    def is_chiral(self) -> bool:
        '''Whether this stereopermutation cannot be rotated into its own mirror image'''
        return not self.is_rotationally_superimposable(self.mirrored())
    
    def is_enantiomer_of(self, other : 'Stereopermutation') -> bool:
        '''Whether another stereopermutation is the (non-superimposable) mirror image of this one'''
        return self.is_chiral() and self.mirrored().is_rotationally_superimposable(other)
        
    def has_trans_spanning_links(self, tolerance : float=TRANS_ANGLE_TOLERANCE) -> bool:
        '''Whether any link joins two positions lying directly opposite one another'''
        shape = self.shape_data
        return any(
            np.isclose(shape.angle(i, j), np.pi, rtol=0.0, atol=tolerance)
                for i, j in self.links
        )
