'''
Enumeration of rotationally-unique stereopermutations of a multiset of characters (and links) over a shape

Every distinct arrangement of per-position columns is visited in lexicographic order (each exactly once);
an arrangement starts a new rotational class only if it was not already produced by rotating an earlier class representative
'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from collections import Counter
from dataclasses import dataclass
from typing import Generator, Iterable, Sequence

from .stereopermutation import Stereopermutation, Column
from ..shapes.catalog import Shape, ShapeLike, as_shape
from ..shapes.rotations import enumerate_rotation_closure
from ..utils.iteration import next_permutation


ReducedForm = tuple[tuple[str, ...], tuple[tuple[int, ...], ...]]

def _reduced_form(arrangement : Sequence[Column]) -> ReducedForm:
    '''
    Characters plus the set of positions spanned by each link, independent of the order in which links are listed
    
    Arrangements whose columns differ only by a relabeling of links describe the same physical arrangement;
    their reduced forms coincide even when the columns themselves do not
    '''
    characters = tuple(character for character, _ in arrangement)
    n_links = len(arrangement[0][1]) if arrangement else 0
    link_positions = tuple(sorted(
        tuple(position for position, (_, flags) in enumerate(arrangement) if flags[link_idx])
            for link_idx in range(n_links)
    ))
    return characters, link_positions

def _classify_arrangements(
        shape : Shape,
        columns : Iterable[Column],
    ) -> Generator[tuple[int, tuple[Column, ...], bool], None, None]:
    '''
    Visit every distinct arrangement of the given columns over the positions of a shape, in lexicographic order,
    yielding the index of the rotational class each arrangement belongs to, the arrangement itself, 
    and whether that arrangement is the first (representative) member of its class
    '''
    ordering = sorted(columns)
    exact_classes : dict[tuple[Column, ...], int] = {}
    reduced_classes : dict[ReducedForm, int] = {}
    
    n_classes = 0
    while True:
        arrangement = tuple(ordering)
        class_idx = exact_classes.get(arrangement)
        if class_idx is None: # fall back to comparison independent of link order
            class_idx = reduced_classes.get(_reduced_form(arrangement))
            
        is_new = (class_idx is None)
        if is_new:
            class_idx = n_classes
            n_classes += 1
            for rotated in enumerate_rotation_closure(shape.rotations, arrangement):
                exact_classes[rotated] = class_idx
                reduced_classes.setdefault(_reduced_form(rotated), class_idx)
        yield class_idx, arrangement, is_new
        
        if not next_permutation(ordering):
            break

def _initial_columns(
        shape : Shape,
        characters : Sequence[str],
        links : Iterable[Sequence[int]],
    ) -> tuple[Column, ...]:
    return Stereopermutation(shape=shape, characters=characters, links=links).columns()

def iter_unique_stereopermutations(
        shape : ShapeLike,
        characters : Sequence[str],
        links : Iterable[Sequence[int]]=(),
        remove_trans_spanning_links : bool=True,
    ) -> Generator[Stereopermutation, None, None]:
    '''
    Lazily generate one representative of each rotationally-distinct assignment of characters (and links) to the positions of a shape
    
    Representatives are produced in discovery order, beginning with the lexicographically-smallest arrangement.
    Since arrangements are generated on demand, consumers only interested in the first few classes
    (e.g. whether more than one exists) need not pay for complete enumeration
    
    Parameters
    ----------
    shape : ShapeLike
        The shape whose positions characters are assigned to
    characters : Sequence[str]
        One symbolic character per position; equal characters denote equivalent substituents
    links : Iterable[Sequence[int]], default ()
        Pairs of positions (in the given arrangement of characters) which are joined by a multidentate ligand
    remove_trans_spanning_links : bool, default True
        Whether to omit stereopermutations in which any link spans two directly opposite positions,
        as is appropriate when links represent bridges too short to span trans positions
        
    Returns
    -------
    uniques : Generator[Stereopermutation]
        Representatives of each rotational class of arrangements
    '''
    shape = as_shape(shape)
    columns = _initial_columns(shape, characters, links)
    
    n_arrangements = n_uniques = 0
    for _, arrangement, is_new in _classify_arrangements(shape, columns):
        n_arrangements += 1
        if not is_new:
            continue
        
        stereoperm = Stereopermutation.from_columns(shape, arrangement)
        if remove_trans_spanning_links and stereoperm.has_trans_spanning_links():
            continue
        n_uniques += 1
        yield stereoperm
    LOGGER.debug(f'Found {n_uniques} unique stereopermutations among {n_arrangements} arrangements of {"".join(characters)} over "{shape.name}"')

def unique_stereopermutations(
        shape : ShapeLike,
        characters : Sequence[str],
        links : Iterable[Sequence[int]]=(),
        remove_trans_spanning_links : bool=True,
    ) -> list[Stereopermutation]:
    '''All rotationally-unique stereopermutations of characters and links over a shape, in discovery order'''
    return list(
        iter_unique_stereopermutations(
            shape,
            characters,
            links=links,
            remove_trans_spanning_links=remove_trans_spanning_links,
        )
    )


@dataclass(frozen=True)
class WeightedStereopermutations:
    '''
    Rotationally-unique stereopermutations, each weighted by the number of 
    distinct arrangements of characters (and links) which are rotationally equivalent to it
    '''
    stereopermutations : tuple[Stereopermutation, ...]
    weights : tuple[int, ...]
    
    def __len__(self) -> int:
        return len(self.stereopermutations)
    
    def __iter__(self):
        return iter(zip(self.stereopermutations, self.weights))
    
    @property
    def total_weight(self) -> int:
        return sum(self.weights)

def unique_stereopermutations_with_weights(
        shape : ShapeLike,
        characters : Sequence[str],
        links : Iterable[Sequence[int]]=(),
        remove_trans_spanning_links : bool=True,
    ) -> WeightedStereopermutations:
    '''
    All rotationally-unique stereopermutations of characters and links over a shape, together with their weights,
    i.e. the number of arrangements visited which belong to the rotational class of each stereopermutation
    '''
    shape = as_shape(shape)
    columns = _initial_columns(shape, characters, links)
    
    representatives : list[Stereopermutation] = []
    class_sizes = Counter()
    for class_idx, arrangement, is_new in _classify_arrangements(shape, columns):
        if is_new:
            representatives.append(Stereopermutation.from_columns(shape, arrangement))
        class_sizes[class_idx] += 1
        
    stereoperms, weights = [], []
    for class_idx, stereoperm in enumerate(representatives):
        if remove_trans_spanning_links and stereoperm.has_trans_spanning_links():
            continue
        stereoperms.append(stereoperm)
        weights.append(class_sizes[class_idx])
        
    return WeightedStereopermutations(stereopermutations=tuple(stereoperms), weights=tuple(weights))
