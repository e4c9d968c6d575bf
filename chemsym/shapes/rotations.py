'''
Permutation-group machinery for rotations of shape positions

A rotation is a permutation r of position indices; applying it to a sequence s
produces the sequence t with t[k] = s[r[k]], i.e. the item at position r[k] is moved to position k
'''

__author__ = 'chemsym developers'

from typing import Hashable, Sequence, TypeVar
T = TypeVar('T', bound=Hashable)

from ..utils.setutils import apply_permutation, inverse_permutation
from ..utils.iteration import iota


MAX_ROTATION_PERIODICITY : int = 20

def apply_rotation(sequence : Sequence[T], rotation : Sequence[int]) -> tuple[T, ...]:
    '''Rearrange the items at the positions of a shape according to a rotation of that shape'''
    return apply_permutation(sequence, rotation)

def inverse_rotation(rotation : Sequence[int]) -> tuple[int, ...]:
    '''The rotation which undoes the given rotation'''
    return inverse_permutation(rotation)

def rotation_periodicity(rotation : Sequence[int], limit : int=MAX_ROTATION_PERIODICITY) -> int:
    '''
    Number of successive applications of a rotation needed to return to the identity arrangement
    
    Returns "limit" if the identity has not been recovered within that many applications
    (which cannot happen for a genuine permutation of fewer than ~20 positions)
    '''
    identity = iota(len(rotation))
    arrangement = apply_rotation(identity, rotation)
    period = 1
    while arrangement != identity and period < limit:
        arrangement = apply_rotation(arrangement, rotation)
        period += 1
        
    return period

def enumerate_rotation_closure(
        generators : Sequence[Sequence[int]],
        sequence : Sequence[T],
    ) -> set[tuple[T, ...]]:
    '''
    Determine the orbit of a sequence under the group generated by a collection of rotations,
    i.e. every distinct sequence reachable by applying any composition of the generators
    
    Explores depth-first along a chain of generator choices: each newly found sequence is appended
    to the chain and itself expanded with every generator in turn, while already-known sequences cause 
    fully-expanded chain links to be popped and the parent link to advance to its next generator.
    Terminates once the root link has cycled through all generators
    
    Parameters
    ----------
    generators : Sequence[Sequence[int]]
        Rotations which generate the group, each a permutation of len(sequence) indices
    sequence : Sequence[T]
        Hashable items at each position, whose rearrangements are enumerated
        
    Returns
    -------
    orbit : set[tuple[T, ...]]
        All distinct rearrangements of the sequence, always including the sequence itself
    '''
    initial = tuple(sequence)
    orbit = {initial}
    link_limit = len(generators)
    if link_limit == 0:
        return orbit
    
    chain : list[int] = [0] # index of the generator currently being applied at each depth
    chain_structures : list[tuple[T, ...]] = [initial]
    while chain[0] < link_limit:
        generated = apply_rotation(chain_structures[-1], generators[chain[-1]])
        if generated not in orbit:
            orbit.add(generated)
            chain.append(0)
            chain_structures.append(generated)
        else:
            while len(chain) > 1 and chain[-1] == link_limit - 1: # pop fully-expanded links
                chain.pop()
                chain_structures.pop()
            chain[-1] += 1
            
    return orbit
