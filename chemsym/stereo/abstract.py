'''
Translation of ranked substituent sites into symbolic characters and links,
and the abstract stereopermutations of a shape which arise from them
'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from dataclasses import dataclass
from string import ascii_uppercase
from typing import Iterable, Optional, Sequence

from .stereopermutation import Stereopermutation, InvalidLinkError, Link
from .uniques import WeightedStereopermutations, unique_stereopermutations_with_weights
from ..shapes.names import ShapeName
from ..shapes.catalog import ShapeLike, as_shape
from ..utils.canonicalize import composition_string
from ..utils.setutils import pair_key


SiteIndex = int
RankedSites = tuple[tuple[SiteIndex, ...], ...]

@dataclass(frozen=True)
class RankingInformation:
    '''
    Ranking of the substituent sites around a center, as an ordered partition of site indices
    into classes of equal priority (in ascending priority), plus pairs of sites belonging to a common multidentate ligand
    '''
    ranked_sites : RankedSites
    links : tuple[tuple[SiteIndex, SiteIndex], ...] = ()
    
    def __post_init__(self) -> None:
        ranked_sites = tuple(tuple(priority_class) for priority_class in self.ranked_sites)
        flat_sites = [site for priority_class in ranked_sites for site in priority_class]
        if len(set(flat_sites)) != len(flat_sites):
            raise ValueError(f'Ranked sites {ranked_sites} must not contain any site more than once')
        if any(len(priority_class) == 0 for priority_class in ranked_sites):
            raise ValueError(f'Ranked sites {ranked_sites} must not contain empty priority classes')
        
        links = []
        for link in self.links:
            link = tuple(link)
            if len(link) != 2 or link[0] == link[1]:
                raise InvalidLinkError(f'Links must connect exactly 2 distinct sites, not {link}')
            if not all(site in flat_sites for site in link):
                raise InvalidLinkError(f'Link {link} refers to sites absent from the ranking {ranked_sites}')
            links.append(pair_key(*link))
            
        object.__setattr__(self, 'ranked_sites', ranked_sites)
        object.__setattr__(self, 'links', tuple(sorted(set(links))))
        
    @property
    def n_sites(self) -> int:
        return sum(len(priority_class) for priority_class in self.ranked_sites)

def canonicalize_ranked_sites(ranked_sites : Iterable[Iterable[SiteIndex]]) -> RankedSites:
    '''
    Reorder priority classes by decreasing size, preserving the relative order of equally-sized classes,
    e.g. {5, 8}, {3}, {1, 2, 4} -> {1, 2, 4}, {5, 8}, {3}
    '''
    return tuple(sorted(
        (tuple(priority_class) for priority_class in ranked_sites),
        key=len,
        reverse=True, # python's sort remains stable when reversed
    ))

def flattened_sites(canonical_sites : RankedSites) -> tuple[SiteIndex, ...]:
    '''Sites in the order in which they are assigned to positions when symbolic characters are generated'''
    return tuple(site for priority_class in canonical_sites for site in priority_class)

def symbolic_characters(canonical_sites : RankedSites) -> tuple[str, ...]:
    '''
    One character per site of a canonical ranking, shared by all sites of the same priority class,
    e.g. {1, 2, 4}, {5, 8}, {3} -> A A A B B C
    '''
    if len(canonical_sites) > len(ascii_uppercase):
        raise ValueError(f'Cannot assign distinct characters to more than {len(ascii_uppercase)} priority classes')
    
    return tuple(
        ascii_uppercase[class_idx]
            for class_idx, priority_class in enumerate(canonical_sites)
                for _ in priority_class
    )

def self_referential_links(
        links : Iterable[tuple[SiteIndex, SiteIndex]],
        canonical_sites : RankedSites,
    ) -> tuple[Link, ...]:
    '''
    Translate links between site indices into links between the positions those sites
    occupy in the flattened canonical ranking, e.g. a link between sites 5 and 8 of 
    {1, 2, 4}, {5, 8}, {3} becomes a link between positions 3 and 4
    '''
    positions = {site : position for position, site in enumerate(flattened_sites(canonical_sites))}
    translated = set()
    for site_1, site_2 in links:
        if site_1 not in positions or site_2 not in positions:
            raise InvalidLinkError(f'Link ({site_1}, {site_2}) refers to sites absent from the ranking {canonical_sites}')
        translated.add(pair_key(positions[site_1], positions[site_2]))
        
    return tuple(sorted(translated))

def stereopermutation_characters(
        canonical_sites : RankedSites,
        characters : Sequence[str],
        sites_at_positions : Sequence[SiteIndex],
    ) -> tuple[str, ...]:
    '''Characters of a concrete placement of sites at the positions of a shape'''
    character_of = dict(zip(flattened_sites(canonical_sites), characters))
    return tuple(character_of[site] for site in sites_at_positions)


class AbstractStereopermutations:
    '''
    The rotationally-unique stereopermutations which can arise for a given ranking of sites over a given shape,
    along with the bookkeeping needed to relate concrete placements of sites back to them
    '''
    def __init__(
            self,
            ranking : RankingInformation,
            shape : ShapeLike,
            remove_trans_spanning_links : bool=True,
        ) -> None:
        shape = as_shape(shape)
        self.shape : ShapeName = shape.name
        self.canonical_sites : RankedSites = canonicalize_ranked_sites(ranking.ranked_sites)
        self.symbolic_characters : tuple[str, ...] = symbolic_characters(self.canonical_sites)
        shape.check_size(self.symbolic_characters, description='ranked sites')
        
        self.self_referential_links : tuple[Link, ...] = self_referential_links(ranking.links, self.canonical_sites)
        self.permutations : WeightedStereopermutations = unique_stereopermutations_with_weights(
            shape,
            self.symbolic_characters,
            links=self.self_referential_links,
            remove_trans_spanning_links=remove_trans_spanning_links,
        )
        LOGGER.debug(f'{len(self.permutations)} abstract stereopermutations for {self.composition} over "{self.shape}"')
        
    def __len__(self) -> int:
        return len(self.permutations)
    
    @property
    def composition(self) -> str:
        '''Multiset of symbolic characters, e.g. "A:3-B:2-C:1"'''
        return composition_string(self.symbolic_characters)
    
    @property
    def stereopermutations(self) -> tuple[Stereopermutation, ...]:
        return self.permutations.stereopermutations
    
    @property
    def weights(self) -> tuple[int, ...]:
        return self.permutations.weights
    
    def placement_stereopermutation(self, sites_at_positions : Sequence[SiteIndex]) -> Stereopermutation:
        '''The stereopermutation realized by placing the given site at each respective position of the shape'''
        shape = as_shape(self.shape)
        shape.check_size(sites_at_positions, description='placed sites')
        if set(sites_at_positions) != set(flattened_sites(self.canonical_sites)):
            raise ValueError(f'Placement {tuple(sites_at_positions)} is not an arrangement of the ranked sites {self.canonical_sites}')
        
        position_of = {site : position for position, site in enumerate(sites_at_positions)}
        flat = flattened_sites(self.canonical_sites)
        return Stereopermutation(
            shape=self.shape,
            characters=stereopermutation_characters(self.canonical_sites, self.symbolic_characters, sites_at_positions),
            links=[
                (position_of[flat[i]], position_of[flat[j]])
                    for i, j in self.self_referential_links
            ],
        )
    
    def index_of(self, stereopermutation : Stereopermutation) -> Optional[int]:
        '''Index of the abstract stereopermutation rotationally equivalent to the given one, if any'''
        for idx, candidate in enumerate(self.stereopermutations):
            if candidate.is_rotationally_superimposable(stereopermutation):
                return idx
        return None
    
    def placement_index(self, sites_at_positions : Sequence[SiteIndex]) -> Optional[int]:
        '''Index of the abstract stereopermutation realized by placing the given site at each respective position'''
        return self.index_of(self.placement_stereopermutation(sites_at_positions))
