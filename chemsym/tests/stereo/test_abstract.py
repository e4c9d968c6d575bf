'''Unit tests for abstract stereopermutations arising from rankings of substituent sites'''

__author__ = 'chemsym developers'

import pytest

from chemsym.shapes import ShapeName, ShapeSizeMismatchError
from chemsym.stereo import RankingInformation, AbstractStereopermutations, InvalidLinkError
from chemsym.stereo.abstract import (
    canonicalize_ranked_sites,
    flattened_sites,
    symbolic_characters,
    self_referential_links,
)


RANKED_SITES = ((5, 8), (3,), (1, 2, 4))
CANONICAL_SITES = ((1, 2, 4), (5, 8), (3,))

@pytest.fixture
def cis_trans() -> AbstractStereopermutations:
    return AbstractStereopermutations(RankingInformation(ranked_sites=((0, 1, 2, 3), (4, 5))), ShapeName.OCTAHEDRAL)

@pytest.fixture
def tris_bidentate() -> AbstractStereopermutations:
    ranking = RankingInformation(
        ranked_sites=((0, 1, 2, 3, 4, 5),),
        links=((1, 0), (2, 3), (4, 5)),
    )
    return AbstractStereopermutations(ranking, ShapeName.OCTAHEDRAL)


# ranking translation
def test_canonicalize_ranked_sites() -> None:
    '''Test that priority classes are ordered by decreasing size, with ties kept in their original order'''
    assert canonicalize_ranked_sites(RANKED_SITES) == CANONICAL_SITES
    assert canonicalize_ranked_sites([[7], [2], [3, 9]]) == ((3, 9), (7,), (2,))
    
def test_symbolic_characters() -> None:
    '''Test that sites in the same priority class share a character'''
    assert flattened_sites(CANONICAL_SITES) == (1, 2, 4, 5, 8, 3)
    assert symbolic_characters(CANONICAL_SITES) == ('A', 'A', 'A', 'B', 'B', 'C')

def test_self_referential_links() -> None:
    '''Test translation of links between sites into links between positions of the canonical ranking'''
    assert self_referential_links([(8, 5)], CANONICAL_SITES) == ((3, 4),)
    assert self_referential_links([(3, 1), (2, 4)], CANONICAL_SITES) == ((0, 5), (1, 2))
    
    with pytest.raises(InvalidLinkError):
        self_referential_links([(1, 7)], CANONICAL_SITES)

def test_ranking_normalization() -> None:
    '''Test that rankings store tuples and canonically-ordered links'''
    ranking = RankingInformation(ranked_sites=[[5, 8], [3], [1, 2, 4]], links=[(8, 5), (5, 8)])
    
    assert ranking.ranked_sites == RANKED_SITES
    assert ranking.links == ((5, 8),)
    assert ranking.n_sites == 6

@pytest.mark.parametrize(
    'ranked_sites, links, expected_error',
    [
        (((0, 1), (1, 2)), (), ValueError),
        (((0, 1), ()), (), ValueError),
        (((0, 1), (2,)), ((0, 0),), InvalidLinkError),
        (((0, 1), (2,)), ((0, 3),), InvalidLinkError),
    ]
)
def test_invalid_ranking(ranked_sites : tuple, links : tuple, expected_error : type[Exception]) -> None:
    '''Test that malformed rankings are rejected'''
    with pytest.raises(expected_error):
        RankingInformation(ranked_sites=ranked_sites, links=links)

# abstract stereopermutations
def test_abstract_cis_trans(cis_trans : AbstractStereopermutations) -> None:
    '''Test enumeration of abstract stereopermutations for two sites of higher priority'''
    assert cis_trans.symbolic_characters == ('A', 'A', 'A', 'A', 'B', 'B')
    assert cis_trans.composition == 'A:4-B:2'
    assert len(cis_trans) == 2
    assert cis_trans.weights == (3, 12)

@pytest.mark.parametrize(
    'sites_at_positions, expected_index',
    [
        ((0, 1, 2, 3, 4, 5), 0), # trans
        ((4, 1, 5, 3, 0, 2), 0),
        ((4, 0, 1, 2, 3, 5), 1), # cis
        ((0, 1, 2, 4, 3, 5), 1),
    ]
)
def test_placement_index(cis_trans : AbstractStereopermutations, sites_at_positions : tuple[int, ...], expected_index : int) -> None:
    '''Test that concrete placements of sites are matched to the abstract stereopermutation they realize'''
    assert cis_trans.placement_index(sites_at_positions) == expected_index

def test_placement_with_links(tris_bidentate : AbstractStereopermutations) -> None:
    '''Test that linked sites carry their links into placements, and that excluded placements match nothing'''
    assert len(tris_bidentate) == 2
    assert tris_bidentate.self_referential_links == ((0, 1), (2, 3), (4, 5))
    
    trans_placement = (0, 2, 1, 4, 3, 5) # sites 0 and 1 placed trans to one another
    stereoperm = tris_bidentate.placement_stereopermutation(trans_placement)
    assert stereoperm.links == ((0, 2), (1, 4), (3, 5))
    assert tris_bidentate.placement_index(trans_placement) is None
    
    all_cis_placement = (0, 1, 2, 4, 3, 5)
    assert tris_bidentate.placement_index(all_cis_placement) is not None

@pytest.mark.parametrize(
    'sites_at_positions, expected_error',
    [
        ((0, 1, 2, 3, 4), ShapeSizeMismatchError),
        ((0, 1, 2, 3, 4, 4), ValueError),
        ((0, 1, 2, 3, 4, 9), ValueError),
    ]
)
def test_invalid_placement(cis_trans : AbstractStereopermutations, sites_at_positions : tuple[int, ...], expected_error : type[Exception]) -> None:
    '''Test that placements which are not arrangements of the ranked sites are rejected'''
    with pytest.raises(expected_error):
        cis_trans.placement_stereopermutation(sites_at_positions)

@pytest.mark.xfail(
    reason='Number of ranked sites must match the number of positions of the shape',
    raises=ShapeSizeMismatchError,
    strict=True,
)
def test_ranking_shape_mismatch() -> None:
    '''Test that rankings cannot be placed onto shapes of a different size'''
    AbstractStereopermutations(RankingInformation(ranked_sites=((0, 1), (2,))), ShapeName.TETRAHEDRAL)
