'''Unit tests for canonical presentations of equivalent objects'''

__author__ = 'chemsym developers'

import pytest

from chemsym.utils.canonicalize import (
    Canonicalizable,
    least_presentation,
    character_counts,
    composition_string,
)


def test_least_presentation() -> None:
    '''Test that the lexicographically-least presentation is selected from any iterable'''
    presentations = (('B', 'A'), ('A', 'B'), ('A', 'C'))
    assert least_presentation(presentations) == ('A', 'B')
    assert least_presentation(iter(presentations)) == ('A', 'B')

@pytest.mark.xfail(
    reason='No canonical presentation exists among zero presentations',
    raises=ValueError,
    strict=True,
)
def test_least_presentation_empty() -> None:
    '''Test that selecting from no presentations is an error'''
    least_presentation([])

def test_character_counts() -> None:
    '''Test counting of characters, ordered alphabetically'''
    assert character_counts('CABAA') == (('A', 3), ('B', 1), ('C', 1))
    assert character_counts('') == ()

@pytest.mark.parametrize(
    'characters, expected',
    [
        ('AAABBC', 'A:3-B:2-C:1'),
        ('BACABA', 'A:3-B:2-C:1'),
        ('AAAAAA', 'A:6'),
    ]
)
def test_composition_string(characters : str, expected : str) -> None:
    '''Test compact presentation of character compositions, independent of character order'''
    assert composition_string(characters) == expected

def test_canonicalizable_protocol() -> None:
    '''Test that any object with a canonical_form() method satisfies the protocol'''
    class Labelled:
        def canonical_form(self):
            return 'label'
        
    assert isinstance(Labelled(), Canonicalizable)
    assert not isinstance(object(), Canonicalizable)
