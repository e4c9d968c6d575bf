'''Rotationally-unique assignments of substituents to the positions of a shape, and counts thereof'''

from .stereopermutation import Stereopermutation, InvalidLinkError, canonical_links
from .uniques import (
    WeightedStereopermutations,
    iter_unique_stereopermutations,
    unique_stereopermutations,
    unique_stereopermutations_with_weights,
)
from .counting import (
    UnlinkedStereopermutationCache,
    num_unlinked_stereopermutations,
    has_multiple_unlinked_stereopermutations,
)
from .abstract import RankingInformation, AbstractStereopermutations
