'''Minimal-distortion index mappings between shapes differing by at most one position'''

from .distortion import (
    DistortionInfo,
    angular_distortion,
    chiral_distortion,
)
from .mappings import (
    NonAdjacentShapesError,
    SymmetryTransitionGroup,
    gain_or_rearrangement_distortions,
    ligand_loss_distortions,
    select_best_transition_mappings,
    transition_mappings,
    ligand_loss_transition_mappings,
    shape_transition_mapping,
)
from .cache import TransitionMappingCache
from .pathways import (
    transition_pathway_graph,
    lowest_distortion_pathway,
    pathway_graph_to_dot,
)
