'''Directed graph of substituent-gain and rearrangement transitions between catalog shapes'''

__author__ = 'chemsym developers'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Iterable, Optional

import networkx as nx

from .cache import TransitionMappingCache
from ..shapes.names import ShapeName, space_free_name
from ..shapes.catalog import SHAPES, as_shape_name


GAIN : str = 'gain'
REARRANGEMENT : str = 'rearrangement'

def transition_pathway_graph(
        shapes : Optional[Iterable[ShapeName]]=None,
        max_size : Optional[int]=None,
        include_rearrangements : bool=True,
        cache : Optional[TransitionMappingCache]=None,
    ) -> nx.DiGraph:
    '''
    Build a directed graph whose nodes are shapes and whose edges are single-step transitions between them
    
    Edges point from each shape to every shape with one more position (substituent gain) and, optionally,
    to every other shape with the same number of positions (rearrangement). Each edge is annotated with
    the minimal angular and chiral distortion of the transition, and the number of equally-good mappings
    
    Parameters
    ----------
    shapes : Iterable[ShapeName], optional
        Shapes to include as nodes; defaults to the whole catalog
    max_size : int, optional
        If given, omit shapes with more than this many positions
    include_rearrangements : bool, default True
        Whether to add edges between distinct shapes of equal size
    cache : TransitionMappingCache, optional
        Store of transition mappings to draw from (and add to); a fresh one is used if none is given
        
    Returns
    -------
    graph : nx.DiGraph
        Graph of transitions, with "size" and "point_group" attributes on nodes and 
        "kind", "angular_distortion", "chiral_distortion" and "multiplicity" attributes on edges
    '''
    if cache is None:
        cache = TransitionMappingCache()
    
    shape_names = list(SHAPES.keys()) if shapes is None else [as_shape_name(shape) for shape in shapes]
    if max_size is not None:
        shape_names = [shape_name for shape_name in shape_names if SHAPES[shape_name].size <= max_size]
    
    graph = nx.DiGraph()
    for shape_name in shape_names:
        shape = SHAPES[shape_name]
        graph.add_node(shape_name, size=shape.size, point_group=shape.point_group)
        
    for source in shape_names:
        for target in shape_names:
            size_change = SHAPES[target].size - SHAPES[source].size
            if size_change == 1:
                kind = GAIN
            elif (size_change == 0) and (source != target) and include_rearrangements:
                kind = REARRANGEMENT
            else:
                continue
            
            transition = cache.mapping(source, target)
            graph.add_edge(
                source,
                target,
                kind=kind,
                angular_distortion=transition.angular_distortion,
                chiral_distortion=transition.chiral_distortion,
                multiplicity=transition.multiplicity,
            )
    LOGGER.info(f'Built transition pathway graph with {graph.number_of_nodes()} shapes and {graph.number_of_edges()} transitions')
            
    return graph

def lowest_distortion_pathway(graph : nx.DiGraph, source : ShapeName, target : ShapeName) -> list[ShapeName]:
    '''Sequence of shapes connecting source to target with the least total angular distortion'''
    return nx.shortest_path(graph, source=as_shape_name(source), target=as_shape_name(target), weight='angular_distortion')

def pathway_graph_to_dot(graph : nx.DiGraph, decimals : int=2) -> str:
    '''
    Render a transition pathway graph in the Graphviz DOT language, with shapes of equal size on the same rank
    and each edge labelled by its angular distortion (and multiplicity, when more than one mapping is optimal)
    '''
    lines = ['digraph transitions {', '  graph [fontname = "Arial", layout = "dot"];', '  node [fontname = "Arial", shape = "box"];']
    
    sizes = sorted({size for _, size in graph.nodes(data='size')})
    for size in sizes:
        members = ' '.join(
            f'"{space_free_name(shape_name)}";'
                for shape_name, node_size in graph.nodes(data='size')
                    if node_size == size
        )
        lines.append(f'  {{ rank = same; {members} }}')
        
    for source, target, attrs in graph.edges(data=True):
        label = f'{attrs["angular_distortion"]:.{decimals}f}'
        if attrs['multiplicity'] > 1:
            label += f' ({attrs["multiplicity"]})'
        style = 'solid' if attrs['kind'] == GAIN else 'dashed'
        lines.append(f'  "{space_free_name(source)}" -> "{space_free_name(target)}" [label = "{label}", style = "{style}"];')
    lines.append('}')
    
    return '\n'.join(lines)
