'''Closed catalog of idealized coordination shapes, their rotations and derived properties'''

from .names import (
    ShapeName,
    UnknownShapeError,
    Center,
    CENTER,
    name_index,
    name_from_string,
    space_free_name,
)
from .catalog import (
    Shape,
    SHAPES,
    InvalidShapeError,
    PositionIndexError,
    ShapeSizeMismatchError,
    as_shape,
    as_shape_name,
    shape_data,
    size,
    angle,
    rotations,
    tetrahedra,
    coordinates,
    mirror,
    name,
    point_group,
    all_shapes_of_size,
    catalog_sizes,
)
from .rotations import (
    apply_rotation,
    inverse_rotation,
    rotation_periodicity,
)
from .properties import (
    generate_all_rotations,
    rotation_group,
    position_groups,
    minimum_angle,
    maximum_angle,
    smallest_angle,
    most_symmetric,
)
