"""Chain operators - boundary map and simplification."""

from .boundary import (
    face_at,
    sign,
    boundary_of_simplex,
    boundary,
    boundary_power,
)

from .simplify import (
    collect_coefficient,
    distinct_faces,
    simplify,
    is_zero,
    chains_equal,
    chains_equivalent,
)
