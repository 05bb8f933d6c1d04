"""Constants and the Simplex/Chain contract."""

from .constants import (
    SIGN_EVEN,
    SIGN_ODD,
    EMPTY_SIMPLEX,
    DEFAULT_SEED,
    MAX_VERTEX_ID,
    MAX_RANDOM_DIM,
    MAX_COEFFICIENT,
    MAX_RANDOM_TERMS,
)

from .structures import (
    Simplex,
    Term,
    Chain,
    as_simplex,
    dimension,
    validate_simplex,
    canonical_simplex,
    zero,
    unit_chain,
    add,
    neg,
    scale,
    chain_from_pairs,
    chain_dimension,
)
