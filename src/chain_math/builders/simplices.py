"""
Simplex and Chain Builders
==========================

Standard simplices and seeded random chains for exactness checks.

Random builders take either an explicit numpy Generator (rng) or a seed.
Passing neither uses DEFAULT_SEED, so results are reproducible by default.

Date: Jan 2026
"""

import numpy as np
from typing import Optional

from ..spec.constants import DEFAULT_SEED, MAX_VERTEX_ID, MAX_COEFFICIENT
from ..spec.structures import Chain, Simplex


def _get_rng(rng: Optional[np.random.Generator], seed: Optional[int]) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(DEFAULT_SEED if seed is None else seed)


def build_standard_simplex(n: int) -> Simplex:
    """
    Standard n-simplex (0, 1, ..., n).

    n=0 point, n=1 edge, n=2 triangle, n=3 tetrahedron.
    """
    if n < 0:
        raise ValueError(f"Simplex dimension must be >= 0, got {n}")
    return tuple(range(n + 1))


def random_simplex(dim: int,
                   rng: Optional[np.random.Generator] = None,
                   seed: Optional[int] = None,
                   max_vertex: int = MAX_VERTEX_ID) -> Simplex:
    """
    Random simplex with dim+1 distinct vertices in increasing order.

    Args:
        dim: simplex dimension (>= 0)
        rng: numpy Generator (takes precedence over seed)
        seed: random seed
        max_vertex: vertices drawn from [0, max_vertex]

    Returns:
        strictly increasing tuple of Python ints
    """
    if dim < 0:
        raise ValueError(f"Simplex dimension must be >= 0, got {dim}")
    n_vertices = dim + 1
    if n_vertices > max_vertex + 1:
        raise ValueError(
            f"Cannot draw {n_vertices} distinct vertices from [0, {max_vertex}]"
        )

    rng = _get_rng(rng, seed)
    vertices = rng.choice(max_vertex + 1, size=n_vertices, replace=False)
    return tuple(int(v) for v in np.sort(vertices))


def random_chain(n_terms: int,
                 dim: int,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 max_coefficient: int = MAX_COEFFICIENT,
                 max_vertex: int = MAX_VERTEX_ID) -> Chain:
    """
    Random chain of n_terms dim-simplices with nonzero integer coefficients.

    Coefficients are drawn from [-max_coefficient, max_coefficient] \\ {0}.
    Faces may repeat across terms (the chain is NOT simplified).
    """
    if n_terms < 0:
        raise ValueError(f"n_terms must be >= 0, got {n_terms}")
    if max_coefficient < 1:
        raise ValueError(f"max_coefficient must be >= 1, got {max_coefficient}")

    rng = _get_rng(rng, seed)
    magnitudes = rng.integers(1, max_coefficient + 1, size=n_terms)
    signs = rng.choice([-1, 1], size=n_terms)

    return [
        (int(m * s), random_simplex(dim, rng=rng, max_vertex=max_vertex))
        for m, s in zip(magnitudes, signs)
    ]
