"""
Exactness Diagnostics (∂² = 0)
==============================

Verify ∂∂ = 0 on single simplices and on random chains, reporting the
term counts the pairing argument predicts.

For a simplex with L = len(s) distinct vertices:
    len(∂s)            = L
    len(∂∂s)           = L(L-1)          (before simplification)
    distinct faces     = C(L, 2)         (each appears exactly twice)
    simplify(∂∂s)      = []

This is in analysis/ layer because it depends on operators.

Date: Jan 2026
"""

import numpy as np
from scipy.special import comb
from typing import Any, Dict, Sequence

from ..builders.simplices import random_chain
from ..operators.boundary import boundary
from ..operators.simplify import distinct_faces, simplify
from ..spec.constants import DEFAULT_SEED, MAX_RANDOM_DIM, MAX_RANDOM_TERMS
from ..spec.structures import Chain, dimension, unit_chain


def is_cycle(c: Chain) -> bool:
    """c is a cycle iff ∂c simplifies to the empty chain."""
    return not simplify(boundary(c))


def verify_boundary_squared(s: Sequence[int]) -> Dict[str, Any]:
    """
    Compute ∂∂[(1, s)] and check it against the predicted structure.

    Args:
        s: vertex sequence

    Returns:
        dict with term counts, predictions and the ∂² = 0 verdict

    NOTE: ∂² = 0 holds for any vertex sequence (the pairing is by position).
    Repeated vertices only merge codim-2 faces, so codim2_count_ok can be
    False. That is reported, not raised.
    """
    L = len(s)
    first = boundary(unit_chain(s))
    second = boundary(first)
    residual = simplify(second)

    coeffs = np.array([k for k, _ in residual], dtype=np.int64)
    max_abs_residual = int(np.max(np.abs(coeffs))) if coeffs.size else 0

    expected_terms_second = L * (L - 1)
    expected_codim2 = int(comb(L, 2, exact=True))
    n_distinct_codim2 = len(distinct_faces(second))

    return {
        'simplex': tuple(s),
        'dim': dimension(s),
        'n_terms_first': len(first),
        'n_terms_second': len(second),
        'expected_terms_second': expected_terms_second,
        'n_distinct_codim2': n_distinct_codim2,
        'expected_codim2': expected_codim2,
        'residual': residual,
        'max_abs_residual': max_abs_residual,
        'term_count_ok': len(second) == expected_terms_second,
        'codim2_count_ok': n_distinct_codim2 == expected_codim2,
        'boundary_squared_zero': not residual,
    }


def verify_exactness_random(n_samples: int = 100,
                            max_dim: int = MAX_RANDOM_DIM,
                            max_terms: int = MAX_RANDOM_TERMS,
                            seed: int = DEFAULT_SEED) -> Dict[str, Any]:
    """
    Check ∂∂c = 0 on seeded random chains.

    Each sample draws dim in [0, max_dim] and 1..max_terms terms.

    Returns:
        dict with n_samples, n_failures, failures (offending chains),
        dim_histogram (samples per dimension) and all_zero
    """
    if n_samples < 0:
        raise ValueError(f"n_samples must be >= 0, got {n_samples}")

    rng = np.random.default_rng(seed)
    dims = rng.integers(0, max_dim + 1, size=n_samples)
    n_terms = rng.integers(1, max_terms + 1, size=n_samples)

    failures = []
    for dim, k in zip(dims, n_terms):
        c = random_chain(int(k), int(dim), rng=rng)
        if simplify(boundary(boundary(c))):
            failures.append(c)

    return {
        'n_samples': n_samples,
        'n_failures': len(failures),
        'failures': failures,
        'dim_histogram': np.bincount(dims, minlength=max_dim + 1),
        'all_zero': not failures,
    }
