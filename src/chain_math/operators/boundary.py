"""
Simplicial Boundary Operator
============================

Pure combinatorics - NO matrices, NO simplification.

DEFINITIONS:
    face_at(s, i)        s with vertex i removed (order preserved)
    ∂s                   Σᵢ (-1)ⁱ face_at(s, i)
    ∂(Σ kⱼ sⱼ)           Σⱼ kⱼ ∂sⱼ

OUTPUT ORDER:
    boundary_of_simplex: increasing removed index i
    boundary:            concatenation of each term's expansion, input order

TERM COUNT:
    len(∂s) = len(s) = dim(s) + 1
    len(∂c) = Σ len(sⱼ)

Repeated faces are NOT combined here; use operators.simplify for that.

EXACTNESS:
    simplify(∂∂[(1, s)]) == [] for every vertex sequence s.
    See spec/constants.py for the pairing argument.
"""

from typing import Sequence

from ..spec.constants import SIGN_EVEN, SIGN_ODD
from ..spec.structures import Chain, Simplex


def face_at(s: Sequence[int], i: int) -> Simplex:
    """
    Remove the vertex at position i.

    Args:
        s: vertex sequence
        i: position, 0 <= i < len(s). Negative indices are NOT wrapped.

    Returns:
        remaining vertices in original relative order

    FAIL-FAST:
        Raises IndexError if i is out of range.
    """
    n = len(s)
    if not 0 <= i < n:
        raise IndexError(f"Face index {i} out of range [0, {n}) for simplex {tuple(s)}")
    return tuple(s[:i]) + tuple(s[i + 1:])


def sign(i: int) -> int:
    """(-1)^i"""
    return SIGN_EVEN if i % 2 == 0 else SIGN_ODD


def boundary_of_simplex(s: Sequence[int]) -> Chain:
    """
    Alternating-sign boundary of one simplex.

    Example:
        boundary_of_simplex((0, 1, 2)) → [(1, (1, 2)), (-1, (0, 2)), (1, (0, 1))]
        boundary_of_simplex((7,))      → [(1, ())]
        boundary_of_simplex(())        → []
    """
    return [(sign(i), face_at(s, i)) for i in range(len(s))]


def boundary(c: Chain) -> Chain:
    """
    Linear extension of boundary_of_simplex over a chain.

    Each term (k, s) expands to (k·sign, face) for every face of s.
    The result is NOT simplified.
    """
    result = []
    for k, s in c:
        for sgn, face in boundary_of_simplex(s):
            result.append((k * sgn, face))
    return result


def boundary_power(c: Chain, times: int) -> Chain:
    """
    Apply ∂ repeatedly.

    boundary_power(c, 0) returns a copy of c. Any times >= 2 simplifies
    to the empty chain.
    """
    if times < 0:
        raise ValueError(f"times must be >= 0, got {times}")

    result = list(c)
    for _ in range(times):
        result = boundary(result)
    return result
