"""
Chain Simplification
====================

simplify(c): one term per distinct face, coefficients summed, zeros dropped.

ORDER CONTRACT:
    Output follows first-occurrence order of distinct faces in the input.
    It is NOT sorted by coefficient, dimension or vertex ids.

EQUALITY:
    chains_equal       - literal sequence equality of simplified forms
                         (order-sensitive, matches the reference check)
    chains_equivalent  - equality as formal sums (order-independent)
"""

from collections import Counter
from typing import List, Sequence

from ..spec.structures import Chain, Simplex


def collect_coefficient(target: Sequence[int], c: Chain) -> int:
    """Sum of coefficients of all terms whose face equals target."""
    target = tuple(target)
    return sum((k for k, s in c if tuple(s) == target), 0)


def distinct_faces(c: Chain) -> List[Simplex]:
    """Unique faces of c in order of first occurrence."""
    # dict preserves insertion order
    return list(dict.fromkeys(tuple(s) for _, s in c))


def simplify(c: Chain) -> Chain:
    """
    Collect like terms and drop zero coefficients.

    Single pass with a face → coefficient mapping. Equivalent to
    [(collect_coefficient(f, c), f) for f in distinct_faces(c)] minus zeros.

    Example:
        simplify([(1, (1,)), (2, (0,)), (-1, (1,))]) → [(2, (0,))]
    """
    totals = {}
    for k, s in c:
        face = tuple(s)
        totals[face] = totals.get(face, 0) + k
    return [(k, face) for face, k in totals.items() if k != 0]


def is_zero(c: Chain) -> bool:
    return not simplify(c)


def chains_equal(c1: Chain, c2: Chain) -> bool:
    """
    Order-sensitive equality after simplification.

    [(1, a), (1, b)] and [(1, b), (1, a)] are NOT equal here.
    Use chains_equivalent for equality as formal sums.
    """
    return simplify(c1) == simplify(c2)


def chains_equivalent(c1: Chain, c2: Chain) -> bool:
    """Equality as formal sums: same nonzero (coefficient, face) pairs, any order."""
    return Counter(simplify(c1)) == Counter(simplify(c2))
