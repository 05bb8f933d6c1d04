#!/usr/bin/env python3
"""
∂² = 0 Demonstration
====================

Prints ∂ and ∂∂ for the standard point, edge, triangle and tetrahedron,
then runs the seeded random exactness check.

Usage:
    cd src
    python scripts/01_boundary_squared.py [n_samples]

Jan 2026
"""

import sys
from pathlib import Path

# Add src/ to path
src_root = Path(__file__).parent.parent.resolve()
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from chain_math.analysis import verify_boundary_squared, verify_exactness_random
from chain_math.builders import build_standard_simplex
from chain_math.operators import boundary, simplify
from chain_math.spec import unit_chain


def format_chain(c):
    if not c:
        return "0"
    return " ".join(f"{'+' if k > 0 else '-'}{abs(k)}·{list(s)}" for k, s in c)


def main(n_samples=200):
    print("=" * 60)
    print("BOUNDARY OF BOUNDARY IS ZERO")
    print("=" * 60)

    names = ["point", "edge", "triangle", "tetrahedron"]
    for n, name in enumerate(names):
        s = build_standard_simplex(n)
        first = boundary(unit_chain(s))
        second = boundary(first)
        report = verify_boundary_squared(s)

        print(f"\n--- {name} {list(s)} (dim {n}) ---")
        print(f"∂       = {format_chain(first)}")
        print(f"∂∂      = {len(second)} terms over {report['n_distinct_codim2']} faces")
        print(f"simp ∂∂ = {format_chain(simplify(second))}")
        print(f"Term counts as predicted: {report['term_count_ok'] and report['codim2_count_ok']}")

    result = verify_exactness_random(n_samples=n_samples)
    print(f"\n--- random chains ({result['n_samples']} samples) ---")
    print(f"Samples per dim: {result['dim_histogram'].tolist()}")
    print(f"Failures: {result['n_failures']}")
    print(f"∂² = 0 on all samples: {result['all_zero']}")

    return result


if __name__ == "__main__":
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 200
    result = main(n)
    sys.exit(0 if result['all_zero'] else 1)
