"""
CHAIN_MATH - Simplicial chain algebra
=====================================

Pure combinatorics. NO matrices. NO homology groups.

Structure:
    spec/       - Constants and the Simplex/Chain contract
    operators/  - Boundary map ∂ and chain simplification
    builders/   - Standard and seeded-random simplices/chains
    analysis/   - ∂² = 0 diagnostics

A SIMPLEX is a tuple of vertex ids; a CHAIN is a list of
(coefficient, simplex) terms.

Jan 2026
"""

from . import spec
from . import operators
from . import builders
from . import analysis
