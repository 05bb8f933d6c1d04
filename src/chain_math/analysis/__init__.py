"""
Analysis functions - depend on operators layer.

Separated from builders to maintain clean layering:
    builders → spec
    analysis → operators → spec

Includes:
- exactness: ∂² = 0 diagnostics, cycle test
"""

from .exactness import is_cycle, verify_boundary_squared, verify_exactness_random
