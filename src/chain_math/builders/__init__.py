"""
Simplex builders - no operators dependency.

EXPORTS:
- build_standard_simplex: (0, 1, ..., n)
- random_simplex, random_chain: seeded numpy generators
"""

from .simplices import build_standard_simplex, random_simplex, random_chain
