"""
Pytest Configuration
====================

Automatically loaded by pytest. Adds src/ to sys.path so chain_math is
importable without installation, and provides shared fixtures:

    rng                 numpy Generator seeded with DEFAULT_SEED
    standard_simplices  (0,), (0,1), ..., (0,...,MAX_RANDOM_DIM)

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import numpy as np
import pytest

src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from chain_math.builders import build_standard_simplex  # noqa: E402
from chain_math.spec.constants import DEFAULT_SEED, MAX_RANDOM_DIM  # noqa: E402


@pytest.fixture
def rng():
    """Fresh seeded generator per test, so tests do not share random state."""
    return np.random.default_rng(DEFAULT_SEED)


@pytest.fixture
def standard_simplices():
    return [build_standard_simplex(n) for n in range(MAX_RANDOM_DIM + 1)]
