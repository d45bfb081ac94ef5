"""
Pathological fixtures for EVALs - designed to break the index.

Each fixture creates a table that targets a specific degenerate case.
"""

import numpy as np
import pytest

from pycws.core.table import ResponseTable


# =============================================================================
# MINIMAL DATA FIXTURES (R=1, R=2, C=2)
# =============================================================================


@pytest.fixture
def single_item_table():
    """R=1 - no between-item pairs exist."""
    return ResponseTable([["A", "B", "A"]])


@pytest.fixture
def two_by_two_table():
    """R=2, C=2 - smallest table with a defined index."""
    return ResponseTable([["A", "B"], ["A", "A"]])


# =============================================================================
# DEGENERATE LABEL FIXTURES
# =============================================================================


@pytest.fixture
def all_distinct_table():
    """Every cell is a different label: no matches anywhere."""
    return ResponseTable([["a", "b"], ["c", "d"], ["e", "f"]])


@pytest.fixture
def constant_table():
    """Every cell carries one label: within and between all match."""
    return ResponseTable([["X", "X", "X"]] * 4)


# =============================================================================
# SCALE FIXTURES
# =============================================================================


@pytest.fixture
def tall_table():
    """Many items, few categories - large integer pair counts."""
    rng = np.random.default_rng(2024)
    return ResponseTable(rng.integers(0, 3, size=(5000, 3)))
