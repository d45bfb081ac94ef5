"""Pytest fixtures for PyCWS tests."""

import numpy as np
import pytest

from pycws import ResponseTable


@pytest.fixture
def worked_example_table() -> ResponseTable:
    """
    Five items rated on two occasions.

    Items 0, 3 and 4 keep their label (3 within-item matches out of 5).
    Flattened label counts are A:3, B:2, C:2, D:3, giving 8 matching pairs
    overall and 5 between items (out of 40).
    """
    return ResponseTable(
        responses=[
            ["A", "A"],
            ["A", "B"],
            ["B", "D"],
            ["D", "D"],
            ["C", "C"],
        ],
        rater_id="worked_example",
        occasion_ids=["time1", "time2"],
    )


@pytest.fixture
def perfectly_consistent_table() -> ResponseTable:
    """
    Every item keeps its label on all three occasions.

    Inconsistency is zero, so the index is positive infinity.
    """
    return ResponseTable(
        responses=[
            ["A", "A", "A"],
            ["B", "B", "B"],
            ["C", "C", "C"],
            ["A", "A", "A"],
        ],
        rater_id="consistent",
    )


@pytest.fixture
def fully_inconsistent_table() -> ResponseTable:
    """
    No item is ever given the same label twice, and every label repeats
    across items.

    Within matches are zero (inconsistency 1.0).
    """
    return ResponseTable(
        responses=[
            ["A", "B", "C"],
            ["B", "C", "A"],
            ["C", "A", "B"],
        ],
        rater_id="inconsistent",
    )


@pytest.fixture
def single_category_table() -> ResponseTable:
    """Every response is the same label: no discrimination possible."""
    return ResponseTable(
        responses=[["X", "X"], ["X", "X"], ["X", "X"]],
        rater_id="single_category",
    )


@pytest.fixture
def numeric_label_table() -> ResponseTable:
    """
    Integer-coded categories (e.g. response option numbers).

    Same structure as the worked example with A=1, B=2, C=3, D=4.
    """
    return ResponseTable(
        responses=np.array([
            [1, 1],
            [1, 2],
            [2, 4],
            [4, 4],
            [3, 3],
        ]),
        rater_id="numeric",
    )


@pytest.fixture
def large_random_table() -> ResponseTable:
    """
    Larger random table for property checks.

    50 items, 4 occasions, 5 categories.
    """
    rng = np.random.default_rng(42)
    labels = np.array(list("ABCDE"))
    return ResponseTable(
        responses=labels[rng.integers(0, 5, size=(50, 4))],
        rater_id="large_random",
    )
