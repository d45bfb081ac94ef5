"""Matching-pair counting for nominal response tables.

Two responses "match" when they carry the same label. The number of
matching pairs among n responses is obtained without enumerating pairs:
a label that occurs k times contributes C(k, 2) matching pairs, so the
total is the sum of C(k, 2) over the label frequencies.

Counting is done twice: once per row (pairs of responses to the same
item) and once over the flattened table (all pairs). Between-item matches
are the difference.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from pycws.core.exceptions import ValueRangeError
from pycws.core.result import PairCounts
from pycws.core.table import ResponseTable, to_token
from pycws.core.types import FrequencyTable


def compute_frequency_counts(values: Iterable[Any]) -> FrequencyTable:
    """
    Count occurrences of each distinct label.

    Labels are compared by their canonical token, so ``1`` and ``"1"``
    fall in the same category. The result does not depend on the order
    of ``values``.

    Args:
        values: Labels from one row, or from the whole flattened table

    Returns:
        Mapping label token -> number of occurrences (empty for no values)

    Example:
        >>> compute_frequency_counts(["A", "B", "A", "D"])
        {'A': 2, 'B': 1, 'D': 1}
    """
    if isinstance(values, np.ndarray):
        items = values.ravel().tolist()
    else:
        items = list(values)
    if not items:
        return {}

    tokens = np.array([to_token(v) for v in items], dtype=object)
    labels, counts = np.unique(tokens, return_counts=True)
    return dict(zip(labels.tolist(), counts.tolist()))


def count_pairs(n: int) -> int:
    """
    Number of unordered pairs among n items, C(n, 2) = n(n-1)/2.

    Args:
        n: Non-negative number of items

    Returns:
        n * (n - 1) // 2, or 0 when n < 2

    Raises:
        ValueRangeError: If n is negative
    """
    n = operator.index(n)
    if n < 0:
        raise ValueRangeError(
            f"Cannot count pairs among {n} responses. "
            f"The number of responses must be non-negative."
        )
    if n < 2:
        return 0
    return n * (n - 1) // 2


def sum_pairs_across_frequencies(freq: FrequencyTable | Iterable[int]) -> int:
    """
    Total number of matching (same-label) pairs implied by a frequency table.

    Args:
        freq: Mapping label -> count, or an iterable of counts

    Returns:
        Sum of C(k, 2) over every count k
    """
    counts = freq.values() if isinstance(freq, Mapping) else freq
    return sum(count_pairs(k) for k in counts)


def count_matching_pairs(table: Any) -> PairCounts:
    """
    Compute possible and observed matching pairs within and between items.

    Args:
        table: ResponseTable or any table-like input accepted by
            ResponseTable.coerce

    Returns:
        PairCounts with exact integer counts

    Example:
        >>> counts = count_matching_pairs([["A", "A"], ["A", "B"], ["B", "D"]])
        >>> counts.within_observed_matches, counts.total_observed_matches
        (1, 4)
    """
    table = ResponseTable.coerce(table)

    n_items = table.num_items
    n_occasions = table.num_occasions
    total_responses = table.total_responses

    total_possible_pairs = count_pairs(total_responses)
    within_possible_pairs = n_items * count_pairs(n_occasions)
    between_possible_pairs = total_possible_pairs - within_possible_pairs

    # Rows are independent; integer sums are order-free
    within_observed_matches = sum(
        sum_pairs_across_frequencies(compute_frequency_counts(table.row(i)))
        for i in range(n_items)
    )
    total_observed_matches = sum_pairs_across_frequencies(
        compute_frequency_counts(table.flatten())
    )
    between_observed_matches = total_observed_matches - within_observed_matches

    return PairCounts(
        num_items=n_items,
        num_occasions=n_occasions,
        total_responses=total_responses,
        total_possible_pairs=total_possible_pairs,
        within_possible_pairs=within_possible_pairs,
        between_possible_pairs=between_possible_pairs,
        within_observed_matches=within_observed_matches,
        total_observed_matches=total_observed_matches,
        between_observed_matches=between_observed_matches,
    )
