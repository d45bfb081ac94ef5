"""Cochran-Weiss-Shanteau (CWS) index for nominal data.

The CWS index balances two properties of a rater who labels the same
items on repeated occasions:

- Inconsistency: the fraction of pairs of responses to the SAME item
  that disagree. An expert should repeat themselves.
- Discrimination: the fraction of pairs of responses to DIFFERENT items
  that disagree. An expert should tell items apart.

    CWS = discrimination / inconsistency

Higher is better. A rater who never changes their label for an item has
inconsistency 0 and an index of positive infinity.

Based on Zhang & Wang (2021), "An empirical approach to identifying
subject matter experts for the development of situational judgment tests",
Journal of Personnel Psychology.
"""

from __future__ import annotations

import time
import warnings
from collections.abc import Iterable, Mapping
from fractions import Fraction
from typing import Any

from pycws.algorithms.pairs import count_matching_pairs
from pycws.core.exceptions import (
    DataQualityWarning,
    DegenerateBetweenPairsError,
    InsufficientDataError,
)
from pycws.core.result import CWSResult
from pycws.core.table import ResponseTable


def compute_cws(
    table: Any,
    warn: bool = True,
) -> CWSResult:
    """
    Compute the Cochran-Weiss-Shanteau index of a nominal response table.

    Algorithm:
    1. Validate the table (rectangular, R >= 2 items, C >= 2 occasions)
    2. Count matching pairs within each item and over the whole table
    3. Inconsistency = 1 - within_matches / within_possible
    4. Discrimination = (between_possible - between_matches) / between_possible
    5. CWS = discrimination / inconsistency, or +inf if inconsistency == 0

    Ratios are formed from the exact integer counts and rounded to float
    once, so permuting rows or columns gives bit-identical results.

    Args:
        table: ResponseTable, pandas DataFrame (rows = items, columns =
            occasions) or any 2D array-like of labels
        warn: Emit DataQualityWarning for uninformative tables

    Returns:
        CWSResult with the index, both sub-indices and the pair counts

    Raises:
        InvalidInputTypeError: If the input is not a rectangular table
        InsufficientRowsError: If the table has no items
        InsufficientColumnsError: If there are fewer than 2 occasions
        DegenerateBetweenPairsError: If there is only 1 item

    Example:
        >>> from pycws import compute_cws
        >>> result = compute_cws([["A", "A"], ["A", "B"], ["B", "D"],
        ...                       ["D", "D"], ["C", "C"]])
        >>> result.inconsistency_index, result.discrimination_index
        (0.4, 0.875)
        >>> result.cws_index
        2.1875
    """
    start_time = time.perf_counter()

    table = ResponseTable.coerce(table)

    if table.num_items < 2:
        raise DegenerateBetweenPairsError(
            f"Discrimination is undefined for {table.num_items} item: there are "
            f"no pairs of responses to different items, so the between-item "
            f"pair count is zero. "
            f"Hint: The CWS index needs at least 2 items (rows)."
        )

    counts = count_matching_pairs(table)

    # Exact ratios; the single float rounding happens at the end
    within_ratio = Fraction(counts.within_observed_matches, counts.within_possible_pairs)
    inconsistency = 1 - within_ratio
    discrimination = Fraction(counts.between_mismatches, counts.between_possible_pairs)

    if inconsistency == 0:
        cws_index = float("inf")
    else:
        cws_index = float(discrimination / inconsistency)

    if warn and table.num_categories == 1:
        warnings.warn(
            f"All {table.total_responses} responses carry the same label "
            f"{table.categories[0]!r}; items cannot be discriminated.",
            DataQualityWarning,
            stacklevel=2,
        )

    computation_time = (time.perf_counter() - start_time) * 1000

    return CWSResult(
        cws_index=cws_index,
        inconsistency_index=float(inconsistency),
        discrimination_index=float(discrimination),
        counts=counts,
        rater_id=table.rater_id,
        computation_time_ms=computation_time,
    )


def compute_cws_index(table: Any) -> float:
    """
    Compute the CWS index as a single float.

    Convenience wrapper around compute_cws for callers that only need the
    number.

    Args:
        table: ResponseTable, pandas DataFrame or any 2D array-like of labels

    Returns:
        The CWS index; positive infinity for perfectly consistent responses.
        Never NaN.
    """
    return compute_cws(table).cws_index


def rank_by_cws(
    tables: Mapping[str, Any] | Iterable[ResponseTable],
    warn: bool = True,
) -> list[CWSResult]:
    """
    Score several raters or instruments and rank them by CWS index.

    The index is meant for comparisons: the rater with the highest value
    combines the best discrimination with the least inconsistency, which
    is how subject matter experts are singled out.

    Args:
        tables: Mapping rater id -> table, or an iterable of ResponseTables
            (their rater_id is used as the name)
        warn: Forwarded to compute_cws

    Returns:
        List of CWSResult sorted by descending CWS index. Ties keep the
        order of rater ids; unnamed tables from an iterable follow the
        named ones in their input order.

    Raises:
        InsufficientDataError: If no tables are given
    """
    # Sort key: named tables by rater id, unnamed ones by position
    if isinstance(tables, Mapping):
        named = [
            ((False, str(name), 0), _with_rater_id(ResponseTable.coerce(data), str(name)))
            for name, data in tables.items()
        ]
    else:
        named = []
        for i, data in enumerate(tables):
            table = ResponseTable.coerce(data)
            if table.rater_id is not None:
                named.append(((False, table.rater_id, i), table))
            else:
                named.append(((True, "", i), _with_rater_id(table, str(i))))

    if not named:
        raise InsufficientDataError(
            "Need at least one response table to rank. "
            "Hint: Pass a mapping of rater id -> table."
        )

    results = [compute_cws(table, warn=warn) for _, table in sorted(named, key=lambda p: p[0])]
    # sorted() is stable, so equal indices stay in rater id order
    return sorted(results, key=lambda r: r.cws_index, reverse=True)


def _with_rater_id(table: ResponseTable, rater_id: str) -> ResponseTable:
    if table.rater_id == rater_id:
        return table
    return ResponseTable(
        responses=table.labels,
        rater_id=rater_id,
        item_ids=table.item_ids,
        occasion_ids=table.occasion_ids,
        metadata=dict(table.metadata),
    )


# =============================================================================
# ALIASES
# =============================================================================

cochran_weiss_shanteau = compute_cws
"""
Compute the Cochran-Weiss-Shanteau index.

Alias for compute_cws, named after the index's authors.
"""
