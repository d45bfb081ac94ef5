"""Index computations for nominal response tables."""

from pycws.algorithms.pairs import (
    compute_frequency_counts,
    count_pairs,
    sum_pairs_across_frequencies,
    count_matching_pairs,
)
from pycws.algorithms.cws import (
    compute_cws,
    compute_cws_index,
    rank_by_cws,
    cochran_weiss_shanteau,
)

__all__ = [
    # Pair counting
    "compute_frequency_counts",
    "count_pairs",
    "sum_pairs_across_frequencies",
    "count_matching_pairs",
    # CWS index
    "compute_cws",
    "compute_cws_index",
    "rank_by_cws",
    "cochran_weiss_shanteau",
]
