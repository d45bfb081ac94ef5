"""
PyCWS: Cochran-Weiss-Shanteau Index for Nominal Data.

Scores a rater's expertise from repeated categorical judgments as the ratio
of discrimination between items to inconsistency within items.
"""

from pycws.core.table import ResponseTable
from pycws.core.result import PairCounts, CWSResult
from pycws.core.exceptions import (
    CWSError,
    DataValidationError,
    InvalidInputTypeError,
    MissingValueError,
    ValueRangeError,
    InsufficientDataError,
    InsufficientRowsError,
    InsufficientColumnsError,
    StatisticalError,
    DegenerateBetweenPairsError,
    DataQualityWarning,
)
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

__version__ = "0.1.0"

__all__ = [
    # Data structures
    "ResponseTable",
    # Result types
    "PairCounts",
    "CWSResult",
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
    # Exceptions
    "CWSError",
    "DataValidationError",
    "InvalidInputTypeError",
    "MissingValueError",
    "ValueRangeError",
    "InsufficientDataError",
    "InsufficientRowsError",
    "InsufficientColumnsError",
    "StatisticalError",
    "DegenerateBetweenPairsError",
    # Warnings
    "DataQualityWarning",
]
