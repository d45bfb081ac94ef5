"""Core data structures for PyCWS."""

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

__all__ = [
    "ResponseTable",
    "PairCounts",
    "CWSResult",
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
