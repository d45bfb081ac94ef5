"""Custom exceptions and warnings for PyCWS.

This module provides a hierarchy of exceptions for specific error types,
all inheriting from ValueError so callers that already catch ValueError
keep working.

Exception Hierarchy:
    CWSError (ValueError)
    ├── DataValidationError
    │   ├── InvalidInputTypeError
    │   ├── MissingValueError
    │   └── ValueRangeError
    ├── InsufficientDataError
    │   ├── InsufficientRowsError
    │   └── InsufficientColumnsError
    └── StatisticalError
        └── DegenerateBetweenPairsError

Warning Classes:
    DataQualityWarning (UserWarning)
"""

from __future__ import annotations


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class CWSError(ValueError):
    """Base exception for all PyCWS errors.

    Inherits from ValueError, so code that catches ValueError also
    catches every PyCWS error.

    Example:
        >>> try:
        ...     compute_cws_index([["A", "B"]])
        ... except CWSError as e:
        ...     print(f"PyCWS error: {e}")
    """

    pass


# =============================================================================
# DATA VALIDATION EXCEPTIONS
# =============================================================================


class DataValidationError(CWSError):
    """Raised when input data fails validation checks.

    This is the base class for all data-related validation errors.
    Use more specific subclasses when possible.
    """

    pass


class InvalidInputTypeError(DataValidationError):
    """Raised when the input is not a rectangular table of labels.

    Common causes:
        - A bare string, scalar or 1-D list instead of a 2-D table
        - Rows of unequal length (ragged input)
        - Rows that are strings rather than sequences of labels
        - item_ids/occasion_ids whose length does not match the table

    Example:
        >>> ResponseTable([["A", "B"], ["A"]])
        InvalidInputTypeError: Row 1 has 1 responses, expected 2...
    """

    pass


class MissingValueError(DataValidationError):
    """Raised when a response cell is missing (None or NaN).

    Missing responses are not handled: every item must have a label at
    every occasion. Drop incomplete items before building the table.
    """

    pass


class ValueRangeError(DataValidationError):
    """Raised when a numeric argument is outside its valid range.

    Example:
        >>> count_pairs(-1)
        ValueRangeError: Cannot count pairs among -1 responses...
    """

    pass


# =============================================================================
# INSUFFICIENT DATA EXCEPTIONS
# =============================================================================


class InsufficientDataError(CWSError):
    """Raised when there is not enough data for the requested operation.

    The CWS index needs:
        - At least 1 item (row) to form a table
        - At least 2 occasions (columns) to form a within-item pair
        - At least 2 items to form a between-item pair
    """

    pass


class InsufficientRowsError(InsufficientDataError):
    """Raised when the table has no items (zero rows)."""

    pass


class InsufficientColumnsError(InsufficientDataError):
    """Raised when the table has fewer than 2 occasions.

    With a single occasion there is no pair of responses to the same item,
    so the within-item pair count C(C, 2) * R is zero and inconsistency
    cannot be measured.

    Example:
        >>> compute_cws_index([["A"], ["B"]])
        InsufficientColumnsError: Need at least 2 occasions (columns)...
    """

    pass


# =============================================================================
# COMPUTATION EXCEPTIONS
# =============================================================================


class StatisticalError(CWSError):
    """Raised when a statistic is undefined for otherwise valid data."""

    pass


class DegenerateBetweenPairsError(StatisticalError):
    """Raised when there are no between-item pairs to compare.

    A table with a single item has no responses from different items, so
    the discrimination index has a zero denominator. The CWS index is
    undefined in this case; no fallback value is substituted.

    Example:
        >>> compute_cws_index([["A", "A", "B"]])
        DegenerateBetweenPairsError: Discrimination is undefined for 1 item...
    """

    pass


# =============================================================================
# WARNINGS
# =============================================================================


class DataQualityWarning(UserWarning):
    """Warning for data quality issues that don't prevent computation.

    Emitted when:
        - Every response in the table carries the same label, so items
          cannot be discriminated at all

    Example:
        >>> import warnings
        >>> # Suppress data quality warnings
        >>> warnings.filterwarnings('ignore', category=DataQualityWarning)
        >>>
        >>> # Or promote to errors
        >>> warnings.filterwarnings('error', category=DataQualityWarning)
    """

    pass
