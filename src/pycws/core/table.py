"""Core data structure for repeated categorical measurements.

This module provides the ResponseTable container used by every index
computation: an items x occasions matrix of nominal labels, normalised
to canonical string tokens and validated once at construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from pycws.core.exceptions import (
    InsufficientColumnsError,
    InsufficientRowsError,
    InvalidInputTypeError,
    MissingValueError,
)
from pycws.core.types import LabelArray


def to_token(value: Any) -> str:
    """Return the canonical token used to compare a response label.

    Numpy scalars are unwrapped first so ``np.int64(3)``, ``3``, ``3.0`` and
    ``"3"`` all map to the token ``"3"``; integral floats appear when an
    integer-coded column is upcast, e.g. by a pandas read or pivot. Labels
    are opaque: no ordering or numeric meaning survives normalisation.
    """
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def _as_label_matrix(responses: Any) -> LabelArray:
    """Convert a 2-D array-like into an object matrix without normalising."""
    if isinstance(responses, (str, bytes)):
        raise InvalidInputTypeError(
            f"Responses must be a 2D table (items x occasions), got a "
            f"{type(responses).__name__}. "
            f"Hint: Wrap each item's responses in its own list."
        )

    if isinstance(responses, Mapping):
        return _columns_to_matrix(responses)

    # DataFrame-like objects expose their cells through to_numpy()
    if hasattr(responses, "to_numpy") and not isinstance(responses, np.ndarray):
        responses = responses.to_numpy(dtype=object)

    if isinstance(responses, np.ndarray):
        if responses.ndim != 2:
            raise InvalidInputTypeError(
                f"Responses must be a 2D array (items x occasions), got "
                f"{responses.ndim}D with shape {responses.shape}. "
                f"Hint: Use .reshape(R, C) to convert flat arrays."
            )
        return responses.astype(object)

    if not isinstance(responses, Iterable):
        raise InvalidInputTypeError(
            f"Responses must be a 2D table (items x occasions), got "
            f"{type(responses).__name__}."
        )

    rows: list[list[Any]] = []
    for i, row in enumerate(responses):
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise InvalidInputTypeError(
                f"Row {i} is a {type(row).__name__}, not a sequence of responses. "
                f"Responses must be a 2D table (items x occasions). "
                f"Hint: A flat list of labels describes a single occasion, "
                f"not a table."
            )
        rows.append(list(row))

    if not rows:
        return np.empty((0, 0), dtype=object)

    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise InvalidInputTypeError(
                f"Row {i} has {len(row)} responses, expected {width}. "
                f"Responses must be rectangular: every item needs a label "
                f"at every occasion."
            )

    matrix = np.empty((len(rows), width), dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            matrix[i, j] = value
    return matrix


def _columns_to_matrix(columns: Mapping[Any, Any]) -> LabelArray:
    """Transpose a mapping occasion -> column of labels into an object matrix."""
    cols: list[list[Any]] = []
    for name, col in columns.items():
        if isinstance(col, (str, bytes)) or not isinstance(col, Iterable):
            raise InvalidInputTypeError(
                f"Column {name!r} is a {type(col).__name__}, not a sequence of responses. "
                f"A mapping is read as occasion -> labels for every item."
            )
        cols.append(list(col))

    if not cols:
        return np.empty((0, 0), dtype=object)

    height = len(cols[0])
    for name, col in zip(columns, cols):
        if len(col) != height:
            raise InvalidInputTypeError(
                f"Column {name!r} has {len(col)} responses, expected {height}. "
                f"Responses must be rectangular: every item needs a label "
                f"at every occasion."
            )

    matrix = np.empty((height, len(cols)), dtype=object)
    for j, col in enumerate(cols):
        for i, value in enumerate(col):
            matrix[i, j] = value
    return matrix


@dataclass(eq=False)
class ResponseTable:
    """
    Nominal responses of R items measured on C occasions.

    Each row is one item (e.g. a test question or a case being judged) and
    each column one measurement occasion (e.g. a test administration). A
    cell holds the category the rater assigned to that item on that
    occasion. Cells are compared as opaque tokens: ``"A"``, ``1`` and a
    pandas categorical level are all reduced to their string form.

    Attributes:
        responses: R x C table of labels. Any 2D array-like is accepted,
            as is a mapping occasion -> column of labels (keys become
            occasion_ids). After construction this is a read-only numpy
            object array of str tokens.
        rater_id: Optional identifier for the rater or instrument.
        item_ids: Optional labels for the rows (defaults to 0..R-1).
        occasion_ids: Optional labels for the columns (defaults to 0..C-1).
        metadata: Optional dictionary for additional attributes.

    Properties:
        num_items: Number of items R
        num_occasions: Number of occasions C
        total_responses: R * C
        categories: Sorted distinct labels used anywhere in the table

    Example:
        >>> table = ResponseTable(
        ...     [["A", "A"], ["A", "B"], ["B", "D"], ["D", "D"], ["C", "C"]],
        ...     rater_id="rater_1",
        ... )
        >>> table.num_items, table.num_occasions
        (5, 2)
    """

    responses: Any
    rater_id: str | None = None
    item_ids: list[Any] | None = None
    occasion_ids: list[Any] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the table shape and normalise labels to tokens."""
        if isinstance(self.responses, Mapping) and self.occasion_ids is None:
            self.occasion_ids = list(self.responses.keys())
        matrix = _as_label_matrix(self.responses)
        self._validate(matrix)

        labels = np.empty(matrix.shape, dtype=object)
        for index, value in np.ndenumerate(matrix):
            labels[index] = to_token(value)
        labels.flags.writeable = False
        self.responses = labels

        self.item_ids = self._resolve_ids(self.item_ids, self.num_items, "item_ids")
        self.occasion_ids = self._resolve_ids(
            self.occasion_ids, self.num_occasions, "occasion_ids"
        )

    def _validate(self, matrix: LabelArray) -> None:
        """Validate dimensions and completeness of the raw label matrix."""
        n_items, n_occasions = matrix.shape
        if n_items < 1:
            raise InsufficientRowsError(
                "Must have at least one item (row). "
                "Hint: Check that your data is not empty after preprocessing."
            )
        if n_occasions < 2:
            raise InsufficientColumnsError(
                f"Need at least 2 occasions (columns) to pair responses to the "
                f"same item, got {n_occasions}. "
                f"Hint: Each item must be rated on two or more occasions."
            )

        missing = [index for index, value in np.ndenumerate(matrix) if _is_missing(value)]
        if missing:
            preview = [tuple(int(k) for k in pos) for pos in missing[:5]]
            pos_msg = str(preview) + ("..." if len(missing) > 5 else "")
            raise MissingValueError(
                f"Found {len(missing)} missing responses at positions: {pos_msg}. "
                f"Every item needs a label at every occasion. "
                f"Hint: Drop incomplete items before computing the index."
            )

    @staticmethod
    def _resolve_ids(ids: list[Any] | None, expected: int, name: str) -> list[Any]:
        if ids is None:
            return list(range(expected))
        ids = list(ids)
        if len(ids) != expected:
            raise InvalidInputTypeError(
                f"{name} has {len(ids)} entries but the table has {expected}."
            )
        return ids

    @property
    def labels(self) -> LabelArray:
        """R x C read-only array of normalised label tokens."""
        return self.responses

    @property
    def num_items(self) -> int:
        """Number of items (rows) R."""
        return self.responses.shape[0]

    @property
    def num_occasions(self) -> int:
        """Number of measurement occasions (columns) C."""
        return self.responses.shape[1]

    @property
    def total_responses(self) -> int:
        """Number of cells R * C."""
        return self.num_items * self.num_occasions

    @property
    def categories(self) -> list[str]:
        """Sorted distinct labels used anywhere in the table."""
        return sorted(set(self.responses.ravel().tolist()))

    @property
    def num_categories(self) -> int:
        return len(self.categories)

    def row(self, index: int) -> LabelArray:
        """Labels given to one item across all occasions."""
        return self.responses[index]

    def flatten(self) -> LabelArray:
        """All R * C labels as a single 1D array, ignoring row/column structure."""
        return self.responses.ravel()

    @classmethod
    def coerce(cls, data: Any) -> ResponseTable:
        """
        Build a ResponseTable from whatever table-like input is given.

        Args:
            data: A ResponseTable (returned unchanged), a pandas DataFrame
                (rows = items, columns = occasions) or any 2D array-like

        Returns:
            ResponseTable instance
        """
        if isinstance(data, cls):
            return data
        if hasattr(data, "columns") and hasattr(data, "to_numpy"):
            return cls.from_dataframe(data)
        return cls(responses=data)

    @classmethod
    def from_dataframe(
        cls,
        df: Any,  # pandas.DataFrame
        occasion_cols: list[str] | None = None,
        rater_id: str | None = None,
    ) -> ResponseTable:
        """
        Create ResponseTable from a wide pandas DataFrame.

        Character and categorical (factor) columns are both read through
        their values, so they produce identical tokens.

        Args:
            df: DataFrame with one row per item and one column per occasion
            occasion_cols: Column names to use as occasions (default: all)
            rater_id: Optional rater/instrument identifier

        Returns:
            ResponseTable instance

        Example:
            >>> import pandas as pd
            >>> df = pd.DataFrame({
            ...     'time1': ['A', 'A', 'B', 'D', 'C'],
            ...     'time2': ['A', 'B', 'D', 'D', 'C'],
            ... })
            >>> table = ResponseTable.from_dataframe(df)
        """
        frame = df[list(occasion_cols)] if occasion_cols is not None else df

        missing = frame.isna().to_numpy()
        if missing.any():
            rows = np.unique(np.argwhere(missing)[:, 0])
            row_preview = [frame.index[r] for r in rows[:5]]
            row_msg = str(row_preview) + ("..." if len(rows) > 5 else "")
            raise MissingValueError(
                f"Found {int(missing.sum())} missing responses in {len(rows)} items. "
                f"Affected items: {row_msg}. "
                f"Hint: Use df.dropna() to drop incomplete items."
            )

        return cls(
            responses=frame.to_numpy(dtype=object),
            rater_id=rater_id,
            item_ids=frame.index.tolist(),
            occasion_ids=frame.columns.tolist(),
        )

    @classmethod
    def from_long_format(
        cls,
        df: Any,  # pandas.DataFrame
        item_col: str = "item",
        occasion_col: str = "occasion",
        label_col: str = "label",
        rater_id: str | None = None,
    ) -> ResponseTable:
        """
        Create ResponseTable from long-format response logs.

        Pivots one-row-per-response data (item, occasion, label) into the
        wide items x occasions layout.

        Args:
            df: Long-format DataFrame with one row per response
            item_col: Column name for the item identifier
            occasion_col: Column name for the occasion identifier
            label_col: Column name for the categorical response
            rater_id: Optional rater/instrument identifier

        Returns:
            ResponseTable instance
        """
        for col in (item_col, occasion_col, label_col):
            if col not in df.columns:
                raise InvalidInputTypeError(f"Missing required column: {col}")

        duplicated = df.duplicated(subset=[item_col, occasion_col])
        if duplicated.any():
            raise InvalidInputTypeError(
                f"Found {int(duplicated.sum())} duplicate ({item_col}, {occasion_col}) "
                f"pairs. Each item takes exactly one response per occasion."
            )

        wide = df.pivot(index=item_col, columns=occasion_col, values=label_col)
        return cls.from_dataframe(wide, rater_id=rater_id)
