"""Tests for Cochran-Weiss-Shanteau index computation."""

import math
import warnings

import numpy as np
import pytest

from pycws import (
    CWSResult,
    DataQualityWarning,
    DegenerateBetweenPairsError,
    InsufficientColumnsError,
    InsufficientDataError,
    InsufficientRowsError,
    InvalidInputTypeError,
    ResponseTable,
    cochran_weiss_shanteau,
    compute_cws,
    compute_cws_index,
    rank_by_cws,
)
from pycws.algorithms.cws import _with_rater_id


class TestWorkedExample:
    """Golden values for the five-item, two-occasion example."""

    def test_cws_index(self, worked_example_table):
        """Test the index is 0.875 / 0.4."""
        assert compute_cws_index(worked_example_table) == pytest.approx(2.1875)

    def test_exact_value(self, worked_example_table):
        """Exact rational arithmetic yields the float 35/16 exactly."""
        assert compute_cws_index(worked_example_table) == 2.1875

    def test_sub_indices(self, worked_example_table):
        """Test inconsistency and discrimination."""
        result = compute_cws(worked_example_table)

        assert result.inconsistency_index == pytest.approx(0.4)
        assert result.discrimination_index == pytest.approx(0.875)

    def test_counts(self, worked_example_table):
        """Test the pair counts the indices are built from."""
        counts = compute_cws(worked_example_table).counts

        assert counts.total_responses == 10
        assert counts.total_possible_pairs == 45
        assert counts.within_possible_pairs == 5
        assert counts.between_possible_pairs == 40
        assert counts.within_observed_matches == 3
        assert counts.total_observed_matches == 8
        assert counts.between_observed_matches == 5

    def test_plain_lists_accepted(self):
        """Test that nested lists work without building a ResponseTable."""
        data = [["A", "A"], ["A", "B"], ["B", "D"], ["D", "D"], ["C", "C"]]
        assert compute_cws_index(data) == pytest.approx(2.1875)

    def test_column_mapping_accepted(self):
        """A dict of occasion -> labels is read column-wise."""
        data = {
            "time1": ["A", "A", "B", "D", "C"],
            "time2": ["A", "B", "D", "D", "C"],
        }
        assert compute_cws_index(data) == pytest.approx(2.1875)

    def test_numeric_labels_match_string_labels(
        self, worked_example_table, numeric_label_table
    ):
        """Integer-coded categories are compared as tokens, not numbers."""
        assert compute_cws_index(numeric_label_table) == compute_cws_index(
            worked_example_table
        )

    def test_rater_id_carried_to_result(self, worked_example_table):
        result = compute_cws(worked_example_table)
        assert result.rater_id == "worked_example"

    def test_alias(self, worked_example_table):
        result = cochran_weiss_shanteau(worked_example_table)
        assert isinstance(result, CWSResult)
        assert result.cws_index == pytest.approx(2.1875)


class TestPerfectConsistency:
    """Tests for zero inconsistency (index = +inf)."""

    def test_index_is_infinite(self, perfectly_consistent_table):
        """Test that identical labels within every row give +inf."""
        index = compute_cws_index(perfectly_consistent_table)

        assert math.isinf(index)
        assert index > 0

    def test_not_nan(self, perfectly_consistent_table):
        assert not math.isnan(compute_cws_index(perfectly_consistent_table))

    def test_result_flags(self, perfectly_consistent_table):
        """Test that the result reports perfect consistency."""
        result = compute_cws(perfectly_consistent_table)

        assert result.is_perfectly_consistent is True
        assert result.inconsistency_index == 0.0
        assert result.consistency_index == 1.0
        assert result.discrimination_index == pytest.approx(45 / 54)

    def test_within_matches_equal_possible(self, perfectly_consistent_table):
        counts = compute_cws(perfectly_consistent_table).counts
        assert counts.within_observed_matches == counts.within_possible_pairs


class TestFullInconsistency:
    """Tests for tables where no item repeats a label."""

    def test_inconsistency_is_one(self, fully_inconsistent_table):
        result = compute_cws(fully_inconsistent_table)

        assert result.inconsistency_index == 1.0
        assert result.is_perfectly_consistent is False

    def test_index_equals_discrimination(self, fully_inconsistent_table):
        """With inconsistency 1 the index is the discrimination itself."""
        result = compute_cws(fully_inconsistent_table)

        assert result.discrimination_index == pytest.approx(2 / 3)
        assert result.cws_index == pytest.approx(result.discrimination_index)


class TestPermutationInvariance:
    """Index must not depend on item or occasion order."""

    def test_row_permutation(self, large_random_table):
        """Test that shuffling items leaves the index unchanged."""
        rng = np.random.default_rng(0)
        labels = large_random_table.labels
        shuffled = labels[rng.permutation(labels.shape[0])]

        assert compute_cws_index(shuffled) == compute_cws_index(large_random_table)

    def test_column_permutation(self, large_random_table):
        """Test that reordering occasions leaves the index unchanged."""
        labels = large_random_table.labels
        reordered = labels[:, [3, 1, 0, 2]]

        assert compute_cws_index(reordered) == compute_cws_index(large_random_table)

    def test_reversed_worked_example(self, worked_example_table):
        labels = worked_example_table.labels
        assert compute_cws_index(labels[::-1, ::-1]) == compute_cws_index(
            worked_example_table
        )

    def test_relabelling_categories(self, worked_example_table):
        """Renaming categories one-to-one does not change the index."""
        mapping = {"A": "w", "B": "x", "C": "y", "D": "z"}
        relabelled = [[mapping[v] for v in row] for row in worked_example_table.labels]

        assert compute_cws_index(relabelled) == compute_cws_index(worked_example_table)


class TestBounds:
    """Sub-indices are proportions of pairs and must lie in [0, 1]."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_sub_indices_bounded(self, seed):
        rng = np.random.default_rng(seed)
        n_items = int(rng.integers(2, 30))
        n_occasions = int(rng.integers(2, 6))
        n_categories = int(rng.integers(1, 6))
        data = rng.integers(0, n_categories, size=(n_items, n_occasions))

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DataQualityWarning)
            result = compute_cws(data)

        assert 0.0 <= result.inconsistency_index <= 1.0
        assert 0.0 <= result.discrimination_index <= 1.0
        assert not math.isnan(result.cws_index)
        assert result.cws_index >= 0.0

    def test_count_invariants(self, large_random_table):
        c = compute_cws(large_random_table).counts

        assert 0 <= c.within_observed_matches <= c.within_possible_pairs
        assert 0 <= c.total_observed_matches <= c.total_possible_pairs
        assert 0 <= c.between_observed_matches <= c.between_possible_pairs


class TestRejection:
    """Invalid tables fail before any counting."""

    def test_single_column_raises(self):
        """C=1 has no within-item pairs."""
        with pytest.raises(InsufficientColumnsError, match="at least 2 occasions"):
            compute_cws_index([["A"], ["B"], ["C"]])

    def test_single_row_raises(self):
        """R=1 has no between-item pairs."""
        with pytest.raises(DegenerateBetweenPairsError, match="undefined"):
            compute_cws_index([["A", "B", "A"]])

    def test_single_row_table_object_raises(self):
        """A one-item ResponseTable is valid but its index is undefined."""
        table = ResponseTable([["A", "A"]])
        with pytest.raises(DegenerateBetweenPairsError):
            compute_cws(table)

    def test_ragged_raises(self):
        with pytest.raises(InvalidInputTypeError, match="rectangular"):
            compute_cws_index([["A", "B"], ["A"], ["C", "C"]])

    def test_flat_list_raises(self):
        with pytest.raises(InvalidInputTypeError):
            compute_cws_index(["A", "B", "C"])

    def test_string_raises(self):
        with pytest.raises(InvalidInputTypeError):
            compute_cws_index("AB")

    def test_scalar_raises(self):
        with pytest.raises(InvalidInputTypeError):
            compute_cws_index(42)

    def test_empty_raises(self):
        with pytest.raises(InsufficientRowsError):
            compute_cws_index([])

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute_cws_index([["A"], ["B"]])


class TestWarnings:
    """Tests for DataQualityWarning emission."""

    def test_single_category_warns(self, single_category_table):
        with pytest.warns(DataQualityWarning, match="same label"):
            result = compute_cws(single_category_table)

        assert result.discrimination_index == 0.0
        assert math.isinf(result.cws_index)

    def test_warn_false_silences(self, single_category_table):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DataQualityWarning)
            compute_cws(single_category_table, warn=False)

    def test_no_warning_for_normal_table(self, worked_example_table):
        with warnings.catch_warnings():
            warnings.simplefilter("error", DataQualityWarning)
            compute_cws(worked_example_table)


class TestRankByCWS:
    """Tests for ranking several raters by their index."""

    def test_orders_descending(
        self, worked_example_table, perfectly_consistent_table, fully_inconsistent_table
    ):
        ranked = rank_by_cws({
            "middle": worked_example_table,
            "best": perfectly_consistent_table,
            "worst": fully_inconsistent_table,
        })

        assert [r.rater_id for r in ranked] == ["best", "middle", "worst"]
        assert math.isinf(ranked[0].cws_index)
        assert ranked[1].cws_index == pytest.approx(2.1875)

    def test_mapping_name_overrides_rater_id(self, worked_example_table):
        ranked = rank_by_cws({"rater_7": worked_example_table})
        assert ranked[0].rater_id == "rater_7"

    def test_iterable_uses_rater_id(self, worked_example_table, fully_inconsistent_table):
        ranked = rank_by_cws([fully_inconsistent_table, worked_example_table])
        assert [r.rater_id for r in ranked] == ["worked_example", "inconsistent"]

    def test_ties_ordered_by_name(self, worked_example_table):
        ranked = rank_by_cws({"b": worked_example_table, "a": worked_example_table})
        assert [r.rater_id for r in ranked] == ["a", "b"]

    def test_unnamed_ties_keep_input_order(self):
        """Position 10 ranks after position 2 among equal indices."""
        ranked = rank_by_cws([[["A", "A"], ["B", "C"]]] * 12)
        assert [r.rater_id for r in ranked] == [str(i) for i in range(12)]

    def test_named_before_unnamed_on_ties(self, worked_example_table):
        unnamed = ResponseTable(worked_example_table.labels)
        ranked = rank_by_cws([unnamed, worked_example_table])
        assert [r.rater_id for r in ranked] == ["worked_example", "0"]

    def test_renamed_copy_does_not_share_metadata(self):
        table = ResponseTable(
            [["A", "A"], ["B", "C"]], rater_id="orig", metadata={"k": 1}
        )
        renamed = _with_rater_id(table, "renamed")
        renamed.metadata["k"] = 2

        assert renamed.rater_id == "renamed"
        assert table.metadata == {"k": 1}

    def test_accepts_raw_tables(self):
        ranked = rank_by_cws({
            "r1": [["A", "A"], ["B", "B"], ["A", "B"]],
            "r2": [["A", "B"], ["B", "A"], ["A", "B"]],
        })
        assert ranked[0].rater_id == "r1"

    def test_empty_raises(self):
        with pytest.raises(InsufficientDataError):
            rank_by_cws({})

    def test_invalid_member_raises(self, worked_example_table):
        with pytest.raises(DegenerateBetweenPairsError):
            rank_by_cws({"ok": worked_example_table, "bad": [["A", "B"]]})
