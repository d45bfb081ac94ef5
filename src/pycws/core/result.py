"""Result dataclasses for CWS analysis.

This module provides result containers for the pair-counting stage and for
the final Cochran-Weiss-Shanteau index:
    - PairCounts: exact possible/observed matching-pair counts
    - CWSResult: inconsistency, discrimination and CWS index with counts
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pycws.core.mixins import ResultSummaryMixin


@dataclass(frozen=True)
class PairCounts:
    """
    Pairwise-match statistics of a response table.

    A "pair" is an unordered pair of cells; it "matches" when both cells
    carry the same label. Within-item pairs share a row, between-item pairs
    come from different rows. All counts are exact integers.

    Attributes:
        num_items: Number of items R
        num_occasions: Number of occasions C
        total_responses: R * C
        total_possible_pairs: C(R * C, 2)
        within_possible_pairs: R * C(C, 2)
        between_possible_pairs: total_possible_pairs - within_possible_pairs
        within_observed_matches: Matching pairs inside rows, summed over rows
        total_observed_matches: Matching pairs among all R * C cells
        between_observed_matches: total_observed_matches - within_observed_matches
    """

    num_items: int
    num_occasions: int
    total_responses: int
    total_possible_pairs: int
    within_possible_pairs: int
    between_possible_pairs: int
    within_observed_matches: int
    total_observed_matches: int
    between_observed_matches: int

    @property
    def within_mismatches(self) -> int:
        """Within-item pairs whose labels differ."""
        return self.within_possible_pairs - self.within_observed_matches

    @property
    def between_mismatches(self) -> int:
        """Between-item pairs whose labels differ."""
        return self.between_possible_pairs - self.between_observed_matches

    def to_dict(self) -> dict[str, int]:
        """Return dictionary representation for serialization."""
        return {
            "num_items": self.num_items,
            "num_occasions": self.num_occasions,
            "total_responses": self.total_responses,
            "total_possible_pairs": self.total_possible_pairs,
            "within_possible_pairs": self.within_possible_pairs,
            "between_possible_pairs": self.between_possible_pairs,
            "within_observed_matches": self.within_observed_matches,
            "total_observed_matches": self.total_observed_matches,
            "between_observed_matches": self.between_observed_matches,
        }


@dataclass(frozen=True)
class CWSResult:
    """
    Result of Cochran-Weiss-Shanteau index computation.

    The CWS index is the ratio of discrimination (how often different
    items receive different labels) to inconsistency (how often the same
    item receives different labels on different occasions). Higher values
    indicate a rater who separates items well while repeating themselves.

    A perfectly consistent rater has inconsistency 0 and an index of
    positive infinity. This is a defined outcome, not an error.

    Attributes:
        cws_index: discrimination_index / inconsistency_index, or inf
        inconsistency_index: Fraction of within-item pairs that do not
            match, in [0, 1]. Lower is more consistent.
        discrimination_index: Fraction of between-item pairs that do not
            match, in [0, 1]. Higher means items are better distinguished.
        counts: Exact pair counts the indices were derived from
        rater_id: Identifier of the rater/instrument, if the table had one
        computation_time_ms: Time taken in milliseconds
    """

    cws_index: float
    inconsistency_index: float
    discrimination_index: float
    counts: PairCounts
    rater_id: str | None
    computation_time_ms: float

    @property
    def is_perfectly_consistent(self) -> bool:
        """True if no item ever changed label (index is infinite)."""
        return self.inconsistency_index == 0.0

    @property
    def consistency_index(self) -> float:
        """Fraction of within-item pairs that match (1 - inconsistency)."""
        return 1.0 - self.inconsistency_index

    def score(self) -> float:
        """Return the CWS index. Higher is better; may be infinite."""
        return self.cws_index

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        lines = [m._format_header("COCHRAN-WEISS-SHANTEAU INDEX REPORT")]

        if self.rater_id is not None:
            lines.append(f"\nRater: {self.rater_id}")
        status = m._format_status(
            self.is_perfectly_consistent, "PERFECTLY CONSISTENT", "COMPUTED"
        )
        lines.append(f"\nStatus: {status}")

        lines.append(m._format_section("Metrics"))
        lines.append(m._format_metric("CWS Index", self.cws_index))
        lines.append(m._format_metric("Discrimination Index", self.discrimination_index))
        lines.append(m._format_metric("Inconsistency Index", self.inconsistency_index))

        c = self.counts
        lines.append(m._format_section("Pair Counts"))
        lines.append(m._format_metric("Items", c.num_items))
        lines.append(m._format_metric("Occasions", c.num_occasions))
        lines.append(m._format_metric("Within-Item Matches", f"{c.within_observed_matches:,} / {c.within_possible_pairs:,}"))
        lines.append(m._format_metric("Between-Item Matches", f"{c.between_observed_matches:,} / {c.between_possible_pairs:,}"))
        lines.append(m._format_metric("Total Matches", f"{c.total_observed_matches:,} / {c.total_possible_pairs:,}"))

        lines.append(m._format_section("Interpretation"))
        lines.append(f"  {m._format_interpretation(self.cws_index, 'cws')}")
        lines.append(f"  {m._format_interpretation(self.discrimination_index, 'discrimination')}")
        lines.append(f"  {m._format_interpretation(self.inconsistency_index, 'inconsistency')}")

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "rater_id": self.rater_id,
            "cws_index": self.cws_index,
            "inconsistency_index": self.inconsistency_index,
            "discrimination_index": self.discrimination_index,
            "is_perfectly_consistent": self.is_perfectly_consistent,
            "counts": self.counts.to_dict(),
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        index = "inf" if math.isinf(self.cws_index) else f"{self.cws_index:.4f}"
        prefix = f"{self.rater_id}, " if self.rater_id is not None else ""
        return f"CWSResult({prefix}cws={index}, {self.computation_time_ms:.2f}ms)"
