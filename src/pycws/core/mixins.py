"""Mixin classes for result dataclasses.

This module provides common formatting utilities for result summaries.
"""

from __future__ import annotations

import math
from typing import Any


class ResultSummaryMixin:
    """Common formatting utilities for result summaries.

    Provides helper methods for generating human-readable summary reports
    with consistent formatting across all result types.
    """

    @staticmethod
    def _format_header(title: str, width: int = 80) -> str:
        """Format a section header.

        Args:
            title: Header title text
            width: Total width of the header

        Returns:
            Formatted header string with border
        """
        border = "=" * width
        padding = (width - len(title)) // 2
        centered_title = " " * padding + title
        return f"{border}\n{centered_title}\n{border}"

    @staticmethod
    def _format_metric(label: str, value: Any, width: int = 40) -> str:
        """Format a metric label-value pair.

        Args:
            label: Metric name
            value: Metric value
            width: Total width for alignment

        Returns:
            Formatted metric string
        """
        if isinstance(value, bool):
            formatted_value = "Yes" if value else "No"
        elif isinstance(value, float):
            if math.isinf(value):
                formatted_value = "inf" if value > 0 else "-inf"
            elif abs(value) < 0.0001 and value != 0:
                formatted_value = f"{value:.4e}"
            elif abs(value) >= 1000:
                formatted_value = f"{value:,.2f}"
            else:
                formatted_value = f"{value:.4f}"
        elif isinstance(value, int):
            formatted_value = f"{value:,}"
        elif value is None:
            formatted_value = "N/A"
        else:
            formatted_value = str(value)

        # Dots between label and value for visual tracking
        dots = "." * max(1, width - len(label) - len(formatted_value) - 2)
        return f"  {label} {dots} {formatted_value}"

    @staticmethod
    def _format_status(passed: bool, pass_text: str = "PASSED",
                       fail_text: str = "FAILED") -> str:
        """Format a pass/fail status indicator."""
        return pass_text if passed else fail_text

    @staticmethod
    def _format_interpretation(score: float, metric_type: str = "cws") -> str:
        """Generate interpretation text based on score thresholds.

        Args:
            score: Score value
            metric_type: "cws" for the discrimination/inconsistency ratio,
                "discrimination" or "inconsistency" for the sub-indices in [0, 1]

        Returns:
            Interpretation text string
        """
        if metric_type == "cws":
            if math.isinf(score):
                return "Perfect consistency - every item received the same label on every occasion"
            elif score >= 4.0:
                return "Strong expertise - discrimination far exceeds inconsistency"
            elif score >= 2.0:
                return "Good expertise - discrimination clearly exceeds inconsistency"
            elif score >= 1.0:
                return "Moderate - discrimination roughly matches inconsistency"
            else:
                return "Weak - responses vary more within items than they separate items"

        elif metric_type == "discrimination":
            # Fraction of between-item pairs that differ, higher is better
            if score >= 0.9:
                return "Items are sharply distinguished from one another"
            elif score >= 0.5:
                return "Items are partly distinguished"
            else:
                return "Most distinct items receive the same label"

        elif metric_type == "inconsistency":
            # Fraction of within-item pairs that differ, lower is better
            if score == 0.0:
                return "Fully repeatable - no item changed label between occasions"
            elif score <= 0.2:
                return "Highly repeatable responses"
            elif score <= 0.5:
                return "Some items change label between occasions"
            else:
                return "Most items change label between occasions"

        raise ValueError(
            f"Unknown metric_type {metric_type!r}; expected 'cws', "
            f"'discrimination' or 'inconsistency'"
        )

    @staticmethod
    def _format_footer(computation_time_ms: float, width: int = 80) -> str:
        """Format the report footer with computation time.

        Args:
            computation_time_ms: Time in milliseconds
            width: Total width of the footer

        Returns:
            Formatted footer string
        """
        border = "=" * width
        if computation_time_ms < 1000:
            time_str = f"{computation_time_ms:.2f} ms"
        else:
            time_str = f"{computation_time_ms / 1000:.2f} s"
        return f"\nComputation Time: {time_str}\n{border}"

    @staticmethod
    def _format_section(title: str) -> str:
        """Format a section subheader."""
        return f"\n{title}:\n{'-' * len(title)}"
