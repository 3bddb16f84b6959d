"""Derived dashboard metrics.

All functions here are pure functions of DashboardStats and are recomputed
on every render.
"""

import math

from librarydash.domain.entities import DashboardStats, DerivedMetrics

# Three-level availability label: below 40, 40 up to 70, 70 and above.
ATTENTION_THRESHOLD = 40
EXCELLENT_THRESHOLD = 70
# Independent binary stock label.
WELL_STOCKED_THRESHOLD = 50

LABEL_NEEDS_ATTENTION = "Needs Attention"
LABEL_GOOD = "Good"
LABEL_EXCELLENT = "Excellent"
LABEL_WELL_STOCKED = "well-stocked"
LABEL_GETTING_BUSY = "getting busy"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding toward +infinity."""
    return math.floor(value + 0.5)


def availability_percentage(stats: DashboardStats) -> int:
    """Percentage of books currently available, 0 for an empty library."""
    if stats.total_books <= 0:
        return 0
    return round_half_up(stats.available_books / stats.total_books * 100)


def usage_rate(stats: DashboardStats) -> int:
    """Total transactions as a percentage of total books."""
    return round_half_up(stats.total_transactions / max(stats.total_books, 1) * 100)


def borrowed_books(stats: DashboardStats) -> int:
    """Books currently out, never negative."""
    return max(stats.total_books - stats.available_books, 0)


def availability_label(percentage: int) -> str:
    """Qualitative three-level label for an availability percentage."""
    if percentage >= EXCELLENT_THRESHOLD:
        return LABEL_EXCELLENT
    if percentage >= ATTENTION_THRESHOLD:
        return LABEL_GOOD
    return LABEL_NEEDS_ATTENTION


def stock_label(percentage: int) -> str:
    """Binary stock label for an availability percentage."""
    return LABEL_WELL_STOCKED if percentage >= WELL_STOCKED_THRESHOLD else LABEL_GETTING_BUSY


def compute_metrics(stats: DashboardStats) -> DerivedMetrics:
    """Compute every derived metric for a summary."""
    percentage = availability_percentage(stats)
    return DerivedMetrics(
        availability_percentage=percentage,
        usage_rate=usage_rate(stats),
        borrowed_books=borrowed_books(stats),
        availability_label=availability_label(percentage),
        stock_label=stock_label(percentage),
    )
