"""Score tier classification shared by the mock generator and the API."""

from __future__ import annotations

from enum import Enum


class PerformanceTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    IMPROVING = "improving"


# Evaluated top-down; the first threshold the score reaches wins.
TIER_THRESHOLDS: tuple[tuple[float, PerformanceTier], ...] = (
    (90, PerformanceTier.EXCELLENT),
    (75, PerformanceTier.GOOD),
    (60, PerformanceTier.FAIR),
)


def classify_score(score: float) -> PerformanceTier:
    """Map a numeric score to its performance tier.

    Scores outside 0-100 are not rejected here; request validation happens
    at the API boundary.
    """

    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return PerformanceTier.IMPROVING


__all__ = ["PerformanceTier", "TIER_THRESHOLDS", "classify_score"]
