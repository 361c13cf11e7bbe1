"""Tier thresholds used by the mock feedback generator."""

import pytest

from app.pipelines.coaching import PerformanceTier, classify_score


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (100, PerformanceTier.EXCELLENT),
        (90, PerformanceTier.EXCELLENT),
        (89.9, PerformanceTier.GOOD),
        (89, PerformanceTier.GOOD),
        (75, PerformanceTier.GOOD),
        (74, PerformanceTier.FAIR),
        (60, PerformanceTier.FAIR),
        (59, PerformanceTier.IMPROVING),
        (0, PerformanceTier.IMPROVING),
    ],
)
def test_classify_score_boundaries(score, tier):
    assert classify_score(score) is tier


def test_out_of_range_scores_are_classified_not_rejected():
    assert classify_score(140) is PerformanceTier.EXCELLENT
    assert classify_score(-5) is PerformanceTier.IMPROVING
