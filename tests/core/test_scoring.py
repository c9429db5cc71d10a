from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from shipscreen.core import ProfileMetrics, score_metrics
from shipscreen.core.scoring import genai_score, oss_score, prod_score
from shipscreen.schemas import ScoreBreakdown


def test_reference_scenario():
    metrics = ProfileMetrics(
        public_repo_count=15,
        ai_tool_marker_count=2,
        high_star_repo_count=1,
        total_stars=8,
        has_ci_cd=True,
        has_tests=False,
    )

    breakdown = score_metrics(metrics)

    assert breakdown.genai_score == 20
    assert breakdown.oss_score == 13
    assert breakdown.projects_score == 10
    assert breakdown.activity_score == 5
    assert breakdown.prod_score == 3
    assert breakdown.total_score == 51


def test_empty_profile_keeps_baselines():
    breakdown = score_metrics(ProfileMetrics())

    assert breakdown.model_dump() == {
        "genai_score": 0,
        "oss_score": 0,
        "projects_score": 0,
        "activity_score": 3,
        "prod_score": 1,
        "total_score": 4,
    }


def test_genai_score_saturates_at_five_markers():
    scores = [genai_score(count) for count in range(0, 9)]

    assert scores[:6] == [0, 10, 20, 30, 40, 50]
    assert all(score == 50 for score in scores[5:])


def test_star_bonus_is_capped_at_ten():
    assert oss_score(0, 10) == 10
    assert oss_score(0, 5_000) == 10
    assert oss_score(2, 5_000) == 20
    assert oss_score(10, 5_000) == 30


@pytest.mark.parametrize(
    ("ci", "tests", "expected"),
    [(False, False, 1), (True, False, 3), (False, True, 3), (True, True, 5)],
)
def test_prod_score_baseline(ci: bool, tests: bool, expected: int):
    assert prod_score(ci, tests) == expected


def test_activity_threshold_is_strict():
    assert score_metrics(ProfileMetrics(public_repo_count=10)).activity_score == 3
    assert score_metrics(ProfileMetrics(public_repo_count=11)).activity_score == 5


def test_scores_stay_within_bounds():
    for markers, high, stars, repos, ci, tests in itertools.product(
        (0, 1, 4, 5, 30),
        (0, 1, 6, 30),
        (0, 9, 11, 100_000),
        (0, 5, 10, 11, 500),
        (False, True),
        (False, True),
    ):
        breakdown = score_metrics(
            ProfileMetrics(
                public_repo_count=repos,
                ai_tool_marker_count=markers,
                high_star_repo_count=high,
                total_stars=stars,
                has_ci_cd=ci,
                has_tests=tests,
            )
        )
        parts = (
            breakdown.genai_score,
            breakdown.oss_score,
            breakdown.projects_score,
            breakdown.activity_score,
            breakdown.prod_score,
        )
        assert 0 <= breakdown.genai_score <= 50
        assert 0 <= breakdown.oss_score <= 30
        assert 0 <= breakdown.projects_score <= 10
        assert 0 <= breakdown.activity_score <= 5
        assert 0 <= breakdown.prod_score <= 5
        assert breakdown.total_score == sum(parts) <= 100


def test_breakdown_rejects_out_of_range_scores():
    with pytest.raises(ValidationError):
        ScoreBreakdown(genai_score=51, oss_score=0, projects_score=0, activity_score=0, prod_score=0)


def test_breakdown_total_cannot_be_supplied():
    with pytest.raises(ValidationError):
        ScoreBreakdown(
            genai_score=0,
            oss_score=0,
            projects_score=0,
            activity_score=0,
            prod_score=0,
            total_score=99,
        )
