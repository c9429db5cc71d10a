"\"\"\"Weighted scoring of profile metrics.\"\"\""

from __future__ import annotations

from ..schemas import ScoreBreakdown
from .metrics import ProfileMetrics

GENAI_POINTS_PER_MARKER = 10
GENAI_MAX = 50
OSS_POINTS_PER_HIGH_STAR_REPO = 5
OSS_STAR_BONUS_MAX = 10
OSS_MAX = 30
PROJECTS_MAX = 10
ACTIVITY_REPO_THRESHOLD = 10
ACTIVITY_HIGH = 5
ACTIVITY_LOW = 3
PROD_CI_POINTS = 2
PROD_TEST_POINTS = 2
PROD_BASELINE = 1
PROD_MAX = 5


def genai_score(ai_tool_marker_count: int) -> int:
    return min(ai_tool_marker_count * GENAI_POINTS_PER_MARKER, GENAI_MAX)


def oss_score(high_star_repo_count: int, total_stars: int) -> int:
    # Stars beyond the bonus cap only count through the high-star repo term.
    star_bonus = min(total_stars, OSS_STAR_BONUS_MAX)
    return min(high_star_repo_count * OSS_POINTS_PER_HIGH_STAR_REPO + star_bonus, OSS_MAX)


def projects_score(public_repo_count: int) -> int:
    return min(public_repo_count, PROJECTS_MAX)


def activity_score(public_repo_count: int) -> int:
    return ACTIVITY_HIGH if public_repo_count > ACTIVITY_REPO_THRESHOLD else ACTIVITY_LOW


def prod_score(has_ci_cd: bool, has_tests: bool) -> int:
    points = (PROD_CI_POINTS if has_ci_cd else 0) + (PROD_TEST_POINTS if has_tests else 0)
    # Every profile gets the baseline point, even with no CI or tests.
    return min(points + PROD_BASELINE, PROD_MAX)


def score_metrics(metrics: ProfileMetrics) -> ScoreBreakdown:
    """Compute the score breakdown for a set of profile metrics."""
    return ScoreBreakdown(
        genai_score=genai_score(metrics.ai_tool_marker_count),
        oss_score=oss_score(metrics.high_star_repo_count, metrics.total_stars),
        projects_score=projects_score(metrics.public_repo_count),
        activity_score=activity_score(metrics.public_repo_count),
        prod_score=prod_score(metrics.has_ci_cd, metrics.has_tests),
    )
