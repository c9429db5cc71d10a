"\"\"\"Score breakdown and persisted scorecard schemas.\"\"\""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ScoreBreakdown(BaseModel):
    """Five weighted sub-scores of a profile analysis."""

    genai_score: int = Field(ge=0, le=50)
    oss_score: int = Field(ge=0, le=30)
    projects_score: int = Field(ge=0, le=10)
    activity_score: int = Field(ge=0, le=5)
    prod_score: int = Field(ge=0, le=5)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_score(self) -> int:
        return (
            self.genai_score
            + self.oss_score
            + self.projects_score
            + self.activity_score
            + self.prod_score
        )


class ScorecardScores(ScoreBreakdown):
    """Breakdown tagged with the applicant and generation time."""

    username: str
    timestamp: str

    # Stored records carry total_score; it is recomputed on load.
    model_config = ConfigDict(extra="ignore", frozen=True)


class Scorecard(BaseModel):
    """Per-applicant scorecard record, one JSON document per applicant."""

    scores: ScorecardScores

    model_config = ConfigDict(extra="forbid")

    @property
    def username(self) -> str:
        return self.scores.username

    @property
    def breakdown(self) -> ScoreBreakdown:
        return ScoreBreakdown(
            genai_score=self.scores.genai_score,
            oss_score=self.scores.oss_score,
            projects_score=self.scores.projects_score,
            activity_score=self.scores.activity_score,
            prod_score=self.scores.prod_score,
        )
