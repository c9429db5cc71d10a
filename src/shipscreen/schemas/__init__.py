"\"\"\"Pydantic schema definitions for application and scorecard documents.\"\"\""

from __future__ import annotations

from .application import (
    REQUIRED_SECTIONS,
    ApplicationRecord,
    Availability,
    Essentials,
    GenAIMastery,
)
from .scorecard import Scorecard, ScorecardScores, ScoreBreakdown

__all__ = [
    "REQUIRED_SECTIONS",
    "ApplicationRecord",
    "Availability",
    "Essentials",
    "GenAIMastery",
    "ScoreBreakdown",
    "Scorecard",
    "ScorecardScores",
]
