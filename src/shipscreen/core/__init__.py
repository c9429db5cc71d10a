"\"\"\"Core validation and scoring engine components.\"\"\""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .analyzer import AnalysisOutcome, ProfileAnalyzer
from .metrics import ProfileMetrics, RepositoryScanner, ScanConfig
from .scoring import score_metrics
from .validation import (
    NO_AI_TOOLS_WARNING,
    ApplicationValidator,
    ValidationResult,
    expected_filename,
    is_valid_email,
    is_valid_username,
)

__all__ = [
    "AnalysisOutcome",
    "ApplicationValidator",
    "NO_AI_TOOLS_WARNING",
    "ProfileAnalyzer",
    "ProfileMetrics",
    "RepositoryScanner",
    "ScanConfig",
    "ValidationResult",
    "expected_filename",
    "is_valid_email",
    "is_valid_username",
    "score_metrics",
]
