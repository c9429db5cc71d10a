"\"\"\"GitHub profile analysis.\"\"\""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from ..directory import AccountDirectory
from ..schemas import ScoreBreakdown
from .metrics import ProfileMetrics, RepositoryScanner, ScanConfig
from .scoring import score_metrics


@dataclass(slots=True)
class AnalysisOutcome:
    """Complete analysis payload for one account."""

    username: str
    metrics: ProfileMetrics
    breakdown: ScoreBreakdown


class ProfileAnalyzer:
    """Resolve an account, scan its repositories and score the result.

    Raises :class:`~shipscreen.directory.AccountNotFoundError` when the account
    lookup fails; no partial breakdown is produced in that case.
    """

    def __init__(
        self,
        directory: AccountDirectory,
        *,
        scan_config: ScanConfig | None = None,
    ) -> None:
        self._directory = directory
        self._scanner = RepositoryScanner(directory, config=scan_config)
        self._logger = structlog.get_logger(__name__)

    def analyze(self, username: str) -> AnalysisOutcome:
        account = self._directory.get_account(username)
        metrics = self._scanner.scan(
            self._directory.iter_repositories(account),
            public_repo_count=account.public_repos,
        )
        breakdown = score_metrics(metrics)

        self._logger.info(
            "analysis.completed",
            username=username,
            scanned_repos=metrics.scanned_repo_count,
            probe_failures=len(metrics.probe_failures),
            total_score=breakdown.total_score,
        )
        return AnalysisOutcome(username=username, metrics=metrics, breakdown=breakdown)
