"\"\"\"Repository scan producing profile metrics.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable

import structlog

from ..directory import AccountDirectory, ProbeError, RepositoryDescriptor


@dataclass
class ScanConfig:
    """Limits and evidence names used during a repository scan."""

    repo_limit: int = 30
    marker_files: tuple[str, ...] = (".cursorrules", ".claude", ".copilot", "cursor.json")
    test_directories: tuple[str, ...] = ("test", "tests", "__tests__", "spec")
    workflows_path: str = ".github/workflows"
    high_star_threshold: int = 10


@dataclass(slots=True)
class ProfileMetrics:
    """Counts gathered from an account's repositories."""

    public_repo_count: int = 0
    ai_tool_marker_count: int = 0
    high_star_repo_count: int = 0
    total_stars: int = 0
    has_ci_cd: bool = False
    has_tests: bool = False
    scanned_repo_count: int = 0
    probe_failures: list[str] = field(default_factory=list)


class RepositoryScanner:
    """Fold a bounded repository sequence into :class:`ProfileMetrics`.

    Only the first ``repo_limit`` repositories are considered and forks among them
    are skipped. ``has_ci_cd`` and ``has_tests`` stay true once set. A failed probe
    counts as missing evidence and never stops the scan.
    """

    def __init__(self, directory: AccountDirectory, *, config: ScanConfig | None = None) -> None:
        self._directory = directory
        self._config = config or ScanConfig()
        self._logger = structlog.get_logger(__name__)

    def scan(
        self,
        repositories: Iterable[RepositoryDescriptor],
        *,
        public_repo_count: int,
    ) -> ProfileMetrics:
        metrics = ProfileMetrics(public_repo_count=public_repo_count)
        bounded = islice(repositories, self._config.repo_limit)
        while True:
            try:
                repo = next(bounded)
            except StopIteration:
                break
            except ProbeError as exc:
                self._record_failure(metrics, "<listing>", "repositories", exc)
                break
            if repo.fork:
                continue
            self._fold(metrics, repo)
        return metrics

    def _fold(self, metrics: ProfileMetrics, repo: RepositoryDescriptor) -> None:
        metrics.scanned_repo_count += 1

        if self._has_marker(metrics, repo):
            metrics.ai_tool_marker_count += 1

        if not metrics.has_ci_cd and self._probe(metrics, repo, self._config.workflows_path):
            metrics.has_ci_cd = True

        if not metrics.has_tests:
            for directory in self._config.test_directories:
                if self._probe(metrics, repo, directory):
                    metrics.has_tests = True
                    break

        metrics.total_stars += repo.stargazers_count
        if repo.stargazers_count > self._config.high_star_threshold:
            metrics.high_star_repo_count += 1

    def _has_marker(self, metrics: ProfileMetrics, repo: RepositoryDescriptor) -> bool:
        try:
            entries = self._directory.list_root(repo)
        except ProbeError as exc:
            self._record_failure(metrics, repo.full_name, "", exc)
            return False
        markers = set(self._config.marker_files)
        return any(name in markers for name in entries)

    def _probe(self, metrics: ProfileMetrics, repo: RepositoryDescriptor, path: str) -> bool:
        try:
            return self._directory.path_exists(repo, path)
        except ProbeError as exc:
            self._record_failure(metrics, repo.full_name, path, exc)
            return False

    def _record_failure(
        self,
        metrics: ProfileMetrics,
        repo_name: str,
        path: str,
        exc: Exception,
    ) -> None:
        metrics.probe_failures.append(f"{repo_name}:{path or '/'}")
        self._logger.debug("scan.probe_failed", repo=repo_name, path=path, error=str(exc))
