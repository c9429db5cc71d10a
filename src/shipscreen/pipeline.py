"\"\"\"Intake pipeline assembly and execution.\"\"\""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Iterable, Literal, Mapping

import pendulum
import structlog
import yaml
from pydantic import ValidationError

from .core import ApplicationValidator, ProfileAnalyzer, ScanConfig, ValidationResult
from .core.analyzer import AnalysisOutcome
from .directory import AccountNotFoundError, GitHubDirectory
from .report import render_scorecard_markdown
from .schemas import ApplicationRecord, Scorecard, ScorecardScores, ScoreBreakdown

IntakeStatus = Literal["invalid", "account_not_found", "scored"]

PR_TITLE_WARNING = "PR title should include your GitHub username"


class ApplicationLocateError(ValueError):
    """Raised when the changed files do not contain exactly one application."""

    def __init__(self, message: str, matches: list[str] | None = None):
        super().__init__(message)
        self.matches = matches or []


def pending_dir(year: int) -> PurePosixPath:
    return PurePosixPath("applications") / str(year) / "pending"


def scorecard_dir(root: Path, year: int) -> Path:
    return root / "applications" / str(year) / "scorecards"


def locate_application(changed_files: Iterable[str], year: int) -> str:
    """Return the single pending application among ``changed_files``."""
    expected_parent = pending_dir(year)
    matches: list[str] = []
    for raw in changed_files:
        candidate = PurePosixPath(raw.strip())
        if candidate.parent == expected_parent and candidate.suffix == ".yml":
            matches.append(str(candidate))
    if not matches:
        raise ApplicationLocateError(f"No application files found under {expected_parent}/")
    if len(matches) > 1:
        raise ApplicationLocateError(
            "Multiple application files detected! "
            "Please submit only one application per pull request.",
            matches,
        )
    return matches[0]


def build_scorecard(
    username: str,
    breakdown: ScoreBreakdown,
    *,
    timestamp: str | None = None,
) -> Scorecard:
    scores = ScorecardScores(
        **breakdown.model_dump(exclude={"total_score"}),
        username=username,
        timestamp=timestamp or pendulum.now().to_iso8601_string(),
    )
    return Scorecard(scores=scores)


class ScorecardWriter:
    """Persist scorecards; a later write for the same applicant replaces the earlier one."""

    def write(self, scorecard: Scorecard, *, root: Path, year: int) -> Path:
        directory = scorecard_dir(root, year)
        directory.mkdir(parents=True, exist_ok=True)
        json_path = directory / f"{scorecard.username}-score.json"
        json_path.write_text(
            json.dumps(scorecard.model_dump(mode="json"), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        markdown_path = directory / f"{scorecard.username}-scorecard.md"
        markdown_path.write_text(render_scorecard_markdown(scorecard), encoding="utf-8")
        return json_path

    def read(self, username: str, *, root: Path, year: int) -> Scorecard:
        path = scorecard_dir(root, year) / f"{username}-score.json"
        return Scorecard.model_validate_json(path.read_text(encoding="utf-8"))


@dataclass(slots=True)
class IntakeResult:
    """Outcome of processing one pull request's application."""

    status: IntakeStatus
    application_path: str
    username: str
    validation: ValidationResult
    record: ApplicationRecord | None = None
    analysis: AnalysisOutcome | None = None
    scorecard: Scorecard | None = None
    scorecard_path: Path | None = None
    errors: list[str] = field(default_factory=list)


class IntakePipeline:
    """End-to-end intake orchestrator: validate, then analyze and persist."""

    def __init__(
        self,
        *,
        validator: ApplicationValidator,
        analyzer: ProfileAnalyzer,
        root: Path | str = ".",
        year: int | None = None,
        writer: ScorecardWriter | None = None,
    ) -> None:
        self._validator = validator
        self._analyzer = analyzer
        self._root = Path(root)
        self._year = year or pendulum.now().year
        self._writer = writer or ScorecardWriter()
        self._logger = structlog.get_logger(__name__)

    @property
    def year(self) -> int:
        return self._year

    def validate(self, path: Path, *, pr_title: str | None = None) -> ValidationResult:
        result = self._validator.validate_file(path)
        username = path.stem
        if pr_title is not None and username not in pr_title:
            result.warnings.append(PR_TITLE_WARNING)
        return result

    def analyze(self, username: str, *, write: bool = True) -> tuple[AnalysisOutcome, Scorecard, Path | None]:
        outcome = self._analyzer.analyze(username)
        scorecard = build_scorecard(username, outcome.breakdown)
        path = self._writer.write(scorecard, root=self._root, year=self._year) if write else None
        return outcome, scorecard, path

    def process(
        self,
        changed_files: Iterable[str],
        *,
        pr_title: str | None = None,
    ) -> IntakeResult:
        relative = locate_application(changed_files, self._year)
        path = self._root / relative
        username = path.stem

        validation = self.validate(path, pr_title=pr_title)
        if not validation.passed:
            self._logger.info("intake.invalid", application=relative, errors=validation.errors)
            return IntakeResult(
                status="invalid",
                application_path=relative,
                username=username,
                validation=validation,
            )

        raw = self._read_raw(path)
        # Validation has proven the username present and equal to the file stem.
        username = str(raw["essentials"]["github_username"])
        record = self._typed_view(raw, application=relative)

        try:
            outcome, scorecard, scorecard_path = self.analyze(username)
        except AccountNotFoundError as exc:
            self._logger.warning("intake.account_not_found", username=username, reason=exc.reason)
            return IntakeResult(
                status="account_not_found",
                application_path=relative,
                username=username,
                validation=validation,
                record=record,
                errors=[str(exc)],
            )

        self._logger.info(
            "intake.scored",
            username=username,
            total_score=scorecard.scores.total_score,
            scorecard=str(scorecard_path),
        )
        return IntakeResult(
            status="scored",
            application_path=relative,
            username=username,
            validation=validation,
            record=record,
            analysis=outcome,
            scorecard=scorecard,
            scorecard_path=scorecard_path,
        )

    @staticmethod
    def _read_raw(path: Path) -> Mapping[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)

    def _typed_view(self, raw: Mapping[str, Any], *, application: str) -> ApplicationRecord | None:
        """Best-effort typed record; type mismatches never block analysis."""
        try:
            return ApplicationRecord.model_validate(raw)
        except ValidationError as exc:
            self._logger.info(
                "intake.typed_view_skipped",
                application=application,
                errors=[
                    f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                    for error in exc.errors()
                ],
            )
            return None


def analyze_profile(
    username: str,
    token: str | None,
    *,
    scan_config: ScanConfig | None = None,
) -> AnalysisOutcome:
    """Analyze ``username`` against GitHub using ``token`` for access."""
    analyzer = ProfileAnalyzer(GitHubDirectory(token), scan_config=scan_config)
    return analyzer.analyze(username)
