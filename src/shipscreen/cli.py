"\"\"\"Typer CLI entrypoint for application intake.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .directory import AccountNotFoundError
from .logging import configure_logging
from .pipeline import ApplicationLocateError
from .report import is_high_score, labels_for, render_breakdown, render_validation_report, verdict_for
from .schemas import ScoreBreakdown
from .schemas.config import load_config

app = typer.Typer(help="Application intake validation and profile scoring CLI.")

EXIT_INVALID = 1
EXIT_ACCOUNT_NOT_FOUND = 2


def _load_settings(config: Optional[Path]) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc


def _apply_intake_options(settings: dict[str, Any], root: Optional[Path], year: Optional[int]) -> dict[str, Any]:
    intake = dict(settings.get("intake", {}))
    if root is not None:
        intake["root"] = str(root)
    if year is not None:
        intake["year"] = year
    if intake:
        settings = {**settings, "intake": intake}
    return settings


ConfigOption = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path.")
LogLevelOption = typer.Option("WARNING", help="Log level for structured logging.")
TokenOption = typer.Option(None, envvar="GITHUB_TOKEN", help="GitHub access token.")
RootOption = typer.Option(None, file_okay=False, help="Repository root holding applications/.")
YearOption = typer.Option(None, help="Intake year (defaults to the current year).")


@app.command()
def validate(
    application: Path = typer.Argument(..., help="Application YAML path."),
    pr_title: Optional[str] = typer.Option(None, help="Pull request title to check for the username."),
    config: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Validate a single application file."""
    configure_logging(log_level)
    container = create_container(settings=_load_settings(config))
    pipeline = container.pipeline()

    result = pipeline.validate(application, pr_title=pr_title)
    typer.echo(render_validation_report(result))
    if not result.passed:
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def analyze(
    username: str = typer.Argument(..., help="GitHub username to analyze."),
    token: Optional[str] = TokenOption,
    root: Optional[Path] = RootOption,
    year: Optional[int] = YearOption,
    write: bool = typer.Option(True, "--write/--no-write", help="Persist the scorecard."),
    config: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Analyze a GitHub profile and compute its score."""
    configure_logging(log_level)
    settings = _apply_intake_options(_load_settings(config), root, year)
    container = create_container(settings=settings, token=token)
    pipeline = container.pipeline()

    try:
        outcome, _, path = pipeline.analyze(username, write=write)
    except AccountNotFoundError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_ACCOUNT_NOT_FOUND) from exc

    _echo_breakdown(outcome.breakdown)
    if path is not None:
        typer.echo(f"Scorecard saved to {path}.")


@app.command()
def process(
    changed_files: List[str] = typer.Argument(..., help="Files changed by the pull request."),
    pr_title: Optional[str] = typer.Option(None, help="Pull request title."),
    token: Optional[str] = TokenOption,
    root: Optional[Path] = RootOption,
    year: Optional[int] = YearOption,
    config: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Locate, validate, analyze and persist the application in a pull request."""
    configure_logging(log_level)
    settings = _apply_intake_options(_load_settings(config), root, year)
    container = create_container(settings=settings, token=token)
    pipeline = container.pipeline()

    try:
        result = pipeline.process(changed_files, pr_title=pr_title)
    except ApplicationLocateError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=EXIT_INVALID) from exc

    typer.echo(f"Application: {result.application_path}")
    typer.echo(render_validation_report(result.validation))
    if result.status == "invalid":
        raise typer.Exit(code=EXIT_INVALID)
    if result.status == "account_not_found":
        typer.echo(f"Error: {'; '.join(result.errors)}", err=True)
        raise typer.Exit(code=EXIT_ACCOUNT_NOT_FOUND)

    if result.analysis is not None:
        typer.echo("")
        _echo_breakdown(result.analysis.breakdown)
        typer.echo(f"Scorecard saved to {result.scorecard_path}.")


def _echo_breakdown(breakdown: ScoreBreakdown) -> None:
    typer.echo(render_breakdown(breakdown))
    typer.echo(f"Verdict: {verdict_for(breakdown.total_score)}")
    labels = labels_for(breakdown)
    if labels:
        typer.echo(f"Labels: {', '.join(labels)}")
    if is_high_score(breakdown.total_score):
        typer.echo("High score alert: open a review issue.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
