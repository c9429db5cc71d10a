"\"\"\"Dependency injection container for the intake engine.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import ApplicationValidator, ProfileAnalyzer, ScanConfig
from .directory import CachingDirectory, GitHubDirectory
from .pipeline import IntakePipeline, ScorecardWriter


class IntakeContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration(
        default={"directory": {"mode": "plain"}, "intake": {"root": "."}},
    )

    github_directory = providers.Singleton(
        GitHubDirectory,
        token=config.github.token,
        base_url=config.directory.base_url,
        per_page=config.directory.per_page,
    )

    directory = providers.Selector(
        config.directory.mode,
        plain=github_directory,
        cached=providers.Singleton(CachingDirectory, inner=github_directory),
    )

    scan_config = providers.Singleton(ScanConfig)

    validator = providers.Singleton(ApplicationValidator)

    analyzer = providers.Factory(
        ProfileAnalyzer,
        directory=directory,
        scan_config=scan_config,
    )

    scorecard_writer = providers.Singleton(ScorecardWriter)

    pipeline = providers.Factory(
        IntakePipeline,
        validator=validator,
        analyzer=analyzer,
        root=config.intake.root,
        year=config.intake.year,
        writer=scorecard_writer,
    )


def create_container(*, settings: dict | None = None, token: str | None = None) -> IntakeContainer:
    """Instantiate container with optional overrides."""

    container = IntakeContainer()
    container.config.from_dict({"github": {"token": token}})

    if not settings:
        return container

    intake_settings = settings.get("intake", {}) if isinstance(settings, dict) else {}
    if intake_settings:
        container.config.intake.from_dict(intake_settings)

    directory_settings = settings.get("directory", {}) if isinstance(settings, dict) else {}
    if directory_settings:
        container.config.directory.from_dict(
            {
                "base_url": directory_settings.get("base_url"),
                "per_page": directory_settings.get("per_page"),
                "mode": "cached" if directory_settings.get("cache") else "plain",
            }
        )

    scan_settings = settings.get("scan", {}) if isinstance(settings, dict) else {}
    if scan_settings:
        scan_config = ScanConfig(
            **{
                key: tuple(value) if isinstance(value, list) else value
                for key, value in scan_settings.items()
            }
        )
        container.scan_config.override(providers.Object(scan_config))

    return container
