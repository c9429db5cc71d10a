from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from dependency_injector import providers
from typer.testing import CliRunner

from shipscreen import cli
from shipscreen.cli import app
from shipscreen.container import create_container


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def use_directory(monkeypatch: pytest.MonkeyPatch):
    """Route the CLI's container to an in-memory directory."""

    def install(directory) -> None:
        def fake_create_container(*, settings=None, token=None):
            container = create_container(settings=settings, token=token)
            container.directory.override(providers.Object(directory))
            return container

        monkeypatch.setattr(cli, "create_container", fake_create_container)

    return install


def write_yaml(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")


def test_cli_validate_passes(tmp_path: Path, runner: CliRunner, application_data) -> None:
    path = tmp_path / "alice.yml"
    write_yaml(path, application_data)

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 0, result.stdout
    assert "✅ Validation Passed!" in result.stdout


def test_cli_validate_fails_with_errors(tmp_path: Path, runner: CliRunner, application_data) -> None:
    path = tmp_path / "bob.yml"
    write_yaml(path, application_data)

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "File should be named: alice.yml" in result.stdout


def test_cli_analyze_writes_scorecard(
    tmp_path: Path,
    runner: CliRunner,
    use_directory,
    stub_directory,
    stub_repo,
) -> None:
    use_directory(
        stub_directory(
            public_repos=15,
            repos=[stub_repo("kit", stars=30, root=(".cursorrules",), paths=(".github/workflows", "tests"))],
        )
    )

    result = runner.invoke(app, ["analyze", "alice", "--root", str(tmp_path), "--year", "2025"])

    assert result.exit_code == 0, result.stdout
    assert "Total score: 45/100" in result.stdout
    stored = json.loads((tmp_path / "applications/2025/scorecards/alice-score.json").read_text(encoding="utf-8"))
    assert stored["scores"]["total_score"] == 45


def test_cli_analyze_unknown_account(tmp_path: Path, runner: CliRunner, use_directory, stub_directory) -> None:
    use_directory(stub_directory(missing=True))

    result = runner.invoke(app, ["analyze", "ghost", "--root", str(tmp_path), "--no-write"])

    assert result.exit_code == 2
    assert not (tmp_path / "applications").exists()


def test_cli_process_runs_full_intake(
    tmp_path: Path,
    runner: CliRunner,
    use_directory,
    stub_directory,
    stub_repo,
    application_data,
) -> None:
    use_directory(stub_directory(public_repos=3, repos=[stub_repo("kit", root=(".claude",))]))
    relative = "applications/2025/pending/alice.yml"
    write_yaml(tmp_path / relative, application_data)

    result = runner.invoke(
        app,
        ["process", relative, "README.md", "--root", str(tmp_path), "--year", "2025", "--pr-title", "alice applies"],
    )

    assert result.exit_code == 0, result.stdout
    assert "Total score: 17/100" in result.stdout
    assert "Verdict: keep_building" in result.stdout
    assert (tmp_path / "applications/2025/scorecards/alice-scorecard.md").exists()


def test_cli_process_without_application(tmp_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["process", "README.md", "--root", str(tmp_path), "--year", "2025"])

    assert result.exit_code == 1


def test_cli_rejects_invalid_config(tmp_path: Path, runner: CliRunner, application_data) -> None:
    path = tmp_path / "alice.yml"
    write_yaml(path, application_data)
    config = tmp_path / "config.yaml"
    write_yaml(config, {"scan": {"repo_limit": -1}})

    result = runner.invoke(app, ["validate", str(path), "--config", str(config)])

    assert result.exit_code != 0
