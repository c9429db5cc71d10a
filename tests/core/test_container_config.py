from __future__ import annotations

import pytest
from pydantic import ValidationError

from shipscreen.container import create_container
from shipscreen.directory import CachingDirectory, GitHubDirectory
from shipscreen.schemas.config import AppConfig, load_config


def test_create_container_defaults():
    container = create_container()

    assert isinstance(container.directory(), GitHubDirectory)
    assert container.scan_config().repo_limit == 30
    pipeline = container.pipeline()
    assert pipeline.year >= 2025


def test_create_container_with_overrides(tmp_path):
    container = create_container(
        settings={
            "scan": {"repo_limit": 10, "marker_files": [".cursorrules", "AGENTS.md"]},
            "intake": {"root": str(tmp_path), "year": 2025},
            "directory": {"cache": True, "per_page": 50},
        },
        token="ghp_test",
    )

    scan_config = container.scan_config()
    pipeline = container.pipeline()

    assert scan_config.repo_limit == 10
    assert scan_config.marker_files == (".cursorrules", "AGENTS.md")
    assert scan_config.test_directories == ("test", "tests", "__tests__", "spec")
    assert isinstance(container.directory(), CachingDirectory)
    assert pipeline.year == 2025
    assert pipeline._root == tmp_path


def test_load_config_validation():
    data = {
        "scan": {"repo_limit": 20},
        "intake": {"year": 2026},
        "directory": {"cache": True},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["scan"] == {"repo_limit": 20}
    assert settings["intake"] == {"year": 2026}
    assert settings["directory"] == {"cache": True}


def test_empty_config_produces_no_settings():
    assert load_config({}).to_settings() == {}


@pytest.mark.parametrize(
    "raw",
    [
        ["not", "a", "mapping"],
        {"scan": {"repo_limit": 0}},
        {"scan": {"unknown": 1}},
    ],
)
def test_load_config_rejects_invalid(raw):
    with pytest.raises(ValidationError):
        load_config(raw)
