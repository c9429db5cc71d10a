"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ScanSettings(BaseModel):
    repo_limit: int | None = Field(default=None, gt=0)
    marker_files: list[str] | None = None
    test_directories: list[str] | None = None
    workflows_path: str | None = None
    high_star_threshold: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class IntakeSettings(BaseModel):
    root: str | None = None
    year: int | None = None

    model_config = ConfigDict(extra="forbid")


class DirectorySettings(BaseModel):
    cache: bool = False
    base_url: str | None = None
    per_page: int | None = Field(default=None, gt=0, le=100)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    scan: ScanSettings = Field(default_factory=ScanSettings)
    intake: IntakeSettings = Field(default_factory=IntakeSettings)
    directory: DirectorySettings = Field(default_factory=DirectorySettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        scan_settings = self.scan.model_dump(exclude_none=True)
        if scan_settings:
            settings["scan"] = scan_settings
        intake_settings = self.intake.model_dump(exclude_none=True)
        if intake_settings:
            settings["intake"] = intake_settings
        directory_settings = self.directory.model_dump(exclude_none=True, exclude_defaults=True)
        if directory_settings:
            settings["directory"] = directory_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
