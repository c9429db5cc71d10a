"\"\"\"Structural validation of submitted application files.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import structlog
import yaml

from ..schemas import REQUIRED_SECTIONS

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9](?:[a-zA-Z0-9]|-(?=[a-zA-Z0-9])){0,38}")

NO_AI_TOOLS_WARNING = "No AI tools listed - this will significantly impact your score"

_ESSENTIAL_FIELDS: tuple[str, ...] = ("github_username", "email", "full_name")
_AVAILABILITY_FIELDS: tuple[str, ...] = ("start_date", "commitment_level")


@dataclass(slots=True)
class ValidationResult:
    """Ordered errors and warnings from one validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors


class ApplicationValidator:
    """Check an application record for required sections, fields and formats.

    Every check runs and contributes to the result; only a document that cannot be
    parsed (or is not a mapping) stops validation early with a single error.
    """

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def validate_file(self, path: Path) -> ValidationResult:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return ValidationResult(errors=[f"Failed to read application: {exc}"])
        return self.validate(text, filename=path.name)

    def validate(
        self,
        record: Mapping[str, Any] | str | bytes | None,
        *,
        filename: str | None = None,
    ) -> ValidationResult:
        if isinstance(record, (str, bytes)):
            try:
                record = yaml.safe_load(record)
            except yaml.YAMLError as exc:
                self._logger.info("validation.parse_failed", filename=filename)
                return ValidationResult(errors=[f"Failed to parse YAML: {exc}"])

        if not isinstance(record, Mapping):
            return ValidationResult(errors=["Application must be a YAML mapping"])

        result = ValidationResult()
        sections = self._check_sections(record, result)

        essentials = sections.get("essentials")
        if essentials is not None:
            self._check_essentials(essentials, filename, result)

        genai = sections.get("genai_mastery")
        if genai is not None and not genai.get("primary_tools"):
            result.warnings.append(NO_AI_TOOLS_WARNING)

        availability = sections.get("availability")
        if availability is not None:
            self._require_fields(availability, "availability", _AVAILABILITY_FIELDS, result)

        self._logger.info(
            "validation.completed",
            filename=filename,
            passed=result.passed,
            error_count=len(result.errors),
            warning_count=len(result.warnings),
        )
        return result

    @staticmethod
    def _check_sections(
        record: Mapping[str, Any],
        result: ValidationResult,
    ) -> dict[str, Mapping[str, Any]]:
        present: dict[str, Mapping[str, Any]] = {}
        for name in REQUIRED_SECTIONS:
            value = record.get(name)
            if value is None:
                result.errors.append(f"Missing required section: {name}")
            elif not isinstance(value, Mapping):
                result.errors.append(f"Invalid section format: {name} must be a mapping")
            else:
                # An empty mapping still counts as present.
                present[name] = value
        return present

    def _check_essentials(
        self,
        essentials: Mapping[str, Any],
        filename: str | None,
        result: ValidationResult,
    ) -> None:
        self._require_fields(essentials, "essentials", _ESSENTIAL_FIELDS, result)

        email = essentials.get("email")
        if email and not is_valid_email(str(email)):
            result.errors.append("Invalid email format")

        username = essentials.get("github_username")
        if username and not is_valid_username(str(username)):
            result.errors.append("Invalid GitHub username format")

        if filename is not None:
            expected = expected_filename(str(username or ""))
            if Path(filename).name != expected:
                result.errors.append(f"File should be named: {expected}")

    @staticmethod
    def _require_fields(
        section: Mapping[str, Any],
        section_name: str,
        fields: tuple[str, ...],
        result: ValidationResult,
    ) -> None:
        for name in fields:
            if not section.get(name):
                result.errors.append(f"Missing required field: {section_name}.{name}")


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_username(value: str) -> bool:
    return USERNAME_PATTERN.fullmatch(value) is not None


def expected_filename(username: str) -> str:
    return f"{username}.yml"
