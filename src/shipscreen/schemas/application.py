"\"\"\"Pydantic models for submitted application files.\"\"\""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_SECTIONS: tuple[str, ...] = (
    "essentials",
    "genai_mastery",
    "tech_stack_alignment",
    "shipping_velocity",
    "availability",
)


class Essentials(BaseModel):
    """Identity and contact details of the applicant."""

    github_username: str
    email: str
    full_name: str

    model_config = ConfigDict(extra="allow")

    @field_validator("github_username", "email", "full_name", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # YAML reads bare numbers such as `12345` as ints.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class GenAIMastery(BaseModel):
    """Declared AI-assisted development tooling."""

    primary_tools: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @field_validator("primary_tools", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str) or not isinstance(value, Iterable):
            return [str(value)]
        return [str(item) for item in value]


class Availability(BaseModel):
    """When and how much the applicant can commit."""

    start_date: date | str
    commitment_level: str | int | float

    model_config = ConfigDict(extra="allow")


class ApplicationRecord(BaseModel):
    """Typed view over an application that already passed validation."""

    essentials: Essentials
    genai_mastery: GenAIMastery
    tech_stack_alignment: dict[str, Any] = Field(default_factory=dict)
    shipping_velocity: dict[str, Any] = Field(default_factory=dict)
    availability: Availability

    model_config = ConfigDict(extra="allow")

    @property
    def username(self) -> str:
        return self.essentials.github_username
