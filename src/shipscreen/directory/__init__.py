"\"\"\"Account-and-repository directories queried by the profile analyzer.\"\"\""

from __future__ import annotations

from .base import (
    AccountDirectory,
    AccountNotFoundError,
    AccountSummary,
    ProbeError,
    RepositoryDescriptor,
)
from .cache import CachingDirectory
from .github import GitHubDirectory

__all__ = [
    "AccountDirectory",
    "AccountNotFoundError",
    "AccountSummary",
    "CachingDirectory",
    "GitHubDirectory",
    "ProbeError",
    "RepositoryDescriptor",
]
