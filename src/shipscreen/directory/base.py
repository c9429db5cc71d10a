"\"\"\"Account directory contract and shared value types.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol, runtime_checkable


class AccountNotFoundError(LookupError):
    """Raised when an account cannot be resolved in the directory."""

    def __init__(self, username: str, reason: str | None = None):
        super().__init__(f"Could not find user {username}")
        self.username = username
        self.reason = reason


class ProbeError(RuntimeError):
    """Raised when a repository-level lookup fails for reasons other than absence."""


@dataclass(slots=True, frozen=True)
class AccountSummary:
    """Public account metadata needed for scoring."""

    login: str
    public_repos: int
    handle: Any = field(default=None, repr=False, compare=False)


@dataclass(slots=True, frozen=True)
class RepositoryDescriptor:
    """Repository metadata yielded by a directory scan."""

    full_name: str
    fork: bool
    stargazers_count: int
    handle: Any = field(default=None, repr=False, compare=False)


@runtime_checkable
class AccountDirectory(Protocol):
    """Read-only view over an account-and-repository directory.

    ``get_account`` raises :class:`AccountNotFoundError` when the account cannot be
    resolved. ``list_root`` and ``path_exists`` raise :class:`ProbeError` on any
    failure other than the path being absent.
    """

    def get_account(self, username: str) -> AccountSummary:
        """Resolve an account by login."""

    def iter_repositories(self, account: AccountSummary) -> Iterator[RepositoryDescriptor]:
        """Lazily yield the account's repositories in directory order."""

    def list_root(self, repo: RepositoryDescriptor) -> list[str]:
        """Return the names of the repository's root-level entries."""

    def path_exists(self, repo: RepositoryDescriptor, path: str) -> bool:
        """Return True when ``path`` exists in the repository."""
