from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import pytest

from shipscreen.directory import (
    AccountNotFoundError,
    AccountSummary,
    ProbeError,
    RepositoryDescriptor,
)


@dataclass
class StubRepo:
    name: str
    fork: bool = False
    stars: int = 0
    root: tuple[str, ...] = ()
    paths: tuple[str, ...] = ()
    failing: tuple[str, ...] = ()


class StubDirectory:
    """In-memory directory; a path of "/" in ``failing`` breaks the root listing."""

    def __init__(
        self,
        *,
        login: str = "alice",
        public_repos: int = 0,
        repos: list[StubRepo] | None = None,
        missing: bool = False,
    ) -> None:
        self._login = login
        self._public_repos = public_repos
        self._repos = {f"{login}/{repo.name}": repo for repo in repos or []}
        self._missing = missing
        self.yielded = 0
        self.calls: list[tuple[str, str, str]] = []

    def get_account(self, username: str) -> AccountSummary:
        self.calls.append(("get_account", username, ""))
        if self._missing or username.lower() != self._login.lower():
            raise AccountNotFoundError(username, reason="not_found")
        return AccountSummary(login=self._login, public_repos=self._public_repos)

    def iter_repositories(self, account: AccountSummary) -> Iterator[RepositoryDescriptor]:
        for full_name, repo in self._repos.items():
            self.yielded += 1
            yield RepositoryDescriptor(full_name=full_name, fork=repo.fork, stargazers_count=repo.stars)

    def list_root(self, repo: RepositoryDescriptor) -> list[str]:
        self.calls.append(("list_root", repo.full_name, ""))
        stub = self._repos[repo.full_name]
        if "/" in stub.failing:
            raise ProbeError(f"{repo.full_name}: rate limited")
        return list(stub.root)

    def path_exists(self, repo: RepositoryDescriptor, path: str) -> bool:
        self.calls.append(("path_exists", repo.full_name, path))
        stub = self._repos[repo.full_name]
        if path in stub.failing:
            raise ProbeError(f"{repo.full_name}: rate limited")
        return path in stub.paths


@pytest.fixture
def stub_repo() -> type[StubRepo]:
    return StubRepo


@pytest.fixture
def stub_directory() -> type[StubDirectory]:
    return StubDirectory


@pytest.fixture
def application_data() -> dict[str, Any]:
    return {
        "essentials": {
            "github_username": "alice",
            "email": "alice@example.com",
            "full_name": "Alice Example",
        },
        "genai_mastery": {"primary_tools": ["Claude", "Cursor"]},
        "tech_stack_alignment": {"languages": ["Python", "TypeScript"]},
        "shipping_velocity": {"last_shipped": "Internal tooling"},
        "availability": {"start_date": "2025-09-01", "commitment_level": "full-time"},
    }
