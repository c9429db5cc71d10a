"\"\"\"GitHub-backed account directory.\"\"\""

from __future__ import annotations

from typing import Any, Iterator

import requests
import structlog
from github import Auth, Github, GithubException, UnknownObjectException

from .base import AccountNotFoundError, AccountSummary, ProbeError, RepositoryDescriptor

_NETWORK_ERRORS = (GithubException, requests.RequestException)


class GitHubDirectory:
    """Directory reading public account and repository data through PyGithub."""

    DEFAULT_BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        per_page: int | None = None,
        client: Github | None = None,
    ) -> None:
        if client is None:
            auth = Auth.Token(token) if token else None
            client = Github(
                auth=auth,
                base_url=base_url or self.DEFAULT_BASE_URL,
                per_page=per_page or 30,
            )
        self._client = client
        self._logger = structlog.get_logger(__name__)

    def get_account(self, username: str) -> AccountSummary:
        try:
            user = self._client.get_user(username)
            return AccountSummary(
                login=user.login,
                public_repos=int(user.public_repos or 0),
                handle=user,
            )
        except UnknownObjectException as exc:
            raise AccountNotFoundError(username, reason="not_found") from exc
        except _NETWORK_ERRORS as exc:
            status = getattr(exc, "status", None)
            self._logger.warning("directory.account_lookup_failed", username=username, status=status)
            raise AccountNotFoundError(username, reason=f"lookup_failed:{status}") from exc

    def iter_repositories(self, account: AccountSummary) -> Iterator[RepositoryDescriptor]:
        try:
            user = account.handle or self._client.get_user(account.login)
            # Pages are fetched lazily as the caller advances.
            for repo in user.get_repos():
                yield RepositoryDescriptor(
                    full_name=repo.full_name,
                    fork=bool(repo.fork),
                    stargazers_count=int(repo.stargazers_count or 0),
                    handle=repo,
                )
        except _NETWORK_ERRORS as exc:
            raise ProbeError(f"{account.login}: cannot list repositories ({exc})") from exc

    def list_root(self, repo: RepositoryDescriptor) -> list[str]:
        try:
            contents = self._repository(repo).get_contents("")
        except _NETWORK_ERRORS as exc:
            raise ProbeError(f"{repo.full_name}: cannot list root ({exc})") from exc
        if not isinstance(contents, list):
            contents = [contents]
        return [entry.name for entry in contents]

    def path_exists(self, repo: RepositoryDescriptor, path: str) -> bool:
        try:
            self._repository(repo).get_contents(path)
        except UnknownObjectException:
            return False
        except _NETWORK_ERRORS as exc:
            raise ProbeError(f"{repo.full_name}: cannot probe {path} ({exc})") from exc
        return True

    def _repository(self, repo: RepositoryDescriptor) -> Any:
        if repo.handle is not None:
            return repo.handle
        try:
            return self._client.get_repo(repo.full_name)
        except _NETWORK_ERRORS as exc:
            raise ProbeError(f"{repo.full_name}: cannot load repository ({exc})") from exc
