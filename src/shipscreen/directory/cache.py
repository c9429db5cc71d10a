"\"\"\"Memoizing wrapper for account directories.\"\"\""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator

import pendulum
import structlog

from .base import AccountDirectory, AccountSummary, RepositoryDescriptor


class CachingDirectory:
    """Cache directory lookups per ``(key, as_of)`` bucket.

    ``as_of_provider`` returns the current bucket; by default one calendar day in
    UTC, so lookups are reused within a day and refetched the next. Entries are
    dropped through :meth:`invalidate`, and entries from earlier buckets are
    dropped once the bucket rolls over. Exceptions are never cached.
    """

    def __init__(
        self,
        inner: AccountDirectory,
        *,
        as_of_provider: Callable[[], Hashable] | None = None,
    ) -> None:
        self._inner = inner
        self._as_of_provider = as_of_provider or _today_utc
        self._entries: dict[tuple[str, str, Hashable, Any], Any] = {}
        self._bucket: Hashable | None = None
        self._logger = structlog.get_logger(__name__)

    def get_account(self, username: str) -> AccountSummary:
        return self._cached(
            ("account", username.lower(), None),
            lambda: self._inner.get_account(username),
        )

    def iter_repositories(self, account: AccountSummary) -> Iterator[RepositoryDescriptor]:
        key = ("repos", account.login.lower(), None)
        replay = self._cached(key, lambda: _Replay(self._inner.iter_repositories(account)))
        return replay.iterate(on_error=lambda: self._forget(key))

    def list_root(self, repo: RepositoryDescriptor) -> list[str]:
        return list(
            self._cached(
                ("root", _owner(repo), repo.full_name),
                lambda: self._inner.list_root(repo),
            )
        )

    def path_exists(self, repo: RepositoryDescriptor, path: str) -> bool:
        return self._cached(
            ("path", _owner(repo), (repo.full_name, path)),
            lambda: self._inner.path_exists(repo, path),
        )

    def invalidate(self, username: str | None = None) -> int:
        """Drop cached entries for ``username`` (all entries when omitted)."""
        if username is None:
            dropped = len(self._entries)
            self._entries.clear()
        else:
            owner = username.lower()
            stale = [key for key in self._entries if key[1] == owner]
            for key in stale:
                del self._entries[key]
            dropped = len(stale)
        self._logger.debug("directory.cache_invalidated", username=username, dropped=dropped)
        return dropped

    def _forget(self, key: tuple[str, str, Any]) -> None:
        kind, owner, detail = key
        self._entries.pop((kind, owner, self._as_of_provider(), detail), None)

    def _current_bucket(self) -> Hashable:
        as_of = self._as_of_provider()
        if as_of != self._bucket:
            stale = [key for key in self._entries if key[2] != as_of]
            for key in stale:
                del self._entries[key]
            if stale:
                self._logger.debug("directory.cache_rolled_over", as_of=as_of, dropped=len(stale))
            self._bucket = as_of
        return as_of

    def _cached(self, key: tuple[str, str, Any], loader: Callable[[], Any]) -> Any:
        kind, owner, detail = key
        as_of = self._current_bucket()
        full_key = (kind, owner, as_of, detail)
        if full_key in self._entries:
            return self._entries[full_key]
        value = loader()
        self._entries[full_key] = value
        return value


def _owner(repo: RepositoryDescriptor) -> str:
    return repo.full_name.split("/", 1)[0].lower()


def _today_utc() -> str:
    return pendulum.now("UTC").to_date_string()


class _Replay:
    """Lazily consumed sequence that can be iterated again from the start."""

    def __init__(self, source: Iterator[RepositoryDescriptor]):
        self._source = source
        self._seen: list[RepositoryDescriptor] = []
        self._exhausted = False

    def iterate(self, *, on_error: Callable[[], None]) -> Iterator[RepositoryDescriptor]:
        index = 0
        while True:
            if index < len(self._seen):
                yield self._seen[index]
            elif self._exhausted:
                return
            else:
                try:
                    item = next(self._source)
                except StopIteration:
                    self._exhausted = True
                    return
                except Exception:
                    on_error()
                    raise
                self._seen.append(item)
                yield item
            index += 1
