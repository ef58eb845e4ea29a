"""Resolve a coordinate to a local file, downloading it on a cache miss."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import httpx

from servedoc.settings import Settings

from .domain import Coordinate
from .exceptions import ArtifactNotFoundError
from .fetcher import RemoteFetcher
from .store import CacheStore

log = logging.getLogger(__name__)


class ArtifactResolver:
    """Cache-first lookup in front of a :class:`RemoteFetcher`."""

    def __init__(
        self,
        local_repository: Path | str,
        remote_repositories: Sequence[str],
        fetcher: Optional[RemoteFetcher] = None,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ) -> None:
        self.store = CacheStore(local_repository)
        self.remote_repositories = list(remote_repositories)
        self.fetcher = fetcher or RemoteFetcher(self.store, client=client, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.Client] = None) -> "ArtifactResolver":
        return cls(
            settings.local_repository,
            settings.remote_repositories,
            client=client,
            timeout=settings.fetch_timeout,
        )

    def resolve(self, coord: Coordinate) -> Path:
        if self.store.exists(coord):
            path = self.store.path_for(coord)
            log.debug("Using cached %s at %s", coord, path)
            return path

        result = self.fetcher.fetch(coord, self.remote_repositories)
        if not result.ok or result.path is None:
            raise ArtifactNotFoundError(coord, self.remote_repositories)
        return result.path

    def close(self) -> None:
        self.fetcher.close()

    def __enter__(self) -> "ArtifactResolver":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
