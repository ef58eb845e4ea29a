"""HTTP client that pulls artifacts from an ordered list of repositories."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

import httpx

from .domain import Coordinate
from .exceptions import ArtifactTransportError, CacheWriteError
from .store import CacheStore


class FetchStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass
class RepositoryAttempt:
    repository: str
    url: str
    outcome: str
    status_code: int


@dataclass
class FetchResult:
    status: FetchStatus
    path: Optional[Path] = None
    attempts: List[RepositoryAttempt] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.FOUND


class RemoteFetcher:
    """Download an artifact from the first repository that has it.

    A 404 or any other non-200 status moves on to the next repository.
    Transport failures are not retried and abort the whole fetch.
    """

    def __init__(
        self,
        store: CacheStore,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ) -> None:
        self.store = store
        self.log = logging.getLogger(self.__class__.__name__)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch(self, coord: Coordinate, repositories: Sequence[str]) -> FetchResult:
        attempts: List[RepositoryAttempt] = []
        for repository in repositories:
            url = coord.to_remote_url(repository)
            self.log.info("Downloading from %s", url)
            start_time = time.monotonic()
            try:
                response = self._client.get(url)
            except httpx.RequestError as exc:
                raise ArtifactTransportError(str(url), exc) from exc
            except KeyboardInterrupt:
                self.log.warning("Interrupted while downloading %s", url)
                raise

            if response.status_code == 404:
                attempts.append(RepositoryAttempt(repository, str(url), "missing", 404))
                self.log.debug("%s not found at %s", coord, repository)
                continue
            if response.status_code != 200:
                attempts.append(RepositoryAttempt(repository, str(url), "unexpected", response.status_code))
                self.log.warning(
                    "The server at %s returned HTTP %s when fetching %s",
                    repository,
                    response.status_code,
                    coord,
                )
                continue

            attempts.append(RepositoryAttempt(repository, str(url), "found", 200))
            payload = response.content
            path = self._store(coord, payload)
            elapsed = max(time.monotonic() - start_time, 1e-3)
            self.log.info(
                "Downloaded %s from %s (%d bytes, %.2f MB/s, %.2fs)",
                coord,
                repository,
                len(payload),
                len(payload) / 1024 / 1024 / elapsed,
                elapsed,
            )
            return FetchResult(FetchStatus.FOUND, path, attempts)

        return FetchResult(FetchStatus.NOT_FOUND, None, attempts)

    def _store(self, coord: Coordinate, payload: bytes) -> Path:
        try:
            return self.store.write_if_absent(coord, payload)
        except FileExistsError as exc:
            # another resolution finished first; its entry is as good as ours
            if self.store.exists(coord):
                self.log.info("%s was cached concurrently, reusing it", coord)
                return self.store.path_for(coord)
            raise CacheWriteError(f"Cannot write {self.store.path_for(coord)}: {exc}") from exc
