"""Errors raised while turning a coordinate into a local file."""

from __future__ import annotations

from typing import Sequence


class ArtifactResolutionError(RuntimeError):
    """Base class for failures that prevent the server from starting."""


class InvalidCoordinateError(ArtifactResolutionError, ValueError):
    """The coordinate string is not ``group:name:version``."""


class ArtifactNotFoundError(ArtifactResolutionError):
    """No configured repository had the artifact."""

    def __init__(self, coordinate: object, repositories: Sequence[str]) -> None:
        self.coordinate = coordinate
        self.repositories = list(repositories)
        tried = ", ".join(self.repositories) or "no repositories"
        super().__init__(f"{coordinate} not found in {tried}")


class ArtifactTransportError(ArtifactResolutionError):
    """A repository could not be reached or sent a malformed response."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to download {url}: {cause}")


class CacheWriteError(ArtifactResolutionError):
    """The downloaded payload could not be written into the local cache."""
