"""Artifact resolution: coordinates, local cache and remote repositories."""

from .domain import Coordinate
from .exceptions import (
    ArtifactNotFoundError,
    ArtifactResolutionError,
    ArtifactTransportError,
    CacheWriteError,
    InvalidCoordinateError,
)
from .fetcher import FetchResult, FetchStatus, RemoteFetcher
from .resolver import ArtifactResolver
from .store import CacheStore

__all__ = [
    "ArtifactNotFoundError",
    "ArtifactResolutionError",
    "ArtifactResolver",
    "ArtifactTransportError",
    "CacheStore",
    "CacheWriteError",
    "Coordinate",
    "FetchResult",
    "FetchStatus",
    "InvalidCoordinateError",
    "RemoteFetcher",
]
