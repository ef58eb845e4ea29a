"""Startup sequence: resolve the artifact, then open it, then serve."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from .modules.artifact import ArtifactResolver, Coordinate
from .modules.docsite import ArchiveFileSystem
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Wires the resolver with shared settings."""

    settings: Settings
    client: Optional[httpx.Client] = None
    resolver: ArtifactResolver = field(init=False)

    def __post_init__(self) -> None:
        self.resolver = ArtifactResolver.from_settings(self.settings, client=self.client)

    def parse_coordinate(self, text: str) -> Coordinate:
        return Coordinate.parse(
            text,
            classifier=self.settings.classifier,
            extension=self.settings.extension,
        )

    def close(self) -> None:
        self.resolver.close()


def prepare_archive(container: ServiceContainer, coord: Coordinate) -> ArchiveFileSystem:
    """Resolve ``coord`` and open it; both steps finish before any request is accepted."""

    try:
        path = container.resolver.resolve(coord)
    finally:
        container.close()
    log.debug("Resolved %s to %s", coord, path)
    return ArchiveFileSystem.open(path)
