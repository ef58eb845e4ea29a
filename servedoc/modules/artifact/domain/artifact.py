"""Maven coordinates and the paths derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import List, Optional

import httpx

from ..exceptions import InvalidCoordinateError


@dataclass(frozen=True)
class Coordinate:
    """Represents a Maven artifact coordinate."""

    group: str
    name: str
    version: str
    classifier: Optional[str] = None
    extension: str = "jar"

    def __post_init__(self) -> None:
        if self.classifier is not None and not self.classifier.strip():
            object.__setattr__(self, "classifier", None)

    @classmethod
    def parse(cls, text: str, classifier: Optional[str] = None, extension: str = "jar") -> "Coordinate":
        """Build a coordinate from ``group:name:version``."""

        parts = [part.strip() for part in text.strip().split(":")]
        if len(parts) == 2 and all(parts):
            raise InvalidCoordinateError(f"Please specify version for {parts[0]}:{parts[1]}")
        if len(parts) != 3 or not all(parts):
            raise InvalidCoordinateError(f"Expected group:name:version, got {text!r}")
        for part in parts:
            if "/" in part or "\\" in part or part in (".", ".."):
                raise InvalidCoordinateError(f"Illegal path characters in {text!r}")
        if any(not segment for segment in parts[0].split(".")):
            raise InvalidCoordinateError(f"Malformed group in {text!r}")
        group, name, version = parts
        return cls(group=group, name=name, version=version, classifier=classifier, extension=extension)

    @property
    def filename(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.name}-{self.version}{suffix}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        return [*self.group.split("."), self.name, self.version, self.filename]

    def to_cache_path(self) -> PurePosixPath:
        return PurePosixPath(*self.path_segments)

    def to_remote_url(self, base: str | httpx.URL) -> httpx.URL:
        """Append the cache path to ``base`` without dropping its own path prefix."""

        url = httpx.URL(base)
        prefix = url.path.rstrip("/")
        return url.copy_with(path=f"{prefix}/{self.to_cache_path()}")

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"
