"""Local cache laid out like a Maven repository."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .domain import Coordinate
from .exceptions import CacheWriteError


class CacheStore:
    """Map coordinates onto files below ``root``.

    Entries are immutable once written: there is no expiry and no
    revalidation against the remote repositories.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser()
        self.log = logging.getLogger(self.__class__.__name__)

    def path_for(self, coord: Coordinate) -> Path:
        return self.root.joinpath(*coord.path_segments)

    def exists(self, coord: Coordinate) -> bool:
        return self.path_for(coord).is_file()

    def write_if_absent(self, coord: Coordinate, payload: bytes) -> Path:
        """Commit ``payload`` for ``coord`` unless an entry already exists.

        The bytes are staged in a temporary file next to the destination and
        published with a hard link, so readers never observe a partial entry.
        Raises ``FileExistsError`` when another writer got there first.
        """

        target = self.path_for(coord)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheWriteError(f"Cannot create {target.parent}: {exc}") from exc

        fd, staging = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".part", dir=target.parent)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.link(staging, target)
        except FileExistsError:
            raise
        except OSError as exc:
            raise CacheWriteError(f"Cannot write {target}: {exc}") from exc
        finally:
            try:
                os.unlink(staging)
            except FileNotFoundError:
                pass

        self.log.info("Saved %s (%d bytes) to %s", coord, len(payload), target)
        return target
