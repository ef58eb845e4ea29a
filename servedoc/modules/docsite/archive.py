"""Read-only view of a zip archive addressed by ``/``-separated paths."""

from __future__ import annotations

import logging
import posixpath
import struct
import zipfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)

# Info-ZIP "UT" extra field carrying a unix mtime
_EXTENDED_TIMESTAMP = 0x5455
DOS_EPOCH = datetime(1980, 1, 1, tzinfo=timezone.utc)


class ArchiveOpenError(RuntimeError):
    """The artifact could not be opened as an archive."""


def normalize(path: str) -> Optional[str]:
    """Return the entry name for ``path`` or ``None`` if it leaves the archive root."""

    stripped = path.replace("\\", "/").lstrip("/")
    if not stripped:
        return ""
    parts = stripped.split("/")
    if ".." in parts:
        return None
    normalized = posixpath.normpath(stripped)
    return "" if normalized == "." else normalized


def _extended_mtime(extra: bytes) -> Optional[int]:
    offset = 0
    while offset + 4 <= len(extra):
        header_id, size = struct.unpack_from("<HH", extra, offset)
        body = extra[offset + 4 : offset + 4 + size]
        if header_id == _EXTENDED_TIMESTAMP and len(body) >= 5 and body[0] & 0x01:
            return struct.unpack_from("<i", body, 1)[0]
        offset += 4 + size
    return None


class ArchiveFileSystem:
    """Entries of a zip archive, opened once and shared by all readers."""

    def __init__(self, archive: zipfile.ZipFile) -> None:
        self._zip = archive
        self._entries = {
            info.filename: info for info in archive.infolist() if not info.is_dir()
        }

    @classmethod
    def open(cls, path: Path | str) -> "ArchiveFileSystem":
        path = Path(path)
        try:
            archive = zipfile.ZipFile(path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise ArchiveOpenError(f"Cannot open {path} as an archive: {exc}") from exc
        fs = cls(archive)
        log.debug("Opened %s with %d entries", path, len(fs))
        return fs

    def __len__(self) -> int:
        return len(self._entries)

    def _info(self, path: str) -> zipfile.ZipInfo:
        name = normalize(path)
        if not name or name not in self._entries:
            raise FileNotFoundError(path)
        return self._entries[name]

    def exists(self, path: str) -> bool:
        name = normalize(path)
        return bool(name) and name in self._entries

    def last_modified(self, path: str) -> datetime:
        info = self._info(path)
        mtime = _extended_mtime(info.extra)
        if mtime is not None:
            return datetime.fromtimestamp(mtime, tz=timezone.utc)
        # DOS timestamps carry no zone; read them as UTC
        year, month, day, hour, minute, second = info.date_time
        try:
            return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
        except ValueError:
            # zeroed or corrupt DOS date
            return DOS_EPOCH

    def read_all(self, path: str) -> bytes:
        return self._zip.read(self._info(path))

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ArchiveFileSystem":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
