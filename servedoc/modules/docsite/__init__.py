"""Serve the entries of a documentation archive as a static site."""

from .archive import ArchiveFileSystem, ArchiveOpenError

__all__ = ["ArchiveFileSystem", "ArchiveOpenError"]
