"""Catch-all route serving archive entries as static files."""

from __future__ import annotations

import logging
import mimetypes
import time
from email.utils import format_datetime

from fastapi import APIRouter, Request, Response

from servedoc.modules.docsite import ArchiveFileSystem

router = APIRouter(tags=["docs"])
log = logging.getLogger(__name__)

INDEX_DOCUMENT = "/index.html"
FAVICON = "/favicon.ico"


def get_archive(request: Request) -> ArchiveFileSystem:
    archive = getattr(request.app.state, "archive", None)
    if archive is None:
        raise RuntimeError("Archive not initialized.")
    return archive


def _not_found() -> Response:
    return Response(status_code=404)


def _serve(archive: ArchiveFileSystem, path: str) -> Response:
    if not archive.exists(path):
        return _not_found()

    last_modified = archive.last_modified(path)
    t1 = time.perf_counter()
    body = archive.read_all(path)
    log.debug("Read %d bytes in %.1f ms", len(body), (time.perf_counter() - t1) * 1000)

    media_type, _ = mimetypes.guess_type(path)
    return Response(
        content=body,
        media_type=media_type or "application/octet-stream",
        headers={"Last-Modified": format_datetime(last_modified, usegmt=True)},
    )


@router.get("/{path:path}", include_in_schema=False)
def serve_entry(request: Request) -> Response:
    url_path = request.scope["path"]
    t0 = time.perf_counter()
    try:
        if url_path == FAVICON:
            response = _not_found()
        else:
            lookup = INDEX_DOCUMENT if url_path == "/" else url_path
            response = _serve(get_archive(request), lookup)
    except Exception:  # noqa: BLE001
        log.warning("Failed to serve %s", request.url)
        log.debug("%s", request.url, exc_info=True)
        response = Response(status_code=500)
    log.debug("%s %s %.1f ms", url_path, response.status_code, (time.perf_counter() - t0) * 1000)
    return response
