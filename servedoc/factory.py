"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .api import docs_router
from .modules.docsite import ArchiveFileSystem


def create_app(archive: ArchiveFileSystem, label: Optional[str] = None) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        yield
        archive.close()

    app = FastAPI(
        title=f"servedoc {label}" if label else "servedoc",
        version=__version__,
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(docs_router)
    app.state.archive = archive
    return app
