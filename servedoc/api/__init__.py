"""API exports."""

from .docs import router as docs_router

__all__ = ["docs_router"]
