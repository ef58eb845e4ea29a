"""Command line entry point: ``servedoc group:name:version``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import uvicorn
from pydantic import ValidationError

from .bootstrap import ServiceContainer, prepare_archive
from .factory import create_app
from .logging_config import configure_logging
from .modules.artifact import ArtifactResolutionError
from .modules.docsite import ArchiveOpenError
from .settings import Settings

log = logging.getLogger(__name__)

cli = typer.Typer(help="Download a javadoc bundle and browse it over HTTP.", add_completion=False)


def _build_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)


def _fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@cli.command()
def serve(
    coordinate: str = typer.Argument(..., help="Artifact as group:name:version"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on (default 8000)"),
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind"),
    repository: Optional[List[str]] = typer.Option(
        None,
        "--repository",
        "-r",
        help="Remote repository base URL; repeat to try several in order.",
    ),
    local_repository: Optional[Path] = typer.Option(None, "--local-repository", help="Local cache root"),
    classifier: Optional[str] = typer.Option(None, "--classifier", help="Artifact classifier (default javadoc)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request"),
) -> None:
    """Serve the documentation bundle of COORDINATE."""

    try:
        settings = _build_settings(
            port=port,
            host=host,
            remote_repositories=repository or None,
            local_repository=local_repository,
            classifier=classifier,
            log_level="DEBUG" if verbose else None,
        )
    except ValidationError as exc:
        raise _fail(f"Invalid configuration: {exc}")

    configure_logging(settings.log_level)
    container = ServiceContainer(settings)
    try:
        coord = container.parse_coordinate(coordinate)
    except ArtifactResolutionError as exc:
        container.close()
        raise _fail(str(exc))

    try:
        archive = prepare_archive(container, coord)
    except (ArtifactResolutionError, ArchiveOpenError) as exc:
        raise _fail(str(exc))

    app = create_app(archive, label=str(coord))
    log.info("Serving %s for %s on %s", settings.classifier, coord, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


def main() -> None:  # pragma: no cover - console script
    cli()
