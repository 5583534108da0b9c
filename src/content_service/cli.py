from __future__ import annotations

import asyncio
from typing import Optional

import typer
import uvicorn

from content_service.api.fastapi import create_app
from content_service.app.core.logging import setup_logging
from content_service.app.settings import get_app_settings
from content_service.db.nosql.handler import MongoStorageHandler, create_mongo_client
from content_service.db.nosql.settings import MongoSettings, get_mongo_settings
from content_service.exceptions import StorageError

app = typer.Typer(no_args_is_help=True, add_completion=False, help="content-service file storage API")


@app.command("serve")
def serve(
        host: Optional[str] = typer.Option(None, help="Bind address (default APP_HOST or 0.0.0.0)"),
        port: Optional[int] = typer.Option(None, help="Bind port (default APP_PORT or 8005)"),
        log_level: Optional[str] = typer.Option(None, help="Override LOG_LEVEL"),
):
    """Run the HTTP API until interrupted, then drain for APP_SHUTDOWN_TIMEOUT seconds."""
    setup_logging(level=log_level)
    settings = get_app_settings(host=host, port=port)
    uvicorn.run(
        create_app(app_settings=settings),
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,  # keep setup_logging's configuration
    )


async def _ping(settings: MongoSettings) -> None:
    client = create_mongo_client(settings)
    try:
        await MongoStorageHandler(client, settings).ping()
    finally:
        client.close()


@app.command("ping")
def ping():
    """Check that the configured database is reachable."""
    setup_logging()
    try:
        asyncio.run(_ping(get_mongo_settings()))
    except (StorageError, ValueError) as exc:
        typer.echo(f"Database unreachable: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo("Database reachable")


def main() -> None:
    app()
