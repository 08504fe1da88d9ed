"""
Command line entry point: ``postboard serve`` and ``postboard check-db``.
"""

import asyncio
import sys

import click
import uvicorn

from postboard import __version__
from postboard.config import settings
from postboard.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="postboard")
def cli() -> None:
    """Postboard CLI - run the API server and check the document store."""


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True)
@click.option("--port", default=settings.api_port, type=int, show_default=True)
@click.option("--reload", is_flag=True, default=settings.api_reload, help="Restart on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Start the Postboard API server."""
    configure_logging(level=settings.log_level, json_output=not settings.debug)
    logger.info("Starting Postboard API server", host=host, port=port, reload=reload)

    # uvicorn needs an import string to reload
    uvicorn.run(
        "postboard.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@cli.command("check-db")
@click.option("--mongo-url", default=None, help="MongoDB URL (default: POSTBOARD_MONGO_URL)")
def check_db(mongo_url: str | None) -> None:
    """Ping the configured MongoDB server."""
    from postboard.database.connection import init_database, test_database_connection

    configure_logging(level=settings.log_level)

    init_database(mongo_url=mongo_url, force_reinit=True)
    success, error_message = asyncio.run(test_database_connection())

    if success:
        click.echo("✓ Database reachable")
        return

    logger.error("Database check failed", error=error_message)
    click.echo(f"✗ {error_message}", err=True)
    sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
