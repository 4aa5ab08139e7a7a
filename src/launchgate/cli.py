#!/usr/bin/env python3
"""
Main CLI entry point for the launchgate server.
"""

import os
import sys

import click
import uvicorn

from launchgate import __version__
from launchgate.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="launchgate")
def cli() -> None:
    """launchgate CLI - run the GraphQL gateway."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--workers", default=1, type=int, help="Number of worker processes (default: 1)"
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the launchgate API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting launchgate API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are read at import time, so pass them on through the environment
    if log_level == "debug":
        os.environ["LAUNCHGATE_DEBUG"] = "true"
        os.environ["LAUNCHGATE_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("LAUNCHGATE_DEBUG", "false")
        os.environ.setdefault("LAUNCHGATE_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "launchgate.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),
                log_level=log_level,
                access_log=True,
            )
        else:
            from launchgate.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
