#!/usr/bin/env python3
"""
launchgate-migrate: apply and inspect the user store schema (users, trips).
"""

from collections.abc import Callable
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from launchgate import __version__
from launchgate.logging import configure_logging, get_logger

logger = get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[3]


def get_alembic_config(project_dir: Path = PROJECT_DIR) -> Config:
    """Load alembic.ini from the project root, pointing it at the bundled revisions."""
    alembic_ini = project_dir / "alembic.ini"
    if not alembic_ini.exists():
        raise click.ClickException(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(project_dir / "alembic"))
    return config


def run_alembic(action: str, operation: Callable[[Config], None], **log_fields) -> None:
    """Run one alembic command, turning its failures into a clean CLI error."""
    config = get_alembic_config()
    logger.info(f"Migration {action} started", **log_fields)
    try:
        operation(config)
    except Exception as e:
        logger.error(f"Migration {action} failed", error=str(e), **log_fields)
        raise click.ClickException(f"{action} failed: {e}") from e
    logger.info(f"Migration {action} finished", **log_fields)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="launchgate-migrate")
def main(log_level: str) -> None:
    """Manage the launchgate user store schema."""
    configure_logging(debug=(log_level == "debug"), level=log_level)


@main.command()
@click.argument("revision", default="head")
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it")
def upgrade(revision: str, sql: bool) -> None:
    """Apply migrations up to REVISION (default: head)."""
    run_alembic(
        "upgrade",
        lambda config: command.upgrade(config, revision, sql=sql),
        revision=revision,
        offline=sql,
    )


@main.command()
@click.argument("revision", default="-1")
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it")
def downgrade(revision: str, sql: bool) -> None:
    """Revert migrations down to REVISION (default: one step back)."""
    run_alembic(
        "downgrade",
        lambda config: command.downgrade(config, revision, sql=sql),
        revision=revision,
        offline=sql,
    )


@main.command()
def current() -> None:
    """Show the revision the database is at."""
    run_alembic("current", command.current)


@main.command()
def history() -> None:
    """List the known revisions."""
    run_alembic("history", command.history)


if __name__ == "__main__":
    main()
