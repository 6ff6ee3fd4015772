"""Command-line interface commands."""

import asyncio
import logging
import click

from ..config import AppConfig, DatabaseConfig
from ..database import build_pool, close_pool, connect_database
from ..exceptions import ConnectivityError
from ..logging_config import configure_logging

logger = logging.getLogger(__name__)


@click.group()
def main():
    """Database pool CLI - connection bootstrap and health check."""
    app_config = AppConfig()
    configure_logging(app_config.log_level)
    logger.info("Environment: %s", app_config.environment)


@main.command()
def test_db():
    """Test database connection."""
    asyncio.run(_test_db())


async def _test_db():
    """Test database connection."""
    pool = await build_pool(DatabaseConfig.from_env())
    try:
        await connect_database(pool)
        click.echo("✅ Database connection successful!")
    except ConnectivityError:
        click.echo("❌ Database connection failed!")
        raise SystemExit(1)
    finally:
        await close_pool(pool)
