"""Connection pool construction and liveness check."""

import logging
import ssl
from typing import Any, Dict, Union

import asyncpg

from ..config import ACQUIRE_TIMEOUT_MS, IDLE_TIMEOUT_MS, MAX_CONNECTIONS, DatabaseConfig
from ..exceptions import ConnectivityError

logger = logging.getLogger(__name__)

LIVENESS_QUERY = 'SELECT NOW()'


def _ssl_mode(secure: bool) -> Union[ssl.SSLContext, bool]:
    """TLS without certificate verification when secure, otherwise no TLS."""
    if not secure:
        return False
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def pool_options(config: DatabaseConfig) -> Dict[str, Any]:
    """Keyword arguments passed to asyncpg.create_pool for the given configuration."""
    return {
        'dsn': config.connection_target,
        'ssl': _ssl_mode(config.secure),
        # No connections are opened until first use
        'min_size': 0,
        'max_size': MAX_CONNECTIONS,
        'max_inactive_connection_lifetime': IDLE_TIMEOUT_MS / 1000,
        'timeout': ACQUIRE_TIMEOUT_MS / 1000,
    }


async def build_pool(config: DatabaseConfig) -> asyncpg.Pool:
    """
    Build the connection pool for the application.

    The returned pool is meant to be created once and handed to every component
    that needs database access.

    Args:
        config: Database configuration

    Returns:
        asyncpg connection pool
    """
    return await asyncpg.create_pool(**pool_options(config))


async def connect_database(pool: asyncpg.Pool) -> None:
    """
    Verify the database is reachable with a single round-trip query.

    Raises:
        ConnectivityError: if a connection cannot be acquired or the query fails
    """
    try:
        async with pool.acquire(timeout=ACQUIRE_TIMEOUT_MS / 1000) as conn:
            await conn.fetchval(LIVENESS_QUERY)
    except Exception as e:
        # Some causes (acquire timeouts) carry no message
        detail = str(e) or type(e).__name__
        logger.error("Database connection failed: %s", detail, exc_info=e)
        raise ConnectivityError(f"Database connection failed: {detail}", cause=e) from e

    logger.info("Database connected successfully")


async def close_pool(pool: asyncpg.Pool) -> None:
    """Close the connection pool."""
    await pool.close()
