"""PostgreSQL connection pool bootstrap."""

from .config import DatabaseConfig
from .database import build_pool, close_pool, connect_database
from .exceptions import ConnectivityError, DatabaseError

__all__ = [
    'DatabaseConfig',
    'build_pool',
    'close_pool',
    'connect_database',
    'ConnectivityError',
    'DatabaseError',
]
