"""Database connection management."""

from .connection import build_pool, close_pool, connect_database, pool_options

__all__ = ['build_pool', 'close_pool', 'connect_database', 'pool_options']
