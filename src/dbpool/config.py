"""Configuration management for the database pool."""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables
load_dotenv()


# Fixed pool parameters, not configurable from the environment
MAX_CONNECTIONS = 20
IDLE_TIMEOUT_MS = 30_000
ACQUIRE_TIMEOUT_MS = 2_000

PRODUCTION = 'production'


class DatabaseConfig(BaseModel):
    """Database configuration, read once at startup."""

    model_config = ConfigDict(frozen=True)

    connection_target: Optional[str] = None
    secure: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DatabaseConfig':
        """Build configuration from DATABASE_URL and ENVIRONMENT."""
        if environ is None:
            environ = os.environ
        return cls(
            connection_target=environ.get('DATABASE_URL'),
            secure=environ.get('ENVIRONMENT') == PRODUCTION,
        )


class AppConfig:
    """Application configuration."""

    def __init__(self):
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.environment = os.getenv('ENVIRONMENT', 'development')
