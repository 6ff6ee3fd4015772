"""Database errors."""


class DatabaseError(Exception):
    """Base class for database errors."""


class ConnectivityError(DatabaseError):
    """The liveness query against the database could not complete."""

    def __init__(self, message: str, cause: Exception):
        super().__init__(message)
        self.cause = cause
