"""Database Manager — async MongoDB client with error mapping and health checks.

Invariants:
    - One AsyncIOMotorClient per manager; the lifespan owns and closes it
    - All PyMongo exceptions raised inside store_errors() become DatabaseError
    - The driver message is kept on DatabaseError.cause for callers that surface it

Design Decisions:
    - Manager lives on app.state, never a module global: handlers receive it through
      a FastAPI dependency, tests override that dependency
    - tz_aware client: timestamps round-trip as UTC-aware datetimes
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import (
    ConnectionFailure, DuplicateKeyError, OperationFailure, PyMongoError,
    ServerSelectionTimeoutError,
)

from workout_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Map driver exceptions raised in the block to DatabaseError."""
    try:
        yield
    except DuplicateKeyError as e:
        logger.error(f"DB duplicate key: {e}", extra={"operation": operation})
        raise DatabaseError("Duplicate key", operation, cause=str(e)) from e
    except (ServerSelectionTimeoutError, ConnectionFailure) as e:
        logger.error(f"DB connection error: {e}", extra={"operation": operation})
        raise DatabaseError(
            "Connection or operational error", operation, cause=str(e),
        ) from e
    except OperationFailure as e:
        logger.error(f"DB operation failure: {e}", extra={"operation": operation})
        raise DatabaseError("Operation rejected", operation, cause=str(e)) from e
    except PyMongoError as e:
        logger.error(f"DB driver error: {e}", extra={"operation": operation})
        raise DatabaseError(
            "Database operation failed", operation, cause=str(e),
        ) from e


class DatabaseManager:
    """Owns the Mongo client and hands out collections."""

    def __init__(
        self,
        mongodb_url: str,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        self.client = AsyncIOMotorClient(
            mongodb_url,
            tz_aware=True,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.database = self.client[database_name]

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.database[name]

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            with store_errors("ping"):
                await self.client.admin.command("ping")
            return True
        except DatabaseError as e:
            logger.error(f"DB health check failed: {e.message}")
            return False

    def close(self) -> None:
        self.client.close()
