# =============================================================================
# lib/mongo_client.py - MongoDB Connector
# =============================================================================
# Owns the motor client for the storefront's document store.
#
# The connector is constructed explicitly (no module-level singleton) and
# handed to the application through the service container, so tests can
# swap in an in-memory client.
#
# Usage:
#   connector = MongoConnector.from_settings(settings)
#   await connector.connect()          # pings, raises DatabaseConnectionError
#   products = connector.database["products"]
#   connector.close()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class DatabaseConnectionError(Exception):
    """
    The document store could not be reached during startup.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_UNREACHABLE",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class MongoConnector:
    """
    Handle on the MongoDB connection pool.

    The motor client is created lazily; `connect()` forces a round trip
    so an unreachable server is detected before traffic is served.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        timeout_ms: int = 5000,
        client: AsyncIOMotorClient | None = None,
    ):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client = client
        self.connected = False

    @classmethod
    def from_settings(cls, settings) -> MongoConnector:
        """Build a connector from application settings."""
        return cls(
            uri=settings.MONGO_URI,
            db_name=settings.MONGO_DB_NAME,
            timeout_ms=settings.MONGO_CONNECT_TIMEOUT_MS,
        )

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
            )
        return self._client

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.db_name]

    async def connect(self) -> None:
        """
        Verify the server is reachable.

        Raises:
            DatabaseConnectionError: If the ping fails
        """
        try:
            await self.client.admin.command("ping")
        except Exception as e:
            raise DatabaseConnectionError(
                message=f"Failed to connect to MongoDB: {e}",
                suggestion="Check MONGO_URI and that the server is reachable",
                details={"db_name": self.db_name},
            ) from e

        self.connected = True
        logger.info(f"MongoDB connected (database: {self.db_name})")

    def close(self) -> None:
        """Close the connection pool."""
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self.connected = False
