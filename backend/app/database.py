"""
Mobile Bazar Backend — Database Client Management
===================================================

What:  Process-wide PyMongo async client, database accessor, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   A single AsyncMongoClient is created lazily on first use and reused
       for the lifetime of the process. Route handlers receive the database
       through the `get_database` dependency.
Who:   Used by route handlers via FastAPI's dependency injection system,
       by the lifespan handler (startup ping, shutdown close) and by /health.

Client Lifecycle:
    - Created by the first caller of get_client() (the lifespan at startup,
      or the first request when startup connection is disabled)
    - AsyncMongoClient connects in the background; construction does no I/O
    - Never closed during normal operation; closed by close_client() on shutdown

Concurrency:
    get_client() performs its presence check and assignment without awaiting,
    so concurrent first callers on the event loop cannot create two clients.
"""

import logging
from typing import Any, Dict, Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from app.config import settings

logger = logging.getLogger(__name__)


# ── Collection Names ──────────────────────────────────────────────────────
PRODUCTS_COLLECTION = "products"
ORDERS_COLLECTION = "orders"
REVIEWS_COLLECTION = "review"
USERS_COLLECTION = "users"


_client: Optional[AsyncMongoClient] = None


def get_client() -> AsyncMongoClient:
    """
    Return the process-wide client, creating it on first call.

    Connection and server-selection timeouts come from settings; the
    driver's own pool handles concurrency, so no pool tuning is done here.
    """
    global _client
    if _client is None:
        logger.info("Creating MongoDB client for %s", settings.redacted_mongodb_uri)
        _client = AsyncMongoClient(
            settings.resolved_mongodb_uri,
            connectTimeoutMS=settings.db_connect_timeout_ms,
            serverSelectionTimeoutMS=settings.db_server_selection_timeout_ms,
        )
    return _client


def get_database() -> AsyncDatabase:
    """
    FastAPI dependency that provides the application database.

    Example usage in a route:
        @router.get("/products")
        async def list_products(db: AsyncDatabase = Depends(get_database)):
            return await product_service.list_products(db)

    Tests replace this dependency through `app.dependency_overrides`.
    """
    return get_client()[settings.db_name]


async def ping_database() -> Dict[str, Any]:
    """
    Send the `ping` admin command.

    Raises:
        pymongo.errors.PyMongoError when the server cannot be reached within
        the server selection timeout.
    """
    return await get_client().admin.command("ping")


async def close_client() -> None:
    """
    What:  Closes the shared client and forgets it.
    When:  Called during application shutdown (lifespan handler).
    """
    global _client
    if _client is not None:
        client, _client = _client, None
        await client.close()
        logger.info("MongoDB client closed")
