"""
Shared storage clients for dependency injection.

This module owns the process-wide MongoDB client used when the API is
backed by the document store.

Design decisions:
- Singleton pattern for the Motor client (it maintains its own connection pool)
- Lazy initialization on first request
- Explicit close hook called from the FastAPI lifespan
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from src.config import settings

# Global client instance for connection pooling
# Creating one client per request would defeat Motor's connection pool.
_mongo_client: AsyncIOMotorClient | None = None


def get_mongo_client() -> AsyncIOMotorClient:
    """
    Return the shared Motor client, creating it on first use.

    The client is NOT closed after each request. It's reused across all
    requests for the lifetime of the application. Call close_mongo_client()
    in the app shutdown hook.
    """
    global _mongo_client

    if _mongo_client is None:
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)

    return _mongo_client


def get_todo_collection() -> AsyncIOMotorCollection:
    """Collection holding todo documents, as named in settings."""
    client = get_mongo_client()
    return client[settings.mongo_database][settings.mongo_collection]


async def close_mongo_client() -> None:
    """
    Close the Mongo client on application shutdown.

    Safe to call when no client was ever created (sqlite backend).
    """
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
