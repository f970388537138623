"""
MongoDB Connection
==================

Creates and closes the single AsyncMongoClient owned by the application.
The client is constructed explicitly at startup and handed to whoever needs
it; nothing here keeps a module-level handle.
"""
import logging

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.uri_parser import parse_uri

logger = logging.getLogger(__name__)


def check_database_url(uri: str) -> None:
    """
    Validate a MongoDB connection string without connecting.
    
    Raises:
        ValueError: the URI is empty or cannot be parsed
    """
    if not uri:
        raise ValueError("empty database URI")
    try:
        parse_uri(uri)
    except PyMongoError as e:
        raise ValueError(f"invalid database URI: {e}") from e


def init_db(uri: str) -> AsyncMongoClient:
    """
    Build a MongoDB client for ``uri``.
    
    The client connects lazily, so a well-formed URI succeeds even when no
    server is reachable yet.
    
    Args:
        uri: MongoDB connection string
        
    Returns:
        AsyncMongoClient instance
        
    Raises:
        ValueError: the URI is empty or malformed
    """
    check_database_url(uri)
    try:
        return AsyncMongoClient(uri)
    except PyMongoError as e:
        raise ValueError(f"invalid database URI: {e}") from e


async def ping_db(client: AsyncMongoClient) -> None:
    """Round-trip to the server; raises if it cannot be reached."""
    await client.admin.command("ping")
    logger.info("MongoDB reachable")


async def close_db(client: AsyncMongoClient) -> None:
    """Close the MongoDB client. Failures propagate to the caller."""
    await client.close()
    logger.info("MongoDB connection closed")
