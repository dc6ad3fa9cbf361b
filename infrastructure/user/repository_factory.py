"""User repository factory for environment-based selection.

This factory creates the appropriate repository implementation based on
the USER_REPOSITORY environment variable:
- "inmemory": InMemoryUserRepository (for testing)
- "mongodb": MongoUserRepository (for production)

Default: inmemory
"""

from typing import Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient

from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import (
    get_mongodb_database,
    get_mongodb_uri,
    get_search_limit,
    get_user_repository_type,
)
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.mongo_user_repository import MongoUserRepository

logger = structlog.get_logger(__name__)


def create_user_repository() -> IUserRepository:
    """Create user repository based on environment configuration.

    Returns:
        IUserRepository: The configured repository implementation

    Raises:
        ValueError: On an unknown USER_REPOSITORY value, or when mongodb
            is selected without MONGODB_URI

    Environment Variables:
        USER_REPOSITORY: "inmemory" | "mongodb" (default: inmemory)
        MONGODB_URI: MongoDB connection string (required for mongodb)
        MONGODB_DATABASE: Database name (default: eventhub)
        USER_SEARCH_LIMIT: Max users per search (default: 10)
    """
    repo_type = get_user_repository_type()

    if repo_type == "mongodb":
        mongo_url = get_mongodb_uri()
        if not mongo_url:
            raise ValueError(
                "MONGODB_URI environment variable is required " "when USER_REPOSITORY=mongodb"
            )

        client: AsyncIOMotorClient = AsyncIOMotorClient(mongo_url)  # type: ignore[type-arg]
        logger.info("user_repository_selected", backend="mongodb", database=get_mongodb_database())
        return MongoUserRepository(client, get_mongodb_database(), get_search_limit())

    elif repo_type == "inmemory":
        logger.info("user_repository_selected", backend="inmemory")
        return InMemoryUserRepository(search_limit=get_search_limit())

    else:
        raise ValueError(
            f"Invalid USER_REPOSITORY value: {repo_type}. " "Expected 'inmemory' or 'mongodb'"
        )


# Singleton instance
_user_repository: Optional[IUserRepository] = None


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance."""
    global _user_repository

    if _user_repository is None:
        _user_repository = create_user_repository()

    return _user_repository


def reset_user_repository() -> None:
    """Reset the singleton (for testing purposes)."""
    global _user_repository
    _user_repository = None
