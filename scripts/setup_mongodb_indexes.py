"""Setup MongoDB indexes required by the user repository.

Collections:
- users: unique index on username (one user per username)
- events: index on creator (created-events lookup)

Usage:
    python scripts/setup_mongodb_indexes.py [--database NAME] [--list-only]

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: eventhub)
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional, Sequence

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from infrastructure.config import (
    EVENTS_COLLECTION,
    USERS_COLLECTION,
    get_mongodb_database,
    get_mongodb_uri,
    load_environment,
)
from infrastructure.logging_config import configure_logging
from infrastructure.user.mongo_user_repository import MongoUserRepository

logger = structlog.get_logger(__name__)


async def list_existing_indexes(db: AsyncIOMotorDatabase) -> Dict[str, List[Dict[str, Any]]]:  # type: ignore[type-arg]
    """List indexes of the user and event collections.

    Returns:
        Mapping of collection name to index descriptions
    """
    summary: Dict[str, List[Dict[str, Any]]] = {}

    for coll_name in (USERS_COLLECTION, EVENTS_COLLECTION):
        indexes = await db[coll_name].list_indexes().to_list(length=None)
        summary[coll_name] = []
        for idx in indexes:
            entry = {
                "name": idx.get("name", "unknown"),
                "keys": dict(idx.get("key", {})),
                "unique": bool(idx.get("unique", False)),
            }
            summary[coll_name].append(entry)
            logger.info("index", collection=coll_name, **entry)

    return summary


async def setup_indexes(
    client: AsyncIOMotorClient,  # type: ignore[type-arg]
    database_name: str,
    list_only: bool = False,
) -> Dict[str, List[Dict[str, Any]]]:
    """Create the repository indexes, then list what exists."""
    await client.admin.command("ping")
    logger.info("mongodb_connected", database=database_name)

    if not list_only:
        repository = MongoUserRepository(client, database_name)
        await repository.ensure_indexes()
        logger.info("indexes_created", collections=[USERS_COLLECTION, EVENTS_COLLECTION])

    return await list_existing_indexes(client[database_name])


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create MongoDB indexes for users and events.")
    parser.add_argument("--database", default=None, help="Database name (default: MONGODB_DATABASE)")
    parser.add_argument(
        "--list-only", action="store_true", help="Only list existing indexes, create nothing"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    load_environment()
    configure_logging()
    args = parse_args(argv)

    uri = get_mongodb_uri()
    if not uri:
        logger.error("mongodb_uri_missing", hint="Set MONGODB_URI")
        return 1

    database_name = args.database or get_mongodb_database()
    client: AsyncIOMotorClient = AsyncIOMotorClient(uri)  # type: ignore[type-arg]

    try:
        asyncio.run(setup_indexes(client, database_name, list_only=args.list_only))
    except KeyboardInterrupt:
        logger.warning("interrupted")
        return 130
    except Exception as e:
        logger.error("index_setup_failed", error=str(e))
        return 1
    finally:
        client.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
