"""Base MongoDB repository with reusable patterns.

Provides common functionality for MongoDB repositories:
- Connection management
- Document mapping (domain ↔ MongoDB)
- Error logging
- Logging

Concrete MongoDB repositories inherit from MongoBaseRepository.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = structlog.get_logger(__name__)

Collection = AsyncIOMotorCollection  # type: ignore[type-arg]


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    Provides common functionality:
    - Connection pooling (motor handles this automatically)
    - Document ↔ Entity mapping
    - Error logging (driver errors are logged and re-raised)

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    The helpers operate on the primary collection unless another
    collection handle is passed explicitly.
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient] = None,  # type: ignore[type-arg]
        database_name: Optional[str] = None,
    ):
        """
        Initialize repository with optional client.

        Args:
            client: Motor client (if None, creates new one from config)
            database_name: Database name (if None, read from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client = AsyncIOMotorClient(uri)
        else:
            self._client = client

        self._db = self._client[database_name or get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            "mongo_repository_initialized",
            repository=self.__class__.__name__,
            collection=self.collection_name,
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> Collection:
        """Get MongoDB collection handle."""
        return self._collection

    def _resolve(self, collection: Optional[Collection]) -> Collection:
        return self._collection if collection is None else collection

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
        collection: Optional[Collection] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Find single document.

        Returns:
            Document dict or None if not found

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        target = self._resolve(collection)
        try:
            return await target.find_one(filter_dict, projection)
        except PyMongoError as e:
            logger.error("find_one_failed", collection=target.name, filter=filter_dict, error=str(e))
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
        projection: Optional[Dict[str, int]] = None,
        collection: Optional[Collection] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents.

        Args:
            filter_dict: MongoDB filter
            sort: Sort specification [(field, direction), ...]
            limit: Max documents to return
            projection: Optional projection
            collection: Collection to query (defaults to the primary one)

        Returns:
            List of document dicts

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        target = self._resolve(collection)
        try:
            cursor = target.find(filter_dict, projection)

            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)

            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error("find_many_failed", collection=target.name, filter=filter_dict, error=str(e))
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document.

        Raises:
            DuplicateKeyError: If a unique index rejects the document
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._collection.insert_one(document)
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            logger.error("insert_one_failed", collection=self.collection_name, error=str(e))
            raise

    async def _find_one_and_update(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically update a single document and return it after the update.

        Returns:
            Updated document, or None if nothing matched the filter

        Raises:
            DuplicateKeyError: If the update violates a unique index
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return await self._collection.find_one_and_update(
                filter_dict,
                update_dict,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise
        except PyMongoError as e:
            logger.error(
                "find_one_and_update_failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document.

        Returns:
            Number of documents deleted (0 or 1)

        Raises:
            PyMongoError: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return int(result.deleted_count)
        except PyMongoError as e:
            logger.error(
                "delete_one_failed",
                collection=self.collection_name,
                filter=filter_dict,
                error=str(e),
            )
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("mongo_repository_closed", repository=self.__class__.__name__)
