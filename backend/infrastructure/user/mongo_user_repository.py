"""MongoDB User Repository implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserConflictError

logger = structlog.get_logger(__name__)


class MongoUserRepository(IUserRepository):
    """MongoDB implementation of User repository.

    Storage design:
    - Collection: users
    - Document: {_id: ObjectId, account: str, email: str}
    - Unique index on account
    - Unique index on email

    Uniqueness is enforced by the indexes; a DuplicateKeyError from the
    driver is translated into UserConflictError.

    Examples:
        >>> from motor.motor_asyncio import AsyncIOMotorClient
        >>> client = AsyncIOMotorClient("mongodb://localhost:27017")
        >>> repo = MongoUserRepository(client.users_api)
        >>> user = await repo.create("abcd", "a@b.com")
    """

    COLLECTION_NAME = "users"

    def __init__(self, db: AsyncIOMotorDatabase[Any], client: Any = None) -> None:
        """Initialize repository with MongoDB database.

        Args:
            db: Motor database instance
            client: Owning Motor client, closed by ``close()`` when given
        """
        self.db = db
        self.collection: AsyncIOMotorCollection[Any] = db[self.COLLECTION_NAME]
        self._client = client
        self._indexes_created = False

    async def _ensure_indexes(self) -> None:
        """Create the unique indexes once per repository instance."""
        if self._indexes_created:
            return

        await self.collection.create_index("account", unique=True, name="unique_account")
        await self.collection.create_index("email", unique=True, name="unique_email")

        self._indexes_created = True

    @staticmethod
    def _from_document(document: Dict[str, Any]) -> User:
        return User(
            id=UserId.from_object_id(document["_id"]),
            account=document["account"],
            email=document["email"],
        )

    async def create(self, account: str, email: str) -> User:
        await self._ensure_indexes()

        document = {"account": account, "email": email}
        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.info("users.duplicate_key", operation="insert", error=str(e))
            raise UserConflictError() from e
        except Exception as e:
            logger.error("users.insert_failed", error=str(e))
            raise

        return User(
            id=UserId.from_object_id(result.inserted_id),
            account=account,
            email=email,
        )

    async def find_all(self) -> List[User]:
        try:
            cursor = self.collection.find({})
            documents = await cursor.to_list(length=None)
        except Exception as e:
            logger.error("users.find_all_failed", error=str(e))
            raise

        return [self._from_document(doc) for doc in documents]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        try:
            document = await self.collection.find_one({"_id": user_id.to_object_id()})
        except Exception as e:
            logger.error("users.find_by_id_failed", user_id=str(user_id), error=str(e))
            raise

        if not document:
            return None

        return self._from_document(document)

    async def is_taken(
        self,
        account: Optional[str] = None,
        email: Optional[str] = None,
        exclude: Optional[UserId] = None,
    ) -> bool:
        clauses: List[Dict[str, Any]] = []
        if account is not None:
            clauses.append({"account": account})
        if email is not None:
            clauses.append({"email": email})
        if not clauses:
            return False

        query: Dict[str, Any] = {"$or": clauses}
        if exclude is not None:
            query["_id"] = {"$ne": exclude.to_object_id()}

        try:
            count = await self.collection.count_documents(query, limit=1)
        except Exception as e:
            logger.error("users.is_taken_failed", error=str(e))
            raise

        return bool(count > 0)

    async def update_by_id(self, user_id: UserId, changes: Dict[str, Any]) -> Optional[User]:
        await self._ensure_indexes()

        try:
            document = await self.collection.find_one_and_update(
                {"_id": user_id.to_object_id()},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            logger.info("users.duplicate_key", operation="update", user_id=str(user_id))
            raise UserConflictError() from e
        except Exception as e:
            logger.error("users.update_failed", user_id=str(user_id), error=str(e))
            raise

        if not document:
            return None

        return self._from_document(document)

    async def delete_by_id(self, user_id: UserId) -> Optional[User]:
        try:
            document = await self.collection.find_one_and_delete({"_id": user_id.to_object_id()})
        except Exception as e:
            logger.error("users.delete_failed", user_id=str(user_id), error=str(e))
            raise

        if not document:
            return None

        return self._from_document(document)

    async def close(self) -> None:
        """Close the owning Motor client, if any."""
        if self._client is not None:
            self._client.close()
            logger.info("users.client_closed")
