"""
MongoDB User Service
====================

Concrete implementation of UserService using MongoDB.
"""
from typing import Optional

import pymongo
from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from users_api.application.services.user_service import UserService
from users_api.domain.constants.user_fields import UserFields
from users_api.domain.exceptions import InvalidIdentifier, NotFound, StoreError
from users_api.domain.models.user import User
from users_api.utils.datetime_utils import now_iso


def _parse_id(user_id: str, message: str = "invalid user ID") -> ObjectId:
    """Convert a hex id to an ObjectId."""
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifier(user_id, message) from e


class MongoUserService(UserService):
    """
    MongoDB implementation of UserService.
    
    Every store call runs under ``pymongo.timeout`` so a request's deadline
    bounds the round-trip. Cancelling the calling task abandons the call.
    """
    
    def __init__(self, collection: AsyncCollection, timeout: Optional[float] = None):
        """
        Initialize service with the users collection.
        
        Args:
            collection: MongoDB users collection
            timeout: Seconds allowed per store call, None for no limit
        """
        self._collection = collection
        self._timeout = timeout
    
    async def get(self, user_id: str) -> User:
        object_id = _parse_id(user_id)
        
        try:
            with pymongo.timeout(self._timeout):
                doc = await self._collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StoreError("failed to find User", e) from e
        
        if doc is None:
            raise NotFound(user_id)
        
        try:
            return User.from_document(doc)
        except ValidationError as e:
            raise StoreError("failed to decode User", e) from e
    
    async def create(self, user: User) -> None:
        user.created_at = now_iso()
        
        doc = user.to_document()
        doc.pop(UserFields.MONGO_ID, None)
        try:
            with pymongo.timeout(self._timeout):
                result = await self._collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreError("failed to create User", e) from e
        
        if isinstance(result.inserted_id, ObjectId):
            user.id = str(result.inserted_id)
    
    async def update(self, user_id: str, user: User) -> Optional[User]:
        object_id = _parse_id(user_id, "failed to parse user ID")
        
        fields = user.to_document()
        fields.pop(UserFields.MONGO_ID, None)
        try:
            with pymongo.timeout(self._timeout):
                if fields:
                    result = await self._collection.update_one(
                        {UserFields.MONGO_ID: object_id},
                        {"$set": fields},
                    )
                    matched = result.matched_count
                else:
                    # Nothing to set; only report whether the user exists
                    matched = await self._collection.count_documents(
                        {UserFields.MONGO_ID: object_id}, limit=1
                    )
        except PyMongoError as e:
            raise StoreError(f"failed to modify user with id {user_id}", e) from e
        
        if matched < 1:
            return None
        
        return user
    
    async def delete(self, user_id: str) -> None:
        object_id = _parse_id(user_id)
        
        try:
            with pymongo.timeout(self._timeout):
                await self._collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StoreError(f"failed to delete user with id {user_id}", e) from e
