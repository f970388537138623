"""
User Service Interface
======================

Abstract contract for user operations.
The controller depends only on this interface; the MongoDB-backed
implementation lives in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from users_api.domain.models.user import User


class UserService(ABC):
    """
    Abstract service for user persistence operations.
    
    Implementations never log and never write HTTP responses: every failure
    is raised as a ``UserServiceError`` subclass for the controller to map.
    """
    
    @abstractmethod
    async def get(self, user_id: str) -> User:
        """
        Fetch a user by id.
        
        Args:
            user_id: Hex ObjectId of the user
            
        Returns:
            The stored user
            
        Raises:
            InvalidIdentifier: ``user_id`` is not a valid ObjectId
            NotFound: no document has that id
            StoreError: any other lookup failure
        """
        pass
    
    @abstractmethod
    async def create(self, user: User) -> None:
        """
        Insert a new user.
        
        Stamps ``created_at`` (overwriting any caller value) and, on success,
        sets ``user.id`` to the store-generated id.
        
        Raises:
            StoreError: insertion failed
        """
        pass
    
    @abstractmethod
    async def update(self, user_id: str, user: User) -> Optional[User]:
        """
        Set only the present fields of ``user`` on the matching document.
        
        Returns:
            ``user`` as submitted, or None if no document matched
            
        Raises:
            InvalidIdentifier: ``user_id`` is not a valid ObjectId
            StoreError: the update itself failed
        """
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """
        Delete a user by id. Deleting a missing user is not an error.
        
        Raises:
            InvalidIdentifier: ``user_id`` is not a valid ObjectId
            StoreError: the delete itself failed
        """
        pass
