from typing import TYPE_CHECKING

from users_api.core.config import Settings
from users_api.application.services.user_service import UserService
from users_api.infrastructure.db.mongo_user_service import MongoUserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - wires the service interface to MongoDB"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register user service.
        Service is created with the users collection from container.
        """
        settings = container.get(Settings)
        container.register_singleton(
            UserService,
            MongoUserService(
                collection=container.get("users_collection"),
                timeout=settings.request_timeout_seconds,
            )
        )
