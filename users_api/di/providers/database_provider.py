from typing import TYPE_CHECKING

from users_api.core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Database handle provider - single source of truth for collections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the users collection derived from the client.
        The client itself is registered by the container's owner.
        """
        settings = container.get(Settings)
        mongo_client = container.get("mongo_client")
        
        database = mongo_client[settings.database_name]
        container.register_singleton("users_collection", database[settings.users_collection])
