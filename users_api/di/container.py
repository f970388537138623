# Third-party imports
from pymongo import AsyncMongoClient

# Local application imports
from users_api.core.config import Settings
from .base_container import BaseContainer
from .providers import DatabaseProvider, UserProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    The MongoDB client is passed in by whoever owns it (the application
    lifespan); the container never opens or closes connections itself.
    
    Registration order is important:
    1. Database handles (DatabaseProvider)
    2. Services (UserProvider) - depend on the users collection
    """
    
    def __init__(self, client: AsyncMongoClient, settings: Settings) -> None:
        super().__init__()
        self.register_singleton(Settings, settings)
        self.register_singleton("mongo_client", client)
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → services
        """
        DatabaseProvider.register(self)
        UserProvider.register(self)
