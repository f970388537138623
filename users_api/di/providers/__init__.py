"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .user_provider import UserProvider

__all__ = [
    "DatabaseProvider",
    "UserProvider",
]
