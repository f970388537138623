"""
Request Dependencies
====================

FastAPI dependencies resolving services from the application's container.
"""
from fastapi import Request

from users_api.application.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """
    Get the user service registered for this application.
    
    Returns:
        UserService instance
    """
    container = request.app.state.container
    return container.get(UserService)
