"""
User Controller
===============

FastAPI controller for user CRUD endpoints.
Maps service results and errors to HTTP status codes; the service layer
itself never writes responses.
"""
import logging
from typing import Union

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from users_api.api.v1.dependencies import get_user_service
from users_api.application.dto.user_dto import UserCreateRequest, UserUpdateRequest
from users_api.application.services.user_service import UserService
from users_api.domain.exceptions import NotFound, UserServiceError
from users_api.domain.models.user import User
from users_api.utils.request_utils import bound_to_request

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


def _server_fault(action: str, error: UserServiceError) -> HTTPException:
    logger.error("Failed to %s: %s", action, error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(error),
    )


@router.get(
    "/users/{user_id}",
    response_model=User,
    response_model_exclude_none=True,
    summary="Get user by ID",
    responses={status.HTTP_204_NO_CONTENT: {"description": "No user with this ID"}},
)
async def get_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> Union[User, Response]:
    """Get a specific user by ID. An unknown ID yields 204 with no body."""
    try:
        user = await bound_to_request(request, service.get(user_id))
    except NotFound:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except UserServiceError as e:
        raise _server_fault("get user", e)
    
    return user


@router.post(
    "/users",
    response_model=User,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="""
    Create a new user. `name`, `dob` and `address` are required.
    
    The response carries the server-assigned `id` and `createdAt`.
    """
)
async def create_user(
    payload: UserCreateRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user."""
    user = payload.to_user()
    try:
        await bound_to_request(request, service.create(user))
    except UserServiceError as e:
        raise _server_fault("create user", e)
    
    logger.info("Created user %s", user.id)
    return user


@router.put(
    "/users/{user_id}",
    response_model=User,
    response_model_exclude_none=True,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Partially update a user",
    description="Only the fields present in the body are changed. The response echoes the submitted fields."
)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> User:
    """Update the fields present in the request body."""
    try:
        updated = await bound_to_request(request, service.update(user_id, payload.to_user()))
    except UserServiceError as e:
        raise _server_fault("update user", e)
    
    if updated is None:
        logger.info("Update for unknown user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"user with id `{user_id}` not found",
        )
    
    return updated


@router.delete(
    "/users/{user_id}",
    summary="Delete a user",
    description="Deleting a user that does not exist still succeeds."
)
async def delete_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user by ID."""
    try:
        await bound_to_request(request, service.delete(user_id))
    except UserServiceError as e:
        raise _server_fault("delete user", e)
    
    return Response(status_code=status.HTTP_200_OK)
