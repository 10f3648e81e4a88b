"""
User endpoints.

Routes are named after the operations they expose (``GetUsers``,
``CreateUser`` and so on) and live under ``/api/user``.  Handlers do
no validation of their own: they call ``UserService`` and translate
its results and exceptions into status codes.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from user_api.app.core.db import DbContext, get_db_context
from user_api.app.core.errors import DuplicateKeyError, InvalidArgumentError, NotFoundError
from user_api.app.schemas.user import User
from user_api.app.services.user_service import UserService


router = APIRouter()


def get_user_service(context: DbContext = Depends(get_db_context)) -> UserService:
    return UserService(context)


@router.get("/GetUsers", response_model=List[User])
async def get_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all users.  An empty store yields an empty list."""
    return await service.list_users()


@router.get("/GetUserById/{user_id}", response_model=User)
async def get_user_by_id(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> User:
    """Retrieve a user by ID.

    Returns HTTP 404 if the user does not exist.
    """
    try:
        return await service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/CreateUser", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    response: Response,
    user: Optional[User] = Body(None),
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user and return it.

    The ``Location`` header points at ``GetUserById`` for the new
    record.  A missing body yields 400 and an id that is already taken
    yields 409.
    """
    try:
        result = await service.create_user(user)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateKeyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if result > 0:
        response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=str(user.id)))
        return user
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error creating user")


@router.put("/UpdateUser", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user: Optional[User] = Body(None),
    service: UserService = Depends(get_user_service),
) -> None:
    """Replace every field of an existing user."""
    try:
        result = await service.update_user(user)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if result > 0:
        return None
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error updating user")


@router.delete("/DeleteUser/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user by ID; 404 if it does not exist."""
    try:
        result = await service.delete_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if result > 0:
        return None
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error deleting user")
