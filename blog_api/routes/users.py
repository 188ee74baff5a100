"""User endpoints.

GET    /api/users
GET    /api/users/{id}
POST   /api/users
PUT    /api/users/{id}
DELETE /api/users/{id}   (cascades to the user's posts)

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Path

from blog_api.schemas import (
    ErrorResponse,
    UserCreate,
    UserListResponse,
    UserRead,
    UserResponse,
    UserUpdate,
)
from blog_api.services import users as user_service
from blog_api.services.errors import NotFound
from blog_api.stores.memory import MemoryDatabase, get_db

router = APIRouter()


def user_id_path(
    user_id: str = Path(description="User ID", examples=["1"]),
) -> int:
    """Parse the user id path segment; a non-integer id names no user."""
    try:
        return int(user_id)
    except ValueError:
        raise NotFound(user_service.USER_NOT_FOUND) from None


@router.get("", response_model=UserListResponse)
async def list_users(db: MemoryDatabase = Depends(get_db)) -> UserListResponse:
    """List all users in insertion order."""
    users = user_service.list_users(db)
    return UserListResponse(data=[UserRead.from_model(u) for u in users], total=len(users))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_user(
    user_id: int = Depends(user_id_path),
    db: MemoryDatabase = Depends(get_db),
) -> UserResponse:
    user = user_service.get_user(db, user_id)
    return UserResponse(data=UserRead.from_model(user))


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_user(body: UserCreate, db: MemoryDatabase = Depends(get_db)) -> UserResponse:
    """Create a user.

    Raises:
        400: name or email missing, or age outside 0-120.
        409: email already in use.
    """
    user = user_service.create_user(db, name=body.name, email=body.email, age=body.age)
    return UserResponse(data=UserRead.from_model(user))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_user(
    body: UserUpdate,
    user_id: int = Depends(user_id_path),
    db: MemoryDatabase = Depends(get_db),
) -> UserResponse:
    """Partially update a user; omitted fields are left unchanged."""
    user = user_service.update_user(db, user_id, body.model_dump(exclude_unset=True))
    return UserResponse(data=UserRead.from_model(user))


@router.delete(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_user(
    user_id: int = Depends(user_id_path),
    db: MemoryDatabase = Depends(get_db),
) -> UserResponse:
    """Delete a user together with all of the user's posts."""
    user = user_service.delete_user(db, user_id)
    return UserResponse(data=UserRead.from_model(user))
