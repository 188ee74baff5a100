"""Schemas for the user endpoints (/api/users)."""

from pydantic import BaseModel

from blog_api.models import User


class UserCreate(BaseModel):
    """Request body for POST /api/users.

    Fields are optional here so that missing values reach the service and
    get the API's own error messages.
    """

    name: str | None = None
    email: str | None = None
    age: int | None = None


class UserUpdate(BaseModel):
    """Request body for PUT /api/users/{id}.

    Use `model_dump(exclude_unset=True)` to get only the supplied fields.
    """

    name: str | None = None
    email: str | None = None
    age: int | None = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    age: int | None = None

    @classmethod
    def from_model(cls, user: User) -> "UserRead":
        return cls(id=user.id, name=user.name, email=user.email, age=user.age)


class UserResponse(BaseModel):
    success: bool = True
    data: UserRead


class UserListResponse(BaseModel):
    success: bool = True
    data: list[UserRead]
    total: int
