"""Pydantic schemas for API request/response validation."""

from blog_api.schemas.common import ErrorResponse
from blog_api.schemas.posts import (
    AuthoredPostListResponse,
    PostCreate,
    PostListResponse,
    PostRead,
    PostResponse,
    PostWithAuthor,
)
from blog_api.schemas.search import SearchResponse
from blog_api.schemas.users import (
    UserCreate,
    UserListResponse,
    UserRead,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "ErrorResponse",
    "AuthoredPostListResponse",
    "PostCreate",
    "PostListResponse",
    "PostRead",
    "PostResponse",
    "PostWithAuthor",
    "SearchResponse",
    "UserCreate",
    "UserListResponse",
    "UserRead",
    "UserResponse",
    "UserUpdate",
]
