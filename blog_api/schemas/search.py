"""Schemas for the search endpoint (/api/search)."""

from pydantic import BaseModel

from blog_api.schemas.posts import PostRead
from blog_api.schemas.users import UserRead


class SearchResponse(BaseModel):
    """Search results, echoing the query and the resolved type."""

    success: bool = True
    data: list[UserRead] | list[PostRead]
    query: str
    type: str
    total: int
