"""Search endpoint.

GET /api/search?q=term&type=users|posts
"""

from fastapi import APIRouter, Depends, Query

from blog_api.models import User
from blog_api.schemas import ErrorResponse, PostRead, SearchResponse, UserRead
from blog_api.services.search import DEFAULT_TYPE, search
from blog_api.stores.memory import MemoryDatabase, get_db

router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}},
)
async def search_records(
    q: str | None = Query(default=None, description="Case-insensitive substring to look for"),
    type_: str = Query(
        default=DEFAULT_TYPE,
        alias="type",
        description="What to search: users (name, email) or posts (title, content)",
        examples=["users", "posts"],
    ),
    db: MemoryDatabase = Depends(get_db),
) -> SearchResponse:
    results = search(db, q, type_)
    data = [
        UserRead.from_model(r) if isinstance(r, User) else PostRead.from_model(r)
        for r in results
    ]
    return SearchResponse(data=data, query=q, type=type_, total=len(data))
