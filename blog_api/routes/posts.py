"""Post endpoints.

GET  /api/posts               - all posts with author names
GET  /api/users/{id}/posts    - posts of one user
POST /api/posts               - create a post for an existing user
"""

from fastapi import APIRouter, Depends

from blog_api.routes.users import user_id_path
from blog_api.schemas import (
    AuthoredPostListResponse,
    ErrorResponse,
    PostCreate,
    PostListResponse,
    PostRead,
    PostResponse,
    PostWithAuthor,
)
from blog_api.services import posts as post_service
from blog_api.stores.memory import MemoryDatabase, get_db

router = APIRouter()


@router.get("/posts", response_model=AuthoredPostListResponse)
async def list_posts(db: MemoryDatabase = Depends(get_db)) -> AuthoredPostListResponse:
    items = post_service.list_posts(db)
    return AuthoredPostListResponse(
        data=[PostWithAuthor.from_authored(item) for item in items],
        total=len(items),
    )


@router.get(
    "/users/{user_id}/posts",
    response_model=PostListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_user_posts(
    user_id: int = Depends(user_id_path),
    db: MemoryDatabase = Depends(get_db),
) -> PostListResponse:
    posts = post_service.list_posts_by_user(db, user_id)
    return PostListResponse(data=[PostRead.from_model(p) for p in posts], total=len(posts))


@router.post(
    "/posts",
    status_code=201,
    response_model=PostResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_post(body: PostCreate, db: MemoryDatabase = Depends(get_db)) -> PostResponse:
    """Create a post.

    Raises:
        400: title, content or userId missing.
        404: userId does not reference an existing user.
    """
    post = post_service.create_post(
        db,
        title=body.title,
        content=body.content,
        user_id=body.user_id,
    )
    return PostResponse(data=PostRead.from_model(post))
