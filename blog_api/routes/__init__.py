"""API routes."""

from fastapi import APIRouter

from blog_api.routes import posts, search, users

api_router = APIRouter()

# User CRUD
api_router.include_router(users.router, prefix="/api/users", tags=["users"])

# Posts, including /api/users/{id}/posts
api_router.include_router(posts.router, prefix="/api", tags=["posts"])

# Search across users or posts
api_router.include_router(search.router, prefix="/api", tags=["search"])
