"""Schemas for the post endpoints (/api/posts, /api/users/{id}/posts)."""

from pydantic import BaseModel, Field

from blog_api.models import Post
from blog_api.services.posts import AuthoredPost


class PostCreate(BaseModel):
    """Request body for POST /api/posts."""

    title: str | None = None
    content: str | None = None
    user_id: int | None = Field(alias="userId", default=None)

    model_config = {"populate_by_name": True}


class PostRead(BaseModel):
    id: int
    title: str
    content: str
    user_id: int = Field(alias="userId")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_model(cls, post: Post) -> "PostRead":
        return cls(id=post.id, title=post.title, content=post.content, user_id=post.user_id)


class PostWithAuthor(PostRead):
    """A post as listed by GET /api/posts, with its author's name."""

    author: str

    @classmethod
    def from_authored(cls, item: AuthoredPost) -> "PostWithAuthor":
        post = item.post
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            user_id=post.user_id,
            author=item.author,
        )


class PostResponse(BaseModel):
    success: bool = True
    data: PostRead


class PostListResponse(BaseModel):
    success: bool = True
    data: list[PostRead]
    total: int


class AuthoredPostListResponse(BaseModel):
    success: bool = True
    data: list[PostWithAuthor]
    total: int
