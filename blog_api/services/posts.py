"""Post service.

Every post must reference a live user. The reference is checked on create;
user deletion keeps it true by cascading (see services.users.delete_user).
"""

from dataclasses import dataclass
import logging

from blog_api.models import Post
from blog_api.services.errors import NotFound, ValidationError
from blog_api.services.users import USER_NOT_FOUND
from blog_api.stores.memory import MemoryDatabase

logger = logging.getLogger("uvicorn.error")

UNKNOWN_AUTHOR = "Unknown"


@dataclass(frozen=True)
class AuthoredPost:
    """A post together with the name of its author."""

    post: Post
    author: str


def list_posts(db: MemoryDatabase) -> list[AuthoredPost]:
    """Return all posts, each with its author's name.

    A post whose user is missing gets UNKNOWN_AUTHOR instead of failing.
    """
    with db.session():
        result = []
        for post in db.posts.all():
            user = db.users.get(post.user_id)
            result.append(AuthoredPost(post=post, author=user.name if user else UNKNOWN_AUTHOR))
        return result


def list_posts_by_user(db: MemoryDatabase, user_id: int) -> list[Post]:
    """Return the posts of one user; an existing user with no posts gives []."""
    with db.session():
        if db.users.get(user_id) is None:
            raise NotFound(USER_NOT_FOUND)
        return db.posts.by_user(user_id)


def create_post(
    db: MemoryDatabase,
    *,
    title: str | None,
    content: str | None,
    user_id: int | None,
) -> Post:
    """Validate and store a new post.

    Presence checks run before the user lookup, so a request missing fields
    is a ValidationError even when its userId is also unknown.

    Raises:
        ValidationError: title, content or user_id missing (user_id 0 counts).
        NotFound: user_id references no user.
    """
    if not title or not content or not user_id:
        raise ValidationError("Title, content, and userId are required")

    with db.session():
        if db.users.get(user_id) is None:
            raise NotFound(USER_NOT_FOUND)
        post = db.posts.add(title=title, content=content, user_id=user_id)

    logger.info(f"Post created: id={post.id}, user_id={user_id}")
    return post
