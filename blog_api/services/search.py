"""Case-insensitive substring search over users or posts."""

from blog_api.models import Post, User
from blog_api.services.errors import ValidationError
from blog_api.stores.memory import MemoryDatabase

DEFAULT_TYPE = "users"


def _matches(query: str, *fields: str) -> bool:
    return any(query in field.lower() for field in fields)


def search(db: MemoryDatabase, query: str | None, type_: str = DEFAULT_TYPE) -> list[User] | list[Post]:
    """Search users (name, email) or posts (title, content).

    Any other `type_` yields no results rather than an error.

    Raises:
        ValidationError: query missing or empty.
    """
    if not query:
        raise ValidationError('Query parameter "q" is required')

    needle = query.lower()
    with db.session():
        if type_ == "users":
            return [u for u in db.users.all() if _matches(needle, u.name, u.email)]
        if type_ == "posts":
            return [p for p in db.posts.all() if _matches(needle, p.title, p.content)]
    return []
