"""In-memory store for users and posts.

Handles:
- Insertion-ordered user and post collections
- max+1 id generation, recomputed on every insert
- A shared re-entrant lock so a service can run check + write atomically

Data lives for the lifetime of the owning application instance only.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
import threading

from fastapi import Request

from blog_api.models import Post, User

SEED_USERS = [
    {"name": "John Doe", "email": "john@example.com", "age": 30},
    {"name": "Jane Smith", "email": "jane@example.com", "age": 25},
]

SEED_POSTS = [
    {"title": "First Post", "content": "Hello World!", "user_id": 1},
    {"title": "Second Post", "content": "Node.js is awesome", "user_id": 2},
]


def next_id(ids: Iterable[int]) -> int:
    """Return max(ids) + 1, or 1 for an empty collection."""
    return max(ids, default=0) + 1


class UserStore:
    """Collection of users keyed by id, iterated in insertion order."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def all(self) -> list[User]:
        return list(self._users.values())

    def get(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_by_email(self, email: str, *, exclude_id: int | None = None) -> User | None:
        """Find a user by exact email, optionally ignoring one user id."""
        for user in self._users.values():
            if user.email == email and user.id != exclude_id:
                return user
        return None

    def add(self, name: str, email: str, age: int | None = None) -> User:
        user = User(id=next_id(self._users), name=name, email=email, age=age)
        self._users[user.id] = user
        return user

    def remove(self, user_id: int) -> User | None:
        return self._users.pop(user_id, None)


class PostStore:
    """Collection of posts keyed by id, iterated in insertion order."""

    def __init__(self) -> None:
        self._posts: dict[int, Post] = {}

    def __len__(self) -> int:
        return len(self._posts)

    def all(self) -> list[Post]:
        return list(self._posts.values())

    def get(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)

    def by_user(self, user_id: int) -> list[Post]:
        return [p for p in self._posts.values() if p.user_id == user_id]

    def add(self, title: str, content: str, user_id: int) -> Post:
        post = Post(id=next_id(self._posts), title=title, content=content, user_id=user_id)
        self._posts[post.id] = post
        return post

    def remove_by_user(self, user_id: int) -> int:
        """Remove every post owned by `user_id`.

        Returns:
            Number of posts removed.
        """
        doomed = [p.id for p in self._posts.values() if p.user_id == user_id]
        for post_id in doomed:
            del self._posts[post_id]
        return len(doomed)


class MemoryDatabase:
    """Owns both stores and the lock guarding them."""

    def __init__(self) -> None:
        self.users = UserStore()
        self.posts = PostStore()
        self._lock = threading.RLock()

    @contextmanager
    def session(self) -> Iterator["MemoryDatabase"]:
        """Hold the database lock for a read-validate-write sequence.

        Usage:
            with db.session():
                if db.users.find_by_email(email) is None:
                    db.users.add(name, email)
        """
        with self._lock:
            yield self

    def seed(self) -> None:
        """Load the demo users and posts into empty stores."""
        with self.session():
            if len(self.users) or len(self.posts):
                return
            for user in SEED_USERS:
                self.users.add(**user)
            for post in SEED_POSTS:
                self.posts.add(**post)


def get_db(request: Request) -> MemoryDatabase:
    """FastAPI dependency returning the database owned by the app."""
    return request.app.state.db
