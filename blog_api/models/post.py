"""Post model.

Each post belongs to one user through `user_id`. The store never holds a
post whose user is gone: deleting a user removes its posts too.
"""

from dataclasses import dataclass


@dataclass
class Post:
    """A post authored by a user."""

    id: int
    title: str
    content: str
    user_id: int

    def __repr__(self) -> str:
        return f"<Post {self.id} by user {self.user_id}>"
