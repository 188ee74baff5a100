"""Record types kept by the in-memory stores.

- users: people who author posts
- posts: short articles, each owned by exactly one user
"""

from blog_api.models.post import Post
from blog_api.models.user import User

__all__ = ["Post", "User"]
