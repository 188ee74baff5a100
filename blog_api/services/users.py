"""User service.

Rules:
- name and email are required and non-empty
- email is unique across live users (exact, case-sensitive)
- age, when given, is within [MIN_AGE, MAX_AGE]
- deleting a user deletes that user's posts in the same locked operation
"""

import logging
from typing import Any

from blog_api.models import User
from blog_api.services.errors import Conflict, NotFound, ValidationError
from blog_api.stores.memory import MemoryDatabase

logger = logging.getLogger("uvicorn.error")

MIN_AGE = 0
MAX_AGE = 120

USER_NOT_FOUND = "User not found"
EMAIL_EXISTS = "Email already exists"
AGE_OUT_OF_RANGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"


def _check_age(age: int | None) -> None:
    if age is not None and not MIN_AGE <= age <= MAX_AGE:
        raise ValidationError(AGE_OUT_OF_RANGE)


def list_users(db: MemoryDatabase) -> list[User]:
    """Return all users in insertion order."""
    with db.session():
        return db.users.all()


def get_user(db: MemoryDatabase, user_id: int) -> User:
    with db.session():
        user = db.users.get(user_id)
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    return user


def create_user(
    db: MemoryDatabase,
    *,
    name: str | None,
    email: str | None,
    age: int | None = None,
) -> User:
    """Validate and store a new user.

    Raises:
        ValidationError: name/email missing or age out of range.
        Conflict: email already taken.
    """
    if not name or not email:
        raise ValidationError("Name and email are required")
    _check_age(age)

    with db.session():
        if db.users.find_by_email(email) is not None:
            raise Conflict(EMAIL_EXISTS)
        user = db.users.add(name=name, email=email, age=age)

    logger.info(f"User created: id={user.id}")
    return user


def update_user(db: MemoryDatabase, user_id: int, changes: dict[str, Any]) -> User:
    """Apply a partial update to a user.

    Only keys present in `changes` are considered. `name` or `email` given
    as None are ignored; `age` given as None clears the age.

    Raises:
        NotFound: no such user.
        ValidationError: empty name/email or age out of range.
        Conflict: email taken by another user.
    """
    name = changes.get("name")
    email = changes.get("email")

    with db.session():
        user = db.users.get(user_id)
        if user is None:
            raise NotFound(USER_NOT_FOUND)

        if name == "" or email == "":
            raise ValidationError("Name and email cannot be empty")
        if email is not None and db.users.find_by_email(email, exclude_id=user_id) is not None:
            raise Conflict(EMAIL_EXISTS)
        if "age" in changes:
            _check_age(changes["age"])

        if name is not None:
            user.name = name
        if email is not None:
            user.email = email
        if "age" in changes:
            user.age = changes["age"]

    return user


def delete_user(db: MemoryDatabase, user_id: int) -> User:
    """Remove a user and cascade-delete the user's posts.

    Raises:
        NotFound: no such user.
    """
    with db.session():
        user = db.users.remove(user_id)
        if user is None:
            raise NotFound(USER_NOT_FOUND)
        removed_posts = db.posts.remove_by_user(user_id)

    logger.info(f"User deleted: id={user_id}, cascaded posts={removed_posts}")
    return user
