"""User model."""

from dataclasses import dataclass


@dataclass
class User:
    """A registered user. `id` is assigned by the store and never changes."""

    id: int
    name: str
    email: str
    age: int | None = None

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
