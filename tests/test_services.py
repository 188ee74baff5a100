"""Tests for the user, post and search services against a bare database."""

import pytest

from blog_api.services import posts as post_service
from blog_api.services import users as user_service
from blog_api.services.errors import Conflict, NotFound, ValidationError
from blog_api.services.search import search
from blog_api.stores.memory import MemoryDatabase, next_id


@pytest.fixture
def db() -> MemoryDatabase:
    database = MemoryDatabase()
    database.seed()
    return database


class TestIdGeneration:
    """Ids are max+1 over the live collection, or 1 when it is empty."""

    def test_empty_collection_starts_at_one(self):
        assert next_id([]) == 1
        assert MemoryDatabase().users.add("A", "a@x.com").id == 1

    def test_gap_from_deleted_non_max_is_not_refilled(self, db: MemoryDatabase):
        user_service.delete_user(db, 1)
        user = user_service.create_user(db, name="A", email="a@x.com")
        assert user.id == 3

    def test_deleted_max_id_is_reused(self, db: MemoryDatabase):
        user_service.delete_user(db, 2)
        user = user_service.create_user(db, name="A", email="a@x.com")
        assert user.id == 2

    def test_post_ids_are_independent_of_user_ids(self, db: MemoryDatabase):
        user_service.create_user(db, name="A", email="a@x.com")
        user_service.create_user(db, name="B", email="b@x.com")
        post = post_service.create_post(db, title="T", content="C", user_id=4)
        assert post.id == 3


class TestUsers:
    def test_seed_order(self, db: MemoryDatabase):
        assert [u.name for u in user_service.list_users(db)] == ["John Doe", "Jane Smith"]

    def test_get_missing(self, db: MemoryDatabase):
        with pytest.raises(NotFound):
            user_service.get_user(db, 99)

    @pytest.mark.parametrize(
        "name,email",
        [(None, "a@x.com"), ("A", None), ("", "a@x.com"), ("A", "")],
    )
    def test_create_requires_name_and_email(self, db: MemoryDatabase, name, email):
        with pytest.raises(ValidationError, match="Name and email are required"):
            user_service.create_user(db, name=name, email=email)

    def test_create_checks_age_before_email(self, db: MemoryDatabase):
        with pytest.raises(ValidationError):
            user_service.create_user(db, name="A", email="john@example.com", age=130)

    def test_create_duplicate_email(self, db: MemoryDatabase):
        with pytest.raises(Conflict):
            user_service.create_user(db, name="Other", email="jane@example.com", age=40)
        assert len(db.users) == 2

    def test_update_missing_user_checked_first(self, db: MemoryDatabase):
        with pytest.raises(NotFound):
            user_service.update_user(db, 99, {"email": "john@example.com", "age": 500})

    def test_update_conflict_checked_before_age(self, db: MemoryDatabase):
        with pytest.raises(Conflict):
            user_service.update_user(db, 1, {"email": "jane@example.com", "age": 500})

    def test_failed_update_leaves_user_untouched(self, db: MemoryDatabase):
        with pytest.raises(ValidationError):
            user_service.update_user(db, 1, {"name": "Changed", "age": -3})
        assert user_service.get_user(db, 1).name == "John Doe"

    def test_update_null_name_is_ignored(self, db: MemoryDatabase):
        user = user_service.update_user(db, 1, {"name": None, "age": 45})
        assert user.name == "John Doe"
        assert user.age == 45

    def test_update_with_no_changes(self, db: MemoryDatabase):
        user = user_service.update_user(db, 2, {})
        assert (user.name, user.email, user.age) == ("Jane Smith", "jane@example.com", 25)

    def test_delete_cascades(self, db: MemoryDatabase):
        post_service.create_post(db, title="Extra", content="More", user_id=2)
        user_service.delete_user(db, 2)
        assert [p.user_id for p in db.posts.all()] == [1]
        with pytest.raises(NotFound):
            user_service.delete_user(db, 2)


class TestPosts:
    def test_list_posts_decorates_author(self, db: MemoryDatabase):
        items = post_service.list_posts(db)
        assert [(i.post.id, i.author) for i in items] == [(1, "John Doe"), (2, "Jane Smith")]

    def test_list_posts_tolerates_missing_author(self, db: MemoryDatabase):
        db.posts.add(title="Orphan", content="No owner", user_id=42)
        items = post_service.list_posts(db)
        assert items[-1].author == post_service.UNKNOWN_AUTHOR

    def test_list_by_user_missing(self, db: MemoryDatabase):
        with pytest.raises(NotFound):
            post_service.list_posts_by_user(db, 42)

    def test_missing_fields_win_over_unknown_user(self, db: MemoryDatabase):
        with pytest.raises(ValidationError):
            post_service.create_post(db, title=None, content="C", user_id=42)

    def test_unknown_user(self, db: MemoryDatabase):
        with pytest.raises(NotFound):
            post_service.create_post(db, title="T", content="C", user_id=42)
        assert len(db.posts) == 2


class TestSearch:
    def test_requires_query(self, db: MemoryDatabase):
        with pytest.raises(ValidationError):
            search(db, None)
        with pytest.raises(ValidationError):
            search(db, "")

    def test_users_match_name_or_email(self, db: MemoryDatabase):
        assert [u.id for u in search(db, "SMITH")] == [2]
        assert [u.id for u in search(db, "john@")] == [1]

    def test_posts_match_title_or_content(self, db: MemoryDatabase):
        assert [p.id for p in search(db, "first", "posts")] == [1]
        assert [p.id for p in search(db, "WORLD", "posts")] == [1]
        assert [p.id for p in search(db, "post", "posts")] == [1, 2]

    def test_unknown_type(self, db: MemoryDatabase):
        assert search(db, "john", "Users") == []
