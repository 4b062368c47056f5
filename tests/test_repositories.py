# File: tests/test_repositories.py

from datetime import timedelta

import pytest

from blog_api.core.errors import DuplicateRecordError, RelatedRecordError
from blog_api.db.init_db import init_db
from blog_api.db.repositories import PostRepository, UserRepository
from blog_api.db.session import create_db_engine, create_session_factory
from blog_api.models.post import Post
from blog_api.models.user import User


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def make_user(email="a@x.com") -> User:
    return User(email=email, password_hash="pbkdf2_sha256$1$salt$hash")


def test_user_lookup(db):
    users = UserRepository(db)
    user = users.add(make_user())
    assert users.get_by_id(user.id).email == "a@x.com"
    assert users.get_by_email("a@x.com").id == user.id
    assert users.get_by_id("missing") is None
    assert users.get_by_email("nobody@x.com") is None


def test_duplicate_email_is_translated(db):
    users = UserRepository(db)
    users.add(make_user())
    with pytest.raises(DuplicateRecordError):
        users.add(make_user())

    # session is usable again after the rollback
    assert users.get_by_email("a@x.com") is not None


def test_unknown_author_is_translated(db):
    posts = PostRepository(db)
    with pytest.raises(RelatedRecordError):
        posts.add(Post(title="t", content="c", author_id="no-such-user"))


def test_list_visible_and_by_author(db):
    alice = UserRepository(db).add(make_user("alice@x.com"))
    bob = UserRepository(db).add(make_user("bob@x.com"))
    posts = PostRepository(db)
    public = posts.add(Post(title="public", content="c", author_id=alice.id))
    draft = posts.add(Post(title="draft", content="c", author_id=alice.id, published=False))
    posts.add(Post(title="bob draft", content="c", author_id=bob.id, published=False))

    items, total = posts.list_visible(None)
    assert total == 1 and [p.id for p in items] == [public.id]

    items, total = posts.list_visible(alice.id)
    assert total == 2 and {p.id for p in items} == {public.id, draft.id}

    items, total = posts.list_by_author(alice.id, limit=1)
    assert total == 2 and len(items) == 1


def test_timestamps_read_back_as_utc(db):
    user = UserRepository(db).add(make_user())
    post = PostRepository(db).add(Post(title="t", content="c", author_id=user.id))

    db.expire_all()
    stored = PostRepository(db).get_by_id(post.id)
    assert stored.created_at.utcoffset() == timedelta(0)
    assert stored.updated_at.utcoffset() == timedelta(0)
    assert UserRepository(db).get_by_id(user.id).created_at.utcoffset() == timedelta(0)
