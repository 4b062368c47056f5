# File: blog_api/db/repositories.py

"""
Repositories over the SQLAlchemy session.

This is the only layer that sees SQLAlchemy/driver exceptions. They are
translated into blog_api.core.errors types before leaving a repository.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.core.errors import (
    AppError,
    DuplicateRecordError,
    PersistenceError,
    RelatedRecordError,
)
from blog_api.models.post import Post
from blog_api.models.user import User

logger = logging.getLogger(__name__)

# SQLSTATE codes (PostgreSQL)
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _integrity_error_to_app_error(exc: IntegrityError) -> AppError:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    message = str(orig).lower()

    if sqlstate == UNIQUE_VIOLATION or "unique" in message:
        return DuplicateRecordError()
    if sqlstate == FOREIGN_KEY_VIOLATION or "foreign key" in message:
        return RelatedRecordError()
    return PersistenceError()


@contextmanager
def translate_errors(db: Session) -> Iterator[None]:
    """Roll back and re-raise database failures as application errors."""
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        error = _integrity_error_to_app_error(exc)
        logger.warning("Integrity error (%s): %s", error.code, exc.orig)
        raise error from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database error: %s", exc)
        raise PersistenceError() from exc


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> Optional[User]:
        with translate_errors(self.db):
            return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        with translate_errors(self.db):
            return self.db.scalars(select(User).where(User.email == email)).first()

    def add(self, user: User) -> User:
        with translate_errors(self.db):
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        return user


class PostRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, post_id: str) -> Optional[Post]:
        with translate_errors(self.db):
            return self.db.get(Post, post_id)

    def add(self, post: Post) -> Post:
        return self.save(post)

    def save(self, post: Post) -> Post:
        with translate_errors(self.db):
            self.db.add(post)
            self.db.commit()
            self.db.refresh(post)
        return post

    def delete(self, post: Post) -> None:
        with translate_errors(self.db):
            self.db.delete(post)
            self.db.commit()

    def list_visible(
        self,
        caller_id: Optional[str],
        *,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Post], int]:
        """Published posts, plus the caller's own drafts when there is a caller."""
        visible = Post.published.is_(True)
        if caller_id is not None:
            visible = or_(visible, Post.author_id == caller_id)

        conditions = [visible]
        if search:
            conditions.append(
                or_(
                    Post.title.icontains(search, autoescape=True),
                    Post.content.icontains(search, autoescape=True),
                )
            )
        return self._page(conditions, offset, limit)

    def list_by_author(
        self,
        author_id: str,
        *,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[Post], int]:
        return self._page([Post.author_id == author_id], offset, limit)

    def _page(self, conditions: list, offset: int, limit: int) -> tuple[list[Post], int]:
        with translate_errors(self.db):
            total = self.db.scalar(select(func.count(Post.id)).where(*conditions)) or 0
            items = self.db.scalars(
                select(Post)
                .where(*conditions)
                .order_by(Post.created_at.desc(), Post.id.desc())
                .offset(offset)
                .limit(limit)
            ).unique().all()
        return list(items), total
