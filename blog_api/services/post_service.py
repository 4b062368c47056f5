# File: blog_api/services/post_service.py

"""
Post service.

Every read goes through policy.can_read and every update/delete through
policy.can_mutate. A post the caller may not read is reported exactly like a
missing one, so drafts never leak through GET.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from blog_api.core.errors import ForbiddenError, NotFoundError
from blog_api.core import policy
from blog_api.db.repositories import PostRepository
from blog_api.models.base import utc_now
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas.post import PaginatedPosts, PaginationInfo, PostCreate, PostRead, PostUpdate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content", "published")


def create_post(db: Session, author: User, payload: PostCreate) -> Post:
    now = utc_now()
    post = Post(
        title=payload.title,
        content=payload.content,
        published=payload.published,
        author_id=author.id,
        created_at=now,
        updated_at=now,
    )
    post = PostRepository(db).add(post)
    logger.info("User %s created post %s (published=%s)", author.id, post.id, post.published)
    return post


def get_post(db: Session, post_id: str, caller_id: Optional[str]) -> Post:
    post = PostRepository(db).get_by_id(post_id)
    if post is None or not policy.can_read(post, caller_id):
        raise NotFoundError("Post")
    return post


def _get_mutable_post(repo: PostRepository, post_id: str, caller_id: str) -> Post:
    post = repo.get_by_id(post_id)
    if post is None:
        raise NotFoundError("Post")
    if not policy.can_mutate(post, caller_id):
        logger.info("User %s denied write access to post %s", caller_id, post_id)
        raise ForbiddenError("You can only modify your own posts")
    return post


def update_post(db: Session, post_id: str, caller_id: str, payload: PostUpdate) -> Post:
    """
    Apply a partial update. author_id and created_at are never touched;
    updated_at is refreshed even when no field changes.
    """
    repo = PostRepository(db)
    post = _get_mutable_post(repo, post_id, caller_id)

    changes = payload.model_dump(exclude_unset=True)
    for field in UPDATABLE_FIELDS:
        value = changes.get(field)
        if value is not None:
            setattr(post, field, value)
    post.updated_at = utc_now()

    return repo.save(post)


def delete_post(db: Session, post_id: str, caller_id: str) -> None:
    repo = PostRepository(db)
    post = _get_mutable_post(repo, post_id, caller_id)
    repo.delete(post)
    logger.info("User %s deleted post %s", caller_id, post_id)


def _paginate(items: list[Post], total: int, page: int, limit: int) -> PaginatedPosts:
    return PaginatedPosts(
        blogs=[PostRead.model_validate(p) for p in items],
        pagination=PaginationInfo.build(page, limit, total),
    )


def list_feed(
    db: Session,
    caller_id: Optional[str],
    *,
    page: int,
    limit: int,
    search: Optional[str] = None,
) -> PaginatedPosts:
    items, total = PostRepository(db).list_visible(
        caller_id,
        search=search.strip() if search else None,
        offset=(page - 1) * limit,
        limit=limit,
    )
    return _paginate(items, total, page, limit)


def list_by_author(db: Session, author_id: str, *, page: int, limit: int) -> PaginatedPosts:
    items, total = PostRepository(db).list_by_author(
        author_id,
        offset=(page - 1) * limit,
        limit=limit,
    )
    return _paginate(items, total, page, limit)
