# File: blog_api/api/v1/routes_blog.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from blog_api.api.deps import current_user, optional_user, require_user
from blog_api.db.session import get_db
from blog_api.models.user import User
from blog_api.schemas.post import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MessageResponse,
    PaginatedPosts,
    PostCreate,
    PostRead,
    PostUpdate,
)
from blog_api.services import post_service

router = APIRouter()


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
)
def create_post(
    payload: PostCreate,
    author: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    """The signed-in user becomes the author. `published` defaults to true."""
    return post_service.create_post(db, author, payload)


@router.get("/bulk", response_model=PaginatedPosts, summary="List posts")
def list_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, max_length=255),
    caller_id: Optional[str] = Depends(optional_user),
    db: Session = Depends(get_db),
):
    """
    Published posts, newest first. A signed-in caller also sees their own
    drafts.
    """
    return post_service.list_feed(db, caller_id, page=page, limit=limit, search=search)


@router.get("/my", response_model=PaginatedPosts, summary="List my posts")
def list_my_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    caller_id: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    return post_service.list_by_author(db, caller_id, page=page, limit=limit)


@router.get("/{post_id}", response_model=PostRead, summary="Get post")
def get_post(
    post_id: str,
    caller_id: Optional[str] = Depends(optional_user),
    db: Session = Depends(get_db),
):
    """404 for missing posts and for drafts the caller does not own."""
    return post_service.get_post(db, post_id, caller_id)


@router.put("/{post_id}", response_model=PostRead, summary="Update post")
def update_post(
    post_id: str,
    payload: PostUpdate,
    caller_id: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    return post_service.update_post(db, post_id, caller_id, payload)


@router.delete("/{post_id}", response_model=MessageResponse, summary="Delete post")
def delete_post(
    post_id: str,
    caller_id: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    post_service.delete_post(db, post_id, caller_id)
    return MessageResponse(message="Blog deleted successfully")
