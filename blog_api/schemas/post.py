# File: blog_api/schemas/post.py

from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, StringConstraints
from pydantic.alias_generators import to_camel

from blog_api.models.post import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from blog_api.schemas.user import AuthorRead

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH)]
Content = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=CONTENT_MAX_LENGTH)]

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


# -----------------------------
# Request bodies
# -----------------------------

class PostCreate(BaseModel):
    title: Title
    content: Content
    published: bool = True


class PostUpdate(BaseModel):
    """Partial update. Unknown keys (authorId, createdAt, ...) are dropped."""
    title: Optional[Title] = None
    content: Optional[Content] = None
    published: Optional[bool] = None


# -----------------------------
# Responses
# -----------------------------

class _CamelModel(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PostRead(_CamelModel):
    id: str
    title: str
    content: str
    published: bool
    created_at: datetime
    updated_at: datetime
    author_id: str
    author: AuthorRead


class PaginationInfo(_CamelModel):
    current_page: int
    total_pages: int
    total_blogs: int
    has_next: bool
    has_prev: bool
    limit: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> PaginationInfo:
        total_pages = (total + limit - 1) // limit if total else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_blogs=total,
            has_next=page < total_pages,
            has_prev=page > 1,
            limit=limit,
        )


class PaginatedPosts(BaseModel):
    blogs: List[PostRead]
    pagination: PaginationInfo


class MessageResponse(BaseModel):
    message: str
