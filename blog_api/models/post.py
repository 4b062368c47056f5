# File: blog_api/models/post.py

"""
Post model.

author_id is fixed at creation. updated_at is refreshed by the post service
on every update, including updates that change nothing.
"""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.models.base import Base, UTCDateTime, generate_id, utc_now
from blog_api.models.user import User

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 50_000


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    author_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        index=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utc_now,
        nullable=False,
    )

    author: Mapped[User] = relationship(back_populates="posts", lazy="joined")
