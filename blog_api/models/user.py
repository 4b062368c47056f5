# File: blog_api/models/user.py

"""
User model.

Emails are stored lower-cased; the password is only ever stored as a
salted hash (see blog_api.core.security).
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.models.base import Base, UTCDateTime, generate_id, utc_now

if TYPE_CHECKING:
    from blog_api.models.post import Post


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utc_now,
        nullable=False,
    )

    posts: Mapped[list["Post"]] = relationship(back_populates="author")
