"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine

from blog_api.models.base import Base
from blog_api.models import post, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
