# File: blog_api/db/session.py

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """
    Build the engine for ``database_url``.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


# ----------------------------------------------------
# DB Session Dependency
# ----------------------------------------------------
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    The session factory is owned by the application (``app.state``), one
    session per request.
    """
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
