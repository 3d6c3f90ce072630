"""
Database engine and unit of work.

All repositories talk to the database through get_db_session(); one
`with` block is one transaction.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from jobhunter.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _build_engine():
    url = settings.sqlalchemy_url
    # SQLite is only used for local runs and tests; its connections are
    # shared between the server's worker threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        connect_args=connect_args,
        echo=settings.debug,
    )


engine = _build_engine()

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def get_db_session() -> Iterator[Session]:
    """
    Unit of work. Everything executed inside the block commits together;
    any exception, including NotFoundError raised mid-block, rolls the
    whole transaction back before propagating.

    Usage:
        with get_db_session() as db:
            db.execute(text("INSERT INTO companies ..."), params)
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()


def check_database_connection() -> bool:
    """True if the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except SQLAlchemyError as exc:
        logger.error("Database connection failed: %s", exc)
        return False
