from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from meetcross.core.config import require_service_config

logger = logging.getLogger(__name__)

Base = declarative_base()

SessionLocal = sessionmaker(
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)

_engine: Engine | None = None


def get_engine() -> Engine:
    """Build the engine on first use; missing configuration fails here, before any query."""

    global _engine
    if _engine is None:
        config = require_service_config()
        connect_args = {}
        if config.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        _engine = create_engine(config.DATABASE_URL, future=True, pool_pre_ping=True, connect_args=connect_args)
        SessionLocal.configure(bind=_engine)
        logger.info("database_engine_created", extra={"dialect": _engine.dialect.name})
    return _engine


def get_db() -> Iterator[Session]:
    get_engine()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit on success, roll back and re-raise on any failure."""

    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
