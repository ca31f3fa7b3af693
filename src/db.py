"""Database engine/session helpers for the read-only data source."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def create_db_engine(db_url: str, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine; connections are checked before reuse."""
    return create_engine(db_url, pool_pre_ping=True, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory for read-only fetches bound to the engine."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
