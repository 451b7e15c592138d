# model_manager/core/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from contextlib import contextmanager
from typing import Iterator
from ..core.config import get_settings
from ..domain.db_models import Base
import os

_engine = None
_SessionLocal = None


def create_db_engine(db_url: str, echo: bool = False, timeout_s: float | None = None, **kwargs) -> Engine:
    """Create an engine for db_url, applying the SQLite-specific connect args."""
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if timeout_s is not None:
            connect_args["timeout"] = timeout_s
        db_path = db_url.replace("sqlite:///", "")
        # Ensure directory exists for file-backed SQLite
        if db_path and db_path != db_url and db_path != ":memory:":
            os.makedirs(os.path.dirname(db_path) if os.path.dirname(db_path) else ".", exist_ok=True)
    elif timeout_s is not None:
        kwargs.setdefault("pool_timeout", timeout_s)
    return create_engine(db_url, echo=echo, connect_args=connect_args, **kwargs)


def get_engine() -> Engine:
    """Get or create database engine"""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_db_engine(settings.DB_URL, echo=settings.DB_ECHO, timeout_s=settings.DB_TIMEOUT_S)
    return _engine


def get_session_local() -> sessionmaker:
    """Get or create session factory"""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = make_session_factory(get_engine())
    return _SessionLocal


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine | None = None) -> None:
    """Initialize database tables"""
    Base.metadata.create_all(bind=engine or get_engine())


@contextmanager
def session_scope(session_factory: sessionmaker | None = None) -> Iterator[Session]:
    """
    One transaction per block: commit on success, roll back on any exception
    and re-raise it unchanged.
    """
    SessionLocal = session_factory or get_session_local()
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
