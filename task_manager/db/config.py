"""Database configuration for the Task Manager API."""
from typing import Generator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from task_manager.utils.logger import get_logger

logger = get_logger("task_manager.db")


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLModel engine for the given database URL.

    SQLite engines are shared across the worker threads FastAPI runs handlers
    in, and an in-memory SQLite database is pinned to a single connection so
    every session sees the same data.
    """
    if database_url.startswith("sqlite"):
        logger.info("Using SQLite database", database_url=database_url)
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool

        engine = create_engine(database_url, echo=echo, **kwargs)

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            # Foreign keys are off by default in SQLite
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
            # Built-in lower() only folds ASCII; ILIKE compiles to lower() LIKE lower()
            dbapi_connection.create_function("lower", 1, _casefold, deterministic=True)

        return engine

    logger.info("Using database server", dialect=database_url.split(":", 1)[0])
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def get_session(request: Request) -> Generator[Session, None, None]:
    """Dependency for getting a database session bound to the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session
