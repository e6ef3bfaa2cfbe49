"""
Database configuration and session management.

The process holds at most one ``Database`` (engine + connection pool). It is
built by ``initialize()`` during application startup and handed to request
handlers through the ``get_db`` dependency.
"""

import logging
import threading
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger("menuapi.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _sqlite_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record):
    """Replace SQLite's ASCII-only lower() with Unicode case folding"""
    dbapi_connection.create_function("lower", 1, _sqlite_lower, deterministic=True)


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """Engine and session factory shared by every request of the process."""

    def __init__(self, database_url: str, echo: bool = False):
        engine_kwargs = {"echo": echo, "future": True}
        is_sqlite = make_url(database_url).get_backend_name() == "sqlite"
        if is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(database_url):
                # One shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.url = database_url
        self.engine: Engine = create_engine(database_url, **engine_kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _register_sqlite_functions)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False, future=True
        )

    def create_all(self) -> None:
        """Initialize database schema"""
        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def session(self) -> Generator[Session, None, None]:
        """Yield a session and always close it afterwards."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


# Singleton (initialized on startup)
_database: Optional[Database] = None
_lock = threading.Lock()


def initialize(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Database:
    """
    Return the process-wide Database, creating it on first call.

    Safe to call from several threads: only the first caller builds the engine,
    later calls (with any arguments) get the same instance back.
    """
    global _database
    if _database is not None:
        return _database

    with _lock:
        if _database is None:
            url = database_url or settings.database_url
            _database = Database(url, echo=settings.db_echo if echo is None else echo)
            logger.info(
                "Database engine created for %s",
                make_url(url).render_as_string(hide_password=True),
            )
    return _database


def get_database() -> Database:
    """Return the live Database; initialize() must have run first."""
    if _database is None:
        raise RuntimeError("Database not initialized")
    return _database


def shutdown() -> None:
    """Dispose the engine and forget the singleton."""
    global _database
    with _lock:
        if _database is not None:
            _database.dispose()
            logger.info("Database engine disposed")
        _database = None

