"""
Database wiring — engine, session factory and explicit transaction scopes.

Request handlers receive a Session through ``get_db``. Writes go through
``transaction(db)`` and multi-query reads through ``read_scope(db)``, so no
caller pairs begin/commit/rollback by hand.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from stockwatch.config import settings
from stockwatch.core.exceptions import ServerException

logger = logging.getLogger(__name__)

Base = declarative_base()


def engine_options(database_url: str) -> Dict[str, Any]:
    """Driver-specific options that bound every database wait."""
    backend = make_url(database_url).get_backend_name()
    timeout = settings.DATABASE_STATEMENT_TIMEOUT_SECONDS
    options: Dict[str, Any] = {"pool_pre_ping": True}

    if backend == "sqlite":
        options["connect_args"] = {"check_same_thread": False, "timeout": timeout}
        return options

    options["pool_timeout"] = settings.DATABASE_POOL_TIMEOUT_SECONDS
    if backend == "postgresql":
        options["connect_args"] = {"options": f"-c statement_timeout={int(timeout * 1000)}"}
    elif backend == "mysql":
        options["connect_args"] = {"read_timeout": int(timeout), "write_timeout": int(timeout)}
    return options


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection.
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    # Import models so every table is registered on Base.metadata.
    import stockwatch.models  # noqa: F401

    if not settings.AUTO_CREATE_TABLES:
        logger.info("AUTO_CREATE_TABLES disabled; schema is managed by Alembic")
        return
    Base.metadata.create_all(bind=engine)


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit when the block completes, roll back on any exception."""
    try:
        yield db
        db.commit()
    except BaseException:
        db.rollback()
        raise


@contextmanager
def read_scope(db: Session, operation: str) -> Iterator[Session]:
    """
    Run a group of reads inside one session transaction.

    The transaction is always released with a rollback. Storage failures,
    including statement timeouts, surface as ServerException.
    """
    try:
        yield db
    except SQLAlchemyError as exc:
        logger.error("read_failed operation=%s error=%s", operation, exc.__class__.__name__, exc_info=True)
        raise ServerException(f"Failed to read data for {operation}.") from exc
    finally:
        db.rollback()
