"""Database engine factory for the SQLite-backed location store."""
import os
from pathlib import Path
from typing import Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from utils.config import DATABASE_URL, SQLITE_TIMEOUT_S

# Runtime safety: when TESTING=true, never use the real store.
if os.environ.get("TESTING") == "true":
    url = DATABASE_URL
    if "spotfinder_db" in url or (":memory:" not in url and "test" not in url.lower().split("?")[0]):
        raise RuntimeError(
            "Tests must not run against the real store. Set TESTING_DATABASE_URL to sqlite:///:memory: "
            "(or another test URL containing :memory: or 'test')."
        )


def resolve_database_url(location: Union[str, Path]) -> str:
    """Turn a SQLAlchemy URL or a filesystem path into a SQLAlchemy URL.

    Paths are made absolute so that different spellings of the same file
    resolve to the same key.
    """
    if isinstance(location, str) and "://" in location:
        return location
    return f"sqlite:///{Path(location).expanduser().resolve()}"


def create_db_engine(url: str) -> Engine:
    """Create an engine for ``url``; SQLite gets thread-safe, transactional settings."""
    if "sqlite" not in url:
        return create_engine(url, echo=False)

    in_memory = ":memory:" in url
    engine_kw = {
        "connect_args": {"check_same_thread": False, "timeout": SQLITE_TIMEOUT_S},
        "echo": False,
    }
    # In-memory SQLite: use one connection so all sessions share the same DB.
    if in_memory:
        engine_kw["poolclass"] = StaticPool
    engine = create_engine(url, **engine_kw)

    @event.listens_for(engine, "connect")
    def _sqlite_connect(dbapi_conn, connection_record):
        # Let SQLAlchemy own BEGIN/COMMIT so DDL and SAVEPOINT run inside real transactions.
        dbapi_conn.isolation_level = None
        dbapi_conn.execute("PRAGMA foreign_keys=ON")
        if not in_memory:
            dbapi_conn.execute("PRAGMA journal_mode=WAL")

    @event.listens_for(engine, "begin")
    def _sqlite_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine
