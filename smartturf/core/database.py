"""Database handle for the smart turf booking service."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from smartturf.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


# Execution option marking a session transaction that will write.
WRITE_LOCK_OPTION = "smartturf_write_lock"


def _enable_sqlite_write_locking(engine: Engine) -> None:
    """Make pysqlite open writing transactions with ``BEGIN IMMEDIATE``.

    SQLite has no row locks, so ``SELECT ... FOR UPDATE`` is a no-op there.
    Transactions opened through :func:`begin_write` take the database write
    lock up front, which serializes concurrent writers the same way a row lock
    does on PostgreSQL. Every other transaction starts with a deferred
    ``BEGIN``. The journal runs in WAL mode so open readers never hold up a
    writer's commit.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # pragma: no cover - driver hook
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(connection):  # pragma: no cover - driver hook
        if connection.get_execution_options().get(WRITE_LOCK_OPTION):
            connection.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            connection.exec_driver_sql("BEGIN")


def begin_write(db: Session) -> None:
    """Open the session's next transaction as a writer.

    Must be called before the first statement of the transaction; a session
    that is already inside a transaction keeps the one it has.
    """

    if not db.in_transaction():
        db.connection(execution_options={WRITE_LOCK_OPTION: True})


def build_engine(database_url: str, config: Optional[Settings] = None) -> Engine:
    config = config or default_settings

    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=config.DB_ECHO,
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        _enable_sqlite_write_locking(engine)
        return engine

    return create_engine(
        database_url,
        echo=config.DB_ECHO,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


class Database:
    """Engine plus session factory, constructed once and passed down explicitly."""

    def __init__(self, database_url: Optional[str] = None, config: Optional[Settings] = None):
        config = config or default_settings
        self.url = database_url or config.DATABASE_URL
        self.engine = build_engine(self.url, config)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    def session(self) -> Session:
        return self.session_factory()

    def create_all(self) -> None:
        # Import models so their tables are registered on the metadata.
        import smartturf.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def verify_connection(self) -> None:
        """Ensure the service can connect to the configured database."""

        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.exception("Database connection validation failed")
            raise RuntimeError("Failed to connect to the booking database") from exc

    def dispose(self) -> None:
        self.engine.dispose()


__all__ = ["Base", "Database", "WRITE_LOCK_OPTION", "begin_write", "build_engine"]
